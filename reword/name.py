"""
Name and username builders.

A name is the list of words found in a text, joined with single spaces.
The length-limited variant shortens words to their first grapheme cluster
until the name fits, keeping the first word whole for as long as possible.
"""

from reword.segment import first_grapheme, grapheme_len, is_alphanumeric, words

_NAME_SEPARATOR = " "


def _check_limit(limit: int) -> None:
    if limit < 0:
        raise ValueError(f"limit must be non-negative, got {limit}")


def name(text: str) -> str:
    """Format text as a name.

    Args:
        text: Free-form input text.

    Returns:
        The words of ``text`` separated by single spaces.

    Examples:
        >>> name("(Even),Olsson&Rogstadkjærnet?")
        'Even Olsson Rogstadkjærnet'
    """
    return _NAME_SEPARATOR.join(words(text))


def name_with_limit(text: str, limit: int) -> str:
    """Format text as a name no longer than ``limit`` grapheme clusters.

    Words after the first are reduced to their first grapheme cluster, in
    order, until the name fits. The first word is reduced last. If the
    name still does not fit, the separating spaces are dropped, and as a
    last resort only the first ``limit`` initials are kept.

    Args:
        text: Free-form input text.
        limit: Maximum length in grapheme clusters.

    Returns:
        The shortened name.

    Raises:
        ValueError: If ``limit`` is negative.

    Examples:
        >>> name_with_limit("(Even),Olsson&Rogstadkjærnet?", 25)
        'Even O Rogstadkjærnet'
        >>> name_with_limit("(Even),Olsson&Rogstadkjærnet?", 12)
        'Even O R'
        >>> name_with_limit("(Even),Olsson&Rogstadkjærnet?", 4)
        'EOR'
    """
    _check_limit(limit)

    parts = list(words(text))
    if not parts:
        return ""

    counts = [grapheme_len(part) for part in parts]
    spaces = len(parts) - 1
    count = sum(counts) + spaces

    # Shorten the words following the first one
    for index in range(1, len(parts)):
        if count <= limit:
            break
        count -= counts[index] - 1
        parts[index] = first_grapheme(parts[index])

    # The first word goes last
    if count > limit:
        count -= counts[0] - 1
        parts[0] = first_grapheme(parts[0])

    if count <= limit:
        return _NAME_SEPARATOR.join(parts)
    if count - spaces <= limit:
        return "".join(parts)
    return "".join(parts[:limit])


def _alphanumeric_lowercase(text: str) -> str:
    return "".join(char.lower() for char in text if is_alphanumeric(char))


def username(text: str) -> str:
    """Create a username from text.

    A username only consists of lowercase alphanumeric characters.

    Examples:
        >>> username("Even Olsson Rogstadkjærnet")
        'evenolssonrogstadkjærnet'
    """
    return _alphanumeric_lowercase(name(text))


def username_with_limit(text: str, limit: int) -> str:
    """Create a username from text, shortening the name to fit ``limit`` first.

    Examples:
        >>> username_with_limit("Even Olsson Rogstadkjærnet", 12)
        'evenor'
    """
    return _alphanumeric_lowercase(name_with_limit(text, limit))
