"""Natural-language list joining."""

from collections.abc import Iterable

_LIST_SEPARATOR = ", "


def _join(items: Iterable[str], last_separator: str) -> str:
    iterator = iter(items)
    first = next(iterator, None)
    if first is None:
        return ""

    parts = [first]
    pending = next(iterator, None)
    if pending is None:
        return first

    # Hold back one item so the last one can get the conjunction
    for item in iterator:
        parts.append(_LIST_SEPARATOR)
        parts.append(pending)
        pending = item

    parts.append(last_separator)
    parts.append(pending)
    return "".join(parts)


def or_join(items: Iterable[str]) -> str:
    """Join items with an "or" before the last one.

    Examples:
        >>> or_join(["a", "b"])
        'a or b'
        >>> or_join(["a", "b", "c"])
        'a, b or c'
    """
    return _join(items, " or ")


def and_join(items: Iterable[str]) -> str:
    """Join items with an "and" before the last one.

    Examples:
        >>> and_join(["a", "b"])
        'a and b'
        >>> and_join(["a", "b", "c"])
        'a, b and c'
    """
    return _join(items, " and ")
