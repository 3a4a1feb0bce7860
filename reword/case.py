"""
String case conversion utilities.

Every conversion first cleans the input into a name (see ``reword.name``),
then splits it on ASCII punctuation and whitespace and reassembles the
tokens under the target convention. The ``*_with_limit`` variants shorten
the name to a grapheme budget before re-casing.
"""

import string
from collections.abc import Callable, Iterable
from typing import Final

import regex

from reword.name import name, name_with_limit

_ASCII_PUNCTUATION: Final = frozenset(string.punctuation)

_KEBAB_SEPARATOR: Final = "-"
_SNAKE_SEPARATOR: Final = "_"
_NUMERIC_PATTERN: Final = regex.compile(r"\p{N}")


def _is_separator(char: str) -> bool:
    return char in _ASCII_PUNCTUATION or char.isspace()


def _tokens(text: str) -> list[str]:
    """Split cleaned text on punctuation and whitespace, dropping empty tokens."""
    tokens: list[str] = []
    current: list[str] = []
    for char in text:
        if _is_separator(char):
            if current:
                tokens.append("".join(current))
                current = []
        else:
            current.append(char)
    if current:
        tokens.append("".join(current))
    return tokens


def _title_token(token: str, upper: bool) -> str:
    """Re-case a token for camel and pascal case.

    The first character is uppercased when ``upper`` is set. After that a
    character is only uppercased when the previous input character is an
    uppercase letter that itself followed a lowercase one.

    Examples:
        >>> _title_token("HTML", True)
        'Html'
        >>> _title_token("parser", False)
        'parser'
    """
    result: list[str] = []
    prev_is_lowercase = False
    for char in token:
        result.append(char.upper() if upper else char.lower())
        upper = prev_is_lowercase and char.isupper()
        prev_is_lowercase = char.islower()
    return "".join(result)


def _join_humps(tokens: Iterable[str]) -> str:
    """Concatenate camel humps, keeping adjacent numbers apart with ``_``."""
    parts: list[str] = []
    for token in tokens:
        if parts and _NUMERIC_PATTERN.match(parts[-1][-1]) and _NUMERIC_PATTERN.match(token[0]):
            parts.append(_SNAKE_SEPARATOR)
        parts.append(token)
    return "".join(parts)


def _separated(text: str, separator: str, convert: Callable[[str], str]) -> str:
    return separator.join(convert(token) for token in _tokens(text))


def _camel(text: str) -> str:
    return _join_humps(_title_token(token, index != 0) for index, token in enumerate(_tokens(text)))


def _pascal(text: str) -> str:
    return _join_humps(_title_token(token, True) for token in _tokens(text))


def kebab_case(text: str) -> str:
    """Convert text into kebab-case.

    Examples:
        >>> kebab_case("Even Olsson Rogstadkjærnet")
        'even-olsson-rogstadkjærnet'
        >>> kebab_case("string___with_multiple__underscores")
        'string-with-multiple-underscores'
    """
    return _separated(name(text), _KEBAB_SEPARATOR, str.lower)


def kebab_case_with_limit(text: str, limit: int) -> str:
    """Convert text into kebab-case, shortening the name to ``limit`` first.

    Examples:
        >>> kebab_case_with_limit("Even Olsson Rogstadkjærnet", 25)
        'even-o-rogstadkjærnet'
    """
    return _separated(name_with_limit(text, limit), _KEBAB_SEPARATOR, str.lower)


def screaming_kebab_case(text: str) -> str:
    """Convert text into SCREAMING-KEBAB-CASE.

    Examples:
        >>> screaming_kebab_case("Even Olsson Rogstadkjærnet")
        'EVEN-OLSSON-ROGSTADKJÆRNET'
    """
    return _separated(name(text), _KEBAB_SEPARATOR, str.upper)


def screaming_kebab_case_with_limit(text: str, limit: int) -> str:
    """Convert text into SCREAMING-KEBAB-CASE, shortening the name to ``limit`` first."""
    return _separated(name_with_limit(text, limit), _KEBAB_SEPARATOR, str.upper)


def snake_case(text: str) -> str:
    """Convert text into snake_case.

    Examples:
        >>> snake_case("this-is-an_example")
        'this_is_an_example'
        >>> snake_case("JSON_API_response")
        'json_api_response'
    """
    return _separated(name(text), _SNAKE_SEPARATOR, str.lower)


def snake_case_with_limit(text: str, limit: int) -> str:
    """Convert text into snake_case, shortening the name to ``limit`` first."""
    return _separated(name_with_limit(text, limit), _SNAKE_SEPARATOR, str.lower)


def screaming_snake_case(text: str) -> str:
    """Convert text into SCREAMING_SNAKE_CASE (constant case).

    Examples:
        >>> screaming_snake_case("hello world")
        'HELLO_WORLD'
    """
    return _separated(name(text), _SNAKE_SEPARATOR, str.upper)


def screaming_snake_case_with_limit(text: str, limit: int) -> str:
    """Convert text into SCREAMING_SNAKE_CASE, shortening the name to ``limit`` first."""
    return _separated(name_with_limit(text, limit), _SNAKE_SEPARATOR, str.upper)


def camel_case(text: str) -> str:
    """Convert text into camelCase.

    Numbers that would otherwise run into each other are kept apart with
    an underscore.

    Examples:
        >>> camel_case("hello world")
        'helloWorld'
        >>> camel_case("AGPL_3_0_or_later")
        'agpl3_0OrLater'
    """
    return _camel(name(text))


def camel_case_with_limit(text: str, limit: int) -> str:
    """Convert text into camelCase, shortening the name to ``limit`` first.

    Examples:
        >>> camel_case_with_limit("Even Olsson Rogstadkjærnet", 25)
        'evenORogstadkjærnet'
    """
    return _camel(name_with_limit(text, limit))


def pascal_case(text: str) -> str:
    """Convert text into PascalCase.

    Examples:
        >>> pascal_case("HTML_parser")
        'HtmlParser'
    """
    return _pascal(name(text))


def pascal_case_with_limit(text: str, limit: int) -> str:
    """Convert text into PascalCase, shortening the name to ``limit`` first."""
    return _pascal(name_with_limit(text, limit))
