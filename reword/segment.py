"""
Unicode segmentation helpers.

This module splits text into words following the Unicode default word
boundaries (UAX #29) and into extended grapheme clusters. Everything else
in the package builds on these two primitives.
"""

from collections.abc import Iterable, Iterator
from typing import Final

import regex

# Zero-width split on default Unicode word boundaries
_WORD_BOUNDARY_PATTERN: Final = regex.compile(r"\b", flags=regex.V1 | regex.WORD)
_GRAPHEME_PATTERN: Final = regex.compile(r"\X")
_ALPHANUMERIC_PATTERN: Final = regex.compile(r"[\p{Alphabetic}\p{N}]")


def is_alphanumeric(char: str) -> bool:
    """Check if a character is alphabetic or numeric in the Unicode sense.

    Unlike ``str.isalnum`` this includes combining vowel signs and other
    marks with the Alphabetic property.
    """
    return _ALPHANUMERIC_PATTERN.match(char) is not None


def _is_word(segment: str) -> bool:
    """Check if a segment between two word boundaries is a word."""
    return _ALPHANUMERIC_PATTERN.search(segment) is not None


class _Words:
    """Restartable view over the words of a text."""

    __slots__ = ("_text",)

    def __init__(self, text: str) -> None:
        self._text = text

    def __iter__(self) -> Iterator[str]:
        return (segment for segment in _WORD_BOUNDARY_PATTERN.splititer(self._text) if _is_word(segment))

    def __repr__(self) -> str:
        return f"words({self._text!r})"


def words(text: str) -> Iterable[str]:
    """Split text into Unicode words.

    Punctuation, symbols and whitespace separate words and are never part
    of the result. The returned iterable is lazy and can be iterated more
    than once.

    Args:
        text: Text to segment.

    Returns:
        Iterable over the words of ``text``.

    Examples:
        >>> list(words("(Even), Olsson&Rogstadkjærnet?"))
        ['Even', 'Olsson', 'Rogstadkjærnet']
        >>> list(words("!@#$"))
        []
    """
    return _Words(text)


def graphemes(text: str) -> list[str]:
    """Split text into extended grapheme clusters."""
    return _GRAPHEME_PATTERN.findall(text)


def grapheme_len(text: str) -> int:
    """Count user-perceived characters in text."""
    return sum(1 for _ in _GRAPHEME_PATTERN.finditer(text))


def first_grapheme(text: str) -> str:
    """Return the first grapheme cluster of text, or an empty string."""
    match = _GRAPHEME_PATTERN.match(text)
    return match.group() if match else ""
