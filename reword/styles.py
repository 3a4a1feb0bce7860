"""
Style registry.

Maps a style name such as ``"kebab"`` or ``"screaming-snake"`` to the pair
of formatters implementing it, so callers can pick a format at runtime.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Final

from reword.case import (
    camel_case,
    camel_case_with_limit,
    kebab_case,
    kebab_case_with_limit,
    pascal_case,
    pascal_case_with_limit,
    screaming_kebab_case,
    screaming_kebab_case_with_limit,
    screaming_snake_case,
    screaming_snake_case_with_limit,
    snake_case,
    snake_case_with_limit,
)
from reword.name import name, name_with_limit, username, username_with_limit


@dataclass(frozen=True)
class Style:
    """A named output format."""

    name: str
    format: Callable[[str], str]
    format_with_limit: Callable[[str, int], str]

    def __call__(self, text: str, limit: int | None = None) -> str:
        """Format text, shortening it to ``limit`` grapheme clusters when given."""
        if limit is None:
            return self.format(text)
        return self.format_with_limit(text, limit)


class UnknownStyleError(KeyError):
    """Raised when a style name is not registered."""

    def __init__(self, style: str) -> None:
        self.style = style
        self.available = sorted(STYLES)
        super().__init__(style)

    def __str__(self) -> str:
        return f"Unknown style {self.style!r}, expected one of: {', '.join(self.available)}"


STYLES: Final[dict[str, Style]] = {
    style.name: style
    for style in (
        Style("name", name, name_with_limit),
        Style("username", username, username_with_limit),
        Style("camel", camel_case, camel_case_with_limit),
        Style("pascal", pascal_case, pascal_case_with_limit),
        Style("snake", snake_case, snake_case_with_limit),
        Style("screaming-snake", screaming_snake_case, screaming_snake_case_with_limit),
        Style("kebab", kebab_case, kebab_case_with_limit),
        Style("screaming-kebab", screaming_kebab_case, screaming_kebab_case_with_limit),
    )
}


def _normalize_style_name(style: str) -> str:
    return style.strip().lower().replace("_", "-")


def get_style(style: str) -> Style:
    """Look up a style by name.

    Underscores and dashes are interchangeable and the lookup ignores case,
    so ``"SCREAMING_SNAKE"`` finds ``"screaming-snake"``.

    Raises:
        UnknownStyleError: If no style has that name.
    """
    try:
        return STYLES[_normalize_style_name(style)]
    except KeyError:
        raise UnknownStyleError(style) from None


def format_text(text: str, style: str, limit: int | None = None) -> str:
    """Format text with the named style.

    Examples:
        >>> format_text("Even Olsson Rogstadkjærnet", "kebab", 25)
        'even-o-rogstadkjærnet'
    """
    return get_style(style)(text, limit)
