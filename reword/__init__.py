"""
reword

Pure text-formatting helpers: clean names, length-limited abbreviations,
identifier case conversion, usernames and natural-language list joining.
"""

from .case import (
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
from .filters import FILTERS, create_environment, render_string
from .join import and_join, or_join
from .name import name, name_with_limit, username, username_with_limit
from .segment import grapheme_len, graphemes, words
from .styles import STYLES, Style, UnknownStyleError, format_text, get_style

__version__ = "1.0.0"

__all__ = [
    "FILTERS",
    "STYLES",
    "Style",
    "UnknownStyleError",
    "and_join",
    "camel_case",
    "camel_case_with_limit",
    "create_environment",
    "format_text",
    "get_style",
    "grapheme_len",
    "graphemes",
    "kebab_case",
    "kebab_case_with_limit",
    "name",
    "name_with_limit",
    "or_join",
    "pascal_case",
    "pascal_case_with_limit",
    "render_string",
    "screaming_kebab_case",
    "screaming_kebab_case_with_limit",
    "screaming_snake_case",
    "screaming_snake_case_with_limit",
    "snake_case",
    "snake_case_with_limit",
    "username",
    "username_with_limit",
    "words",
]
