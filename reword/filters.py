"""
Jinja2 filters for name and case formatting.

Every style is registered as a filter that takes an optional grapheme
limit, so templates can write ``{{ title | kebab_case }}`` or
``{{ title | kebab_case(20) }}``.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

from jinja2 import BaseLoader, Environment, FileSystemLoader, StrictUndefined, select_autoescape

from reword.join import and_join, or_join
from reword.styles import STYLES, Style


def _style_filter(style: Style) -> Callable[..., str]:
    """Wrap a style as a Jinja2 filter accepting an optional limit."""

    def _filter(value: Any, limit: int | None = None) -> str:
        return style(str(value), limit)

    _filter.__name__ = style.name.replace("-", "_")
    _filter.__doc__ = f"Format the value with the {style.name!r} style."
    return _filter


def _join_filter(join: Callable[[Any], str]) -> Callable[[Any], str]:
    def _filter(values: Any) -> str:
        return join(str(value) for value in values)

    _filter.__name__ = join.__name__
    return _filter


# Filter names follow the function names of the Python API
_STYLE_FILTER_NAMES = {
    "name": "name",
    "username": "username",
    "camel": "camel_case",
    "pascal": "pascal_case",
    "snake": "snake_case",
    "screaming-snake": "screaming_snake_case",
    "kebab": "kebab_case",
    "screaming-kebab": "screaming_kebab_case",
}

# Register filters that will be available in Jinja templates
FILTERS: dict[str, Callable[..., str]] = {
    filter_name: _style_filter(STYLES[style_name]) for style_name, filter_name in _STYLE_FILTER_NAMES.items()
}
FILTERS["and_join"] = _join_filter(and_join)
FILTERS["or_join"] = _join_filter(or_join)


def create_environment(template_dir: Path | None = None, *, strict: bool = True) -> Environment:
    """Create a Jinja2 environment with the formatting filters registered.

    Args:
        template_dir: Directory to load templates from. Without it only
            string templates can be rendered.
        strict: Fail on undefined template variables instead of rendering
            them as empty strings.

    Returns:
        The configured environment.
    """
    loader: BaseLoader = FileSystemLoader(str(template_dir)) if template_dir is not None else BaseLoader()
    env_options: dict[str, Any] = {
        "loader": loader,
        "autoescape": select_autoescape(["html", "xml"], default_for_string=False),
        "trim_blocks": True,
        "lstrip_blocks": True,
        "keep_trailing_newline": True,
    }
    if strict:
        env_options["undefined"] = StrictUndefined

    env = Environment(**env_options)
    env.filters.update(FILTERS)
    return env


def render_string(source: str, **context: Any) -> str:
    """Render a template string with the formatting filters available.

    Examples:
        >>> render_string("{{ title | snake_case }}", title="Hello World")
        'hello_world'
    """
    return create_environment().from_string(source).render(**context)
