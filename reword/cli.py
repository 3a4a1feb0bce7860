#!/usr/bin/env python3
"""Command-line interface for reword."""

import argparse
import sys
import traceback
from collections.abc import Iterable
from pathlib import Path

from jinja2 import TemplateError

from reword.filters import create_environment
from reword.join import and_join, or_join
from reword.segment import grapheme_len
from reword.styles import STYLES, UnknownStyleError, get_style

# Exit codes for better error reporting
EXIT_SUCCESS = 0
EXIT_FILE_NOT_FOUND = 1
EXIT_TEMPLATE_ERROR = 2
EXIT_FORMAT_ERROR = 3

_EXAMPLE_TEXT = "Hello World Example"
_JOINERS = {"and": and_join, "or": or_join}


def _non_negative_int(value: str) -> int:
    """Parse a grapheme limit from the command line."""
    try:
        limit = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid limit: {value!r}") from None
    if limit < 0:
        raise argparse.ArgumentTypeError(f"limit must be non-negative, got {limit}")
    return limit


def _key_value(value: str) -> tuple[str, str]:
    """Parse a KEY=VALUE template variable."""
    key, sep, val = value.partition("=")
    if not sep or not key:
        raise argparse.ArgumentTypeError(f"expected KEY=VALUE, got {value!r}")
    return key, val


def parse_command_line_args(args: list[str] | None = None) -> argparse.Namespace:
    """Create and configure the command line argument parser."""
    parser = argparse.ArgumentParser(
        prog="reword",
        description="Format names, identifiers and lists from free-form text",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s format kebab "Even Olsson Rogstadkjærnet"
  %(prog)s format camel --limit 12 "Even Olsson Rogstadkjærnet"
  %(prog)s join and apples pears plums
  %(prog)s render template.j2 --var title="Hello World"
        """,
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose output",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND", required=True)

    format_parser = subparsers.add_parser("format", help="Format text with a style")
    format_parser.add_argument(
        "style",
        help=f"Output style, one of: {', '.join(STYLES)}",
        metavar="STYLE",
    )
    format_parser.add_argument(
        "text",
        nargs="*",
        help="Text to format (default: read lines from stdin)",
        metavar="TEXT",
    )
    format_parser.add_argument(
        "--limit",
        "-l",
        type=_non_negative_int,
        default=None,
        help="Maximum length in user-perceived characters (default: unlimited)",
    )

    join_parser = subparsers.add_parser("join", help="Join items into a sentence")
    join_parser.add_argument("conjunction", choices=sorted(_JOINERS), help="Word placed before the last item")
    join_parser.add_argument("items", nargs="+", help="Items to join", metavar="ITEM")

    subparsers.add_parser("styles", help="List the available styles")

    render_parser = subparsers.add_parser("render", help="Render a Jinja2 template with formatting filters")
    render_parser.add_argument(
        "template_file",
        type=Path,
        help="Path to the template file",
        metavar="TEMPLATE_FILE",
    )
    render_parser.add_argument(
        "--var",
        "-V",
        type=_key_value,
        action="append",
        default=[],
        help="Template variable as KEY=VALUE (repeatable)",
        dest="variables",
    )
    render_parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Write the result to a file instead of stdout",
        dest="output_file",
    )

    # Texts may follow format options, which leaves them unparsed
    parsed_args, extras = parser.parse_known_args(args)
    if extras:
        if parsed_args.command != "format" or any(extra.startswith("-") for extra in extras):
            parser.error(f"unrecognized arguments: {' '.join(extras)}")
        parsed_args.text.extend(extras)

    if parsed_args.command == "format":
        try:
            get_style(parsed_args.style)
        except UnknownStyleError as e:
            parser.error(str(e))

    return parsed_args


def _read_stdin_lines() -> Iterable[str]:
    for line in sys.stdin:
        yield line.rstrip("\r\n")


def run_format(*, style: str, texts: Iterable[str], limit: int | None, verbose: bool) -> None:
    """Print each text formatted with the style, one per line."""
    formatter = get_style(style)
    for text in texts:
        result = formatter(text, limit)
        if verbose:
            print(
                f"{formatter.name}: {grapheme_len(text)} -> {grapheme_len(result)} graphemes"
                + (f" (limit {limit})" if limit is not None else ""),
                file=sys.stderr,
            )
        print(result)


def run_join(*, conjunction: str, items: list[str]) -> None:
    """Print the items joined into a sentence."""
    print(_JOINERS[conjunction](items))


def print_styles() -> None:
    """Print every style name with an example rendering."""
    width = max(len(style_name) for style_name in STYLES)
    for style_name, style in STYLES.items():
        print(f"{style_name:<{width}}  {style(_EXAMPLE_TEXT)}")


def render_template_file(
    *,
    template_file: Path,
    variables: list[tuple[str, str]],
    output_file: Path | None,
    verbose: bool,
) -> None:
    """Render a template file and write the result."""
    if not template_file.is_file():
        raise FileNotFoundError(template_file)

    env = create_environment(template_file.parent)
    template = env.get_template(template_file.name)
    rendered = template.render(**dict(variables))

    if output_file is None:
        sys.stdout.write(rendered)
        return

    output_file.parent.mkdir(parents=True, exist_ok=True)
    output_file.write_text(rendered, encoding="utf-8")
    if verbose:
        print(f"Rendered {template_file} to {output_file}", file=sys.stderr)


def main(args: list[str] | None = None) -> int:
    """Run the reword command line."""
    parsed_args = parse_command_line_args(args)

    try:
        if parsed_args.command == "format":
            texts = parsed_args.text if parsed_args.text else _read_stdin_lines()
            run_format(
                style=parsed_args.style,
                texts=texts,
                limit=parsed_args.limit,
                verbose=parsed_args.verbose,
            )
        elif parsed_args.command == "join":
            run_join(conjunction=parsed_args.conjunction, items=parsed_args.items)
        elif parsed_args.command == "styles":
            print_styles()
        elif parsed_args.command == "render":
            render_template_file(
                template_file=parsed_args.template_file,
                variables=parsed_args.variables,
                output_file=parsed_args.output_file,
                verbose=parsed_args.verbose,
            )

        return EXIT_SUCCESS

    except FileNotFoundError as e:
        print(f"Error: File not found: {e.filename or e}", file=sys.stderr)
        return EXIT_FILE_NOT_FOUND
    except TemplateError as e:
        print(f"Error: Template error: {e}", file=sys.stderr)
        if parsed_args.verbose:
            traceback.print_exc()
        return EXIT_TEMPLATE_ERROR
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        if parsed_args.verbose:
            traceback.print_exc()
        return EXIT_FORMAT_ERROR


if __name__ == "__main__":
    sys.exit(main())
