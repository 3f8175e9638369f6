"""Macro command implementation."""

from pathlib import Path

import typer

from confluence_publisher.display import print_error
from confluence_publisher.exceptions import ConfluencePublisherError
from confluence_publisher.publish import CodeBlockOptions, build_code_macro


def macro_command(source: Path, options: CodeBlockOptions) -> None:
    """Print a code block macro for a source file.

    The markup goes to stdout unstyled so it can be piped into other tools.
    """
    try:
        code = source.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        print_error(f"Cannot read {source}: {e}")
        raise SystemExit(1) from None

    try:
        macro = build_code_macro(code, options)
    except ConfluencePublisherError as e:
        print_error(e.message)
        raise SystemExit(1) from None

    typer.echo(macro.to_markup())
