"""confluence-publisher CLI - Main entry point.

Commands:
- macro: Print a code block macro for a file
- attach: Attach files to an existing page
- publish: Publish a file as a code page
- list: List supported languages or themes
"""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer

from confluence_publisher import __version__
from confluence_publisher.commands import (
    attach_command,
    list_command,
    macro_command,
    publish_command,
)
from confluence_publisher.config import PublisherConfig, load_config, merge_cli_overrides
from confluence_publisher.display import print_error
from confluence_publisher.exceptions import ConfigurationError, InvalidParameterValueError
from confluence_publisher.macro import Language, Theme
from confluence_publisher.models import PageDescriptor
from confluence_publisher.publish import CodeBlockOptions

app = typer.Typer(
    help="confluence-publisher - Code macros and attachments for Confluence.",
    no_args_is_help=True,
)

LanguageOption = Annotated[
    Optional[str],
    typer.Option("--language", "-l", help="Highlighting language (e.g. java, python, c#)"),
]
ThemeOption = Annotated[
    Optional[str],
    typer.Option("--theme", help="Colour theme (e.g. Eclipse, FadeToGrey)"),
]
TitleOption = Annotated[
    Optional[str], typer.Option("--title", "-t", help="Title shown above the code")
]
CollapseOption = Annotated[bool, typer.Option("--collapse", help="Make the block collapsible")]
LineNumbersOption = Annotated[
    bool, typer.Option("--line-numbers", "-n", help="Show line numbers")
]
FirstLineOption = Annotated[
    Optional[int],
    typer.Option("--first-line", help="First line number (requires --line-numbers)"),
]
UrlOption = Annotated[
    Optional[str], typer.Option("--url", help="Confluence base URL (overrides config)")
]
UserOption = Annotated[
    Optional[str], typer.Option("--user", "-u", help="Confluence user (overrides config)")
]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"confluence-publisher {__version__}")
        raise typer.Exit()


def _code_options(
    language: str | None,
    theme: str | None,
    title: str | None,
    collapse: bool,
    line_numbers: bool,
    first_line: int | None,
) -> CodeBlockOptions:
    """Turn CLI strings into macro options."""
    try:
        return CodeBlockOptions(
            language=Language.from_name(language) if language else None,
            theme=Theme.from_name(theme) if theme else None,
            title=title,
            collapse=collapse,
            line_numbers=line_numbers,
            first_line=first_line,
        )
    except InvalidParameterValueError as e:
        raise typer.BadParameter(e.reason, param_hint=f"--{e.parameter}") from None


def _load_config(url: str | None, user: str | None) -> PublisherConfig:
    try:
        config = load_config()
    except ConfigurationError as e:
        print_error(e.message)
        raise SystemExit(1) from None
    return merge_cli_overrides(config, url=url, username=user)


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = False,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Log requests and macro decisions")
    ] = False,
) -> None:
    """confluence-publisher - Code macros and attachments for Confluence."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )


@app.command()
def macro(
    source: Annotated[Path, typer.Argument(help="File whose content becomes the macro body")],
    language: LanguageOption = None,
    theme: ThemeOption = None,
    title: TitleOption = None,
    collapse: CollapseOption = False,
    line_numbers: LineNumbersOption = False,
    first_line: FirstLineOption = None,
) -> None:
    """Print a code block macro in storage format.

    Examples:
        confluence-publisher macro Main.java -l java -n --first-line 10
        confluence-publisher macro query.sql --theme Eclipse --title "Report query"
    """
    options = _code_options(language, theme, title, collapse, line_numbers, first_line)
    macro_command(source, options)


@app.command()
def attach(
    files: Annotated[list[Path], typer.Argument(help="Files to attach")],
    space: Annotated[str, typer.Option("--space", "-s", help="Space key of the page")],
    page: Annotated[str, typer.Option("--page", "-p", help="Title of the page")],
    comment: Annotated[
        str, typer.Option("--comment", "-c", help="Attachment comment (with --multipart)")
    ] = "",
    multipart: Annotated[
        bool, typer.Option("--multipart", help="Upload through the attachment endpoint")
    ] = False,
    url: UrlOption = None,
    user: UserOption = None,
) -> None:
    """Attach files to an existing page.

    Examples:
        confluence-publisher attach build.log --space DOC --page "Release 1.2"
        confluence-publisher attach report.pdf -s DOC -p Reports --multipart
    """
    config = _load_config(url, user)
    attach_command(config, PageDescriptor(space=space, title=page), files, comment, multipart)


@app.command()
def publish(
    source: Annotated[Path, typer.Argument(help="File to publish")],
    space: Annotated[str, typer.Option("--space", "-s", help="Space key of the parent page")],
    parent: Annotated[str, typer.Option("--parent", "-p", help="Title of the parent page")],
    page_title: Annotated[
        Optional[str], typer.Option("--page-title", help="Title of the new page (default: file name)")
    ] = None,
    intro: Annotated[
        Optional[str], typer.Option("--intro", help="Paragraph shown above the code")
    ] = None,
    language: LanguageOption = None,
    theme: ThemeOption = None,
    title: TitleOption = None,
    collapse: CollapseOption = False,
    line_numbers: LineNumbersOption = False,
    first_line: FirstLineOption = None,
    url: UrlOption = None,
    user: UserOption = None,
) -> None:
    """Publish a file as a new page containing a code block.

    Examples:
        confluence-publisher publish schema.sql -s DOC -p "Database" -n
        confluence-publisher publish app.py -s DOC -p Code --page-title "Entry point"
    """
    options = _code_options(language, theme, title, collapse, line_numbers, first_line)
    config = _load_config(url, user)
    publish_command(
        config,
        PageDescriptor(space=space, title=parent),
        source,
        options,
        title=page_title,
        intro=intro,
    )


@app.command("list")
def list_cmd(
    what: Annotated[str, typer.Argument(help="What to list: languages or themes")] = "languages",
) -> None:
    """List supported languages or themes.

    Examples:
        confluence-publisher list
        confluence-publisher list themes
    """
    list_command(what)


if __name__ == "__main__":
    app()
