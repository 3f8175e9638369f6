"""Rich display utilities for the confluence-publisher CLI."""

from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from confluence_publisher.macro import Language, Theme
from confluence_publisher.models import Content

console = Console()


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[bold green]✓[/] {escape(message)}")


def print_error(message: str) -> None:
    """Print an error message."""
    console.print(f"[bold red]✗[/] {escape(message)}")


def print_warning(message: str) -> None:
    """Print a warning message."""
    console.print(f"[bold yellow]⚠[/] {escape(message)}")


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[bold blue]ℹ[/] {escape(message)}")


def print_languages() -> None:
    """Print a table of supported languages."""
    table = Table(title="Languages")
    table.add_column("Name", style="cyan")
    table.add_column("Macro value")

    for language in Language:
        table.add_row(language.name, escape(language.value))

    console.print(table)


def print_themes() -> None:
    """Print a table of supported themes."""
    table = Table(title="Themes")
    table.add_column("Name", style="cyan")
    table.add_column("Macro value")

    for theme in Theme:
        table.add_row(theme.name, theme.display_name)

    console.print(table)


def print_page_published(content: Content, source: Path) -> None:
    """Print page creation success."""
    console.print()
    console.print(
        Panel(
            f"[bold green]Page published successfully![/]\n\n"
            f"[bold]Title:[/] {escape(content.title)}\n"
            f"[bold]ID:[/] {escape(content.id or '-')}\n"
            f"[bold]Source:[/] {escape(str(source))}",
            title="[bold]Confluence[/]",
            border_style="green",
        )
    )


def print_attachments_uploaded(page: str, uploaded: list[Content]) -> None:
    """Print a table of uploaded attachments."""
    if not uploaded:
        print_info(f"Nothing uploaded to {page}")
        return

    table = Table(title=f"Attachments on {escape(page)}")
    table.add_column("ID", style="cyan")
    table.add_column("Title")
    table.add_column("Type")

    for content in uploaded:
        table.add_row(escape(content.id or "-"), escape(content.title), content.type.value)

    console.print(table)
