"""List command implementation."""

from confluence_publisher.display import print_error, print_languages, print_themes


def list_command(what: str) -> None:
    """List supported languages or themes.

    This function contains the business logic for the list command.
    """
    if what == "languages":
        print_languages()
    elif what == "themes":
        print_themes()
    else:
        print_error(f"Unknown list '{what}'. Use 'languages' or 'themes'.")
        raise SystemExit(1)
