"""confluence-publisher CLI commands.

Each command module contains the business logic for a CLI command.
The cli.py module handles Typer decorators and argument parsing,
then delegates to these command functions.
"""

from confluence_publisher.commands.attach import attach_command
from confluence_publisher.commands.list import list_command
from confluence_publisher.commands.macro import macro_command
from confluence_publisher.commands.publish import publish_command

__all__ = [
    "attach_command",
    "list_command",
    "macro_command",
    "publish_command",
]
