"""Publish command implementation."""

from pathlib import Path

from confluence_publisher.client import ConfluenceClient
from confluence_publisher.config import PublisherConfig
from confluence_publisher.display import print_error, print_page_published
from confluence_publisher.exceptions import ConfluencePublisherError
from confluence_publisher.models import PageDescriptor
from confluence_publisher.publish import CodeBlockOptions, publish_code_page


def publish_command(
    config: PublisherConfig,
    parent: PageDescriptor,
    source: Path,
    options: CodeBlockOptions,
    title: str | None = None,
    intro: str | None = None,
) -> None:
    """Publish a source file as a child page of parent.

    This function contains the business logic for the publish command.
    """
    try:
        with ConfluenceClient(config) as client:
            content = publish_code_page(
                client, parent, source, options, title=title, intro=intro
            )
    except ConfluencePublisherError as e:
        print_error(e.message)
        raise SystemExit(1) from None

    print_page_published(content, source)
