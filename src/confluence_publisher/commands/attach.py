"""Attach command implementation."""

from pathlib import Path

from confluence_publisher.client import ConfluenceClient
from confluence_publisher.config import PublisherConfig
from confluence_publisher.display import print_attachments_uploaded, print_error, print_success
from confluence_publisher.exceptions import ConfluencePublisherError
from confluence_publisher.models import PageDescriptor
from confluence_publisher.publish import add_attachments, upload_attachments


def attach_command(
    config: PublisherConfig,
    page: PageDescriptor,
    files: list[Path],
    comment: str = "",
    multipart: bool = False,
) -> None:
    """Attach files to an existing page.

    Args:
        config: Connection settings
        page: Target page
        files: Files to upload
        comment: Attachment comment (multipart uploads only)
        multipart: Use the attachment endpoint instead of posting content
    """
    try:
        with ConfluenceClient(config) as client:
            if multipart:
                uploaded = upload_attachments(client, page, files, comment=comment)
            else:
                uploaded = add_attachments(client, page, files)
    except ConfluencePublisherError as e:
        print_error(e.message)
        raise SystemExit(1) from None

    print_success(f"Uploaded {len(files)} attachment(s) to {page}")
    print_attachments_uploaded(str(page), uploaded)
