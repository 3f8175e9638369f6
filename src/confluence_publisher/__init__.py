"""confluence-publisher - Confluence code macros and uploads.

Builds Confluence storage format code block macros and publishes pages
and attachments through the Confluence REST API.
"""

from confluence_publisher.exceptions import (
    AttachmentReadError,
    ConfigurationError,
    ConfluenceApiError,
    ConfluenceConnectionError,
    ConfluenceError,
    ConfluencePublisherError,
    IncompleteMacroError,
    InvalidParameterValueError,
    MacroError,
    PageNotFoundError,
    UploadError,
)

__version__ = "0.1.0"

__all__ = [
    # Base exception
    "ConfluencePublisherError",
    # Macro
    "MacroError",
    "IncompleteMacroError",
    "InvalidParameterValueError",
    # Configuration
    "ConfigurationError",
    # Confluence API
    "ConfluenceError",
    "ConfluenceApiError",
    "ConfluenceConnectionError",
    # Upload
    "UploadError",
    "PageNotFoundError",
    "AttachmentReadError",
]
