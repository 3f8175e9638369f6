"""confluence-publisher exception hierarchy.

Provides a unified exception hierarchy for the CLI and the library API.
This enables:
- User-friendly error messages in the CLI
- Programmatic error handling in library usage
- Clear distinction between macro construction errors and upload failures

Usage:
    from confluence_publisher.exceptions import IncompleteMacroError, UploadError

    try:
        macro = CodeBlockMacro.builder().with_title("Example").build()
    except IncompleteMacroError as e:
        print(f"Cannot build macro: {e.message}")
"""

from pathlib import Path
from typing import Any


class ConfluencePublisherError(Exception):
    """Base exception for all confluence-publisher errors.

    All package-specific exceptions inherit from this class, allowing
    callers to catch every error with a single except clause.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


# Macro Errors


class MacroError(ConfluencePublisherError):
    """Base class for macro construction errors."""

    pass


class IncompleteMacroError(MacroError):
    """Macro is missing a required part.

    Raised by ``build()`` when no body was set on the builder.
    """

    def __init__(self, macro_name: str, missing: str = "body") -> None:
        self.macro_name = macro_name
        self.missing = missing
        super().__init__(f"Cannot build '{macro_name}' macro: no {missing} was set")


class InvalidParameterValueError(MacroError):
    """Value outside the legal set for a macro parameter.

    Raised when a setter that only accepts a closed enumeration receives
    anything else, or when a required text value is None.
    """

    def __init__(self, parameter: str, value: Any, reason: str) -> None:
        self.parameter = parameter
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid value {value!r} for parameter '{parameter}': {reason}")


# Configuration Errors


class ConfigurationError(ConfluencePublisherError):
    """Error in publisher configuration.

    Raised when config.yaml is invalid, missing required fields,
    or no server URL is available.
    """

    pass


# Confluence API Errors


class ConfluenceError(ConfluencePublisherError):
    """Base class for errors talking to the Confluence server."""

    pass


class ConfluenceApiError(ConfluenceError):
    """Confluence answered with a non-success status code."""

    def __init__(self, method: str, path: str, status_code: int, detail: str = "") -> None:
        self.method = method
        self.path = path
        self.status_code = status_code
        self.detail = detail
        message = f"{method} {path} failed with status {status_code}"
        if detail:
            message += f": {detail[:200]}"
        super().__init__(message)


class ConfluenceConnectionError(ConfluenceError):
    """Confluence server could not be reached."""

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"Cannot connect to Confluence at {url}: {reason}")


# Upload Errors


class UploadError(ConfluencePublisherError):
    """Base class for page and attachment upload failures."""

    pass


class PageNotFoundError(UploadError):
    """Parent page not found.

    Raised when a space key and title don't match any existing page.
    """

    def __init__(self, space: str, title: str) -> None:
        self.space = space
        self.title = title
        super().__init__(f"Page not found: '{title}' in space {space}")


class AttachmentReadError(UploadError):
    """Attachment file could not be read."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Unable to read attachment {path}: {reason}")
