"""Rendering of macros into Confluence storage format."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from confluence_publisher.macro.escape import CDATA_CLOSE, CDATA_OPEN, contains_cdata_terminator

if TYPE_CHECKING:
    from confluence_publisher.macro.builders import CodeBlockMacro

logger = logging.getLogger(__name__)


def render_macro(macro: CodeBlockMacro) -> str:
    """Render a macro as a single unbroken ac:structured-macro element.

    Parameters are written in declaration order with their values verbatim,
    followed by the plain-text body.

    Args:
        macro: A built macro

    Returns:
        Storage format markup
    """
    if _body_is_truncated(macro.body):
        # Not escaped: splitting the CDATA section would change output for every caller.
        logger.warning(
            "Body of '%s' macro contains %r; the rendered markup will be corrupted",
            macro.name,
            CDATA_CLOSE,
        )

    parts = [f'<ac:structured-macro ac:name="{macro.name}">']
    for parameter, value in macro.entries:
        parts.append(f'<ac:parameter ac:name="{parameter.wire_name}">{value}</ac:parameter>')
    parts.append(f"<ac:plain-text-body>{macro.body}</ac:plain-text-body>")
    parts.append("</ac:structured-macro>")
    return "".join(parts)


def _body_is_truncated(body: str) -> bool:
    """Check whether the CDATA terminator appears before the end of the body."""
    if not body.startswith(CDATA_OPEN) or not body.endswith(CDATA_CLOSE):
        return False
    inner = body[len(CDATA_OPEN) : -len(CDATA_CLOSE)]
    return contains_cdata_terminator(inner)
