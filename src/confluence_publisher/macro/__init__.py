"""Confluence macro generation.

This module provides structured macro generation with:
- Closed option sets for parameters, languages and themes
- A first-write-wins parameter set
- A builder producing immutable macro values
- Rendering to Confluence storage format
"""

from confluence_publisher.macro.builders import CodeBlockMacro, CodeBlockMacroBuilder
from confluence_publisher.macro.escape import (
    contains_cdata_terminator,
    to_upper_camel,
    wrap_cdata,
)
from confluence_publisher.macro.options import Language, MacroParameter, Theme
from confluence_publisher.macro.parameters import ParameterSet
from confluence_publisher.macro.serializer import render_macro

__all__ = [
    # Builders
    "CodeBlockMacro",
    "CodeBlockMacroBuilder",
    # Options
    "MacroParameter",
    "Language",
    "Theme",
    "ParameterSet",
    # Rendering
    "render_macro",
    # Escape utilities
    "wrap_cdata",
    "contains_cdata_terminator",
    "to_upper_camel",
]
