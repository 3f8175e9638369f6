"""Code block macro value and its builder."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import ClassVar

from confluence_publisher.exceptions import IncompleteMacroError, InvalidParameterValueError
from confluence_publisher.macro.escape import CDATA_CLOSE, CDATA_OPEN, wrap_cdata
from confluence_publisher.macro.options import Language, MacroParameter, Theme
from confluence_publisher.macro.parameters import ParameterSet

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CodeBlockMacro:
    """A Confluence Code Block Macro ready to be rendered.

    Frozen because a built macro is a finished value: it can be rendered
    any number of times and shared between callers.

    Example:
        macro = (
            CodeBlockMacro.builder()
            .with_language(Language.JAVA)
            .enable_line_numbers()
            .with_first_line(1)
            .with_body("class A {}")
            .build()
        )
        print(macro.to_markup())
    """

    MACRO_NAME: ClassVar[str] = "code"

    entries: tuple[tuple[MacroParameter, str], ...]
    body: str

    def __post_init__(self) -> None:
        names = [parameter for parameter, _ in self.entries]
        if len(set(names)) != len(names):
            raise InvalidParameterValueError("entries", names, "parameters must not repeat")
        if MacroParameter.FIRSTLINE in names and MacroParameter.LINENUMBERS not in names:
            raise InvalidParameterValueError(
                MacroParameter.FIRSTLINE.wire_name,
                dict(self.entries)[MacroParameter.FIRSTLINE],
                "requires linenumbers",
            )
        if not (self.body.startswith(CDATA_OPEN) and self.body.endswith(CDATA_CLOSE)):
            raise InvalidParameterValueError(
                "body", self.body, "expected a CDATA section, use with_body()"
            )
        order = list(MacroParameter)
        ordered = tuple(sorted(self.entries, key=lambda entry: order.index(entry[0])))
        object.__setattr__(self, "entries", ordered)

    @staticmethod
    def builder() -> CodeBlockMacroBuilder:
        """Start building a new macro."""
        return CodeBlockMacroBuilder()

    @property
    def name(self) -> str:
        return self.MACRO_NAME

    @property
    def parameters(self) -> Mapping[MacroParameter, str]:
        """Read-only view of the parameters in declaration order."""
        return MappingProxyType(dict(self.entries))

    def get(self, parameter: MacroParameter) -> str | None:
        return self.parameters.get(parameter)

    def to_markup(self) -> str:
        """Render this macro in Confluence storage format."""
        from confluence_publisher.macro.serializer import render_macro

        return render_macro(self)


class CodeBlockMacroBuilder:
    """Builder for CodeBlockMacro.

    Parameter setters never overwrite a value that is already set, so
    repeated calls are harmless and call order does not matter, with one
    exception: with_first_line() only takes effect after
    enable_line_numbers(), because Confluence ignores firstline otherwise.
    """

    def __init__(self) -> None:
        self.parameters = ParameterSet()
        self.body: str | None = None

    def with_language(self, language: Language) -> CodeBlockMacroBuilder:
        """Set the highlighting language.

        ``with_language(Language.HTML_XML)`` renders as
        ``<ac:parameter ac:name="language">xml</ac:parameter>``.
        """
        if not isinstance(language, Language):
            raise InvalidParameterValueError(
                MacroParameter.LANGUAGE.wire_name, language, "expected a Language member"
            )
        self.parameters.set(MacroParameter.LANGUAGE, language.value)
        return self

    def enable_collapse(self) -> CodeBlockMacroBuilder:
        """Make the code block collapsible."""
        self.parameters.set(MacroParameter.COLLAPSE, "true")
        return self

    def enable_line_numbers(self) -> CodeBlockMacroBuilder:
        """Show line numbers to the left of the code."""
        self.parameters.set(MacroParameter.LINENUMBERS, "true")
        return self

    def with_first_line(self, first: int) -> CodeBlockMacroBuilder:
        """Set the number of the first line.

        Does nothing unless line numbers are already enabled.
        """
        if isinstance(first, bool) or not isinstance(first, int):
            raise InvalidParameterValueError(
                MacroParameter.FIRSTLINE.wire_name, first, "expected an integer"
            )
        if not self.parameters.has(MacroParameter.LINENUMBERS):
            logger.debug("Ignoring firstline=%d: line numbers are not enabled", first)
            return self
        self.parameters.set(MacroParameter.FIRSTLINE, str(first))
        return self

    def with_theme(self, theme: Theme) -> CodeBlockMacroBuilder:
        """Set the colour scheme, e.g. Theme.ECLIPSE renders as "Eclipse"."""
        if not isinstance(theme, Theme):
            raise InvalidParameterValueError(
                MacroParameter.THEME.wire_name, theme, "expected a Theme member"
            )
        self.parameters.set(MacroParameter.THEME, theme.display_name)
        return self

    def with_title(self, title: str) -> CodeBlockMacroBuilder:
        """Set the title shown in a header row above the code."""
        if title is None:
            raise InvalidParameterValueError(
                MacroParameter.TITLE.wire_name, title, "title must not be None"
            )
        self.parameters.set(MacroParameter.TITLE, title)
        return self

    def with_body(self, code: str) -> CodeBlockMacroBuilder:
        """Set the code to display, wrapped in a CDATA section."""
        if code is None:
            raise InvalidParameterValueError("body", code, "code must not be None")
        self.body = wrap_cdata(code)
        return self

    def build(self) -> CodeBlockMacro:
        """Freeze the current state into a CodeBlockMacro.

        Raises:
            IncompleteMacroError: If with_body() was never called
        """
        if self.body is None:
            raise IncompleteMacroError(CodeBlockMacro.MACRO_NAME)
        return CodeBlockMacro(entries=tuple(self.parameters.entries()), body=self.body)
