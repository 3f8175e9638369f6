"""Closed option sets for the Confluence code block macro.

See https://confluence.atlassian.com/display/DOC/Code+Block+Macro
"""

from enum import Enum
from pathlib import Path

from confluence_publisher.exceptions import InvalidParameterValueError
from confluence_publisher.macro.escape import normalize_choice, to_upper_camel


class MacroParameter(str, Enum):
    """Options that control the content or format of the macro output.

    Declaration order is the order parameters are written in the markup.
    """

    # true or false, default false
    COLLAPSE = "collapse"
    # number of the first line when line numbers are shown, default 1
    FIRSTLINE = "firstline"
    # syntax highlighting language, see Language
    LANGUAGE = "language"
    # show line numbers to the left of the code, default false
    LINENUMBERS = "linenumbers"
    # colour scheme, see Theme
    THEME = "theme"
    # header row displayed above the code block
    TITLE = "title"

    @property
    def wire_name(self) -> str:
        """Name used in the ac:name attribute."""
        return self.name.replace("_", "/").lower()


class Language(str, Enum):
    """Languages supported by the Confluence code macro."""

    ACTION_SCRIPT_3 = "actionscript3"
    BASH = "bash"
    C_SHARP = "c#"
    COLD_FUSION = "coldfusion"
    CPP = "cpp"
    CSS = "css"
    DELPHI = "delphi"
    DIFF = "diff"
    ERLANG = "erlang"
    GROOVY = "groovy"
    HTML_XML = "xml"
    JAVA = "java"
    JAVA_FX = "javafx"
    JAVA_SCRIPT = "js"
    NONE = "none"  # no syntax highlighting
    PERL = "perl"
    PHP = "php"
    POWER_SHELL = "powershell"
    PYTHON = "python"
    RUBY = "ruby"
    SCALA = "scala"
    SQL = "sql"
    VB = "vb"

    @classmethod
    def from_name(cls, text: str) -> "Language":
        """Resolve a member name (any case) or a wire string to a Language.

        Raises:
            InvalidParameterValueError: If text matches no language
        """
        wire = text.strip().lower()
        if wire in _ALIASES:
            return _ALIASES[wire]
        for language in cls:
            if wire == language.value:
                return language
        key = normalize_choice(text)
        if key in cls.__members__:
            return cls.__members__[key]
        raise InvalidParameterValueError(
            "language", text, f"expected one of {', '.join(m.value for m in cls)}"
        )

    @classmethod
    def for_path(cls, path: Path) -> "Language":
        """Guess the language of a source file from its suffix."""
        return _SUFFIXES.get(path.suffix.lower(), cls.NONE)


# Common spellings that differ from the wire value
_ALIASES: dict[str, Language] = {
    "c++": Language.CPP,
    "html": Language.HTML_XML,
    "javascript": Language.JAVA_SCRIPT,
}

_SUFFIXES: dict[str, Language] = {
    ".as": Language.ACTION_SCRIPT_3,
    ".sh": Language.BASH,
    ".bash": Language.BASH,
    ".cs": Language.C_SHARP,
    ".cfm": Language.COLD_FUSION,
    ".cfc": Language.COLD_FUSION,
    ".c": Language.CPP,
    ".h": Language.CPP,
    ".cc": Language.CPP,
    ".cpp": Language.CPP,
    ".hpp": Language.CPP,
    ".css": Language.CSS,
    ".pas": Language.DELPHI,
    ".diff": Language.DIFF,
    ".patch": Language.DIFF,
    ".erl": Language.ERLANG,
    ".groovy": Language.GROOVY,
    ".gradle": Language.GROOVY,
    ".xml": Language.HTML_XML,
    ".html": Language.HTML_XML,
    ".htm": Language.HTML_XML,
    ".java": Language.JAVA,
    ".fx": Language.JAVA_FX,
    ".js": Language.JAVA_SCRIPT,
    ".pl": Language.PERL,
    ".php": Language.PHP,
    ".ps1": Language.POWER_SHELL,
    ".py": Language.PYTHON,
    ".rb": Language.RUBY,
    ".scala": Language.SCALA,
    ".sql": Language.SQL,
    ".vb": Language.VB,
}


class Theme(str, Enum):
    """Colour schemes for the code block.

    Several are based on the default schemes of popular IDEs. Confluence
    (also known as Default) is used when no theme is set.
    """

    D_JANGO = "DJango"
    EMACS = "Emacs"
    FADE_TO_GREY = "FadeToGrey"
    MIDNIGHT = "Midnight"
    R_DARK = "RDark"
    ECLIPSE = "Eclipse"
    CONFLUENCE = "Confluence"

    @property
    def display_name(self) -> str:
        """Theme name as Confluence expects it, e.g. FadeToGrey."""
        return to_upper_camel(self.name)

    @classmethod
    def from_name(cls, text: str) -> "Theme":
        """Resolve a member name or display name (any case) to a Theme.

        Raises:
            InvalidParameterValueError: If text matches no theme
        """
        key = normalize_choice(text)
        if key in cls.__members__:
            return cls.__members__[key]
        for theme in cls:
            if text.strip().lower() == theme.display_name.lower():
                return theme
        raise InvalidParameterValueError(
            "theme", text, f"expected one of {', '.join(t.display_name for t in cls)}"
        )
