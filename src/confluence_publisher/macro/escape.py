"""Storage-format wrapping and name conversion utilities."""

import re

CDATA_OPEN = "<![CDATA["
CDATA_CLOSE = "]]>"


def wrap_cdata(text: str) -> str:
    """Wrap text in a CDATA section so Confluence treats it as opaque.

    The text is not escaped. If it contains the ``]]>`` terminator the
    section ends early and the surrounding markup is corrupted.
    """
    return f"{CDATA_OPEN}{text}{CDATA_CLOSE}"


def contains_cdata_terminator(text: str) -> bool:
    """Check whether text would end a CDATA section prematurely."""
    return CDATA_CLOSE in text


def to_upper_camel(name: str) -> str:
    """Convert an underscore separated identifier to UpperCamel words.

    Example:
        to_upper_camel("FADE_TO_GREY")  # "FadeToGrey"
        to_upper_camel("D_JANGO")       # "DJango"
    """
    words = [w for w in name.split("_") if w]
    return "".join(w[0].upper() + w[1:].lower() for w in words)


def normalize_choice(text: str) -> str:
    """Normalize user input for enum lookups (case, spaces, dashes)."""
    return re.sub(r"[\s\-/]+", "_", text.strip()).upper()
