"""Enumerations shared between styles and their callers."""

from enum import Enum


class AutoLinkOption(str, Enum):
    """How type names appearing in prose are turned into links."""

    OFF = "off"  # Never link
    CHECK = "check"  # Only link names that are already code-styled
    AGGRESSIVE = "aggressive"  # Link bare names bounded by spaces or dots


class StyleName(str, Enum):
    """Available markup styles."""

    ASCIIDOCTOR = "asciidoctor"
