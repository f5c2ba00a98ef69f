"""Markup styles for generated documentation."""

from __future__ import annotations

from wetzel.enums import StyleName
from wetzel.exceptions import UnknownStyleError
from wetzel.styles.asciidoctor import AsciiDoctorStyle
from wetzel.styles.base import DocumentStyle

_STYLES: dict[StyleName, type[AsciiDoctorStyle]] = {
    StyleName.ASCIIDOCTOR: AsciiDoctorStyle,
}


def get_style(name: StyleName | str = StyleName.ASCIIDOCTOR) -> DocumentStyle:
    """Return the style registered under *name*.

    Raises:
        UnknownStyleError: If no style is registered under *name*
    """
    try:
        style_cls = _STYLES[StyleName(name)]
    except (KeyError, ValueError) as e:
        raise UnknownStyleError(f"Unknown style: {name!r}") from e
    return style_cls()


__all__ = [
    "AsciiDoctorStyle",
    "DocumentStyle",
    "get_style",
]
