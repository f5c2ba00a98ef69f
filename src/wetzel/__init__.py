"""AsciiDoc styling for generated schema documentation."""

from wetzel.enums import AutoLinkOption, StyleName
from wetzel.models import SchemaDescriptor
from wetzel.styles import AsciiDoctorStyle, DocumentStyle, get_style

__all__ = [
    "AsciiDoctorStyle",
    "AutoLinkOption",
    "DocumentStyle",
    "SchemaDescriptor",
    "StyleName",
    "get_style",
]
