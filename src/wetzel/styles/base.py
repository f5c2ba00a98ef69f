"""Base abstractions for markup styles."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from wetzel.enums import AutoLinkOption, StyleName
    from wetzel.models import SchemaDescriptor


class DocumentStyle(Protocol):
    """Protocol for markup styles.

    A style turns primitive values into markup fragments. The documentation
    generator walks the schema and concatenates the fragments in whatever
    order it needs; a style keeps no state between calls.
    """

    name: StyleName
    required_icon: str

    def header(self, level: int) -> str:
        """Return the heading marker for *level*."""
        ...

    def section(
        self, schema: SchemaDescriptor | Mapping[str, Any], level: int, suppress_warnings: bool
    ) -> str:
        """Return the fragment opening a section for *schema*."""
        ...

    def bullet_item(self, item: str, indentation_level: int | None = 0) -> str:
        """Return *item* as a bullet line."""
        ...

    def begin_table(self, title: str, columns: Iterable[Any]) -> str:
        """Return a table caption and header row."""
        ...

    def add_table_row(self, cells: Iterable[Any]) -> str:
        """Return a table row."""
        ...

    def end_table(self) -> str:
        """Return the table terminator."""
        ...

    def bold(self, string: str | None) -> str:
        """Return *string* in bold, or an empty string for empty input."""
        ...

    def code(self, value: Any) -> str:
        """Return *value* styled as code.

        Args:
            value: A string, number, boolean or array literal; None gives ""

        Returns:
            Code-styled markup, or an empty string when nothing is rendered
        """
        ...

    def code_typed(self, value: Any, type_name: str | None) -> str:
        """Return *value* styled as code, quoted when *type_name* is "string"."""
        ...

    def anchor_name(self, string: str) -> str:
        """Return the anchor used as a link target for *string*."""
        ...

    def link(self, display_text: str | None, target: str | None) -> str:
        """Hyperlink *display_text* to *target*.

        Returns:
            The link markup, the bare text when *target* is empty, or an
            empty string when *display_text* is empty
        """
        ...

    def toc_link(self, display_text: str | None, type_name: str | None) -> str | None:
        """Link *display_text* to the section of *type_name* for a table of contents."""
        ...

    def link_type(
        self,
        string: str | None,
        type_name: str | None,
        auto_link: AutoLinkOption | str | None = None,
    ) -> str | None:
        """Link the first mention of *type_name* within *string*.

        Args:
            string: Prose that might reference the type
            type_name: The type whose mention should be linked
            auto_link: Auto-link mode; None means off

        Returns:
            The prose, with at most one mention replaced by a link
        """
        ...

    def type(self, string: str | None) -> str:
        """Format a type heading."""
        ...

    def type_value(self, value: Any) -> str:
        """Format a type value."""
        ...

    def properties_summary(self, string: str | None) -> str:
        """Format the heading of a properties summary."""
        ...

    def property_name_summary(self, string: str | None) -> str:
        """Format a property name in a summary table."""
        ...

    def properties_details(self, string: str | None) -> str:
        """Format the heading of the property details."""
        ...

    def property_details(self, string: str | None) -> str:
        """Format the details heading of one property."""
        ...

    def property_gltf_webgl(self, string: str | None) -> str:
        """Format a glTF WebGL property."""
        ...

    def default_value(self, value: Any, type_name: str | None) -> str:
        """Format a default value of the given type."""
        ...

    def enum_element(self, value: Any, type_name: str | None) -> str:
        """Format an enum element of the given type."""
        ...

    def min_max(self, value: Any) -> str:
        """Format a minimum or maximum value."""
        ...
