"""AsciiDoc (Asciidoctor) markup style for schema documentation.

Every function here is a pure transform from primitive values to a markup
fragment. The documentation generator decides the order and concatenates
the fragments; nothing is carried between calls.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from typing import Any

from wetzel.enums import AutoLinkOption, StyleName
from wetzel.logger import debug_enabled, get_logger
from wetzel.models import SchemaDescriptor

REFERENCE = "reference-"
REQUIRED_ICON = " &#x2705; "
WARNING_TITLE = "WETZEL_WARNING: title not defined"

HEADER_MARKER = "="
BULLET_MARKER = "*"
SECTION_DELIMITER = "'''\n"
COLUMN_SEPARATOR = "|"
TABLE_DELIMITER = "|===\n"
BOLD = "**"
CODE = "`"

# Types that never get an anchor of their own
PRIMITIVE_TYPES = frozenset({"integer", "string", "object", "number", "boolean"})


def header(level: int) -> str:
    """Return the marker placed before a heading title at *level*."""
    return HEADER_MARKER * level


def section(
    schema: SchemaDescriptor | Mapping[str, Any], level: int, suppress_warnings: bool
) -> str:
    """Open a documentation section for *schema*.

    The fragment holds a section break, an anchor declaration and the
    heading line. The anchor comes from the schema's type name, falling
    back to the title with spaces turned into dots.

    Args:
        schema: Descriptor (or raw schema mapping) providing title and typeName
        level: Heading level of the section
        suppress_warnings: When False, a missing title is rendered as a
            visible warning placeholder so reviewers can spot it

    Returns:
        Markup starting the section
    """
    descriptor = SchemaDescriptor.coerce(schema)

    title = descriptor.title
    if title is None:
        if suppress_warnings:
            title = ""
        else:
            title = WARNING_TITLE
            get_logger().warning(
                "Schema section has no title (typeName: %s)", descriptor.type_name
            )

    type_name = descriptor.type_name
    if type_name is None:
        type_name = title.lower().replace(" ", ".")

    md = SECTION_DELIMITER
    md += f"[#{REFERENCE}{anchor_name(type_name)}]\n"
    md += f"{header(level)} {title}\n\n"
    return md


def bullet_item(item: str, indentation_level: int | None = 0) -> str:
    """Return *item* as a bullet line nested *indentation_level* deep."""
    if indentation_level is None:
        indentation_level = 0
    return f"{BULLET_MARKER * (indentation_level + 1)} {item}\n"


def begin_table(title: str, columns: Iterable[Any]) -> str:
    """Start a table with a caption and a header row.

    Must be followed by any number of add_table_row() fragments and one
    end_table(). Row widths are not checked against the columns.
    """
    md = f".{title}\n"
    md += TABLE_DELIMITER
    md += COLUMN_SEPARATOR + COLUMN_SEPARATOR.join(_stringify(c) for c in columns) + "\n\n"
    return md


def add_table_row(cells: Iterable[Any]) -> str:
    """Return one table row, one cell per line."""
    return "".join(f"{COLUMN_SEPARATOR}{_stringify(cell)}\n" for cell in cells) + "\n"


def end_table() -> str:
    """Close a table opened with begin_table()."""
    return TABLE_DELIMITER + "\n"


def bold(string: str | None) -> str:
    """Bold *string*; empty or missing input gives an empty string."""
    if string:
        return f"{BOLD}{string}{BOLD}"
    return ""


def code(value: Any) -> str:
    """Display *value* as code.

    The value might be a string, a number or anything else with a string
    form. Falsy values such as ``0`` are still styled; only ``None`` and
    values whose string form is empty are dropped.
    """
    if value is None:
        return ""

    stringified = _stringify(value)
    if stringified:
        return f"{CODE}{stringified}{CODE}"
    return ""


def code_typed(value: Any, type_name: str | None) -> str:
    """Display *value* as code, quoting it when it is a string literal."""
    if value is None or value == "":
        return ""
    if type_name == "string":
        return code(f'"{_stringify(value)}"')
    return code(value)


def anchor_name(string: str) -> str:
    """Convert *string* into the anchor used as a link target."""
    return string.lower().replace(" ", "-").replace(".", "-")


def link(display_text: str | None, target: str | None) -> str:
    """Hyperlink *display_text* to *target*.

    Missing display text gives an empty string; a missing target leaves
    the text unlinked.
    """
    if not display_text:
        return ""
    if not target:
        return display_text
    return f"link:{target}[{display_text}]"


def toc_link(display_text: str | None, type_name: str | None) -> str | None:
    """Link *display_text* to the section anchor of *type_name*."""
    if not display_text or not type_name:
        return display_text
    return link(display_text, _type_link(type_name))


def link_type(
    string: str | None, type_name: str | None, auto_link: AutoLinkOption | str | None = None
) -> str | None:
    """Link the first mention of *type_name* inside *string*.

    With AutoLinkOption.AGGRESSIVE any bare mention bounded by the start of
    the string or a character other than a backtick or dot on the left, and
    by a space, a dot or the end of the string on the right, is linked.
    Otherwise (unless auto-linking is off) only a mention already wrapped in
    backticks is linked. Primitive types are never linked.

    Args:
        string: Prose that might reference the type
        type_name: The type whose mention should be linked
        auto_link: Auto-link mode; None means off

    Returns:
        The prose with at most one mention replaced by a code-styled link
    """
    if auto_link is None or auto_link == AutoLinkOption.OFF:
        return string
    if not string or not type_name:
        return string
    if type_name in PRIMITIVE_TYPES:
        return string

    linked = link(code(type_name), _type_link(type_name))
    escaped = re.escape(type_name)

    if auto_link == AutoLinkOption.AGGRESSIVE:
        pattern = re.compile(rf"([^`.]|^){escaped}([ .]|\Z)")
        result = pattern.sub(lambda m: m.group(1) + linked + m.group(2), string, count=1)
    else:
        pattern = re.compile(rf"`{escaped}`")
        result = pattern.sub(lambda _m: linked, string, count=1)

    if result != string and debug_enabled():
        get_logger().debug("Linked type %s to #%s%s", type_name, REFERENCE, anchor_name(type_name))
    return result


def _stringify(value: Any) -> str:
    """Render a schema literal the way the generated docs spell it.

    Booleans use the JSON spelling, integral floats drop their fraction
    and arrays are joined with commas (missing elements become empty).
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (list, tuple)):
        return ",".join("" if item is None else _stringify(item) for item in value)
    return str(value)


def _type_link(type_name: str) -> str:
    return f"#{REFERENCE}{anchor_name(type_name)}"


class AsciiDoctorStyle:
    """The Asciidoctor style as a single object.

    Exposes the fragment functions along with the semantic names the
    documentation generator uses at its call sites. The semantic names
    share behavior with bold(), code() or code_typed().
    """

    name = StyleName.ASCIIDOCTOR
    required_icon = REQUIRED_ICON

    header = staticmethod(header)
    section = staticmethod(section)
    bullet_item = staticmethod(bullet_item)
    begin_table = staticmethod(begin_table)
    add_table_row = staticmethod(add_table_row)
    end_table = staticmethod(end_table)

    bold = staticmethod(bold)
    code = staticmethod(code)
    code_typed = staticmethod(code_typed)

    anchor_name = staticmethod(anchor_name)
    link = staticmethod(link)
    toc_link = staticmethod(toc_link)
    link_type = staticmethod(link_type)

    # Semantic names used at the generator's call sites
    type = bold
    type_value = code
    properties_summary = bold
    property_name_summary = bold
    properties_details = bold
    property_details = bold
    property_gltf_webgl = bold
    default_value = code_typed
    enum_element = code_typed
    min_max = code
