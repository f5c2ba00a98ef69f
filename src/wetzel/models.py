"""Data models for wetzel."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class SchemaDescriptor:
    """The parts of a schema needed to open a documentation section.

    Only ``title`` and ``typeName`` are read; everything else in the schema
    belongs to the generator walking the tree.
    """

    title: str | None = None
    type_name: str | None = None

    @classmethod
    def from_schema(cls, schema: Mapping[str, Any]) -> SchemaDescriptor:
        """Build a descriptor from a loaded JSON schema mapping."""
        return cls(title=schema.get("title"), type_name=schema.get("typeName"))

    @classmethod
    def coerce(cls, schema: SchemaDescriptor | Mapping[str, Any]) -> SchemaDescriptor:
        """Return *schema* as a descriptor, converting raw mappings."""
        if isinstance(schema, SchemaDescriptor):
            return schema
        return cls.from_schema(schema)
