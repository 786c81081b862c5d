"""Field-type registry capability."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol


class FieldRegistry(Protocol):
    """Lookup of custom field types registered on the client side."""

    def get_field(self, type_name: str) -> Mapping[str, object] | None:
        """Return the registered field definition, or None for unknown types."""


class StaticFieldRegistry:
    """Registry backed by a fixed mapping of field-type name to definition."""

    def __init__(self, fields: Mapping[str, Mapping[str, object]] | None = None) -> None:
        self._fields = {name: dict(definition) for name, definition in (fields or {}).items()}

    def get_field(self, type_name: str) -> Mapping[str, object] | None:
        return self._fields.get(type_name)
