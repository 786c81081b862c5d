"""Configuration domain entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from content_type_builder.collection_types.field_registry import StaticFieldRegistry
from content_type_builder.navigation.sort_projection import DEFAULT_PLUGIN_ID


@dataclass(frozen=True)
class CustomFieldConfig:
    """Custom field type registered for collection-type mapping."""

    name: str
    collection_type: str | None
    declares_collection_type: bool = True

    def as_field_definition(self) -> dict[str, object]:
        if not self.declares_collection_type:
            return {}
        return {"collectionType": self.collection_type}


@dataclass(frozen=True)
class BuilderConfig:
    """Top-level configuration aggregate."""

    path: Path | None = None
    plugin_id: str = DEFAULT_PLUGIN_ID
    custom_fields: Mapping[str, CustomFieldConfig] = field(default_factory=dict)

    def field_registry(self) -> StaticFieldRegistry:
        """Build the field-type registry described by ``custom_fields``."""
        return StaticFieldRegistry(
            {name: custom.as_field_definition() for name, custom in self.custom_fields.items()}
        )
