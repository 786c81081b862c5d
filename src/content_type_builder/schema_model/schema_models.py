"""Schema model entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum


class RelationPlaceholder(str, Enum):
    """Relation targets standing in for an identifier the backend has not assigned yet."""

    SELF = "__self__"
    CONTENT_TYPE = "__contentType__"


class RelationSentinel(str, Enum):
    """Editor-only relation values that never reach the backend."""

    NO_TARGET_ATTRIBUTE = "-"


@dataclass(frozen=True)
class PlainAttribute:
    """Attribute holding a field type and its type-specific options."""

    type: str | None
    options: Mapping[str, object] = field(default_factory=dict)


@dataclass(frozen=True)
class RelationAttribute:
    """Attribute linking the owning schema to another content type."""

    nature: str
    target: str | None
    target_attribute: str | None
    options: Mapping[str, object] = field(default_factory=dict)

    def normalized_target_attribute(self) -> str | None:
        """Return the inverse attribute name with the editor sentinel mapped to unset."""
        if self.target_attribute == RelationSentinel.NO_TARGET_ATTRIBUTE.value:
            return None
        return self.target_attribute


Attribute = PlainAttribute | RelationAttribute


@dataclass(frozen=True)
class SchemaDefinition:
    """Inner `schema` section: ordered metadata plus the attribute map."""

    metadata: Mapping[str, object] = field(default_factory=dict)
    attributes: Mapping[str, Attribute] = field(default_factory=dict)

    @property
    def kind(self) -> object:
        return self.metadata.get("kind")

    @property
    def name(self) -> object:
        return self.metadata.get("name")

    @property
    def editable(self) -> object:
        return self.metadata.get("editable")

    @property
    def restrict_relations_to(self) -> object:
        return self.metadata.get("restrictRelationsTo")


@dataclass(frozen=True)
class Schema:
    """One content type or component of the working copy."""

    uid: str
    definition: SchemaDefinition = field(default_factory=SchemaDefinition)
    is_temporary: bool = False
    category: str | None = None
    plugin: str | None = None
    extra: Mapping[str, object] = field(default_factory=dict)
