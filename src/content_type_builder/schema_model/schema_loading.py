"""Conversion between raw JSON-like schema documents and the typed schema model."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from .schema_models import (
    Attribute,
    PlainAttribute,
    RelationAttribute,
    Schema,
    SchemaDefinition,
)

_LOGGER = logging.getLogger(__name__)

_SCHEMA_KEYS = ("uid", "isTemporary", "category", "plugin", "schema")
_RELATION_KEYS = ("nature", "target", "targetAttribute")


class SchemaError(Exception):
    """Raised when a raw schema document cannot be loaded."""


def load_schema_mapping(raw: Any) -> dict[str, Schema]:
    """Load a mapping of uid to raw schema into typed schemas, preserving key order."""
    if raw is None:
        return {}
    if not isinstance(raw, Mapping):
        raise SchemaError("Schema collections must be mappings of uid to schema.")
    schemas: dict[str, Schema] = {}
    for uid, entry in raw.items():
        if not isinstance(uid, str):
            raise SchemaError(f"Schema uid must be a string, got {uid!r}.")
        schemas[uid] = load_schema(entry, uid=uid)
    return schemas


def load_schema(raw: Any, *, uid: str | None = None) -> Schema:
    """Load one raw content type or component.

    Args:
      raw: Mapping shaped like ``{uid, isTemporary, category, plugin, schema: {...}}``.
      uid: Fallback identifier when the document itself carries none.

    Returns:
      The typed schema. Missing ``schema`` or ``schema.attributes`` default to empty.

    Raises:
      SchemaError: If the document is not a mapping or carries no usable uid.
    """
    if not isinstance(raw, Mapping):
        raise SchemaError(f"Schema '{uid}' must be a mapping.")

    resolved_uid = raw.get("uid", uid)
    if not isinstance(resolved_uid, str) or not resolved_uid:
        raise SchemaError("Schema requires a non-empty string uid.")

    body = raw.get("schema") or {}
    if not isinstance(body, Mapping):
        _LOGGER.warning("Schema '%s' has a non-mapping schema section; using empty.", resolved_uid)
        body = {}

    return Schema(
        uid=resolved_uid,
        definition=_load_definition(body, resolved_uid),
        is_temporary=bool(raw.get("isTemporary", False)),
        category=raw.get("category"),
        plugin=raw.get("plugin"),
        extra={key: value for key, value in raw.items() if key not in _SCHEMA_KEYS},
    )


def load_attribute(raw: Any) -> Attribute:
    """Load one attribute; the presence of ``nature`` marks a relation."""
    if raw is None:
        return PlainAttribute(type=None)
    if not isinstance(raw, Mapping):
        _LOGGER.warning("Ignoring non-mapping attribute definition %r.", raw)
        return PlainAttribute(type=None)
    if "nature" in raw:
        return RelationAttribute(
            nature=raw["nature"],
            target=raw.get("target"),
            target_attribute=raw.get("targetAttribute"),
            options={key: value for key, value in raw.items() if key not in _RELATION_KEYS},
        )
    return PlainAttribute(
        type=raw.get("type"),
        options={key: value for key, value in raw.items() if key != "type"},
    )


def dump_schema(schema: Schema) -> dict[str, Any]:
    """Return the raw document form of a typed schema."""
    document: dict[str, Any] = {"uid": schema.uid}
    if schema.is_temporary:
        document["isTemporary"] = True
    if schema.category is not None:
        document["category"] = schema.category
    if schema.plugin is not None:
        document["plugin"] = schema.plugin
    document.update(schema.extra)
    document["schema"] = {
        **schema.definition.metadata,
        "attributes": {
            name: dump_attribute(attribute)
            for name, attribute in schema.definition.attributes.items()
        },
    }
    return document


def dump_attribute(attribute: Attribute) -> dict[str, Any]:
    """Return the raw form of an attribute, unset values included."""
    if isinstance(attribute, RelationAttribute):
        return {
            "nature": attribute.nature,
            "target": attribute.target,
            "targetAttribute": attribute.target_attribute,
            **attribute.options,
        }
    return {"type": attribute.type, **attribute.options}


def _load_definition(body: Mapping[str, Any], uid: str) -> SchemaDefinition:
    raw_attributes = body.get("attributes") or {}
    if not isinstance(raw_attributes, Mapping):
        _LOGGER.warning("Schema '%s' has non-mapping attributes; using empty.", uid)
        raw_attributes = {}
    return SchemaDefinition(
        metadata={key: value for key, value in body.items() if key != "attributes"},
        attributes={str(name): load_attribute(value) for name, value in raw_attributes.items()},
    )
