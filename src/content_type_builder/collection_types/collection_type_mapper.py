"""Mapping of custom field types onto backend collection types."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

from .field_registry import FieldRegistry

_LOGGER = logging.getLogger(__name__)

DEFAULT_FIELD_TYPE = "text"


def map_custom_input_types_to_collection_types(
    body: Mapping[str, object],
    field_registry: FieldRegistry,
) -> dict[str, object]:
    """Return a copy of an outbound body whose custom field types use collection types.

    Sequence values are mapped element-wise. Values carrying an ``attributes`` mapping have
    each attribute mapped; other mapping values are treated as a single attribute.
    """
    mapped: dict[str, object] = {}
    for key, value in body.items():
        if isinstance(value, Sequence) and not isinstance(value, str | bytes):
            mapped[key] = [_map_body_value(item, field_registry) for item in value]
        else:
            mapped[key] = _map_body_value(value, field_registry)
    return mapped


def map_attribute_to_collection_type(
    attribute: Mapping[str, object],
    field_registry: FieldRegistry,
) -> Mapping[str, object]:
    """Swap a registered custom type for its collection type, keeping it as ``inputType``."""
    field_type = attribute.get("type", DEFAULT_FIELD_TYPE)
    field_definition = field_registry.get_field(field_type) if isinstance(field_type, str) else None
    if field_definition is None or "collectionType" not in field_definition:
        return attribute

    collection_type = field_definition["collectionType"] or DEFAULT_FIELD_TYPE
    _LOGGER.debug("Mapping custom field type '%s' to '%s'.", field_type, collection_type)
    return {**attribute, "inputType": field_type, "type": collection_type}


def _map_body_value(value: object, field_registry: FieldRegistry) -> object:
    if not isinstance(value, Mapping):
        return value
    attributes = value.get("attributes")
    if isinstance(attributes, Mapping):
        return {
            **value,
            "attributes": {
                name: map_attribute_to_collection_type(attribute, field_registry)
                if isinstance(attribute, Mapping)
                else attribute
                for name, attribute in attributes.items()
            },
        }
    return map_attribute_to_collection_type(value, field_registry)
