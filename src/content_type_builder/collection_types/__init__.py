"""Collection type mapping exports."""

from .collection_type_mapper import (
    DEFAULT_FIELD_TYPE,
    map_attribute_to_collection_type,
    map_custom_input_types_to_collection_types,
)
from .field_registry import FieldRegistry, StaticFieldRegistry

__all__ = [
    "DEFAULT_FIELD_TYPE",
    "FieldRegistry",
    "StaticFieldRegistry",
    "map_attribute_to_collection_type",
    "map_custom_input_types_to_collection_types",
]
