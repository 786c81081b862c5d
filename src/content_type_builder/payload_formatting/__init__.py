"""Payload formatting exports."""

from .attribute_formatter import format_attributes, serialize_attribute
from .entity_formatter import format_component, format_main_data_type, get_components_to_post

__all__ = [
    "format_attributes",
    "format_component",
    "format_main_data_type",
    "get_components_to_post",
    "serialize_attribute",
]
