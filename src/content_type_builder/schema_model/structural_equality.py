"""Field-by-field structural comparison of schemas."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from .schema_models import Attribute, PlainAttribute, RelationAttribute, Schema, SchemaDefinition


def schemas_equal(left: Schema | None, right: Schema | None) -> bool:
    """Return True when both schemas hold the same identity, metadata and attributes."""
    if left is None or right is None:
        return left is right
    return (
        left.uid == right.uid
        and left.is_temporary == right.is_temporary
        and values_equal(left.category, right.category)
        and values_equal(left.plugin, right.plugin)
        and values_equal(left.extra, right.extra)
        and definitions_equal(left.definition, right.definition)
    )


def definitions_equal(left: SchemaDefinition, right: SchemaDefinition) -> bool:
    if not values_equal(left.metadata, right.metadata):
        return False
    if left.attributes.keys() != right.attributes.keys():
        return False
    return all(
        attributes_equal(attribute, right.attributes[name])
        for name, attribute in left.attributes.items()
    )


def attributes_equal(left: Attribute, right: Attribute) -> bool:
    if isinstance(left, RelationAttribute) and isinstance(right, RelationAttribute):
        return (
            left.nature == right.nature
            and left.target == right.target
            and left.target_attribute == right.target_attribute
            and values_equal(left.options, right.options)
        )
    if isinstance(left, PlainAttribute) and isinstance(right, PlainAttribute):
        return left.type == right.type and values_equal(left.options, right.options)
    return False


def values_equal(left: object, right: object) -> bool:
    """Compare JSON-like values; booleans never equal numbers, mapping order is ignored."""
    if isinstance(left, bool) or isinstance(right, bool):
        return isinstance(left, bool) and isinstance(right, bool) and left == right
    if isinstance(left, Mapping) and isinstance(right, Mapping):
        if left.keys() != right.keys():
            return False
        return all(values_equal(value, right[key]) for key, value in left.items())
    if isinstance(left, Sequence) and not isinstance(left, str | bytes):
        if not isinstance(right, Sequence) or isinstance(right, str | bytes):
            return False
        return len(left) == len(right) and all(
            values_equal(left_item, right_item) for left_item, right_item in zip(left, right)
        )
    if isinstance(right, Sequence) and not isinstance(right, str | bytes):
        return False
    return left == right
