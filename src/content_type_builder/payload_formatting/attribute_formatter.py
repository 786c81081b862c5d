"""Attribute formatting for schema save payloads."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import replace
from enum import Enum

from content_type_builder.schema_model.schema_models import (
    Attribute,
    RelationAttribute,
    RelationPlaceholder,
)

_LOGGER = logging.getLogger(__name__)

_ALWAYS_DROPPED_OPTIONS = frozenset({"plugin"})


def format_attributes(
    attributes: Mapping[str, Attribute],
    owner_uid: str | None,
    owner_is_new: bool,
    owner_is_component: bool,
) -> dict[str, dict[str, object]]:
    """Return wire attributes with self-relations of new owners pointing at placeholders.

    Args:
      attributes: Attribute map of the owning content type or component.
      owner_uid: Uid of the owner; relations targeting it are self-relations.
      owner_is_new: Whether the owner is temporary and has no backend uid yet.
      owner_is_component: Selects the component placeholder over the self placeholder.
    """
    return {
        name: serialize_attribute(
            _rewrite_attribute(attribute, owner_uid, owner_is_new, owner_is_component)
        )
        for name, attribute in attributes.items()
    }


def serialize_attribute(attribute: Attribute) -> dict[str, object]:
    """Serialize an attribute, dropping every unset value and the ``plugin`` option."""
    if isinstance(attribute, RelationAttribute):
        fields: dict[str, object] = {
            "nature": attribute.nature,
            "target": attribute.target,
            "targetAttribute": attribute.target_attribute,
        }
    else:
        fields = {"type": attribute.type}
    fields.update(attribute.options)
    return {
        key: _wire_value(value)
        for key, value in fields.items()
        if value is not None and key not in _ALWAYS_DROPPED_OPTIONS
    }


def _rewrite_attribute(
    attribute: Attribute,
    owner_uid: str | None,
    owner_is_new: bool,
    owner_is_component: bool,
) -> Attribute:
    if not isinstance(attribute, RelationAttribute):
        return attribute

    target: str | None = attribute.target
    is_self_relation = owner_uid is not None and attribute.target == owner_uid
    if is_self_relation and owner_is_new:
        placeholder = (
            RelationPlaceholder.CONTENT_TYPE if owner_is_component else RelationPlaceholder.SELF
        )
        _LOGGER.debug("Relation to new owner '%s' targets %s.", owner_uid, placeholder.value)
        target = placeholder
    return replace(
        attribute,
        target=target,
        target_attribute=attribute.normalized_target_attribute(),
    )


def _wire_value(value: object) -> object:
    if isinstance(value, Enum):
        return value.value
    return value
