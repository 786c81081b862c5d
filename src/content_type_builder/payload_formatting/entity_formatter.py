"""Wire payload builders for content types and components."""

from __future__ import annotations

from collections.abc import Mapping

from content_type_builder.change_detection import detect_changes
from content_type_builder.schema_model.schema_models import Schema

from .attribute_formatter import format_attributes

_MAIN_TYPE_DROPPED_FIELDS = ("uid", "isTemporary", "editable", "restrictRelationsTo")


def format_component(
    component: Schema,
    owner_uid: str | None,
    creating_owner: bool = False,
) -> dict[str, object]:
    """Build the payload of a component referenced by the schema being saved.

    Temporary components are sent with ``tmpUID`` so the backend can assign the real uid.
    """
    formatted_attributes = format_attributes(
        component.definition.attributes,
        owner_uid,
        creating_owner,
        True,
    )
    payload: dict[str, object] = (
        {"tmpUID": component.uid} if component.is_temporary else {"uid": component.uid}
    )
    if component.category is not None:
        payload["category"] = component.category
    payload.update(component.definition.metadata)
    payload["attributes"] = formatted_attributes
    return payload


def format_main_data_type(data: Schema, is_component: bool = False) -> dict[str, object]:
    """Build the payload of the content type or component being saved."""
    formatted_attributes = format_attributes(
        data.definition.attributes,
        data.uid,
        data.is_temporary,
        is_component,
    )
    payload: dict[str, object] = (
        {"category": "" if data.category is None else data.category} if is_component else {}
    )
    payload.update(data.definition.metadata)
    payload["attributes"] = formatted_attributes
    for field_name in _MAIN_TYPE_DROPPED_FIELDS:
        payload.pop(field_name, None)
    return payload


def get_components_to_post(
    all_components: Mapping[str, Schema],
    initial_components: Mapping[str, Schema],
    owner_uid: str | None,
    creating_owner: bool = False,
) -> list[dict[str, object]]:
    """Format every created or modified component, in detection order."""
    return [
        format_component(all_components[uid], owner_uid, creating_owner)
        for uid in detect_changes(all_components, initial_components)
    ]
