"""Attribute formatter tests."""

from __future__ import annotations

from content_type_builder.payload_formatting.attribute_formatter import (
    format_attributes,
    serialize_attribute,
)
from content_type_builder.schema_model.schema_loading import load_attribute
from content_type_builder.schema_model.schema_models import PlainAttribute, RelationAttribute


def _attributes(**raw: object) -> dict[str, object]:
    return {name: load_attribute(value) for name, value in raw.items()}


def test_self_relation_of_new_component_uses_content_type_placeholder() -> None:
    attributes = _attributes(
        parent={"nature": "oneToMany", "target": "c1", "targetAttribute": "-"}
    )

    formatted = format_attributes(attributes, "c1", True, True)

    assert formatted == {"parent": {"nature": "oneToMany", "target": "__contentType__"}}


def test_self_relation_of_new_content_type_uses_self_placeholder() -> None:
    attributes = _attributes(
        parent={"nature": "oneToMany", "target": "c1", "targetAttribute": "-"}
    )

    formatted = format_attributes(attributes, "c1", True, False)

    assert formatted["parent"]["target"] == "__self__"
    assert type(formatted["parent"]["target"]) is str
    assert "targetAttribute" not in formatted["parent"]


def test_self_relation_of_existing_owner_keeps_uid() -> None:
    attributes = _attributes(
        parent={"nature": "manyToOne", "target": "c1", "targetAttribute": "children"}
    )

    formatted = format_attributes(attributes, "c1", False, True)

    assert formatted["parent"] == {
        "nature": "manyToOne",
        "target": "c1",
        "targetAttribute": "children",
    }


def test_relation_to_other_schema_only_normalizes_target_attribute() -> None:
    attributes = _attributes(
        tags={"nature": "manyToMany", "target": "api::tag.tag", "targetAttribute": "-"},
        author={"nature": "manyToOne", "target": "api::user.user", "targetAttribute": "articles"},
    )

    formatted = format_attributes(attributes, "api::article.article", True, False)

    assert formatted["tags"] == {"nature": "manyToMany", "target": "api::tag.tag"}
    assert formatted["author"]["target"] == "api::user.user"
    assert formatted["author"]["targetAttribute"] == "articles"


def test_unset_options_and_plugin_are_stripped() -> None:
    attributes = _attributes(
        title={"type": "string", "default": None, "required": False, "plugin": "upload"},
        cover={
            "nature": "oneWay",
            "target": "plugins::upload.file",
            "targetAttribute": None,
            "plugin": "upload",
            "unique": None,
        },
    )

    formatted = format_attributes(attributes, "api::article.article", False, False)

    assert formatted["title"] == {"type": "string", "required": False}
    assert formatted["cover"] == {"nature": "oneWay", "target": "plugins::upload.file"}


def test_attribute_order_is_preserved() -> None:
    attributes = _attributes(b={"type": "string"}, a={"type": "integer"}, c={"type": "text"})

    assert list(format_attributes(attributes, None, False, False)) == ["b", "a", "c"]


def test_relation_without_target_is_not_a_self_relation_of_anonymous_owner() -> None:
    attributes = {"link": RelationAttribute(nature="oneWay", target=None, target_attribute=None)}

    assert format_attributes(attributes, None, True, False) == {"link": {"nature": "oneWay"}}


def test_serialize_plain_attribute_without_type_keeps_options() -> None:
    attribute = PlainAttribute(type=None, options={"component": "default.seo", "repeatable": True})

    assert serialize_attribute(attribute) == {"component": "default.seo", "repeatable": True}


def test_inputs_are_not_mutated() -> None:
    raw = {"nature": "oneToMany", "target": "c1", "targetAttribute": "-"}
    attributes = _attributes(parent=raw)

    format_attributes(attributes, "c1", True, True)

    assert attributes["parent"].target == "c1"  # type: ignore[union-attr]
    assert raw["targetAttribute"] == "-"
