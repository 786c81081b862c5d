"""Change-set detector tests."""

from __future__ import annotations

from content_type_builder.change_detection import detect_changes
from content_type_builder.schema_model.schema_loading import load_schema_mapping


def _components() -> dict[str, object]:
    return {
        "default.seo": {
            "category": "default",
            "schema": {"name": "Seo", "attributes": {"meta": {"type": "string"}}},
        },
        "default.link": {
            "category": "default",
            "schema": {"name": "Link", "attributes": {"url": {"type": "string"}}},
        },
    }


def test_identical_mappings_have_no_changes() -> None:
    current = load_schema_mapping(_components())
    baseline = load_schema_mapping(_components())

    assert detect_changes(current, baseline) == ()
    assert detect_changes(current, current) == ()


def test_temporary_components_are_always_included() -> None:
    raw = _components()
    raw["default.new"] = {"isTemporary": True, "schema": {"attributes": {}}}
    current = load_schema_mapping(raw)
    baseline = load_schema_mapping(raw)

    assert detect_changes(current, baseline) == ("default.new",)


def test_modified_component_is_included() -> None:
    raw = _components()
    baseline = load_schema_mapping(raw)
    raw["default.link"]["schema"]["attributes"]["url"]["required"] = True  # type: ignore[index]
    current = load_schema_mapping(raw)

    assert detect_changes(current, baseline) == ("default.link",)


def test_missing_baseline_counts_as_changed() -> None:
    current = load_schema_mapping(_components())

    assert detect_changes(current, {}) == ("default.seo", "default.link")


def test_deleted_components_are_not_reported() -> None:
    raw = _components()
    baseline = load_schema_mapping(raw)
    del raw["default.link"]
    current = load_schema_mapping(raw)

    assert detect_changes(current, baseline) == ()


def test_each_uid_is_reported_once_and_equal_content_is_not_merged() -> None:
    raw = {
        "default.first": {"isTemporary": True, "schema": {"attributes": {"a": {"type": "string"}}}},
        "default.second": {"isTemporary": True, "schema": {"attributes": {"a": {"type": "string"}}}},
    }
    current = load_schema_mapping(raw)

    result = detect_changes(current, {})

    assert result == ("default.first", "default.second")
    assert len(set(result)) == len(result)
