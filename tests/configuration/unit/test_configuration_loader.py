"""Configuration loader tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from content_type_builder.configuration.loader import ConfigurationError, load_configuration


def _write_file(path: Path, contents: str) -> Path:
    path.write_text(contents, encoding="utf-8")
    return path


def test_loads_yaml_configuration(tmp_path: Path) -> None:
    config_path = _write_file(
        tmp_path / "content-type-builder.yaml",
        """
plugin_id: my-builder
custom_fields:
  color:
    collectionType: string
  preview: {}
""",
    )

    configuration = load_configuration(config_path)

    assert configuration.path == config_path
    assert configuration.plugin_id == "my-builder"
    registry = configuration.field_registry()
    assert registry.get_field("color") == {"collectionType": "string"}
    assert registry.get_field("preview") == {}
    assert registry.get_field("unknown") is None


def test_missing_path_and_empty_file_use_defaults(tmp_path: Path) -> None:
    from_none = load_configuration(None)
    from_empty = load_configuration(_write_file(tmp_path / "empty.yaml", ""))

    assert from_none.plugin_id == "content-type-builder"
    assert from_empty.plugin_id == "content-type-builder"
    assert from_empty.custom_fields == {}
    assert from_empty.field_registry().get_field("color") is None


def test_null_collection_type_still_declares_one(tmp_path: Path) -> None:
    config_path = _write_file(
        tmp_path / "config.yaml", "custom_fields:\n  color:\n    collectionType: null\n"
    )

    registry = load_configuration(config_path).field_registry()

    assert registry.get_field("color") == {"collectionType": None}


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="not found"):
        load_configuration(tmp_path / "missing.yaml")


def test_invalid_yaml_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="Failed to parse"):
        load_configuration(_write_file(tmp_path / "bad.yaml", "plugin_id: [unclosed\n"))


def test_non_mapping_root_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="root must be a mapping"):
        load_configuration(_write_file(tmp_path / "list.yaml", "- one\n"))


@pytest.mark.parametrize(
    ("contents", "message"),
    [
        ("plugin_id: ''\n", "plugin_id must not be empty"),
        ("plugin_id: 3\n", "plugin_id must be a string"),
        ("custom_fields: [color]\n", "custom_fields must be a mapping"),
        ("custom_fields:\n  color: json\n", "custom_fields.color must be a mapping"),
        (
            "custom_fields:\n  color:\n    collectionType: 5\n",
            "custom_fields.color.collectionType must be a string",
        ),
    ],
)
def test_invalid_sections_raise(tmp_path: Path, contents: str, message: str) -> None:
    with pytest.raises(ConfigurationError, match=message):
        load_configuration(_write_file(tmp_path / "config.yaml", contents))
