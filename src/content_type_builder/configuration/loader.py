"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from content_type_builder.navigation.sort_projection import DEFAULT_PLUGIN_ID

from .runtime_settings import BuilderConfig, CustomFieldConfig


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str | None) -> BuilderConfig:
    """Load and validate the configuration file; no path means defaults."""
    if config_path is None:
        return BuilderConfig()

    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    plugin_id = _require_non_empty_string(parsed.get("plugin_id", DEFAULT_PLUGIN_ID), "plugin_id")
    custom_fields = _parse_custom_fields_section(parsed.get("custom_fields"))

    return BuilderConfig(path=path, plugin_id=plugin_id, custom_fields=custom_fields)


def _parse_custom_fields_section(value: Any) -> dict[str, CustomFieldConfig]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigurationError("custom_fields must be a mapping of field type to definition.")

    custom_fields: dict[str, CustomFieldConfig] = {}
    for raw_name, definition in value.items():
        name = _require_non_empty_string(raw_name, "custom_fields key")
        label = f"custom_fields.{name}"
        if definition is None:
            definition = {}
        if not isinstance(definition, Mapping):
            raise ConfigurationError(f"{label} must be a mapping.")
        declares_collection_type = "collectionType" in definition
        collection_type = _optional_string(
            definition.get("collectionType"), f"{label}.collectionType"
        )
        custom_fields[name] = CustomFieldConfig(
            name=name,
            collection_type=collection_type,
            declares_collection_type=declares_collection_type,
        )
    return custom_fields


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    return stripped or None
