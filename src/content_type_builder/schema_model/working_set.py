"""Working-set document loading."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from .schema_loading import SchemaError, load_schema_mapping
from .schema_models import Schema

_SECTIONS = ("contentTypes", "components", "initialContentTypes", "initialComponents")


class WorkingSetError(Exception):
    """Raised when a working-set document cannot be read."""


@dataclass(frozen=True)
class WorkingSet:
    """Current schemas alongside the baseline captured at the last load or save."""

    content_types: Mapping[str, Schema] = field(default_factory=dict)
    components: Mapping[str, Schema] = field(default_factory=dict)
    initial_content_types: Mapping[str, Schema] = field(default_factory=dict)
    initial_components: Mapping[str, Schema] = field(default_factory=dict)


def load_working_set(state_path: Path | str) -> WorkingSet:
    """Load a YAML or JSON working-set document."""
    path = Path(state_path)
    if not path.exists():
        raise WorkingSetError(f"Working-set file not found: {path}")

    try:
        parsed = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise WorkingSetError(f"Failed to parse working-set file: {exc}") from exc

    if parsed is None:
        parsed = {}
    if not isinstance(parsed, Mapping):
        raise WorkingSetError("Working-set root must be a mapping.")

    sections = {}
    for section in _SECTIONS:
        value = parsed.get(section)
        if value is not None and not isinstance(value, Mapping):
            raise WorkingSetError(f"Working-set section '{section}' must be a mapping.")
        try:
            sections[section] = load_schema_mapping(value)
        except SchemaError as exc:
            raise WorkingSetError(f"{section}: {exc}") from exc

    return WorkingSet(
        content_types=sections["contentTypes"],
        components=sections["components"],
        initial_content_types=sections["initialContentTypes"],
        initial_components=sections["initialComponents"],
    )
