"""Save request entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from content_type_builder.schema_model.schema_models import Schema
from content_type_builder.schema_model.working_set import WorkingSet


class SaveRequestError(Exception):
    """Raised when a save body cannot be assembled."""


@dataclass(frozen=True)
class SaveRequest:
    """Input contract for building the body of one schema save."""

    main: Schema
    is_component: bool = False
    components: Mapping[str, Schema] = field(default_factory=dict)
    initial_components: Mapping[str, Schema] = field(default_factory=dict)

    @classmethod
    def from_working_set(
        cls, working_set: WorkingSet, uid: str, *, is_component: bool = False
    ) -> SaveRequest:
        """Select the schema being saved from a working set."""
        candidates = working_set.components if is_component else working_set.content_types
        main = candidates.get(uid)
        if main is None:
            kind = "Component" if is_component else "Content type"
            raise SaveRequestError(f"{kind} not found in working set: {uid}")
        return cls(
            main=main,
            is_component=is_component,
            components=working_set.components,
            initial_components=working_set.initial_components,
        )
