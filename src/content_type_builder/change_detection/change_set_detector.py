"""Detection of created and modified components."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from content_type_builder.schema_model.schema_models import Schema
from content_type_builder.schema_model.structural_equality import schemas_equal

_LOGGER = logging.getLogger(__name__)


def detect_changes(
    current: Mapping[str, Schema],
    baseline: Mapping[str, Schema],
) -> tuple[str, ...]:
    """Return uids of entities that are new or differ from the baseline.

    Entities deleted relative to the baseline are not reported. The result follows the
    iteration order of ``current`` and lists every uid once.
    """
    changed: list[str] = []
    seen: set[str] = set()
    for uid, schema in current.items():
        if uid in seen:
            continue
        if schema.is_temporary:
            _LOGGER.debug("Component '%s' is new.", uid)
        elif not schemas_equal(schema, baseline.get(uid)):
            _LOGGER.debug("Component '%s' differs from its baseline.", uid)
        else:
            continue
        seen.add(uid)
        changed.append(uid)
    return tuple(changed)
