"""Save body assembly use case."""

from __future__ import annotations

from content_type_builder.collection_types import (
    FieldRegistry,
    map_custom_input_types_to_collection_types,
)
from content_type_builder.payload_formatting import format_main_data_type, get_components_to_post

from .request_contracts import SaveRequest


def build_save_body(request: SaveRequest, field_registry: FieldRegistry) -> dict[str, object]:
    """Build the outbound body for saving one content type or component.

    The body holds the changed components under ``components`` and the main schema under
    ``component`` or ``contentType``; custom field types are mapped last.
    """
    main_key = "component" if request.is_component else "contentType"
    body: dict[str, object] = {
        main_key: format_main_data_type(request.main, request.is_component),
        "components": get_components_to_post(
            request.components,
            request.initial_components,
            request.main.uid,
            request.main.is_temporary,
        ),
    }
    return map_custom_input_types_to_collection_types(body, field_registry)
