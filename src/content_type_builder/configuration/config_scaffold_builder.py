"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "content-type-builder.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Configuration for content-type-builder.
# Every key is optional; remove the ones you do not need.

# Prefix used for navigation links: /plugins/<plugin_id>/content-types/<uid>
plugin_id: "content-type-builder"

# Custom field types registered in the editor. Before a schema is saved, an attribute
# using one of these types is sent with `type` set to its collectionType and the
# custom type kept as `inputType`.
custom_fields:
  # color:
  #   collectionType: "string"
  # geo-point:
  #   collectionType: "json"
"""


def build_placeholder_configuration() -> str:
    """Build a YAML configuration template with inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
