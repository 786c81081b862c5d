"""Navigation exports."""

from .sort_projection import DEFAULT_PLUGIN_ID, ContentTypeLink, camel_case, sort_content_types

__all__ = ["DEFAULT_PLUGIN_ID", "ContentTypeLink", "camel_case", "sort_content_types"]
