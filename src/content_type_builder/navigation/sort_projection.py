"""Navigation listing of content types."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass

from unidecode import unidecode

from content_type_builder.schema_model.schema_models import Schema

DEFAULT_PLUGIN_ID = "content-type-builder"

_SEPARATOR_PATTERN = re.compile(r"[^A-Za-z0-9]+")
_WORD_PATTERN = re.compile(r"[A-Z]{2,}(?=[A-Z][a-z]+[0-9]*|\b)|[A-Z]?[a-z]+[0-9]*|[A-Z]|[0-9]+")


@dataclass(frozen=True)
class ContentTypeLink:  # pylint: disable=too-many-instance-attributes
    """Menu entry pointing at one content type."""

    uid: str
    name: str
    title: object
    plugin: str | None
    kind: object
    editable: object
    restrict_relations_to: object
    to: str

    def to_dict(self) -> dict[str, object]:
        return {
            "uid": self.uid,
            "name": self.name,
            "title": self.title,
            "plugin": self.plugin,
            "kind": self.kind,
            "editable": self.editable,
            "restrictRelationsTo": self.restrict_relations_to,
            "to": self.to,
        }


def sort_content_types(
    types: Mapping[str, Schema],
    plugin_id: str = DEFAULT_PLUGIN_ID,
) -> list[ContentTypeLink]:
    """Return menu entries ordered by the camel-cased display name."""
    links = [
        ContentTypeLink(
            uid=uid,
            name=uid,
            title=schema.definition.name,
            plugin=schema.plugin or None,
            kind=schema.definition.kind,
            editable=schema.definition.editable,
            restrict_relations_to=schema.definition.restrict_relations_to,
            to=f"/plugins/{plugin_id}/content-types/{uid}",
        )
        for uid, schema in types.items()
    ]
    return sorted(links, key=lambda link: camel_case(link.title))


def camel_case(value: object) -> str:
    """Camel-case a display name: ``"Blog post"`` becomes ``"blogPost"``."""
    if not isinstance(value, str):
        return ""
    ascii_value = unidecode(value).replace("'", "")
    words = _WORD_PATTERN.findall(_SEPARATOR_PATTERN.sub(" ", ascii_value))
    if not words:
        return ""
    return words[0].lower() + "".join(word[:1].upper() + word[1:].lower() for word in words[1:])
