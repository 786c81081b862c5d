"""Schema model exports."""

from .schema_loading import (
    SchemaError,
    dump_attribute,
    dump_schema,
    load_attribute,
    load_schema,
    load_schema_mapping,
)
from .schema_models import (
    Attribute,
    PlainAttribute,
    RelationAttribute,
    RelationPlaceholder,
    RelationSentinel,
    Schema,
    SchemaDefinition,
)
from .structural_equality import schemas_equal
from .working_set import WorkingSet, WorkingSetError, load_working_set

__all__ = [
    "Attribute",
    "PlainAttribute",
    "RelationAttribute",
    "RelationPlaceholder",
    "RelationSentinel",
    "Schema",
    "SchemaDefinition",
    "SchemaError",
    "WorkingSet",
    "WorkingSetError",
    "dump_attribute",
    "dump_schema",
    "load_attribute",
    "load_schema",
    "load_schema_mapping",
    "load_working_set",
    "schemas_equal",
]
