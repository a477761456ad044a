"""Schema description model and introspection (mock synthesis, field derivation)."""

from jam_core.schema.describe import SchemaDescriptionError, describe
from jam_core.schema.fields import (
    FieldDescriptor,
    FieldType,
    build_example_input,
    derive_fields,
    humanize_label,
)
from jam_core.schema.mock import MockGenerator, synthesize
from jam_core.schema.model import (
    AnySchema,
    ArraySchema,
    BooleanSchema,
    DefaultSchema,
    DiscriminatedUnionSchema,
    EffectsSchema,
    EnumSchema,
    LiteralSchema,
    NativeEnumSchema,
    NullableSchema,
    NullSchema,
    NumberSchema,
    ObjectSchema,
    OptionalSchema,
    PromiseSchema,
    RecordSchema,
    SchemaNode,
    StringSchema,
    TupleSchema,
    UndefinedSchema,
    UnionSchema,
    UnknownSchema,
    Unwrapped,
    unwrap,
)

__all__ = [
    "AnySchema",
    "ArraySchema",
    "BooleanSchema",
    "DefaultSchema",
    "DiscriminatedUnionSchema",
    "EffectsSchema",
    "EnumSchema",
    "FieldDescriptor",
    "FieldType",
    "LiteralSchema",
    "MockGenerator",
    "NativeEnumSchema",
    "NullSchema",
    "NullableSchema",
    "NumberSchema",
    "ObjectSchema",
    "OptionalSchema",
    "PromiseSchema",
    "RecordSchema",
    "SchemaDescriptionError",
    "SchemaNode",
    "StringSchema",
    "TupleSchema",
    "UndefinedSchema",
    "UnionSchema",
    "UnknownSchema",
    "Unwrapped",
    "build_example_input",
    "derive_fields",
    "describe",
    "humanize_label",
    "synthesize",
    "unwrap",
]
