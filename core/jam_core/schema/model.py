"""
Schema description model.

A SchemaNode is a closed, tagged description of a validated value shape.
Node input/output models are described once (see describe.py) and the
resulting tree is read by mock synthesis and field derivation.

Every variant is a frozen dataclass carrying an optional ``description``.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any, ClassVar


@dataclass(frozen=True)
class SchemaNode:
    """Base of every schema variant."""

    kind: ClassVar[str] = "node"

    description: str | None = field(default=None, kw_only=True)


@dataclass(frozen=True)
class StringSchema(SchemaNode):
    kind: ClassVar[str] = "string"


@dataclass(frozen=True)
class NumberSchema(SchemaNode):
    kind: ClassVar[str] = "number"


@dataclass(frozen=True)
class BooleanSchema(SchemaNode):
    kind: ClassVar[str] = "boolean"


@dataclass(frozen=True)
class NullSchema(SchemaNode):
    kind: ClassVar[str] = "null"


@dataclass(frozen=True)
class UndefinedSchema(SchemaNode):
    kind: ClassVar[str] = "undefined"


@dataclass(frozen=True)
class LiteralSchema(SchemaNode):
    kind: ClassVar[str] = "literal"

    value: Any


@dataclass(frozen=True)
class EnumSchema(SchemaNode):
    """A closed set of string values."""

    kind: ClassVar[str] = "enum"

    values: tuple[str, ...]


@dataclass(frozen=True)
class NativeEnumSchema(SchemaNode):
    """A Python Enum class; ``members`` maps member name to value."""

    kind: ClassVar[str] = "native_enum"

    members: Mapping[str, Any]
    enum_class: type | None = None


@dataclass(frozen=True)
class ArraySchema(SchemaNode):
    kind: ClassVar[str] = "array"

    item: SchemaNode


@dataclass(frozen=True)
class ObjectSchema(SchemaNode):
    """Named fields in declaration order."""

    kind: ClassVar[str] = "object"

    fields: Mapping[str, SchemaNode]


@dataclass(frozen=True)
class UnionSchema(SchemaNode):
    kind: ClassVar[str] = "union"

    options: tuple[SchemaNode, ...]


@dataclass(frozen=True)
class DiscriminatedUnionSchema(SchemaNode):
    kind: ClassVar[str] = "discriminated_union"

    discriminator: str
    options: Mapping[Any, SchemaNode]


@dataclass(frozen=True)
class OptionalSchema(SchemaNode):
    kind: ClassVar[str] = "optional"

    inner: SchemaNode


@dataclass(frozen=True)
class NullableSchema(SchemaNode):
    kind: ClassVar[str] = "nullable"

    inner: SchemaNode


@dataclass(frozen=True)
class DefaultSchema(SchemaNode):
    """A value that falls back to ``default_factory()`` when omitted."""

    kind: ClassVar[str] = "default"

    inner: SchemaNode
    default_factory: Callable[[], Any]

    def default_value(self) -> Any:
        return self.default_factory()


@dataclass(frozen=True)
class RecordSchema(SchemaNode):
    """A string-keyed mapping with homogeneous values."""

    kind: ClassVar[str] = "record"

    value_type: SchemaNode


@dataclass(frozen=True)
class TupleSchema(SchemaNode):
    kind: ClassVar[str] = "tuple"

    items: tuple[SchemaNode, ...]


@dataclass(frozen=True)
class PromiseSchema(SchemaNode):
    kind: ClassVar[str] = "promise"

    inner: SchemaNode


@dataclass(frozen=True)
class EffectsSchema(SchemaNode):
    """A value with attached validation or transformation logic."""

    kind: ClassVar[str] = "effects"

    inner: SchemaNode


@dataclass(frozen=True)
class UnknownSchema(SchemaNode):
    kind: ClassVar[str] = "unknown"


@dataclass(frozen=True)
class AnySchema(SchemaNode):
    kind: ClassVar[str] = "any"


WRAPPER_TYPES = (OptionalSchema, NullableSchema, DefaultSchema)


@dataclass(frozen=True)
class Unwrapped:
    """Result of peeling Optional/Nullable/Default wrappers off a node."""

    inner: SchemaNode
    optional: bool = False
    nullable: bool = False
    default: DefaultSchema | None = None
    description: str | None = None

    @property
    def has_default(self) -> bool:
        return self.default is not None


def unwrap(node: SchemaNode) -> Unwrapped:
    """
    Peel Optional, Nullable and Default wrappers off ``node``.

    The outermost Default wins. The description is the first one found
    walking inward, so a description on the wrapper takes precedence.
    """
    optional = False
    nullable = False
    default: DefaultSchema | None = None
    description = node.description

    while isinstance(node, WRAPPER_TYPES):
        if isinstance(node, OptionalSchema):
            optional = True
        elif isinstance(node, NullableSchema):
            nullable = True
        elif default is None:
            default = node
        node = node.inner
        if description is None:
            description = node.description

    return Unwrapped(
        inner=node,
        optional=optional or default is not None,
        nullable=nullable,
        default=default,
        description=description,
    )
