"""
Build SchemaNode trees from pydantic models and type annotations.

Only public pydantic surface is used: ``model_fields``, ``FieldInfo`` and
standard ``typing`` introspection. Anything not recognized becomes
UnknownSchema so traversal never fails on exotic annotations.
"""

from __future__ import annotations

import collections.abc
import dataclasses
import types
from decimal import Decimal
from enum import Enum
from functools import partial
from typing import Annotated, Any, Literal, Union, get_args, get_origin

from pydantic import AfterValidator, BaseModel, BeforeValidator, PlainValidator, WrapValidator
from pydantic.fields import FieldInfo

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
    UnionSchema,
    UnknownSchema,
)

_VALIDATOR_TYPES = (AfterValidator, BeforeValidator, PlainValidator, WrapValidator)

_SEQUENCE_ORIGINS = (
    list,
    set,
    frozenset,
    collections.abc.Sequence,
    collections.abc.MutableSequence,
    collections.abc.Set,
    collections.abc.MutableSet,
    collections.abc.Iterable,
)
_MAPPING_ORIGINS = (dict, collections.abc.Mapping, collections.abc.MutableMapping)
_AWAITABLE_ORIGINS = (collections.abc.Awaitable, collections.abc.Coroutine)


class SchemaDescriptionError(TypeError):
    """Raised when a model cannot be described (e.g. it references itself)."""


def describe(schema: Any) -> SchemaNode:
    """
    Describe a pydantic model class or type annotation as a SchemaNode.

    SchemaNode instances are returned unchanged.
    """
    if isinstance(schema, SchemaNode):
        return schema
    return _describe_annotation(schema, ())


def _with_description(node: SchemaNode, description: str | None) -> SchemaNode:
    if description is None:
        return node
    return dataclasses.replace(node, description=description)


def _is_union(origin: Any) -> bool:
    return origin is Union or origin is types.UnionType


def _describe_model(model: type[BaseModel], stack: tuple[type, ...]) -> ObjectSchema:
    if model in stack:
        raise SchemaDescriptionError(
            f"Cannot describe self-referential model {model.__name__!r}"
        )
    stack = (*stack, model)

    fields: dict[str, SchemaNode] = {}
    for name, info in model.model_fields.items():
        key = info.alias or name
        fields[key] = _describe_field(info, stack)

    return ObjectSchema(fields=fields)


def _describe_field(info: FieldInfo, stack: tuple[type, ...]) -> SchemaNode:
    if info.discriminator is not None and isinstance(info.discriminator, str):
        node = _describe_discriminated(info.annotation, info.discriminator, stack)
    else:
        node = _describe_annotation(info.annotation, stack)

    if any(isinstance(m, _VALIDATOR_TYPES) for m in info.metadata):
        node = EffectsSchema(node)

    if not info.is_required():
        if info.default is None and info.default_factory is None:
            inner = node.inner if isinstance(node, NullableSchema) else node
            node = OptionalSchema(inner)
        else:
            node = DefaultSchema(node, partial(info.get_default, call_default_factory=True))

    return _with_description(node, info.description)


def _describe_discriminated(
    annotation: Any, discriminator: str, stack: tuple[type, ...]
) -> SchemaNode:
    origin = get_origin(annotation)
    if origin is Annotated:
        annotation = get_args(annotation)[0]
        origin = get_origin(annotation)
    if not _is_union(origin):
        return _describe_annotation(annotation, stack)

    options: dict[Any, SchemaNode] = {}
    for option in get_args(annotation):
        if not (isinstance(option, type) and issubclass(option, BaseModel)):
            return _describe_annotation(annotation, stack)
        tag_field = option.model_fields.get(discriminator)
        if tag_field is None or get_origin(tag_field.annotation) is not Literal:
            return _describe_annotation(annotation, stack)
        described = _describe_model(option, stack)
        for value in get_args(tag_field.annotation):
            options[value] = described

    return DiscriminatedUnionSchema(discriminator=discriminator, options=options)


def _describe_literal(values: tuple[Any, ...]) -> SchemaNode:
    if len(values) == 1:
        return LiteralSchema(values[0])
    if all(isinstance(v, str) for v in values):
        return EnumSchema(tuple(values))
    return UnionSchema(tuple(LiteralSchema(v) for v in values))


def _describe_annotation(tp: Any, stack: tuple[type, ...]) -> SchemaNode:
    if tp is Any:
        return AnySchema()
    if tp is None or tp is type(None):
        return NullSchema()
    if tp is object:
        return UnknownSchema()

    origin = get_origin(tp)
    args = get_args(tp)

    if origin is Annotated:
        return _describe_annotated(args[0], args[1:], stack)

    if _is_union(origin):
        non_none = [a for a in args if a is not type(None)]
        if len(non_none) == 1:
            inner = _describe_annotation(non_none[0], stack)
        else:
            inner = UnionSchema(tuple(_describe_annotation(a, stack) for a in non_none))
        if len(non_none) < len(args):
            return NullableSchema(inner)
        return inner

    if origin is Literal:
        return _describe_literal(args)

    if origin is tuple:
        if len(args) == 2 and args[1] is Ellipsis:
            return ArraySchema(_describe_annotation(args[0], stack))
        if not args or args == ((),):
            return ArraySchema(AnySchema())
        return TupleSchema(tuple(_describe_annotation(a, stack) for a in args))

    if origin in _SEQUENCE_ORIGINS:
        item = _describe_annotation(args[0], stack) if args else AnySchema()
        return ArraySchema(item)

    if origin in _MAPPING_ORIGINS:
        value_type = _describe_annotation(args[1], stack) if len(args) == 2 else AnySchema()
        return RecordSchema(value_type)

    if origin in _AWAITABLE_ORIGINS:
        inner = _describe_annotation(args[-1], stack) if args else AnySchema()
        return PromiseSchema(inner)

    if origin is not None:
        return UnknownSchema()

    return _describe_class(tp, stack)


def _describe_annotated(
    base: Any, metadata: tuple[Any, ...], stack: tuple[type, ...]
) -> SchemaNode:
    discriminator = None
    description = None
    for item in metadata:
        if isinstance(item, FieldInfo):
            if isinstance(item.discriminator, str):
                discriminator = item.discriminator
            if item.description:
                description = item.description

    if discriminator is not None:
        node = _describe_discriminated(base, discriminator, stack)
    else:
        node = _describe_annotation(base, stack)

    if any(isinstance(m, _VALIDATOR_TYPES) for m in metadata):
        node = EffectsSchema(node)
    return _with_description(node, description)


def _describe_class(tp: Any, stack: tuple[type, ...]) -> SchemaNode:
    if not isinstance(tp, type):
        return UnknownSchema()
    if tp is bool:
        return BooleanSchema()
    if tp is str:
        return StringSchema()
    if tp in (int, float, Decimal):
        return NumberSchema()
    if issubclass(tp, Enum):
        members = {m.name: m.value for m in tp}
        return NativeEnumSchema(members=members, enum_class=tp)
    if issubclass(tp, BaseModel):
        return _describe_model(tp, stack)
    if tp in (list, set, frozenset, tuple):
        return ArraySchema(AnySchema())
    if tp is dict:
        return RecordSchema(AnySchema())
    return UnknownSchema()
