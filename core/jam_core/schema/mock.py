"""
Mock synthesis - produce a placeholder value that validates against a schema.

synthesize() is total: it never raises, and an unrecognized variant
synthesizes to None. Output is deterministic for a given schema.

MockGenerator layers a per-node override table on top of synthesis so
that nodes with richer expected output can return realistic payloads in
mock mode.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Mapping
from typing import Any

from pydantic_core import PydanticUndefined

from jam_core.schema.describe import describe
from jam_core.schema.model import (
    WRAPPER_TYPES,
    AnySchema,
    ArraySchema,
    BooleanSchema,
    DiscriminatedUnionSchema,
    EffectsSchema,
    EnumSchema,
    LiteralSchema,
    NativeEnumSchema,
    NullSchema,
    NumberSchema,
    ObjectSchema,
    PromiseSchema,
    RecordSchema,
    SchemaNode,
    StringSchema,
    TupleSchema,
    UndefinedSchema,
    UnionSchema,
    UnknownSchema,
    unwrap,
)

logger = logging.getLogger(__name__)

MOCK_STRING = "mock_string"
MOCK_NUMBER = 42
MOCK_BOOLEAN = True
MOCK_ARRAY_LENGTH = 2
MOCK_RECORD_KEYS = ("key1", "key2")


def _mock_object() -> dict[str, Any]:
    return {"mock": "data"}


def synthesize(schema: Any) -> Any:
    """
    Synthesize a mock value for a SchemaNode, pydantic model or annotation.

    Args:
        schema: A SchemaNode, or anything describe() accepts

    Returns:
        A value that validates against the schema for every supported variant
    """
    try:
        node = describe(schema)
    except TypeError as e:
        logger.debug(f"Cannot describe {schema!r} for mock synthesis: {e}")
        return None
    return _synthesize(node)


def _defined_or_none(value: Any) -> Any:
    return None if value is PydanticUndefined else value


def _synthesize(node: SchemaNode) -> Any:
    if isinstance(node, WRAPPER_TYPES):
        unwrapped = unwrap(node)
        if unwrapped.default is not None:
            try:
                return unwrapped.default.default_value()
            except Exception as e:
                logger.debug(f"Default factory failed, synthesizing instead: {e}")
        return _synthesize(unwrapped.inner)

    if isinstance(node, StringSchema):
        return MOCK_STRING
    if isinstance(node, NumberSchema):
        return MOCK_NUMBER
    if isinstance(node, BooleanSchema):
        return MOCK_BOOLEAN
    if isinstance(node, NullSchema):
        return None
    if isinstance(node, UndefinedSchema):
        return PydanticUndefined
    if isinstance(node, LiteralSchema):
        return node.value
    if isinstance(node, EnumSchema):
        return node.values[0] if node.values else None
    if isinstance(node, NativeEnumSchema):
        return next(iter(node.members.values()), None)
    if isinstance(node, ArraySchema):
        items = [_synthesize(node.item) for _ in range(MOCK_ARRAY_LENGTH)]
        return [item for item in items if item is not PydanticUndefined]
    if isinstance(node, ObjectSchema):
        result = {}
        for name, field_node in node.fields.items():
            value = _synthesize(field_node)
            if value is not PydanticUndefined:
                result[name] = value
        return result
    if isinstance(node, UnionSchema):
        return _synthesize(node.options[0]) if node.options else None
    if isinstance(node, DiscriminatedUnionSchema):
        first = next(iter(node.options.values()), None)
        return _synthesize(first) if first is not None else None
    if isinstance(node, RecordSchema):
        value = _synthesize(node.value_type)
        if value is PydanticUndefined:
            return {}
        return {key: copy.deepcopy(value) for key in MOCK_RECORD_KEYS}
    if isinstance(node, TupleSchema):
        # Positions are kept, so an undefined slot becomes None
        return [_defined_or_none(_synthesize(item)) for item in node.items]
    if isinstance(node, (PromiseSchema, EffectsSchema)):
        return _synthesize(node.inner)
    if isinstance(node, (UnknownSchema, AnySchema)):
        return _mock_object()
    return None


class MockGenerator:
    """
    Mock output provider with per-node overrides.

    Usage:
        mocks = MockGenerator({"search_contacts": {...}})
        output = mocks.generate_output("search_contacts", SearchContactsOutput)
    """

    def __init__(self, overrides: Mapping[str, Any] | None = None):
        self._overrides: dict[str, Any] = dict(overrides or {})

    def register_override(self, node_type: str, payload: Any) -> None:
        """Register (or replace) the mock payload returned for ``node_type``."""
        self._overrides[node_type] = payload

    def has_override(self, node_type: str) -> bool:
        return node_type in self._overrides

    @property
    def overrides(self) -> dict[str, Any]:
        return dict(self._overrides)

    def generate_output(self, node_type: str, schema: Any) -> Any:
        """Return a copy of the override for ``node_type``, else synthesize from ``schema``."""
        if node_type in self._overrides:
            return copy.deepcopy(self._overrides[node_type])
        return synthesize(schema)
