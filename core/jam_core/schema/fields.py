"""
Field derivation - flatten an object schema into form/prompt descriptors.

Used by the CLI prompts and the web playground to render one input per
top-level field of a node's input model.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Annotated, Any

from pydantic import BaseModel, TypeAdapter, ValidationError

from jam_core.schema.describe import describe
from jam_core.schema.mock import synthesize
from jam_core.schema.model import (
    ArraySchema,
    BooleanSchema,
    EnumSchema,
    NumberSchema,
    ObjectSchema,
    RecordSchema,
    SchemaNode,
    StringSchema,
    unwrap,
)

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


class FieldType(str, Enum):
    TEXT = "text"
    NUMBER = "number"
    CHECKBOX = "checkbox"
    SELECT = "select"
    ARRAY = "array"
    OBJECT = "object"


@dataclass
class FieldDescriptor:
    """A single top-level input field."""

    name: str
    label: str
    type: FieldType
    required: bool
    schema: SchemaNode
    default: Any = None
    has_default: bool = False
    options: list[str] = field(default_factory=list)
    description: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "name": self.name,
            "label": self.label,
            "type": self.type.value,
            "required": self.required,
        }
        if self.has_default:
            data["default"] = self.default
        if self.options:
            data["options"] = list(self.options)
        if self.description:
            data["description"] = self.description
        return data


def humanize_label(name: str) -> str:
    """
    Turn a field name into a display label.

    >>> humanize_label("personTitles")
    'Person Titles'
    >>> humanize_label("max_results")
    'Max results'
    """
    spaced = _CAMEL_BOUNDARY.sub(" ", name).replace("_", " ")
    spaced = " ".join(spaced.split())
    if not spaced:
        return name
    return spaced[0].upper() + spaced[1:]


def classify(node: SchemaNode) -> FieldType:
    """Map an unwrapped schema node to its input control type."""
    if isinstance(node, NumberSchema):
        return FieldType.NUMBER
    if isinstance(node, BooleanSchema):
        return FieldType.CHECKBOX
    if isinstance(node, EnumSchema):
        return FieldType.SELECT
    if isinstance(node, ArraySchema):
        return FieldType.ARRAY
    if isinstance(node, (ObjectSchema, RecordSchema)):
        return FieldType.OBJECT
    return FieldType.TEXT


def derive_fields(schema: Any) -> list[FieldDescriptor]:
    """
    Derive one FieldDescriptor per top-level field of an object schema.

    Non-object roots yield an empty list. Never raises.
    """
    try:
        root = describe(schema)
    except TypeError:
        return []
    if not isinstance(root, ObjectSchema):
        return []

    descriptors = []
    for name, node in root.fields.items():
        unwrapped = unwrap(node)
        field_type = classify(unwrapped.inner)

        default = None
        has_default = False
        if unwrapped.default is not None:
            try:
                default = unwrapped.default.default_value()
                has_default = True
            except Exception:
                has_default = False

        options = []
        if isinstance(unwrapped.inner, EnumSchema):
            options = list(unwrapped.inner.values)

        descriptors.append(
            FieldDescriptor(
                name=name,
                label=humanize_label(name),
                type=field_type,
                required=not unwrapped.optional,
                schema=unwrapped.inner,
                default=default,
                has_default=has_default,
                options=options,
                description=unwrapped.description,
            )
        )
    return descriptors


def example_value(descriptor: FieldDescriptor) -> Any:
    """
    Example value for a field, using name hints for common text/number fields.

    Hints only apply where the field is a plain string or number, so the
    result still validates.
    """
    name = descriptor.name.lower()
    inner = descriptor.schema

    if isinstance(inner, NumberSchema):
        if "limit" in name:
            return 10
        if "page" in name:
            return 1
        if "count" in name:
            return 5
        if any(word in name for word in ("delay", "duration", "timeout")):
            return 1000
    if isinstance(inner, StringSchema):
        snake = _CAMEL_BOUNDARY.sub("_", descriptor.name).lower()
        if "url" in name:
            return "https://example.com"
        if "email" in name:
            return "user@example.com"
        return f"example_{snake}"
    if descriptor.options:
        return descriptor.options[0]
    return synthesize(inner)


def _field_adapter(schema: Any, name: str) -> tuple[TypeAdapter, list[Any]] | None:
    if not (isinstance(schema, type) and issubclass(schema, BaseModel)):
        return None
    info = schema.model_fields.get(name)
    if info is None:
        return None
    annotation = Annotated[(info.annotation, *info.metadata)] if info.metadata else info.annotation
    return TypeAdapter(annotation), list(info.metadata)


def _bound_candidates(metadata: list[Any]) -> list[Any]:
    candidates = []
    for constraint in metadata:
        for attr, shift in (("ge", 0), ("le", 0), ("gt", 1), ("lt", -1)):
            bound = getattr(constraint, attr, None)
            if isinstance(bound, (int, float)) and not isinstance(bound, bool):
                candidates.append(bound + shift)
    return candidates


def fit_example_value(schema: Any, descriptor: FieldDescriptor) -> Any:
    """
    Example value that also satisfies the field's declared constraints
    (``le``, ``ge`` and friends) when ``schema`` is a pydantic model.

    Tries the name-hinted value, then the synthesized value, then each
    declared bound. Keeps the hinted value when none of them validates.
    """
    value = example_value(descriptor)
    adapted = _field_adapter(schema, descriptor.name)
    if adapted is None:
        return value
    adapter, metadata = adapted
    for candidate in (value, synthesize(descriptor.schema), *_bound_candidates(metadata)):
        try:
            adapter.validate_python(candidate)
        except ValidationError:
            continue
        return candidate
    return value


def build_example_input(schema: Any) -> dict[str, Any]:
    """
    Build a runnable example input for a node.

    Fields with a default use it, required fields get an example value,
    and optional fields without a default are omitted.
    """
    example: dict[str, Any] = {}
    for descriptor in derive_fields(schema):
        if descriptor.has_default:
            example[descriptor.name] = descriptor.default
        elif descriptor.required:
            example[descriptor.name] = fit_example_value(schema, descriptor)
    return example
