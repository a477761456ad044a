"""Interactive click prompts built from derived input fields."""

from __future__ import annotations

import json
from typing import Any

import click

from jam_core.credentials import CredentialSpec
from jam_core.schema import FieldDescriptor, FieldType, StringSchema

_SKIP = ""


def _parse_json(text: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        return text


def _prompt_label(descriptor: FieldDescriptor) -> str:
    label = descriptor.label
    if descriptor.description:
        label = f"{label} ({descriptor.description})"
    if not descriptor.required:
        label = f"{label} [optional]"
    return label


def _default_text(descriptor: FieldDescriptor) -> str:
    if not descriptor.has_default or descriptor.default is None:
        return _SKIP
    if isinstance(descriptor.default, str):
        return descriptor.default
    return json.dumps(descriptor.default)


def parse_array(text: str) -> list[Any]:
    """Accept a JSON array or a comma-separated list."""
    text = text.strip()
    if text.startswith("["):
        value = json.loads(text)
        if not isinstance(value, list):
            raise ValueError("expected a JSON array")
        return value
    return [item.strip() for item in text.split(",") if item.strip()]


def prompt_for_field(descriptor: FieldDescriptor) -> Any:
    """
    Prompt for one field. Returns _SKIP when an optional field is left empty.
    """
    label = _prompt_label(descriptor)

    if descriptor.type == FieldType.CHECKBOX:
        default = bool(descriptor.default) if descriptor.has_default else False
        return click.confirm(label, default=default)

    if descriptor.type == FieldType.SELECT:
        default = descriptor.default if descriptor.has_default else None
        if not descriptor.required and default is None:
            value = click.prompt(
                label,
                type=click.Choice([*descriptor.options, _SKIP]),
                default=_SKIP,
                show_default=False,
            )
            return value
        return click.prompt(label, type=click.Choice(descriptor.options), default=default)

    default = _default_text(descriptor)
    text = click.prompt(
        label,
        default=default,
        show_default=bool(default),
    ).strip()
    if not text:
        return _SKIP

    if descriptor.type == FieldType.NUMBER:
        number = float(text)
        return int(number) if number.is_integer() else number
    if descriptor.type == FieldType.ARRAY:
        return parse_array(text)
    if descriptor.type == FieldType.OBJECT:
        return json.loads(text)
    if isinstance(descriptor.schema, StringSchema):
        return text
    return _parse_json(text)


def _prompt_until_valid(descriptor: FieldDescriptor) -> Any:
    while True:
        try:
            value = prompt_for_field(descriptor)
        except ValueError as e:
            click.echo(f"Invalid value for {descriptor.label}: {e}", err=True)
            continue
        if isinstance(value, str) and value == _SKIP and descriptor.required:
            click.echo(f"{descriptor.label} is required.", err=True)
            continue
        return value


def prompt_for_input(descriptors: list[FieldDescriptor]) -> dict[str, Any]:
    """Prompt for every field, re-asking on unparseable or missing required values."""
    result: dict[str, Any] = {}
    for descriptor in descriptors:
        value = _prompt_until_valid(descriptor)
        if isinstance(value, str) and value == _SKIP:
            continue
        result[descriptor.name] = value
    return result


def prompt_for_credentials(spec: CredentialSpec) -> dict[str, str]:
    """Prompt for every field of a credential spec (secrets are hidden)."""
    click.echo(f"\n{spec.title} credentials are required.")
    if spec.help_url:
        click.echo(f"Get them at: {spec.help_url}")
    values = {}
    for cred_field in spec.fields:
        values[cred_field.name] = click.prompt(
            cred_field.label or cred_field.name,
            hide_input=cred_field.secret,
        )
    return values
