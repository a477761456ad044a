"""Resolve ``{{variable}}`` references in node input against the context."""

from __future__ import annotations

import re
from typing import Any

from jam_core.execution.context import ExecutionContext

_TEMPLATE = re.compile(r"\{\{\s*([\w.\-]+)\s*\}\}")


def prepare_node_input(raw: Any, context: ExecutionContext) -> Any:
    """
    Return a copy of ``raw`` with template references resolved.

    A string that is exactly ``{{path}}`` becomes the resolved value itself
    (None when absent). Embedded references are interpolated as text and
    left untouched when the path does not resolve.
    """
    if isinstance(raw, str):
        return _resolve_string(raw, context)
    if isinstance(raw, dict):
        return {key: prepare_node_input(value, context) for key, value in raw.items()}
    if isinstance(raw, list):
        return [prepare_node_input(item, context) for item in raw]
    return raw


def _resolve_string(value: str, context: ExecutionContext) -> Any:
    whole = _TEMPLATE.fullmatch(value.strip())
    if whole:
        return context.resolve_nested_path(whole.group(1))

    def substitute(match: re.Match) -> str:
        resolved = context.resolve_nested_path(match.group(1))
        if resolved is None:
            return match.group(0)
        return str(resolved)

    return _TEMPLATE.sub(substitute, value)
