"""
Execution context passed to every node executor.

Holds the caller identity, a correlation id, workflow variables and the
service handles built from credentials. Created once per execution.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

logger = logging.getLogger(__name__)

ServiceFactory = Callable[[Mapping[str, str]], Any]

_MISSING = object()


def resolve_path(data: Any, path: str, default: Any = None) -> Any:
    """
    Walk ``data`` along a dot-separated path.

    Segments index into mappings by key, into sequences by integer
    position and into other objects by attribute. Returns ``default``
    when any segment is missing. Never raises.
    """
    if not path:
        return default

    current = data
    for segment in path.split("."):
        try:
            current = _step(current, segment)
        except Exception:
            return default
        if current is _MISSING:
            return default
    return current


def _step(current: Any, segment: str) -> Any:
    if isinstance(current, Mapping):
        return current.get(segment, _MISSING)
    if isinstance(current, Sequence) and not isinstance(current, (str, bytes)):
        try:
            return current[int(segment)]
        except (ValueError, IndexError):
            return _MISSING
    if current is None or isinstance(current, (str, bytes, int, float, bool)):
        return _MISSING
    return getattr(current, segment, _MISSING)


@dataclass
class ExecutionContext:
    """Per-execution state injected into node executors."""

    user_id: str
    workflow_execution_id: str
    variables: dict[str, Any] = field(default_factory=dict)
    services: dict[str, Any] = field(default_factory=dict)

    def resolve_nested_path(self, path: str, default: Any = None) -> Any:
        """Resolve a dot path (e.g. ``"contact.company.name"``) against variables."""
        return resolve_path(self.variables, path, default)

    def get_service(self, name: str) -> Any:
        """Return the handle for ``name``, or None when it was not configured."""
        return self.services.get(name)


def create_services(
    credentials: Mapping[str, Mapping[str, str]] | None,
    factories: Mapping[str, ServiceFactory],
) -> dict[str, Any]:
    """
    Build service handles from credentials.

    Every known service gets a slot. A slot holds a handle only when
    credentials for that service were supplied and the factory accepted
    them; otherwise it is None.
    """
    credentials = credentials or {}
    services: dict[str, Any] = {}
    for name, factory in factories.items():
        fields = credentials.get(name)
        if not fields:
            services[name] = None
            continue
        try:
            services[name] = factory(fields)
        except (KeyError, ValueError) as e:
            logger.warning(f"Ignoring incomplete credentials for service '{name}': {e}")
            services[name] = None
    return services


def generate_execution_id(prefix: str = "playground") -> str:
    return f"{prefix}_{uuid.uuid4().hex[:12]}"


def create_execution_context(
    user_id: str,
    workflow_execution_id: str | None = None,
    variables: Mapping[str, Any] | None = None,
    credentials: Mapping[str, Mapping[str, str]] | None = None,
    factories: Mapping[str, ServiceFactory] | None = None,
) -> ExecutionContext:
    """Create an ExecutionContext, building services from credentials."""
    return ExecutionContext(
        user_id=user_id,
        workflow_execution_id=workflow_execution_id or generate_execution_id(),
        variables=dict(variables or {}),
        services=create_services(credentials, factories or {}),
    )
