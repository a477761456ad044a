"""
Credential specs and resolution for service handles.

Contains CredentialField, CredentialSpec, CredentialManager and
CredentialError. Concrete specs live with the services that use them
(see jam_nodes.credentials).
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import dotenv_values


@dataclass
class CredentialField:
    """One value of a service credential (e.g. an API key or a login)."""

    name: str
    """Key passed to the service factory (e.g. 'api_key')"""

    env_var: str
    """Environment variable name (e.g. 'JAM_APOLLO_API_KEY')"""

    label: str = ""
    """Prompt label shown by the playground"""

    secret: bool = True
    """Whether input should be hidden when prompted"""


@dataclass
class CredentialSpec:
    """Specification for the credentials of one service."""

    service: str
    """Service name used as key in ExecutionContext.services (e.g. 'apollo')"""

    display_name: str = ""
    """Human-readable service name"""

    fields: list[CredentialField] = field(default_factory=list)
    """Values that must all be present for the service to be configured"""

    node_types: list[str] = field(default_factory=list)
    """Node types that require this service"""

    required: bool = True
    """Whether nodes fail without it (vs degrade)"""

    help_url: str = ""
    """URL where the user can obtain this credential"""

    description: str = ""
    """What this credential is for"""

    api_key_instructions: str = ""
    """Step-by-step instructions for getting the API key"""

    health_check_endpoint: str = ""
    """Lightweight endpoint for validating the credential"""

    @property
    def title(self) -> str:
        return self.display_name or self.service

    @property
    def env_vars(self) -> list[str]:
        return [f.env_var for f in self.fields]


class CredentialError(Exception):
    """Raised when required credentials are missing."""

    pass


class CredentialManager:
    """
    Credential resolution for services.

    Priority order for each service:
    1. Overrides (explicit values, e.g. from a request or a test)
    2. Saved store (credentials persisted by the playground)
    3. os.environ
    4. .env file (read fresh each time)

    A source is only used when it supplies every field of the spec.

    Usage:
        creds = CredentialManager(CREDENTIAL_SPECS)
        creds.validate_for_node_types(["search_contacts"])
        apollo = creds.get("apollo")  # {"api_key": "..."}

        creds = CredentialManager.for_testing({"apollo": {"api_key": "test"}}, CREDENTIAL_SPECS)
    """

    def __init__(
        self,
        specs: Mapping[str, CredentialSpec],
        overrides: Mapping[str, Mapping[str, str]] | None = None,
        store: Mapping[str, Mapping[str, str]] | None = None,
        dotenv_path: Path | None = None,
    ):
        self._specs = dict(specs)
        self._overrides = {k: dict(v) for k, v in (overrides or {}).items()}
        self._store = {k: dict(v) for k, v in (store or {}).items()}
        self._dotenv_path = dotenv_path
        self._node_type_to_services: dict[str, list[str]] = {}
        for service, spec in self._specs.items():
            for node_type in spec.node_types:
                self._node_type_to_services.setdefault(node_type, []).append(service)

    @classmethod
    def for_testing(
        cls,
        overrides: Mapping[str, Mapping[str, str]],
        specs: Mapping[str, CredentialSpec],
        dotenv_path: Path | None = None,
    ) -> CredentialManager:
        """
        Create a CredentialManager with test values.

        Pass a non-existent dotenv_path to isolate from a real .env file.
        """
        return cls(specs=specs, overrides=overrides, dotenv_path=dotenv_path)

    @property
    def specs(self) -> dict[str, CredentialSpec]:
        return dict(self._specs)

    def get_spec(self, service: str) -> CredentialSpec:
        if service not in self._specs:
            raise KeyError(f"Unknown service '{service}'. Available: {list(self._specs)}")
        return self._specs[service]

    def _read_dotenv(self) -> dict[str, str | None]:
        dotenv_path = self._dotenv_path or Path.cwd() / ".env"
        if not dotenv_path.exists():
            return {}
        # dotenv_values reads the file without modifying os.environ
        return dotenv_values(dotenv_path)

    @staticmethod
    def _complete(spec: CredentialSpec, values: Mapping[str, str | None]) -> dict[str, str] | None:
        result = {}
        for cred_field in spec.fields:
            value = values.get(cred_field.name)
            if not value:
                return None
            result[cred_field.name] = value
        return result

    def _resolve(self, service: str) -> tuple[dict[str, str] | None, str | None]:
        spec = self.get_spec(service)

        for source, values in (
            ("override", self._overrides.get(service)),
            ("saved", self._store.get(service)),
        ):
            if values:
                complete = self._complete(spec, values)
                if complete:
                    return complete, source

        env_values = {f.name: os.environ.get(f.env_var) for f in spec.fields}
        complete = self._complete(spec, env_values)
        if complete:
            return complete, "environment"

        dotenv = self._read_dotenv()
        if dotenv:
            dotenv_fields = {f.name: dotenv.get(f.env_var) for f in spec.fields}
            complete = self._complete(spec, dotenv_fields)
            if complete:
                return complete, "dotenv"

        return None, None

    def get(self, service: str) -> dict[str, str] | None:
        """
        Get the credential fields for a service.

        Returns:
            Mapping of field name to value, or None if not fully configured

        Raises:
            KeyError: If the service is not in specs
        """
        return self._resolve(service)[0]

    def source(self, service: str) -> str | None:
        """Where the credential was found: override, saved, environment, dotenv or None."""
        return self._resolve(service)[1]

    def is_available(self, service: str) -> bool:
        return self.get(service) is not None

    def services_for_node_type(self, node_type: str) -> list[str]:
        return list(self._node_type_to_services.get(node_type, []))

    def get_missing_for_node_types(self, node_types: list[str]) -> list[tuple[str, CredentialSpec]]:
        """Return (service, spec) pairs for required services that are not configured."""
        missing: list[tuple[str, CredentialSpec]] = []
        checked: set[str] = set()

        for node_type in node_types:
            for service in self._node_type_to_services.get(node_type, []):
                if service in checked:
                    continue
                checked.add(service)

                spec = self._specs[service]
                if spec.required and not self.is_available(service):
                    missing.append((service, spec))

        return missing

    def validate_for_node_types(self, node_types: list[str]) -> None:
        """
        Validate that all services required by the given node types are configured.

        Raises:
            CredentialError: If any required credentials are missing
        """
        missing = self.get_missing_for_node_types(node_types)
        if missing:
            raise CredentialError(self._format_missing_error(missing, node_types))

    def resolve_for_node_types(self, node_types: list[str]) -> dict[str, dict[str, str]]:
        """Collect the configured credentials of every service the node types use."""
        resolved: dict[str, dict[str, str]] = {}
        for node_type in node_types:
            for service in self._node_type_to_services.get(node_type, []):
                if service in resolved:
                    continue
                values = self.get(service)
                if values:
                    resolved[service] = values
        return resolved

    def resolve_all(self) -> dict[str, dict[str, str]]:
        """Collect every configured service's credentials."""
        resolved = {}
        for service in self._specs:
            values = self.get(service)
            if values:
                resolved[service] = values
        return resolved

    def _format_missing_error(
        self,
        missing: list[tuple[str, CredentialSpec]],
        node_types: list[str],
    ) -> str:
        """Format a clear, actionable error message for missing credentials."""
        lines = ["Cannot run node: Missing credentials\n"]
        lines.append("The following node types require credentials that are not set:\n")

        for _service, spec in missing:
            affected = [t for t in node_types if t in spec.node_types]
            lines.append(f"  {', '.join(affected)} requires {spec.title}")
            if spec.description:
                lines.append(f"    {spec.description}")
            if spec.help_url:
                lines.append(f"    Get an API key at: {spec.help_url}")
            for env_var in spec.env_vars:
                lines.append(f"    Set via: export {env_var}=your_value")
            lines.append("")

        lines.append("Set these environment variables (or run 'jam-playground credentials set').")
        return "\n".join(lines)
