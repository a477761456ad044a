"""
Node execution shared by the CLI and the web playground.

Playground wraps a registry with credential resolution and mock mode:

    playground = Playground()
    result = await playground.execute("search_contacts", {"person_titles": ["CTO"]}, mock=True)
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from jam_core.config import PlaygroundConfig
from jam_core.credentials import CredentialManager
from jam_core.execution import create_execution_context, generate_execution_id, prepare_node_input
from jam_core.node import NodeDefinition, NodeRegistry, NodeResult, execute_node, format_validation_error, validate_input
from jam_core.observability import set_trace_context
from jam_core.schema import MockGenerator, build_example_input, derive_fields
from jam_nodes import SERVICE_FACTORIES, create_credential_manager, create_default_registry, create_mock_generator
from jam_playground.credential_store import CredentialStore

logger = logging.getLogger(__name__)


class UnknownNodeError(KeyError):
    def __init__(self, node_type: str, available: list[str]):
        self.node_type = node_type
        super().__init__(f"Unknown node type '{node_type}'. Available: {', '.join(available)}")

    def __str__(self) -> str:
        return self.args[0]


class Playground:
    """Registry, credentials and mocks wired together for interactive runs."""

    def __init__(
        self,
        registry: NodeRegistry | None = None,
        config: PlaygroundConfig | None = None,
        store: CredentialStore | None = None,
        mocks: MockGenerator | None = None,
    ):
        self.registry = registry or create_default_registry()
        self.config = config or PlaygroundConfig()
        self.store = store or CredentialStore()
        self.mocks = mocks or create_mock_generator()

    def get_node(self, node_type: str) -> NodeDefinition:
        definition = self.registry.get(node_type)
        if definition is None:
            raise UnknownNodeError(node_type, self.registry.types())
        return definition

    def credential_manager(
        self, overrides: Mapping[str, Mapping[str, str]] | None = None
    ) -> CredentialManager:
        return create_credential_manager(overrides=overrides, store=self.store.load())

    def describe_node(self, node_type: str) -> dict[str, Any]:
        """Metadata, input fields, example input and services for one node."""
        definition = self.get_node(node_type)
        manager = self.credential_manager()
        return {
            **definition.metadata().model_dump(mode="json"),
            "fields": [descriptor.to_dict() for descriptor in derive_fields(definition.input_schema)],
            "exampleInput": build_example_input(definition.input_schema),
            "services": [
                {
                    "service": service,
                    "displayName": manager.get_spec(service).title,
                    "configured": manager.is_available(service),
                }
                for service in manager.services_for_node_type(node_type)
            ],
        }

    async def execute(
        self,
        node_type: str,
        raw_input: Any,
        *,
        credentials: Mapping[str, Mapping[str, str]] | None = None,
        variables: Mapping[str, Any] | None = None,
        mock: bool = False,
    ) -> NodeResult:
        """
        Run a node. In mock mode the input is still validated but no
        service is called; the output comes from the mock generator.

        Raises:
            UnknownNodeError: If the node type is not registered
        """
        definition = self.get_node(node_type)

        if mock:
            return await self._execute_mock(definition, raw_input, variables)

        resolved = self.credential_manager(credentials).resolve_for_node_types([node_type])
        context = create_execution_context(
            self.config.user_id,
            variables=variables,
            credentials=resolved,
            factories=SERVICE_FACTORIES,
        )
        return await execute_node(definition, raw_input, context)

    async def _execute_mock(
        self,
        definition: NodeDefinition,
        raw_input: Any,
        variables: Mapping[str, Any] | None,
    ) -> NodeResult:
        context = create_execution_context(
            self.config.user_id,
            workflow_execution_id=generate_execution_id("mock"),
            variables=variables,
        )
        set_trace_context(
            workflow_execution_id=context.workflow_execution_id,
            node_type=definition.type,
            user_id=context.user_id,
        )
        try:
            validate_input(definition, prepare_node_input(raw_input, context))
        except ValidationError as e:
            return NodeResult.fail(f"Invalid input: {format_validation_error(e)}")

        if self.config.mock_delay_ms > 0:
            await asyncio.sleep(self.config.mock_delay_ms / 1000)
        logger.info(f"Returning mock output for '{definition.type}'")
        return NodeResult.ok(self.mocks.generate_output(definition.type, definition.output_schema))
