"""Node registry - lookup of NodeDefinitions by type."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from jam_core.node.definition import NodeCategory, NodeDefinition, NodeMetadata

logger = logging.getLogger(__name__)


class DuplicateNodeError(ValueError):
    """Raised when a node type is registered twice."""

    def __init__(self, node_type: str):
        self.node_type = node_type
        super().__init__(f"Node type '{node_type}' is already registered")


class NodeRegistry:
    """
    Registry of node definitions keyed by type.

    Populated once with register() calls and read-only afterwards.
    Listing preserves registration order.
    """

    def __init__(self) -> None:
        self._nodes: dict[str, NodeDefinition] = {}

    def register(self, definition: NodeDefinition) -> NodeRegistry:
        """
        Register a node definition.

        Raises:
            DuplicateNodeError: If the type is already registered. The
                existing definition is left in place.
        """
        if definition.type in self._nodes:
            raise DuplicateNodeError(definition.type)
        self._nodes[definition.type] = definition
        logger.debug(f"Registered node: {definition.type}")
        return self

    def register_all(self, definitions: Iterable[NodeDefinition]) -> NodeRegistry:
        for definition in definitions:
            self.register(definition)
        return self

    def get(self, node_type: str) -> NodeDefinition | None:
        return self._nodes.get(node_type)

    def get_all(self) -> list[NodeDefinition]:
        return list(self._nodes.values())

    def get_all_metadata(self) -> list[NodeMetadata]:
        return [definition.metadata() for definition in self._nodes.values()]

    def get_by_category(self, category: NodeCategory | str) -> list[NodeDefinition]:
        category = NodeCategory(category)
        return [d for d in self._nodes.values() if d.category == category]

    def types(self) -> list[str]:
        return list(self._nodes)

    def __contains__(self, node_type: object) -> bool:
        return node_type in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[NodeDefinition]:
        return iter(list(self._nodes.values()))


def create_registry(definitions: Iterable[NodeDefinition] = ()) -> NodeRegistry:
    """Create a registry populated with ``definitions``."""
    return NodeRegistry().register_all(definitions)
