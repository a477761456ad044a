"""
jam_nodes - built-in workflow nodes.

Usage:
    from jam_core import create_execution_context, execute_node
    from jam_nodes import SERVICE_FACTORIES, create_default_registry

    registry = create_default_registry()
    context = create_execution_context(
        "user-1", credentials={"apollo": {"api_key": "..."}}, factories=SERVICE_FACTORIES
    )
    result = await execute_node(registry.get("search_contacts"), {"person_titles": ["CTO"]}, context)
"""

from jam_core import NodeDefinition, NodeRegistry, create_registry
from jam_nodes.ai import draft_emails_node, social_ai_analyze_node, social_keyword_generator_node
from jam_nodes.credentials import CREDENTIAL_SPECS, create_credential_manager
from jam_nodes.integrations import (
    http_request_node,
    linkedin_monitor_node,
    reddit_monitor_node,
    search_contacts_node,
    seo_audit_node,
    seo_keyword_research_node,
    sora_video_node,
    twitter_monitor_node,
)
from jam_nodes.logic import conditional_node, delay_node, end_node
from jam_nodes.mocks import MOCK_OUTPUTS, create_mock_generator
from jam_nodes.services import SERVICE_FACTORIES
from jam_nodes.transform import filter_node, map_node

__version__ = "0.1.0"

BUILT_IN_NODES: list[NodeDefinition] = [
    # Logic
    conditional_node,
    end_node,
    delay_node,
    # Transform
    map_node,
    filter_node,
    # Integrations
    http_request_node,
    search_contacts_node,
    twitter_monitor_node,
    linkedin_monitor_node,
    reddit_monitor_node,
    sora_video_node,
    seo_keyword_research_node,
    seo_audit_node,
    # AI actions
    social_keyword_generator_node,
    draft_emails_node,
    social_ai_analyze_node,
]


def create_default_registry() -> NodeRegistry:
    """Registry containing every built-in node."""
    return create_registry(BUILT_IN_NODES)


__all__ = [
    "BUILT_IN_NODES",
    "CREDENTIAL_SPECS",
    "MOCK_OUTPUTS",
    "SERVICE_FACTORIES",
    "conditional_node",
    "create_credential_manager",
    "create_default_registry",
    "create_mock_generator",
    "delay_node",
    "draft_emails_node",
    "end_node",
    "filter_node",
    "http_request_node",
    "linkedin_monitor_node",
    "map_node",
    "reddit_monitor_node",
    "search_contacts_node",
    "seo_audit_node",
    "seo_keyword_research_node",
    "social_ai_analyze_node",
    "social_keyword_generator_node",
    "sora_video_node",
    "twitter_monitor_node",
]
