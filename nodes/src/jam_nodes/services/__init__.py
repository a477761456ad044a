"""
Service handles injected into ExecutionContext.services.

SERVICE_FACTORIES maps each service name to a factory taking the
credential fields for that service.
"""

from jam_core.execution import ServiceFactory
from jam_nodes.services.anthropic import AnthropicService
from jam_nodes.services.apollo import ApolloService
from jam_nodes.services.base import ApiService, ServiceError
from jam_nodes.services.dataforseo import DataForSeoService
from jam_nodes.services.openai import OpenAIService
from jam_nodes.services.social import ForumScoutService, TwitterApiService

SERVICE_FACTORIES: dict[str, ServiceFactory] = {
    "apollo": ApolloService.from_credentials,
    "anthropic": AnthropicService.from_credentials,
    "openai": OpenAIService.from_credentials,
    "twitter": TwitterApiService.from_credentials,
    "forumscout": ForumScoutService.from_credentials,
    "dataforseo": DataForSeoService.from_credentials,
}

__all__ = [
    "SERVICE_FACTORIES",
    "AnthropicService",
    "ApiService",
    "ApolloService",
    "DataForSeoService",
    "ForumScoutService",
    "OpenAIService",
    "ServiceError",
    "TwitterApiService",
]
