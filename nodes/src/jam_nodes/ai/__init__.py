"""Nodes that generate or analyze content with an LLM."""

from jam_nodes.ai.analyze_posts import SocialAiAnalyzeInput, SocialAiAnalyzeOutput, social_ai_analyze_node
from jam_nodes.ai.draft_emails import DraftEmail, DraftEmailsInput, DraftEmailsOutput, draft_emails_node
from jam_nodes.ai.keyword_generator import (
    SocialKeywordGeneratorInput,
    SocialKeywordGeneratorOutput,
    social_keyword_generator_node,
)

__all__ = [
    "DraftEmail",
    "DraftEmailsInput",
    "DraftEmailsOutput",
    "SocialAiAnalyzeInput",
    "SocialAiAnalyzeOutput",
    "SocialKeywordGeneratorInput",
    "SocialKeywordGeneratorOutput",
    "draft_emails_node",
    "social_ai_analyze_node",
    "social_keyword_generator_node",
]
