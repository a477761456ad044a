"""Generate platform-specific social monitoring keywords with Claude."""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Iterable
from typing import Any

from pydantic import BaseModel

from jam_core import ExecutionContext, NodeCapabilities, NodeCategory, NodeResult, define_node
from jam_nodes.prompts import build_keyword_prompt

logger = logging.getLogger(__name__)

_JSON_OBJECT = re.compile(r"\{[\s\S]*\}")


class TwitterKeywords(BaseModel):
    keywords: list[str]
    search_query: str


class RedditKeywords(BaseModel):
    keywords: list[str]


class LinkedInKeywords(BaseModel):
    keywords: list[str]
    search_queries: list[str]


class SocialKeywordGeneratorInput(BaseModel):
    topic: str
    user_keywords: list[str] | None = None


class SocialKeywordGeneratorOutput(BaseModel):
    topic: str
    twitter: TwitterKeywords
    reddit: RedditKeywords
    linkedin: LinkedInKeywords
    all_keywords: list[str]


def dedupe(*groups: Iterable[str]) -> list[str]:
    """Concatenate keyword lists, dropping repeats while keeping order."""
    return list(dict.fromkeys(k for group in groups for k in group if k))


def _section(parsed: dict[str, Any], platform: str) -> dict[str, Any]:
    section = parsed.get(platform)
    return section if isinstance(section, dict) else {}


@define_node(
    type="social_keyword_generator",
    name="Social Keyword Generator",
    description="Generate platform-specific search keywords using AI for social monitoring",
    category=NodeCategory.ACTION,
    input_schema=SocialKeywordGeneratorInput,
    output_schema=SocialKeywordGeneratorOutput,
    estimated_duration=15,
    capabilities=NodeCapabilities(supports_rerun=True),
)
async def social_keyword_generator_node(
    input: SocialKeywordGeneratorInput, context: ExecutionContext
) -> NodeResult:
    anthropic = context.get_service("anthropic")
    if anthropic is None:
        return NodeResult.fail(
            "Anthropic API key not configured. Please provide anthropic credentials."
        )

    try:
        text = await anthropic.generate_text(
            build_keyword_prompt(input.topic, input.user_keywords), max_tokens=2000
        )

        match = _JSON_OBJECT.search(text)
        if not match:
            return NodeResult.fail("Could not parse keyword response")
        try:
            parsed = json.loads(match.group(0))
        except json.JSONDecodeError:
            return NodeResult.fail("Failed to parse keyword JSON response")

        user_keywords = input.user_keywords or []
        twitter = _section(parsed, "twitter")
        reddit = _section(parsed, "reddit")
        linkedin = _section(parsed, "linkedin")

        twitter_keywords = dedupe(twitter.get("keywords") or [], user_keywords)
        reddit_keywords = dedupe(reddit.get("keywords") or [], user_keywords)
        linkedin_keywords = dedupe(linkedin.get("keywords") or [], user_keywords)

        return NodeResult.ok(
            SocialKeywordGeneratorOutput(
                topic=input.topic,
                twitter=TwitterKeywords(
                    keywords=twitter_keywords,
                    search_query=twitter.get("search_query") or twitter.get("searchQuery") or "",
                ),
                reddit=RedditKeywords(keywords=reddit_keywords),
                linkedin=LinkedInKeywords(
                    keywords=linkedin_keywords,
                    search_queries=linkedin.get("search_queries") or linkedin.get("searchQueries") or [],
                ),
                all_keywords=dedupe(twitter_keywords, reddit_keywords, linkedin_keywords),
            )
        )
    except Exception as e:
        return NodeResult.fail(str(e))
