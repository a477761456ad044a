"""
Social AI analysis node.

Scores posts from any platform for relevance, sentiment, complaint
status and urgency with Claude, in batches.
"""

from __future__ import annotations

import json
import logging
import re
from typing import Any

from pydantic import BaseModel, ValidationError

from jam_core import ExecutionContext, NodeCapabilities, NodeCategory, NodeResult, define_node
from jam_nodes.prompts import (
    ANALYSIS_BATCH_SIZE,
    MIN_RELEVANCE_SCORE,
    build_analysis_prompt,
    normalize_sentiment,
    normalize_urgency,
)
from jam_nodes.schemas import AnalyzedPost, SocialPost

logger = logging.getLogger(__name__)

ANALYSIS_MAX_TOKENS = 4000
ANALYSIS_TIMEOUT_MS = 120_000
HIGH_PRIORITY_SCORE = 80

_JSON_ARRAY = re.compile(r"\[[\s\S]*\]")


class SocialAiAnalyzeInput(BaseModel):
    topic: str
    user_intent: str
    twitter_posts: list[SocialPost] | None = None
    reddit_posts: list[SocialPost] | None = None
    linkedin_posts: list[SocialPost] | None = None
    posts: list[SocialPost] | None = None


class SocialAiAnalyzeOutput(BaseModel):
    analyzed_posts: list[AnalyzedPost]
    high_priority_posts: list[AnalyzedPost]
    complaints: list[AnalyzedPost]
    total_analyzed: int
    high_priority_count: int
    complaint_count: int
    average_relevance: int


def parse_analysis(text: str) -> list[dict[str, Any]] | None:
    """Extract the JSON array from a model response, or None if there is none."""
    match = _JSON_ARRAY.search(text)
    if not match:
        return None
    try:
        data = json.loads(match.group(0))
    except json.JSONDecodeError:
        return None
    return [item for item in data if isinstance(item, dict)] if isinstance(data, list) else None


def merge_analysis(batch: list[SocialPost], analyses: list[dict[str, Any]]) -> list[AnalyzedPost]:
    by_id = {post.id: post for post in batch}
    merged = []
    for analysis in analyses:
        post = by_id.get(str(analysis.get("id")))
        try:
            score = int(analysis.get("relevance_score") or 0)
        except (TypeError, ValueError):
            continue
        if post is None or score < MIN_RELEVANCE_SCORE:
            continue
        try:
            merged.append(
                AnalyzedPost(
                    **post.model_dump(),
                    relevance_score=min(score, 100),
                    sentiment=normalize_sentiment(analysis.get("sentiment")),
                    is_complaint=bool(analysis.get("is_complaint")),
                    urgency_level=normalize_urgency(analysis.get("urgency_level")),
                    ai_summary=analysis.get("ai_summary") or "",
                    matched_keywords=analysis.get("matched_keywords") or [],
                )
            )
        except ValidationError as e:
            logger.warning(f"Discarding malformed analysis for post {post.id}: {e}")
    return merged


def summarize(analyzed: list[AnalyzedPost]) -> SocialAiAnalyzeOutput:
    analyzed = sorted(analyzed, key=lambda post: post.relevance_score, reverse=True)
    high_priority = [
        post
        for post in analyzed
        if post.urgency_level == "high" or post.relevance_score >= HIGH_PRIORITY_SCORE
    ]
    complaints = [post for post in analyzed if post.is_complaint]
    average = round(sum(p.relevance_score for p in analyzed) / len(analyzed)) if analyzed else 0
    return SocialAiAnalyzeOutput(
        analyzed_posts=analyzed,
        high_priority_posts=high_priority,
        complaints=complaints,
        total_analyzed=len(analyzed),
        high_priority_count=len(high_priority),
        complaint_count=len(complaints),
        average_relevance=average,
    )


@define_node(
    type="social_ai_analyze",
    name="Social AI Analyze",
    description="Analyze social media posts for relevance, sentiment, and urgency using AI",
    category=NodeCategory.ACTION,
    input_schema=SocialAiAnalyzeInput,
    output_schema=SocialAiAnalyzeOutput,
    estimated_duration=60,
    capabilities=NodeCapabilities(supports_rerun=True, supports_bulk_actions=True),
)
async def social_ai_analyze_node(input: SocialAiAnalyzeInput, context: ExecutionContext) -> NodeResult:
    anthropic = context.get_service("anthropic")
    if anthropic is None:
        return NodeResult.fail(
            "Anthropic API key not configured. Please provide anthropic credentials."
        )

    try:
        all_posts = [
            *(input.twitter_posts or []),
            *(input.reddit_posts or []),
            *(input.linkedin_posts or []),
            *(input.posts or []),
        ]

        analyzed: list[AnalyzedPost] = []
        for start in range(0, len(all_posts), ANALYSIS_BATCH_SIZE):
            batch = all_posts[start : start + ANALYSIS_BATCH_SIZE]
            text = await anthropic.generate_text(
                build_analysis_prompt(input.topic, input.user_intent, batch),
                max_tokens=ANALYSIS_MAX_TOKENS,
                timeout_ms=ANALYSIS_TIMEOUT_MS,
            )
            analyses = parse_analysis(text)
            if analyses is None:
                logger.warning(f"Skipping unparseable analysis batch at offset {start}")
                continue
            analyzed.extend(merge_analysis(batch, analyses))

        return NodeResult.ok(summarize(analyzed))
    except Exception as e:
        return NodeResult.fail(str(e))
