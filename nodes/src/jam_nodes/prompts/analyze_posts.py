"""Prompt and normalization helpers for AI social post analysis."""

from __future__ import annotations

import json
from collections.abc import Sequence
from typing import Any

MIN_RELEVANCE_SCORE = 30
ANALYSIS_BATCH_SIZE = 20

ANALYSIS_PROMPT = """You are analyzing social media posts for a brand monitoring tool.

Topic: {topic}
What the user is looking for: {user_intent}

Posts:
{posts}

For each post, return a JSON array of objects with this structure:
[
  {{
    "id": "the post id",
    "relevance_score": 0-100,
    "sentiment": "positive" | "negative" | "neutral",
    "is_complaint": true | false,
    "urgency_level": "low" | "medium" | "high",
    "ai_summary": "one sentence summary",
    "matched_keywords": ["keyword"]
  }}
]

Score relevance against the user's intent, not just keyword overlap.
Return ONLY the JSON array."""

_SENTIMENTS = {"positive", "negative", "neutral"}
_URGENCY = {"low", "medium", "high"}


def format_posts_for_prompt(posts: Sequence[Any]) -> str:
    entries = []
    for post in posts:
        entries.append(
            {
                "id": post.id,
                "platform": post.platform,
                "author": post.author_name,
                "title": post.title,
                "text": post.text[:1000],
            }
        )
    return json.dumps(entries, indent=2)


def build_analysis_prompt(topic: str, user_intent: str, posts: Sequence[Any]) -> str:
    return ANALYSIS_PROMPT.format(
        topic=topic,
        user_intent=user_intent,
        posts=format_posts_for_prompt(posts),
    )


def normalize_sentiment(value: Any) -> str:
    text = str(value or "").strip().lower()
    return text if text in _SENTIMENTS else "neutral"


def normalize_urgency(value: Any) -> str:
    text = str(value or "").strip().lower()
    return text if text in _URGENCY else "low"
