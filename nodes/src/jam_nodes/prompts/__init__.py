"""Prompt templates and response cleanup for the AI nodes."""

from jam_nodes.prompts.analyze_posts import (
    ANALYSIS_BATCH_SIZE,
    ANALYSIS_PROMPT,
    MIN_RELEVANCE_SCORE,
    build_analysis_prompt,
    normalize_sentiment,
    normalize_urgency,
)
from jam_nodes.prompts.draft_emails import (
    build_email_prompt,
    build_subject_prompt,
    clean_email_body,
    clean_subject_line,
)
from jam_nodes.prompts.keyword_generator import (
    KEYWORD_GENERATION_PROMPT,
    build_keyword_prompt,
    build_user_keywords_section,
)

__all__ = [
    "ANALYSIS_BATCH_SIZE",
    "ANALYSIS_PROMPT",
    "KEYWORD_GENERATION_PROMPT",
    "MIN_RELEVANCE_SCORE",
    "build_analysis_prompt",
    "build_email_prompt",
    "build_keyword_prompt",
    "build_subject_prompt",
    "build_user_keywords_section",
    "clean_email_body",
    "clean_subject_line",
    "normalize_sentiment",
    "normalize_urgency",
]
