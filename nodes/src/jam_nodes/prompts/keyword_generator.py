"""Prompt for generating platform-specific social search keywords."""

from __future__ import annotations

KEYWORD_GENERATION_PROMPT = """You are a social listening expert. Generate search keywords for monitoring
conversations about the following topic across social platforms.

Topic: {topic}
{user_keywords_section}
Return ONLY a JSON object with this exact structure:
{{
  "twitter": {{
    "keywords": ["keyword1", "keyword2"],
    "search_query": "a twitter advanced search query using OR between terms"
  }},
  "reddit": {{
    "keywords": ["keyword1", "keyword2"]
  }},
  "linkedin": {{
    "keywords": ["keyword1", "keyword2"],
    "search_queries": ["query one", "query two"]
  }}
}}

Guidelines:
- Twitter keywords should be short and include common hashtags and abbreviations
- Reddit keywords should match how people phrase questions and complaints
- LinkedIn keywords should use professional and industry terminology
- Provide 5 to 10 keywords per platform
"""


def build_user_keywords_section(user_keywords: list[str] | None) -> str:
    if not user_keywords:
        return ""
    return f"\nThe user already tracks these keywords, include them and expand on them: {', '.join(user_keywords)}\n"


def build_keyword_prompt(topic: str, user_keywords: list[str] | None = None) -> str:
    return KEYWORD_GENERATION_PROMPT.format(
        topic=topic,
        user_keywords_section=build_user_keywords_section(user_keywords),
    )
