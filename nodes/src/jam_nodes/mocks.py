"""
Realistic mock outputs for the built-in nodes.

Used by the playground's mock mode in place of schema-synthesized data.
Every payload validates against its node's output model.
"""

from __future__ import annotations

from typing import Any

from jam_core.schema import MockGenerator

_TWEET = {
    "id": "1790000000000000001",
    "platform": "twitter",
    "url": "https://twitter.com/devjane/status/1790000000000000001",
    "text": "Anyone else fighting flaky CI pipelines this week? Looking for a better workflow tool.",
    "author_name": "Jane Developer",
    "author_handle": "devjane",
    "author_url": "https://twitter.com/devjane",
    "author_followers": 1840,
    "engagement": {"likes": 42, "comments": 7, "shares": 3, "views": 5120},
    "posted_at": "2025-01-15T14:32:00Z",
}

_LINKEDIN_POST = {
    "id": "urn:li:activity:7150000000000000000",
    "platform": "linkedin",
    "url": "https://www.linkedin.com/feed/update/urn:li:activity:7150000000000000000",
    "text": "We cut our onboarding time in half by automating outreach. #automation #sales",
    "author_name": "Sam Rivera",
    "author_handle": "samrivera",
    "author_url": "https://www.linkedin.com/in/samrivera",
    "author_followers": 5200,
    "author_headline": "Head of Growth at Acme",
    "engagement": {"likes": 128, "comments": 14, "shares": 9},
    "hashtags": ["automation", "sales"],
    "posted_at": "2025-01-14T09:00:00Z",
}

_REDDIT_POST = {
    "id": "t3_1abcde",
    "platform": "reddit",
    "url": "https://www.reddit.com/r/devops/comments/1abcde/workflow_automation_recommendations/",
    "text": "Our team is outgrowing cron jobs. What do you use for workflow automation?",
    "title": "Workflow automation recommendations?",
    "subreddit": "devops",
    "author_name": "ops_throwaway",
    "author_handle": "ops_throwaway",
    "author_url": "https://www.reddit.com/user/ops_throwaway",
    "engagement": {"likes": 56, "comments": 31, "shares": 0},
    "posted_at": "2025-01-13T18:45:00Z",
}

_ANALYZED_REDDIT_POST = {
    **_REDDIT_POST,
    "relevance_score": 88,
    "sentiment": "neutral",
    "is_complaint": False,
    "urgency_level": "medium",
    "ai_summary": "Team asking for workflow automation recommendations to replace cron jobs.",
    "matched_keywords": ["workflow automation"],
}

_ANALYZED_TWEET = {
    **_TWEET,
    "relevance_score": 72,
    "sentiment": "negative",
    "is_complaint": True,
    "urgency_level": "high",
    "ai_summary": "Developer frustrated with flaky CI and looking for alternatives.",
    "matched_keywords": ["CI", "workflow"],
}

MOCK_OUTPUTS: dict[str, Any] = {
    "conditional": {"condition_met": True, "selected_branch": "true", "next_node_id": None},
    "end": {"terminated": True, "reason": "Workflow completed", "success": True},
    "delay": {"waited": True, "actual_duration_ms": 1000},
    "map": {"results": ["alice@example.com", "bob@example.com"], "count": 2},
    "filter": {
        "results": [{"name": "Alice", "score": 92}],
        "count": 1,
        "filtered_out": 1,
    },
    "http_request": {
        "status": 200,
        "ok": True,
        "headers": {"content-type": "application/json"},
        "data": {"message": "Hello from the mock server"},
    },
    "search_contacts": {
        "contacts": [
            {
                "id": "5f8a1b2c3d4e5f6a7b8c9d0e",
                "name": "Alex Chen",
                "first_name": "Alex",
                "last_name": "Chen",
                "email": "alex.chen@example.com",
                "title": "VP of Engineering",
                "company": "Acme Robotics",
                "linkedin_url": "https://www.linkedin.com/in/alexchen",
                "location": "San Francisco, California, United States",
            },
            {
                "id": "6a7b8c9d0e1f2a3b4c5d6e7f",
                "name": "Priya Patel",
                "first_name": "Priya",
                "last_name": "Patel",
                "email": "priya@example.io",
                "title": "CTO",
                "company": "Northwind Labs",
                "linkedin_url": "https://www.linkedin.com/in/priyapatel",
                "location": "Austin, Texas, United States",
            },
        ],
        "total_found": 2,
    },
    "twitter_monitor": {"posts": [_TWEET], "total_found": 1, "has_more": False, "cursor": None},
    "linkedin_monitor": {"posts": [_LINKEDIN_POST], "total_found": 1},
    "reddit_monitor": {"posts": [_REDDIT_POST], "total_found": 1},
    "sora_video": {
        "video": {
            "url": "https://cdn.example.com/videos/mock-sora-video.mp4",
            "duration_seconds": 4,
            "size": "1280x720",
            "model": "sora-2",
        },
        "processing_time_seconds": 42,
    },
    "seo_keyword_research": {
        "keywords": [
            {
                "keyword": "workflow automation software",
                "search_volume": 6600,
                "cpc": 18.4,
                "competition": 0.62,
                "competition_level": "MEDIUM",
                "keyword_difficulty": 54,
            },
            {
                "keyword": "no code workflow automation",
                "search_volume": 1900,
                "cpc": 12.1,
                "competition": 0.48,
                "competition_level": "MEDIUM",
                "keyword_difficulty": 38,
            },
        ],
        "total_found": 2,
    },
    "seo_audit": {
        "url": "https://example.com/",
        "score": 87.5,
        "title": "Example Domain",
        "meta_description": None,
        "issues": [
            {"check": "no_description", "severity": "warning", "message": "Page has no meta description"},
            {"check": "no_favicon", "severity": "info", "message": "Page has no favicon"},
        ],
        "issue_count": 2,
        "passed_checks": 12,
    },
    "social_keyword_generator": {
        "topic": "workflow automation",
        "twitter": {
            "keywords": ["workflow automation", "#nocode", "zapier alternative"],
            "search_query": '("workflow automation" OR #nocode OR "zapier alternative")',
        },
        "reddit": {"keywords": ["workflow automation", "automate repetitive tasks"]},
        "linkedin": {
            "keywords": ["workflow automation", "business process automation"],
            "search_queries": ["workflow automation tools", "process automation ROI"],
        },
        "all_keywords": [
            "workflow automation",
            "#nocode",
            "zapier alternative",
            "automate repetitive tasks",
            "business process automation",
        ],
    },
    "draft_emails": {
        "emails": [
            {
                "id": "draft-5f8a1b2c3d4e5f6a7b8c9d0e-1736950000000",
                "to_email": "alex.chen@example.com",
                "to_name": "Alex Chen",
                "to_company": "Acme Robotics",
                "to_title": "VP of Engineering",
                "subject": "Cutting CI toil at Acme Robotics",
                "body": (
                    "Hi Alex,\n\nI noticed Acme Robotics is scaling its engineering team. "
                    "We help teams automate repetitive workflows so engineers can focus on "
                    "shipping.\n\nWould you be open to a 15 minute call next week?\n\nBest,\nJordan"
                ),
                "status": "draft",
            }
        ],
        "drafted_count": 1,
    },
    "social_ai_analyze": {
        "analyzed_posts": [_ANALYZED_REDDIT_POST, _ANALYZED_TWEET],
        "high_priority_posts": [_ANALYZED_REDDIT_POST, _ANALYZED_TWEET],
        "complaints": [_ANALYZED_TWEET],
        "total_analyzed": 2,
        "high_priority_count": 2,
        "complaint_count": 1,
        "average_relevance": 80,
    },
}


def create_mock_generator(overrides: dict[str, Any] | None = None) -> MockGenerator:
    """MockGenerator seeded with MOCK_OUTPUTS, plus any extra overrides."""
    return MockGenerator({**MOCK_OUTPUTS, **(overrides or {})})
