"""Unified social post models shared by the monitor and analysis nodes."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

Platform = Literal["twitter", "reddit", "linkedin"]
Sentiment = Literal["positive", "negative", "neutral"]
UrgencyLevel = Literal["low", "medium", "high"]


class Engagement(BaseModel):
    likes: int = 0
    comments: int = 0
    shares: int = 0
    views: int | None = None


class SocialPost(BaseModel):
    """A post from any monitored platform."""

    id: str
    platform: Platform
    url: str
    text: str
    author_name: str
    author_handle: str = ""
    author_url: str = ""
    author_followers: int = 0
    title: str | None = None
    subreddit: str | None = None
    engagement: Engagement
    posted_at: str


class TwitterPost(SocialPost):
    platform: Literal["twitter"] = "twitter"


class LinkedInPost(SocialPost):
    platform: Literal["linkedin"] = "linkedin"
    author_headline: str | None = None
    hashtags: list[str] = Field(default_factory=list)


class RedditPost(SocialPost):
    platform: Literal["reddit"] = "reddit"


class AnalyzedPost(SocialPost):
    """A post annotated with AI relevance, sentiment and urgency."""

    relevance_score: int = Field(ge=0, le=100)
    sentiment: Sentiment
    is_complaint: bool
    urgency_level: UrgencyLevel
    ai_summary: str = ""
    matched_keywords: list[str] = Field(default_factory=list)
