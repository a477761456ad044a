"""Models shared across node families."""

from jam_nodes.schemas.contacts import Contact, EnrichedContact
from jam_nodes.schemas.social import (
    AnalyzedPost,
    Engagement,
    LinkedInPost,
    Platform,
    RedditPost,
    Sentiment,
    SocialPost,
    TwitterPost,
    UrgencyLevel,
)

__all__ = [
    "AnalyzedPost",
    "Contact",
    "Engagement",
    "EnrichedContact",
    "LinkedInPost",
    "Platform",
    "RedditPost",
    "Sentiment",
    "SocialPost",
    "TwitterPost",
    "UrgencyLevel",
]
