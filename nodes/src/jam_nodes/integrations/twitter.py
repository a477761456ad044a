"""Twitter/X keyword monitor backed by twitterapi.io."""

from __future__ import annotations

import logging
from datetime import UTC, datetime, timedelta
from typing import Any

from pydantic import BaseModel, Field

from jam_core import ExecutionContext, NodeCapabilities, NodeCategory, NodeResult, define_node
from jam_nodes.schemas import Engagement, TwitterPost

logger = logging.getLogger(__name__)


class TwitterMonitorInput(BaseModel):
    keywords: list[str]
    exclude_retweets: bool = True
    min_likes: int | None = Field(None, ge=0)
    max_results: int = Field(50, ge=1)
    lang: str | None = Field(None, description="Language code, e.g. en")
    since_days: int | None = Field(None, ge=1, description="Only tweets from the last N days")


class TwitterMonitorOutput(BaseModel):
    posts: list[TwitterPost]
    total_found: int
    has_more: bool
    cursor: str | None = None


def build_search_query(
    keywords: list[str],
    *,
    exclude_retweets: bool = True,
    min_likes: int | None = None,
    since: str | None = None,
    lang: str | None = None,
) -> str:
    """Build a Twitter advanced search query, e.g. ``(foo OR "bar baz") -is:retweet``."""
    terms = " OR ".join(f'"{k}"' if " " in k else k for k in keywords)
    query = f"({terms})"
    if exclude_retweets:
        query += " -is:retweet"
    if min_likes:
        query += f" min_faves:{min_likes}"
    if since:
        query += f" since:{since}"
    if lang:
        query += f" lang:{lang}"
    return query


def to_post(tweet: dict[str, Any]) -> TwitterPost:
    author = tweet.get("author") or {}
    handle = author.get("userName") or ""
    return TwitterPost(
        id=str(tweet.get("id", "")),
        url=tweet.get("url") or "",
        text=tweet.get("text") or "",
        author_name=author.get("name") or handle or "Unknown",
        author_handle=handle,
        author_url=f"https://twitter.com/{handle}",
        author_followers=author.get("followers") or 0,
        engagement=Engagement(
            likes=tweet.get("likeCount") or 0,
            comments=tweet.get("replyCount") or 0,
            shares=tweet.get("retweetCount") or 0,
            views=tweet.get("viewCount") or 0,
        ),
        posted_at=tweet.get("createdAt") or "",
    )


@define_node(
    type="twitter_monitor",
    name="Twitter Monitor",
    description="Search Twitter/X for posts matching keywords",
    category=NodeCategory.INTEGRATION,
    input_schema=TwitterMonitorInput,
    output_schema=TwitterMonitorOutput,
    estimated_duration=15,
    capabilities=NodeCapabilities(supports_rerun=True),
)
async def twitter_monitor_node(input: TwitterMonitorInput, context: ExecutionContext) -> NodeResult:
    try:
        if not input.keywords:
            return NodeResult.fail("No keywords provided for Twitter search")

        twitter = context.get_service("twitter")
        if twitter is None:
            return NodeResult.fail(
                "Twitter API key not configured. Please provide twitter credentials (twitterapi.io key)."
            )

        since = None
        if input.since_days:
            since = (datetime.now(UTC) - timedelta(days=input.since_days)).strftime("%Y-%m-%d")

        query = build_search_query(
            input.keywords,
            exclude_retweets=input.exclude_retweets,
            min_likes=input.min_likes,
            since=since,
            lang=input.lang,
        )
        logger.info(f"Searching Twitter: {query}")
        response = await twitter.search(query, query_type="Latest")

        tweets = response.get("tweets") or []
        posts = [to_post(tweet) for tweet in tweets[: input.max_results]]
        return NodeResult.ok(
            TwitterMonitorOutput(
                posts=posts,
                total_found=len(posts),
                has_more=bool(response.get("has_next_page")),
                cursor=response.get("next_cursor") or None,
            )
        )
    except Exception as e:
        return NodeResult.fail(str(e))
