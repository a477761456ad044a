"""Reddit keyword monitor backed by ForumScout."""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import Any, Literal

from pydantic import BaseModel, Field

from jam_core import ExecutionContext, NodeCapabilities, NodeCategory, NodeResult, define_node
from jam_nodes.integrations.utils import first_present, to_int, utc_now_iso
from jam_nodes.schemas import Engagement, RedditPost

logger = logging.getLogger(__name__)

REDDIT_BASE_URL = "https://www.reddit.com"


class RedditMonitorInput(BaseModel):
    keywords: list[str]
    subreddits: list[str] | None = Field(None, description="Only keep posts from these subreddits")
    sort_by: Literal["new", "hot", "top", "relevance"] = "new"
    time_filter: Literal["hour", "day", "week", "month", "year", "all"] | None = None
    max_results: int = Field(50, ge=1)


class RedditMonitorOutput(BaseModel):
    posts: list[RedditPost]
    total_found: int


def normalize_subreddit(name: str) -> str:
    name = name.strip()
    if name.lower().startswith("r/"):
        name = name[2:]
    return name.lower()


def _posted_at(post: dict[str, Any]) -> str:
    created = post.get("created_utc")
    if isinstance(created, (int, float)):
        return datetime.fromtimestamp(created, UTC).isoformat()
    return first_present(post, "postedAt", "date", "created_at", default=None) or utc_now_iso()


def _post_url(post: dict[str, Any]) -> str:
    url = first_present(post, "url", "link", default="")
    permalink = post.get("permalink")
    if permalink and (not url or not url.startswith(REDDIT_BASE_URL)):
        return permalink if permalink.startswith("http") else f"{REDDIT_BASE_URL}{permalink}"
    return url


def to_post(post: dict[str, Any], index: int) -> RedditPost:
    author = first_present(post, "author", "authorName", default="Unknown")
    subreddit = normalize_subreddit(str(post.get("subreddit") or "")) or None
    return RedditPost(
        id=str(first_present(post, "id", "name", default=f"reddit-{index}")),
        url=_post_url(post),
        text=first_present(post, "selftext", "text", "content", "snippet", default=""),
        title=post.get("title"),
        subreddit=subreddit,
        author_name=author,
        author_handle=author,
        author_url=f"{REDDIT_BASE_URL}/user/{author}" if author != "Unknown" else "",
        engagement=Engagement(
            likes=to_int(first_present(post, "score", "upvotes", "ups", default=0)),
            comments=to_int(first_present(post, "num_comments", "comments", default=0)),
        ),
        posted_at=_posted_at(post),
    )


@define_node(
    type="reddit_monitor",
    name="Reddit Monitor",
    description="Search Reddit for posts matching keywords using ForumScout",
    category=NodeCategory.INTEGRATION,
    input_schema=RedditMonitorInput,
    output_schema=RedditMonitorOutput,
    estimated_duration=30,
    capabilities=NodeCapabilities(supports_rerun=True),
)
async def reddit_monitor_node(input: RedditMonitorInput, context: ExecutionContext) -> NodeResult:
    try:
        keywords = [k.strip() for k in input.keywords if k.strip()]
        if not keywords:
            return NodeResult.fail("No valid keywords provided")

        forumscout = context.get_service("forumscout")
        if forumscout is None:
            return NodeResult.fail(
                "ForumScout API key not configured. Please provide forumscout credentials."
            )

        results = await forumscout.search_reddit(
            " ".join(keywords), sort_by=input.sort_by, time_filter=input.time_filter
        )
        posts = [to_post(post, i) for i, post in enumerate(results)]

        if input.subreddits:
            allowed = {normalize_subreddit(name) for name in input.subreddits}
            posts = [post for post in posts if post.subreddit in allowed]

        posts = posts[: input.max_results]
        logger.info(f"Found {len(posts)} Reddit posts")
        return NodeResult.ok(RedditMonitorOutput(posts=posts, total_found=len(posts)))
    except Exception as e:
        return NodeResult.fail(str(e))
