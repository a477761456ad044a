"""LinkedIn keyword monitor backed by ForumScout."""

from __future__ import annotations

import logging
import time
from typing import Any

from pydantic import BaseModel, Field

from jam_core import ExecutionContext, NodeCapabilities, NodeCategory, NodeResult, define_node
from jam_nodes.integrations.utils import extract_hashtags, first_present, to_int, utc_now_iso
from jam_nodes.schemas import Engagement, LinkedInPost

logger = logging.getLogger(__name__)


class LinkedInMonitorInput(BaseModel):
    keywords: list[str]
    time_filter: str | None = None
    max_results: int = Field(50, ge=1)


class LinkedInMonitorOutput(BaseModel):
    posts: list[LinkedInPost]
    total_found: int


def extract_handle(url: str | None) -> str:
    """Pull the profile or company slug out of a LinkedIn URL."""
    if not url:
        return "unknown"
    parts = url.split("/")
    for marker in ("in", "company"):
        if marker in parts:
            index = parts.index(marker)
            if index + 1 < len(parts) and parts[index + 1]:
                return parts[index + 1].split("?")[0]
    return parts[-1].split("?")[0] or "unknown"


def to_post(post: dict[str, Any], index: int) -> LinkedInPost:
    text = first_present(post, "text", "content", "snippet", default="")
    author_url = first_present(post, "authorUrl", "authorProfileUrl", default="")
    return LinkedInPost(
        id=str(first_present(post, "id", "urn", default=f"linkedin-{index}-{int(time.time() * 1000)}")),
        url=post.get("url") or "",
        text=text,
        author_name=first_present(post, "authorName", "author", default="Unknown"),
        author_handle=extract_handle(author_url),
        author_url=author_url,
        author_followers=to_int(post.get("authorFollowers")),
        author_headline=post.get("authorHeadline"),
        engagement=Engagement(
            likes=to_int(first_present(post, "likes", "numLikes", "reactions", default=0)),
            comments=to_int(first_present(post, "comments", "numComments", default=0)),
            shares=to_int(first_present(post, "shares", "numShares", default=0)),
        ),
        hashtags=post.get("hashtags") or extract_hashtags(text),
        posted_at=first_present(post, "postedAt", "datePosted", "postedDate", "date", default=None)
        or utc_now_iso(),
    )


@define_node(
    type="linkedin_monitor",
    name="LinkedIn Monitor",
    description="Search LinkedIn for posts matching keywords using ForumScout",
    category=NodeCategory.INTEGRATION,
    input_schema=LinkedInMonitorInput,
    output_schema=LinkedInMonitorOutput,
    estimated_duration=60,
    capabilities=NodeCapabilities(supports_rerun=True),
)
async def linkedin_monitor_node(input: LinkedInMonitorInput, context: ExecutionContext) -> NodeResult:
    try:
        keywords = [k.strip() for k in input.keywords if k.strip()]
        if not keywords:
            return NodeResult.fail("No valid keywords provided")

        forumscout = context.get_service("forumscout")
        if forumscout is None:
            return NodeResult.fail(
                "ForumScout API key not configured. Please provide forumscout credentials."
            )

        results = await forumscout.search_linkedin(" ".join(keywords), sort_by="date_posted")
        posts = [to_post(post, i) for i, post in enumerate(results[: input.max_results])]
        logger.info(f"Found {len(posts)} LinkedIn posts")
        return NodeResult.ok(LinkedInMonitorOutput(posts=posts, total_found=len(posts)))
    except Exception as e:
        return NodeResult.fail(str(e))
