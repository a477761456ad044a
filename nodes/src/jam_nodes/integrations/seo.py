"""
DataForSEO nodes - keyword research and on-page audits.

- seo_keyword_research: keyword ideas with volume, CPC and difficulty
- seo_audit: instant on-page audit turned into a scored issue list
"""

from __future__ import annotations

import logging
from typing import Any, Literal

from pydantic import BaseModel, Field

from jam_core import ExecutionContext, NodeCapabilities, NodeCategory, NodeResult, define_node

logger = logging.getLogger(__name__)

DEFAULT_LOCATION_CODE = 2840  # United States
DEFAULT_LANGUAGE_CODE = "en"

Severity = Literal["critical", "warning", "info"]

# DataForSEO on-page checks where True means a problem
AUDIT_CHECKS: dict[str, tuple[Severity, str]] = {
    "is_4xx_code": ("critical", "Page returns a 4xx status code"),
    "is_5xx_code": ("critical", "Page returns a 5xx status code"),
    "is_broken": ("critical", "Page is broken"),
    "no_title": ("critical", "Page has no title tag"),
    "no_content_encoding": ("warning", "Page is served without compression"),
    "no_description": ("warning", "Page has no meta description"),
    "no_h1_tag": ("warning", "Page has no H1 heading"),
    "title_too_long": ("warning", "Title tag is too long"),
    "title_too_short": ("warning", "Title tag is too short"),
    "duplicate_title_tag": ("warning", "Page has more than one title tag"),
    "no_image_alt": ("warning", "Some images are missing alt text"),
    "is_http": ("warning", "Page is served over HTTP instead of HTTPS"),
    "high_loading_time": ("warning", "Page takes too long to load"),
    "large_page_size": ("warning", "Page size is too large"),
    "low_content_rate": ("info", "Low text to HTML ratio"),
    "has_render_blocking_resources": ("info", "Page has render-blocking resources"),
    "no_favicon": ("info", "Page has no favicon"),
    "no_image_title": ("info", "Some images are missing a title attribute"),
}

_SEVERITY_ORDER = {"critical": 0, "warning": 1, "info": 2}


class KeywordIdea(BaseModel):
    keyword: str
    search_volume: int
    cpc: float | None = None
    competition: float | None = None
    competition_level: str | None = None
    keyword_difficulty: int | None = None


class SeoKeywordResearchInput(BaseModel):
    keywords: list[str] = Field(description="Seed keywords")
    location_code: int = DEFAULT_LOCATION_CODE
    language_code: str = DEFAULT_LANGUAGE_CODE
    limit: int = Field(20, ge=1, le=1000)


class SeoKeywordResearchOutput(BaseModel):
    keywords: list[KeywordIdea]
    total_found: int


class SeoIssue(BaseModel):
    check: str
    severity: Severity
    message: str


class SeoAuditInput(BaseModel):
    url: str
    enable_javascript: bool = False


class SeoAuditOutput(BaseModel):
    url: str
    score: float
    title: str | None = None
    meta_description: str | None = None
    issues: list[SeoIssue]
    issue_count: int
    passed_checks: int


def to_keyword_idea(item: dict[str, Any]) -> KeywordIdea:
    info = item.get("keyword_info") or {}
    properties = item.get("keyword_properties") or {}
    return KeywordIdea(
        keyword=item.get("keyword") or "",
        search_volume=info.get("search_volume") or 0,
        cpc=info.get("cpc"),
        competition=info.get("competition"),
        competition_level=info.get("competition_level"),
        keyword_difficulty=properties.get("keyword_difficulty"),
    )


def collect_issues(checks: dict[str, Any]) -> tuple[list[SeoIssue], int]:
    """Return the failed checks (most severe first) and the number that passed."""
    issues = []
    passed = 0
    for check, (severity, message) in AUDIT_CHECKS.items():
        if check not in checks:
            continue
        if checks[check]:
            issues.append(SeoIssue(check=check, severity=severity, message=message))
        else:
            passed += 1
    issues.sort(key=lambda issue: _SEVERITY_ORDER[issue.severity])
    return issues, passed


def _dataforseo_missing() -> NodeResult:
    return NodeResult.fail(
        "DataForSEO credentials not configured. Please provide dataforseo login and password."
    )


@define_node(
    type="seo_keyword_research",
    name="SEO Keyword Research",
    description="Find related keywords with search volume, CPC and difficulty using DataForSEO",
    category=NodeCategory.INTEGRATION,
    input_schema=SeoKeywordResearchInput,
    output_schema=SeoKeywordResearchOutput,
    estimated_duration=10,
    capabilities=NodeCapabilities(supports_rerun=True),
)
async def seo_keyword_research_node(
    input: SeoKeywordResearchInput, context: ExecutionContext
) -> NodeResult:
    dataforseo = context.get_service("dataforseo")
    if dataforseo is None:
        return _dataforseo_missing()

    try:
        seeds = [k.strip() for k in input.keywords if k.strip()]
        if not seeds:
            return NodeResult.fail("No valid keywords provided")

        items = await dataforseo.keyword_ideas(
            seeds,
            location_code=input.location_code,
            language_code=input.language_code,
            limit=input.limit,
        )
        ideas = [to_keyword_idea(item) for item in items if item.get("keyword")]
        ideas.sort(key=lambda idea: idea.search_volume, reverse=True)
        return NodeResult.ok(SeoKeywordResearchOutput(keywords=ideas, total_found=len(ideas)))
    except Exception as e:
        return NodeResult.fail(str(e))


@define_node(
    type="seo_audit",
    name="SEO Audit",
    description="Run an on-page SEO audit for a URL using DataForSEO",
    category=NodeCategory.INTEGRATION,
    input_schema=SeoAuditInput,
    output_schema=SeoAuditOutput,
    estimated_duration=20,
    capabilities=NodeCapabilities(supports_rerun=True),
)
async def seo_audit_node(input: SeoAuditInput, context: ExecutionContext) -> NodeResult:
    dataforseo = context.get_service("dataforseo")
    if dataforseo is None:
        return _dataforseo_missing()

    try:
        page = await dataforseo.instant_page_audit(input.url, enable_javascript=input.enable_javascript)
        if not page:
            return NodeResult.fail(f"No audit result returned for {input.url}")

        meta = page.get("meta") or {}
        issues, passed = collect_issues(page.get("checks") or {})
        logger.info(f"Audited {input.url}: {len(issues)} issue(s)")
        return NodeResult.ok(
            SeoAuditOutput(
                url=page.get("url") or input.url,
                score=page.get("onpage_score") or 0,
                title=meta.get("title"),
                meta_description=meta.get("description"),
                issues=issues,
                issue_count=len(issues),
                passed_checks=passed,
            )
        )
    except Exception as e:
        return NodeResult.fail(str(e))
