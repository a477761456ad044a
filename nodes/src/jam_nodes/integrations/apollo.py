"""
Apollo contact search node.

Searches Apollo for people matching the filters, then enriches each
match one at a time to reveal their email address.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from pydantic import BaseModel, Field

from jam_core import ExecutionContext, NodeCapabilities, NodeCategory, NodeResult, define_node
from jam_nodes.schemas import EnrichedContact

logger = logging.getLogger(__name__)

DEFAULT_PERSON_LOCATIONS = ["United States"]
ENRICH_DELAY_S = 0.2
MAX_PER_PAGE = 100


class SearchContactsInput(BaseModel):
    person_titles: list[str] | None = Field(None, description="Job titles, e.g. CTO, VP Engineering")
    person_locations: list[str] | None = None
    organization_locations: list[str] | None = None
    employee_ranges: list[str] | None = Field(None, description="Company size ranges, e.g. 1,10")
    keywords: str | None = None
    limit: int = Field(10, ge=1, le=MAX_PER_PAGE)
    include_similar_titles: bool | None = None
    person_seniorities: list[str] | None = None
    technologies: list[str] | None = None
    industry_tag_ids: list[str] | None = None
    departments: list[str] | None = None


class SearchContactsOutput(BaseModel):
    contacts: list[EnrichedContact]
    total_found: int


def build_search_body(input: SearchContactsInput) -> dict[str, Any]:
    body: dict[str, Any] = {
        "person_titles": input.person_titles or [],
        "person_locations": input.person_locations or DEFAULT_PERSON_LOCATIONS,
        "include_similar_titles": (
            True if input.include_similar_titles is None else input.include_similar_titles
        ),
        "page": 1,
        "per_page": min(input.limit, MAX_PER_PAGE),
    }
    optional = {
        "q_keywords": input.keywords,
        "person_seniorities": input.person_seniorities,
        "organization_locations": input.organization_locations,
        "organization_num_employees_ranges": input.employee_ranges,
        "currently_using_any_of_technology_uids": input.technologies,
        "organization_industry_tag_ids": input.industry_tag_ids,
        "person_departments": input.departments,
    }
    body.update({key: value for key, value in optional.items() if value})
    return body


def _contact_name(person: dict[str, Any]) -> str:
    if person.get("name"):
        return person["name"]
    first = person.get("first_name") or ""
    last = person.get("last_name") or person.get("last_name_obfuscated") or ""
    return f"{first} {last}".strip() or "Unknown"


def _contact_location(person: dict[str, Any]) -> str | None:
    parts = [person.get(key) for key in ("city", "state", "country")]
    return ", ".join(part for part in parts if part) or None


def to_contact(person: dict[str, Any]) -> EnrichedContact:
    organization = person.get("organization") or {}
    return EnrichedContact(
        id=str(person.get("id", "")),
        name=_contact_name(person),
        first_name=person.get("first_name"),
        last_name=person.get("last_name"),
        email=person.get("email") or "",
        title=person.get("title"),
        company=person.get("organization_name") or organization.get("name") or "Unknown",
        linkedin_url=person.get("linkedin_url"),
        location=_contact_location(person),
    )


@define_node(
    type="search_contacts",
    name="Search Contacts",
    description="Find contacts by job title, company size and location using Apollo",
    category=NodeCategory.INTEGRATION,
    input_schema=SearchContactsInput,
    output_schema=SearchContactsOutput,
    estimated_duration=5,
    capabilities=NodeCapabilities(
        supports_enrichment=True,
        supports_bulk_actions=True,
        supports_rerun=True,
    ),
)
async def search_contacts_node(input: SearchContactsInput, context: ExecutionContext) -> NodeResult:
    apollo = context.get_service("apollo")
    if apollo is None:
        return NodeResult.fail(
            "Apollo API key not configured. Please provide apollo credentials to use contact search."
        )

    try:
        results = await apollo.search_people(build_search_body(input))

        contacts: list[EnrichedContact] = []
        for person in results:
            try:
                enriched = await apollo.enrich_person(person["id"])
            except Exception as e:
                logger.warning(f"Skipping contact {person.get('id')}: {e}")
                continue
            if not enriched or not enriched.get("email"):
                continue
            contacts.append(to_contact(enriched))
            await asyncio.sleep(ENRICH_DELAY_S)

        logger.info(f"Enriched {len(contacts)} of {len(results)} Apollo results")
        return NodeResult.ok(SearchContactsOutput(contacts=contacts, total_found=len(results)))
    except Exception as e:
        return NodeResult.fail(str(e))
