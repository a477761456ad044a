"""Draft personalized outreach emails for a list of contacts."""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Literal

from pydantic import BaseModel

from jam_core import ExecutionContext, NodeCapabilities, NodeCategory, NodeResult, define_node
from jam_nodes.prompts import build_email_prompt, build_subject_prompt, clean_email_body, clean_subject_line
from jam_nodes.schemas import Contact

logger = logging.getLogger(__name__)

BODY_MAX_TOKENS = 250
SUBJECT_MAX_TOKENS = 50
DRAFT_DELAY_S = 0.2


class DraftEmailsInput(BaseModel):
    contacts: list[Contact]
    product_description: str
    email_template: str | None = None


class DraftEmail(BaseModel):
    id: str
    to_email: str
    to_name: str
    to_company: str
    to_title: str
    subject: str
    body: str
    status: Literal["draft"] = "draft"


class DraftEmailsOutput(BaseModel):
    emails: list[DraftEmail]
    drafted_count: int


async def draft_email(anthropic, contact: Contact, input: DraftEmailsInput, sender_name: str) -> DraftEmail:
    raw_body = await anthropic.generate_text(
        build_email_prompt(
            name=contact.name,
            title=contact.title,
            company=contact.company,
            sender_name=sender_name,
            product_description=input.product_description,
            email_template=input.email_template,
        ),
        max_tokens=BODY_MAX_TOKENS,
    )
    body = clean_email_body(raw_body)

    raw_subject = await anthropic.generate_text(
        build_subject_prompt(name=contact.name, company=contact.company, body=body),
        max_tokens=SUBJECT_MAX_TOKENS,
    )

    return DraftEmail(
        id=f"draft-{contact.id}-{int(time.time() * 1000)}",
        to_email=contact.email or "",
        to_name=contact.name,
        to_company=contact.company or "",
        to_title=contact.title or "",
        subject=clean_subject_line(raw_subject),
        body=body,
    )


@define_node(
    type="draft_emails",
    name="Draft Emails",
    description="Generate personalized email drafts for contacts using AI",
    category=NodeCategory.ACTION,
    input_schema=DraftEmailsInput,
    output_schema=DraftEmailsOutput,
    estimated_duration=30,
    capabilities=NodeCapabilities(supports_rerun=True, supports_bulk_actions=True),
)
async def draft_emails_node(input: DraftEmailsInput, context: ExecutionContext) -> NodeResult:
    anthropic = context.get_service("anthropic")
    if anthropic is None:
        return NodeResult.fail(
            "Anthropic API key not configured. Please provide anthropic credentials."
        )

    sender_name = context.variables.get("sender_name")
    if not sender_name:
        return NodeResult.fail(
            "Please set sender_name in context.variables before creating email campaigns."
        )

    try:
        emails: list[DraftEmail] = []
        for contact in input.contacts:
            if not contact.email:
                continue
            try:
                emails.append(await draft_email(anthropic, contact, input, sender_name))
            except Exception as e:
                logger.warning(f"Skipping draft for contact {contact.id}: {e}")
                continue
            await asyncio.sleep(DRAFT_DELAY_S)

        return NodeResult.ok(DraftEmailsOutput(emails=emails, drafted_count=len(emails)))
    except Exception as e:
        return NodeResult.fail(str(e))
