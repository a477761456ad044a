"""Prompts and output cleanup for personalized outreach emails."""

from __future__ import annotations

import re

EMAIL_BODY_PROMPT = """Write a short, personalized cold outreach email.

Recipient:
- Name: {name}
- Title: {title}
- Company: {company}

Sender: {sender_name}

Product: {product_description}
{template_section}
Rules:
- Maximum 120 words
- Plain text only, no markdown
- Do not include a subject line
- Start with a greeting using the recipient's first name
- End with a sign-off from the sender
- One clear call to action

Return only the email body."""

EMAIL_SUBJECT_PROMPT = """Write a subject line for this cold email to {name} at {company}.

Email:
{body}

Rules:
- Maximum 8 words
- No quotes, no emojis
- Do not start with "Re:" or "Subject:"

Return only the subject line."""

_SUBJECT_PREFIX = re.compile(r"^(subject|re)\s*:\s*", re.IGNORECASE)
_BODY_PREFIX = re.compile(r"^(here('s| is) (the|your) email[^\n]*:?\s*\n+)", re.IGNORECASE)


def build_email_prompt(
    *,
    name: str,
    title: str | None,
    company: str | None,
    sender_name: str,
    product_description: str,
    email_template: str | None = None,
) -> str:
    template_section = ""
    if email_template:
        template_section = f"\nFollow the tone and structure of this template:\n{email_template}\n"
    return EMAIL_BODY_PROMPT.format(
        name=name,
        title=title or "Unknown",
        company=company or "their company",
        sender_name=sender_name,
        product_description=product_description,
        template_section=template_section,
    )


def build_subject_prompt(*, name: str, company: str | None, body: str) -> str:
    return EMAIL_SUBJECT_PROMPT.format(name=name, company=company or "their company", body=body)


def clean_email_body(text: str) -> str:
    """Strip model preamble, markdown emphasis and a leading subject line."""
    body = _BODY_PREFIX.sub("", text.strip())
    lines = body.splitlines()
    if lines and _SUBJECT_PREFIX.match(lines[0]):
        body = "\n".join(lines[1:])
    body = body.replace("**", "")
    return body.strip()


def clean_subject_line(text: str) -> str:
    lines = [line for line in text.strip().splitlines() if line.strip()]
    subject = lines[0] if lines else ""
    subject = _SUBJECT_PREFIX.sub("", subject.strip())
    return subject.strip().strip("\"'*").strip()
