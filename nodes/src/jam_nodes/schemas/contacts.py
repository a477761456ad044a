"""Contact models shared by contact search and email drafting."""

from __future__ import annotations

from pydantic import BaseModel


class Contact(BaseModel):
    """A person to reach out to."""

    id: str
    name: str
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    title: str | None = None
    company: str | None = None
    linkedin_url: str | None = None
    location: str | None = None


class EnrichedContact(Contact):
    """A contact whose email and company are known."""

    email: str
    company: str
