"""
Pydantic schemas for site content sections.

Each section of the landing page (hero, about, solutions, team) is
stored as a free‑form JSON document under its section name.  The
document shape is section specific; the ``*Content`` models below
describe the shapes the page renders and are used to validate writes
to the known sections.  Unknown sections accept any document made of
strings and nested objects.
"""

from datetime import datetime
from typing import Any, Dict

from pydantic import BaseModel, Field, field_validator


def check_document(value: Any, path: str = "content") -> None:
    """Raise ``ValueError`` unless ``value`` is a nested mapping of strings."""
    if not isinstance(value, dict):
        raise ValueError(f"{path} must be an object")
    for key, item in value.items():
        if isinstance(item, dict):
            check_document(item, f"{path}.{key}")
        elif not isinstance(item, str):
            raise ValueError(f"{path}.{key} must be a string or an object")


class ContentUpdate(BaseModel):
    """Schema for replacing the document of a section."""

    content: Dict[str, Any] = Field(..., description="Section document")

    @field_validator("content")
    @classmethod
    def validate_content(cls, v):
        check_document(v)
        return v


class ContentSection(BaseModel):
    """Schema for a stored content section."""

    id: str
    section: str
    content: Dict[str, Any]
    updated_at: datetime = Field(..., alias="updatedAt")

    model_config = {
        "populate_by_name": True,
    }


class HeroContent(BaseModel):
    title: str
    tagline: str


class AboutContent(BaseModel):
    heading: str
    description: str
    mission: str
    values: str


class SolutionCard(BaseModel):
    title: str
    description: str
    benefit: str


class SolutionsContent(BaseModel):
    heading: str
    subheading: str
    payment: SolutionCard
    bridging: SolutionCard
    compliance: SolutionCard


class TeamMember(BaseModel):
    name: str
    role: str
    bio: str


class TeamContent(BaseModel):
    """Team section; ``kirill`` holds the founder card shown on the page.

    Only the ``footerNote`` key is accepted; the page reads nothing else.
    """

    heading: str
    subheading: str
    kirill: TeamMember
    footer_note: str = Field(..., alias="footerNote")
