"""
Pydantic schemas for whitelist entries.

A whitelist entry records one business email address submitted from
the landing page.  Entries are created once and never updated or
deleted.  Timestamps are exposed as ``createdAt`` on the wire to match
the front end; Python code uses ``created_at``.
"""

from datetime import datetime

from pydantic import BaseModel, EmailStr, Field


class WhitelistCreate(BaseModel):
    """Schema for submitting an email to the whitelist."""

    email: EmailStr = Field(..., description="Business email address", examples=["founder@example.com"])


class WhitelistEntry(BaseModel):
    """Schema for a stored whitelist entry."""

    id: str
    email: str
    created_at: datetime = Field(..., alias="createdAt")

    model_config = {
        "populate_by_name": True,
    }


class WhitelistSubmitResponse(BaseModel):
    """Body returned after a successful submission."""

    message: str = "Successfully added to whitelist"
    email: WhitelistEntry
