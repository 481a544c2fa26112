"""
Service layer for editable site content.

Content is stored per page section.  Writes to the sections the page
knows how to render (hero, about, solutions, team) are validated
against the matching ``*Content`` schema before they reach the store;
other section names accept any document of strings and nested
objects.  The stored document is exactly what the client sent, extra
keys included.
"""

import logging
from typing import Any, Dict, List, Optional, Type

from pydantic import BaseModel, ValidationError

from landing_api.app.core.store import InMemoryStore
from landing_api.app.schemas.content import (
    AboutContent,
    ContentSection,
    HeroContent,
    SolutionsContent,
    TeamContent,
)

SECTION_SCHEMAS: Dict[str, Type[BaseModel]] = {
    "hero": HeroContent,
    "about": AboutContent,
    "solutions": SolutionsContent,
    "team": TeamContent,
}


def simplify_errors(errors: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Reduce pydantic error dicts to JSON‑safe ``loc``/``msg``/``type``."""
    return [
        {"loc": [str(part) for part in err.get("loc", ())], "msg": err.get("msg", ""), "type": err.get("type", "")}
        for err in errors
    ]


class ContentValidationError(ValueError):
    """Raised when a document does not match its section's schema."""

    def __init__(self, section: str, errors: List[Dict[str, Any]]) -> None:
        super().__init__(f"Invalid content for section '{section}'")
        self.section = section
        self.errors = errors


class ContentService:
    """Service for reading and replacing page sections."""

    @staticmethod
    def validate_content(section: str, content: Dict[str, Any]) -> None:
        """Check ``content`` against the schema registered for ``section``.

        Sections without a registered schema are accepted as is.
        """
        schema = SECTION_SCHEMAS.get(section)
        if schema is None:
            return
        try:
            schema.model_validate(content)
        except ValidationError as exc:
            raise ContentValidationError(section, simplify_errors(exc.errors())) from exc

    @classmethod
    async def get_section(cls, store: InMemoryStore, section: str) -> Optional[ContentSection]:
        """Return a section by name, or ``None`` if it does not exist."""
        return store.get_content_section(section)

    @classmethod
    async def update_section(cls, store: InMemoryStore, section: str, content: Dict[str, Any]) -> ContentSection:
        """Validate and upsert the document for ``section``."""
        logger = logging.getLogger(__name__)
        cls.validate_content(section, content)
        record = store.upsert_content_section(section, content)
        logger.info("Content section %s updated (id=%s)", section, record.id)
        return record

    @classmethod
    async def list_sections(cls, store: InMemoryStore) -> List[ContentSection]:
        """Return all sections."""
        return store.list_content_sections()
