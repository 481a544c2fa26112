"""
Site content endpoints.

The landing page fetches each section's document by name.  Editors
replace a document with ``PUT``; the first write to an unknown section
creates it.  Documents for the known sections are validated against
their schema and rejected with HTTP 400 when they do not match.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from landing_api.app.core.store import InMemoryStore, get_store
from landing_api.app.schemas.content import ContentSection, ContentUpdate
from landing_api.app.services.content_service import ContentService

router = APIRouter()


@router.get("", response_model=List[ContentSection])
async def list_sections(store: InMemoryStore = Depends(get_store)) -> List[ContentSection]:
    """Return every content section."""
    return await ContentService.list_sections(store)


@router.get("/{section}", response_model=ContentSection)
async def get_section(section: str, store: InMemoryStore = Depends(get_store)) -> ContentSection:
    """Retrieve a single section by name.

    Returns HTTP 404 if the section has never been written.
    """
    record = await ContentService.get_section(store, section)
    if record is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Content section not found")
    return record


@router.put("/{section}", response_model=ContentSection)
async def update_section(
    section: str,
    data: ContentUpdate,
    store: InMemoryStore = Depends(get_store),
) -> ContentSection:
    """Create or replace the document of a section.

    A ``ContentValidationError`` raised by the service is turned into a
    400 response by the application's exception handler.
    """
    return await ContentService.update_section(store, section, data.content)
