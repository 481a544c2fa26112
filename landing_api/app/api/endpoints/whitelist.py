"""
Whitelist endpoints.

Visitors submit their business email from the landing page form.
The site owner lists collected emails by passing the shared secret as
a ``password`` query parameter.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from landing_api.app.core.security import require_whitelist_password
from landing_api.app.core.store import InMemoryStore, get_store
from landing_api.app.schemas.whitelist import WhitelistCreate, WhitelistEntry, WhitelistSubmitResponse
from landing_api.app.services.whitelist_service import WhitelistService

router = APIRouter()


@router.post("", response_model=WhitelistSubmitResponse, status_code=status.HTTP_201_CREATED)
async def submit_email(
    data: WhitelistCreate,
    store: InMemoryStore = Depends(get_store),
) -> WhitelistSubmitResponse:
    """Add an email to the whitelist.

    Returns HTTP 400 if the address is malformed or already registered.
    """
    try:
        entry = await WhitelistService.submit_email(store, data)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return WhitelistSubmitResponse(email=entry)


@router.get("", response_model=List[WhitelistEntry], dependencies=[Depends(require_whitelist_password)])
async def list_emails(store: InMemoryStore = Depends(get_store)) -> List[WhitelistEntry]:
    """Return all whitelist entries (requires the shared secret)."""
    return await WhitelistService.list_emails(store)
