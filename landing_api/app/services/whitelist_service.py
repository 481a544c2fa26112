"""
Service layer for the email whitelist.

Submissions are checked against the current entries before they are
stored: the service reads the full list, rejects an address that is
already present (exact, case‑sensitive match) and only then asks the
store to create the entry.  The read‑check‑write sequence is not
atomic, so two identical submissions racing each other can both be
stored.  The store does not guard against that either.

Addresses are stored in the form ``EmailStr`` returns: the local part
as typed, the domain lower‑cased.  Log lines only carry masked
addresses.
"""

import logging
from typing import List

from landing_api.app.core.store import InMemoryStore
from landing_api.app.schemas.whitelist import WhitelistCreate, WhitelistEntry

DUPLICATE_EMAIL_DETAIL = "Email already registered"


def mask_email(email: str) -> str:
    """Return ``email`` with all but the first local character hidden."""
    local, sep, domain = email.partition("@")
    if not sep:
        return "***"
    return f"{local[:1]}***@{domain}"


class WhitelistService:
    """Service for collecting whitelist emails."""

    @classmethod
    async def submit_email(cls, store: InMemoryStore, data: WhitelistCreate) -> WhitelistEntry:
        """Store a new whitelist entry and return it.

        Raises ``ValueError`` if the email is already on the whitelist.
        """
        logger = logging.getLogger(__name__)
        email = str(data.email)
        existing = store.list_whitelist_entries()
        if any(entry.email == email for entry in existing):
            logger.info("Duplicate whitelist submission for %s", mask_email(email))
            raise ValueError(DUPLICATE_EMAIL_DETAIL)
        entry = store.create_whitelist_entry(email)
        logger.info("Added whitelist entry %s (%s)", entry.id, mask_email(email))
        return entry

    @classmethod
    async def list_emails(cls, store: InMemoryStore) -> List[WhitelistEntry]:
        """Return every whitelist entry."""
        return store.list_whitelist_entries()
