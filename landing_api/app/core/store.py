"""
In‑memory store for whitelist entries and site content.

The store is the only owner of application state.  It keeps two
collections, whitelist entries and content sections, each in an
insertion‑ordered dictionary keyed by a generated id.  Content sections
also have a secondary index from section name to id so that upserts
always hit the same record.

Nothing is persisted: a restart loses every whitelist entry and
reverts content to ``DEFAULT_CONTENT``.  The store performs no I/O and
no locking; concurrent writers simply race, the last upsert wins and
whitelist creation always appends.  Email uniqueness is the caller's
job (see ``WhitelistService.submit_email``).

``init_store`` seeds the default sections and must run before the
application starts serving requests.
"""

import copy
import logging
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from fastapi import Request

from landing_api.app.schemas.content import ContentSection
from landing_api.app.schemas.whitelist import WhitelistEntry

logger = logging.getLogger(__name__)


def _now() -> datetime:
    return datetime.now(timezone.utc)


class InMemoryStore:
    """Process‑lifetime store for whitelist entries and content sections.

    Records handed out by the store are copies; mutating them has no
    effect on stored state.
    """

    def __init__(self) -> None:
        self._whitelist: Dict[str, WhitelistEntry] = {}
        self._sections: Dict[str, ContentSection] = {}
        self._section_ids: Dict[str, str] = {}

    # ------------------------------------------------------------------
    # Whitelist
    # ------------------------------------------------------------------
    def create_whitelist_entry(self, email: str) -> WhitelistEntry:
        """Append a new entry for ``email`` and return it.

        No uniqueness check is made here: inserting the same address
        twice produces two entries with distinct ids.
        """
        entry = WhitelistEntry(id=str(uuid.uuid4()), email=email, created_at=_now())
        self._whitelist[entry.id] = entry
        return entry.model_copy()

    def list_whitelist_entries(self) -> List[WhitelistEntry]:
        """Return a snapshot of all entries in insertion order."""
        return [entry.model_copy() for entry in self._whitelist.values()]

    # ------------------------------------------------------------------
    # Content sections
    # ------------------------------------------------------------------
    def get_content_section(self, section: str) -> Optional[ContentSection]:
        """Return the record for ``section`` or ``None``.

        Matching is exact; no case folding or trimming is applied.
        """
        section_id = self._section_ids.get(section)
        if section_id is None:
            return None
        return self._sections[section_id].model_copy(deep=True)

    def upsert_content_section(self, section: str, content: Dict[str, Any]) -> ContentSection:
        """Create or replace the document stored for ``section``.

        An existing record keeps its ``id`` and ``section``; its
        ``content`` is replaced and ``updated_at`` refreshed.  Otherwise
        a new record is created.  Either way exactly one record exists
        for ``section`` afterwards.
        """
        document = copy.deepcopy(content)
        section_id = self._section_ids.get(section)
        if section_id is not None:
            current = self._sections[section_id]
            # never move updated_at backwards, even if the wall clock does
            updated_at = max(_now(), current.updated_at)
            record = current.model_copy(update={"content": document, "updated_at": updated_at})
        else:
            record = ContentSection(id=str(uuid.uuid4()), section=section, content=document, updated_at=_now())
            self._section_ids[section] = record.id
        self._sections[record.id] = record
        return record.model_copy(deep=True)

    def list_content_sections(self) -> List[ContentSection]:
        """Return a snapshot of all sections in first‑creation order."""
        return [record.model_copy(deep=True) for record in self._sections.values()]


# Default documents for the landing page, applied in this order at startup.
DEFAULT_CONTENT: List[Dict[str, Any]] = [
    {
        "section": "hero",
        "content": {
            "title": "BridgeGas",
            "tagline": "Bridging TradFi & Crypto Payment Solutions",
        },
    },
    {
        "section": "about",
        "content": {
            "heading": "Who We Are",
            "description": (
                "BridgeGas is a pioneering B2B crypto startup revolutionizing how traditional businesses "
                "interact with blockchain technology. We specialize in creating seamless bridges between "
                "conventional financial systems and the emerging cryptocurrency ecosystem."
            ),
            "mission": (
                "Our mission is to eliminate the complexity and risk barriers that prevent enterprises from "
                "adopting crypto payment solutions, enabling them to unlock new revenue streams and "
                "operational efficiencies."
            ),
            "values": (
                "Built on principles of trust, innovation, and enterprise-grade reliability, BridgeGas "
                "empowers businesses to navigate the future of finance with confidence and security."
            ),
        },
    },
    {
        "section": "solutions",
        "content": {
            "heading": "Our Solutions",
            "subheading": (
                "Comprehensive crypto payment infrastructure designed for enterprise adoption and scalability"
            ),
            "payment": {
                "title": "Crypto Payment Gateway",
                "description": (
                    "Seamlessly integrate cryptocurrency payments into your existing infrastructure with our "
                    "secure, enterprise-grade gateway solution."
                ),
                "benefit": (
                    "Reduce transaction fees by up to 70% while expanding your customer base to the growing "
                    "crypto economy."
                ),
            },
            "bridging": {
                "title": "On-chain/Off-chain Bridging",
                "description": (
                    "Advanced bridging technology that connects traditional banking systems with blockchain "
                    "networks for fluid value transfer."
                ),
                "benefit": (
                    "Enable instant settlements and 24/7 operations while maintaining full compatibility "
                    "with existing financial workflows."
                ),
            },
            "compliance": {
                "title": "Enterprise-Grade Compliance",
                "description": (
                    "Comprehensive regulatory compliance suite including AML/KYC, audit trails, and "
                    "real-time monitoring for institutional standards."
                ),
                "benefit": (
                    "Meet regulatory requirements while accessing crypto markets with confidence and "
                    "complete transparency."
                ),
            },
        },
    },
    {
        "section": "team",
        "content": {
            "heading": "Our Team",
            "subheading": (
                "Led by experienced entrepreneurs and technical experts in fintech and blockchain technology"
            ),
            "kirill": {
                "name": "Kirill Shurakhtov",
                "role": "Founder & CEO",
                "bio": (
                    "Visionary leader with deep expertise in bridging traditional finance and blockchain "
                    "technology for enterprise adoption."
                ),
            },
            "footerNote": (
                "Our team is growing—your feedback and interest will help us build out the "
                "BridgeGas leadership."
            ),
        },
    },
]


def init_store(store: InMemoryStore) -> None:
    """Seed ``store`` with the default landing page sections.

    One upsert per section in the order of ``DEFAULT_CONTENT``.  Call
    this once at startup, before any request is handled; it is not
    re‑applied later, so edits made through the API survive until the
    process exits.
    """
    for item in DEFAULT_CONTENT:
        store.upsert_content_section(item["section"], item["content"])
    logger.info("Seeded %d default content sections", len(DEFAULT_CONTENT))


def get_store(request: Request) -> InMemoryStore:
    """FastAPI dependency returning the store owned by the running app."""
    return request.app.state.store
