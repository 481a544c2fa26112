"""
Pydantic schema definitions for API payloads.

Whitelist entries and content sections define their own Pydantic
models for request and response bodies.  The store hands out these
models directly, so the API representation and the in‑memory records
share one definition.
"""
