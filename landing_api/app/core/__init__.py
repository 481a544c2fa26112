"""
Core infrastructure: configuration, logging, the shared-secret guard
and the in‑memory store.
"""
