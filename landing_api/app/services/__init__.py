"""
Service layer abstraction.

Each service encapsulates business logic for a domain.  Services
receive the store explicitly so that the in‑memory structures could
be swapped for a database without changing API handlers.
"""
