"""
API package containing the HTTP routes.

The ``router`` module exposes a top‑level ``router`` which includes
the whitelist and content endpoints.  The application mounts it under
the ``/api`` prefix expected by the landing page front end.
"""
