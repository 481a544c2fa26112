"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  The whitelist and the editable site content each live in
their own service and expose a router defined in ``api/endpoints``.
"""

from .main import app  # noqa: F401
