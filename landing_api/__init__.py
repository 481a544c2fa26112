"""
Top‑level package for the Landing Page API.

This file makes ``landing_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``landing_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
