"""Landing page API client.

This module defines a small client wrapper around the landing page
REST API.  It is used by operational scripts (see
``export_whitelist.py``) and can be used by a separate front end or a
content editing tool.  The client uses the ``requests`` library
internally.

The client exposes one method per endpoint:

* :meth:`submit_email` – add an email to the whitelist.
* :meth:`list_whitelist` – download the whitelist (needs the shared secret).
* :meth:`get_content` – fetch one content section.
* :meth:`update_content` – replace the document of a section.
* :meth:`list_content` – fetch every section.

Every method returns a tuple ``(data, error)``.  On success ``error``
is ``None``; on failure ``data`` is empty and ``error`` is a
dictionary with ``status_code`` and ``message`` keys.  No method
raises for HTTP or network errors.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class LandingAPI:
    """Client for interacting with the landing page API."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the server, e.g. ``https://example.com``.
                The ``/api`` prefix is added by the client.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per‑request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``).
            path: Path relative to ``/api`` (e.g. ``/content/hero``).
            params: Query parameters to include in the request.
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.
        """
        url = f"{self.base_url}/api{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("detail") or err_json.get("message") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Whitelist
    # ------------------------------------------------------------------
    def submit_email(self, email: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Add ``email`` to the whitelist.

        Returns:
            A tuple ``(entry, error)``.  ``entry`` is the stored record.
        """
        data, error = self._request("POST", "/whitelist", json_body={"email": email})
        if error:
            return None, error
        if isinstance(data, dict):
            return data.get("email"), None
        return None, None

    def list_whitelist(self, password: str) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Download every whitelist entry using the shared secret."""
        data, error = self._request("GET", "/whitelist", params={"password": password})
        if error:
            return [], error
        return (data if isinstance(data, list) else []), None

    # ------------------------------------------------------------------
    # Content
    # ------------------------------------------------------------------
    def get_content(self, section: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Fetch a single content section by name."""
        data, error = self._request("GET", f"/content/{section}")
        if error:
            return None, error
        return data, None

    def update_content(
        self, section: str, content: Dict[str, Any]
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Replace the document of ``section`` (creating it if needed)."""
        data, error = self._request("PUT", f"/content/{section}", json_body={"content": content})
        if error:
            return None, error
        return data, None

    def list_content(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Fetch every content section."""
        data, error = self._request("GET", "/content")
        if error:
            return [], error
        return (data if isinstance(data, list) else []), None
