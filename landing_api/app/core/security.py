"""
Access helpers for the whitelist read endpoint.

The site owner reads the collected emails by passing a shared secret
in the ``password`` query parameter.  This is a placeholder gate kept
for compatibility with the existing admin workflow; it offers no
protection beyond obscurity and should be replaced by real
authentication before the whitelist holds anything sensitive.
"""

import hmac
import logging
from typing import Optional

from fastapi import HTTPException, Query, Request, status

logger = logging.getLogger(__name__)

ACCESS_DENIED_DETAIL = "Access denied. Password required to view whitelist emails."


def check_shared_secret(candidate: Optional[str], secret: str) -> bool:
    """Return ``True`` if ``candidate`` matches ``secret``.

    Empty candidates never match, even when the configured secret is
    empty.  The comparison is constant‑time.
    """
    if not candidate or not secret:
        return False
    return hmac.compare_digest(candidate.encode("utf-8"), secret.encode("utf-8"))


def require_whitelist_password(
    request: Request,
    password: Optional[str] = Query(None, description="Shared secret for reading the whitelist"),
) -> None:
    """Dependency that rejects whitelist reads without the shared secret.

    The secret is taken from the settings attached to the running
    application so that tests can build apps with their own value.
    Raises HTTP 401 when the password is missing or wrong.
    """
    secret = request.app.state.settings.whitelist_password
    if not check_shared_secret(password, secret):
        logger.warning("Rejected whitelist read from %s", request.client.host if request.client else "unknown")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=ACCESS_DENIED_DETAIL)
