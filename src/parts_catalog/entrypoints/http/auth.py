"""Admin session verification.

Issuing and revoking admin sessions happens elsewhere; this module only
checks whether a request carries a valid admin token, which raises the
page-size cap of the listing endpoints.
"""

from __future__ import annotations

import logging

from fastapi import Request
from jose import JWTError, jwt

from parts_catalog.infra import config

logger = logging.getLogger(__name__)

ADMIN_COOKIE = "admin_token"
ADMIN_ROLES = frozenset({"admin", "superadmin"})
ALGORITHMS = ["HS256"]


def verify_admin_token(token: str | None, secret: str | None) -> bool:
    """
    True if token is a JWT signed with secret whose role claim is an admin role.

    Expired, tampered or otherwise undecodable tokens are simply not admin.
    """
    if not token or not secret:
        return False
    try:
        claims = jwt.decode(token, secret, algorithms=ALGORITHMS)
    except JWTError:
        logger.info("Rejected admin token", extra={"reason": "invalid_token"})
        return False
    return claims.get("role") in ADMIN_ROLES


def is_admin_request(request: Request) -> bool:
    return verify_admin_token(request.cookies.get(ADMIN_COOKIE), config.admin_jwt_secret())


def max_page_limit(request: Request) -> int:
    """Page-size cap for this request's privilege level."""
    if is_admin_request(request):
        return config.admin_max_limit()
    return config.public_max_limit()
