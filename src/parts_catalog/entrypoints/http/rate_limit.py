"""Per-client request rate limiting for the HTTP API."""

import logging
from typing import Awaitable, Callable

from fastapi import FastAPI, Request, Response, status
from fastapi.responses import JSONResponse

from parts_catalog.infra.rate_limiter import FixedWindowRateLimiter

logger = logging.getLogger(__name__)

EXEMPT_PATHS = frozenset({"/health"})
WINDOW_SECONDS = 60


def client_identifier(request: Request) -> str:
    """
    Identify the caller by IP address.

    The first X-Forwarded-For entry wins, then X-Real-IP, then the socket peer.
    """
    forwarded = request.headers.get("x-forwarded-for", "")
    address = forwarded.split(",")[0].strip()
    if not address:
        address = request.headers.get("x-real-ip", "").strip()
    if not address and request.client is not None:
        address = request.client.host
    return f"ip:{address or 'unknown'}"


def register_rate_limit(
    app: FastAPI,
    limiter: FixedWindowRateLimiter,
    limit: int,
) -> None:
    """Install the rate limiting middleware. A limit of 0 installs nothing."""
    if limit <= 0:
        logger.info("Rate limiting disabled")
        return

    @app.middleware("http")
    async def enforce_rate_limit(
        request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        if request.url.path in EXEMPT_PATHS:
            return await call_next(request)

        identifier = client_identifier(request)
        decision = limiter.check(identifier, limit, WINDOW_SECONDS)
        headers = {
            "X-RateLimit-Limit": str(decision.limit),
            "X-RateLimit-Remaining": str(decision.remaining),
            "X-RateLimit-Reset": str(decision.reset_epoch),
        }

        if not decision.allowed:
            retry_after = max(1, decision.reset_epoch - limiter.now())
            logger.warning(
                "Rate limit exceeded",
                extra={
                    "client": identifier,
                    "path": request.url.path,
                    "method": request.method,
                    "retry_after": retry_after,
                },
            )
            return JSONResponse(
                status_code=status.HTTP_429_TOO_MANY_REQUESTS,
                content={"error": "Too many requests", "code": "RATE_LIMITED"},
                headers={**headers, "Retry-After": str(retry_after)},
            )

        response = await call_next(request)
        for name, value in headers.items():
            response.headers[name] = value
        return response

    logger.info("Rate limiting enabled", extra={"limit": limit, "window": WINDOW_SECONDS})
