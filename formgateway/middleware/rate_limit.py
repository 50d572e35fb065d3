"""Per-client rate limiting for the form submission routes"""
from typing import Iterable

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address
import logging

from formgateway.config import Settings

logger = logging.getLogger(__name__)

RATE_LIMIT_MESSAGE = "Too many requests from this IP, please try again later."


def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    """Reject a request that exceeded its window"""
    # Must stay synchronous: SlowAPIMiddleware ignores coroutine handlers
    logger.warning(
        f"Rate limit exceeded for {get_remote_address(request)} on {request.url.path} ({exc.detail})"
    )
    return JSONResponse(status_code=429, content={"error": RATE_LIMIT_MESSAGE})


def setup_rate_limiting(app: FastAPI, settings: Settings, limited_paths: Iterable[str]) -> Limiter:
    """
    Attach a per-app limiter that applies ``settings.rate_limit`` to each
    of ``limited_paths`` separately, keyed by client address.

    The check runs in middleware, ahead of body parsing, so oversized or
    malformed bodies are counted and rejected like any other request.
    Call after every router is included.
    """
    limiter = Limiter(
        key_func=get_remote_address,
        default_limits=[settings.rate_limit],
        strategy="moving-window",
        enabled=settings.rate_limit_enabled,
    )

    limited = set(limited_paths)
    for route in app.routes:
        if getattr(route, "path", None) not in limited and hasattr(route, "endpoint"):
            limiter.exempt(route.endpoint)

    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)
    return limiter
