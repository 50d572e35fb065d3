"""Gateway exceptions and their HTTP mapping"""
from typing import List, Optional
import logging
import traceback

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from formgateway.models.forms import FieldViolation

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "An error occurred"


class GatewayError(Exception):
    """
    Base exception for the form gateway.

    Carries the HTTP status the centralized handler responds with.
    """

    status_code: int = 500

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class FormValidationError(GatewayError):
    """One or more field violations; answered with 400 by the form routes"""

    status_code = 400

    def __init__(self, violations: List[FieldViolation]):
        super().__init__(f"{len(violations)} field violation(s)")
        self.violations = violations


class DeliveryError(GatewayError):
    """The outbound transport failed to accept a message"""

    status_code = 500

    def __init__(self, message: str, recipient: Optional[str] = None):
        super().__init__(message)
        self.recipient = recipient


class MalformedRequestError(GatewayError):
    """Request body is too large, not JSON, or not a JSON object"""

    status_code = 400


class NotFoundError(GatewayError):
    """No route matches the request"""

    status_code = 404

    def __init__(self):
        super().__init__("Route not found")


def error_body(request: Request, message: str) -> dict:
    """Build the client-facing error body, redacted in production"""
    if request.app.state.settings.is_production:
        return {"error": GENERIC_ERROR_MESSAGE}
    return {"error": message}


async def gateway_exception_handler(request: Request, exc: GatewayError) -> JSONResponse:
    """Log a gateway error with request context and answer with its status"""
    if isinstance(exc, NotFoundError):
        return JSONResponse(status_code=404, content={"error": exc.message})

    if exc.status_code >= 500:
        logger.error(
            f"Error: {exc.message} (path={request.url.path}, method={request.method})"
        )
        logger.error("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)))
    else:
        logger.warning(
            f"Rejected request: {exc.message} (path={request.url.path}, method={request.method})"
        )

    return JSONResponse(status_code=exc.status_code, content=error_body(request, exc.message))


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Map framework HTTP errors onto the gateway's error body"""
    # Unknown paths and known paths with the wrong method are both "not found"
    if exc.status_code in (404, 405):
        return await gateway_exception_handler(request, NotFoundError())

    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )
