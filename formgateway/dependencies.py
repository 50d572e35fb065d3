"""Request dependencies shared by the form routes"""
from typing import Any, Dict
import json
import logging

from fastapi import Request

from formgateway.exceptions import MalformedRequestError
from formgateway.services.form_handler import FormHandler
from formgateway.utils.sanitize import sanitize_payload

logger = logging.getLogger(__name__)


async def read_submission(request: Request) -> Dict[str, Any]:
    """
    Parse and sanitize a JSON form body

    Returns:
        The sanitized JSON object

    Raises:
        MalformedRequestError: If the body is too large, not JSON, or not an object
    """
    limit = request.app.state.settings.max_body_bytes

    declared = request.headers.get("content-length")
    if declared and declared.isdigit() and int(declared) > limit:
        raise MalformedRequestError("Request entity too large", status_code=413)

    body = await request.body()
    if len(body) > limit:
        raise MalformedRequestError("Request entity too large", status_code=413)

    if not body:
        data: Any = {}
    else:
        try:
            data = json.loads(body)
        except (json.JSONDecodeError, UnicodeDecodeError):
            raise MalformedRequestError("Invalid JSON payload")

    if not isinstance(data, dict):
        raise MalformedRequestError("Request body must be a JSON object")

    return sanitize_payload(data)


def get_form_handler(form_key: str):
    """Dependency factory returning the app's handler for one form type"""

    def _handler(request: Request) -> FormHandler:
        return request.app.state.form_handlers[form_key]

    return _handler
