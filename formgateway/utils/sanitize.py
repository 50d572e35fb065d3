"""Input sanitization for submitted form data"""
from typing import Any

import bleach


def sanitize_text(value: str) -> str:
    """
    Strip all markup from a submitted string.

    No tags are allowed through. bleach escapes the leftover text; only
    ``<`` stays escaped, so ampersands and ``>`` keep their literal
    length and reach the record unchanged.
    """
    cleaned = bleach.clean(value, tags=[], attributes={}, strip=True, strip_comments=True)
    # &gt; before &amp; so "&amp;gt;" is not unescaped twice
    return cleaned.replace("&gt;", ">").replace("&amp;", "&")


def sanitize_payload(data: Any) -> Any:
    """Recursively sanitize every string in a parsed JSON document"""
    if isinstance(data, str):
        return sanitize_text(data)
    if isinstance(data, dict):
        return {key: sanitize_payload(value) for key, value in data.items()}
    if isinstance(data, list):
        return [sanitize_payload(item) for item in data]
    return data
