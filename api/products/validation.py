"""
Client-facing messages for product request validation.

FastAPI/pydantic run the rules declared in `schemas.py` and on the router's
path parameters, collecting every failing field. This module maps each
failure (field + pydantic error type) to a message; "*" is the per-field
fallback.
"""

from __future__ import annotations

from typing import Any

MESSAGES: dict[str, dict[str, str]] = {
    "product_id": {
        "*": "Invalid id",
    },
    "name": {
        "string_too_long": "Product name must be at most 100 characters",
        "*": "Product name cannot be empty",
    },
    "price": {
        "missing": "Price cannot be empty",
        "greater_than": "Enter a valid price greater than 0",
        "*": "Invalid price value",
    },
    "availability": {
        "*": "Invalid availability value",
    },
}

INVALID_BODY_MESSAGE = "Invalid request body"


def message_for(field: str | None, error_type: str | None) -> str | None:
    rules = MESSAGES.get(field or "")
    if rules is None:
        return None
    return rules.get(error_type or "", rules["*"])


def describe_error(error: dict[str, Any]) -> dict[str, Any]:
    """
    Turn one pydantic error dict into {"location", "field", "message"}.
    """
    loc = tuple(error.get("loc") or ())
    location = str(loc[0]) if loc else "request"
    # loc[1] is an int offset for malformed JSON, a field name otherwise.
    field = loc[1] if len(loc) > 1 and isinstance(loc[1], str) else None

    message = message_for(field, error.get("type"))
    if message is None:
        message = INVALID_BODY_MESSAGE if location == "body" else str(error.get("msg") or "Invalid value")

    return {"location": location, "field": field, "message": message}
