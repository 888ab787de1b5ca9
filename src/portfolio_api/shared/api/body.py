"""JSON request body parsing for form-style endpoints."""

import json
from typing import Any, Dict

from fastapi import Request

from portfolio_api.core import MalformedBodyException


async def json_body(request: Request) -> Dict[str, Any]:
    """
    Parse the request body as a JSON object.

    Bodies that are empty, not JSON-typed, or not an object yield an empty
    mapping, so every required field is then reported by validation.
    Undecodable JSON raises MalformedBodyException.
    """
    content_type = request.headers.get("content-type", "")
    if "json" not in content_type.lower():
        return {}

    raw = await request.body()
    if not raw.strip():
        return {}

    try:
        payload = json.loads(raw)
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise MalformedBodyException("Invalid JSON payload", {"error": str(e)}) from e

    if not isinstance(payload, dict):
        return {}
    return payload
