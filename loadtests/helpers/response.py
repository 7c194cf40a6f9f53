"""Response error extraction for load test observability.

Parses Nexora API error responses into human-readable messages.
Handles two response shapes:

- Request validation (400): {"message": "...", "errors": [{"field": "...", "message": "..."}]}
- Everything else: {"message": "..."} with an optional "error" detail
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from requests import Response


def extract_error_detail(response: Response) -> str:
    """Extract a human-readable error message from an API error response."""
    try:
        body = response.json()
    except ValueError:
        text = getattr(response, "text", "") or ""
        return text[:300] or "(empty response body)"

    if not isinstance(body, dict):
        return str(body)[:300]

    message = str(body.get("message", ""))
    if isinstance(body.get("errors"), list):
        parts = [f"{err.get('field')}: {err.get('message')}" for err in body["errors"]]
        return f"{message}: {' | '.join(parts)}" if message else " | ".join(parts)

    if "error" in body:
        return f"{message}: {body['error']}" if message else str(body["error"])

    return message or str(body)[:300]
