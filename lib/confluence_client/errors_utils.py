from __future__ import annotations

import json
from typing import Any

from .errors import ApiError, ConfluenceClientError


def parse_api_error_detail(details: Any) -> dict | None:
    if isinstance(details, dict):
        return details
    if isinstance(details, bytes):
        details = details.decode("utf-8", errors="replace")
    if not details or not isinstance(details, str):
        return None
    try:
        data = json.loads(details)
    except ValueError:
        return None
    return data if isinstance(data, dict) else None


def error_message(exc: ConfluenceClientError) -> str:
    """Human readable message, preferring the server's own explanation."""
    if isinstance(exc, ApiError):
        payload = parse_api_error_detail(exc.details)
        remote = str(payload.get("message") or "").strip() if payload else ""
        if remote:
            return f"{exc.status_code} {exc.message}: {remote}"
        return f"{exc.status_code} {exc.message}"
    status_code = getattr(exc, "status_code", None)
    if status_code:
        return f"{status_code} {exc}"
    return str(exc)
