from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

import httpx

from .config_types import DEFAULT_MIMETYPES, Mimetypes
from .errors import ApiError, AuthError, ConfluenceClientError, NetworkError

UNKNOWN_STATUS_MESSAGE = "Unknown Error"


@dataclass(frozen=True)
class NormalizedResult:
    """Outcome of one operation: exactly one of ``error`` / ``data`` is set."""

    error: ConfluenceClientError | None = None
    data: Any = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Any:
        if self.error is not None:
            raise self.error
        return self.data


def _content_type(response: httpx.Response) -> str:
    return response.headers.get("content-type", "").replace(" ", "").lower()


def _matches(content_type: str, candidates: tuple[str, ...]) -> bool:
    if not content_type:
        return False
    base = content_type.split(";", 1)[0]
    for candidate in candidates:
        c = candidate.replace(" ", "").lower()
        if content_type == c or base == c.split(";", 1)[0]:
            return True
    return False


def parse_body(response: httpx.Response, mimetypes: Mimetypes | None = None) -> Any:
    mt = mimetypes or DEFAULT_MIMETYPES
    if not response.content:
        return None

    ctype = _content_type(response)
    if _matches(ctype, mt.json) or ctype.split(";", 1)[0].endswith("+json"):
        try:
            return response.json()
        except (json.JSONDecodeError, UnicodeDecodeError):
            return response.text
    if _matches(ctype, mt.xml) or ctype.startswith("text/"):
        return response.text
    return response.content


def _is_empty(body: Any) -> bool:
    return body is None or (isinstance(body, (str, bytes)) and not body)


def normalize_response(
        transport_error: BaseException | None,
        body: Any = None,
        response: httpx.Response | None = None,
) -> NormalizedResult:
    if transport_error is not None:
        if isinstance(transport_error, NetworkError):
            err = transport_error
        else:
            err = NetworkError(str(transport_error) or type(transport_error).__name__)
            err.__cause__ = transport_error
        if err.status_code is None:
            err.status_code = 500
        return NormalizedResult(error=err)

    if response is None:
        return NormalizedResult(error=NetworkError("no response received", status_code=500))

    status_code = response.status_code
    status_message = response.reason_phrase or UNKNOWN_STATUS_MESSAGE

    if status_code > 300:
        details = None if _is_empty(body) else body
        if status_code in (401, 403):
            return NormalizedResult(error=AuthError(status_code, status_message, details))
        return NormalizedResult(error=ApiError(status_code, status_message, details))

    if _is_empty(body):
        return NormalizedResult(data={"code": status_code, "message": status_message})

    return NormalizedResult(data=body)
