from __future__ import annotations

from typing import Any


class ConfluenceClientError(Exception):
    """Base client error."""


class ConfigurationError(ConfluenceClientError):
    """Invalid or missing client construction parameters."""


class MissingPathParameter(ConfluenceClientError, ValueError):
    def __init__(self, name: str, template: str | None = None):
        msg = f"missing path parameter '{name}'"
        if template:
            msg = f"{msg} for {template}"
        super().__init__(msg)
        self.name = name
        self.template = template


class NetworkError(ConfluenceClientError):
    """Transport/network layer error."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class ApiError(ConfluenceClientError):
    def __init__(self, status_code: int, message: str, details: Any = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.details = details


class AuthError(ApiError):
    """Auth-related API error."""
