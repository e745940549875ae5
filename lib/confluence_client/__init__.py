from .client import ConfluenceClient, create_client
from .config_types import ClientConfig, Mimetypes, ProxyConfig
from .errors import (
    ApiError,
    AuthError,
    ConfigurationError,
    ConfluenceClientError,
    MissingPathParameter,
    NetworkError,
)
from .response import NormalizedResult

__all__ = [
    "ConfluenceClient",
    "create_client",
    "ClientConfig",
    "Mimetypes",
    "ProxyConfig",
    "ApiError",
    "AuthError",
    "ConfigurationError",
    "ConfluenceClientError",
    "MissingPathParameter",
    "NetworkError",
    "NormalizedResult",
]
