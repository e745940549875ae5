from __future__ import annotations

from typing import NoReturn

import typer
from confluence_client import ConfluenceClient
from confluence_client.config_types import ClientConfig
from confluence_client.errors import ApiError, ConfigurationError, ConfluenceClientError
from confluence_client.errors_utils import error_message

from . import __version__, console
from .config import AppConfig, apply_env, load_config, normalize_base_url

USER_AGENT = f"confluence-cli/{__version__}"


def make_client(
        cfg: AppConfig,
        *,
        base_url_override: str | None,
) -> ConfluenceClient:
    effective_cfg = apply_env(cfg)
    base_url = normalize_base_url(base_url_override or effective_cfg.base_url, warn=True)
    return ConfluenceClient(
        ClientConfig(
            base_url=base_url,
            user=effective_cfg.auth.user,
            password=effective_cfg.auth.password,
            timeout_s=effective_cfg.timeout_s,
            user_agent=USER_AGENT,
        )
    )


def open_client(base_url_override: str | None) -> ConfluenceClient:
    """Load the local config and build a client, exiting with code 2 when it is incomplete."""
    cfg = load_config()
    try:
        return make_client(cfg, base_url_override=base_url_override)
    except ConfigurationError as e:
        console.err(str(e))
        console.info("Run 'confluence settings init' or set CONFLUENCE_BASE_URL/CONFLUENCE_USER/CONFLUENCE_PASSWORD.")
        raise typer.Exit(code=2)


def fail(action: str, exc: ConfluenceClientError) -> NoReturn:
    if isinstance(exc, ApiError) and exc.status_code in (401, 403):
        console.err("Unauthorized. Check the user and password (API token) in your settings.")
        raise typer.Exit(code=2)
    console.err(f"{action}: {error_message(exc)}")
    raise typer.Exit(code=2)
