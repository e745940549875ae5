from __future__ import annotations

import dataclasses
import os
import sys
import tomllib
from dataclasses import dataclass
from typing import Any

import tomli_w
from platformdirs import user_config_dir

from . import console

APP_NAME = "confluence"
CONFIG_FILENAME = "config.toml"
DEFAULT_TIMEOUT_S = 15.0

ENV_BASE_URL = "CONFLUENCE_BASE_URL"
ENV_USER = "CONFLUENCE_USER"
ENV_PASSWORD = "CONFLUENCE_PASSWORD"

_WARNED_BASE_URL_SCHEME = False


@dataclass
class AuthConfig:
    user: str = ""
    password: str = ""


@dataclass
class AppConfig:
    base_url: str
    auth: AuthConfig
    timeout_s: float = DEFAULT_TIMEOUT_S


def config_path() -> str:
    return f"{user_config_dir(APP_NAME)}/{CONFIG_FILENAME}"


def default_config() -> AppConfig:
    return AppConfig(base_url="", auth=AuthConfig(), timeout_s=DEFAULT_TIMEOUT_S)


def normalize_base_url(raw: str | None, *, warn: bool = False) -> str:
    value = (raw or "").strip()
    if not value:
        return ""
    value = value.rstrip("/")
    lowered = value.lower()
    if lowered.startswith("http://") or lowered.startswith("https://"):
        return value

    host = value.split("/", 1)[0]
    host = host.split(":", 1)[0].lower()
    if host in {"localhost", "127.0.0.1", "0.0.0.0"}:
        scheme = "http://"
    else:
        scheme = "https://"

    normalized = f"{scheme}{value}"
    if warn:
        _warn_missing_scheme(normalized)
    return normalized


def _warn_missing_scheme(normalized: str) -> None:
    global _WARNED_BASE_URL_SCHEME
    if _WARNED_BASE_URL_SCHEME:
        return
    if not (sys.stderr.isatty() or sys.stdout.isatty()):
        return
    console.warn(f"base_url missing scheme, assuming {normalized}")
    _WARNED_BASE_URL_SCHEME = True


def _parse_timeout(value: Any) -> float:
    try:
        timeout = float(value)
    except (TypeError, ValueError):
        return DEFAULT_TIMEOUT_S
    return timeout if timeout > 0 else DEFAULT_TIMEOUT_S


def to_toml(cfg: AppConfig) -> dict[str, Any]:
    return {
        "base_url": cfg.base_url,
        "timeout_s": float(cfg.timeout_s),
        "auth": {
            "user": cfg.auth.user,
            "password": cfg.auth.password,
        },
    }


def from_toml(data: dict[str, Any]) -> AppConfig:
    base_url = normalize_base_url(str(data.get("base_url") or ""), warn=True)
    auth_raw = data.get("auth") or {}
    user = ""
    password = ""
    if isinstance(auth_raw, dict):
        user = str(auth_raw.get("user") or "")
        password = str(auth_raw.get("password") or "")
    return AppConfig(
        base_url=base_url,
        auth=AuthConfig(user=user, password=password),
        timeout_s=_parse_timeout(data.get("timeout_s", DEFAULT_TIMEOUT_S)),
    )


def load_config() -> AppConfig:
    path = config_path()
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
        return from_toml(data)
    except FileNotFoundError:
        return default_config()


def apply_env(cfg: AppConfig) -> AppConfig:
    """Return a copy of ``cfg`` with CONFLUENCE_* environment values applied."""
    base_url = os.getenv(ENV_BASE_URL, "").strip()
    user = os.getenv(ENV_USER, "")
    password = os.getenv(ENV_PASSWORD, "")
    return AppConfig(
        base_url=normalize_base_url(base_url) if base_url else cfg.base_url,
        auth=dataclasses.replace(
            cfg.auth,
            user=user or cfg.auth.user,
            password=password or cfg.auth.password,
        ),
        timeout_s=cfg.timeout_s,
    )


def ensure_parent_dir(path: str) -> None:
    os.makedirs(os.path.dirname(path), exist_ok=True)


def save_config(cfg: AppConfig) -> str:
    path = config_path()
    ensure_parent_dir(path)
    with open(path, "wb") as f:
        f.write(tomli_w.dumps(to_toml(cfg)).encode("utf-8"))
    # holds the account password
    os.chmod(path, 0o600)
    return path
