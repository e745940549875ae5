from __future__ import annotations

import os

import typer

from .. import console
from ..config import config_path, default_config, load_config, normalize_base_url, save_config

app = typer.Typer(help="Manage local CLI settings (~/.config/confluence/config.toml).")

_KEYS = ("base_url", "user", "timeout_s")


@app.command("init")
def init_settings(
        force: bool = typer.Option(False, "--force", help="Overwrite existing config."),
        base_url: str = typer.Option(
            ...,
            "--base-url",
            prompt="Confluence REST base URL",
            help="REST base URL like https://example.atlassian.net/wiki/rest/api",
        ),
        user: str = typer.Option(..., "--user", prompt="User (email)", help="Account user name or email."),
        password: str = typer.Option(
            ...,
            "--password",
            prompt="Password or API token",
            hide_input=True,
            help="Account password or API token.",
        ),
):
    path = config_path()
    if os.path.exists(path) and not force:
        console.info(f"Config already exists: {path}")
        console.info("Use --force to overwrite.")
        return

    cfg = default_config()
    cfg.base_url = normalize_base_url(base_url, warn=True)
    if not cfg.base_url:
        console.err("Base URL cannot be empty.")
        raise typer.Exit(code=2)
    cfg.auth.user = user.strip()
    cfg.auth.password = password
    saved = save_config(cfg)
    console.ok(f"Config written: {saved}")


@app.command("show")
def show_settings():
    cfg = load_config()
    password_state = "(set)" if cfg.auth.password else "(empty)"
    console.console.print(
        f"base_url={cfg.base_url or '-'} user={cfg.auth.user or '-'} password={password_state} timeout_s={cfg.timeout_s}"
    )


@app.command("get")
def get_setting(
        key: str = typer.Argument(..., help="Setting key (base_url, user, timeout_s)."),
):
    cfg = load_config()
    k = key.strip().lower()
    if k == "base_url":
        console.console.print(cfg.base_url)
        return
    if k == "user":
        console.console.print(cfg.auth.user)
        return
    if k == "timeout_s":
        console.console.print(cfg.timeout_s)
        return
    console.err(f"Unknown setting: {key}. Known: {', '.join(_KEYS)}")
    raise typer.Exit(code=2)


@app.command("set")
def set_setting(
        base_url: str | None = typer.Option(None, "--base-url", help="Set REST base URL."),
        user: str | None = typer.Option(None, "--user", help="Set user name or email."),
        password: str | None = typer.Option(None, "--password", help="Set password or API token."),
        timeout_s: float | None = typer.Option(None, "--timeout", min=0.1, help="Set request timeout in seconds."),
):
    cfg = load_config()
    if base_url is not None:
        cfg.base_url = normalize_base_url(base_url, warn=True)
    if user is not None:
        cfg.auth.user = user.strip()
    if password is not None:
        cfg.auth.password = password
    if timeout_s is not None:
        cfg.timeout_s = timeout_s
    saved = save_config(cfg)
    console.ok(f"Settings updated: {saved}")
