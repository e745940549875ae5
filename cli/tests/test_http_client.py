from __future__ import annotations

from confluence_cli import config
from confluence_cli.http import make_client


def _clear_env(monkeypatch) -> None:
    for name in (config.ENV_BASE_URL, config.ENV_USER, config.ENV_PASSWORD):
        monkeypatch.delenv(name, raising=False)


def test_make_client_passes_credentials_and_timeout(monkeypatch) -> None:
    _clear_env(monkeypatch)
    cfg = config.AppConfig(
        base_url="https://example.com/wiki/rest/api",
        auth=config.AuthConfig(user="me", password="secret"),
        timeout_s=5.0,
    )
    captured = {}

    class _FakeClient:
        def __init__(self, client_cfg):
            captured["cfg"] = client_cfg

    monkeypatch.setattr("confluence_cli.http.ConfluenceClient", _FakeClient)

    make_client(cfg, base_url_override=None)

    client_cfg = captured["cfg"]
    assert client_cfg.base_url == "https://example.com/wiki/rest/api"
    assert client_cfg.user == "me"
    assert client_cfg.password == "secret"
    assert client_cfg.timeout_s == 5.0
    assert client_cfg.user_agent.startswith("confluence-cli/")


def test_make_client_normalizes_base_url_override(monkeypatch) -> None:
    _clear_env(monkeypatch)
    cfg = config.default_config()
    captured = {}

    class _FakeClient:
        def __init__(self, client_cfg):
            captured["base_url"] = client_cfg.base_url

    monkeypatch.setattr("confluence_cli.http.ConfluenceClient", _FakeClient)

    make_client(cfg, base_url_override="example.com/wiki/rest/api/")

    assert captured["base_url"] == "https://example.com/wiki/rest/api"


def test_make_client_prefers_environment(monkeypatch) -> None:
    cfg = config.AppConfig(base_url="https://file.example", auth=config.AuthConfig(user="a", password="b"))
    monkeypatch.setenv(config.ENV_USER, "env-user")
    monkeypatch.setenv(config.ENV_PASSWORD, "env-pass")
    monkeypatch.delenv(config.ENV_BASE_URL, raising=False)
    captured = {}

    class _FakeClient:
        def __init__(self, client_cfg):
            captured["user"] = client_cfg.user
            captured["password"] = client_cfg.password

    monkeypatch.setattr("confluence_cli.http.ConfluenceClient", _FakeClient)

    make_client(cfg, base_url_override=None)

    assert captured == {"user": "env-user", "password": "env-pass"}
