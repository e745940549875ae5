from __future__ import annotations

import httpx
from typer.testing import CliRunner

from confluence_cli import config, http, main
from confluence_client import ClientConfig, ConfluenceClient


def _install(monkeypatch, tmp_path, handler) -> list[httpx.Request]:
    seen: list[httpx.Request] = []

    def _record(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return handler(request)

    monkeypatch.setattr(config, "user_config_dir", lambda _: str(tmp_path))

    def _make_client(cfg, *, base_url_override):  # noqa: ANN001
        return ConfluenceClient(
            ClientConfig(base_url="https://x/wiki/rest/api", user="u", password="p"),
            transport=httpx.MockTransport(_record),
        )

    monkeypatch.setattr(http, "make_client", _make_client)
    return seen


def test_space_list(tmp_path, monkeypatch) -> None:
    seen = _install(
        monkeypatch,
        tmp_path,
        lambda _: httpx.Response(200, json={"results": [{"key": "DOC", "name": "Docs", "type": "global"}]}),
    )

    result = CliRunner().invoke(main.app, ["space", "list", "--type", "global"])

    assert result.exit_code == 0, result.output
    assert "DOC" in result.output
    assert seen[0].url.path == "/wiki/rest/api/space"
    assert seen[0].url.params["type"] == "global"


def test_space_get_details(tmp_path, monkeypatch) -> None:
    space = {
        "key": "DOC",
        "name": "Docs",
        "type": "global",
        "description": {"plain": {"value": "Team docs"}},
        "homepage": {"id": "11", "title": "Home"},
    }
    seen = _install(monkeypatch, tmp_path, lambda _: httpx.Response(200, json=space))

    result = CliRunner().invoke(main.app, ["space", "get", "DOC"])

    assert result.exit_code == 0, result.output
    assert seen[0].url.path == "/wiki/rest/api/space/DOC"
    assert "homepage: 11 Home" in result.output
    assert "description: Team docs" in result.output


def test_space_get_not_found(tmp_path, monkeypatch) -> None:
    _install(monkeypatch, tmp_path, lambda _: httpx.Response(404))

    result = CliRunner().invoke(main.app, ["space", "get", "NOPE"])

    assert result.exit_code == 2
    assert "Space NOPE not found." in result.output


def test_search_cql_passes_query(tmp_path, monkeypatch) -> None:
    found = {
        "results": [{"content": {"id": "11", "type": "page"}, "title": "Home"}],
        "totalSize": 1,
    }
    seen = _install(monkeypatch, tmp_path, lambda _: httpx.Response(200, json=found))

    result = CliRunner().invoke(main.app, ["search", "cql", "space = DOC", "--limit", "10"])

    assert result.exit_code == 0, result.output
    assert seen[0].url.params["cql"] == "space = DOC"
    assert seen[0].url.params["limit"] == "10"
    assert "Home" in result.output
    assert "total=1" in result.output


def test_search_quick_uses_title_prefix(tmp_path, monkeypatch) -> None:
    seen = _install(monkeypatch, tmp_path, lambda _: httpx.Response(200, json={"results": []}))

    result = CliRunner().invoke(main.app, ["search", "quick", "Release"])

    assert result.exit_code == 0, result.output
    assert seen[0].url.params["cql"] == 'title ~ "Release*"'


def test_network_failure_is_reported(tmp_path, monkeypatch) -> None:
    def _down(_: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused")

    _install(monkeypatch, tmp_path, _down)

    result = CliRunner().invoke(main.app, ["search", "quick", "Release"])

    assert result.exit_code == 2
    assert "Search failed" in result.output
