from __future__ import annotations

import json

import httpx
import pytest
import typer
from typer.testing import CliRunner

from confluence_cli import config, http, main
from confluence_cli.commands.call_cmd import parse_body, parse_pairs
from confluence_client import ClientConfig, ConfluenceClient


class _Recorder:
    def __init__(self, response: httpx.Response):
        self.response = response
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.response


def _install(monkeypatch, tmp_path, recorder: _Recorder) -> None:
    monkeypatch.setattr(config, "user_config_dir", lambda _: str(tmp_path))

    def _make_client(cfg, *, base_url_override):  # noqa: ANN001
        return ConfluenceClient(
            ClientConfig(base_url="https://x/wiki/rest/api", user="u", password="p"),
            transport=httpx.MockTransport(recorder),
        )

    monkeypatch.setattr(http, "make_client", _make_client)


def test_parse_pairs_collects_repeated_keys() -> None:
    assert parse_pairs(["expand=space", "expand=version", "limit=5"], option="--param") == {
        "expand": ["space", "version"],
        "limit": "5",
    }


def test_parse_pairs_keeps_equals_in_value() -> None:
    assert parse_pairs(["cql=type=page"], option="--param") == {"cql": "type=page"}


def test_parse_pairs_rejects_missing_separator() -> None:
    with pytest.raises(typer.BadParameter):
        parse_pairs(["oops"], option="--path")


def test_parse_body_from_file(tmp_path) -> None:
    body_file = tmp_path / "body.json"
    body_file.write_text('{"key": "DOC"}', encoding="utf-8")
    assert parse_body(f"@{body_file}") == {"key": "DOC"}
    assert parse_body(None) is None


def test_parse_body_rejects_invalid_json() -> None:
    with pytest.raises(typer.BadParameter):
        parse_body("{not json")


def test_call_invokes_route_by_name(tmp_path, monkeypatch) -> None:
    rec = _Recorder(httpx.Response(200, json={"id": "11"}))
    _install(monkeypatch, tmp_path, rec)

    result = CliRunner().invoke(
        main.app,
        ["call", "content", "get_content_by_id", "--path", "id=11", "--param", "expand=version", "--json"],
    )

    assert result.exit_code == 0, result.output
    assert json.loads(result.output) == {"id": "11"}
    req = rec.requests[0]
    assert req.url.path == "/wiki/rest/api/content/11"
    assert req.url.params["expand"] == "version"


def test_call_sends_body(tmp_path, monkeypatch) -> None:
    rec = _Recorder(httpx.Response(200, json={"key": "DOC"}))
    _install(monkeypatch, tmp_path, rec)

    result = CliRunner().invoke(
        main.app,
        ["call", "space", "create_space", "--body", '{"key": "DOC", "name": "Docs"}'],
    )

    assert result.exit_code == 0, result.output
    assert rec.requests[0].method == "POST"
    assert json.loads(rec.requests[0].content) == {"key": "DOC", "name": "Docs"}


def test_call_missing_path_parameter(tmp_path, monkeypatch) -> None:
    rec = _Recorder(httpx.Response(200, json={}))
    _install(monkeypatch, tmp_path, rec)

    result = CliRunner().invoke(main.app, ["call", "group", "get_group"])

    assert result.exit_code == 2
    assert "groupName" in result.output
    assert rec.requests == []


def test_call_binary_response_to_file(tmp_path, monkeypatch) -> None:
    rec = _Recorder(httpx.Response(200, content=b"PK\x03\x04", headers={"Content-Type": "application/zip"}))
    _install(monkeypatch, tmp_path, rec)
    out = tmp_path / "audit.zip"

    result = CliRunner().invoke(main.app, ["call", "audit", "export_audit_records", "-o", str(out)])

    assert result.exit_code == 0, result.output
    assert out.read_bytes() == b"PK\x03\x04"


def test_call_unknown_operation() -> None:
    result = CliRunner().invoke(main.app, ["call", "content", "nope"])
    assert result.exit_code == 2
    assert "Unknown operation" in result.output


def test_call_upload_requires_file() -> None:
    result = CliRunner().invoke(main.app, ["call", "content", "create_attachment", "--path", "id=1"])
    assert result.exit_code == 2
    assert "--file" in result.output


def test_routes_lists_operations() -> None:
    result = CliRunner().invoke(main.app, ["routes", "longtask"])
    assert result.exit_code == 0, result.output
    assert "longtask.get_long_running_task" in result.output
    assert "/longtask/{taskId}" in result.output


def test_routes_unknown_resource() -> None:
    result = CliRunner().invoke(main.app, ["routes", "pages"])
    assert result.exit_code == 2


def test_call_upload_repeats_form_fields(tmp_path, monkeypatch) -> None:
    rec = _Recorder(httpx.Response(200, json={"results": [{"id": "att1"}]}))
    _install(monkeypatch, tmp_path, rec)
    upload = tmp_path / "a.txt"
    upload.write_bytes(b"data")

    result = CliRunner().invoke(
        main.app,
        [
            "call", "content", "create_attachment",
            "--path", "id=1",
            "--file", str(upload),
            "--field", "comment=one",
            "--field", "comment=two",
        ],
    )

    assert result.exit_code == 0, result.output
    content = rec.requests[0].content
    assert content.count(b'name="comment"') == 2
    assert b"['one'" not in content
