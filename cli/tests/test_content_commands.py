from __future__ import annotations

import json

import httpx
from typer.testing import CliRunner

from confluence_cli import config, http, main
from confluence_client import ClientConfig, ConfluenceClient

BASE_URL = "https://x/wiki/rest/api"


class _Api:
    """Canned responses keyed by (method, path below the REST base)."""

    def __init__(self, responses: dict[tuple[str, str], httpx.Response]):
        self.responses = responses
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        key = (request.method, request.url.path.removeprefix("/wiki/rest/api"))
        return self.responses.get(key, httpx.Response(404, json={"message": "no such route"}))


def _install_api(monkeypatch, tmp_path, api: _Api) -> None:
    monkeypatch.setattr(config, "user_config_dir", lambda _: str(tmp_path))

    def _make_client(cfg, *, base_url_override):  # noqa: ANN001
        return ConfluenceClient(
            ClientConfig(base_url=BASE_URL, user="u", password="p"),
            transport=httpx.MockTransport(api),
        )

    monkeypatch.setattr(http, "make_client", _make_client)


def _flat(output: str) -> str:
    return " ".join(output.split())


def test_content_list_renders_table(tmp_path, monkeypatch) -> None:
    api = _Api(
        {
            ("GET", "/content"): httpx.Response(
                200,
                json={"results": [{"id": "11", "type": "page", "status": "current", "title": "Home"}], "size": 1},
            )
        }
    )
    _install_api(monkeypatch, tmp_path, api)

    result = CliRunner().invoke(main.app, ["content", "list", "--space", "DOC", "--limit", "5"])

    assert result.exit_code == 0, result.output
    assert "Home" in result.output
    params = api.requests[0].url.params
    assert params["spaceKey"] == "DOC"
    assert params["limit"] == "5"
    assert "title" not in params


def test_content_get_json(tmp_path, monkeypatch) -> None:
    page = {"id": "11", "type": "page", "title": "Home", "version": {"number": 2}}
    api = _Api({("GET", "/content/11"): httpx.Response(200, json=page)})
    _install_api(monkeypatch, tmp_path, api)

    result = CliRunner().invoke(main.app, ["content", "get", "11", "--json"])

    assert result.exit_code == 0, result.output
    assert json.loads(result.output) == page


def test_content_get_not_found(tmp_path, monkeypatch) -> None:
    _install_api(monkeypatch, tmp_path, _Api({}))

    result = CliRunner().invoke(main.app, ["content", "get", "404"])

    assert result.exit_code == 2
    assert "Content 404 not found." in _flat(result.output)


def test_content_create_builds_storage_payload(tmp_path, monkeypatch) -> None:
    api = _Api({("POST", "/content"): httpx.Response(200, json={"id": "12", "title": "New page"})})
    _install_api(monkeypatch, tmp_path, api)

    result = CliRunner().invoke(
        main.app,
        ["content", "create", "--space", "DOC", "--title", "New page", "--body", "<p>hi</p>", "--parent", "11"],
    )

    assert result.exit_code == 0, result.output
    sent = json.loads(api.requests[0].content)
    assert sent == {
        "type": "page",
        "title": "New page",
        "space": {"key": "DOC"},
        "body": {"storage": {"value": "<p>hi</p>", "representation": "storage"}},
        "ancestors": [{"id": "11"}],
    }
    assert "Created page 12" in _flat(result.output)


def test_content_update_bumps_version(tmp_path, monkeypatch) -> None:
    api = _Api(
        {
            ("GET", "/content/11"): httpx.Response(
                200, json={"id": "11", "type": "page", "title": "Home", "version": {"number": 3}}
            ),
            ("PUT", "/content/11"): httpx.Response(200, json={"id": "11", "version": {"number": 4}}),
        }
    )
    _install_api(monkeypatch, tmp_path, api)
    body_file = tmp_path / "body.html"
    body_file.write_text("<p>updated</p>", encoding="utf-8")

    result = CliRunner().invoke(main.app, ["content", "update", "11", "--body-file", str(body_file)])

    assert result.exit_code == 0, result.output
    get_req, put_req = api.requests
    assert get_req.url.params["expand"] == "version"
    sent = json.loads(put_req.content)
    assert sent["version"] == {"number": 4, "minorEdit": False}
    assert sent["title"] == "Home"
    assert sent["body"]["storage"]["value"] == "<p>updated</p>"
    assert "version 4" in _flat(result.output)


def test_content_update_requires_changes(tmp_path, monkeypatch) -> None:
    api = _Api({})
    _install_api(monkeypatch, tmp_path, api)

    result = CliRunner().invoke(main.app, ["content", "update", "11"])

    assert result.exit_code == 2
    assert api.requests == []


def test_content_update_version_conflict(tmp_path, monkeypatch) -> None:
    api = _Api(
        {
            ("GET", "/content/11"): httpx.Response(200, json={"id": "11", "type": "page", "version": {"number": 1}}),
            ("PUT", "/content/11"): httpx.Response(409, json={"message": "Version must be incremented"}),
        }
    )
    _install_api(monkeypatch, tmp_path, api)

    result = CliRunner().invoke(main.app, ["content", "update", "11", "--title", "Renamed"])

    assert result.exit_code == 2
    assert "Version conflict" in _flat(result.output)


def test_content_delete_with_yes(tmp_path, monkeypatch) -> None:
    api = _Api({("DELETE", "/content/11"): httpx.Response(204)})
    _install_api(monkeypatch, tmp_path, api)

    result = CliRunner().invoke(main.app, ["content", "delete", "11", "--yes"])

    assert result.exit_code == 0, result.output
    assert "deleted" in result.output
    assert "status" not in api.requests[0].url.params


def test_content_delete_aborted(tmp_path, monkeypatch) -> None:
    api = _Api({})
    _install_api(monkeypatch, tmp_path, api)

    result = CliRunner().invoke(main.app, ["content", "delete", "11"], input="n\n")

    assert result.exit_code == 0
    assert "Aborted." in result.output
    assert api.requests == []


def test_content_attach_uploads_file(tmp_path, monkeypatch) -> None:
    api = _Api(
        {
            ("POST", "/content/11/child/attachment"): httpx.Response(
                200, json={"results": [{"id": "att9", "title": "notes.txt"}]}
            )
        }
    )
    _install_api(monkeypatch, tmp_path, api)
    upload = tmp_path / "notes.txt"
    upload.write_text("some notes", encoding="utf-8")

    result = CliRunner().invoke(main.app, ["content", "attach", "11", str(upload), "--comment", "v1"])

    assert result.exit_code == 0, result.output
    req = api.requests[0]
    assert req.headers["X-Atlassian-Token"] == "no-check"
    assert b"some notes" in req.content
    assert "Attached notes.txt (att9)" in _flat(result.output)


def test_content_labels_add_then_list(tmp_path, monkeypatch) -> None:
    labels = {"results": [{"prefix": "global", "name": "docs"}, {"prefix": "global", "name": "howto"}]}
    api = _Api(
        {
            ("POST", "/content/11/label"): httpx.Response(200, json=labels),
            ("GET", "/content/11/label"): httpx.Response(200, json=labels),
        }
    )
    _install_api(monkeypatch, tmp_path, api)

    result = CliRunner().invoke(main.app, ["content", "labels", "11", "--add", "howto"])

    assert result.exit_code == 0, result.output
    assert json.loads(api.requests[0].content) == [{"prefix": "global", "name": "howto"}]
    assert "docs, howto" in result.output


def test_unauthorized_is_reported(tmp_path, monkeypatch) -> None:
    api = _Api({("GET", "/content"): httpx.Response(401)})
    _install_api(monkeypatch, tmp_path, api)

    result = CliRunner().invoke(main.app, ["content", "list"])

    assert result.exit_code == 2
    assert "Unauthorized" in result.output


def test_missing_credentials_exit_code(tmp_path, monkeypatch) -> None:
    monkeypatch.setattr(config, "user_config_dir", lambda _: str(tmp_path))
    for name in (config.ENV_BASE_URL, config.ENV_USER, config.ENV_PASSWORD):
        monkeypatch.delenv(name, raising=False)

    result = CliRunner().invoke(main.app, ["content", "list"])

    assert result.exit_code == 2
    assert "with both a user and password" in _flat(result.output)
