from __future__ import annotations

from pathlib import Path
from typing import Any

import typer
from confluence_client.errors import ApiError, ConfluenceClientError
from rich.table import Table

from .. import console
from ..http import fail, open_client

app = typer.Typer(help="Pages, blog posts and their attachments and labels.")

STORAGE = "storage"


def _read_body(body: str | None, body_file: Path | None) -> str | None:
    if body is not None and body_file is not None:
        console.err("Use either --body or --body-file, not both.")
        raise typer.Exit(code=2)
    if body_file is not None:
        return body_file.read_text(encoding="utf-8")
    return body


def _storage(value: str) -> dict[str, Any]:
    return {STORAGE: {"value": value, "representation": STORAGE}}


def _version_number(content: dict) -> int:
    version = content.get("version") if isinstance(content, dict) else None
    number = version.get("number") if isinstance(version, dict) else None
    try:
        return int(number)
    except (TypeError, ValueError):
        return 0


def _print_content_summary(content: dict) -> None:
    space = content.get("space") or {}
    console.console.print(f"  id: {content.get('id')}")
    console.console.print(f"  type: {content.get('type')}")
    console.console.print(f"  status: {content.get('status')}")
    console.console.print(f"  title: {content.get('title')}")
    console.console.print(f"  space: {space.get('key') or '-'}")
    console.console.print(f"  version: {_version_number(content) or '-'}")


@app.command("list")
def list_content(
        space: str | None = typer.Option(None, "--space", help="Space key."),
        content_type: str = typer.Option("page", "--type", help="page or blogpost."),
        title: str | None = typer.Option(None, "--title", help="Exact title."),
        start: int = typer.Option(0, "--start", min=0, help="Offset of the first result."),
        limit: int = typer.Option(25, "--limit", min=1, help="Max results to return."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    client = open_client(base_url)
    try:
        data = client.content.get_content(
            {"spaceKey": space, "type": content_type, "title": title, "start": start, "limit": limit}
        )
    except ConfluenceClientError as e:
        fail("Failed to list content", e)
    finally:
        client.close()

    if json_out:
        console.print_json(data)
        return

    results = data.get("results") if isinstance(data, dict) else []
    table = Table(title="Content")
    table.add_column("id", style="bold")
    table.add_column("type")
    table.add_column("status")
    table.add_column("title")
    for item in results or []:
        table.add_row(
            str(item.get("id", "-")),
            str(item.get("type") or "-"),
            str(item.get("status") or "-"),
            str(item.get("title") or "-"),
        )
    console.console.print(table)
    if isinstance(data, dict) and data.get("size") is not None:
        console.info(f"size={data.get('size')} start={start} limit={limit}")


@app.command("get")
def get_content(
        content_id: str = typer.Argument(..., help="Content ID."),
        expand: str = typer.Option("space,version,body.storage", "--expand", help="Comma separated expansions."),
        show_body: bool = typer.Option(False, "--body", help="Print the storage body."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    client = open_client(base_url)
    try:
        data = client.content.get_content_by_id(content_id, {"expand": expand or None})
    except ApiError as e:
        if e.status_code == 404:
            console.err(f"Content {content_id} not found.")
            raise typer.Exit(code=2)
        fail("Failed to fetch content", e)
    except ConfluenceClientError as e:
        fail("Failed to fetch content", e)
    finally:
        client.close()

    if json_out:
        console.print_json(data)
        return

    console.ok("Content:")
    _print_content_summary(data)
    if show_body:
        storage = ((data.get("body") or {}).get(STORAGE) or {}).get("value")
        console.print_text(storage or "")


@app.command("create")
def create_content(
        space: str = typer.Option(..., "--space", help="Space key."),
        title: str = typer.Option(..., "--title", help="Page title."),
        body: str | None = typer.Option(None, "--body", help="Body in storage format."),
        body_file: Path | None = typer.Option(
            None, "--body-file", exists=True, dir_okay=False, readable=True, help="File with the storage body."
        ),
        parent: str | None = typer.Option(None, "--parent", help="Parent page ID."),
        content_type: str = typer.Option("page", "--type", help="page or blogpost."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    value = _read_body(body, body_file)
    payload: dict[str, Any] = {
        "type": content_type,
        "title": title,
        "space": {"key": space},
        "body": _storage(value or ""),
    }
    if parent:
        payload["ancestors"] = [{"id": parent}]

    client = open_client(base_url)
    try:
        data = client.content.create_content(body=payload)
    except ConfluenceClientError as e:
        fail("Failed to create content", e)
    finally:
        client.close()

    if json_out:
        console.print_json(data)
        return
    console.ok(f"Created {content_type} {data.get('id')}: {data.get('title')}")


@app.command("update")
def update_content(
        content_id: str = typer.Argument(..., help="Content ID."),
        title: str | None = typer.Option(None, "--title", help="New title."),
        body: str | None = typer.Option(None, "--body", help="New body in storage format."),
        body_file: Path | None = typer.Option(
            None, "--body-file", exists=True, dir_okay=False, readable=True, help="File with the storage body."
        ),
        minor_edit: bool = typer.Option(False, "--minor-edit", help="Do not notify watchers."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    """Update a page: reads its current version, then writes version + 1."""
    value = _read_body(body, body_file)
    if title is None and value is None:
        console.err("Nothing to update. Pass --title and/or --body/--body-file.")
        raise typer.Exit(code=2)

    client = open_client(base_url)
    try:
        current = client.content.get_content_by_id(content_id, {"expand": "version"})
        payload: dict[str, Any] = {
            "id": content_id,
            "type": current.get("type") or "page",
            "title": title if title is not None else current.get("title"),
            "version": {"number": _version_number(current) + 1, "minorEdit": minor_edit},
        }
        if value is not None:
            payload["body"] = _storage(value)
        data = client.content.update_content(content_id, body=payload)
    except ApiError as e:
        if e.status_code == 409:
            console.err("Version conflict: the page was changed concurrently. Retry the update.")
            raise typer.Exit(code=2)
        fail("Failed to update content", e)
    except ConfluenceClientError as e:
        fail("Failed to update content", e)
    finally:
        client.close()

    if json_out:
        console.print_json(data)
        return
    console.ok(f"Updated {content_id} to version {_version_number(data)}.")


@app.command("delete")
def delete_content(
        content_id: str = typer.Argument(..., help="Content ID."),
        purge: bool = typer.Option(False, "--purge", help="Purge trashed content instead of trashing it."),
        yes: bool = typer.Option(False, "--yes", help="Skip confirmation prompt."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    if not yes:
        if not typer.confirm(f"Delete content {content_id}?", default=False):
            console.info("Aborted.")
            raise typer.Exit(code=0)

    client = open_client(base_url)
    try:
        client.content.delete_content(content_id, {"status": "trashed"} if purge else None)
    except ConfluenceClientError as e:
        fail("Failed to delete content", e)
    finally:
        client.close()
    console.ok(f"Content {content_id} {'purged' if purge else 'deleted'}.")


@app.command("attach")
def attach_file(
        content_id: str = typer.Argument(..., help="Content ID."),
        file: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True, help="File to upload."),
        comment: str | None = typer.Option(None, "--comment", help="Attachment comment."),
        minor_edit: bool = typer.Option(False, "--minor-edit", help="Do not notify watchers."),
        replace: bool = typer.Option(False, "--replace", help="Update the attachment if one with the same name exists."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    client = open_client(base_url)
    upload = client.content.create_or_update_attachment if replace else client.content.create_attachment
    try:
        data = upload(content_id, file, comment=comment, minor_edit=minor_edit)
    except ConfluenceClientError as e:
        fail("Failed to upload attachment", e)
    finally:
        client.close()

    if json_out:
        console.print_json(data)
        return
    results = data.get("results") if isinstance(data, dict) else None
    for item in results or [data]:
        console.ok(f"Attached {item.get('title') or file.name} ({item.get('id') or '-'})")


@app.command("labels")
def labels(
        content_id: str = typer.Argument(..., help="Content ID."),
        add: list[str] = typer.Option([], "--add", help="Label to add (repeatable)."),
        remove: list[str] = typer.Option([], "--remove", help="Label to remove (repeatable)."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    """List labels of a content, optionally adding or removing some first."""
    client = open_client(base_url)
    try:
        if add:
            client.content.add_labels_to_content(content_id, [{"prefix": "global", "name": name} for name in add])
        for name in remove:
            client.content.remove_label_from_content(content_id, name)
        data = client.content.get_content_labels(content_id)
    except ConfluenceClientError as e:
        fail("Failed to manage labels", e)
    finally:
        client.close()

    if json_out:
        console.print_json(data)
        return
    names = [str(item.get("name")) for item in (data.get("results") or [])] if isinstance(data, dict) else []
    console.console.print(", ".join(names) if names else "(no labels)")
