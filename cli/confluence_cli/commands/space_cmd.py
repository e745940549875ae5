from __future__ import annotations

import typer
from confluence_client.errors import ApiError, ConfluenceClientError
from rich.table import Table

from .. import console
from ..http import fail, open_client

app = typer.Typer(help="Spaces.")


@app.command("list")
def list_spaces(
        space_type: str | None = typer.Option(None, "--type", help="global or personal."),
        start: int = typer.Option(0, "--start", min=0, help="Offset of the first result."),
        limit: int = typer.Option(25, "--limit", min=1, help="Max spaces to return."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    client = open_client(base_url)
    try:
        data = client.space.get_spaces({"type": space_type, "start": start, "limit": limit})
    except ConfluenceClientError as e:
        fail("Failed to list spaces", e)
    finally:
        client.close()

    if json_out:
        console.print_json(data)
        return

    table = Table(title="Spaces")
    table.add_column("key", style="bold")
    table.add_column("name")
    table.add_column("type")
    table.add_column("status")
    for item in (data.get("results") if isinstance(data, dict) else None) or []:
        table.add_row(
            str(item.get("key") or "-"),
            str(item.get("name") or "-"),
            str(item.get("type") or "-"),
            str(item.get("status") or "-"),
        )
    console.console.print(table)


@app.command("get")
def get_space(
        space_key: str = typer.Argument(..., help="Space key."),
        expand: str = typer.Option("description.plain,homepage", "--expand", help="Comma separated expansions."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    client = open_client(base_url)
    try:
        data = client.space.get_space(space_key, {"expand": expand or None})
    except ApiError as e:
        if e.status_code == 404:
            console.err(f"Space {space_key} not found.")
            raise typer.Exit(code=2)
        fail("Failed to fetch space", e)
    except ConfluenceClientError as e:
        fail("Failed to fetch space", e)
    finally:
        client.close()

    if json_out:
        console.print_json(data)
        return

    description = ((data.get("description") or {}).get("plain") or {}).get("value")
    homepage = data.get("homepage") or {}
    console.ok("Space:")
    console.console.print(f"  key: {data.get('key')}")
    console.console.print(f"  name: {data.get('name')}")
    console.console.print(f"  type: {data.get('type')}")
    console.console.print(f"  homepage: {homepage.get('id') or '-'} {homepage.get('title') or ''}".rstrip())
    if description:
        console.console.print(f"  description: {description}")
