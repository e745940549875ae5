from __future__ import annotations

from typing import Any

import typer
from confluence_client.errors import ConfluenceClientError
from rich.table import Table

from .. import console
from ..http import fail, open_client

app = typer.Typer(help="Search content with CQL.")


def _print_results(data: Any) -> None:
    table = Table(title="Search results")
    table.add_column("id", style="bold")
    table.add_column("type")
    table.add_column("title")
    table.add_column("space")
    for item in (data.get("results") if isinstance(data, dict) else None) or []:
        content = item.get("content") or {}
        space = (item.get("resultGlobalContainer") or {}).get("title")
        table.add_row(
            str(content.get("id") or "-"),
            str(content.get("type") or item.get("entityType") or "-"),
            str(item.get("title") or content.get("title") or "-"),
            str(space or "-"),
        )
    console.console.print(table)
    if isinstance(data, dict) and data.get("totalSize") is not None:
        console.info(f"total={data.get('totalSize')}")


@app.command("cql")
def search_cql(
        query: str = typer.Argument(..., help='CQL query, e.g. \'space = DOC and type = page\'.'),
        start: int = typer.Option(0, "--start", min=0, help="Offset of the first result."),
        limit: int = typer.Option(25, "--limit", min=1, help="Max results to return."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    client = open_client(base_url)
    try:
        data = client.search.search({"cql": query, "start": start, "limit": limit})
    except ConfluenceClientError as e:
        fail("Search failed", e)
    finally:
        client.close()

    if json_out:
        console.print_json(data)
        return
    _print_results(data)


@app.command("quick")
def search_quick(
        keyword: str = typer.Argument(..., help="Title prefix to look for."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    client = open_client(base_url)
    try:
        data = client.search.quick_search(keyword)
    except ConfluenceClientError as e:
        fail("Search failed", e)
    finally:
        client.close()

    if json_out:
        console.print_json(data)
        return
    _print_results(data)
