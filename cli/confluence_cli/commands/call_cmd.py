from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import typer
from confluence_client.errors import ConfluenceClientError
from confluence_client.resources import RESOURCES
from rich.table import Table

from .. import console
from ..http import fail, open_client


def parse_pairs(values: list[str], *, option: str) -> dict[str, Any]:
    """Parse repeated ``key=value`` options; a repeated key collects a list."""
    out: dict[str, Any] = {}
    for raw in values:
        key, sep, value = raw.partition("=")
        key = key.strip()
        if not sep or not key:
            raise typer.BadParameter(f"expected key=value, got '{raw}'", param_hint=option)
        if key in out:
            prev = out[key]
            out[key] = [*prev, value] if isinstance(prev, list) else [prev, value]
        else:
            out[key] = value
    return out


def parse_body(raw: str | None) -> Any:
    """Parse a JSON body given inline or as ``@path/to/file.json``."""
    if raw is None:
        return None
    text = raw
    if raw.startswith("@"):
        path = Path(raw[1:]).expanduser()
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as e:
            raise typer.BadParameter(f"cannot read {path}: {e.strerror}", param_hint="--body")
    try:
        return json.loads(text)
    except ValueError as e:
        raise typer.BadParameter(f"invalid JSON: {e}", param_hint="--body")


def _emit(data: Any, *, raw_json: bool, output: Path | None) -> None:
    if output is not None:
        if isinstance(data, bytes):
            output.write_bytes(data)
        elif isinstance(data, str):
            output.write_text(data, encoding="utf-8")
        else:
            output.write_text(json.dumps(data, indent=2), encoding="utf-8")
        console.ok(f"Saved response to {output}")
        return
    if isinstance(data, bytes):
        console.err(f"Binary response ({len(data)} bytes). Use --output to save it.")
        raise typer.Exit(code=2)
    if isinstance(data, str):
        console.print_text(data)
        return
    if raw_json:
        console.print_compact_json(data)
        return
    console.print_json(data)


def call(
        resource: str = typer.Argument(..., help="Resource name, see 'confluence routes'."),
        operation: str = typer.Argument(..., help="Operation name, e.g. get_content_by_id."),
        path: list[str] = typer.Option([], "--path", help="Path parameter key=value (repeatable)."),
        param: list[str] = typer.Option([], "--param", help="Query parameter key=value (repeatable)."),
        body: str | None = typer.Option(None, "--body", help="JSON body, or @file to read it from a file."),
        file: Path | None = typer.Option(
            None, "--file", exists=True, dir_okay=False, readable=True, help="File for attachment uploads."
        ),
        field: list[str] = typer.Option([], "--field", help="Multipart form field key=value (repeatable)."),
        output: Path | None = typer.Option(None, "--output", "-o", help="Write the response to a file."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
        json_out: bool = typer.Option(False, "--json", help="Print compact JSON on one line."),
):
    """Invoke any API operation by its route name."""
    res_cls = RESOURCES.get(resource)
    if res_cls is None:
        console.err(f"Unknown resource: {resource}. Known: {', '.join(sorted(RESOURCES))}")
        raise typer.Exit(code=2)
    route = res_cls.routes.get(operation)
    if route is None:
        console.err(f"Unknown operation: {resource}.{operation}. See 'confluence routes {resource}'.")
        raise typer.Exit(code=2)

    path_params = parse_pairs(path, option="--path")
    query = parse_pairs(param, option="--param")
    fields = parse_pairs(field, option="--field")
    payload = parse_body(body)
    if route.multipart and file is None:
        console.err(f"{resource}.{operation} uploads a file. Pass --file.")
        raise typer.Exit(code=2)
    if payload is not None and not route.body:
        console.warn(f"{resource}.{operation} does not send a body; --body ignored.")
        payload = None

    client = open_client(base_url)
    try:
        res = client.resource(resource)
        if route.multipart:
            data = res.upload(operation, file=file, fields=fields, path=path_params, params=query)
        else:
            data = res.invoke(operation, path=path_params, params=query, body=payload)
    except ConfluenceClientError as e:
        fail(f"{resource}.{operation} failed", e)
    finally:
        client.close()

    _emit(data, raw_json=json_out, output=output)


def routes(
        resource: str | None = typer.Argument(None, help="Only show this resource."),
):
    """List every operation with its HTTP method and path template."""
    names = [resource] if resource else sorted(RESOURCES)
    unknown = [n for n in names if n not in RESOURCES]
    if unknown:
        console.err(f"Unknown resource: {unknown[0]}. Known: {', '.join(sorted(RESOURCES))}")
        raise typer.Exit(code=2)

    table = Table(title="Routes")
    table.add_column("operation", style="bold")
    table.add_column("method")
    table.add_column("path")
    table.add_column("notes")
    for name in names:
        for op, route in RESOURCES[name].routes.items():
            notes = []
            if route.body:
                notes.append("body")
            if route.multipart:
                notes.append("multipart")
            if route.no_check:
                notes.append("no-check")
            table.add_row(f"{name}.{op}", route.method, route.path, ",".join(notes))
    console.console.print(table)
