from __future__ import annotations

import json
from typing import Any

from rich.console import Console
from rich.markup import escape

console = Console()


def print_json(data: Any) -> None:
    console.print_json(data=data)


def print_compact_json(data: Any) -> None:
    """One line of plain JSON, suitable for piping into other tools."""
    console.out(json.dumps(data, separators=(",", ":")), highlight=False)


def print_text(text: str) -> None:
    console.print(text, markup=False, highlight=False, soft_wrap=True)


def info(msg: str) -> None:
    console.print(f"[bold cyan]•[/] {escape(msg)}")


def ok(msg: str) -> None:
    console.print(f"[bold green]OK[/] {escape(msg)}")


def warn(msg: str) -> None:
    console.print(f"[bold yellow]WARN[/] {escape(msg)}")


def err(msg: str) -> None:
    console.print(f"[bold red]ERR[/] {escape(msg)}")
