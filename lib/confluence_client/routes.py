from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Mapping
from urllib.parse import quote

from .errors import MissingPathParameter

GET = "GET"
POST = "POST"
PUT = "PUT"
DELETE = "DELETE"

JSON_MIMETYPE = "application/json"

_PLACEHOLDER = re.compile(r"\{(\w+)\}")


@dataclass(frozen=True)
class Route:
    name: str
    method: str
    path: str
    body: bool = False
    multipart: bool = False
    accept: str = JSON_MIMETYPE
    no_check: bool = False

    @property
    def placeholders(self) -> tuple[str, ...]:
        return path_placeholders(self.path)

    def resolve(self, path_params: Mapping[str, Any] | None = None) -> str:
        return resolve_path(self.path, path_params)


def path_placeholders(template: str) -> tuple[str, ...]:
    return tuple(_PLACEHOLDER.findall(template))


def resolve_path(template: str, path_params: Mapping[str, Any] | None = None) -> str:
    """Substitute every ``{name}`` in *template* with its percent-encoded value.

    Each value is encoded as a single path segment, so ``/`` in a value does not
    introduce a new segment. A placeholder with no value (missing key, ``None`` or
    an empty string) raises :class:`MissingPathParameter`.
    """
    params = path_params or {}

    def _sub(match: re.Match) -> str:
        name = match.group(1)
        value = params.get(name)
        if value is None or str(value) == "":
            raise MissingPathParameter(name, template)
        return quote(str(value), safe="")

    return _PLACEHOLDER.sub(_sub, template)


def route_table(*routes: Route) -> dict[str, Route]:
    table: dict[str, Route] = {}
    for route in routes:
        if route.name in table:
            raise ValueError(f"duplicate route name: {route.name}")
        table[route.name] = route
    return table
