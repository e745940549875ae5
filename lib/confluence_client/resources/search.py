from __future__ import annotations

from typing import Any

from ..routes import GET, Route, route_table
from .base import Params, Resource

ROUTES = route_table(
    Route("search", GET, "/search"),
    Route("quick_search", GET, "/search"),
)


def title_prefix_cql(keyword: str) -> str:
    escaped = keyword.replace("\\", "\\\\").replace('"', '\\"')
    return f'title ~ "{escaped}*"'


class Search(Resource):
    name = "search"
    routes = ROUTES

    def search(self, params: Params | None = None) -> Any:
        """Search with CQL; ``params["cql"]`` is required by the server."""
        return self.invoke("search", params=params)

    def quick_search(self, keyword: str) -> Any:
        return self.invoke("quick_search", params={"cql": title_prefix_cql(keyword)})
