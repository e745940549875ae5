from __future__ import annotations

from typing import Any

from ..routes import POST, Route, route_table
from .base import Resource

ROUTES = route_table(
    Route("convert_content_body", POST, "/contentbody/convert/{to}", body=True),
)


class ContentBody(Resource):
    name = "contentbody"
    routes = ROUTES

    def convert_content_body(self, to: str, body: Any = None) -> Any:
        """Convert ``{"value": ..., "representation": ...}`` into the *to* representation."""
        return self.invoke("convert_content_body", path={"to": to}, body=body)
