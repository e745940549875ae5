from __future__ import annotations

from typing import Any, Mapping

from ..response import NormalizedResult
from ..routes import Route
from ..transport import FileInput, Transport

Params = Mapping[str, Any]


class Resource:
    """One API resource group bound to the shared transport.

    Subclasses declare ``name`` and a static ``routes`` table; every public
    method looks up its route by name and issues exactly one request.
    """

    name: str = ""
    routes: dict[str, Route] = {}

    def __init__(self, transport: Transport):
        self._t = transport

    def route(self, name: str) -> Route:
        try:
            return self.routes[name]
        except KeyError:
            raise KeyError(f"unknown operation '{self.name}.{name}'") from None

    def execute(
            self,
            name: str,
            *,
            path: Params | None = None,
            params: Params | None = None,
            body: Any = None,
    ) -> NormalizedResult:
        return self._t.execute(self.route(name), path_params=path, params=params, body=body)

    def invoke(
            self,
            name: str,
            *,
            path: Params | None = None,
            params: Params | None = None,
            body: Any = None,
    ) -> Any:
        return self._t.request(self.route(name), path_params=path, params=params, body=body)

    def upload(
            self,
            name: str,
            *,
            file: FileInput,
            fields: Params | None = None,
            path: Params | None = None,
            params: Params | None = None,
    ) -> Any:
        return self._t.upload(self.route(name), file=file, fields=fields, path_params=path, params=params)


def attachment_fields(comment: str | None, minor_edit: bool) -> dict[str, str]:
    fields = {"minorEdit": "true" if minor_edit else "false"}
    if comment is not None:
        fields["comment"] = comment
    return fields
