from __future__ import annotations

from typing import Any

from ..routes import GET, Route, route_table
from .base import Params, Resource

ROUTES = route_table(
    Route("get_groups", GET, "/group"),
    Route("get_group", GET, "/group/{groupName}"),
    Route("get_group_members", GET, "/group/{groupName}/member"),
)


class Group(Resource):
    name = "group"
    routes = ROUTES

    def get_groups(self, params: Params | None = None) -> Any:
        return self.invoke("get_groups", params=params)

    def get_group(self, group_name: str) -> Any:
        return self.invoke("get_group", path={"groupName": group_name})

    def get_group_members(self, group_name: str, params: Params | None = None) -> Any:
        return self.invoke("get_group_members", path={"groupName": group_name}, params=params)
