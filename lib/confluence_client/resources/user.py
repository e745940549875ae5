from __future__ import annotations

from typing import Any

from ..routes import DELETE, GET, POST, Route, route_table
from .base import Params, Resource

_WATCH_CONTENT = "/user/watch/content/{contentId}"
_WATCH_LABEL = "/user/watch/label/{labelName}"
_WATCH_SPACE = "/user/watch/space/{spaceKey}"

ROUTES = route_table(
    Route("get_user", GET, "/user"),
    Route("get_anonymous_user", GET, "/user/anonymous"),
    Route("get_current_user", GET, "/user/current"),
    Route("get_group_memberships", GET, "/user/memberof"),
    Route("get_content_watch_status", GET, _WATCH_CONTENT),
    Route("add_content_watcher", POST, _WATCH_CONTENT, no_check=True),
    Route("remove_content_watcher", DELETE, _WATCH_CONTENT),
    Route("get_label_watch_status", GET, _WATCH_LABEL),
    Route("add_label_watcher", POST, _WATCH_LABEL, no_check=True),
    Route("remove_label_watcher", DELETE, _WATCH_LABEL),
    Route("get_space_watch_status", GET, _WATCH_SPACE),
    Route("add_space_watcher", POST, _WATCH_SPACE, no_check=True),
    Route("remove_space_watcher", DELETE, _WATCH_SPACE),
)


class User(Resource):
    """Users and watches.

    Watch operations identify the watcher through ``params`` (one of
    ``accountId``, ``key`` or ``username``); without it the current user is used.
    """

    name = "user"
    routes = ROUTES

    def get_user(self, params: Params | None = None) -> Any:
        return self.invoke("get_user", params=params)

    def get_anonymous_user(self, params: Params | None = None) -> Any:
        return self.invoke("get_anonymous_user", params=params)

    def get_current_user(self, params: Params | None = None) -> Any:
        return self.invoke("get_current_user", params=params)

    def get_group_memberships(self, params: Params | None = None) -> Any:
        return self.invoke("get_group_memberships", params=params)

    def get_content_watch_status(self, content_id: str, params: Params | None = None) -> Any:
        return self.invoke("get_content_watch_status", path={"contentId": content_id}, params=params)

    def add_content_watcher(self, content_id: str, params: Params | None = None) -> Any:
        return self.invoke("add_content_watcher", path={"contentId": content_id}, params=params)

    def remove_content_watcher(self, content_id: str, params: Params | None = None) -> Any:
        return self.invoke("remove_content_watcher", path={"contentId": content_id}, params=params)

    def get_label_watch_status(self, label_name: str, params: Params | None = None) -> Any:
        return self.invoke("get_label_watch_status", path={"labelName": label_name}, params=params)

    def add_label_watcher(self, label_name: str, params: Params | None = None) -> Any:
        return self.invoke("add_label_watcher", path={"labelName": label_name}, params=params)

    def remove_label_watcher(self, label_name: str, params: Params | None = None) -> Any:
        return self.invoke("remove_label_watcher", path={"labelName": label_name}, params=params)

    def get_space_watch_status(self, space_key: str, params: Params | None = None) -> Any:
        return self.invoke("get_space_watch_status", path={"spaceKey": space_key}, params=params)

    def add_space_watcher(self, space_key: str, params: Params | None = None) -> Any:
        return self.invoke("add_space_watcher", path={"spaceKey": space_key}, params=params)

    def remove_space_watcher(self, space_key: str, params: Params | None = None) -> Any:
        return self.invoke("remove_space_watcher", path={"spaceKey": space_key}, params=params)
