from __future__ import annotations

from typing import Any

from ..routes import DELETE, GET, POST, PUT, Route, route_table
from .base import Params, Resource

_SPACE = "/space/{spaceKey}"
_PROPERTY = _SPACE + "/property/{key}"

ROUTES = route_table(
    Route("get_spaces", GET, "/space"),
    Route("create_space", POST, "/space", body=True),
    Route("create_private_space", POST, "/space/_private", body=True),
    Route("get_space", GET, _SPACE),
    Route("update_space", PUT, _SPACE, body=True),
    Route("delete_space", DELETE, _SPACE),
    Route("get_content_for_space", GET, _SPACE + "/content"),
    Route("get_content_for_space_by_type", GET, _SPACE + "/content/{type}"),
    Route("get_space_properties", GET, _SPACE + "/property"),
    Route("create_space_property", POST, _SPACE + "/property", body=True),
    Route("get_space_property", GET, _PROPERTY),
    Route("create_space_property_for_key", POST, _PROPERTY, body=True),
    Route("update_space_property", PUT, _PROPERTY, body=True),
    Route("delete_space_property", DELETE, _PROPERTY),
    Route("get_space_settings", GET, _SPACE + "/settings"),
    Route("update_space_settings", PUT, _SPACE + "/settings", body=True),
    Route("get_space_theme", GET, _SPACE + "/theme"),
    Route("set_space_theme", PUT, _SPACE + "/theme", body=True),
    Route("reset_space_theme", DELETE, _SPACE + "/theme"),
)


class Space(Resource):
    name = "space"
    routes = ROUTES

    def get_spaces(self, params: Params | None = None) -> Any:
        return self.invoke("get_spaces", params=params)

    def create_space(self, body: Any = None) -> Any:
        return self.invoke("create_space", body=body)

    def create_private_space(self, body: Any = None) -> Any:
        return self.invoke("create_private_space", body=body)

    def get_space(self, space_key: str, params: Params | None = None) -> Any:
        return self.invoke("get_space", path={"spaceKey": space_key}, params=params)

    def update_space(self, space_key: str, body: Any = None) -> Any:
        return self.invoke("update_space", path={"spaceKey": space_key}, body=body)

    def delete_space(self, space_key: str) -> Any:
        """Delete a space. The server answers with a long task to poll."""
        return self.invoke("delete_space", path={"spaceKey": space_key})

    def get_content_for_space(self, space_key: str, params: Params | None = None) -> Any:
        return self.invoke("get_content_for_space", path={"spaceKey": space_key}, params=params)

    def get_content_for_space_by_type(self, space_key: str, content_type: str, params: Params | None = None) -> Any:
        return self.invoke(
            "get_content_for_space_by_type",
            path={"spaceKey": space_key, "type": content_type},
            params=params,
        )

    def get_space_properties(self, space_key: str, params: Params | None = None) -> Any:
        return self.invoke("get_space_properties", path={"spaceKey": space_key}, params=params)

    def create_space_property(self, space_key: str, body: Any = None) -> Any:
        return self.invoke("create_space_property", path={"spaceKey": space_key}, body=body)

    def get_space_property(self, space_key: str, key: str, params: Params | None = None) -> Any:
        return self.invoke("get_space_property", path={"spaceKey": space_key, "key": key}, params=params)

    def create_space_property_for_key(self, space_key: str, key: str, body: Any = None) -> Any:
        return self.invoke("create_space_property_for_key", path={"spaceKey": space_key, "key": key}, body=body)

    def update_space_property(self, space_key: str, key: str, body: Any = None) -> Any:
        return self.invoke("update_space_property", path={"spaceKey": space_key, "key": key}, body=body)

    def delete_space_property(self, space_key: str, key: str) -> Any:
        return self.invoke("delete_space_property", path={"spaceKey": space_key, "key": key})

    def get_space_settings(self, space_key: str) -> Any:
        return self.invoke("get_space_settings", path={"spaceKey": space_key})

    def update_space_settings(self, space_key: str, body: Any = None) -> Any:
        return self.invoke("update_space_settings", path={"spaceKey": space_key}, body=body)

    def get_space_theme(self, space_key: str) -> Any:
        return self.invoke("get_space_theme", path={"spaceKey": space_key})

    def set_space_theme(self, space_key: str, body: Any = None) -> Any:
        return self.invoke("set_space_theme", path={"spaceKey": space_key}, body=body)

    def reset_space_theme(self, space_key: str) -> Any:
        return self.invoke("reset_space_theme", path={"spaceKey": space_key})
