from __future__ import annotations

from typing import Any

from ..routes import DELETE, GET, POST, PUT, Route, route_table
from .base import Params, Resource

ROUTES = route_table(
    Route("get_look_and_feel_settings", GET, "/settings/lookandfeel"),
    Route("update_look_and_feel_settings", POST, "/settings/lookandfeel/custom", body=True),
    Route("reset_look_and_feel_settings", DELETE, "/settings/lookandfeel/custom"),
    Route("set_look_and_feel_settings", PUT, "/settings/lookandfeel/selected", body=True),
    Route("get_system_info", GET, "/settings/systemInfo"),
    Route("get_themes", GET, "/settings/theme"),
    Route("get_theme", GET, "/settings/theme/{themeKey}"),
    Route("get_global_theme", GET, "/settings/theme/selected"),
)


class Settings(Resource):
    """Site settings. Look and feel calls are global unless a space key is given."""

    name = "settings"
    routes = ROUTES

    def get_look_and_feel_settings(self, space_key: str | None = None) -> Any:
        return self.invoke("get_look_and_feel_settings", params={"spaceKey": space_key})

    def update_look_and_feel_settings(self, space_key: str | None = None, body: Any = None) -> Any:
        return self.invoke("update_look_and_feel_settings", params={"spaceKey": space_key}, body=body)

    def reset_look_and_feel_settings(self, space_key: str | None = None) -> Any:
        return self.invoke("reset_look_and_feel_settings", params={"spaceKey": space_key})

    def set_look_and_feel_settings(self, space_key: str | None = None, body: Any = None) -> Any:
        return self.invoke("set_look_and_feel_settings", params={"spaceKey": space_key}, body=body)

    def get_system_info(self) -> Any:
        return self.invoke("get_system_info")

    def get_themes(self, params: Params | None = None) -> Any:
        return self.invoke("get_themes", params=params)

    def get_theme(self, theme_key: str) -> Any:
        return self.invoke("get_theme", path={"themeKey": theme_key})

    def get_global_theme(self) -> Any:
        return self.invoke("get_global_theme")
