from __future__ import annotations

from typing import Any

from ..routes import DELETE, GET, POST, PUT, Route, route_table
from .base import Params, Resource

ROUTES = route_table(
    Route("create_content_template", POST, "/template", body=True),
    Route("update_content_template", PUT, "/template", body=True),
    Route("get_content_template", GET, "/template/{contentTemplateId}"),
    Route("delete_content_template", DELETE, "/template/{contentTemplateId}"),
    Route("get_blueprint_templates", GET, "/template/blueprint"),
    Route("get_content_templates", GET, "/template/page"),
)


class Template(Resource):
    name = "template"
    routes = ROUTES

    def create_content_template(self, body: Any = None) -> Any:
        return self.invoke("create_content_template", body=body)

    def update_content_template(self, body: Any = None) -> Any:
        return self.invoke("update_content_template", body=body)

    def get_content_template(self, template_id: str) -> Any:
        return self.invoke("get_content_template", path={"contentTemplateId": template_id})

    def delete_content_template(self, template_id: str) -> Any:
        return self.invoke("delete_content_template", path={"contentTemplateId": template_id})

    def get_blueprint_templates(self, params: Params | None = None) -> Any:
        return self.invoke("get_blueprint_templates", params=params)

    def get_content_templates(self, params: Params | None = None) -> Any:
        return self.invoke("get_content_templates", params=params)
