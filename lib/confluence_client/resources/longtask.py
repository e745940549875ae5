from __future__ import annotations

from typing import Any

from ..routes import GET, Route, route_table
from .base import Params, Resource

ROUTES = route_table(
    Route("get_long_running_tasks", GET, "/longtask"),
    Route("get_long_running_task", GET, "/longtask/{taskId}"),
)


class LongTask(Resource):
    name = "longtask"
    routes = ROUTES

    def get_long_running_tasks(self, params: Params | None = None) -> Any:
        return self.invoke("get_long_running_tasks", params=params)

    def get_long_running_task(self, task_id: str) -> Any:
        return self.invoke("get_long_running_task", path={"taskId": task_id})
