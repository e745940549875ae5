from __future__ import annotations

from typing import Any

from ..routes import GET, POST, PUT, Route, route_table
from .base import Params, Resource

ROUTES = route_table(
    Route("get_audit_records", GET, "/audit"),
    Route("create_audit_record", POST, "/audit", body=True),
    Route("export_audit_records", GET, "/audit/export", accept="application/zip"),
    Route("get_retention_period", GET, "/audit/retention"),
    Route("set_retention_period", PUT, "/audit/retention", body=True),
    Route("get_audit_records_for_period", GET, "/audit/since"),
)


class Audit(Resource):
    name = "audit"
    routes = ROUTES

    def get_audit_records(self, params: Params | None = None) -> Any:
        return self.invoke("get_audit_records", params=params)

    def create_audit_record(self, body: Any = None) -> Any:
        return self.invoke("create_audit_record", body=body)

    def export_audit_records(self, params: Params | None = None) -> Any:
        """Export audit records; returns the raw archive bytes (csv or zip)."""
        return self.invoke("export_audit_records", params=params)

    def get_retention_period(self) -> Any:
        return self.invoke("get_retention_period")

    def set_retention_period(self, body: Any = None) -> Any:
        return self.invoke("set_retention_period", body=body)

    def get_audit_records_for_period(self, params: Params | None = None) -> Any:
        return self.invoke("get_audit_records_for_period", params=params)
