from __future__ import annotations

from typing import Any

from ..routes import DELETE, GET, PUT, Route, route_table
from .base import Params, Resource

_FROM_SOURCE = "/relation/{relationName}/from/{sourceType}/{sourceKey}/to/{targetType}"
_RELATIONSHIP = _FROM_SOURCE + "/{targetKey}"

ROUTES = route_table(
    Route("find_target_entities", GET, _FROM_SOURCE),
    Route("find_source_entities", GET, "/relation/{relationName}/to/{targetType}/{targetKey}/from/{sourceType}"),
    Route("find_relationship", GET, _RELATIONSHIP),
    Route("create_relationship", PUT, _RELATIONSHIP),
    Route("delete_relationship", DELETE, _RELATIONSHIP),
)


class Relation(Resource):
    """Relationships between users, content and spaces (e.g. ``favourite``).

    Entity types are ``user``, ``content`` or ``space``; keys are account ids,
    content ids or space keys respectively.
    """

    name = "relation"
    routes = ROUTES

    def find_target_entities(
            self,
            relation_name: str,
            source_key: str,
            source_type: str,
            target_type: str,
            params: Params | None = None,
    ) -> Any:
        path = {
            "relationName": relation_name,
            "sourceKey": source_key,
            "sourceType": source_type,
            "targetType": target_type,
        }
        return self.invoke("find_target_entities", path=path, params=params)

    def find_source_entities(
            self,
            relation_name: str,
            target_type: str,
            target_key: str,
            source_type: str,
            params: Params | None = None,
    ) -> Any:
        path = {
            "relationName": relation_name,
            "targetType": target_type,
            "targetKey": target_key,
            "sourceType": source_type,
        }
        return self.invoke("find_source_entities", path=path, params=params)

    def find_relationship(
            self,
            relation_name: str,
            source_key: str,
            source_type: str,
            target_type: str,
            target_key: str,
            params: Params | None = None,
    ) -> Any:
        path = _relationship_path(relation_name, source_key, source_type, target_type, target_key)
        return self.invoke("find_relationship", path=path, params=params)

    def create_relationship(
            self,
            relation_name: str,
            source_key: str,
            source_type: str,
            target_type: str,
            target_key: str,
            params: Params | None = None,
    ) -> Any:
        path = _relationship_path(relation_name, source_key, source_type, target_type, target_key)
        return self.invoke("create_relationship", path=path, params=params)

    def delete_relationship(
            self,
            relation_name: str,
            source_key: str,
            source_type: str,
            target_type: str,
            target_key: str,
            params: Params | None = None,
    ) -> Any:
        path = _relationship_path(relation_name, source_key, source_type, target_type, target_key)
        return self.invoke("delete_relationship", path=path, params=params)


def _relationship_path(
        relation_name: str,
        source_key: str,
        source_type: str,
        target_type: str,
        target_key: str,
) -> dict[str, str]:
    return {
        "relationName": relation_name,
        "sourceKey": source_key,
        "sourceType": source_type,
        "targetType": target_type,
        "targetKey": target_key,
    }
