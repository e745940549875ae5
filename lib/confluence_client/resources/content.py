from __future__ import annotations

from typing import Any

from ..routes import DELETE, GET, POST, PUT, Route, route_table
from ..transport import FileInput
from .base import Params, Resource, attachment_fields

_ATTACHMENTS = "/content/{id}/child/attachment"
_PROPERTY = "/content/{id}/property/{key}"
_RESTRICTION = "/content/{id}/restriction"
_BY_OPERATION = _RESTRICTION + "/byOperation/{operationKey}"
_VERSION = "/content/{id}/version/{versionNumber}"
_DRAFT = "/content/blueprint/instance/{draftId}"

ROUTES = route_table(
    Route("get_content", GET, "/content"),
    Route("create_content", POST, "/content", body=True),
    Route("get_content_by_id", GET, "/content/{id}"),
    Route("update_content", PUT, "/content/{id}", body=True),
    Route("delete_content", DELETE, "/content/{id}"),
    Route("get_content_children", GET, "/content/{id}/child"),
    Route("get_content_children_by_type", GET, "/content/{id}/child/{type}"),
    Route("get_attachments", GET, _ATTACHMENTS),
    Route("create_attachment", POST, _ATTACHMENTS, multipart=True, no_check=True),
    Route("create_or_update_attachment", PUT, _ATTACHMENTS, multipart=True, no_check=True),
    Route("update_attachment_properties", PUT, _ATTACHMENTS + "/{attachmentId}", body=True),
    Route("update_attachment_data", POST, _ATTACHMENTS + "/{attachmentId}/data", multipart=True, no_check=True),
    Route("get_content_comments", GET, "/content/{id}/child/comment"),
    Route("get_content_descendants", GET, "/content/{id}/descendant"),
    Route("get_content_descendants_by_type", GET, "/content/{id}/descendant/{type}"),
    Route("get_content_history", GET, "/content/{id}/history"),
    Route("get_macro_body_by_id", GET, "/content/{id}/history/{version}/macro/id/{macroId}"),
    Route("get_content_labels", GET, "/content/{id}/label"),
    Route("add_labels_to_content", POST, "/content/{id}/label", body=True),
    Route("remove_label_from_content_using_query", DELETE, "/content/{id}/label"),
    Route("remove_label_from_content", DELETE, "/content/{id}/label/{label}"),
    Route("get_watches_for_page", GET, "/content/{id}/notification/child-created"),
    Route("get_watches_for_space", GET, "/content/{id}/notification/created"),
    Route("copy_page_hierarchy", POST, "/content/{id}/pagehierarchy/copy", body=True),
    Route("get_content_properties", GET, "/content/{id}/property"),
    Route("create_content_property", POST, "/content/{id}/property", body=True),
    Route("get_content_property", GET, _PROPERTY),
    Route("create_content_property_for_key", POST, _PROPERTY, body=True),
    Route("update_content_property", PUT, _PROPERTY, body=True),
    Route("delete_content_property", DELETE, _PROPERTY),
    Route("get_restrictions", GET, _RESTRICTION),
    Route("add_restrictions", POST, _RESTRICTION, body=True),
    Route("update_restrictions", PUT, _RESTRICTION, body=True),
    Route("delete_restrictions", DELETE, _RESTRICTION),
    Route("get_restrictions_by_operation", GET, _RESTRICTION + "/byOperation"),
    Route("get_restrictions_for_operation", GET, _BY_OPERATION),
    Route("get_restriction_status_for_group", GET, _BY_OPERATION + "/group/{groupName}"),
    Route("add_group_to_restriction", PUT, _BY_OPERATION + "/group/{groupName}"),
    Route("remove_group_from_restriction", DELETE, _BY_OPERATION + "/group/{groupName}"),
    Route("get_restriction_status_for_user", GET, _BY_OPERATION + "/user"),
    Route("add_user_to_restriction", PUT, _BY_OPERATION + "/user"),
    Route("remove_user_from_restriction", DELETE, _BY_OPERATION + "/user"),
    Route("get_content_versions", GET, "/content/{id}/version"),
    Route("restore_content_version", POST, "/content/{id}/version", body=True),
    Route("get_content_version", GET, _VERSION),
    Route("delete_content_version", DELETE, _VERSION),
    Route("publish_legacy_draft", POST, _DRAFT, body=True),
    Route("publish_shared_draft", PUT, _DRAFT, body=True),
    Route("search_content_by_cql", GET, "/content/search"),
)


class Content(Resource):
    name = "content"
    routes = ROUTES

    def get_content(self, params: Params | None = None) -> Any:
        return self.invoke("get_content", params=params)

    def create_content(self, params: Params | None = None, body: Any = None) -> Any:
        return self.invoke("create_content", params=params, body=body)

    def get_content_by_id(self, content_id: str, params: Params | None = None) -> Any:
        return self.invoke("get_content_by_id", path={"id": content_id}, params=params)

    def update_content(self, content_id: str, params: Params | None = None, body: Any = None) -> Any:
        """Update a piece of content.

        ``body["version"]["number"]`` must be the current version plus one; read
        the content first and bump the number before calling this.
        """
        return self.invoke("update_content", path={"id": content_id}, params=params, body=body)

    def delete_content(self, content_id: str, params: Params | None = None) -> Any:
        return self.invoke("delete_content", path={"id": content_id}, params=params)

    def get_content_children(self, content_id: str, params: Params | None = None) -> Any:
        return self.invoke("get_content_children", path={"id": content_id}, params=params)

    def get_content_children_by_type(self, content_id: str, child_type: str, params: Params | None = None) -> Any:
        return self.invoke("get_content_children_by_type", path={"id": content_id, "type": child_type}, params=params)

    # --- Attachments ---
    def get_attachments(self, content_id: str, params: Params | None = None) -> Any:
        return self.invoke("get_attachments", path={"id": content_id}, params=params)

    def create_attachment(
            self,
            content_id: str,
            file: FileInput,
            *,
            comment: str | None = None,
            minor_edit: bool = False,
            params: Params | None = None,
    ) -> Any:
        return self.upload(
            "create_attachment",
            file=file,
            fields=attachment_fields(comment, minor_edit),
            path={"id": content_id},
            params=params,
        )

    def create_or_update_attachment(
            self,
            content_id: str,
            file: FileInput,
            *,
            comment: str | None = None,
            minor_edit: bool = False,
            params: Params | None = None,
    ) -> Any:
        return self.upload(
            "create_or_update_attachment",
            file=file,
            fields=attachment_fields(comment, minor_edit),
            path={"id": content_id},
            params=params,
        )

    def update_attachment_properties(self, content_id: str, attachment_id: str, body: Any = None) -> Any:
        return self.invoke(
            "update_attachment_properties",
            path={"id": content_id, "attachmentId": attachment_id},
            body=body,
        )

    def update_attachment_data(
            self,
            content_id: str,
            attachment_id: str,
            file: FileInput,
            *,
            comment: str | None = None,
            minor_edit: bool = False,
    ) -> Any:
        return self.upload(
            "update_attachment_data",
            file=file,
            fields=attachment_fields(comment, minor_edit),
            path={"id": content_id, "attachmentId": attachment_id},
        )

    # --- Comments, descendants, history ---
    def get_content_comments(self, content_id: str, params: Params | None = None) -> Any:
        return self.invoke("get_content_comments", path={"id": content_id}, params=params)

    def get_content_descendants(self, content_id: str, params: Params | None = None) -> Any:
        return self.invoke("get_content_descendants", path={"id": content_id}, params=params)

    def get_content_descendants_by_type(self, content_id: str, descendant_type: str, params: Params | None = None) -> Any:
        return self.invoke(
            "get_content_descendants_by_type",
            path={"id": content_id, "type": descendant_type},
            params=params,
        )

    def get_content_history(self, content_id: str, params: Params | None = None) -> Any:
        return self.invoke("get_content_history", path={"id": content_id}, params=params)

    def get_macro_body_by_id(self, content_id: str, version: int, macro_id: str) -> Any:
        return self.invoke(
            "get_macro_body_by_id",
            path={"id": content_id, "version": version, "macroId": macro_id},
        )

    # --- Labels ---
    def get_content_labels(self, content_id: str, params: Params | None = None) -> Any:
        return self.invoke("get_content_labels", path={"id": content_id}, params=params)

    def add_labels_to_content(self, content_id: str, labels: Any = None) -> Any:
        return self.invoke("add_labels_to_content", path={"id": content_id}, body=labels)

    def remove_label_from_content_using_query(self, content_id: str, params: Params | None = None) -> Any:
        return self.invoke("remove_label_from_content_using_query", path={"id": content_id}, params=params)

    def remove_label_from_content(self, content_id: str, label: str) -> Any:
        return self.invoke("remove_label_from_content", path={"id": content_id, "label": label})

    # --- Watches ---
    def get_watches_for_page(self, content_id: str, params: Params | None = None) -> Any:
        return self.invoke("get_watches_for_page", path={"id": content_id}, params=params)

    def get_watches_for_space(self, content_id: str, params: Params | None = None) -> Any:
        return self.invoke("get_watches_for_space", path={"id": content_id}, params=params)

    def copy_page_hierarchy(self, content_id: str, body: Any = None) -> Any:
        return self.invoke("copy_page_hierarchy", path={"id": content_id}, body=body)

    # --- Properties ---
    def get_content_properties(self, content_id: str, params: Params | None = None) -> Any:
        return self.invoke("get_content_properties", path={"id": content_id}, params=params)

    def create_content_property(self, content_id: str, body: Any = None) -> Any:
        return self.invoke("create_content_property", path={"id": content_id}, body=body)

    def get_content_property(self, content_id: str, key: str, params: Params | None = None) -> Any:
        return self.invoke("get_content_property", path={"id": content_id, "key": key}, params=params)

    def create_content_property_for_key(self, content_id: str, key: str, body: Any = None) -> Any:
        return self.invoke("create_content_property_for_key", path={"id": content_id, "key": key}, body=body)

    def update_content_property(self, content_id: str, key: str, body: Any = None) -> Any:
        return self.invoke("update_content_property", path={"id": content_id, "key": key}, body=body)

    def delete_content_property(self, content_id: str, key: str) -> Any:
        return self.invoke("delete_content_property", path={"id": content_id, "key": key})

    # --- Restrictions ---
    def get_restrictions(self, content_id: str, params: Params | None = None) -> Any:
        return self.invoke("get_restrictions", path={"id": content_id}, params=params)

    def add_restrictions(self, content_id: str, body: Any = None) -> Any:
        return self.invoke("add_restrictions", path={"id": content_id}, body=body)

    def update_restrictions(self, content_id: str, params: Params | None = None, body: Any = None) -> Any:
        return self.invoke("update_restrictions", path={"id": content_id}, params=params, body=body)

    def delete_restrictions(self, content_id: str, params: Params | None = None) -> Any:
        return self.invoke("delete_restrictions", path={"id": content_id}, params=params)

    def get_restrictions_by_operation(self, content_id: str, params: Params | None = None) -> Any:
        return self.invoke("get_restrictions_by_operation", path={"id": content_id}, params=params)

    def get_restrictions_for_operation(self, content_id: str, operation_key: str, params: Params | None = None) -> Any:
        return self.invoke(
            "get_restrictions_for_operation",
            path={"id": content_id, "operationKey": operation_key},
            params=params,
        )

    def get_restriction_status_for_group(self, content_id: str, operation_key: str, group_name: str) -> Any:
        return self.invoke(
            "get_restriction_status_for_group",
            path={"id": content_id, "operationKey": operation_key, "groupName": group_name},
        )

    def add_group_to_restriction(self, content_id: str, operation_key: str, group_name: str) -> Any:
        return self.invoke(
            "add_group_to_restriction",
            path={"id": content_id, "operationKey": operation_key, "groupName": group_name},
        )

    def remove_group_from_restriction(self, content_id: str, operation_key: str, group_name: str) -> Any:
        return self.invoke(
            "remove_group_from_restriction",
            path={"id": content_id, "operationKey": operation_key, "groupName": group_name},
        )

    def get_restriction_status_for_user(self, content_id: str, operation_key: str, params: Params | None = None) -> Any:
        return self.invoke(
            "get_restriction_status_for_user",
            path={"id": content_id, "operationKey": operation_key},
            params=params,
        )

    def add_user_to_restriction(self, content_id: str, operation_key: str, params: Params | None = None) -> Any:
        return self.invoke(
            "add_user_to_restriction",
            path={"id": content_id, "operationKey": operation_key},
            params=params,
        )

    def remove_user_from_restriction(self, content_id: str, operation_key: str, params: Params | None = None) -> Any:
        return self.invoke(
            "remove_user_from_restriction",
            path={"id": content_id, "operationKey": operation_key},
            params=params,
        )

    # --- Versions ---
    def get_content_versions(self, content_id: str, params: Params | None = None) -> Any:
        return self.invoke("get_content_versions", path={"id": content_id}, params=params)

    def restore_content_version(self, content_id: str, params: Params | None = None, body: Any = None) -> Any:
        return self.invoke("restore_content_version", path={"id": content_id}, params=params, body=body)

    def get_content_version(self, content_id: str, version_number: int, params: Params | None = None) -> Any:
        return self.invoke(
            "get_content_version",
            path={"id": content_id, "versionNumber": version_number},
            params=params,
        )

    def delete_content_version(self, content_id: str, version_number: int) -> Any:
        return self.invoke("delete_content_version", path={"id": content_id, "versionNumber": version_number})

    # --- Drafts ---
    def publish_legacy_draft(self, draft_id: str, params: Params | None = None, body: Any = None) -> Any:
        return self.invoke("publish_legacy_draft", path={"draftId": draft_id}, params=params, body=body)

    def publish_shared_draft(self, draft_id: str, params: Params | None = None, body: Any = None) -> Any:
        return self.invoke("publish_shared_draft", path={"draftId": draft_id}, params=params, body=body)

    def search_content_by_cql(self, params: Params | None = None) -> Any:
        return self.invoke("search_content_by_cql", params=params)
