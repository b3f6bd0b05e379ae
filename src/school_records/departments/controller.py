from __future__ import annotations

from flask import Flask, request

from ..common.http import delete_response, envelope, json_api, json_body, list_response
from ..container import Container
from ..core.exceptions import ValidationError
from ..database.result import Notification
from ..search.engine import criteria_from_args


def register(app: Flask, container: Container) -> None:
    service = container.department_service

    @app.route("/api/departments", methods=["GET"], endpoint="departments_list")
    @json_api
    def departments_list():
        criteria = criteria_from_args(request.args, service.FILTERS)
        return list_response(service.search(criteria))

    @app.route("/api/departments", methods=["POST"], endpoint="departments_create")
    @json_api
    def departments_create():
        department = service.create(json_body())
        return envelope(department, [Notification.success("Department created successfully!")], 201)

    @app.route("/api/departments/<int:department_id>", methods=["GET"], endpoint="departments_get")
    @json_api
    def departments_get(department_id: int):
        return envelope(service.get(department_id))

    @app.route("/api/departments/<int:department_id>", methods=["PUT"], endpoint="departments_update")
    @json_api
    def departments_update(department_id: int):
        department = service.update(department_id, json_body())
        return envelope(department, [Notification.success("Department updated successfully!")])

    @app.route("/api/departments/<int:department_id>", methods=["DELETE"], endpoint="departments_delete")
    @json_api
    def departments_delete(department_id: int):
        return delete_response(service.delete(department_id))

    @app.route("/api/departments/bulk-delete", methods=["POST"], endpoint="departments_bulk_delete")
    @json_api
    def departments_bulk_delete():
        ids = json_body().get("ids") or []
        if not isinstance(ids, list):
            raise ValidationError("ids must be a list")
        return delete_response(service.delete_many(ids))
