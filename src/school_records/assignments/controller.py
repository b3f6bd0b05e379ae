from __future__ import annotations

from flask import Flask, request

from ..common.http import delete_response, envelope, json_api, json_body, list_response
from ..container import Container
from ..database.result import Notification
from ..search.engine import criteria_from_args


def register(app: Flask, container: Container) -> None:
    service = container.assignment_service

    @app.route("/api/assignments", methods=["GET"], endpoint="assignments_list")
    @json_api
    def assignments_list():
        criteria = criteria_from_args(request.args, service.FILTERS)
        return list_response(service.search(criteria))

    @app.route("/api/assignments", methods=["POST"], endpoint="assignments_create")
    @json_api
    def assignments_create():
        assignment = service.create(json_body())
        return envelope(assignment, [Notification.success("Assignment created successfully!")], 201)

    @app.route("/api/assignments/<int:assignment_id>", methods=["GET"], endpoint="assignments_get")
    @json_api
    def assignments_get(assignment_id: int):
        return envelope(service.get(assignment_id))

    @app.route("/api/assignments/<int:assignment_id>", methods=["PUT"], endpoint="assignments_update")
    @json_api
    def assignments_update(assignment_id: int):
        assignment = service.update(assignment_id, json_body())
        return envelope(assignment, [Notification.success("Assignment updated successfully!")])

    @app.route("/api/assignments/<int:assignment_id>", methods=["DELETE"], endpoint="assignments_delete")
    @json_api
    def assignments_delete(assignment_id: int):
        return delete_response(service.delete(assignment_id))

    @app.route("/api/assignments/overdue", methods=["GET"], endpoint="assignments_overdue")
    @json_api
    def assignments_overdue():
        result = service.get_overdue()
        return envelope(result.data, result.notifications)

    @app.route("/api/assignments/<int:assignment_id>/status", methods=["POST"], endpoint="assignments_status")
    @json_api
    def assignments_status(assignment_id: int):
        assignment = service.update_status(assignment_id, json_body().get("status"))
        return envelope(assignment, [Notification.success("Assignment status updated!")])

    @app.route("/api/classes/<int:class_id>/assignments", methods=["GET"], endpoint="class_assignments")
    @json_api
    def class_assignments(class_id: int):
        result = service.get_by_class_id(class_id)
        return envelope(result.data, result.notifications)
