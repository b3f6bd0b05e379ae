from __future__ import annotations

from flask import Flask, request

from ..common.http import delete_response, envelope, json_api, json_body, list_response
from ..container import Container
from ..database.result import Notification
from ..search.engine import criteria_from_args


def register(app: Flask, container: Container) -> None:
    service = container.student_service

    @app.route("/api/students", methods=["GET"], endpoint="students_list")
    @json_api
    def students_list():
        criteria = criteria_from_args(request.args, service.FILTERS)
        return list_response(service.search(criteria))

    @app.route("/api/students", methods=["POST"], endpoint="students_create")
    @json_api
    def students_create():
        student = service.create(json_body())
        return envelope(student, [Notification.success("Student created successfully!")], 201)

    @app.route("/api/students/<int:student_id>", methods=["GET"], endpoint="students_get")
    @json_api
    def students_get(student_id: int):
        return envelope(service.get(student_id))

    @app.route("/api/students/<int:student_id>", methods=["PUT"], endpoint="students_update")
    @json_api
    def students_update(student_id: int):
        student = service.update(student_id, json_body())
        return envelope(student, [Notification.success("Student updated successfully!")])

    @app.route("/api/students/<int:student_id>", methods=["DELETE"], endpoint="students_delete")
    @json_api
    def students_delete(student_id: int):
        return delete_response(service.delete(student_id))

    @app.route("/api/students/<int:student_id>/detail", methods=["GET"], endpoint="students_detail")
    @json_api
    def students_detail(student_id: int):
        detail = service.get_detail(student_id)
        return envelope(detail, detail.notifications)
