from __future__ import annotations

from flask import Flask, request

from ..common.http import delete_response, envelope, json_api, json_body, list_response
from ..container import Container
from ..database.result import Notification
from ..search.engine import criteria_from_args


def register(app: Flask, container: Container) -> None:
    service = container.grade_service

    @app.route("/api/grades", methods=["GET"], endpoint="grades_list")
    @json_api
    def grades_list():
        criteria = criteria_from_args(request.args, service.FILTERS)
        return list_response(service.search(criteria))

    @app.route("/api/grades", methods=["POST"], endpoint="grades_create")
    @json_api
    def grades_create():
        grade = service.create(json_body())
        return envelope(grade, [Notification.success("Grade created successfully!")], 201)

    @app.route("/api/grades/<int:grade_id>", methods=["GET"], endpoint="grades_get")
    @json_api
    def grades_get(grade_id: int):
        return envelope(service.get(grade_id))

    @app.route("/api/grades/<int:grade_id>", methods=["PUT"], endpoint="grades_update")
    @json_api
    def grades_update(grade_id: int):
        grade = service.update(grade_id, json_body())
        return envelope(grade, [Notification.success("Grade updated successfully!")])

    @app.route("/api/grades/<int:grade_id>", methods=["DELETE"], endpoint="grades_delete")
    @json_api
    def grades_delete(grade_id: int):
        return delete_response(service.delete(grade_id))
