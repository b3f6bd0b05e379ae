from __future__ import annotations

from flask import Flask, request

from ..common.http import delete_response, envelope, json_api, json_body, list_response
from ..container import Container
from ..database.result import Notification
from ..search.engine import criteria_from_args


def register(app: Flask, container: Container) -> None:
    service = container.class_service

    @app.route("/api/classes", methods=["GET"], endpoint="classes_list")
    @json_api
    def classes_list():
        criteria = criteria_from_args(request.args, service.FILTERS)
        return list_response(service.search(criteria))

    @app.route("/api/classes", methods=["POST"], endpoint="classes_create")
    @json_api
    def classes_create():
        school_class = service.create(json_body())
        return envelope(school_class, [Notification.success("Class created successfully!")], 201)

    @app.route("/api/classes/<int:class_id>", methods=["GET"], endpoint="classes_get")
    @json_api
    def classes_get(class_id: int):
        return envelope(service.get(class_id))

    @app.route("/api/classes/<int:class_id>", methods=["PUT"], endpoint="classes_update")
    @json_api
    def classes_update(class_id: int):
        school_class = service.update(class_id, json_body())
        return envelope(school_class, [Notification.success("Class updated successfully!")])

    @app.route("/api/classes/<int:class_id>", methods=["DELETE"], endpoint="classes_delete")
    @json_api
    def classes_delete(class_id: int):
        return delete_response(service.delete(class_id))
