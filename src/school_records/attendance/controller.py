from __future__ import annotations

from flask import Flask, request

from ..common.datetime_utils import to_calendar_date
from ..common.http import envelope, json_api, json_body, list_response
from ..container import Container
from ..core.exceptions import ValidationError
from ..database.result import Notification
from ..search.engine import criteria_from_args


def _day(value):
    if not value:
        return None
    day = to_calendar_date(value)
    if day is None:
        raise ValidationError("Date must be YYYY-MM-DD")
    return day


def register(app: Flask, container: Container) -> None:
    service = container.attendance_service

    @app.route("/api/attendance", methods=["GET"], endpoint="attendance_roster")
    @json_api
    def attendance_roster():
        on = _day(request.args.get("date"))
        criteria = criteria_from_args(request.args, ("status",))
        return list_response(service.roster(on, criteria))

    @app.route("/api/attendance/mark", methods=["POST"], endpoint="attendance_mark")
    @json_api
    def attendance_mark():
        payload = json_body()
        record = service.mark(payload.get("student_id"), _day(payload.get("date")), payload.get("status"))
        return envelope(record, [Notification.success(f"Attendance marked as {record.status}")])
