from __future__ import annotations

from datetime import date, timedelta
from typing import Optional

from ..common.fields import FieldSpec
from ..database.query import OrderBy, SortType, Where
from ..database.remote_base import RecordGateway
from ..database.result import GatewayResult
from .model import AttendanceRecord
from .repository import AttendanceRepository


class RemoteAttendanceRepository(RecordGateway[AttendanceRecord], AttendanceRepository):
    TABLE = "attendance"
    ENTITY = "attendance record"
    ENTITY_PLURAL = "attendance records"
    MODEL = AttendanceRecord
    DEFAULT_ORDER = (OrderBy("date_c", SortType.DESC),)
    FIELDS = (
        FieldSpec.of("student_id", "ref"),
        FieldSpec.of("date", "date"),
        FieldSpec.of("status"),
        FieldSpec.of("notes"),
        FieldSpec.of("class_label", logical="class"),
    )

    def _day_range(self, start: date, end: date) -> list[Where]:
        # Exclusive bounds one day out, so timestamps on the edge days still match.
        key = self.wire_key("date")
        return [Where.greater_than(key, start - timedelta(days=1)), Where.less_than(key, end + timedelta(days=1))]

    def get_by_student_id(self, student_id: int) -> GatewayResult[list[AttendanceRecord]]:
        return self.find_all(where=[Where.equal(self.wire_key("student_id"), int(student_id))])

    def get_between(self, start: date, end: date) -> GatewayResult[list[AttendanceRecord]]:
        """All marks dated ``start`` to ``end`` (calendar days, inclusive)."""

        result = self.find_all(where=self._day_range(start, end))
        marks = [r for r in result.data if r.date is not None and start <= r.date <= end]
        return GatewayResult(ok=result.ok, data=marks, notifications=result.notifications)

    def get_for_student_and_date(self, student_id: int, on: date) -> GatewayResult[Optional[AttendanceRecord]]:
        where = [Where.equal(self.wire_key("student_id"), int(student_id))] + self._day_range(on, on)
        result = self.find_all(where=where)
        match = next((r for r in result.data if r.date == on), None)
        return GatewayResult(ok=result.ok, data=match, notifications=result.notifications)
