from __future__ import annotations

from datetime import date
from typing import Optional, Protocol

from ..database.repository import RecordRepository
from ..database.result import GatewayResult
from .model import AttendanceRecord


class AttendanceRepository(RecordRepository[AttendanceRecord], Protocol):
    def get_by_student_id(self, student_id: int) -> GatewayResult[list[AttendanceRecord]]:
        raise NotImplementedError

    def get_between(self, start: date, end: date) -> GatewayResult[list[AttendanceRecord]]:
        raise NotImplementedError

    def get_for_student_and_date(self, student_id: int, on: date) -> GatewayResult[Optional[AttendanceRecord]]:
        raise NotImplementedError
