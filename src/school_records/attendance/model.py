from __future__ import annotations

from dataclasses import dataclass
import datetime
from typing import Optional


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: attendance mark of one student on one calendar day."""

    id: Optional[int] = None
    student_id: Optional[int] = None
    date: Optional[datetime.date] = None
    status: Optional[str] = None
    notes: Optional[str] = None
    class_label: Optional[str] = None


@dataclass(frozen=True)
class RosterRow:
    """Read-model for the attendance page: a student and today's mark, if any."""

    student_id: int
    full_name: str
    student_number: Optional[str]
    record: Optional[AttendanceRecord]

    __json_extra__ = ("status",)

    @property
    def status(self) -> Optional[str]:
        return self.record.status if self.record else None
