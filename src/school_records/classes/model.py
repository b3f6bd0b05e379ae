from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class SchoolClass:
    id: Optional[int] = None
    name: Optional[str] = None
    subject: Optional[str] = None
    teacher: Optional[str] = None
    schedule_time: Optional[str] = None
    schedule_days: Optional[str] = None
    room: Optional[str] = None
    grade_level: Optional[str] = None
    student_ids: tuple = ()

    __json_extra__ = ("student_count",)

    @property
    def student_count(self) -> int:
        return len(self.student_ids)
