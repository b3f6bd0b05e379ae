from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Mapping

from ..app_logger import get_logger
from ..common.concurrency import run_concurrently
from ..common.datetime_utils import today_local
from ..common.validators import require_choice, require_email, require_non_empty
from ..core.enums import GradeLevel, StudentStatus
from ..core.exceptions import NotFoundError
from ..database.result import GatewayResult
from ..grades.model import Grade
from ..grades.repository import GradeRepository
from ..attendance.model import AttendanceRecord
from ..attendance.repository import AttendanceRepository
from ..reports.statistics import attendance_rate, average_percentage, round_percent
from ..search.engine import ListView, SearchCriteria, distinct_values, filter_records
from ..search.specs import STUDENT_SEARCH
from .model import Student
from .repository import StudentRepository

logger = get_logger(__name__)


@dataclass(frozen=True)
class StudentDetail:
    student: Student
    grades: list[Grade]
    attendance: list[AttendanceRecord]
    average_grade: int
    attendance_rate: int
    notifications: tuple = ()


class StudentService:
    FILTERS = ("status", "grade_level")

    def __init__(
        self,
        students: StudentRepository,
        grades: GradeRepository | None = None,
        attendance: AttendanceRepository | None = None,
        *,
        clock: Callable = today_local,
    ):
        self._students = students
        self._grades = grades
        self._attendance = attendance
        self._clock = clock

    def search(self, criteria: SearchCriteria) -> ListView:
        result = self._students.get_all()
        items = filter_records(result.data, criteria, STUDENT_SEARCH)
        return ListView(
            items=items,
            total=len(result.data),
            ok=result.ok,
            notifications=result.notifications,
            options={
                "status": distinct_values(result.data, "status"),
                "grade_level": distinct_values(result.data, "grade_level"),
            },
        )

    def get(self, student_id: int) -> Student:
        result = self._students.get_by_id(student_id)
        if result.data is None:
            raise NotFoundError(f"Student {student_id} not found")
        return result.data

    def _validate(self, values: Mapping[str, Any], *, partial: bool) -> dict:
        data = dict(values)
        if not partial or "first_name" in data:
            data["first_name"] = require_non_empty(data.get("first_name"), "First name")
        if not partial or "last_name" in data:
            data["last_name"] = require_non_empty(data.get("last_name"), "Last name")
        if not partial or "email" in data:
            data["email"] = require_email(require_non_empty(data.get("email"), "Email"))
        if data.get("status"):
            data["status"] = require_choice(data["status"], StudentStatus, "Status").value
        elif not partial:
            data["status"] = StudentStatus.ACTIVE.value
        if data.get("grade_level"):
            data["grade_level"] = require_choice(data["grade_level"], GradeLevel, "Grade level").value
        if not partial and not data.get("enrollment_date"):
            data["enrollment_date"] = self._clock()
        return data

    def create(self, values: Mapping[str, Any]) -> Student:
        student = self._students.create(self._validate(values, partial=False))
        logger.info("Created student %s", student.id)
        return student

    def update(self, student_id: int, values: Mapping[str, Any]) -> Student:
        return self._students.update(student_id, self._validate(values, partial=True))

    def delete(self, student_id: int) -> GatewayResult[bool]:
        return self._students.delete(student_id)

    def get_detail(self, student_id: int) -> StudentDetail:
        """Student with its grades and attendance, loaded side by side."""

        calls = {"student": lambda: self._students.get_by_id(student_id)}
        if self._grades is not None:
            calls["grades"] = lambda: self._grades.get_by_student_id(student_id)
        if self._attendance is not None:
            calls["attendance"] = lambda: self._attendance.get_by_student_id(student_id)
        loaded = run_concurrently(calls)

        student = loaded["student"].data
        if student is None:
            raise NotFoundError(f"Student {student_id} not found")

        grades = loaded["grades"].data if "grades" in loaded else []
        attendance = loaded["attendance"].data if "attendance" in loaded else []
        notifications = tuple(n for r in loaded.values() for n in r.notifications)
        return StudentDetail(
            student=student,
            grades=grades,
            attendance=attendance,
            average_grade=round_percent(average_percentage(grades)),
            attendance_rate=attendance_rate(attendance),
            notifications=notifications,
        )
