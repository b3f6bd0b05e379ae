from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Any, Callable

from ..app_logger import get_logger
from ..attendance.repository import AttendanceRepository
from ..common.concurrency import run_concurrently
from ..common.datetime_utils import to_calendar_date, today_local
from ..common.validators import require_choice
from ..core.constants import DASHBOARD_RECENT_GRADES, DASHBOARD_STUDENT_LIMIT, PENDING_GRADES_RATIO
from ..core.enums import AttendanceStatus, ReportPeriod, StudentStatus
from ..grades.model import Grade
from ..grades.repository import GradeRepository
from ..students.model import Student
from ..students.repository import StudentRepository
from .statistics import (
    TrendPoint,
    attendance_rate,
    attendance_trend,
    average_percentage,
    count_marked_on,
    grade_distribution,
    round_percent,
)

logger = get_logger(__name__)


@dataclass(frozen=True)
class Dashboard:
    total_students: int
    present_today: int
    average_grade: int
    pending_grades: int
    students: list[Student]
    recent_grades: list[Grade]
    notifications: tuple = ()


@dataclass(frozen=True)
class Report:
    period: str
    start: date
    end: date
    total_students: int
    active_students: int
    attendance_rate: int
    average_grade: int
    grade_distribution: dict
    attendance_trend: list[TrendPoint]
    notifications: tuple = ()


def _load_all(
    students: StudentRepository, attendance: AttendanceRepository, grades: GradeRepository, start: date, end: date
) -> dict[str, Any]:
    return run_concurrently(
        {
            "students": students.get_all,
            "attendance": lambda: attendance.get_between(start, end),
            "grades": grades.get_all,
        }
    )


def _notifications(loaded: dict[str, Any]) -> tuple:
    return tuple(n for r in loaded.values() for n in r.notifications)


def _recorded_on(grade: Grade) -> date:
    return to_calendar_date(grade.date_recorded) or date.min


class DashboardService:
    def __init__(
        self,
        students: StudentRepository,
        attendance: AttendanceRepository,
        grades: GradeRepository,
        *,
        clock: Callable = today_local,
    ):
        self._students = students
        self._attendance = attendance
        self._grades = grades
        self._clock = clock

    def build(self, today: date | None = None) -> Dashboard:
        today = today or self._clock()
        loaded = _load_all(self._students, self._attendance, self._grades, today, today)
        students = loaded["students"].data
        grades = loaded["grades"].data

        total = len(students)
        recent = sorted(grades, key=_recorded_on, reverse=True)[:DASHBOARD_RECENT_GRADES]
        return Dashboard(
            total_students=total,
            present_today=count_marked_on(loaded["attendance"].data, today, AttendanceStatus.PRESENT),
            average_grade=round_percent(average_percentage(grades)),
            pending_grades=int(total * PENDING_GRADES_RATIO),
            students=list(students[:DASHBOARD_STUDENT_LIMIT]),
            recent_grades=recent,
            notifications=_notifications(loaded),
        )


class ReportService:
    """Period statistics for the reports page.

    The attendance window runs from ``today - period.days`` to ``today``
    (both inclusive); the trend shows the last ``period.days`` days.
    """

    def __init__(
        self,
        students: StudentRepository,
        attendance: AttendanceRepository,
        grades: GradeRepository,
        *,
        clock: Callable = today_local,
    ):
        self._students = students
        self._attendance = attendance
        self._grades = grades
        self._clock = clock

    def build(self, period: ReportPeriod | str = ReportPeriod.WEEK, today: date | None = None) -> Report:
        period = require_choice(period, ReportPeriod, "Period")
        today = today or self._clock()
        start = today - timedelta(days=period.days)

        loaded = _load_all(self._students, self._attendance, self._grades, start, today)
        students = loaded["students"].data
        attendance = loaded["attendance"].data
        grades = loaded["grades"].data
        logger.debug("Building %s report: %d students, %d marks, %d grades", period.value, len(students), len(attendance), len(grades))

        return Report(
            period=period.value,
            start=start,
            end=today,
            total_students=len(students),
            active_students=sum(1 for s in students if s.status == StudentStatus.ACTIVE.value),
            attendance_rate=attendance_rate(attendance, start, today),
            average_grade=round_percent(average_percentage(grades)),
            grade_distribution=grade_distribution(grades),
            attendance_trend=attendance_trend(attendance, period.days, today),
            notifications=_notifications(loaded),
        )
