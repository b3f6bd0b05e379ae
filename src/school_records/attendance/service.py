from __future__ import annotations

import threading
from collections import defaultdict
from datetime import date
from typing import Any, Callable, Iterable, Sequence

from ..app_logger import get_logger
from ..common.concurrency import run_concurrently
from ..common.datetime_utils import to_calendar_date, today_local
from ..common.validators import require_choice, require_id
from ..core.constants import DEFAULT_CLASS_LABEL
from ..core.enums import AttendanceStatus
from ..core.exceptions import RecordWriteError
from ..search.engine import ListView, SearchCriteria, filter_records
from ..search.specs import ROSTER_SEARCH
from ..students.model import Student
from ..students.repository import StudentRepository
from .model import AttendanceRecord, RosterRow
from .repository import AttendanceRepository

logger = get_logger(__name__)


class _KeyedLocks:
    """One lock per key, created on first use."""

    def __init__(self):
        self._guard = threading.Lock()
        self._locks: dict = defaultdict(threading.Lock)

    def __call__(self, key) -> threading.Lock:
        with self._guard:
            return self._locks[key]


def attendance_for_day(
    students: Sequence[Student], records: Iterable[AttendanceRecord], on: date
) -> dict[int, AttendanceRecord | None]:
    """Each student's mark on ``on`` (or ``None``). The first record wins if the store holds duplicates."""

    by_student: dict[int, AttendanceRecord] = {}
    for r in records:
        if r.student_id is not None and to_calendar_date(r.date) == on:
            by_student.setdefault(r.student_id, r)
    return {s.id: by_student.get(s.id) for s in students}


class AttendanceService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        students: StudentRepository,
        *,
        clock: Callable = today_local,
    ):
        self._attendance = attendance
        self._students = students
        self._clock = clock
        self._locks = _KeyedLocks()

    def mark(self, student_id: int, on: date | None, status: Any) -> AttendanceRecord:
        """Set the status of ``student_id`` on ``on``, creating the day's record if needed.

        Marks of the same (student, day) pair run one at a time, so two
        concurrent marks never create two records.
        """

        student_id = require_id(student_id, "Student")
        status = require_choice(status, AttendanceStatus, "Status").value
        on = to_calendar_date(on) or self._clock()

        with self._locks((student_id, on)):
            lookup = self._attendance.get_for_student_and_date(student_id, on)
            if not lookup.ok:
                raise RecordWriteError("Could not check existing attendance", lookup.notifications)
            existing = lookup.data
            if existing is not None:
                logger.info("Updating attendance %s for student %s on %s -> %s", existing.id, student_id, on, status)
                return self._attendance.update(
                    existing.id,
                    {
                        "student_id": student_id,
                        "date": on,
                        "status": status,
                        "notes": existing.notes or "",
                        "class_label": existing.class_label,
                    },
                )

            logger.info("Creating attendance for student %s on %s -> %s", student_id, on, status)
            return self._attendance.create(
                {
                    "student_id": student_id,
                    "date": on,
                    "status": status,
                    "notes": "",
                    "class_label": DEFAULT_CLASS_LABEL,
                }
            )

    def roster(self, on: date | None = None, criteria: SearchCriteria | None = None) -> ListView:
        """Students (filtered by name/number) with their mark for the day."""

        on = on or self._clock()
        loaded = run_concurrently(
            {"students": self._students.get_all, "attendance": lambda: self._attendance.get_between(on, on)}
        )
        students, attendance = loaded["students"], loaded["attendance"]

        marks = attendance_for_day(students.data, attendance.data, on)
        rows = [
            RosterRow(student_id=s.id, full_name=s.full_name, student_number=s.student_number, record=marks.get(s.id))
            for s in students.data
        ]
        items = filter_records(rows, criteria or SearchCriteria(), ROSTER_SEARCH)
        return ListView(
            items=items,
            total=len(rows),
            ok=students.ok and attendance.ok,
            notifications=students.notifications + attendance.notifications,
            options={"status": [s.value for s in AttendanceStatus]},
        )
