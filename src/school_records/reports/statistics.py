"""Summary statistics for the dashboard and reports pages.

Everything here is a pure function over canonical models. Day-level logic
always compares calendar dates, never timestamps.
"""

from __future__ import annotations

import math
from collections import Counter
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Any, Iterable, Optional, Sequence

from ..common.datetime_utils import to_calendar_date
from ..core.enums import AssignmentStatus, AttendanceStatus

LETTERS = ("A", "B", "C", "D", "F")


def round_percent(value: float) -> int:
    """Half-up rounding (85.5 -> 86), unlike the builtin's banker's rounding."""
    return int(math.floor(value + 0.5))


def grade_percentage(grade: Any) -> Optional[float]:
    score = getattr(grade, "score", None)
    max_points = getattr(grade, "max_points", None)
    if score is None or max_points is None or max_points <= 0:
        return None
    return score / max_points * 100


def letter_grade(percentage: float) -> str:
    if percentage >= 90:
        return "A"
    if percentage >= 80:
        return "B"
    if percentage >= 70:
        return "C"
    if percentage >= 60:
        return "D"
    return "F"


def valid_percentages(grades: Iterable[Any]) -> list[float]:
    """Percentages of grades that have both score and a positive max_points."""
    out = []
    for g in grades:
        pct = grade_percentage(g)
        if pct is not None:
            out.append(pct)
    return out


def grade_distribution(grades: Iterable[Any]) -> dict[str, int]:
    counts = dict.fromkeys(LETTERS, 0)
    for pct in valid_percentages(grades):
        counts[letter_grade(pct)] += 1
    return counts


def average_percentage(grades: Iterable[Any]) -> float:
    """Mean percentage over valid grades; 0 when there are none."""
    values = valid_percentages(grades)
    if not values:
        return 0
    return sum(values) / len(values)


def _status(record: Any) -> str:
    return str(getattr(record, "status", "") or "").strip().lower()


def _in_window(day: Optional[date], start: Optional[date], end: Optional[date]) -> bool:
    if day is None:
        return False
    if start is not None and day < start:
        return False
    if end is not None and day > end:
        return False
    return True


def attendance_rate(records: Iterable[Any], start: Optional[date] = None, end: Optional[date] = None) -> int:
    """Present / marked in the window, as a rounded integer percent (0 when empty)."""

    window = [r for r in records if _in_window(to_calendar_date(getattr(r, "date", None)), start, end)]
    if not window:
        return 0
    present = sum(1 for r in window if _status(r) == AttendanceStatus.PRESENT.value.lower())
    return round_percent(present / len(window) * 100)


@dataclass(frozen=True)
class TrendPoint:
    date: date
    label: str
    present: int = 0
    absent: int = 0
    tardy: int = 0

    __json_extra__ = ("total",)

    @property
    def total(self) -> int:
        return self.present + self.absent + self.tardy


def attendance_trend(records: Iterable[Any], days: int, today: date) -> list[TrendPoint]:
    """One point per calendar day for the last ``days`` days, oldest first, zero-filled."""

    start = today - timedelta(days=days - 1)
    counts: dict[date, Counter] = {}
    for r in records:
        day = to_calendar_date(getattr(r, "date", None))
        if _in_window(day, start, today):
            counts.setdefault(day, Counter())[_status(r)] += 1

    points = []
    for offset in range(days):
        day = start + timedelta(days=offset)
        c = counts.get(day, Counter())
        points.append(
            TrendPoint(
                date=day,
                label=f"{day:%b} {day.day}",
                present=c[AttendanceStatus.PRESENT.value.lower()],
                absent=c[AttendanceStatus.ABSENT.value.lower()],
                tardy=c[AttendanceStatus.TARDY.value.lower()],
            )
        )
    return points


def is_overdue(due_date: Any, status: Optional[str], today: date) -> bool:
    day = to_calendar_date(due_date)
    if day is None:
        return False
    return day < today and (status or "").strip().lower() != AssignmentStatus.COMPLETED.value.lower()


def due_label(due_date: Any, today: date) -> str:
    day = to_calendar_date(due_date)
    if day is None:
        return "No due date"
    diff = (day - today).days
    if diff < 0:
        return f"{abs(diff)} days overdue"
    if diff == 0:
        return "Due today"
    if diff == 1:
        return "Due tomorrow"
    return f"Due in {diff} days"


def count_by(records: Iterable[Any], field_name: str) -> dict[str, int]:
    counter: Counter = Counter()
    for r in records:
        value = getattr(r, field_name, None)
        if value:
            counter[str(value)] += 1
    return dict(counter)


def count_marked_on(records: Sequence[Any], day: date, status: AttendanceStatus) -> int:
    wanted = status.value.lower()
    return sum(1 for r in records if to_calendar_date(getattr(r, "date", None)) == day and _status(r) == wanted)
