from __future__ import annotations

from datetime import date, datetime, timezone

from school_records.attendance.model import AttendanceRecord
from school_records.core.enums import AttendanceStatus
from school_records.grades.model import Grade
from school_records.reports.statistics import (
    attendance_rate,
    attendance_trend,
    average_percentage,
    count_by,
    count_marked_on,
    due_label,
    grade_distribution,
    grade_percentage,
    is_overdue,
    letter_grade,
    round_percent,
)

TODAY = date(2024, 3, 15)


def test_letter_grade_boundaries():
    assert letter_grade(90) == "A"
    assert letter_grade(89.99) == "B"
    assert letter_grade(80) == "B"
    assert letter_grade(70) == "C"
    assert letter_grade(60) == "D"
    assert letter_grade(59.99) == "F"


def test_grade_percentage_requires_positive_max_points():
    assert grade_percentage(Grade(score=45, max_points=50)) == 90
    assert grade_percentage(Grade(score=45, max_points=0)) is None
    assert grade_percentage(Grade(score=None, max_points=50)) is None


def test_average_percentage():
    assert average_percentage([Grade(score=90, max_points=100), Grade(score=70, max_points=100)]) == 80
    assert average_percentage([]) == 0
    assert average_percentage([Grade(score=10, max_points=0)]) == 0


def test_grade_distribution_counts_valid_grades_only():
    grades = [
        Grade(score=95, max_points=100),
        Grade(score=85, max_points=100),
        Grade(score=59, max_points=100),
        Grade(score=None, max_points=100),
    ]
    assert grade_distribution(grades) == {"A": 1, "B": 1, "C": 0, "D": 0, "F": 1}


def test_round_percent_rounds_half_up():
    assert round_percent(85.5) == 86
    assert round_percent(84.5) == 85
    assert round_percent(84.49) == 84


def test_attendance_rate_in_window():
    records = [
        AttendanceRecord(date=date(2024, 3, 14), status="Present"),
        AttendanceRecord(date=date(2024, 3, 15), status="absent"),
        AttendanceRecord(date=date(2024, 3, 15), status="Present"),
        AttendanceRecord(date=date(2024, 2, 1), status="Absent"),
    ]
    assert attendance_rate(records, date(2024, 3, 8), TODAY) == 67
    assert attendance_rate([], date(2024, 3, 8), TODAY) == 0
    assert attendance_rate(records) == 50


def test_trend_is_zero_filled_oldest_first():
    points = attendance_trend([], 7, TODAY)
    assert len(points) == 7
    assert points[0].date == date(2024, 3, 9)
    assert points[-1].date == TODAY
    assert points[-1].label == "Mar 15"
    assert all(p.total == 0 for p in points)


def test_trend_counts_by_calendar_day():
    records = [
        AttendanceRecord(date=date(2024, 3, 15), status="Present"),
        AttendanceRecord(date=date(2024, 3, 15), status="Tardy"),
        AttendanceRecord(date=date(2024, 3, 14), status="Absent"),
        AttendanceRecord(date=date(2024, 3, 1), status="Present"),
    ]
    points = attendance_trend(records, 7, TODAY)
    assert (points[-1].present, points[-1].tardy, points[-1].absent) == (1, 1, 0)
    assert points[-2].absent == 1
    assert sum(p.total for p in points) == 3


def test_is_overdue():
    yesterday = date(2024, 3, 14)
    assert is_overdue(yesterday, "In Progress", TODAY)
    assert not is_overdue(yesterday, "completed", TODAY)
    assert not is_overdue(TODAY, "Not Started", TODAY)
    assert not is_overdue(None, "Not Started", TODAY)
    assert is_overdue(datetime(2024, 3, 14, 23, 0), None, TODAY)


def test_due_label():
    assert due_label(date(2024, 3, 12), TODAY) == "3 days overdue"
    assert due_label(TODAY, TODAY) == "Due today"
    assert due_label(date(2024, 3, 16), TODAY) == "Due tomorrow"
    assert due_label(date(2024, 3, 20), TODAY) == "Due in 5 days"


def test_count_by_and_count_marked_on():
    records = [
        AttendanceRecord(date=TODAY, status="Present"),
        AttendanceRecord(date="2024-03-15", status="present"),
        AttendanceRecord(date=date(2024, 3, 14), status="Present"),
        AttendanceRecord(date=TODAY, status="Absent"),
    ]
    assert count_marked_on(records, TODAY, AttendanceStatus.PRESENT) == 2
    assert count_by(records, "status") == {"Present": 2, "present": 1, "Absent": 1}


def test_aware_timestamps_are_compared_as_local_days():
    noon_utc = datetime(2024, 3, 15, 12, 0, tzinfo=timezone.utc)
    assert count_marked_on([AttendanceRecord(date=noon_utc, status="Present")], noon_utc.astimezone().date(), AttendanceStatus.PRESENT) == 1
