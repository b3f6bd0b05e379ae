from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from datetime import date

import pytest

from school_records.attendance.model import AttendanceRecord
from school_records.attendance.remote_attendance_repository import RemoteAttendanceRepository
from school_records.attendance.service import AttendanceService, attendance_for_day
from school_records.core.exceptions import RecordWriteError, ValidationError
from school_records.search.engine import SearchCriteria
from school_records.students.model import Student
from school_records.students.remote_student_repository import RemoteStudentRepository


def _service(conn, today):
    return AttendanceService(RemoteAttendanceRepository(conn), RemoteStudentRepository(conn), clock=lambda: today)


def test_first_mark_creates_then_second_updates_same_record(store, conn, today):
    service = _service(conn, today)

    created = service.mark(1, today, "Present")
    updated = service.mark(1, today, "Absent")

    rows = store.rows("attendance")
    assert len(rows) == 1
    assert updated.id == created.id
    assert updated.status == "Absent"
    assert rows[0]["status_c"] == "Absent"


def test_create_uses_empty_notes_and_general_class(store, conn, today):
    record = _service(conn, today).mark(4, today, "tardy")

    _, _, params = [c for c in store.calls if c[0] == "create"][0]
    assert params["records"][0] == {
        "student_id_c": 4,
        "date_c": "2024-03-15",
        "status_c": "Tardy",
        "notes_c": "",
        "class_c": "General",
    }
    assert record.class_label == "General"


def test_update_keeps_existing_notes_and_class(store, conn, today):
    row = store.insert(
        "attendance",
        {"student_id_c": {"Id": 2, "Name": "Bob"}, "date_c": "2024-03-15T08:05:00", "status_c": "Absent", "notes_c": "Bus late", "class_c": "Homeroom"},
    )

    record = _service(conn, today).mark(2, today, "Present")

    _, _, params = [c for c in store.calls if c[0] == "update"][0]
    assert params["records"][0]["Id"] == row["Id"]
    assert params["records"][0]["notes_c"] == "Bus late"
    assert params["records"][0]["class_c"] == "Homeroom"
    assert params["records"][0]["date_c"] == "2024-03-15"
    assert (record.id, record.status, record.notes) == (row["Id"], "Present", "Bus late")


def test_other_days_are_not_touched(store, conn, today):
    store.insert("attendance", {"student_id_c": 1, "date_c": "2024-03-14", "status_c": "Present"})

    _service(conn, today).mark(1, today, "Absent")

    assert sorted(r["date_c"] for r in store.rows("attendance")) == ["2024-03-14", "2024-03-15"]


def test_mark_defaults_to_today(store, conn, today):
    record = _service(conn, today).mark(1, None, "Present")
    assert record.date == today


def test_invalid_status_is_rejected_before_any_store_call(store, conn, today):
    with pytest.raises(ValidationError):
        _service(conn, today).mark(1, today, "Excused")
    assert store.calls == []


def test_concurrent_marks_of_same_pair_create_one_record(store, conn, today):
    store.delay = 0.01
    service = _service(conn, today)

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(lambda status: service.mark(7, today, status), ["Present", "Absent"] * 4))

    assert len(store.rows("attendance")) == 1
    assert len({r.id for r in results}) == 1


def test_concurrent_marks_of_different_students_all_land(store, conn, today):
    service = _service(conn, today)

    with ThreadPoolExecutor(max_workers=4) as pool:
        list(pool.map(lambda sid: service.mark(sid, today, "Present"), [1, 2, 3, 4]))

    assert sorted(r["student_id_c"] for r in store.rows("attendance")) == [1, 2, 3, 4]


def test_attendance_for_day_maps_each_student(today):
    students = [Student(id=1), Student(id=2)]
    records = [
        AttendanceRecord(id=10, student_id=1, date=today, status="Present"),
        AttendanceRecord(id=11, student_id=1, date=date(2024, 3, 14), status="Absent"),
    ]
    marks = attendance_for_day(students, records, today)
    assert marks[1].id == 10
    assert marks[2] is None


def test_roster_joins_students_with_day_marks_and_filters(store, conn, today):
    store.insert("student_c", {"first_name_c": "Ann", "last_name_c": "Lee", "student_id_c": "S-1"})
    store.insert("student_c", {"first_name_c": "Bob", "last_name_c": "Ray", "student_id_c": "S-2"})
    store.insert("attendance", {"student_id_c": 1, "date_c": "2024-03-15", "status_c": "Present"})
    service = _service(conn, today)

    roster = service.roster(today)
    assert [(r.full_name, r.status) for r in roster.items] == [("Ann Lee", "Present"), ("Bob Ray", None)]

    filtered = service.roster(today, SearchCriteria(term="s-2"))
    assert [r.student_id for r in filtered.items] == [2]
    assert filtered.total == 2


def test_failed_lookup_aborts_instead_of_creating_a_duplicate(store, conn, today):
    store.failures["fetch"] = {"success": False, "message": "Service unavailable"}

    with pytest.raises(RecordWriteError):
        _service(conn, today).mark(1, today, "Present")
    assert store.rows("attendance") == []


def _seed_recent_marks(store, student_id: int, count: int):
    for offset in range(count):
        day = date(2024, 3, 15).toordinal() - offset
        store.insert("attendance", {"student_id_c": student_id, "date_c": date.fromordinal(day).isoformat(), "status_c": "Present"})


def test_mark_finds_old_day_behind_a_full_page_of_newer_marks(store, store_config, conn, today):
    _seed_recent_marks(store, 1, store_config.page_size + 20)
    old_day = date(2023, 6, 1)
    row = store.insert("attendance", {"student_id_c": 1, "date_c": "2023-06-01", "status_c": "Absent"})

    record = _service(conn, today).mark(1, old_day, "Present")

    same_day = [r for r in store.rows("attendance") if r["date_c"] == "2023-06-01"]
    assert len(same_day) == 1
    assert record.id == row["Id"]
    assert same_day[0]["status_c"] == "Present"


def test_lookup_is_narrowed_to_the_student_and_day(store, conn, today):
    _service(conn, today).mark(3, today, "Present")

    _, _, params = [c for c in store.calls if c[0] == "fetch"][0]
    assert params["where"] == [
        {"FieldName": "student_id_c", "Operator": "EqualTo", "Values": [3]},
        {"FieldName": "date_c", "Operator": "GreaterThan", "Values": ["2024-03-14"]},
        {"FieldName": "date_c", "Operator": "LessThan", "Values": ["2024-03-16"]},
    ]


def test_update_keeps_an_empty_class_label(store, conn, today):
    store.insert("attendance", {"student_id_c": 5, "date_c": "2024-03-15", "status_c": "Absent", "notes_c": "", "class_c": None})

    _service(conn, today).mark(5, today, "Tardy")

    _, _, params = [c for c in store.calls if c[0] == "update"][0]
    assert params["records"][0]["class_c"] is None


def test_roster_shows_marks_of_an_old_day(store, store_config, conn, today):
    for name in ("Ann", "Bob", "Cy"):
        store.insert("student_c", {"first_name_c": name, "last_name_c": "Lee"})
    _seed_recent_marks(store, 2, store_config.page_size + 20)
    store.insert("attendance", {"student_id_c": 1, "date_c": "2023-08-28T08:10:00", "status_c": "Tardy"})

    roster = _service(conn, today).roster(date(2023, 8, 28))

    assert [(r.student_id, r.status) for r in roster.items] == [(1, "Tardy"), (2, None), (3, None)]
    assert roster.ok
