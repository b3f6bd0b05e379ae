from __future__ import annotations

from datetime import date

import pytest

from school_records.core.exceptions import ValidationError
from school_records.grades.remote_grade_repository import RemoteGradeRepository
from school_records.grades.service import GradeService
from school_records.search.engine import SearchCriteria
from school_records.students.remote_student_repository import RemoteStudentRepository


def _service(conn):
    return GradeService(RemoteGradeRepository(conn), RemoteStudentRepository(conn), clock=lambda: date(2024, 3, 15))


def test_search_by_student_name(store, conn):
    store.insert("student_c", {"Id": 1, "first_name_c": "Ann", "last_name_c": "Lee"})
    store.insert("student_c", {"Id": 2, "first_name_c": "Bob", "last_name_c": "Ray"})
    store.insert("grade_c", {"student_id_c": {"Id": 1}, "subject_c": "Math", "grade_c": 88, "max_points_c": 100})
    store.insert("grade_c", {"studentId": 2, "subject": "Art", "grade": 40, "maxPoints": 50})

    view = _service(conn).search(SearchCriteria(term="ray"))

    assert [(g.student_id, g.subject, g.percentage) for g in view.items] == [(2, "Art", 80.0)]
    assert view.options["subject"] == ["Math", "Art"]
    assert {"id": 1, "full_name": "Ann Lee"} in view.options["students"]


def test_create_writes_score_to_grade_column(store, conn):
    grade = _service(conn).create({"student_id": "1", "subject": "Math", "assignment": "Quiz 1", "score": "18", "max_points": 20})

    record = store.rows("grade_c")[0]
    assert record["grade_c"] == 18.0
    assert record["student_id_c"] == 1
    assert record["date_recorded_c"] == "2024-03-15"
    assert grade.percentage == 90


@pytest.mark.parametrize(
    "values,message",
    [
        ({"subject": "Math", "assignment": "Q", "score": 1, "max_points": 2}, "Student is required"),
        ({"student_id": 1, "subject": "Math", "assignment": "Q", "score": -1, "max_points": 2}, "cannot be negative"),
        ({"student_id": 1, "subject": "Math", "assignment": "Q", "score": 1}, "Max points is required"),
        ({"student_id": 1, "subject": " ", "assignment": "Q", "score": 1, "max_points": 2}, "Subject is required"),
    ],
)
def test_create_validation(conn, store, values, message):
    with pytest.raises(ValidationError, match=message):
        _service(conn).create(values)
    assert store.rows("grade_c") == []
