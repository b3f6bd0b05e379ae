from __future__ import annotations

from typing import Callable, Mapping

from .engine import SearchSpec

STUDENT_SEARCH = SearchSpec(
    text_fields=("first_name", "last_name", "email", "student_number"),
    categorical={"status": "status", "grade_level": "grade_level"},
)

CLASS_SEARCH = SearchSpec(
    text_fields=("name", "subject", "teacher"),
    categorical={"grade_level": "grade_level", "subject": "subject"},
)

ASSIGNMENT_SEARCH = SearchSpec(
    text_fields=("title", "tags", "description"),
    categorical={"status": "status", "priority": "priority"},
    contains={"subject": "tags"},
)

ROSTER_SEARCH = SearchSpec(
    text_fields=("full_name", "student_number"),
    categorical={"status": "status"},
)

DEPARTMENT_SEARCH = SearchSpec(
    text_fields=("name", "head_of_department", "description"),
    categorical={"status": "status"},
)


def grade_search(student_names: Mapping[int, str]) -> SearchSpec:
    """Grades match on subject, assignment and the owning student's full name."""

    student_name: Callable = lambda g: student_names.get(g.student_id, "")
    return SearchSpec(
        text_fields=("subject", "assignment", student_name),
        categorical={"subject": "subject", "grading_period": "grading_period", "student_id": "student_id"},
    )
