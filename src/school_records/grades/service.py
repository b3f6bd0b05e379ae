from __future__ import annotations

from typing import Any, Callable, Mapping

from ..common.concurrency import run_concurrently
from ..common.datetime_utils import today_local
from ..common.validators import require_id, require_non_empty, require_non_negative
from ..core.exceptions import NotFoundError, ValidationError
from ..database.result import GatewayResult
from ..search.engine import ListView, SearchCriteria, distinct_values, filter_records
from ..search.specs import grade_search
from ..students.repository import StudentRepository
from .model import Grade
from .repository import GradeRepository


class GradeService:
    FILTERS = ("subject", "grading_period", "student_id")

    def __init__(self, grades: GradeRepository, students: StudentRepository, *, clock: Callable = today_local):
        self._grades = grades
        self._students = students
        self._clock = clock

    def search(self, criteria: SearchCriteria) -> ListView:
        loaded = run_concurrently({"grades": self._grades.get_all, "students": self._students.get_all})
        grades, students = loaded["grades"], loaded["students"]

        names = {s.id: s.full_name for s in students.data}
        items = filter_records(grades.data, criteria, grade_search(names))
        return ListView(
            items=items,
            total=len(grades.data),
            ok=grades.ok and students.ok,
            notifications=grades.notifications + students.notifications,
            options={
                "subject": distinct_values(grades.data, "subject"),
                "grading_period": distinct_values(grades.data, "grading_period"),
                "students": [{"id": s.id, "full_name": s.full_name} for s in students.data],
            },
        )

    def get(self, grade_id: int) -> Grade:
        result = self._grades.get_by_id(grade_id)
        if result.data is None:
            raise NotFoundError(f"Grade {grade_id} not found")
        return result.data

    def _validate(self, values: Mapping[str, Any], *, partial: bool) -> dict:
        data = dict(values)
        if not partial or "student_id" in data:
            data["student_id"] = require_id(data.get("student_id"), "Student")
        if not partial or "subject" in data:
            data["subject"] = require_non_empty(data.get("subject"), "Subject")
        if not partial or "assignment" in data:
            data["assignment"] = require_non_empty(data.get("assignment"), "Assignment")
        if not partial or "score" in data:
            data["score"] = require_non_negative(data.get("score"), "Grade")
            if data["score"] is None:
                raise ValidationError("Grade is required")
        if not partial or "max_points" in data:
            data["max_points"] = require_non_negative(data.get("max_points"), "Max points")
            if data["max_points"] is None:
                raise ValidationError("Max points is required")
        if not partial and not data.get("date_recorded"):
            data["date_recorded"] = self._clock()
        return data

    def create(self, values: Mapping[str, Any]) -> Grade:
        return self._grades.create(self._validate(values, partial=False))

    def update(self, grade_id: int, values: Mapping[str, Any]) -> Grade:
        return self._grades.update(grade_id, self._validate(values, partial=True))

    def delete(self, grade_id: int) -> GatewayResult[bool]:
        return self._grades.delete(grade_id)
