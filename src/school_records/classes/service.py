from __future__ import annotations

from typing import Any, Mapping

from ..common.validators import require_choice, require_id, require_non_empty
from ..core.enums import GradeLevel
from ..core.exceptions import NotFoundError
from ..database.result import GatewayResult
from ..search.engine import ListView, SearchCriteria, distinct_values, filter_records
from ..search.specs import CLASS_SEARCH
from .model import SchoolClass
from .repository import ClassRepository


class ClassService:
    FILTERS = ("grade_level", "subject")

    def __init__(self, classes: ClassRepository):
        self._classes = classes

    def search(self, criteria: SearchCriteria) -> ListView:
        result = self._classes.get_all()
        return ListView(
            items=filter_records(result.data, criteria, CLASS_SEARCH),
            total=len(result.data),
            ok=result.ok,
            notifications=result.notifications,
            options={
                "grade_level": distinct_values(result.data, "grade_level"),
                "subject": distinct_values(result.data, "subject"),
            },
        )

    def get(self, class_id: int) -> SchoolClass:
        result = self._classes.get_by_id(class_id)
        if result.data is None:
            raise NotFoundError(f"Class {class_id} not found")
        return result.data

    def _validate(self, values: Mapping[str, Any], *, partial: bool) -> dict:
        data = dict(values)
        if not partial or "name" in data:
            data["name"] = require_non_empty(data.get("name"), "Class name")
        if not partial or "subject" in data:
            data["subject"] = require_non_empty(data.get("subject"), "Subject")
        if data.get("grade_level"):
            data["grade_level"] = require_choice(data["grade_level"], GradeLevel, "Grade level").value
        if "student_ids" in data:
            data["student_ids"] = tuple(require_id(i, "Student") for i in data["student_ids"] or ())
        return data

    def create(self, values: Mapping[str, Any]) -> SchoolClass:
        return self._classes.create(self._validate(values, partial=False))

    def update(self, class_id: int, values: Mapping[str, Any]) -> SchoolClass:
        return self._classes.update(class_id, self._validate(values, partial=True))

    def delete(self, class_id: int) -> GatewayResult[bool]:
        return self._classes.delete(class_id)
