from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any, Mapping, Sequence

from ..common.validators import require_choice, require_email, require_non_empty, require_non_negative
from ..core.enums import DepartmentStatus
from ..core.exceptions import NotFoundError, ValidationError
from ..database.result import GatewayResult
from ..search.engine import ListView, SearchCriteria, distinct_values, filter_records
from ..search.specs import DEPARTMENT_SEARCH
from .model import Department
from .repository import DepartmentRepository


class DepartmentService:
    FILTERS = ("status",)

    def __init__(self, departments: DepartmentRepository):
        self._departments = departments

    def search(self, criteria: SearchCriteria) -> ListView:
        result = self._departments.get_all()
        return ListView(
            items=filter_records(result.data, criteria, DEPARTMENT_SEARCH),
            total=len(result.data),
            ok=result.ok,
            notifications=result.notifications,
            options={"status": distinct_values(result.data, "status")},
        )

    def get(self, department_id: int) -> Department:
        result = self._departments.get_by_id(department_id)
        if result.data is None:
            raise NotFoundError(f"Department {department_id} not found")
        return result.data

    def _validate(self, values: Mapping[str, Any], *, partial: bool) -> dict:
        data = dict(values)
        if not partial or "name" in data:
            data["name"] = require_non_empty(data.get("name"), "Department name")
        if data.get("email"):
            data["email"] = require_email(data["email"])
        if data.get("status"):
            data["status"] = require_choice(data["status"], DepartmentStatus, "Status").value
        elif not partial:
            data["status"] = DepartmentStatus.ACTIVE.value
        if "budget" in data:
            budget = require_non_negative(data["budget"], "Budget")
            try:
                data["budget"] = None if budget is None else Decimal(str(data["budget"]))
            except InvalidOperation:
                raise ValidationError("Budget must be a number")
        for key, label in (("established_year", "Established year"), ("teacher_count", "Teacher count")):
            if data.get(key) not in (None, ""):
                number = require_non_negative(data[key], label)
                data[key] = int(number)
        return data

    def create(self, values: Mapping[str, Any]) -> Department:
        return self._departments.create(self._validate(values, partial=False))

    def update(self, department_id: int, values: Mapping[str, Any]) -> Department:
        return self._departments.update(department_id, self._validate(values, partial=True))

    def delete(self, department_id: int) -> GatewayResult[bool]:
        return self._departments.delete(department_id)

    def delete_many(self, department_ids: Sequence[int]) -> GatewayResult[bool]:
        ids = [int(i) for i in department_ids]
        if not ids:
            raise ValidationError("Select at least one department")
        return self._departments.delete_many(ids)
