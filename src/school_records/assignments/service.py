from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Mapping

from ..app_logger import get_logger
from ..common.datetime_utils import to_calendar_date, today_local
from ..common.validators import require_choice, require_non_empty, require_not_in_past
from ..core.enums import AssignmentStatus, Priority
from ..core.exceptions import NotFoundError, ValidationError
from ..database.result import GatewayResult
from ..reports.statistics import count_by, due_label, is_overdue
from ..search.engine import ListView, SearchCriteria, distinct_values, filter_records
from ..search.specs import ASSIGNMENT_SEARCH
from .model import Assignment
from .repository import AssignmentRepository

logger = get_logger(__name__)


@dataclass(frozen=True)
class AssignmentRow:
    """An assignment plus what the list page shows next to it."""

    assignment: Assignment
    overdue: bool
    due_label: str


class AssignmentService:
    FILTERS = ("status", "priority", "subject")

    def __init__(self, assignments: AssignmentRepository, *, clock: Callable = today_local):
        self._assignments = assignments
        self._clock = clock

    def _row(self, assignment: Assignment) -> AssignmentRow:
        today = self._clock()
        return AssignmentRow(
            assignment=assignment,
            overdue=is_overdue(assignment.due_date, assignment.status, today),
            due_label=due_label(assignment.due_date, today),
        )

    def search(self, criteria: SearchCriteria) -> ListView:
        result = self._assignments.get_all()
        items = filter_records(result.data, criteria, ASSIGNMENT_SEARCH)
        tags: list[str] = []
        for a in result.data:
            tags.extend(t for t in a.tag_list if t not in tags)
        return ListView(
            items=[self._row(a) for a in items],
            total=len(result.data),
            ok=result.ok,
            notifications=result.notifications,
            options={
                "status": distinct_values(result.data, "status"),
                "priority": distinct_values(result.data, "priority"),
                "subject": tags,
                "summary": count_by(result.data, "status"),
            },
        )

    def get(self, assignment_id: int) -> Assignment:
        result = self._assignments.get_by_id(assignment_id)
        if result.data is None:
            raise NotFoundError(f"Assignment {assignment_id} not found")
        return result.data

    def get_by_class_id(self, class_id: int) -> GatewayResult[list[Assignment]]:
        return self._assignments.get_by_class_id(class_id)

    def get_overdue(self) -> GatewayResult[list[Assignment]]:
        today = self._clock()
        result = self._assignments.get_overdue(today)
        # the store compares raw values; re-check by calendar day
        overdue = [a for a in result.data if is_overdue(a.due_date, a.status, today)]
        return GatewayResult(ok=result.ok, data=overdue, notifications=result.notifications)

    def _validate(self, values: Mapping[str, Any], *, partial: bool) -> dict:
        data = dict(values)
        if not partial or "title" in data:
            data["title"] = require_non_empty(data.get("title"), "Title")
            data.setdefault("name", data["title"])
        if not partial or "description" in data:
            data["description"] = require_non_empty(data.get("description"), "Description")
        if not partial or "due_date" in data:
            due = to_calendar_date(data.get("due_date"))
            if due is None:
                raise ValidationError("Due date is required")
            if not partial:
                due = require_not_in_past(due, "Due date", today=self._clock())
            data["due_date"] = due

        if data.get("status"):
            data["status"] = require_choice(data["status"], AssignmentStatus, "Status").value
        elif not partial:
            data["status"] = AssignmentStatus.NOT_STARTED.value
        if data.get("priority"):
            data["priority"] = require_choice(data["priority"], Priority, "Priority").value
        elif not partial:
            data["priority"] = Priority.MEDIUM.value
        if isinstance(data.get("tags"), (list, tuple)):
            data["tags"] = ",".join(str(t).strip() for t in data["tags"] if str(t).strip())
        return data

    def create(self, values: Mapping[str, Any]) -> Assignment:
        assignment = self._assignments.create(self._validate(values, partial=False))
        logger.info("Created assignment %s", assignment.id)
        return assignment

    def update(self, assignment_id: int, values: Mapping[str, Any]) -> Assignment:
        return self._assignments.update(assignment_id, self._validate(values, partial=True))

    def update_status(self, assignment_id: int, status: Any) -> Assignment:
        status = require_choice(status, AssignmentStatus, "Status").value
        return self._assignments.update(assignment_id, {"status": status})

    def delete(self, assignment_id: int) -> GatewayResult[bool]:
        return self._assignments.delete(assignment_id)
