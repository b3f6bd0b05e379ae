from __future__ import annotations

from datetime import date

from ..common.fields import FieldSpec
from ..core.enums import AssignmentStatus
from ..database.query import OrderBy, SortType, Where
from ..database.remote_base import RecordGateway
from ..database.result import GatewayResult
from .model import Assignment
from .repository import AssignmentRepository

CLASS_QUERY_LIMIT = 50


class RemoteAssignmentRepository(RecordGateway[Assignment], AssignmentRepository):
    TABLE = "assignments_c"
    ENTITY = "assignment"
    ENTITY_PLURAL = "assignments"
    MODEL = Assignment
    DEFAULT_ORDER = (OrderBy("CreatedOn", SortType.DESC),)
    FIELDS = (
        FieldSpec.system("name", "Name"),
        FieldSpec.of("title"),
        FieldSpec.of("description"),
        FieldSpec.of("due_date", "date"),
        FieldSpec.of("status"),
        FieldSpec.of("priority"),
        FieldSpec.system("tags", "Tags", "tags"),
    )

    def get_by_class_id(self, class_id: int) -> GatewayResult[list[Assignment]]:
        return self.find(
            where=[Where.equal("class_id_c", int(class_id))],
            order_by=[OrderBy(self.wire_key("due_date"))],
            limit=CLASS_QUERY_LIMIT,
        )

    def get_overdue(self, today: date) -> GatewayResult[list[Assignment]]:
        return self.find(
            where=[
                Where.less_than(self.wire_key("due_date"), today),
                Where.not_equal(self.wire_key("status"), AssignmentStatus.COMPLETED.value),
            ],
            order_by=[OrderBy(self.wire_key("due_date"))],
            limit=CLASS_QUERY_LIMIT,
        )
