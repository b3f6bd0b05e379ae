from __future__ import annotations

from ..common.fields import FieldSpec
from ..database.query import OrderBy, SortType, Where
from ..database.remote_base import RecordGateway
from ..database.result import GatewayResult
from .model import Grade
from .repository import GradeRepository


class RemoteGradeRepository(RecordGateway[Grade], GradeRepository):
    TABLE = "grade_c"
    ENTITY = "grade"
    ENTITY_PLURAL = "grades"
    MODEL = Grade
    DEFAULT_ORDER = (OrderBy("date_recorded_c", SortType.DESC),)
    FIELDS = (
        FieldSpec.of("student_id", "ref"),
        FieldSpec.of("subject"),
        FieldSpec.of("assignment"),
        FieldSpec.of("score", "float", logical="grade"),
        FieldSpec.of("max_points", "float"),
        FieldSpec.of("date_recorded", "date"),
        FieldSpec.of("grading_period"),
    )

    def get_by_student_id(self, student_id: int) -> GatewayResult[list[Grade]]:
        return self.find_all(where=[Where.equal(self.wire_key("student_id"), int(student_id))])
