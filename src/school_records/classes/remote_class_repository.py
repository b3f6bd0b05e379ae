from __future__ import annotations

from ..common.fields import FieldSpec
from ..database.query import OrderBy
from ..database.remote_base import RecordGateway
from .model import SchoolClass
from .repository import ClassRepository


class RemoteClassRepository(RecordGateway[SchoolClass], ClassRepository):
    TABLE = "class_c"
    ENTITY = "class"
    ENTITY_PLURAL = "classes"
    MODEL = SchoolClass
    DEFAULT_ORDER = (OrderBy("name_c"),)
    FIELDS = (
        FieldSpec.of("name"),
        FieldSpec.of("subject"),
        FieldSpec.of("teacher"),
        # legacy records nest the schedule: {"schedule": {"time", "days", "room"}}
        FieldSpec.of("schedule_time", legacy="schedule.time"),
        FieldSpec.of("schedule_days", legacy="schedule.days"),
        FieldSpec.of("room", legacy="schedule.room"),
        FieldSpec.of("grade_level"),
        FieldSpec.of("student_ids", "ids", logical="students"),
    )
