from __future__ import annotations

from ..common.fields import FieldSpec
from ..database.query import OrderBy
from ..database.remote_base import RecordGateway
from .model import Department
from .repository import DepartmentRepository


class RemoteDepartmentRepository(RecordGateway[Department], DepartmentRepository):
    """department_c uses capitalised current keys (``Name_c``, ``Head_of_Department_c``)."""

    TABLE = "department_c"
    ENTITY = "department"
    ENTITY_PLURAL = "departments"
    MODEL = Department
    DEFAULT_ORDER = (OrderBy("Name_c"),)
    FIELDS = (
        FieldSpec.of("name", logical="Name"),
        FieldSpec.of("description", logical="Description"),
        FieldSpec.of("head_of_department", logical="Head_of_Department"),
        FieldSpec.of("email", logical="Email"),
        FieldSpec.of("phone", logical="Phone"),
        FieldSpec.of("budget", "decimal", logical="Budget"),
        FieldSpec.of("established_year", "int", logical="Established_Year"),
        FieldSpec.of("teacher_count", "int", logical="Teacher_Count"),
        FieldSpec.of("status", logical="Status"),
    )
