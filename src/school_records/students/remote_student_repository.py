from __future__ import annotations

from ..common.fields import FieldSpec
from ..database.query import OrderBy
from ..database.remote_base import RecordGateway
from .model import Student
from .repository import StudentRepository


class RemoteStudentRepository(RecordGateway[Student], StudentRepository):
    TABLE = "student_c"
    ENTITY = "student"
    ENTITY_PLURAL = "students"
    MODEL = Student
    DEFAULT_ORDER = (OrderBy("Id"),)
    FIELDS = (
        FieldSpec.of("first_name"),
        FieldSpec.of("last_name"),
        FieldSpec.of("email"),
        FieldSpec.of("phone"),
        FieldSpec.of("date_of_birth", "date"),
        FieldSpec.of("enrollment_date", "date"),
        FieldSpec.of("status"),
        FieldSpec.of("grade_level"),
        FieldSpec.of("student_number", logical="student_id"),
        FieldSpec.of("street", legacy="address.street"),
        FieldSpec.of("city", legacy="address.city"),
        FieldSpec.of("state", legacy="address.state"),
        FieldSpec.of("zip_code", legacy="address.zipCode"),
        FieldSpec.of("emergency_contact_name", legacy="emergencyContact.name"),
        FieldSpec.of("emergency_contact_phone", legacy="emergencyContact.phone"),
        FieldSpec.of("emergency_contact_relationship", legacy="emergencyContact.relationship"),
    )
