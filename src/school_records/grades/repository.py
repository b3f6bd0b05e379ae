from __future__ import annotations

from typing import Protocol

from ..database.repository import RecordRepository
from ..database.result import GatewayResult
from .model import Grade


class GradeRepository(RecordRepository[Grade], Protocol):
    def get_by_student_id(self, student_id: int) -> GatewayResult[list[Grade]]:
        raise NotImplementedError
