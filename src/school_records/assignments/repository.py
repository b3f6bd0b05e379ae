from __future__ import annotations

from datetime import date
from typing import Protocol

from ..database.repository import RecordRepository
from ..database.result import GatewayResult
from .model import Assignment


class AssignmentRepository(RecordRepository[Assignment], Protocol):
    def get_by_class_id(self, class_id: int) -> GatewayResult[list[Assignment]]:
        raise NotImplementedError

    def get_overdue(self, today: date) -> GatewayResult[list[Assignment]]:
        raise NotImplementedError
