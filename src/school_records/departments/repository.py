from __future__ import annotations

from typing import Protocol

from ..database.repository import RecordRepository
from .model import Department


class DepartmentRepository(RecordRepository[Department], Protocol):
    """Repository interface for departments."""
