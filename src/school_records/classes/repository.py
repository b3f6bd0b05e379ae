from __future__ import annotations

from typing import Protocol

from ..database.repository import RecordRepository
from .model import SchoolClass


class ClassRepository(RecordRepository[SchoolClass], Protocol):
    """Repository interface for classes."""
