from __future__ import annotations

from typing import Protocol

from ..database.repository import RecordRepository
from .model import Student


class StudentRepository(RecordRepository[Student], Protocol):
    """Repository interface for students."""
