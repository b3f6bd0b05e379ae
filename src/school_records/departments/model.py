from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class Department:
    id: Optional[int] = None
    name: Optional[str] = None
    description: Optional[str] = None
    head_of_department: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    budget: Optional[Decimal] = None
    established_year: Optional[int] = None
    teacher_count: Optional[int] = None
    status: Optional[str] = None
