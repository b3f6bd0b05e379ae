from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class Grade:
    """Domain entity: one recorded score for a student."""

    id: Optional[int] = None
    student_id: Optional[int] = None
    subject: Optional[str] = None
    assignment: Optional[str] = None
    score: Optional[float] = None
    max_points: Optional[float] = None
    date_recorded: Optional[date] = None
    grading_period: Optional[str] = None

    __json_extra__ = ("percentage",)

    @property
    def percentage(self) -> Optional[float]:
        """score / max_points * 100, only when both are present and max_points > 0."""
        if self.score is None or self.max_points is None or self.max_points <= 0:
            return None
        return self.score / self.max_points * 100
