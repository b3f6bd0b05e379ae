from __future__ import annotations

from datetime import date

import pytest

from school_records.common.validators import (
    require_choice,
    require_email,
    require_non_empty,
    require_non_negative,
    require_not_in_past,
)
from school_records.core.enums import AttendanceStatus
from school_records.core.exceptions import ValidationError


def test_require_non_empty_strips_and_rejects_blank():
    assert require_non_empty("  Math ", "Subject") == "Math"
    with pytest.raises(ValidationError, match="Subject is required"):
        require_non_empty("   ", "Subject")


def test_require_email():
    assert require_email(" a@b.com ") == "a@b.com"
    assert require_email("") is None
    with pytest.raises(ValidationError):
        require_email("nobody")


def test_require_non_negative():
    assert require_non_negative("85", "Grade") == 85.0
    assert require_non_negative(None, "Grade") is None
    with pytest.raises(ValidationError, match="cannot be negative"):
        require_non_negative(-1, "Grade")
    with pytest.raises(ValidationError, match="must be a number"):
        require_non_negative("ten", "Grade")


def test_require_not_in_past():
    today = date(2024, 3, 15)
    assert require_not_in_past(today, "Due date", today=today) == today
    with pytest.raises(ValidationError, match="cannot be in the past"):
        require_not_in_past(date(2024, 3, 14), "Due date", today=today)
    with pytest.raises(ValidationError, match="is required"):
        require_not_in_past(None, "Due date", today=today)


def test_require_choice_ignores_case():
    assert require_choice("present", AttendanceStatus, "Status") is AttendanceStatus.PRESENT
    with pytest.raises(ValidationError, match="Present, Absent, Tardy"):
        require_choice("Excused", AttendanceStatus, "Status")
