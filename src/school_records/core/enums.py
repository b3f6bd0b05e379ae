from __future__ import annotations

from enum import Enum


class StudentStatus(str, Enum):
    ACTIVE = "Active"
    INACTIVE = "Inactive"
    PENDING = "Pending"


class GradeLevel(str, Enum):
    NINTH = "9th"
    TENTH = "10th"
    ELEVENTH = "11th"
    TWELFTH = "12th"


class AttendanceStatus(str, Enum):
    """Attendance status as stored in the record store."""

    PRESENT = "Present"
    ABSENT = "Absent"
    TARDY = "Tardy"


class AssignmentStatus(str, Enum):
    NOT_STARTED = "Not Started"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"
    OVERDUE = "Overdue"


class Priority(str, Enum):
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


class DepartmentStatus(str, Enum):
    ACTIVE = "Active"
    INACTIVE = "Inactive"


class ReportPeriod(str, Enum):
    """Reporting window selectable on the reports page."""

    WEEK = "week"
    MONTH = "month"
    QUARTER = "quarter"

    @property
    def days(self) -> int:
        return {ReportPeriod.WEEK: 7, ReportPeriod.MONTH: 30, ReportPeriod.QUARTER: 90}[self]


class NotificationLevel(str, Enum):
    SUCCESS = "success"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
