from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, Optional, TypeVar

from ..core.enums import NotificationLevel

T = TypeVar("T")


@dataclass(frozen=True)
class Notification:
    """User-facing message produced by the data layer.

    The presentation layer decides how (and whether) to show it.
    """

    level: NotificationLevel
    message: str
    field: Optional[str] = None

    @classmethod
    def error(cls, message: str, *, field: Optional[str] = None) -> "Notification":
        return cls(NotificationLevel.ERROR, message, field)

    @classmethod
    def success(cls, message: str) -> "Notification":
        return cls(NotificationLevel.SUCCESS, message)

    def to_dict(self) -> dict:
        return {"level": self.level.value, "message": self.message, "field": self.field}


@dataclass(frozen=True)
class GatewayResult(Generic[T]):
    """Outcome of a gateway read/delete.

    ``data`` always holds something usable (an empty list, ``None`` or
    ``False`` on failure) so callers can fall back without branching.
    """

    ok: bool
    data: T
    notifications: tuple = field(default_factory=tuple)

    @classmethod
    def succeed(cls, data: Any, notifications=()) -> "GatewayResult":
        return cls(ok=True, data=data, notifications=tuple(notifications))

    @classmethod
    def fail(cls, fallback: Any, notifications=()) -> "GatewayResult":
        return cls(ok=False, data=fallback, notifications=tuple(notifications))

    @property
    def errors(self) -> list[Notification]:
        return [n for n in self.notifications if n.level == NotificationLevel.ERROR]
