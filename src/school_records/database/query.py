from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date
from enum import Enum
from typing import Any, Optional, Sequence


class Operator(str, Enum):
    EQUAL_TO = "EqualTo"
    NOT_EQUAL_TO = "NotEqualTo"
    LESS_THAN = "LessThan"
    GREATER_THAN = "GreaterThan"


class SortType(str, Enum):
    ASC = "ASC"
    DESC = "DESC"


@dataclass(frozen=True)
class Where:
    field_name: str
    operator: Operator
    values: tuple

    @classmethod
    def equal(cls, field_name: str, value: Any) -> "Where":
        return cls(field_name, Operator.EQUAL_TO, (value,))

    @classmethod
    def not_equal(cls, field_name: str, value: Any) -> "Where":
        return cls(field_name, Operator.NOT_EQUAL_TO, (value,))

    @classmethod
    def less_than(cls, field_name: str, value: Any) -> "Where":
        return cls(field_name, Operator.LESS_THAN, (value,))

    @classmethod
    def greater_than(cls, field_name: str, value: Any) -> "Where":
        return cls(field_name, Operator.GREATER_THAN, (value,))

    def to_payload(self) -> dict:
        values = [v.isoformat() if isinstance(v, date) else v for v in self.values]
        return {"FieldName": self.field_name, "Operator": self.operator.value, "Values": values}


@dataclass(frozen=True)
class OrderBy:
    field_name: str
    sort_type: SortType = SortType.ASC

    def to_payload(self) -> dict:
        return {"fieldName": self.field_name, "sorttype": self.sort_type.value}


@dataclass(frozen=True)
class FetchQuery:
    """Parameters of a ``fetch_records`` call in store wire format."""

    fields: Sequence[str] = ()
    where: Sequence[Where] = ()
    order_by: Sequence[OrderBy] = ()
    limit: Optional[int] = None
    offset: int = 0
    extra: dict = field(default_factory=dict)

    def page(self, *, limit: int, offset: int) -> "FetchQuery":
        return replace(self, limit=limit, offset=offset)

    def to_payload(self, *, default_limit: int) -> dict:
        payload: dict = {
            "fields": [{"field": {"Name": name}} for name in self.fields],
            "pagingInfo": {"limit": int(self.limit or default_limit), "offset": int(self.offset)},
        }
        if self.where:
            payload["where"] = [w.to_payload() for w in self.where]
        if self.order_by:
            payload["orderBy"] = [o.to_payload() for o in self.order_by]
        payload.update(self.extra)
        return payload
