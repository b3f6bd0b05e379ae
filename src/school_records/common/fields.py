"""Field normalization between the two record naming schemes.

Records coming back from the store may use the current suffixed keys
(``first_name_c``, ``Name_c``) or the legacy camelCase keys (``firstName``,
``name``), sometimes both. Everything here is total: a missing or malformed
value comes back as ``None`` instead of raising.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Iterable, Mapping, Optional, Sequence

from .datetime_utils import format_api_date, to_calendar_date

CURRENT_SUFFIX = "_c"


def legacy_name_for(logical_name: str) -> str:
    """``first_name`` -> ``firstName``, ``Head_of_Department`` -> ``headOfDepartment``."""
    parts = [p for p in logical_name.split("_") if p]
    if not parts:
        return logical_name
    head = parts[0][:1].lower() + parts[0][1:]
    return head + "".join(p[:1].upper() + p[1:] for p in parts[1:])


def _present(record: Mapping[str, Any], key: Optional[str]) -> bool:
    return key is not None and key in record and record[key] is not None


def _dig(record: Mapping[str, Any], path: str) -> Any:
    value: Any = record
    for key in path.split("."):
        if not isinstance(value, Mapping):
            return None
        value = value.get(key)
    return value


def value_of(record: Any, logical_name: str, legacy_name: Optional[str] = None) -> Any:
    """Read a logical attribute regardless of naming scheme.

    The current scheme (``logical_name + "_c"``) wins; otherwise the legacy
    key is used. Dotted legacy names walk nested objects.
    """

    if not isinstance(record, Mapping):
        return None

    current = logical_name + CURRENT_SUFFIX
    if _present(record, current):
        return record[current]

    legacy = legacy_name or legacy_name_for(logical_name)
    if "." in legacy:
        return _dig(record, legacy)
    return record.get(legacy)


# ---- coercion -------------------------------------------------------------


def _to_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, Mapping):
        value = value.get("Name", value.get("name"))
        return None if value is None else str(value)
    return str(value)


def _to_int(value: Any) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(float(value))
    except (TypeError, ValueError):
        return None


def _to_float(value: Any) -> Optional[float]:
    if value is None or value == "" or isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _to_decimal(value: Any) -> Optional[Decimal]:
    if value is None or value == "" or isinstance(value, bool):
        return None
    try:
        return Decimal(str(value))
    except (InvalidOperation, ValueError):
        return None


def _to_ref(value: Any) -> Optional[int]:
    """Lookup fields come back as ``{"Id": 3, "Name": ".."}`` or a bare id."""
    if isinstance(value, Mapping):
        value = value.get("Id", value.get("id"))
    return _to_int(value)


def _to_ids(value: Any) -> tuple:
    if value is None:
        return ()
    if isinstance(value, str):
        value = [v for v in value.split(",") if v.strip()]
    if not isinstance(value, (list, tuple)):
        value = [value]
    ids = (_to_ref(v) for v in value)
    return tuple(i for i in ids if i is not None)


def _to_tags(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        return ",".join(str(v).strip() for v in value if str(v).strip())
    return str(value)


_COERCE = {
    "str": _to_str,
    "int": _to_int,
    "float": _to_float,
    "decimal": _to_decimal,
    "date": to_calendar_date,
    "ref": _to_ref,
    "ids": _to_ids,
    "tags": _to_tags,
}


@dataclass(frozen=True)
class FieldSpec:
    """How one canonical attribute is stored.

    ``current`` is the suffixed store key (``None`` for system fields such as
    ``Tags``), ``legacy`` the old camelCase key. ``kind`` selects coercion.
    """

    name: str
    current: Optional[str]
    legacy: Optional[str] = None
    kind: str = "str"
    updateable: bool = True

    @classmethod
    def of(cls, name: str, kind: str = "str", *, logical: Optional[str] = None, legacy: Optional[str] = None,
           updateable: bool = True) -> "FieldSpec":
        """Derive store keys from the logical name: ``first_name`` -> ``first_name_c`` / ``firstName``."""
        logical = logical or name
        return cls(
            name=name,
            current=logical + CURRENT_SUFFIX,
            legacy=legacy or legacy_name_for(logical),
            kind=kind,
            updateable=updateable,
        )

    @classmethod
    def system(cls, name: str, key: str, kind: str = "str", *, updateable: bool = True) -> "FieldSpec":
        """Unsuffixed system field (``Name``, ``Tags``)."""
        return cls(name=name, current=None, legacy=key, kind=kind, updateable=updateable)

    @property
    def wire_key(self) -> str:
        return self.current or self.legacy or self.name

    def read(self, record: Any) -> Any:
        if not isinstance(record, Mapping):
            return None
        raw = None
        if _present(record, self.current):
            raw = record[self.current]
        elif self.legacy:
            raw = _dig(record, self.legacy) if "." in self.legacy else record.get(self.legacy)
        return _COERCE[self.kind](raw)

    def dump(self, value: Any) -> Any:
        if value is None:
            return None
        if self.kind == "date":
            return format_api_date(value)
        if self.kind == "decimal":
            return float(value)
        if self.kind == "ids":
            return list(value)
        if isinstance(value, Enum):
            return value.value
        return value


def normalize(record: Any, specs: Sequence[FieldSpec]) -> dict:
    """Map a raw store record into a canonical dict keyed by ``spec.name``.

    ``Id`` is always carried through as ``id``.
    """

    out = {spec.name: spec.read(record) for spec in specs}
    out["id"] = _to_int(record.get("Id", record.get("id"))) if isinstance(record, Mapping) else None
    return out


def to_store_payload(values: Mapping[str, Any], specs: Iterable[FieldSpec], *, drop_none: bool = False) -> dict:
    """Map canonical values onto current-scheme keys, keeping updateable fields only."""

    payload: dict = {}
    for spec in specs:
        if not spec.updateable or spec.name not in values:
            continue
        dumped = spec.dump(values[spec.name])
        if dumped is None and drop_none:
            continue
        payload[spec.wire_key] = dumped
    return payload
