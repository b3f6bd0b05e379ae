from __future__ import annotations

import json
from dataclasses import asdict, is_dataclass
from typing import Any, ClassVar, Generic, Iterable, Iterator, Mapping, Optional, Sequence, TypeVar

from ..app_logger import get_logger
from ..common.fields import FieldSpec, normalize, to_store_payload
from ..core.exceptions import RecordWriteError, StoreError
from .connection import StoreConnection
from .query import FetchQuery, OrderBy, Where
from .result import GatewayResult, Notification

logger = get_logger(__name__)

M = TypeVar("M")


def record_notifications(result: Mapping[str, Any]) -> list[Notification]:
    """Turn one failed batch entry into notifications, one per field error."""

    out: list[Notification] = []
    for err in result.get("errors") or ():
        label = err.get("fieldLabel") or err.get("field") or "Field"
        out.append(Notification.error(f"{label}: {err.get('message', 'invalid value')}", field=label))
    if result.get("message"):
        out.append(Notification.error(str(result["message"])))
    return out


class RecordGateway(Generic[M]):
    """CRUD against one table of the remote record store.

    Subclasses declare the table, the field specs and the model class. Raw
    records are normalized into canonical models here, so nothing above this
    layer ever sees store key names.

    Reads and deletes never raise; they return a ``GatewayResult`` with a
    fallback value and notifications. Creates/updates raise
    ``RecordWriteError`` when no record was written.
    """

    TABLE: ClassVar[str]
    ENTITY: ClassVar[str] = "record"
    ENTITY_PLURAL: ClassVar[str] = "records"
    FIELDS: ClassVar[Sequence[FieldSpec]] = ()
    MODEL: ClassVar[type]
    DEFAULT_ORDER: ClassVar[Sequence[OrderBy]] = ()

    def __init__(self, conn: StoreConnection):
        self._conn = conn
        self._client = conn.client
        self._page_size = int(conn.config.page_size)

    # ---- mapping ----------------------------------------------------------

    @property
    def page_size(self) -> int:
        return self._page_size

    def field(self, name: str) -> FieldSpec:
        for spec in self.FIELDS:
            if spec.name == name:
                return spec
        raise KeyError(name)

    def wire_key(self, name: str) -> str:
        return self.field(name).wire_key

    def fetch_fields(self) -> list[str]:
        return ["Id"] + [spec.wire_key for spec in self.FIELDS]

    def to_model(self, raw: Mapping[str, Any]) -> M:
        return self.MODEL(**normalize(raw, self.FIELDS))

    def canonical_input(self, values: Any) -> dict:
        """Accept a model, a canonical dict, or a dict in either store scheme."""

        if is_dataclass(values) and not isinstance(values, type):
            values = asdict(values)
        out: dict = {}
        for spec in self.FIELDS:
            if spec.name in values:
                out[spec.name] = values[spec.name]
            elif (spec.current and spec.current in values) or (spec.legacy and spec.legacy in values):
                out[spec.name] = spec.read(values)
        return out

    def to_payload(self, values: Any, *, drop_none: bool = False) -> dict:
        return to_store_payload(self.canonical_input(values), self.FIELDS, drop_none=drop_none)

    def _models(self, rows: Optional[Iterable[Any]]) -> list[M]:
        return [self.to_model(r) for r in (rows or ()) if isinstance(r, Mapping)]

    # ---- reads ------------------------------------------------------------

    def _query(self, query: Optional[FetchQuery]) -> FetchQuery:
        if query is None:
            query = FetchQuery(order_by=tuple(self.DEFAULT_ORDER))
        if not query.fields:
            query = FetchQuery(
                fields=tuple(self.fetch_fields()),
                where=query.where,
                order_by=query.order_by,
                limit=query.limit,
                offset=query.offset,
                extra=query.extra,
            )
        return query

    def get_all(self, query: Optional[FetchQuery] = None) -> GatewayResult[list[M]]:
        """One page of records (``page_size`` at most); larger tables are truncated."""

        query = self._query(query)
        params = query.to_payload(default_limit=self._page_size)
        try:
            response = self._client.fetch_records(self.TABLE, params)
        except StoreError as exc:
            logger.error("Error fetching %s: %s", self.ENTITY_PLURAL, exc)
            return GatewayResult.fail([], [Notification.error(f"Failed to load {self.ENTITY_PLURAL}")])

        if not response.get("success"):
            message = response.get("message") or f"Failed to load {self.ENTITY_PLURAL}"
            logger.error("Error fetching %s: %s", self.ENTITY_PLURAL, message)
            return GatewayResult.fail([], [Notification.error(message)])

        return GatewayResult.succeed(self._models(response.get("data")))

    def find(
        self,
        *,
        where: Sequence[Where] = (),
        order_by: Optional[Sequence[OrderBy]] = None,
        limit: Optional[int] = None,
    ) -> GatewayResult[list[M]]:
        return self.get_all(
            FetchQuery(
                where=tuple(where),
                order_by=tuple(self.DEFAULT_ORDER if order_by is None else order_by),
                limit=limit,
            )
        )

    def iter_pages(self, query: Optional[FetchQuery] = None) -> Iterator[list[M]]:
        """Offset continuation: yield pages until a short (or failed) page."""

        query = self._query(query)
        limit = int(query.limit or self._page_size)
        offset = int(query.offset)
        while True:
            result = self.get_all(query.page(limit=limit, offset=offset))
            if not result.ok:
                return
            if result.data:
                yield result.data
            if len(result.data) < limit:
                return
            offset += limit

    def find_all(
        self,
        *,
        where: Sequence[Where] = (),
        order_by: Optional[Sequence[OrderBy]] = None,
    ) -> GatewayResult[list[M]]:
        """Every matching record, page by page. A failed page fails the whole read."""

        query = self._query(
            FetchQuery(
                where=tuple(where),
                order_by=tuple(self.DEFAULT_ORDER if order_by is None else order_by),
            )
        )
        records: list[M] = []
        offset = 0
        while True:
            result = self.get_all(query.page(limit=self._page_size, offset=offset))
            if not result.ok:
                return GatewayResult.fail([], result.notifications)
            records.extend(result.data)
            if len(result.data) < self._page_size:
                return GatewayResult.succeed(records)
            offset += self._page_size

    def get_by_id(self, record_id: int) -> GatewayResult[Optional[M]]:
        params = {"fields": [{"field": {"Name": name}} for name in self.fetch_fields()]}
        try:
            response = self._client.get_record_by_id(self.TABLE, int(record_id), params)
        except StoreError as exc:
            logger.error("Error fetching %s %s: %s", self.ENTITY, record_id, exc)
            return GatewayResult.fail(None, [Notification.error(f"Failed to load {self.ENTITY}")])

        data = response.get("data")
        if not response.get("success") or not isinstance(data, Mapping):
            message = response.get("message") or f"{self.ENTITY.capitalize()} not found"
            logger.error("Error fetching %s %s: %s", self.ENTITY, record_id, message)
            return GatewayResult.fail(None, [Notification.error(message)])

        return GatewayResult.succeed(self.to_model(data))

    # ---- writes -----------------------------------------------------------

    def _write(self, verb: str, records: list[dict]) -> GatewayResult[list[M]]:
        call = self._client.create_record if verb == "create" else self._client.update_record
        try:
            response = call(self.TABLE, {"records": records})
        except StoreError as exc:
            logger.error("Error %s %s: %s", f"{verb[:-1]}ing", self.ENTITY, exc)
            return GatewayResult.fail([], [Notification.error(f"Failed to {verb} {self.ENTITY}")])

        if not response.get("success"):
            message = response.get("message") or f"Failed to {verb} {self.ENTITY}"
            logger.error("Error %s %s: %s", f"{verb[:-1]}ing", self.ENTITY, message)
            return GatewayResult.fail([], [Notification.error(message)])

        results = response.get("results")
        if results is None:
            data = response.get("data")
            results = [{"success": True, "data": data}] if isinstance(data, Mapping) else []

        notifications: list[Notification] = []
        failed = [r for r in results if not r.get("success")]
        if failed:
            logger.error("Failed to %s %d %s: %s", verb, len(failed), self.ENTITY_PLURAL, json.dumps(failed, default=str))
            for r in failed:
                notifications.extend(record_notifications(r))

        written = self._models(r.get("data") for r in results if r.get("success"))
        if written:
            notifications.append(Notification.success(f"{self.ENTITY.capitalize()} {verb}d successfully!"))
        return GatewayResult(ok=bool(written), data=written, notifications=tuple(notifications))

    def create_many(self, items: Sequence[Any]) -> GatewayResult[list[M]]:
        """Batch insert; ``data`` is the successful subset."""
        return self._write("create", [self.to_payload(i, drop_none=True) for i in items])

    def create(self, values: Any) -> M:
        result = self.create_many([values])
        if not result.data:
            raise RecordWriteError(f"No {self.ENTITY} created", result.notifications)
        return result.data[0]

    def update_many(self, items: Sequence[tuple[int, Any]]) -> GatewayResult[list[M]]:
        records = []
        for record_id, values in items:
            payload = self.to_payload(values)
            payload["Id"] = int(record_id)
            records.append(payload)
        return self._write("update", records)

    def update(self, record_id: int, values: Any) -> M:
        result = self.update_many([(record_id, values)])
        if not result.data:
            raise RecordWriteError(f"{self.ENTITY.capitalize()} not updated", result.notifications)
        return result.data[0]

    def delete_many(self, record_ids: Sequence[int]) -> GatewayResult[bool]:
        params = {"RecordIds": [int(i) for i in record_ids]}
        try:
            response = self._client.delete_record(self.TABLE, params)
        except StoreError as exc:
            logger.error("Error deleting %s: %s", self.ENTITY_PLURAL, exc)
            return GatewayResult.fail(False, [Notification.error(f"Failed to delete {self.ENTITY}")])

        if not response.get("success"):
            message = response.get("message") or f"Failed to delete {self.ENTITY}"
            logger.error("Error deleting %s: %s", self.ENTITY_PLURAL, message)
            return GatewayResult.fail(False, [Notification.error(message)])

        results = response.get("results")
        if results is None:
            return GatewayResult.succeed(True, [Notification.success(f"{self.ENTITY.capitalize()} deleted successfully!")])

        notifications: list[Notification] = []
        failed = [r for r in results if not r.get("success")]
        if failed:
            logger.error("Failed to delete %d %s: %s", len(failed), self.ENTITY_PLURAL, json.dumps(failed, default=str))
            for r in failed:
                notifications.extend(record_notifications(r))

        deleted = len(results) - len(failed)
        if deleted:
            notifications.append(Notification.success(f"{self.ENTITY.capitalize()} deleted successfully!"))
        return GatewayResult(ok=deleted > 0, data=deleted > 0, notifications=tuple(notifications))

    def delete(self, record_id: int) -> GatewayResult[bool]:
        return self.delete_many([record_id])
