from __future__ import annotations

import threading
import time
from datetime import date
from typing import Any, Callable, Optional

import pytest

from school_records.database.connection import StoreConfig, StoreConnection


class FakeStoreClient:
    """In-memory stand-in for ``RecordStoreClient``.

    Speaks the store's envelope format. Rows are returned in insertion order;
    ``orderBy`` is ignored. ``failures[op]`` injects one failure for the next
    call of ``op`` (an exception is raised, a dict is returned as is).
    """

    def __init__(self, tables: Optional[dict[str, list[dict]]] = None):
        self.tables: dict[str, list[dict]] = {}
        self.calls: list[tuple[str, str, dict]] = []
        self.failures: dict[str, Any] = {}
        self.reject: Optional[Callable[[str, dict], Optional[list]]] = None
        self.delay = 0.0
        self._lock = threading.Lock()
        self._next_id = 1
        for table, rows in (tables or {}).items():
            for row in rows:
                self.insert(table, row)

    def insert(self, table: str, row: dict) -> dict:
        stored = dict(row)
        if "Id" not in stored:
            stored["Id"] = self._next_id
        self._next_id = max(self._next_id, int(stored["Id"])) + 1
        self.tables.setdefault(table, []).append(stored)
        return stored

    def rows(self, table: str) -> list[dict]:
        return self.tables.setdefault(table, [])

    def _failure(self, op: str):
        failure = self.failures.pop(op, None)
        if isinstance(failure, Exception):
            raise failure
        return failure

    @staticmethod
    def _matches(row: dict, where: list[dict]) -> bool:
        for w in where:
            actual = row.get(w["FieldName"])
            if isinstance(actual, dict):
                actual = actual.get("Id")
            expected = w["Values"][0]
            op = w["Operator"]
            if op == "EqualTo" and actual != expected:
                return False
            if op == "NotEqualTo" and actual == expected:
                return False
            if op == "LessThan" and (actual is None or str(actual) >= str(expected)):
                return False
            if op == "GreaterThan" and (actual is None or str(actual) <= str(expected)):
                return False
        return True

    def fetch_records(self, table: str, params: dict) -> dict:
        self.calls.append(("fetch", table, params))
        failure = self._failure("fetch")
        if failure is not None:
            return failure
        if self.delay:
            time.sleep(self.delay)
        with self._lock:
            rows = [dict(r) for r in self.rows(table) if self._matches(r, params.get("where") or [])]
        paging = params.get("pagingInfo") or {}
        offset = int(paging.get("offset", 0))
        limit = int(paging.get("limit", len(rows)))
        return {"success": True, "data": rows[offset:offset + limit]}

    def get_record_by_id(self, table: str, record_id: int, params: dict) -> dict:
        self.calls.append(("get", table, params))
        failure = self._failure("get")
        if failure is not None:
            return failure
        with self._lock:
            for row in self.rows(table):
                if row["Id"] == record_id:
                    return {"success": True, "data": dict(row)}
        return {"success": False, "message": "Record not found"}

    def create_record(self, table: str, params: dict) -> dict:
        self.calls.append(("create", table, params))
        failure = self._failure("create")
        if failure is not None:
            return failure
        if self.delay:
            time.sleep(self.delay)
        results = []
        with self._lock:
            for record in params["records"]:
                errors = self.reject(table, record) if self.reject else None
                if errors:
                    results.append({"success": False, "errors": errors})
                    continue
                results.append({"success": True, "data": dict(self.insert(table, record))})
        return {"success": True, "results": results}

    def update_record(self, table: str, params: dict) -> dict:
        self.calls.append(("update", table, params))
        failure = self._failure("update")
        if failure is not None:
            return failure
        results = []
        with self._lock:
            for record in params["records"]:
                row = next((r for r in self.rows(table) if r["Id"] == record.get("Id")), None)
                if row is None:
                    results.append({"success": False, "message": f"Record {record.get('Id')} not found"})
                    continue
                row.update(record)
                results.append({"success": True, "data": dict(row)})
        return {"success": True, "results": results}

    def delete_record(self, table: str, params: dict) -> dict:
        self.calls.append(("delete", table, params))
        failure = self._failure("delete")
        if failure is not None:
            return failure
        results = []
        with self._lock:
            rows = self.rows(table)
            for record_id in params["RecordIds"]:
                row = next((r for r in rows if r["Id"] == record_id), None)
                if row is None:
                    results.append({"success": False, "message": f"Record {record_id} not found"})
                    continue
                rows.remove(row)
                results.append({"success": True})
        return {"success": True, "results": results}


@pytest.fixture
def today() -> date:
    return date(2024, 3, 15)


@pytest.fixture
def store() -> FakeStoreClient:
    return FakeStoreClient()


@pytest.fixture
def store_config() -> StoreConfig:
    return StoreConfig(
        base_url="http://store.test/api/v1",
        project_id="school-records-test",
        public_key="test-key",
        timeout=2.0,
        max_retries=0,
        retry_backoff=0.0,
        page_size=100,
    )


@pytest.fixture
def conn(store: FakeStoreClient, store_config: StoreConfig) -> StoreConnection:
    return StoreConnection(store_config, client=store)
