from __future__ import annotations

import random
import time
from dataclasses import dataclass
from typing import Any, Optional

import requests

from ..app_logger import get_logger
from ..core.constants import (
    DEFAULT_PAGE_SIZE,
    DEFAULT_STORE_MAX_RETRIES,
    DEFAULT_STORE_RETRY_BACKOFF,
    DEFAULT_STORE_TIMEOUT,
)
from ..core.exceptions import TransportError

logger = get_logger(__name__)


@dataclass
class StoreConfig:
    base_url: str
    project_id: str
    public_key: str
    timeout: float = DEFAULT_STORE_TIMEOUT
    max_retries: int = DEFAULT_STORE_MAX_RETRIES
    retry_backoff: float = DEFAULT_STORE_RETRY_BACKOFF
    page_size: int = DEFAULT_PAGE_SIZE

    @classmethod
    def from_dict(cls, values: dict) -> "StoreConfig":
        return cls(
            base_url=str(values["base_url"]),
            project_id=str(values.get("project_id", "")),
            public_key=str(values.get("public_key", "")),
            timeout=float(values.get("timeout", DEFAULT_STORE_TIMEOUT)),
            max_retries=int(values.get("max_retries", DEFAULT_STORE_MAX_RETRIES)),
            retry_backoff=float(values.get("retry_backoff", DEFAULT_STORE_RETRY_BACKOFF)),
            page_size=int(values.get("page_size", DEFAULT_PAGE_SIZE)),
        )


class RecordStoreClient:
    """HTTP client for the generic record-storage API.

    Every method returns the store's JSON envelope untouched
    (``{"success": .., "data"|"results": .., "message": ..}``); interpreting
    it is the gateway's job. Connectivity problems, timeouts and 5xx answers
    are retried with exponential backoff and finally raised as
    ``TransportError``. 4xx answers carrying a JSON envelope are returned as
    is, since they describe an operation failure rather than a transport one.
    """

    def __init__(self, config: StoreConfig, *, session: Optional[requests.Session] = None, sleep=time.sleep):
        self._config = config
        self._session = session or requests.Session()
        self._sleep = sleep

    @property
    def config(self) -> StoreConfig:
        return self._config

    def _headers(self) -> dict:
        return {
            "Authorization": f"Bearer {self._config.public_key}",
            "X-Project-Id": self._config.project_id,
            "Content-Type": "application/json",
        }

    def _url(self, table: str, suffix: str = "") -> str:
        return f"{self._config.base_url.rstrip('/')}/tables/{table}/records{suffix}"

    def _request(self, method: str, url: str, payload: dict) -> dict:
        attempts = max(0, int(self._config.max_retries)) + 1

        for attempt in range(1, attempts + 1):
            try:
                r = self._session.request(
                    method,
                    url,
                    json=payload,
                    headers=self._headers(),
                    timeout=self._config.timeout,
                )
                if r.status_code >= 500:
                    raise requests.HTTPError(f"{r.status_code} Server Error for url: {url}", response=r)
                try:
                    body = r.json()
                except ValueError:
                    r.raise_for_status()
                    raise TransportError(f"Store returned a non-JSON body for {method} {url}")
                if not isinstance(body, dict):
                    raise TransportError(f"Store returned an unexpected body for {method} {url}")
                return body
            except (requests.ConnectionError, requests.Timeout, requests.HTTPError) as exc:
                retryable = not isinstance(exc, requests.HTTPError) or (
                    exc.response is not None and exc.response.status_code >= 500
                )
                if retryable and attempt < attempts:
                    delay = self._config.retry_backoff * (2 ** (attempt - 1))
                    delay += random.uniform(0, self._config.retry_backoff / 2) if delay else 0
                    logger.warning(
                        "%s %s failed (attempt %d/%d): %s; retrying in %.1fs",
                        method, url, attempt, attempts, exc, delay,
                    )
                    self._sleep(delay)
                    continue
                raise TransportError(f"{method} {url} failed after {attempt} attempt(s): {exc}") from exc

        raise TransportError(f"{method} {url} failed")

    def fetch_records(self, table: str, params: dict) -> dict:
        return self._request("POST", self._url(table, "/query"), params)

    def get_record_by_id(self, table: str, record_id: int, params: dict) -> dict:
        return self._request("POST", self._url(table, f"/{int(record_id)}"), params)

    def create_record(self, table: str, params: dict) -> dict:
        return self._request("POST", self._url(table), params)

    def update_record(self, table: str, params: dict) -> dict:
        return self._request("PUT", self._url(table), params)

    def delete_record(self, table: str, params: dict) -> dict:
        return self._request("DELETE", self._url(table), params)


class StoreConnection:
    """Singleton-like factory for the store client.

    Note: One shared ``requests.Session`` keeps connection pooling across gateways.
    """

    _instance: Optional["StoreConnection"] = None

    def __init__(self, config: StoreConfig, *, client: Any = None):
        self._config = config
        self._client = client or RecordStoreClient(config)

    @classmethod
    def get_instance(cls, config: StoreConfig) -> "StoreConnection":
        if cls._instance is None or cls._instance._config != config:
            cls._instance = StoreConnection(config)
        return cls._instance

    @property
    def config(self) -> StoreConfig:
        return self._config

    @property
    def client(self):
        return self._client
