from __future__ import annotations

from typing import Any, Iterator, Optional, Protocol, Sequence, TypeVar

from .query import FetchQuery, OrderBy, Where
from .result import GatewayResult

M = TypeVar("M")


class RecordRepository(Protocol[M]):
    """Repository interface shared by every entity.

    Note (DIP): services depend on this interface, not on the remote store.
    """

    def get_all(self, query: Optional[FetchQuery] = None) -> GatewayResult[list[M]]:
        raise NotImplementedError

    def find(
        self,
        *,
        where: Sequence[Where] = (),
        order_by: Optional[Sequence[OrderBy]] = None,
        limit: Optional[int] = None,
    ) -> GatewayResult[list[M]]:
        raise NotImplementedError

    def iter_pages(self, query: Optional[FetchQuery] = None) -> Iterator[list[M]]:
        raise NotImplementedError

    def find_all(
        self,
        *,
        where: Sequence[Where] = (),
        order_by: Optional[Sequence[OrderBy]] = None,
    ) -> GatewayResult[list[M]]:
        raise NotImplementedError

    def get_by_id(self, record_id: int) -> GatewayResult[Optional[M]]:
        raise NotImplementedError

    def create(self, values: Any) -> M:
        raise NotImplementedError

    def update(self, record_id: int, values: Any) -> M:
        raise NotImplementedError

    def delete(self, record_id: int) -> GatewayResult[bool]:
        raise NotImplementedError

    def delete_many(self, record_ids: Sequence[int]) -> GatewayResult[bool]:
        raise NotImplementedError
