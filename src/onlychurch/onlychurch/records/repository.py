from __future__ import annotations

from typing import Protocol, Sequence

from .model import StoreQuery


class RecordStore(Protocol):
    """Interface to the external store for tenant-scoped reads.

    Rows come back keyed by column name. Implementations raise RetrievalError
    when the store is unreachable or rejects the query.
    """

    def query(self, query: StoreQuery) -> Sequence[dict]:
        raise NotImplementedError

    def count(self, query: StoreQuery) -> int:
        raise NotImplementedError
