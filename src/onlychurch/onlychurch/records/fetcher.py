from __future__ import annotations

import logging
from typing import Any

from ..core.enums import SortDirection
from ..core.exceptions import RetrievalError
from .model import RecordQuery, StoreQuery
from .repository import RecordStore
from .schema import schema_for

logger = logging.getLogger(__name__)


class RecordFetcher:
    """Tenant-scoped reads for the reporting pipeline.

    A blank tenant id yields nothing rather than an unscoped query.
    """

    def __init__(self, store: RecordStore):
        self._store = store

    def compile(self, query: RecordQuery) -> StoreQuery:
        schema = schema_for(query.kind)
        text_column = None
        if query.search and query.search.strip():
            text_column = schema.column(query.search_field or schema.search_field)

        range_column = None
        range_start = range_end = None
        inclusive = False
        if query.range is not None:
            range_column = schema.column(query.range_field or schema.default_order)
            range_start, range_end, inclusive = query.range.start, query.range.end, query.range.end_inclusive

        return StoreQuery(
            table=schema.table,
            tenant_column=schema.column(schema.tenant_field),
            tenant_id=str(query.tenant_id).strip(),
            text_column=text_column,
            text=query.search.strip() if text_column else None,
            equals={schema.column(attr): value for attr, value in query.equals.items()},
            range_column=range_column,
            range_start=range_start,
            range_end=range_end,
            range_end_inclusive=inclusive,
            order_column=schema.column(query.order_by) if query.order_by else None,
            descending=SortDirection(query.direction) == SortDirection.DESC,
            limit=query.limit,
            offset=max(0, int(query.offset)),
        )

    def fetch(self, query: RecordQuery) -> list[Any]:
        if not query.tenant_id or not str(query.tenant_id).strip():
            return []
        compiled = self.compile(query)
        rows = self._store.query(compiled)
        factory = schema_for(query.kind).factory
        try:
            return [factory(row) for row in rows]
        except (KeyError, TypeError, ValueError) as e:
            logger.error("malformed %s row: %s", compiled.table, e)
            raise RetrievalError("Dados inválidos retornados pelo banco de dados") from e

    def count(self, query: RecordQuery) -> int:
        if not query.tenant_id or not str(query.tenant_id).strip():
            return 0
        return int(self._store.count(self.compile(query)))
