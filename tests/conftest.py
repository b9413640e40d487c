from __future__ import annotations

from datetime import datetime

import pytest

from fakes import InMemoryRecordStore
from onlychurch.records.fetcher import RecordFetcher


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 3, 15, 12, 0, 0)


@pytest.fixture
def store() -> InMemoryRecordStore:
    return InMemoryRecordStore()


@pytest.fixture
def fetcher(store) -> RecordFetcher:
    return RecordFetcher(store)
