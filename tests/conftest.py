"""Shared fixtures for the catalog tests."""
from __future__ import annotations

import pytest

from storefront.cache import MemoryBackend, ProductListCache, set_cache
from storefront.models import ProductRecord, QueryParameters


@pytest.fixture(autouse=True)
def memory_cache():
    """Keep every test off Redis with a fresh in-memory backend."""
    cache = ProductListCache(MemoryBackend())
    set_cache(cache)
    yield cache
    set_cache(None)


@pytest.fixture
def scenario_records():
    return [
        ProductRecord(id=1, name="Ring A", price=100, raw_type="ring"),
        ProductRecord(id=2, name="Bracelet B", price=50, raw_type="bracelet"),
    ]


@pytest.fixture
def params():
    return QueryParameters()
