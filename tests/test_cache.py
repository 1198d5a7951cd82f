"""Tests for the product list cache and its backends."""

from dataclasses import replace

import redis

from storefront import cache as cache_module
from storefront import products
from storefront.cache import KEY_PREFIX, MemoryBackend, ProductListCache, RedisBackend, set_cache
from storefront.models import ProductRecord
from storefront.products import get_products


class _FailingRedis:
    """Stands in for a client whose server went away."""

    def get(self, key):
        raise redis.ConnectionError("connection reset")

    def setex(self, key, ttl, value):
        raise redis.ConnectionError("connection reset")

    def delete(self, key):
        raise redis.ConnectionError("connection reset")


class _DictRedis:
    def __init__(self):
        self.store = {}
        self.ttls = {}

    def get(self, key):
        return self.store.get(key)

    def setex(self, key, ttl, value):
        self.store[key] = value
        self.ttls[key] = ttl

    def delete(self, key):
        self.store.pop(key, None)


def _count_fetches(monkeypatch):
    calls = []

    def fake_fetch():
        calls.append(1)
        return [ProductRecord(id=len(calls), name="Bague", price=10, raw_type="bague")]

    monkeypatch.setattr(products, "fetch_products", fake_fetch)
    return calls


def test_memory_entries_expire(monkeypatch):
    clock = [100.0]
    monkeypatch.setattr(cache_module.time, "monotonic", lambda: clock[0])
    cache = ProductListCache(MemoryBackend())
    cache.store("products", [{"id": 1}], ttl=30)
    assert cache.load("products") == [{"id": 1}]
    clock[0] += 31
    assert cache.load("products") is None


def test_expired_list_is_fetched_again(monkeypatch):
    """A zero TTL makes every read a miss, so the upstream is asked each time."""

    monkeypatch.setattr(products, "settings", replace(products.settings, cache_ttl_seconds=0))
    calls = _count_fetches(monkeypatch)
    _, first = get_products()
    _, second = get_products()
    assert (first, second) == ("upstream", "upstream")
    assert len(calls) == 2


def test_redis_failure_reads_as_miss():
    backend = RedisBackend(_FailingRedis())
    cache = ProductListCache(backend)
    cache.store("products", [{"id": 1}], ttl=60)
    assert cache.load("products") is None
    cache.invalidate("products")


def test_get_products_survives_broken_redis(monkeypatch):
    set_cache(ProductListCache(RedisBackend(_FailingRedis())))
    calls = _count_fetches(monkeypatch)
    records, source = get_products()
    assert source == "upstream"
    assert records[0].name == "Bague"
    assert len(calls) == 1


def test_redis_backend_round_trip_uses_prefix():
    client = _DictRedis()
    cache = ProductListCache(RedisBackend(client))
    cache.store("products", [{"id": "1", "type": "bague"}], ttl=0)
    assert list(client.store) == [KEY_PREFIX + "products"]
    assert client.ttls[KEY_PREFIX + "products"] == 1
    assert cache.load("products") == [{"id": "1", "type": "bague"}]
    cache.invalidate("products")
    assert cache.load("products") is None


def test_undecodable_entry_is_a_miss():
    backend = MemoryBackend()
    backend.write(KEY_PREFIX + "products", b"\xff not json", ttl=60)
    assert ProductListCache(backend).load("products") is None


def test_unreachable_redis_falls_back_to_memory(monkeypatch):
    class _DownRedis:
        def __init__(self, **kwargs):
            pass

        def ping(self):
            raise redis.ConnectionError("refused")

    monkeypatch.setattr(cache_module.redis, "Redis", _DownRedis)
    set_cache(None)
    assert cache_module.get_cache().name == "memory"
