"""Product list cache: Redis when reachable, otherwise a process-local store.

Backends only move bytes with a TTL. :class:`ProductListCache` owns the key
namespace and the JSON encoding of the cached records. Any backend failure
reads as a miss so the caller goes back to the upstream API.
"""
from __future__ import annotations

import json
import logging
import threading
import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Protocol, Tuple

import redis

from .config import settings

logger = logging.getLogger(__name__)

KEY_PREFIX = "storefront:"


class CacheBackend(Protocol):
    name: str

    def read(self, key: str) -> Optional[bytes]: ...

    def write(self, key: str, data: bytes, ttl: int) -> None: ...

    def evict(self, key: str) -> None: ...


@dataclass
class RedisBackend:
    client: redis.Redis
    name: str = "redis"

    def read(self, key: str) -> Optional[bytes]:
        try:
            return self.client.get(key)
        except redis.RedisError as exc:
            logger.warning("Redis read of %s failed: %s", key, exc)
            return None

    def write(self, key: str, data: bytes, ttl: int) -> None:
        try:
            self.client.setex(key, max(ttl, 1), data)
        except redis.RedisError as exc:
            logger.warning("Redis write of %s failed: %s", key, exc)

    def evict(self, key: str) -> None:
        try:
            self.client.delete(key)
        except redis.RedisError as exc:
            logger.warning("Redis evict of %s failed: %s", key, exc)


@dataclass
class MemoryBackend:
    """Dict store with per-entry deadlines; ``ttl <= 0`` expires at once."""

    name: str = "memory"
    _entries: Dict[str, Tuple[float, bytes]] = field(default_factory=dict)
    _lock: threading.Lock = field(default_factory=threading.Lock)

    def read(self, key: str) -> Optional[bytes]:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            deadline, data = entry
            if deadline <= time.monotonic():
                del self._entries[key]
                return None
            return data

    def write(self, key: str, data: bytes, ttl: int) -> None:
        with self._lock:
            self._entries[key] = (time.monotonic() + ttl, data)

    def evict(self, key: str) -> None:
        with self._lock:
            self._entries.pop(key, None)


class ProductListCache:
    def __init__(self, backend: CacheBackend) -> None:
        self.backend = backend

    @property
    def name(self) -> str:
        return self.backend.name

    def load(self, key: str) -> Optional[List[Dict[str, Any]]]:
        data = self.backend.read(KEY_PREFIX + key)
        if not data:
            return None
        try:
            items = json.loads(data)
        except (UnicodeDecodeError, json.JSONDecodeError):
            logger.warning("Discarding undecodable cache entry %s", key)
            return None
        return items if isinstance(items, list) else None

    def store(self, key: str, items: List[Dict[str, Any]], ttl: int) -> None:
        self.backend.write(KEY_PREFIX + key, json.dumps(items).encode("utf-8"), ttl)

    def invalidate(self, key: str) -> None:
        self.backend.evict(KEY_PREFIX + key)


def _connect_backend() -> CacheBackend:
    client = redis.Redis(host=settings.redis_host, port=settings.redis_port)
    try:
        client.ping()
    except redis.RedisError:
        logger.warning("Redis not available at %s:%s, caching in memory", settings.redis_host, settings.redis_port)
        return MemoryBackend()
    logger.info("Using Redis cache at %s:%s", settings.redis_host, settings.redis_port)
    return RedisBackend(client)


_cache: Optional[ProductListCache] = None


def get_cache() -> ProductListCache:
    global _cache
    if _cache is None:
        _cache = ProductListCache(_connect_backend())
    return _cache


def set_cache(cache: Optional[ProductListCache]) -> None:
    """Replace the process-wide cache; ``None`` forces reconnection on next use."""
    global _cache
    _cache = cache
