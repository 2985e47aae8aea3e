"""Caching helpers with Redis primary and in-memory fallback.

Encoded codes never change for a given input, so entries only expire to keep
memory bounded. The in-memory backend drops expired entries on every write.
"""
from __future__ import annotations

import hashlib
import json
import logging
import threading
import time
from dataclasses import dataclass
from typing import Any, Dict, Optional, Protocol

import redis

from .config import settings

logger = logging.getLogger(__name__)

KEY_PREFIX = "phonecode:"


class CacheBackend(Protocol):
    name: str

    def get(self, key: str) -> Optional[Dict[str, Any]]: ...

    def set(self, key: str, value: Dict[str, Any], ttl: int) -> None: ...

    def clear(self) -> None: ...


def cache_key(algorithm: str, text: str, max_phonemes: int = 0) -> str:
    digest = hashlib.sha1(text.encode("utf-8")).hexdigest()
    return f"{KEY_PREFIX}{algorithm}:{max_phonemes}:{digest}"


@dataclass
class RedisCache:
    client: redis.Redis
    name: str = "redis"

    def get(self, key: str) -> Optional[Dict[str, Any]]:
        try:
            data = self.client.get(key)
        except redis.RedisError as exc:  # pragma: no cover - protective
            logger.warning("Redis get failed: %s", exc)
            return None
        if not data:
            return None
        try:
            return json.loads(data)
        except json.JSONDecodeError:
            return None

    def set(self, key: str, value: Dict[str, Any], ttl: int) -> None:
        try:
            self.client.setex(key, ttl, json.dumps(value))
        except redis.RedisError as exc:  # pragma: no cover - protective
            logger.warning("Redis set failed: %s", exc)

    def clear(self) -> None:
        try:
            keys = list(self.client.scan_iter(match=f"{KEY_PREFIX}*"))
            if keys:
                self.client.delete(*keys)
        except redis.RedisError as exc:  # pragma: no cover - protective
            logger.warning("Redis clear failed: %s", exc)


class InMemoryCache:
    name = "memory"

    def __init__(self) -> None:
        self._store: Dict[str, tuple[float, Dict[str, Any]]] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[Dict[str, Any]]:
        with self._lock:
            value = self._store.get(key)
            if not value:
                return None
            expires_at, payload = value
            if expires_at < time.time():
                self._store.pop(key, None)
                return None
            return payload

    def set(self, key: str, value: Dict[str, Any], ttl: int) -> None:
        now = time.time()
        with self._lock:
            expired = [k for k, (expires_at, _) in self._store.items() if expires_at < now]
            for stale in expired:
                del self._store[stale]
            self._store[key] = (now + ttl, value)

    def clear(self) -> None:
        with self._lock:
            self._store.clear()


_cache: CacheBackend | None = None


def get_cache() -> CacheBackend:
    global _cache
    if _cache is not None:
        return _cache
    try:
        client = redis.Redis(host=settings.redis_host, port=settings.redis_port, decode_responses=False)
        client.ping()
        logger.info("Using Redis cache at %s:%s", settings.redis_host, settings.redis_port)
        _cache = RedisCache(client)
    except redis.RedisError:
        logger.warning("Redis not available, using in-memory cache")
        _cache = InMemoryCache()
    return _cache


def reset_cache(backend: CacheBackend | None = None) -> None:
    """Forget the selected backend, or pin ``backend`` in its place."""
    global _cache
    _cache = backend
