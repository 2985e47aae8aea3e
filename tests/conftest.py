"""Shared fixtures: keep the suite away from a real Redis server."""

import pytest

from phonecode.cache import InMemoryCache, reset_cache


@pytest.fixture(autouse=True)
def memory_cache():
    backend = InMemoryCache()
    reset_cache(backend)
    yield backend
    reset_cache()
