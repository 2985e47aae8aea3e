"""Tests for the encoding service and its cache."""

import dataclasses

import pytest

from phonecode import service
from phonecode.cache import InMemoryCache, cache_key
from phonecode.service import Algorithm, EncodingRequestError, encode, encode_all, encode_batch


@pytest.fixture
def patch_settings(monkeypatch):
    def _apply(**overrides):
        monkeypatch.setattr(service, "settings", dataclasses.replace(service.settings, **overrides))

    return _apply


def test_encode_soundex():
    result = encode("Robert", Algorithm.SOUNDEX)
    assert result == {
        "text": "Robert",
        "algorithm": "soundex",
        "code": "R163",
        "max_phonemes": 0,
        "cached": False,
    }


def test_encode_accepts_algorithm_names():
    assert encode("Knight", "metaphone")["code"] == "NFT"


def test_second_call_is_served_from_cache(memory_cache):
    first = encode("Thompson", Algorithm.METAPHONE, 3)
    second = encode("Thompson", Algorithm.METAPHONE, 3)
    assert first["cached"] is False
    assert second["cached"] is True
    assert second["code"] == first["code"] == "0MP"
    assert memory_cache.get(cache_key("metaphone", "Thompson", 3)) is not None


def test_cache_can_be_disabled(patch_settings, memory_cache):
    patch_settings(cache_enabled=False)
    encode("Thompson")
    assert encode("Thompson")["cached"] is False
    assert memory_cache.get(cache_key("metaphone", "Thompson", 0)) is None


def test_default_max_phonemes_comes_from_settings(patch_settings):
    patch_settings(default_max_phonemes=2)
    assert encode("Thompson")["code"] == "0M"
    assert encode("Thompson", max_phonemes=0)["code"] == "0MPSN"


def test_unknown_algorithm():
    with pytest.raises(EncodingRequestError):
        encode("Robert", "nysiis")


def test_text_must_be_a_string():
    with pytest.raises(EncodingRequestError):
        encode(42)


def test_text_length_limit(patch_settings):
    patch_settings(max_text_length=5)
    with pytest.raises(EncodingRequestError):
        encode("Christopher")


def test_batch_encodes_each_text_independently():
    results = encode_batch(["Robert", "Rupert", ""], Algorithm.SOUNDEX)
    assert [item["code"] for item in results] == ["R163", "R163", ""]


def test_batch_size_limit(patch_settings):
    patch_settings(max_batch_size=2)
    with pytest.raises(EncodingRequestError):
        encode_batch(["a", "b", "c"])


def test_encode_all():
    assert encode_all("Cent") == {
        "text": "Cent",
        "soundex": "C530",
        "metaphone": "SNT",
        "max_phonemes": 0,
    }


def test_in_memory_cache_expires(monkeypatch):
    cache = InMemoryCache()
    now = [1000.0]
    monkeypatch.setattr("phonecode.cache.time.time", lambda: now[0])
    cache.set("k", {"code": "R163"}, ttl=10)
    assert cache.get("k") == {"code": "R163"}
    now[0] += 11
    assert cache.get("k") is None


def test_in_memory_cache_drops_expired_entries_on_write(monkeypatch):
    """Keys that are never read again still leave the store once stale."""

    cache = InMemoryCache()
    now = [1000.0]
    monkeypatch.setattr("phonecode.cache.time.time", lambda: now[0])
    for idx in range(1000):
        cache.set(f"old-{idx}", {"code": "R163"}, ttl=10)
    now[0] += 3600
    cache.set("fresh", {"code": "T520"}, ttl=10)
    assert len(cache._store) == 1
    assert cache.get("fresh") == {"code": "T520"}


def test_in_memory_cache_clear():
    cache = InMemoryCache()
    cache.set("k", {"code": "R163"}, ttl=10)
    cache.clear()
    assert cache.get("k") is None


def test_cache_key_separates_algorithms_and_caps():
    keys = {
        cache_key("soundex", "Robert"),
        cache_key("metaphone", "Robert"),
        cache_key("metaphone", "Robert", 3),
    }
    assert len(keys) == 3
