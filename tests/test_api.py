"""HTTP API tests against the FastAPI app."""

import dataclasses

import pytest
from fastapi.testclient import TestClient

from phonecode import service
from phonecode.main import app

client = TestClient(app)


def test_health():
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"ok": True, "cache": "memory"}


def test_soundex_endpoint():
    response = client.get("/soundex", params={"q": "Rupert"})
    assert response.status_code == 200
    body = response.json()
    assert body["code"] == "R163"
    assert body["algorithm"] == "soundex"


def test_metaphone_endpoint_with_cap():
    response = client.get("/metaphone", params={"q": "Thompson", "max_phonemes": 2})
    assert response.status_code == 200
    assert response.json()["code"] == "0M"


def test_encode_returns_both_codes():
    response = client.get("/encode", params={"q": "Cat"})
    assert response.json() == {"text": "Cat", "soundex": "C300", "metaphone": "KT", "max_phonemes": 0}


def test_batch_endpoint():
    response = client.post("/encode", json={"texts": ["Robert", "123"], "algorithm": "soundex"})
    assert response.status_code == 200
    body = response.json()
    assert body["algorithm"] == "soundex"
    assert [item["code"] for item in body["results"]] == ["R163", ""]


def test_missing_query_is_rejected():
    assert client.get("/soundex").status_code == 422


@pytest.mark.parametrize("path", ["/soundex", "/metaphone", "/encode"])
def test_overlong_text_is_rejected(monkeypatch, path):
    monkeypatch.setattr(service, "settings", dataclasses.replace(service.settings, max_text_length=3))
    response = client.get(path, params={"q": "Robert"})
    assert response.status_code == 422


def test_oversized_batch_is_rejected(monkeypatch):
    monkeypatch.setattr(service, "settings", dataclasses.replace(service.settings, max_batch_size=1))
    response = client.post("/encode", json={"texts": ["a", "b"]})
    assert response.status_code == 422


def test_running_module_starts_uvicorn(monkeypatch):
    import runpy

    import uvicorn

    calls = []
    monkeypatch.setattr(uvicorn, "run", lambda served, **kwargs: calls.append((served, kwargs)))
    runpy.run_module("phonecode.main", run_name="__main__")
    assert len(calls) == 1
    served, kwargs = calls[0]
    assert served.title == "Phonetic Encoding Service"
    assert kwargs["port"] == 8000
