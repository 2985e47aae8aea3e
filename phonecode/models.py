"""Pydantic models for request/response payloads."""
from __future__ import annotations

from pydantic import BaseModel, Field

from .service import Algorithm


class BatchEncodeRequest(BaseModel):
    texts: list[str] = Field(..., description="Texts encoded independently of each other")
    algorithm: Algorithm = Algorithm.METAPHONE
    max_phonemes: int | None = None


class EncodeResult(BaseModel):
    text: str
    algorithm: Algorithm
    code: str
    max_phonemes: int = 0
    cached: bool = False


class BatchEncodeResponse(BaseModel):
    algorithm: Algorithm
    results: list[EncodeResult]


class EncodeAllResponse(BaseModel):
    text: str
    soundex: str
    metaphone: str
    max_phonemes: int = 0


class HealthResponse(BaseModel):
    ok: bool = True
    cache: str | None = None
