"""FastAPI application exposing the phonetic encoders."""
from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException, Query

from .cache import get_cache
from .config import settings
from .models import (
    BatchEncodeRequest,
    BatchEncodeResponse,
    EncodeAllResponse,
    EncodeResult,
    HealthResponse,
)
from .service import Algorithm, EncodingRequestError, encode, encode_all, encode_batch

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_LEVEL = logging.getLevelName(settings.log_level.upper())

# ``force=True`` replaces uvicorn's default handlers so encoder logs show up.
logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT, force=True)
for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
    logging.getLogger(name).setLevel(LOG_LEVEL)

logger = logging.getLogger(__name__)
logger.info("Logging configured at %s", settings.log_level.upper())

app = FastAPI(title="Phonetic Encoding Service")


@app.get("/health", response_model=HealthResponse)
def health() -> dict:
    backend = get_cache().name if settings.cache_enabled else None
    return {"ok": True, "cache": backend}


@app.get("/soundex", response_model=EncodeResult)
def soundex_endpoint(q: str = Query(..., description="Text to encode")) -> dict:
    try:
        return encode(q, Algorithm.SOUNDEX)
    except EncodingRequestError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc


@app.get("/metaphone", response_model=EncodeResult)
def metaphone_endpoint(
    q: str = Query(..., description="Text to encode"),
    max_phonemes: int | None = Query(None, description="Length cap; 0 means none"),
) -> dict:
    try:
        return encode(q, Algorithm.METAPHONE, max_phonemes)
    except EncodingRequestError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc


@app.get("/encode", response_model=EncodeAllResponse)
def encode_endpoint(
    q: str = Query(..., description="Text to encode"),
    max_phonemes: int | None = None,
) -> dict:
    try:
        return encode_all(q, max_phonemes)
    except EncodingRequestError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc


@app.post("/encode", response_model=BatchEncodeResponse)
def encode_batch_endpoint(payload: BatchEncodeRequest) -> dict:
    try:
        results = encode_batch(payload.texts, payload.algorithm, payload.max_phonemes)
    except EncodingRequestError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return {"algorithm": payload.algorithm, "results": results}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000, log_level=settings.log_level.lower())
