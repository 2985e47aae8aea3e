"""Encoding service shared by the HTTP API and the CLI."""
from __future__ import annotations

import logging
from enum import Enum
from time import perf_counter
from typing import Dict, Iterable, List, Optional

from .cache import cache_key, get_cache
from .config import settings
from .metaphone import metaphone
from .soundex import soundex

logger = logging.getLogger(__name__)


class Algorithm(str, Enum):
    SOUNDEX = "soundex"
    METAPHONE = "metaphone"


class EncodingRequestError(ValueError):
    """Raised when a caller hands the service something it will not encode."""


def _resolve_algorithm(algorithm: Algorithm | str) -> Algorithm:
    try:
        return Algorithm(algorithm)
    except ValueError as exc:
        raise EncodingRequestError(f"Unknown algorithm: {algorithm!r}") from exc


def _check_text(text: object) -> str:
    if not isinstance(text, str):
        raise EncodingRequestError(f"Text must be a string, got {type(text).__name__}")
    if len(text) > settings.max_text_length:
        raise EncodingRequestError(
            f"Text is {len(text)} characters long; the limit is {settings.max_text_length}"
        )
    return text


def _run(algorithm: Algorithm, text: str, max_phonemes: int) -> str:
    if algorithm is Algorithm.SOUNDEX:
        return soundex(text)
    return metaphone(text, max_phonemes)


def encode(
    text: str,
    algorithm: Algorithm | str = Algorithm.METAPHONE,
    max_phonemes: Optional[int] = None,
) -> Dict[str, object]:
    """Encode one text, consulting the cache when it is enabled.

    ``max_phonemes`` only matters for Metaphone; ``None`` picks up
    ``settings.default_max_phonemes``. Soundex results always report 0.
    """

    algo = _resolve_algorithm(algorithm)
    text = _check_text(text)
    if algo is Algorithm.SOUNDEX:
        limit = 0
    else:
        limit = settings.default_max_phonemes if max_phonemes is None else max_phonemes

    start = perf_counter()
    key = cache_key(algo.value, text, limit)
    if settings.cache_enabled:
        cached = get_cache().get(key)
        if cached is not None:
            logger.info(
                "timing: total=%.2fms cache_hit=1 algorithm=%s text=%r",
                (perf_counter() - start) * 1000,
                algo.value,
                text,
            )
            return {**cached, "cached": True}

    code = _run(algo, text, limit)
    response: Dict[str, object] = {
        "text": text,
        "algorithm": algo.value,
        "code": code,
        "max_phonemes": limit,
        "cached": False,
    }
    if settings.cache_enabled:
        get_cache().set(key, response, settings.cache_ttl_seconds)
        logger.debug("cache_store text=%r ttl=%s", text, settings.cache_ttl_seconds)
    logger.info(
        "timing: total=%.2fms cache_hit=0 algorithm=%s text=%r code=%r",
        (perf_counter() - start) * 1000,
        algo.value,
        text,
        code,
    )
    return response


def encode_batch(
    texts: Iterable[str],
    algorithm: Algorithm | str = Algorithm.METAPHONE,
    max_phonemes: Optional[int] = None,
) -> List[Dict[str, object]]:
    items = list(texts)
    if len(items) > settings.max_batch_size:
        raise EncodingRequestError(
            f"Batch holds {len(items)} texts; the limit is {settings.max_batch_size}"
        )
    algo = _resolve_algorithm(algorithm)
    results = [encode(text, algo, max_phonemes) for text in items]
    logger.info("encode_batch algorithm=%s size=%s", algo.value, len(results))
    return results


def encode_all(text: str, max_phonemes: Optional[int] = None) -> Dict[str, object]:
    """Both codes for ``text`` in one payload."""
    sx = encode(text, Algorithm.SOUNDEX)
    mp = encode(text, Algorithm.METAPHONE, max_phonemes)
    return {
        "text": text,
        "soundex": sx["code"],
        "metaphone": mp["code"],
        "max_phonemes": mp["max_phonemes"],
    }
