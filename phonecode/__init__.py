"""Phonetic encoders for matching words that sound alike.

Only two functions are public; everything else in the package (cache,
service, HTTP API) is plumbing around them::

    >>> soundex("Robert")
    'R163'
    >>> metaphone("Thompson")
    '0MPSN'
"""
from __future__ import annotations

from .metaphone import metaphone
from .soundex import soundex

__all__ = ["metaphone", "soundex"]
