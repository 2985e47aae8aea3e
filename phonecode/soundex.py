"""Soundex: first letter plus three digits grouping similar consonants."""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from .normalizer import normalize

CODE_LENGTH = 4

_GROUPS = {
    "BFPV": "1",
    "CGJKQSXZ": "2",
    "DT": "3",
    "L": "4",
    "MN": "5",
    "R": "6",
}
# Vowels, H, W and Y are absent: they carry no digit.
SOUNDEX_TABLE: Mapping[str, str] = MappingProxyType(
    {letter: digit for letters, digit in _GROUPS.items() for letter in letters}
)


def soundex(text: str) -> str:
    """Return the 4-character Soundex code of ``text``.

    Input is normalized first; when no ``A-Z`` letter survives the result is
    ``""``. A letter is encoded only when its digit differs from the last digit
    written. Letters without a digit are skipped and do not reset that memory,
    so ``"Tymczak"`` gives ``T520`` rather than ``T522``.
    """

    letters = normalize(text)
    if not letters:
        return ""

    code = letters[0]
    last_digit = SOUNDEX_TABLE.get(code)
    for letter in letters[1:]:
        if len(code) >= CODE_LENGTH:
            break
        digit = SOUNDEX_TABLE.get(letter)
        if digit and digit != last_digit:
            code += digit
            last_digit = digit

    return code.ljust(CODE_LENGTH, "0")
