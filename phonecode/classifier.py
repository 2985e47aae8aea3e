"""Per-letter phonetic properties consumed by the Metaphone rules."""
from __future__ import annotations

VOWEL = 1  # AEIOU
NO_CHANGE = 2  # FJLMNR
AFFECT_H = 4  # CGPST
MAKE_SOFT = 8  # EIY
NO_GH_TO_F = 16  # BDH

# Indexed by ord(letter) - ord("A").
_CODES: tuple[int, ...] = (
    1, 16, 4, 16, 9, 2, 4, 16, 9, 2, 0, 2, 2,
    # a  b  c   d  e  f  g   h  i  j  k  l  m
    2, 1, 4, 0, 2, 4, 4, 1, 0, 0, 0, 8, 0,
    # n  o  p  q  r  s  t  u  v  w  x  y  z
)


def classify(letter: str) -> int:
    """Return the property bitmask of ``letter``; 0 outside ``A-Z``."""
    if len(letter) != 1 or not "A" <= letter <= "Z":
        return 0
    return _CODES[ord(letter) - 65]


def is_vowel(letter: str) -> bool:
    return bool(classify(letter) & VOWEL)


def is_no_change(letter: str) -> bool:
    return bool(classify(letter) & NO_CHANGE)


def affects_h(letter: str) -> bool:
    return bool(classify(letter) & AFFECT_H)


def makes_soft(letter: str) -> bool:
    return bool(classify(letter) & MAKE_SOFT)


def no_gh_to_f(letter: str) -> bool:
    return bool(classify(letter) & NO_GH_TO_F)
