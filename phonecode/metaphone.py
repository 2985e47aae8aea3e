"""Metaphone: context-sensitive letter-to-phoneme transduction.

The encoder runs in two phases. The first letter is checked once against a
handful of silent or shifted openings (``KN``, ``WR``, ``AE``, ``X`` ...). Then
every remaining position is handed to a per-letter rule that sees the previous
letter, the next two letters and the letter three positions back. Each rule
returns ``(emitted, consumed)``; ``consumed`` is 2 when a digraph such as
``TH`` or ``SH`` is swallowed as a unit.

Two symbols stand for sounds with no single letter: ``X`` for "sh" and ``0``
for "th".
"""
from __future__ import annotations

import logging
from typing import Callable, Dict, NamedTuple, Tuple

from .classifier import affects_h, is_vowel, is_no_change, makes_soft, no_gh_to_f

logger = logging.getLogger(__name__)

SH = "X"
TH = "0"

# Read for any position outside the word.
NULL = ""

Step = Tuple[str, int]


class Window(NamedTuple):
    """Letters around the cursor, ``NULL`` past either end of the word."""

    prev: str
    current: str
    next: str
    after_next: str
    back3: str


def _letter_at(word: str, index: int) -> str:
    if 0 <= index < len(word):
        return word[index]
    return NULL


def window_at(word: str, index: int) -> Window:
    return Window(
        prev=_letter_at(word, index - 1),
        current=_letter_at(word, index),
        next=_letter_at(word, index + 1),
        after_next=_letter_at(word, index + 2),
        back3=_letter_at(word, index - 3),
    )


def _is_alpha(letter: str) -> bool:
    return len(letter) == 1 and "A" <= letter <= "Z"


def leading_step(w: Window) -> Step:
    """Handle the first letter; ``consumed == 0`` defers it to the main loop."""
    letter = w.current
    if letter == "A":
        if w.next == "E":
            return "E", 2
        return "A", 1
    if letter in "GKP" and w.next == "N":
        return "N", 2
    if letter == "W":
        if w.next == "R":
            return "R", 2
        if w.next == "H" or is_vowel(w.next):
            return "W", 2
        return "", 0
    if letter == "X":
        return "S", 1
    if letter in "EIOU":
        return letter, 1
    return "", 0


def _b(w: Window) -> Step:
    # silent in "MB"
    return ("" if w.prev == "M" else "B"), 1


def _c(w: Window) -> Step:
    if makes_soft(w.next):
        if w.next == "I" and w.after_next == "A":
            return SH, 1
        if w.prev == "S":
            return "", 1
        return "S", 1
    if w.next == "H":
        if not no_gh_to_f(w.prev) or w.after_next == "R":
            return "K", 2
        return SH, 2
    return "K", 1


def _d(w: Window) -> Step:
    if w.next == "G" and makes_soft(w.after_next):
        return "J", 2
    return "T", 1


def _g(w: Window) -> Step:
    if w.next == "H" and not no_gh_to_f(w.back3):
        return "F", 2
    if w.next != "N" and makes_soft(w.next):
        return "J", 1
    return "K", 1


def _h(w: Window) -> Step:
    if is_vowel(w.next) and not affects_h(w.prev):
        return "H", 1
    return "", 1


def _k(w: Window) -> Step:
    # silent in "CK"
    return ("" if w.prev == "C" else "K"), 1


def _p(w: Window) -> Step:
    return ("F" if w.next == "H" else "P"), 1


def _s(w: Window) -> Step:
    if w.next == "H" or (w.next == "I" and w.after_next in ("A", "O")):
        return SH, 2
    return "S", 1


def _t(w: Window) -> Step:
    if w.next == "H":
        return TH, 2
    if w.next == "I" and w.after_next in ("A", "O"):
        return SH, 1
    return "T", 1


def _w(w: Window) -> Step:
    return ("W" if is_vowel(w.next) else ""), 1


def _x(w: Window) -> Step:
    return "KS", 1


def _y(w: Window) -> Step:
    return ("Y" if is_vowel(w.next) else ""), 1


def _z(w: Window) -> Step:
    return "S", 1


RULES: Dict[str, Callable[[Window], Step]] = {
    "B": _b,
    "C": _c,
    "D": _d,
    "G": _g,
    "H": _h,
    "K": _k,
    "P": _p,
    "S": _s,
    "T": _t,
    "W": _w,
    "X": _x,
    "Y": _y,
    "Z": _z,
}


def step(w: Window) -> Step:
    """Apply the rule for ``w.current``; unknown letters emit nothing."""
    rule = RULES.get(w.current)
    if rule is not None:
        return rule(w)
    if is_no_change(w.current):
        return w.current, 1
    return "", 1


def metaphone(text: str, max_phonemes: int = 0) -> str:
    """Return the Metaphone code of ``text``.

    ``max_phonemes`` caps the output length when positive. Zero means no
    explicit cap, and the code is then never longer than the number of ``A-Z``
    letters in the input. A negative value is deliberately read as zero rather
    than as "emit only the leading letter". Characters outside ``A-Z`` are
    skipped but still count as neighbours for the look-around rules.
    """

    word = text.upper() if text else ""
    if max_phonemes > 0:
        limit = max_phonemes
    else:
        limit = sum(1 for ch in word if _is_alpha(ch))

    pos = 0
    while pos < len(word) and not _is_alpha(word[pos]):
        pos += 1
    if pos >= len(word):
        return ""

    emitted, consumed = leading_step(window_at(word, pos))
    result = emitted[:limit]
    pos += consumed

    while pos < len(word) and len(result) < limit:
        if not _is_alpha(word[pos]):
            pos += 1
            continue
        emitted, consumed = step(window_at(word, pos))
        result = (result + emitted)[:limit]
        pos += consumed

    logger.debug("metaphone text=%r max_phonemes=%s code=%r", text, max_phonemes, result)
    return result
