"""Input cleanup for the Soundex path."""
from __future__ import annotations

import re

# Anything left after upper-casing that is not a plain Latin letter.
_NON_ALPHA_RE = re.compile(r"[^A-Z]+")


def normalize(text: str | None) -> str:
    """Upper-case ``text`` and strip everything outside ``A-Z``.

    Accented letters and other scripts are dropped rather than folded to a base
    letter (``"Müller"`` -> ``"MLLER"``). Characters whose upper-case form is
    plain ASCII survive, so ``"ß"`` becomes ``"SS"``.
    """

    if not text:
        return ""
    return _NON_ALPHA_RE.sub("", text.upper())
