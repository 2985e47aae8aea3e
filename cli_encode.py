"""Terminal client that reuses the in-process encoders."""
from __future__ import annotations

import argparse
from pathlib import Path
from typing import Iterable

from phonecode import metaphone, soundex

CHOICES = ("soundex", "metaphone", "both")


def encode_line(text: str, algorithm: str, max_phonemes: int) -> dict:
    result: dict = {}
    if algorithm in ("soundex", "both"):
        result["soundex"] = soundex(text)
    if algorithm in ("metaphone", "both"):
        result["metaphone"] = metaphone(text, max_phonemes)
    return result


def pretty_print(text: str, codes: dict) -> None:
    rendered = " | ".join(f"{name}={code or '-'}" for name, code in codes.items())
    print(f"{text}: {rendered}")


def interactive_shell(algorithm: str, max_phonemes: int) -> None:
    print("Interactive phonetic encoder. Type 'exit' to quit.")
    while True:
        try:
            text = input("> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            return
        if not text:
            continue
        if text.lower() in {"exit", "quit"}:
            return
        pretty_print(text, encode_line(text, algorithm, max_phonemes))


def batch_mode(file_path: Path, algorithm: str, max_phonemes: int) -> None:
    with file_path.open("r", encoding="utf-8") as fh:
        for line in fh:
            text = line.strip()
            if not text:
                continue
            pretty_print(text, encode_line(text, algorithm, max_phonemes))


def main(argv: Iterable[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Soundex / Metaphone encoder")
    parser.add_argument("text", nargs="?", help="Text to encode. If omitted, starts REPL mode.")
    parser.add_argument("--batch", type=Path, help="File with texts to encode line by line")
    parser.add_argument("--algorithm", choices=CHOICES, default="both")
    parser.add_argument("--max-phonemes", type=int, default=0, help="Metaphone length cap (0 = none)")
    args = parser.parse_args(list(argv) if argv is not None else None)

    if args.batch:
        batch_mode(args.batch, args.algorithm, args.max_phonemes)
        return 0
    if args.text:
        pretty_print(args.text, encode_line(args.text, args.algorithm, args.max_phonemes))
        return 0
    interactive_shell(args.algorithm, args.max_phonemes)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
