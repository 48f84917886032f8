from __future__ import annotations

import re

_NON_WORD_RE = re.compile(r"[^\w\s]")
_SENTENCE_BREAK_RE = re.compile(r"[.!?]+")


def normalize_text(text: str | None) -> str:
    return (text or "").lower()


def tokenize_words(text: str | None) -> list[str]:
    return _NON_WORD_RE.sub(" ", normalize_text(text)).split()


def split_sentences(text: str | None) -> list[str]:
    pieces = _SENTENCE_BREAK_RE.split(normalize_text(text))
    return [piece.strip() for piece in pieces if piece.strip()]
