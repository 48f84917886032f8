"""Flesch reading-ease approximation over normalized words and sentences."""

from __future__ import annotations

import re
from collections.abc import Sequence

_SILENT_SUFFIX_RE = re.compile(r"(?:[^laeiouy]es|ed|[^laeiouy]e)$")
_LEADING_Y_RE = re.compile(r"^y")
_VOWEL_GROUP_RE = re.compile(r"[aeiouy]{1,2}")

_BASE = 206.835
_SENTENCE_LENGTH_WEIGHT = 1.015
_SYLLABLE_WEIGHT = 84.6


def count_syllables(word: str) -> int:
    word = word.lower()
    if len(word) <= 3:
        return 1
    word = _SILENT_SUFFIX_RE.sub("", word)
    word = _LEADING_Y_RE.sub("", word)
    groups = _VOWEL_GROUP_RE.findall(word)
    return len(groups) if groups else 1


def average_words_per_sentence(words: Sequence[str], sentences: Sequence[str]) -> float:
    if not sentences:
        return 0.0
    return len(words) / len(sentences)


def reading_ease(words: Sequence[str], sentences: Sequence[str]) -> float:
    """Return a reading-ease score clamped to [0, 100]; 0 when there is nothing to read."""
    if not words or not sentences:
        return 0.0
    syllables = sum(count_syllables(word) for word in words)
    words_per_sentence = len(words) / len(sentences)
    syllables_per_word = syllables / len(words)
    score = _BASE - _SENTENCE_LENGTH_WEIGHT * words_per_sentence - _SYLLABLE_WEIGHT * syllables_per_word
    return max(0.0, min(100.0, score))
