from __future__ import annotations

from collections.abc import Iterable

from .reference_data import ReferenceData


def find_action_verbs(words: Iterable[str], action_verbs: Iterable[str]) -> list[str]:
    """Return every token that overlaps an action verb.

    A token matches when it contains a verb or a verb contains it, so
    inflected forms are caught ("achieving" against "achiev") at the price of
    false positives on short tokens and short verbs ("led" inside "skilled").
    Each occurrence is kept; callers count them.
    """
    verbs = [verb.lower() for verb in action_verbs]
    return [word for word in words if any(verb in word or word in verb for verb in verbs)]


def industry_keyword_candidates(industry: str | None, reference: ReferenceData) -> list[str]:
    return [*reference.keywords_for(industry), *reference.general_keywords]


def find_industry_keywords(corpus: str, industry: str | None, reference: ReferenceData) -> list[str]:
    """Keywords whose phrase occurs anywhere in the corpus, first hit order, no repeats."""
    lowered = (corpus or "").lower()
    found: list[str] = []
    seen: set[str] = set()
    for keyword in industry_keyword_candidates(industry, reference):
        if keyword in seen:
            continue
        if keyword.lower() in lowered:
            found.append(keyword)
            seen.add(keyword)
    return found
