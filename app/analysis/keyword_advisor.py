from __future__ import annotations

import math
import re
from collections.abc import Iterable

from app.schemas.analysis import AnalysisResult

from .reference_data import ReferenceData

_NON_ALNUM_RE = re.compile(r"[^a-z0-9 ]")


def _normalize(value: str) -> str:
    return _NON_ALNUM_RE.sub("", (value or "").lower()).strip()


def missing_industry_keywords(
    result: AnalysisResult,
    industry: str | None,
    reference: ReferenceData,
    *,
    limit: int = 8,
) -> list[str]:
    found = set(result.industry_keywords_found)
    missing = [keyword for keyword in reference.keywords_for(industry) if keyword not in found]
    return missing[:limit]


def relevant_keywords(
    industry: str | None,
    skills: str | Iterable[str] | None,
    reference: ReferenceData,
    *,
    limit: int = 12,
) -> list[str]:
    """Industry keywords the candidate's skills do not already cover."""
    if skills is None:
        entries: list[str] = []
    elif isinstance(skills, str):
        entries = [skills]
    else:
        entries = list(skills)
    current = [_normalize(part) for entry in entries for part in entry.split(",")]
    current = [skill for skill in current if skill]

    results: list[str] = []
    for keyword in reference.keywords_for(industry):
        if len(results) >= limit:
            break
        normalized = _normalize(keyword)
        if not any(skill in normalized or normalized in skill for skill in current):
            results.append(keyword)
    return results


def keyword_match_percentage(content: str | None, target_keywords: Iterable[str]) -> int:
    """Share of target keywords found in content; blank tokens and blank keywords never match."""
    targets = list(target_keywords)
    if not targets:
        return 0
    content_norm = _normalize(content or "")
    tokens = content_norm.split()

    def _matches(keyword: str) -> bool:
        k = _normalize(keyword)
        if not k:
            return False
        return any(tok == k or k in tok or tok in k for tok in tokens) or k in content_norm

    matched = sum(1 for keyword in targets if _matches(keyword))
    return math.floor(matched / len(targets) * 100 + 0.5)
