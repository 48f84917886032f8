from __future__ import annotations

import re

SCALE_WORDS: tuple[str, ...] = (
    "million",
    "thousand",
    "billion",
    "k",
    "team",
    "users",
    "customers",
    "projects",
    "years",
    "months",
)

_PERCENT_RE = re.compile(r"\d+%")
_CURRENCY_RE = re.compile(r"\$[\d,]+")
_SCALED_COUNT_RE = re.compile(
    r"\d+\+?\s*(?:" + "|".join(SCALE_WORDS) + r")",
    re.IGNORECASE,
)

# Order matters: results are grouped by pattern class.
_METRIC_PATTERNS: tuple[re.Pattern[str], ...] = (_PERCENT_RE, _CURRENCY_RE, _SCALED_COUNT_RE)


def find_quantifiable_metrics(corpus: str | None) -> list[str]:
    text = (corpus or "").lower()
    metrics: list[str] = []
    for pattern in _METRIC_PATTERNS:
        metrics.extend(match.group(0) for match in pattern.finditer(text))
    return metrics
