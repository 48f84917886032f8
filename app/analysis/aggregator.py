from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any

from app.schemas.analysis import AnalysisResult, AnalysisSummary
from app.schemas.resume import ResumeRecord

from .lexical import find_action_verbs, find_industry_keywords
from .metrics import find_quantifiable_metrics
from .readability import average_words_per_sentence, reading_ease
from .reference_data import DEFAULT_REFERENCE, GENERAL_INDUSTRY, ReferenceData
from .text_normalizer import normalize_text, split_sentences, tokenize_words


def _as_record(resume: ResumeRecord | Mapping[str, Any] | None) -> ResumeRecord:
    if resume is None:
        return ResumeRecord()
    if isinstance(resume, ResumeRecord):
        return resume
    return ResumeRecord.model_validate(resume)


def build_corpus(resume: ResumeRecord | Mapping[str, Any] | None) -> str:
    """Join every free-text field of a resume into one lowercased string.

    Order: name, summary, then company/position/description per experience,
    institution/degree/description per education entry, then skills. Absent
    fields contribute an empty string so positions stay stable.
    """
    record = _as_record(resume)
    parts: list[str] = []
    if record.personal_info is not None:
        parts.append(record.personal_info.name or "")
        parts.append(record.personal_info.summary or "")
    for experience in record.experiences or []:
        parts.extend((experience.company or "", experience.position or "", experience.description or ""))
    for education in record.education or []:
        parts.extend((education.institution or "", education.degree or "", education.description or ""))
    if record.skills:
        parts.append(record.skills)
    return normalize_text(" ".join(parts))


def _percentage(count: int, total: int) -> float:
    if total == 0:
        return 0.0
    return count / total * 100


def analyze_text(
    text: str | None,
    industry: str | None = GENERAL_INDUSTRY,
    reference: ReferenceData | None = None,
) -> AnalysisResult:
    reference = reference or DEFAULT_REFERENCE
    corpus = normalize_text(text)
    words = tokenize_words(corpus)
    sentences = split_sentences(corpus)
    action_verbs = find_action_verbs(words, reference.action_verbs)
    keywords = find_industry_keywords(corpus, industry, reference)
    metrics = find_quantifiable_metrics(corpus)

    return AnalysisResult(
        word_count=len(words),
        sentence_count=len(sentences),
        action_verbs_used=tuple(action_verbs),
        action_verbs_percentage=_percentage(len(action_verbs), len(words)),
        industry_keywords_found=tuple(keywords),
        keyword_density=_percentage(len(keywords), len(words)),
        quantifiable_metrics=tuple(metrics),
        has_quantifiable_achievements=len(metrics) > 0,
        readability_score=reading_ease(words, sentences),
        average_words_per_sentence=average_words_per_sentence(words, sentences),
    )


def analyze_resume(
    resume: ResumeRecord | Mapping[str, Any] | None,
    industry: str | None = GENERAL_INDUSTRY,
    reference: ReferenceData | None = None,
) -> AnalysisResult:
    return analyze_text(build_corpus(resume), industry, reference)


def summarize_metrics(result: AnalysisResult) -> AnalysisSummary:
    return AnalysisSummary(
        word_count=result.word_count,
        action_verbs_count=len(result.action_verbs_used),
        keywords_count=len(result.industry_keywords_found),
        metrics_count=len(result.quantifiable_metrics),
        readability_score=math.floor(result.readability_score + 0.5),
    )
