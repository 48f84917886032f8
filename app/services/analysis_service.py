from __future__ import annotations

import json
import logging
import time

from app.analysis import (
    analyze_resume,
    keyword_match_percentage,
    missing_industry_keywords,
    relevant_keywords,
    summarize_metrics,
)
from app.analysis.reference_data import ATS_OPTIMIZATION_TIPS
from app.core.config import settings
from app.core.reference_config import get_reference_data
from app.schemas.analysis import (
    IndustriesResponse,
    KeywordMatchRequest,
    KeywordMatchResponse,
    ResumeAnalysisRequest,
    ResumeAnalysisResponse,
)
from app.schemas.resume import ResumeRecord

logger = logging.getLogger(__name__)


class EmptyResumeError(ValueError):
    def __init__(self, message: str, *, status_code: int = 400):
        super().__init__(message)
        self.status_code = status_code


def has_analyzable_content(record: ResumeRecord | None) -> bool:
    if record is None:
        return False
    info = record.personal_info
    return bool(
        (info is not None and (info.name or info.summary))
        or record.experiences
        or record.education
        or record.skills
    )


def _resolve_industry(industry: str | None) -> str:
    return (industry or "").strip().lower() or settings.default_industry


def run_resume_analysis(payload: ResumeAnalysisRequest) -> ResumeAnalysisResponse:
    if payload.resume_data is None:
        raise EmptyResumeError("No resume data provided. Please fill out your resume form.")
    if not has_analyzable_content(payload.resume_data):
        raise EmptyResumeError("Please add some content to your resume before analyzing.")

    started_at = time.perf_counter()
    industry = _resolve_industry(payload.industry)
    reference = get_reference_data()
    result = analyze_resume(payload.resume_data, industry, reference)
    missing = missing_industry_keywords(
        result,
        industry,
        reference,
        limit=settings.missing_keywords_limit,
    )

    logger.info(
        json.dumps(
            {
                "event": "resume_analysis_completed",
                "industry": industry,
                "known_industry": industry in reference.industry_keywords,
                "target_role": payload.target_role,
                "seniority": payload.seniority,
                "words": result.word_count,
                "sentences": result.sentence_count,
                "keywords": len(result.industry_keywords_found),
                "metrics": len(result.quantifiable_metrics),
                "duration_ms": int((time.perf_counter() - started_at) * 1000),
            }
        )
    )
    return ResumeAnalysisResponse(
        industry=industry,
        analysis=result,
        nlp_metrics=summarize_metrics(result),
        missing_keywords=missing,
    )


def run_keyword_match(payload: KeywordMatchRequest) -> KeywordMatchResponse:
    industry = _resolve_industry(payload.industry)
    reference = get_reference_data()
    match = keyword_match_percentage(payload.content, payload.target_keywords)
    suggestions = relevant_keywords(
        industry,
        payload.skills,
        reference,
        limit=settings.relevant_keywords_limit,
    )
    logger.debug("keyword_match industry=%s targets=%s match=%s", industry, len(payload.target_keywords), match)
    return KeywordMatchResponse(match_percentage=match, relevant_keywords=suggestions)


def list_industries() -> IndustriesResponse:
    reference = get_reference_data()
    return IndustriesResponse(
        industries=list(reference.industries),
        default_industry=settings.default_industry,
        ats_tips=list(ATS_OPTIMIZATION_TIPS),
    )
