from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .resume import ResumeRecord


class AnalysisResult(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    word_count: int = Field(ge=0)
    sentence_count: int = Field(ge=0)
    action_verbs_used: tuple[str, ...] = ()
    action_verbs_percentage: float = Field(default=0.0, ge=0.0)
    industry_keywords_found: tuple[str, ...] = ()
    keyword_density: float = Field(default=0.0, ge=0.0)
    quantifiable_metrics: tuple[str, ...] = ()
    has_quantifiable_achievements: bool = False
    readability_score: float = Field(default=0.0, ge=0.0, le=100.0)
    average_words_per_sentence: float = Field(default=0.0, ge=0.0)


class AnalysisSummary(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    word_count: int
    action_verbs_count: int
    keywords_count: int
    metrics_count: int
    readability_score: int


class ResumeAnalysisRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    resume_data: ResumeRecord | None = None
    industry: str | None = Field(default=None, max_length=100)
    target_role: str | None = Field(default=None, max_length=200)
    seniority: str | None = Field(default=None, max_length=50)


class ResumeAnalysisResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    industry: str
    analysis: AnalysisResult
    nlp_metrics: AnalysisSummary
    missing_keywords: list[str] = Field(default_factory=list)


class KeywordMatchRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    content: str = Field(default="", max_length=50000)
    target_keywords: list[str] = Field(default_factory=list, max_length=200)
    industry: str | None = Field(default=None, max_length=100)
    skills: str | None = Field(default=None, max_length=5000)


class KeywordMatchResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    match_percentage: int = Field(ge=0, le=100)
    relevant_keywords: list[str] = Field(default_factory=list)


class IndustriesResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    industries: list[str]
    default_industry: str
    ats_tips: list[str] = Field(default_factory=list)
