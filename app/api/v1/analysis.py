from fastapi import APIRouter, Header, HTTPException, Request

from app.core.config import settings
from app.core.rate_limit import limiter
from app.core.security import check_api_key
from app.schemas.analysis import (
    IndustriesResponse,
    KeywordMatchRequest,
    KeywordMatchResponse,
    ResumeAnalysisRequest,
    ResumeAnalysisResponse,
)
from app.services.analysis_service import (
    EmptyResumeError,
    list_industries,
    run_keyword_match,
    run_resume_analysis,
)

router = APIRouter()


@router.post("/analyze-resume", response_model=ResumeAnalysisResponse)
@limiter.limit(settings.rate_limit)
async def analyze_resume_endpoint(
    request: Request,
    payload: ResumeAnalysisRequest,
    x_api_key: str | None = Header(default=None),
):
    _ = request
    check_api_key(x_api_key)
    try:
        return run_resume_analysis(payload)
    except EmptyResumeError as exc:
        raise HTTPException(status_code=exc.status_code, detail=str(exc)) from exc


@router.post("/keyword-match", response_model=KeywordMatchResponse)
@limiter.limit(settings.rate_limit)
async def keyword_match_endpoint(
    request: Request,
    payload: KeywordMatchRequest,
    x_api_key: str | None = Header(default=None),
):
    _ = request
    check_api_key(x_api_key)
    return run_keyword_match(payload)


@router.get("/reference/industries", response_model=IndustriesResponse)
async def industries_endpoint():
    return list_industries()
