"""Reading-time, scroll progress, and readability endpoints."""

from fastapi import APIRouter

from recommender import (
    analyze_readability,
    format_reading_time,
    progress_percent,
    remaining_from_scroll,
)
from recommender.models import normalize_language
from recommender.reading import safe_estimate

from ..models import (
    EstimateRequest,
    EstimateResponse,
    ProgressRequest,
    ProgressResponse,
    ReadabilityRequest,
)

router = APIRouter()


@router.post("/estimate", response_model=EstimateResponse)
def estimate_reading_time(request: EstimateRequest):
    language = normalize_language(request.language)
    result = safe_estimate(request.content, language)
    return EstimateResponse(
        minutes=result.minutes,
        words=result.words,
        display_text=result.display_text,
        short_text=format_reading_time(result.minutes, language),
    )


@router.post("/progress", response_model=ProgressResponse)
def reading_progress(request: ProgressRequest):
    """Scroll position → percent read and minutes left."""
    percent = progress_percent(request.scrolled, request.total)
    return ProgressResponse(
        progress_percent=percent,
        remaining_minutes=remaining_from_scroll(request.total_minutes, percent),
    )


@router.post("/readability")
def readability(request: ReadabilityRequest):
    report = analyze_readability(request.content, normalize_language(request.language))
    return report.model_dump() if report else None
