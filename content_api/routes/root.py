"""Root and health endpoints."""

from fastapi import APIRouter

from ..state import get_state

router = APIRouter()

API_NAME = "Media Blog Recommendations API"
API_VERSION = "1.0.0"


@router.get("/")
def root():
    state = get_state()
    return {
        "name": API_NAME,
        "version": API_VERSION,
        "status": "loaded" if state.is_loaded else "not_configured",
        "content_source": state.config.content_source,
        "scoring_preset": state.config.scoring_preset,
        "endpoints": {
            "recommendations": [
                "/api/articles/{id}/related",
                "/api/recommendations/score",
            ],
            "reading": [
                "/api/reading/estimate",
                "/api/reading/progress",
                "/api/reading/readability",
            ],
            "config": ["/api/config/scoring"],
        },
    }


@router.get("/api/health")
def health():
    state = get_state()
    return {
        "status": "healthy",
        "loaded": state.is_loaded,
        "content_provider": type(state.content_provider).__name__ if state.content_provider else None,
    }
