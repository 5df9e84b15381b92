"""Pydantic request/response models for the API."""

from .common import ArticleCard
from .reading import (
    EstimateRequest,
    EstimateResponse,
    ProgressRequest,
    ProgressResponse,
    ReadabilityRequest,
)
from .recommendations import RecommendationResponse, ScoreRequest, ScoringContextIn

__all__ = [
    "ArticleCard",
    "EstimateRequest",
    "EstimateResponse",
    "ProgressRequest",
    "ProgressResponse",
    "ReadabilityRequest",
    "RecommendationResponse",
    "ScoreRequest",
    "ScoringContextIn",
]
