"""Recommendation request/response models."""

from datetime import datetime
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel

from .common import ArticleCard


class ScoringContextIn(BaseModel):
    current_item_id: Optional[Union[int, str]] = None
    current_category_id: Optional[Union[int, str]] = None
    current_tags: List[str] = []
    language: str = "en"
    now: Optional[datetime] = None


class ScoreRequest(BaseModel):
    # Left as Any so a non-list payload reaches the engine and gets a 400.
    candidates: Any = []
    context: ScoringContextIn = ScoringContextIn()
    config: Optional[Dict[str, Any]] = None


class RecommendationResponse(BaseModel):
    articles: List[ArticleCard]
    total: int
    language: str
    current_article_id: Optional[Union[int, str]] = None
