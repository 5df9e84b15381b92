"""
Scoring context: the viewing situation candidates are ranked against.
"""

from datetime import datetime
from typing import Any, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from .article import Article, ArticleId

Language = Literal["en", "ar"]
SUPPORTED_LANGUAGES = ("en", "ar")


def normalize_language(value: Any) -> str:
    """Map a locale code ("ar", "AR", "ar-SA") to a supported language, default "en"."""
    if isinstance(value, str):
        code = value.strip().lower().split("-")[0].split("_")[0]
        if code in SUPPORTED_LANGUAGES:
            return code
    return "en"


class ScoringContext(BaseModel):
    """
    Article currently being viewed plus the active display language.

    now is the reference time for recency; the orchestrator fills it in when
    the caller leaves it unset.
    """

    model_config = ConfigDict(populate_by_name=True)

    current_item_id: Optional[ArticleId] = None
    current_category_id: Optional[ArticleId] = None
    current_tags: List[str] = []
    language: Language = "en"
    now: Optional[datetime] = None

    @field_validator("current_tags", mode="before")
    @classmethod
    def _clean_tags(cls, value: Any) -> List[str]:
        if value is None:
            return []
        if isinstance(value, str):
            value = value.split(",")
        if not isinstance(value, (list, tuple, set)):
            return []
        return [str(t).strip() for t in value if t is not None and str(t).strip()]

    @field_validator("language", mode="before")
    @classmethod
    def _clean_language(cls, value: Any) -> str:
        return normalize_language(value)

    @classmethod
    def for_article(
        cls,
        article: Article,
        language: str = "en",
        now: Optional[datetime] = None,
    ) -> "ScoringContext":
        """Context for ranking related articles around the given article."""
        return cls(
            current_item_id=article.id,
            current_category_id=article.category_id,
            current_tags=list(article.tags),
            language=language,
            now=now,
        )
