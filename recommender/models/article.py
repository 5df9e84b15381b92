"""
Article model: typed representation of a content-store article for ranking.

Built from content-store JSON (camelCase keys such as titleEn, categoryId,
publishedAt) or snake_case dicts via Article.model_validate(d). Every field
except id is optional and malformed optional values are coerced to safe
defaults instead of failing validation.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence, Union

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from ..errors import InvalidCandidateList
from ..utils.dates import parse_timestamp

ArticleId = Union[int, str]

_TRUE_STRINGS = {"true", "1", "yes", "y", "on"}


def coerce_bool(value: Any) -> Optional[bool]:
    """Lenient boolean: "true", "1", "yes", "y", "on" (any case) are true."""
    if value is None:
        return None
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_STRINGS
    return bool(value)


class Article(BaseModel):
    """
    Article payload used across the ranking stages.

    published: None means the source did not say; such articles are not
    eligible for recommendation.
    """

    model_config = ConfigDict(
        extra="allow",
        populate_by_name=True,
        alias_generator=to_camel,
    )

    id: Optional[ArticleId] = None
    category_id: Optional[ArticleId] = None
    tags: List[str] = []
    title_en: str = ""
    title_ar: str = ""
    excerpt_en: str = ""
    excerpt_ar: str = ""
    content_en: str = ""
    content_ar: str = ""
    featured: bool = False
    published: Optional[bool] = None
    published_at: Optional[datetime] = None
    created_at: Optional[datetime] = None

    @field_validator("tags", mode="before")
    @classmethod
    def _clean_tags(cls, value: Any) -> List[str]:
        if value is None:
            return []
        if isinstance(value, str):
            value = value.split(",")
        if not isinstance(value, (list, tuple, set)):
            return []
        return [str(t).strip() for t in value if t is not None and str(t).strip()]

    @field_validator(
        "title_en", "title_ar", "excerpt_en", "excerpt_ar", "content_en", "content_ar",
        mode="before",
    )
    @classmethod
    def _clean_text(cls, value: Any) -> str:
        return value if isinstance(value, str) else ""

    @field_validator("featured", mode="before")
    @classmethod
    def _clean_featured(cls, value: Any) -> bool:
        return bool(coerce_bool(value))

    @field_validator("published", mode="before")
    @classmethod
    def _clean_published(cls, value: Any) -> Optional[bool]:
        return coerce_bool(value)

    @field_validator("published_at", "created_at", mode="before")
    @classmethod
    def _clean_timestamp(cls, value: Any) -> Optional[datetime]:
        return parse_timestamp(value)

    @field_validator("category_id", mode="before")
    @classmethod
    def _clean_category(cls, value: Any) -> Optional[ArticleId]:
        if isinstance(value, (int, str)) and not isinstance(value, bool):
            return value
        return None

    def title(self, language: str = "en") -> str:
        """Localized title; Arabic falls back to English when missing."""
        if language == "ar" and self.title_ar:
            return self.title_ar
        return self.title_en

    def excerpt(self, language: str = "en") -> str:
        """Localized excerpt; Arabic falls back to English when missing."""
        if language == "ar" and self.excerpt_ar:
            return self.excerpt_ar
        return self.excerpt_en

    def content(self, language: str = "en") -> str:
        """Localized body text; Arabic falls back to English when missing."""
        if language == "ar" and self.content_ar:
            return self.content_ar
        return self.content_en

    def effective_timestamp(self, now: datetime) -> datetime:
        """Publication time, else creation time, else now."""
        return self.published_at or self.created_at or now


def same_id(a: Optional[ArticleId], b: Optional[ArticleId]) -> bool:
    """Compare ids across int/str representations (path params arrive as str)."""
    if a is None or b is None:
        return False
    return str(a) == str(b)


def ensure_list(articles: Sequence[Union[Dict[str, Any], "Article"]]) -> List["Article"]:
    """
    Convert a list of dicts or Articles to Article models for the pipeline.

    Raises InvalidCandidateList when the collection itself, or one of its
    entries, is not an article mapping.
    """
    if isinstance(articles, (str, bytes)) or not isinstance(articles, (list, tuple)):
        raise InvalidCandidateList(
            f"candidates must be a list of articles, got {type(articles).__name__}"
        )
    result: List[Article] = []
    for index, entry in enumerate(articles):
        if isinstance(entry, Article):
            result.append(entry)
            continue
        if not isinstance(entry, dict):
            raise InvalidCandidateList(
                f"candidate at index {index} must be a mapping, got {type(entry).__name__}"
            )
        try:
            result.append(Article.model_validate(entry))
        except ValidationError as exc:
            raise InvalidCandidateList(f"candidate at index {index} is malformed: {exc}") from exc
    return result
