"""Pure helpers: query parsing and article card formatting."""

from typing import Any, List, Optional

from pydantic.alias_generators import to_camel

from recommender import Article, ScoredCandidate, display_reasons

from .models import ArticleCard


def _extra(article: Article, name: str) -> Any:
    """Pass-through content-store field, under its snake_case or camelCase key."""
    extra = article.model_extra or {}
    if name in extra:
        return extra[name]
    return extra.get(to_camel(name))


def _extra_text(article: Article, name: str) -> Optional[str]:
    """String extra field; any other type is dropped."""
    value = _extra(article, name)
    return value if isinstance(value, str) else None


def parse_tags(raw: Optional[str]) -> Optional[List[str]]:
    """Comma-separated tags query param; None when absent."""
    if raw is None:
        return None
    return [t.strip() for t in raw.split(",") if t.strip()]


def to_article_card(
    scored: ScoredCandidate,
    language: str = "en",
    position: Optional[int] = None,
) -> ArticleCard:
    """Convert a ScoredCandidate into a localized card for the front end."""
    article = scored.item
    reading_time = _extra(article, "reading_time")
    if isinstance(reading_time, bool) or not isinstance(reading_time, int):
        reading_time = None
    return ArticleCard(
        id=article.id,
        slug=_extra_text(article, "slug"),
        title=article.title(language),
        excerpt=article.excerpt(language),
        category_id=article.category_id,
        featured=article.featured,
        featured_image=_extra_text(article, "featured_image"),
        author_name=_extra_text(article, "author_name"),
        published_at=article.published_at.isoformat() if article.published_at else None,
        reading_time=reading_time,
        score=round(scored.score, 4),
        reasons=list(scored.reasons),
        reason_labels=display_reasons(scored.reasons, language),
        breakdown={k: round(v, 4) for k, v in scored.breakdown.items()},
        position=position,
    )
