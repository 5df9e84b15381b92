"""Data models for the recommender."""

from .article import Article, ArticleId, coerce_bool, ensure_list, same_id
from .config import (
    DEFAULT_CONFIG,
    PERSONALIZED_CONFIG,
    PRESETS,
    RELATED_ARTICLES_CONFIG,
    ScoringConfig,
    get_preset,
    resolve_config,
)
from .context import SUPPORTED_LANGUAGES, ScoringContext, normalize_language
from .scoring import ScoredCandidate

__all__ = [
    "Article",
    "ArticleId",
    "DEFAULT_CONFIG",
    "PERSONALIZED_CONFIG",
    "PRESETS",
    "RELATED_ARTICLES_CONFIG",
    "SUPPORTED_LANGUAGES",
    "ScoredCandidate",
    "ScoringConfig",
    "ScoringContext",
    "coerce_bool",
    "ensure_list",
    "get_preset",
    "normalize_language",
    "resolve_config",
    "same_id",
]
