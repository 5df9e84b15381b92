"""
Per-candidate feature scoring: category, tags, title keywords, recency, featured.

Builds a ScoredCandidate for one article given the context and config. Each
feature returns its contribution and, when it applies, a reason key.
"""

from datetime import datetime
from typing import Optional, Tuple

from ...models.article import Article, same_id
from ...models.config import ScoringConfig
from ...models.context import ScoringContext
from ...models.scoring import ScoredCandidate
from ...utils.dates import days_since
from .keywords import title_keywords
from .reasons import FEATURED, RECENTLY_PUBLISHED, SAME_CATEGORY, SHARED_TAGS
from .tag_matching import TagMatcher, count_matching_tags, tags_match

FeatureResult = Tuple[float, Optional[str]]


def category_score(article: Article, context: ScoringContext, config: ScoringConfig) -> FeatureResult:
    """weight_category when both category ids are set and equal."""
    if same_id(article.category_id, context.current_category_id) and config.weight_category > 0:
        return config.weight_category, SAME_CATEGORY
    return 0.0, None


def tag_overlap_score(
    article: Article,
    context: ScoringContext,
    config: ScoringConfig,
    matcher: TagMatcher = tags_match,
) -> FeatureResult:
    """Share of context tags matched by the candidate, times weight_tags."""
    current_tags = context.current_tags
    matched = count_matching_tags(current_tags, article.tags, matcher)
    value = matched / max(len(current_tags), 1) * config.weight_tags
    return value, (SHARED_TAGS if value > 0 else None)


def title_keyword_score(article: Article, context: ScoringContext, config: ScoringConfig) -> FeatureResult:
    """Keyword count in the localized title, capped at weight_title_keywords."""
    keywords = title_keywords(
        article.title(context.language),
        context.language,
        config.keyword_min_length,
    )
    value = min(len(keywords) * config.keyword_points_per_token, config.weight_title_keywords)
    return value, None


def recency_score(article: Article, now: datetime, config: ScoringConfig) -> FeatureResult:
    """
    Recency bonus from the effective timestamp (published, else created, else now).

    linear: max(base - days * decay, 0). step: base within the recent window.
    """
    age = days_since(article.effective_timestamp(now), now)
    if config.recency_mode == "step":
        value = config.recency_base if age <= config.recent_window_days else 0.0
    else:
        value = max(config.recency_base - age * config.recency_decay_per_day, 0.0)
    reason = RECENTLY_PUBLISHED if value > 0 and age <= config.recent_window_days else None
    return value, reason


def featured_score(article: Article, config: ScoringConfig) -> FeatureResult:
    """weight_featured for featured articles."""
    if article.featured and config.weight_featured > 0:
        return config.weight_featured, FEATURED
    return 0.0, None


def build_scored_candidate(
    article: Article,
    context: ScoringContext,
    config: ScoringConfig,
    now: datetime,
    matcher: TagMatcher = tags_match,
) -> ScoredCandidate:
    """
    Sum all feature contributions for one article.

    Reasons follow feature order: category, tags, recency, featured.
    """
    features = (
        ("category", category_score(article, context, config)),
        ("tags", tag_overlap_score(article, context, config, matcher)),
        ("title_keywords", title_keyword_score(article, context, config)),
        ("recency", recency_score(article, now, config)),
        ("featured", featured_score(article, config)),
    )
    breakdown = {}
    reasons = []
    for name, (value, reason) in features:
        breakdown[name] = value
        if reason:
            reasons.append(reason)
    return ScoredCandidate(
        item=article,
        score=sum(breakdown.values()),
        reasons=reasons,
        breakdown=breakdown,
    )
