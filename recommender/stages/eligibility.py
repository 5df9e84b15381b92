"""
Eligibility filter: drops the article being viewed and unpublished articles.

The public entry point is filter_eligible.
"""

from typing import List

from ..models.article import Article, same_id
from ..models.config import ScoringConfig
from ..models.context import ScoringContext


def _not_current(article: Article, context: ScoringContext) -> bool:
    """True unless the article is the one currently being viewed."""
    return not same_id(article.id, context.current_item_id)


def _is_published(article: Article, config: ScoringConfig) -> bool:
    """True if the article is flagged published (missing flag counts as unpublished)."""
    if not config.require_published:
        return True
    return article.published is True


def filter_eligible(
    articles: List[Article],
    context: ScoringContext,
    config: ScoringConfig,
) -> List[Article]:
    """Return articles that are published and not the current article, in input order."""
    eligible = []
    for article in articles:
        if not _not_current(article, context):
            continue
        if not _is_published(article, config):
            continue
        eligible.append(article)
    return eligible
