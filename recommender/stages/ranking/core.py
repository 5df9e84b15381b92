"""
Main ranking: score every eligible article, then stable-sort by score.

Submodules used: features, tag_matching.
"""

import logging
from datetime import datetime
from typing import List

from ...models.article import Article
from ...models.config import DEFAULT_CONFIG, ScoringConfig
from ...models.context import ScoringContext
from ...models.scoring import ScoredCandidate
from .features import build_scored_candidate
from .tag_matching import TagMatcher, tags_match

logger = logging.getLogger(__name__)


def rank_candidates(
    candidates: List[Article],
    context: ScoringContext,
    now: datetime,
    config: ScoringConfig = DEFAULT_CONFIG,
    matcher: TagMatcher = tags_match,
) -> List[ScoredCandidate]:
    """
    Score candidates and sort by descending score.

    Python's sort is stable, so equal scores keep their input order. No cap
    is applied here.
    """
    scored = [
        build_scored_candidate(article, context, config, now, matcher)
        for article in candidates
    ]
    scored.sort(key=lambda s: s.score, reverse=True)

    if scored and logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "[ranking] scored=%s top=%s",
            len(scored),
            [(s.item.id, round(s.score, 2)) for s in scored[:5]],
        )
    return scored
