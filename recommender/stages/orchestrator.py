"""
Pipeline orchestrator: runs the eligibility filter then ranking to produce
the capped recommendation list.

The main entry point is score_candidates.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence, Union

from ..models.article import Article, ensure_list
from ..models.config import ScoringConfig, resolve_config
from ..models.context import ScoringContext
from ..models.scoring import ScoredCandidate
from ..utils.dates import ensure_aware, utc_now
from .eligibility import filter_eligible
from .ranking import rank_candidates
from .ranking.tag_matching import TagMatcher, tags_match


def _resolve_now(context: ScoringContext, now: Optional[datetime]) -> datetime:
    """Explicit now, else the context's, else the wall clock."""
    if now is not None:
        return ensure_aware(now)
    if context.now is not None:
        return ensure_aware(context.now)
    return utc_now()


def score_candidates(
    candidates: Sequence[Union[Dict[str, Any], Article]],
    context: ScoringContext,
    config: Optional[ScoringConfig] = None,
    now: Optional[datetime] = None,
    matcher: TagMatcher = tags_match,
) -> List[ScoredCandidate]:
    """
    Rank candidates against the context (eligibility → ranking → cap).

    Returns at most config.max_results ScoredCandidates sorted by score, ties
    in input order. Raises InvalidCandidateList when candidates is not a list
    of article mappings.
    """
    config = resolve_config(config)
    articles = ensure_list(candidates)
    reference = _resolve_now(context, now)

    eligible = filter_eligible(articles, context, config)
    ranked = rank_candidates(eligible, context, reference, config, matcher)
    return ranked[: config.max_results]
