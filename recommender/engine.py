"""
Scoring engine: thin facade over the modular pipeline:
- stages/eligibility: drop the current article and unpublished articles
- stages/ranking: weighted-feature scoring and stable sort
- stages/orchestrator: eligibility → ranking → cap

All implementation lives in models/, utils/, and stages/.
"""

import logging
from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence, Union

from .errors import InvalidCandidateList
from .models.article import Article
from .models.config import ScoringConfig, resolve_config
from .models.context import ScoringContext
from .models.scoring import ScoredCandidate
from .stages.orchestrator import score_candidates
from .stages.ranking.tag_matching import TagMatcher, tags_match

logger = logging.getLogger(__name__)


class ScoringEngine:
    """Ranks candidate articles against a ScoringContext with a fixed config."""

    def __init__(
        self,
        config: Optional[ScoringConfig] = None,
        matcher: TagMatcher = tags_match,
    ):
        self.config = resolve_config(config)
        self.matcher = matcher

    def score(
        self,
        candidates: Sequence[Union[Dict[str, Any], Article]],
        context: ScoringContext,
        now: Optional[datetime] = None,
    ) -> List[ScoredCandidate]:
        """Ranked, capped recommendations. Raises InvalidCandidateList on bad input."""
        return score_candidates(candidates, context, self.config, now, self.matcher)

    def recommend(
        self,
        candidates: Sequence[Union[Dict[str, Any], Article]],
        context: ScoringContext,
        now: Optional[datetime] = None,
    ) -> List[ScoredCandidate]:
        """
        score() for page rendering: any failure degrades to no recommendations.
        """
        try:
            return self.score(candidates, context, now)
        except InvalidCandidateList as exc:
            logger.warning("[ranking] invalid candidate list: %s", exc)
        except Exception:
            logger.exception("[ranking] scoring failed")
        return []
