"""
Scoring model: ScoredCandidate, an article with its score and reasons.
"""

from typing import Dict, List

from pydantic import BaseModel

from .article import Article


class ScoredCandidate(BaseModel):
    """
    An article with its relevance score.

    reasons: every reason key that contributed, in feature order; display
    truncation is left to the presentation layer (see display_reasons).
    breakdown: per-feature contribution, keyed by feature name.
    """

    item: Article
    score: float
    reasons: List[str] = []
    breakdown: Dict[str, float] = {}
