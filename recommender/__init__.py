"""
Related-article recommender and reading metrics for the bilingual blog.

Single entry point for the recommender package:
- models/: ScoringConfig (+ presets), Article, ScoringContext, ScoredCandidate
- stages/: eligibility, ranking, orchestrator
- reading/: reading-time estimate, scroll progress, readability
"""

from .computed_params import compute_parameters
from .engine import ScoringEngine
from .errors import InvalidCandidateList, RecommenderError
from .models import (
    DEFAULT_CONFIG,
    PERSONALIZED_CONFIG,
    RELATED_ARTICLES_CONFIG,
    Article,
    ScoredCandidate,
    ScoringConfig,
    ScoringContext,
    get_preset,
)
from .reading import (
    ReadabilityReport,
    ReadingEstimate,
    analyze_readability,
    estimate,
    format_reading_time,
    progress_percent,
    remaining_from_scroll,
)
from .stages import display_reasons, score_candidates
from .stages.ranking import tags_match

__all__ = [
    "Article",
    "DEFAULT_CONFIG",
    "InvalidCandidateList",
    "PERSONALIZED_CONFIG",
    "RELATED_ARTICLES_CONFIG",
    "ReadabilityReport",
    "ReadingEstimate",
    "RecommenderError",
    "ScoredCandidate",
    "ScoringConfig",
    "ScoringContext",
    "ScoringEngine",
    "analyze_readability",
    "compute_parameters",
    "display_reasons",
    "estimate",
    "format_reading_time",
    "get_preset",
    "progress_percent",
    "remaining_from_scroll",
    "score_candidates",
    "tags_match",
]
