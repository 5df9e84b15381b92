"""Pipeline stages: eligibility filter, ranking, orchestrator."""

from .eligibility import filter_eligible
from .orchestrator import score_candidates
from .ranking import display_reasons, rank_candidates

__all__ = [
    "display_reasons",
    "filter_eligible",
    "rank_candidates",
    "score_candidates",
]
