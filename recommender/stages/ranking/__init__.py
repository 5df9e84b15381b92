"""
Ranking: weighted-feature scoring into a sorted list.

Public API: rank_candidates, display_reasons.
- core: scoring loop and stable sort (rank_candidates).
- Submodules: features, tag_matching, keywords, reasons.
"""

from .core import rank_candidates
from .reasons import REASON_LABELS, display_reasons, reason_label
from .tag_matching import count_matching_tags, exact_tags_match, tags_match

__all__ = [
    "rank_candidates",
    "display_reasons",
    "reason_label",
    "REASON_LABELS",
    "count_matching_tags",
    "exact_tags_match",
    "tags_match",
]
