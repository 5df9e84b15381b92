"""
Computed parameters for the scoring config.

Derives read-only values from a ScoringConfig: the maximum attainable score,
each feature's share of it, and how long recency keeps contributing.
"""

import math
from typing import Any, Dict

from .models.config import ScoringConfig


def compute_parameters(config: ScoringConfig) -> Dict[str, Any]:
    """
    Compute derived parameters from a scoring config.

    Args:
        config: Active scoring configuration

    Returns:
        Dictionary of computed parameter values
    """
    computed: Dict[str, Any] = {}

    # =========================================================================
    # Maximum attainable score and per-feature share
    # =========================================================================
    feature_max = {
        "category": config.weight_category,
        "tags": config.weight_tags,
        "title_keywords": config.weight_title_keywords,
        "recency": config.recency_base,
        "featured": config.weight_featured,
    }
    max_score = sum(feature_max.values())
    computed["max_score"] = max_score

    if max_score > 0:
        computed["feature_share"] = {
            name: value / max_score for name, value in feature_max.items()
        }
    else:
        computed["feature_share"] = {name: 0.0 for name in feature_max}

    # =========================================================================
    # Recency horizon (days until the recency bonus reaches 0)
    # =========================================================================
    if config.recency_mode == "step":
        computed["recency_horizon_days"] = config.recent_window_days
    elif config.recency_decay_per_day > 0:
        computed["recency_horizon_days"] = config.recency_base / config.recency_decay_per_day
    else:
        computed["recency_horizon_days"] = None  # never decays

    # =========================================================================
    # Title keywords needed to hit the cap
    # =========================================================================
    if config.keyword_points_per_token > 0:
        computed["keywords_to_cap"] = math.ceil(config.weight_title_keywords / config.keyword_points_per_token)
    else:
        computed["keywords_to_cap"] = None

    computed["active_features"] = [name for name, value in feature_max.items() if value > 0]
    return computed
