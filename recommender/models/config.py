"""
Scoring configuration: feature weights and output limits for ranking.

ScoringConfig defaults are the related-articles weights. PERSONALIZED_CONFIG
carries the "recommended for you" variant. The server may pass a dict (e.g.
from a JSON overrides file); from_dict() merges it with these defaults.
"""

from typing import Dict, Literal, Optional

from pydantic import BaseModel, ConfigDict, model_validator

# Nested groups accepted by ScoringConfig.from_dict
_GROUPS = ("category", "tags", "title_keywords", "recency", "featured", "output")


class ScoringConfig(BaseModel):
    """Configuration for the related-article scoring heuristic."""

    model_config = ConfigDict(frozen=True)

    # -------------------------------------------------------------------------
    # Category match
    # -------------------------------------------------------------------------

    # Points when the candidate shares the viewed article's category.
    weight_category: float = 30.0

    # -------------------------------------------------------------------------
    # Tag overlap
    # contribution = matched_tags / max(len(current_tags), 1) * weight_tags
    # -------------------------------------------------------------------------

    weight_tags: float = 25.0

    # -------------------------------------------------------------------------
    # Title keywords
    # contribution = min(keywords * keyword_points_per_token, weight_title_keywords)
    # -------------------------------------------------------------------------

    # Cap on the title-keyword contribution.
    weight_title_keywords: float = 20.0
    keyword_points_per_token: float = 2.0
    # Tokens shorter than this are ignored (3-letter words and below).
    keyword_min_length: int = 4

    # -------------------------------------------------------------------------
    # Recency
    # linear: max(recency_base - days * recency_decay_per_day, 0)
    # step:   recency_base when days <= recent_window_days, else 0
    # -------------------------------------------------------------------------

    recency_mode: Literal["linear", "step"] = "linear"
    recency_base: float = 15.0
    recency_decay_per_day: float = 0.5
    # Articles at most this old get the "recently_published" reason.
    recent_window_days: float = 7.0

    # -------------------------------------------------------------------------
    # Featured
    # -------------------------------------------------------------------------

    weight_featured: float = 10.0

    # -------------------------------------------------------------------------
    # Output
    # -------------------------------------------------------------------------

    max_results: int = 6
    # Only articles flagged published=True are eligible.
    require_published: bool = True

    @model_validator(mode="after")
    def non_negative_weights(self):
        for name in (
            "weight_category",
            "weight_tags",
            "weight_title_keywords",
            "keyword_points_per_token",
            "recency_base",
            "recency_decay_per_day",
            "recent_window_days",
            "weight_featured",
        ):
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"{name} must be >= 0, got {value}")
        if self.max_results < 1:
            raise ValueError(f"max_results must be >= 1, got {self.max_results}")
        if self.keyword_min_length < 1:
            raise ValueError(f"keyword_min_length must be >= 1, got {self.keyword_min_length}")
        return self

    @classmethod
    def from_dict(
        cls,
        config_dict: Dict,
        base: Optional["ScoringConfig"] = None,
    ) -> "ScoringConfig":
        """Create config from dictionary (e.g., loaded from JSON), on top of base."""
        if not isinstance(config_dict, dict):
            raise ValueError(f"scoring config must be an object, got {type(config_dict).__name__}")
        for group in _GROUPS:
            if group in config_dict and not isinstance(config_dict[group], dict):
                raise ValueError(
                    f"scoring config group {group!r} must be an object, "
                    f"got {type(config_dict[group]).__name__}"
                )
        flat = dict(base.model_dump()) if base is not None else {}
        if "category" in config_dict:
            cat = config_dict["category"]
            if "weight" in cat:
                flat["weight_category"] = cat["weight"]
        if "tags" in config_dict:
            tg = config_dict["tags"]
            if "weight" in tg:
                flat["weight_tags"] = tg["weight"]
        if "title_keywords" in config_dict:
            tk = config_dict["title_keywords"]
            if "weight" in tk:
                flat["weight_title_keywords"] = tk["weight"]
            if "points_per_token" in tk:
                flat["keyword_points_per_token"] = tk["points_per_token"]
            if "min_length" in tk:
                flat["keyword_min_length"] = tk["min_length"]
        if "recency" in config_dict:
            rc = config_dict["recency"]
            if "mode" in rc:
                flat["recency_mode"] = rc["mode"]
            if "base" in rc:
                flat["recency_base"] = rc["base"]
            if "decay_per_day" in rc:
                flat["recency_decay_per_day"] = rc["decay_per_day"]
            if "window_days" in rc:
                flat["recent_window_days"] = rc["window_days"]
        if "featured" in config_dict:
            ft = config_dict["featured"]
            if "weight" in ft:
                flat["weight_featured"] = ft["weight"]
        if "output" in config_dict:
            out = config_dict["output"]
            if "max_results" in out:
                flat["max_results"] = out["max_results"]
            if "require_published" in out:
                flat["require_published"] = out["require_published"]
        allowed = set(cls.model_fields)
        # Flat keys are accepted as well (e.g. {"weight_featured": 25}).
        flat.update({k: v for k, v in config_dict.items() if k in allowed})
        filtered = {k: v for k, v in flat.items() if k in allowed}
        return cls.model_validate(filtered)


DEFAULT_CONFIG = ScoringConfig()

RELATED_ARTICLES_CONFIG = DEFAULT_CONFIG

PERSONALIZED_CONFIG = ScoringConfig(
    weight_category=40.0,
    weight_tags=0.0,
    weight_title_keywords=0.0,
    recency_mode="step",
    recency_base=15.0,
    recent_window_days=7.0,
    weight_featured=25.0,
)

PRESETS: Dict[str, ScoringConfig] = {
    "related": RELATED_ARTICLES_CONFIG,
    "personalized": PERSONALIZED_CONFIG,
}


def get_preset(name: str) -> ScoringConfig:
    """Look up a named preset ("related" or "personalized")."""
    key = (name or "").strip().lower()
    if key not in PRESETS:
        raise ValueError(f"Unknown scoring preset {name!r}; expected one of {sorted(PRESETS)}")
    return PRESETS[key]


def resolve_config(config: Optional["ScoringConfig"]) -> "ScoringConfig":
    """Return config or DEFAULT_CONFIG when none is provided."""
    return config if config is not None else DEFAULT_CONFIG
