"""
Reason labels for scored articles (e.g. same_category, featured).

The engine records every reason key; the recommendation response surfaces at
most two localized labels per article.
"""

from typing import Dict, List, Sequence

SAME_CATEGORY = "same_category"
SHARED_TAGS = "shared_tags"
RECENTLY_PUBLISHED = "recently_published"
FEATURED = "featured"

REASON_LABELS: Dict[str, Dict[str, str]] = {
    SAME_CATEGORY: {"en": "Same category", "ar": "نفس الفئة"},
    SHARED_TAGS: {"en": "Shared topics", "ar": "مواضيع مشتركة"},
    RECENTLY_PUBLISHED: {"en": "Recently published", "ar": "حديث النشر"},
    FEATURED: {"en": "Featured article", "ar": "مقال مميز"},
}

DISPLAY_REASON_LIMIT = 2


def reason_label(reason: str, language: str = "en") -> str:
    """Localized label for a reason key; unknown keys are returned unchanged."""
    labels = REASON_LABELS.get(reason)
    if not labels:
        return reason
    return labels.get(language) or labels["en"]


def display_reasons(
    reasons: Sequence[str],
    language: str = "en",
    limit: int = DISPLAY_REASON_LIMIT,
) -> List[str]:
    """Localized labels for the first `limit` reasons."""
    return [reason_label(r, language) for r in list(reasons)[: max(limit, 0)]]
