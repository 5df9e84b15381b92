"""
Title keyword extraction for the title-keyword signal.
"""

from typing import Dict, FrozenSet, List

STOP_WORDS: Dict[str, FrozenSet[str]] = {
    "en": frozenset({"the", "and", "for", "with", "this", "that"}),
    "ar": frozenset({"في", "على", "من", "إلى"}),
}


def title_keywords(title: str, language: str = "en", min_length: int = 4) -> List[str]:
    """Lower-cased whitespace tokens of at least min_length chars, minus stop words."""
    stop_words = STOP_WORDS.get(language, STOP_WORDS["en"])
    return [
        word
        for word in (title or "").lower().split()
        if len(word) >= min_length and word not in stop_words
    ]
