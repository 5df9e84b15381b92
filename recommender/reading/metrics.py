"""
Reading metrics: reading-time estimate and scroll-derived progress.

Word counting is language aware: Arabic text is counted as runs of Arabic
script plus runs of Latin letters, since articles routinely mix both.
"""

import logging
import math
import re
from typing import Any

from pydantic import BaseModel

from .markup import strip_markdown

logger = logging.getLogger(__name__)

WORDS_PER_MINUTE = {
    "en": 230,
    "ar": 200,
}

_ARABIC_WORD = re.compile(r"[\u0600-\u06FF]+")
_LATIN_WORD = re.compile(r"[a-zA-Z]+")


class ReadingEstimate(BaseModel):
    """Estimated reading time for a block of text."""

    minutes: int
    words: int
    display_text: str


def count_words(text: str, language: str = "en") -> int:
    """Word count of already-cleaned text."""
    if language == "ar":
        return len(_ARABIC_WORD.findall(text)) + len(_LATIN_WORD.findall(text))
    return len([word for word in text.split() if word])


def reading_time_text(minutes: int, language: str = "en") -> str:
    """Label such as "5 min read"."""
    if language == "ar":
        return f"{minutes} دقيقة قراءة"
    return f"{minutes} min read"


def estimate(content: str, language: str = "en") -> ReadingEstimate:
    """
    Estimate reading time for markdown content.

    Empty or whitespace-only content reads in 0 minutes; anything else takes
    at least one minute.
    """
    if language not in WORDS_PER_MINUTE:
        language = "en"
    if not isinstance(content, str) or not content.strip():
        return ReadingEstimate(minutes=0, words=0, display_text=reading_time_text(0, language))

    words = count_words(strip_markdown(content), language)
    minutes = max(1, math.ceil(words / WORDS_PER_MINUTE[language]))
    return ReadingEstimate(
        minutes=minutes,
        words=words,
        display_text=reading_time_text(minutes, language),
    )


def safe_estimate(content: Any, language: str = "en") -> ReadingEstimate:
    """estimate() that degrades to "0 min read" instead of raising."""
    try:
        return estimate(content, language)
    except Exception:
        logger.exception("[reading] estimate failed; reporting 0 minutes")
        lang = language if language in WORDS_PER_MINUTE else "en"
        return ReadingEstimate(minutes=0, words=0, display_text=reading_time_text(0, lang))


def format_reading_time(minutes: int, language: str = "en") -> str:
    """Short duration label with Arabic dual/plural forms ("دقيقتان", "5 دقائق")."""
    if minutes <= 0:
        return "< 1 دقيقة" if language == "ar" else "< 1 min"
    if language == "ar":
        if minutes == 1:
            return "دقيقة واحدة"
        if minutes == 2:
            return "دقيقتان"
        if minutes <= 10:
            return f"{minutes} دقائق"
        return f"{minutes} دقيقة"
    return "1 min" if minutes == 1 else f"{minutes} mins"


def _finite(value: Any, default: float = 0.0) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    return number if math.isfinite(number) else default


def remaining_from_scroll(total_minutes: int, scroll_percent: float) -> int:
    """Minutes left given how far (0–100) the reader has scrolled."""
    total = max(int(_finite(total_minutes)), 0)
    percent = _finite(scroll_percent)
    if percent <= 0:
        return total
    if percent >= 100:
        return 0
    return max(0, math.ceil(total * (100 - percent) / 100))


def progress_percent(scrolled: float, total: float) -> int:
    """Scroll progress as a whole percentage in [0, 100]."""
    total = _finite(total)
    if total <= 0:
        return 0
    progress = min(100.0, max(0.0, _finite(scrolled) / total * 100))
    return int(math.floor(progress + 0.5))
