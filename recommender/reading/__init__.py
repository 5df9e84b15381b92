"""Reading metrics: reading-time estimate, scroll progress, readability."""

from .markup import strip_html, strip_markdown
from .metrics import (
    WORDS_PER_MINUTE,
    ReadingEstimate,
    count_words,
    estimate,
    format_reading_time,
    progress_percent,
    remaining_from_scroll,
    safe_estimate,
)
from .readability import ReadabilityReport, analyze_readability

__all__ = [
    "WORDS_PER_MINUTE",
    "ReadabilityReport",
    "ReadingEstimate",
    "analyze_readability",
    "count_words",
    "estimate",
    "format_reading_time",
    "progress_percent",
    "remaining_from_scroll",
    "safe_estimate",
    "strip_html",
    "strip_markdown",
]
