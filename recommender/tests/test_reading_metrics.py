#!/usr/bin/env python3
"""
Reading Metrics Tests

Reading-time estimate (230 wpm English, 200 wpm Arabic), markdown stripping,
scroll-derived remaining time and progress, and short duration labels.

Run:
----
    pytest recommender/tests/test_reading_metrics.py -v
"""

import pytest

from recommender import estimate, format_reading_time, progress_percent, remaining_from_scroll
from recommender.reading import count_words, safe_estimate, strip_markdown


def english_words(n):
    return " ".join(["word"] * n)


def arabic_words(n):
    return " ".join(["كلمة"] * n)


class TestEstimate:
    """estimate(content, language)."""

    def test_empty_content(self):
        result = estimate("", "en")
        assert result.minutes == 0
        assert result.words == 0
        assert result.display_text == "0 min read"

    def test_whitespace_only_content(self):
        result = estimate("   \n\t ", "ar")
        assert result.minutes == 0
        assert result.words == 0
        assert result.display_text == "0 دقيقة قراءة"

    @pytest.mark.parametrize(
        "words, minutes",
        [(1, 1), (230, 1), (231, 2), (460, 2), (461, 3)],
    )
    def test_english_thresholds(self, words, minutes):
        result = estimate(english_words(words), "en")
        assert result.words == words
        assert result.minutes == minutes

    @pytest.mark.parametrize("words, minutes", [(200, 1), (201, 2), (400, 2)])
    def test_arabic_thresholds(self, words, minutes):
        result = estimate(arabic_words(words), "ar")
        assert result.words == words
        assert result.minutes == minutes

    def test_arabic_counts_mixed_scripts(self):
        result = estimate("مرحبا بالعالم hello world 2025", "ar")
        # Digits are neither Arabic nor Latin letters.
        assert result.words == 4

    def test_display_text(self):
        assert estimate(english_words(500), "en").display_text == "3 min read"
        assert estimate(arabic_words(500), "ar").display_text == "3 دقيقة قراءة"

    def test_markdown_is_stripped_before_counting(self):
        content = "# Title\n\n**bold** text with [link](http://example.com/a b) and `code`\n> quote"
        assert estimate(content, "en").words == 8

    def test_unknown_language_uses_english(self):
        assert estimate(english_words(231), "fr").minutes == 2

    def test_safe_estimate_degrades(self):
        result = safe_estimate(None, "en")
        assert result.minutes == 0
        assert result.display_text == "0 min read"


class TestMarkup:
    """strip_markdown and count_words."""

    def test_strip_markdown(self):
        text = "## Heading\n*italic* and **bold**\n\n> cited [text](https://x.y)"
        assert strip_markdown(text) == "Heading italic and bold cited text"

    def test_count_words_english(self):
        assert count_words("one  two\tthree", "en") == 3

    def test_count_words_arabic(self):
        assert count_words("الذكاء الاصطناعي AI", "ar") == 3


class TestScrollProgress:
    """remaining_from_scroll and progress_percent clamp, never reject."""

    @pytest.mark.parametrize(
        "total, percent, expected",
        [
            (10, 0, 10),
            (10, 100, 0),
            (10, 50, 5),
            (10, 33, 7),
            (10, -5, 10),
            (10, 150, 0),
            (0, 50, 0),
            (10, float("nan"), 10),
        ],
    )
    def test_remaining_from_scroll(self, total, percent, expected):
        assert remaining_from_scroll(total, percent) == expected

    @pytest.mark.parametrize(
        "scrolled, total, expected",
        [
            (50, 200, 25),
            (0, 0, 0),
            (10, -5, 0),
            (300, 200, 100),
            (-10, 100, 0),
            (1, 3, 33),
            (1, 8, 13),
        ],
    )
    def test_progress_percent(self, scrolled, total, expected):
        assert progress_percent(scrolled, total) == expected


class TestFormatReadingTime:
    """Short labels with Arabic dual and plural forms."""

    @pytest.mark.parametrize(
        "minutes, language, expected",
        [
            (0, "en", "< 1 min"),
            (1, "en", "1 min"),
            (5, "en", "5 mins"),
            (0, "ar", "< 1 دقيقة"),
            (1, "ar", "دقيقة واحدة"),
            (2, "ar", "دقيقتان"),
            (5, "ar", "5 دقائق"),
            (10, "ar", "10 دقائق"),
            (15, "ar", "15 دقيقة"),
        ],
    )
    def test_labels(self, minutes, language, expected):
        assert format_reading_time(minutes, language) == expected
