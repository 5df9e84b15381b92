"""
Readability analysis for the editor: sentence/paragraph structure, word
complexity, and writing recommendations in English or Arabic.

Score starts at 100 and loses points for long sentences, long paragraphs
and a high share of complex words; it is clamped to 0–100.
"""

import math
import re
from typing import List, Optional

from pydantic import BaseModel

from .markup import strip_html

READABILITY_WPM = {
    "en": 200,
    "ar": 180,
}

_MARKUP_CHARS = re.compile(r"[#*`]")
_SENTENCE_SPLIT = re.compile(r"[.!?]+")
_PARAGRAPH_SPLIT = re.compile(r"\n\s*\n")
_HEADER_LINE = re.compile(r"^#{1,6}\s", re.MULTILINE)
_LIST_LINE = re.compile(r"^[-*+]\s", re.MULTILINE)
_SIMPLE_SUFFIX = re.compile(r"ing$|ed$|ly$")

RECOMMENDATIONS = {
    "long_sentences": {
        "en": "Break down long sentences for better readability",
        "ar": "قم بتقسيم الجمل الطويلة لتحسين القراءة",
    },
    "long_paragraphs": {
        "en": "Break long paragraphs into smaller sections",
        "ar": "قسم الفقرات الطويلة إلى فقرات أصغر",
    },
    "complex_words": {
        "en": "Use simpler words where possible",
        "ar": "استخدم كلمات أبسط حيث أمكن ذلك",
    },
    "subheadings": {
        "en": "Add more subheadings to improve structure",
        "ar": "أضف عناوين فرعية لتحسين البنية",
    },
    "lists": {
        "en": "Use bullet points to organize information",
        "ar": "استخدم القوائم لتنظيم المعلومات",
    },
}

GRADES = (
    (80, "Excellent", "ممتاز", "Easy"),
    (60, "Good", "جيد", "Medium"),
    (40, "Average", "متوسط", "Medium"),
    (0, "Needs Improvement", "يحتاج تحسين", "Hard"),
)


class ReadabilityReport(BaseModel):
    """Readability metrics and suggestions for one piece of content."""

    score: int
    grade: str
    complexity: str
    word_count: int
    sentence_count: int
    paragraph_count: int
    avg_words_per_sentence: float
    avg_sentences_per_paragraph: float
    reading_time: int
    recommendations: List[str] = []


def _is_complex(word: str, language: str) -> bool:
    if language == "ar":
        return len(word) > 8
    return len(word) > 6 and not _SIMPLE_SUFFIX.search(word)


def _grade(score: float, language: str):
    for threshold, grade_en, grade_ar, complexity in GRADES:
        if score >= threshold:
            return (grade_ar if language == "ar" else grade_en), complexity
    return GRADES[-1][1], GRADES[-1][3]


def analyze_readability(content: str, language: str = "en") -> Optional[ReadabilityReport]:
    """Analyze content; returns None when there is no text to analyze."""
    if language not in READABILITY_WPM:
        language = "en"
    if not content:
        return None

    clean = _MARKUP_CHARS.sub("", strip_html(content))
    clean = re.sub(r"\n+", " ", clean).strip()
    if not clean:
        return None

    words = [w for w in clean.split() if w]
    sentences = [s for s in _SENTENCE_SPLIT.split(clean) if s.strip()]
    paragraphs = [p for p in _PARAGRAPH_SPLIT.split(content) if p.strip()]

    word_count = len(words)
    sentence_count = len(sentences)
    paragraph_count = len(paragraphs)
    avg_words = word_count / max(sentence_count, 1)
    avg_sentences = sentence_count / max(paragraph_count, 1)
    reading_time = math.ceil(word_count / READABILITY_WPM[language])

    score = 100.0
    found: List[str] = []

    if avg_words > 20:
        score -= (avg_words - 20) * 2
        found.append("long_sentences")

    if avg_sentences > 6:
        score -= (avg_sentences - 6) * 3
        found.append("long_paragraphs")

    complex_ratio = sum(1 for w in words if _is_complex(w, language)) / word_count
    if complex_ratio > 0.15:
        score -= complex_ratio * 30
        found.append("complex_words")

    header_count = len(_HEADER_LINE.findall(content))
    list_count = len(_LIST_LINE.findall(content))
    if header_count < paragraph_count // 5:
        found.append("subheadings")
    if word_count > 500 and list_count == 0:
        found.append("lists")

    score = max(0.0, min(100.0, score))
    grade, complexity = _grade(score, language)

    return ReadabilityReport(
        score=math.floor(score + 0.5),
        grade=grade,
        complexity=complexity,
        word_count=word_count,
        sentence_count=sentence_count,
        paragraph_count=paragraph_count,
        avg_words_per_sentence=round(avg_words, 1),
        avg_sentences_per_paragraph=round(avg_sentences, 1),
        reading_time=reading_time,
        recommendations=[RECOMMENDATIONS[key][language] for key in found],
    )
