"""
Markdown noise removal before word counting.
"""

import re

_REPLACEMENTS = (
    (re.compile(r"#{1,6}\s+"), ""),            # headings
    (re.compile(r"\*\*(.*?)\*\*"), r"\1"),      # bold
    (re.compile(r"\*(.*?)\*"), r"\1"),          # italic
    (re.compile(r"\[(.*?)\]\(.*?\)"), r"\1"),   # links, keep text
    (re.compile(r"`(.*?)`"), r"\1"),            # inline code
    (re.compile(r">\s"), ""),                   # blockquotes
    (re.compile(r"\n+"), " "),
    (re.compile(r"\s+"), " "),
)

_HTML_TAG = re.compile(r"<[^>]*>")


def strip_markdown(text: str) -> str:
    """Remove markdown markers, collapse whitespace, trim."""
    clean = text or ""
    for pattern, replacement in _REPLACEMENTS:
        clean = pattern.sub(replacement, clean)
    return clean.strip()


def strip_html(text: str) -> str:
    """Drop HTML tags, leaving their text content."""
    return _HTML_TAG.sub("", text or "")
