"""
Tag matching: fuzzy comparison between the viewed article's tags and a candidate's.

The matcher is a plain callable so ranking can swap substring matching for
exact or edit-distance matching without touching the scoring pipeline.
"""

from typing import Callable, Sequence

TagMatcher = Callable[[str, str], bool]


def tags_match(current_tag: str, candidate_tag: str) -> bool:
    """Case-insensitive substring match in either direction."""
    a = current_tag.strip().lower()
    b = candidate_tag.strip().lower()
    if not a or not b:
        return False
    return a in b or b in a


def exact_tags_match(current_tag: str, candidate_tag: str) -> bool:
    """Case-insensitive equality."""
    return current_tag.strip().lower() == candidate_tag.strip().lower()


def count_matching_tags(
    current_tags: Sequence[str],
    candidate_tags: Sequence[str],
    matcher: TagMatcher = tags_match,
) -> int:
    """Number of current tags that match at least one candidate tag."""
    return sum(
        1
        for tag in current_tags
        if any(matcher(tag, candidate_tag) for candidate_tag in candidate_tags)
    )
