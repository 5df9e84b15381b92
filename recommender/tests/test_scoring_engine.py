#!/usr/bin/env python3
"""
Scoring Engine Tests

Tests the related-article ranking heuristic: exclusion, eligibility, per-feature
contributions, ordering, the result cap, and null-safe fallbacks.

Reference time:
---------------
All tests inject NOW so recency is deterministic.

Default weights (related articles):
-----------------------------------
- Category match: 30
- Tag overlap: 25 * matched / max(len(current_tags), 1)
- Title keywords: min(2 * keywords, 20)
- Recency: max(15 - 0.5 * days, 0)
- Featured: 10

Run:
----
    pytest recommender/tests/test_scoring_engine.py -v
"""

from datetime import datetime, timedelta, timezone

import pytest

from recommender import (
    PERSONALIZED_CONFIG,
    InvalidCandidateList,
    ScoringConfig,
    ScoringContext,
    ScoringEngine,
    score_candidates,
)
from recommender.stages.ranking import count_matching_tags, exact_tags_match, tags_match

NOW = datetime(2025, 1, 15, 12, 0, tzinfo=timezone.utc)


def make_article(article_id, category_id=None, tags=None, title="", featured=False,
                 days_ago=None, published=True, **extra):
    article = {
        "id": article_id,
        "categoryId": category_id,
        "tags": tags or [],
        "titleEn": title,
        "featured": featured,
        "published": published,
    }
    if days_ago is not None:
        article["publishedAt"] = (NOW - timedelta(days=days_ago)).isoformat()
    article.update(extra)
    return article


def ids(scored):
    return [s.item.id for s in scored]


class TestExclusionAndEligibility:
    """The viewed article and unpublished articles never appear in output."""

    def test_current_article_excluded(self):
        candidates = [make_article(i, days_ago=1) for i in range(1, 5)]
        ctx = ScoringContext(current_item_id=2)
        result = score_candidates(candidates, ctx, now=NOW)
        assert 2 not in ids(result)
        assert len(result) == 3

    def test_current_article_excluded_across_id_types(self):
        """Path params arrive as strings; content-store ids are ints."""
        candidates = [make_article(7, days_ago=1), make_article(8, days_ago=1)]
        ctx = ScoringContext(current_item_id="7")
        assert ids(score_candidates(candidates, ctx, now=NOW)) == [8]

    def test_unpublished_and_unflagged_articles_excluded(self):
        candidates = [
            make_article(1, days_ago=1, published=True),
            make_article(2, days_ago=1, published=False),
            make_article(3, days_ago=1, published=None),
        ]
        del candidates[2]["published"]
        result = score_candidates(candidates, ScoringContext(), now=NOW)
        assert ids(result) == [1]

    def test_no_current_item_keeps_everything(self):
        candidates = [make_article(i, days_ago=1) for i in range(3)]
        result = score_candidates(candidates, ScoringContext(), now=NOW)
        assert len(result) == 3

    def test_empty_candidates(self):
        assert score_candidates([], ScoringContext(current_item_id=1), now=NOW) == []


class TestFeatureContributions:
    """Each feature adds its configured weight and reason."""

    def test_full_breakdown(self):
        candidate = make_article(
            2,
            category_id=1,
            tags=["Media Analytics"],
            title="Understanding the media landscape today",
            featured=True,
            days_ago=2,
        )
        ctx = ScoringContext(current_item_id=1, current_category_id=1,
                             current_tags=["media", "policy"])
        [scored] = score_candidates([candidate], ctx, now=NOW)

        assert scored.breakdown["category"] == 30
        assert scored.breakdown["tags"] == pytest.approx(12.5)
        assert scored.breakdown["title_keywords"] == 8
        assert scored.breakdown["recency"] == pytest.approx(14.0)
        assert scored.breakdown["featured"] == 10
        assert scored.score == pytest.approx(74.5)
        assert scored.reasons == ["same_category", "shared_tags", "recently_published", "featured"]

    def test_same_category_scores_higher(self):
        same = make_article(2, category_id=5, days_ago=3)
        other = make_article(3, category_id=6, days_ago=3)
        ctx = ScoringContext(current_item_id=1, current_category_id=5)
        result = score_candidates([other, same], ctx, now=NOW)
        assert ids(result) == [2, 3]
        assert result[0].score > result[1].score

    def test_missing_current_category_gives_no_bonus(self):
        candidate = make_article(2, category_id=None, days_ago=100)
        [scored] = score_candidates([candidate], ScoringContext(current_item_id=1), now=NOW)
        assert scored.breakdown["category"] == 0
        assert "same_category" not in scored.reasons

    def test_featured_scores_higher(self):
        plain = make_article(2, days_ago=3)
        featured = make_article(3, featured=True, days_ago=3)
        result = score_candidates([plain, featured], ScoringContext(), now=NOW)
        assert ids(result) == [3, 2]
        assert result[0].score - result[1].score == pytest.approx(10)

    def test_recent_scores_higher_than_old(self):
        fresh = make_article(2, days_ago=0)
        old = make_article(3, days_ago=30)
        result = score_candidates([old, fresh], ScoringContext(), now=NOW)
        assert ids(result) == [2, 3]
        assert result[0].breakdown["recency"] == pytest.approx(15)
        assert result[1].breakdown["recency"] == 0

    def test_empty_current_tags_contribute_nothing(self):
        candidate = make_article(2, tags=["media"], days_ago=40)
        [scored] = score_candidates([candidate], ScoringContext(current_tags=[]), now=NOW)
        assert scored.breakdown["tags"] == 0
        assert scored.score == 0

    def test_title_keywords_capped(self):
        title = " ".join(f"keyword{i}" for i in range(15))
        [scored] = score_candidates([make_article(2, title=title, days_ago=40)],
                                    ScoringContext(), now=NOW)
        assert scored.breakdown["title_keywords"] == 20

    def test_title_keywords_skip_short_and_stop_words(self):
        # "this"/"that"/"with" are stop words; "big"/"new" are too short.
        title = "This big new report with data that matters"
        [scored] = score_candidates([make_article(2, title=title, days_ago=40)],
                                    ScoringContext(), now=NOW)
        # report, data, matters
        assert scored.breakdown["title_keywords"] == 6

    def test_arabic_title_used_for_arabic_context(self):
        candidate = make_article(2, title="Short", days_ago=40,
                                 titleAr="تحليل الإعلام في العالم العربي")
        [scored] = score_candidates([candidate], ScoringContext(language="ar"), now=NOW)
        # تحليل، الإعلام، العالم، العربي (في is too short)
        assert scored.breakdown["title_keywords"] == 8

    def test_arabic_context_falls_back_to_english_title(self):
        candidate = make_article(2, title="Regional media outlook", days_ago=40)
        [scored] = score_candidates([candidate], ScoringContext(language="ar"), now=NOW)
        assert scored.breakdown["title_keywords"] == 6


class TestTimestampFallbacks:
    """published_at → created_at → now; malformed values never raise."""

    def test_created_at_used_when_published_at_missing(self):
        candidate = make_article(2, createdAt=(NOW - timedelta(days=10)).isoformat())
        [scored] = score_candidates([candidate], ScoringContext(), now=NOW)
        assert scored.breakdown["recency"] == pytest.approx(10)
        assert "recently_published" not in scored.reasons

    def test_missing_timestamps_treated_as_now(self):
        [scored] = score_candidates([make_article(2)], ScoringContext(), now=NOW)
        assert scored.breakdown["recency"] == pytest.approx(15)
        assert "recently_published" in scored.reasons

    def test_malformed_timestamp_treated_as_missing(self):
        candidate = make_article(2, publishedAt="not-a-date",
                                 createdAt=(NOW - timedelta(days=20)).isoformat())
        [scored] = score_candidates([candidate], ScoringContext(), now=NOW)
        assert scored.breakdown["recency"] == pytest.approx(5)

    def test_future_timestamp_counts_as_today(self):
        candidate = make_article(2, days_ago=-3)
        [scored] = score_candidates([candidate], ScoringContext(), now=NOW)
        assert scored.breakdown["recency"] == pytest.approx(15)

    def test_malformed_optional_fields_do_not_raise(self):
        candidate = {
            "id": 2,
            "published": "true",
            "tags": None,
            "categoryId": {"nested": True},
            "featured": None,
            "titleEn": None,
            "publishedAt": 12.5e20,
        }
        ctx = ScoringContext(current_tags=["media"], current_category_id=1)
        [scored] = score_candidates([candidate], ctx, now=NOW)
        assert scored.breakdown["category"] == 0
        assert scored.breakdown["tags"] == 0
        assert scored.breakdown["featured"] == 0


class TestOrderingAndCap:
    """Sorted by score, stable for ties, at most max_results."""

    def test_output_capped_at_six(self):
        candidates = [make_article(i, days_ago=i) for i in range(1, 12)]
        result = score_candidates(candidates, ScoringContext(), now=NOW)
        assert len(result) == 6
        assert ids(result) == [1, 2, 3, 4, 5, 6]

    def test_scores_non_increasing(self):
        candidates = [
            make_article(i, category_id=i % 3, featured=i % 2 == 0, days_ago=i * 2)
            for i in range(1, 10)
        ]
        ctx = ScoringContext(current_category_id=1)
        scores = [s.score for s in score_candidates(candidates, ctx, now=NOW)]
        assert scores == sorted(scores, reverse=True)

    def test_ties_keep_input_order(self):
        candidates = [make_article(i, days_ago=50) for i in (9, 4, 7, 1)]
        result = score_candidates(candidates, ScoringContext(), now=NOW)
        assert ids(result) == [9, 4, 7, 1]

    def test_custom_max_results(self):
        config = ScoringConfig(max_results=2)
        candidates = [make_article(i, days_ago=1) for i in range(5)]
        assert len(score_candidates(candidates, ScoringContext(), config, now=NOW)) == 2

    def test_deterministic(self):
        candidates = [
            make_article(i, category_id=i % 2, tags=["media", f"t{i}"], title=f"Story number {i}",
                         featured=i == 3, days_ago=i)
            for i in range(1, 9)
        ]
        ctx = ScoringContext(current_item_id=1, current_category_id=1, current_tags=["media"])
        first = [s.model_dump() for s in score_candidates(candidates, ctx, now=NOW)]
        second = [s.model_dump() for s in score_candidates(candidates, ctx, now=NOW)]
        assert first == second

    def test_context_now_used_when_not_passed(self):
        ctx = ScoringContext(now=NOW)
        [scored] = score_candidates([make_article(2, days_ago=4)], ctx)
        assert scored.breakdown["recency"] == pytest.approx(13)


class TestPersonalizedPreset:
    """The "recommended for you" weights: 40 category, 25 featured, +15 within 7 days."""

    def test_weights(self):
        candidate = make_article(2, category_id=1, featured=True, days_ago=3,
                                 tags=["media"], title="Long descriptive headline words")
        ctx = ScoringContext(current_item_id=1, current_category_id=1, current_tags=["media"])
        [scored] = score_candidates([candidate], ctx, PERSONALIZED_CONFIG, now=NOW)
        assert scored.score == pytest.approx(80)
        assert scored.reasons == ["same_category", "recently_published", "featured"]

    def test_step_recency_outside_window(self):
        [scored] = score_candidates([make_article(2, days_ago=8)], ScoringContext(),
                                    PERSONALIZED_CONFIG, now=NOW)
        assert scored.breakdown["recency"] == 0
        assert scored.reasons == []


class TestInvalidInput:
    """Only a wholly malformed candidate list is rejected."""

    @pytest.mark.parametrize("bad", ["not a list", {"id": 1}, 42, None])
    def test_non_list_rejected(self, bad):
        with pytest.raises(InvalidCandidateList):
            score_candidates(bad, ScoringContext(), now=NOW)

    def test_non_mapping_entry_rejected(self):
        with pytest.raises(InvalidCandidateList, match="index 1"):
            score_candidates([make_article(1), "oops"], ScoringContext(), now=NOW)

    def test_invalid_candidate_list_is_type_error(self):
        with pytest.raises(TypeError):
            score_candidates("nope", ScoringContext(), now=NOW)

    def test_engine_recommend_degrades_to_empty(self):
        engine = ScoringEngine()
        assert engine.recommend("nope", ScoringContext(), now=NOW) == []

    def test_engine_score_matches_function(self):
        candidates = [make_article(i, days_ago=i) for i in range(3)]
        engine = ScoringEngine()
        assert ids(engine.score(candidates, ScoringContext(), now=NOW)) == ids(
            score_candidates(candidates, ScoringContext(), now=NOW)
        )


class TestTagMatching:
    """Fuzzy tag matching is case-insensitive substring in either direction."""

    def test_substring_either_direction(self):
        assert tags_match("AI", "ai policy")
        assert tags_match("Media Analytics", "media")
        assert not tags_match("sports", "media")

    def test_blank_tags_never_match(self):
        assert not tags_match("", "media")
        assert not tags_match("media", "  ")

    def test_count_matching_tags(self):
        assert count_matching_tags(["media", "policy", "gulf"], ["Social Media", "Gulf news"]) == 2

    def test_swappable_matcher(self):
        candidate = make_article(2, tags=["media analytics"], days_ago=40)
        ctx = ScoringContext(current_tags=["media"])
        fuzzy = ScoringEngine().score([candidate], ctx, now=NOW)[0]
        exact = ScoringEngine(matcher=exact_tags_match).score([candidate], ctx, now=NOW)[0]
        assert fuzzy.breakdown["tags"] == 25
        assert exact.breakdown["tags"] == 0
