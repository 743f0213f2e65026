"""Tests for slug, word count, read time and event key derivation."""

from datetime import UTC, datetime
from types import SimpleNamespace

import pytest

from app.services.derived_fields import (
    apply_article_fields,
    clamp_read_time,
    estimate_read_time,
    event_key,
    slugify,
    word_count,
)

NOW = datetime(2026, 3, 1, 12, 0, tzinfo=UTC)


class TestSlugify:
    def test_example_title(self):
        assert slugify("Hello, World!  Foo--Bar") == "hello-world-foo-bar"

    @pytest.mark.parametrize(
        "title",
        ["Hello, World!  Foo--Bar", "  Leading and trailing  ", "AI & ML: 2025 Edition"],
    )
    def test_idempotent(self, title):
        once = slugify(title)
        assert slugify(once) == once

    def test_empty_and_none(self):
        assert slugify("") == ""
        assert slugify(None) == ""

    def test_surrounding_whitespace_ignored(self):
        assert slugify("  Hello World  ") == "hello-world"

    def test_truncated_to_160(self):
        assert len(slugify("a" * 500)) == 160


class TestWordCount:
    def test_simple_sentence(self):
        assert word_count("The quick brown fox") == 4

    def test_irregular_whitespace(self):
        assert word_count("  one\ttwo\n\nthree  ") == 3

    def test_empty(self):
        assert word_count("") == 0
        assert word_count(None) == 0


class TestEstimateReadTime:
    def test_short_text_is_one_minute(self):
        assert estimate_read_time("The quick brown fox", 200) == 1

    def test_empty_text_is_one_minute(self):
        assert estimate_read_time("", 200) == 1

    def test_half_minute_rounds_up(self):
        # 500 words at 200 wpm is 2.5 minutes
        assert estimate_read_time(" ".join(["w"] * 500), 200) == 3

    def test_capped_at_120(self):
        assert estimate_read_time(" ".join(["w"] * 100_000), 200) == 120

    @pytest.mark.parametrize("wpm", [1, 60, 200, 1200, 50_000])
    def test_always_within_bounds(self, wpm):
        for words in (0, 1, 199, 1000, 30_000):
            minutes = estimate_read_time(" ".join(["w"] * words), wpm)
            assert 1 <= minutes <= 120

    def test_clamp_read_time(self):
        assert clamp_read_time(0) == 1
        assert clamp_read_time(45) == 45
        assert clamp_read_time(500) == 120


class TestEventKey:
    def test_case_and_whitespace_insensitive(self):
        assert event_key("  AI   Summit 2025 ") == event_key("ai summit 2025")

    @pytest.mark.parametrize("dash", ["-", "‐", "–", "—", "−", "--"])
    def test_dash_variants_equal(self, dash):
        assert event_key(f"AI Summit {dash} 2025") == "ai summit - 2025"

    def test_empty(self):
        assert event_key(None) == ""
        assert event_key("   ") == ""


class TestApplyArticleFields:
    def test_create_derives_slug_and_counts(self):
        content = " ".join(["word"] * 450)
        fields = apply_article_fields(
            None,
            {"title": "Hello, World!", "content": content, "status": "draft"},
            NOW,
        )
        assert fields["slug"] == "hello-world"
        assert fields["word_count"] == 450
        assert fields["read_time_minutes"] == 2
        assert "published_at" not in fields

    def test_explicit_slug_kept(self):
        fields = apply_article_fields(None, {"title": "Hello", "slug": "custom"}, NOW)
        assert fields["slug"] == "custom"

    def test_explicit_read_time_wins_and_is_clamped(self):
        fields = apply_article_fields(
            None, {"title": "Hello", "content": "a b c", "read_time_minutes": 999}, NOW
        )
        assert fields["read_time_minutes"] == 120

    def test_zero_read_time_is_estimated(self):
        content = " ".join(["word"] * 1000)
        fields = apply_article_fields(
            None, {"title": "Hello", "content": content, "read_time_minutes": 0}, NOW
        )
        assert fields["read_time_minutes"] == 5

    def test_zero_read_time_on_update_uses_stored_content(self):
        current = SimpleNamespace(content=" ".join(["word"] * 600), published_at=None)
        fields = apply_article_fields(current, {"read_time_minutes": 0}, NOW)
        assert fields["read_time_minutes"] == 3

    def test_publish_sets_published_at(self):
        current = SimpleNamespace(published_at=None)
        fields = apply_article_fields(current, {"status": "published"}, NOW)
        assert fields["published_at"] == NOW

    def test_republish_keeps_original_date(self):
        earlier = datetime(2025, 1, 1, tzinfo=UTC)
        current = SimpleNamespace(published_at=earlier)
        fields = apply_article_fields(current, {"status": "published"}, NOW)
        assert "published_at" not in fields

    def test_update_never_regenerates_slug(self):
        current = SimpleNamespace(published_at=None)
        fields = apply_article_fields(current, {"title": "A Brand New Title"}, NOW)
        assert "slug" not in fields

    def test_caller_cannot_set_published_at(self):
        fields = apply_article_fields(
            None, {"title": "Hello", "status": "draft", "published_at": NOW}, NOW
        )
        assert "published_at" not in fields
