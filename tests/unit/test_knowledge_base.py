"""Tests for the static knowledge base."""

import pytest

from blograce.domain.knowledge_base import KNOWLEDGE_BASE, SAMPLE_LINKS, lookup


class TestLookup:
    """Tests for lookup."""

    def test_known_url_returns_entry(self):
        entry = lookup("https://example.com/blog1")
        assert entry is not None
        assert entry.summary == (
            "This blog explores how early rising boosts productivity "
            "through structure and focus. (AI Summary)"
        )
        assert entry.translation.startswith("یہ بلاگ")

    def test_unknown_url_returns_none(self):
        assert lookup("https://example.com/blog3") is None

    def test_trailing_slash_is_a_different_key(self):
        assert lookup("https://example.com/blog1/") is None
        assert lookup("https://buffer.com/resources/social-media-calendar") is None
        assert lookup("https://buffer.com/resources/social-media-calendar/") is not None

    def test_no_case_folding(self):
        assert lookup("HTTPS://EXAMPLE.COM/BLOG1") is None

    def test_no_trimming(self):
        assert lookup(" https://example.com/blog1") is None

    def test_empty_string(self):
        assert lookup("") is None


class TestKnowledgeBaseContents:
    """Tests for the compiled-in entries."""

    def test_four_entries(self):
        assert len(KNOWLEDGE_BASE) == 4

    def test_keys_match_entries(self):
        for key, entry in KNOWLEDGE_BASE.items():
            assert entry.key == key

    def test_summaries_carry_marker(self):
        assert all(e.summary.endswith("(AI Summary)") for e in KNOWLEDGE_BASE.values())

    def test_read_only(self):
        with pytest.raises(TypeError):
            KNOWLEDGE_BASE["https://new.example"] = None  # type: ignore[index]

    def test_every_sample_link_is_known(self):
        assert {s.url for s in SAMPLE_LINKS} == set(KNOWLEDGE_BASE)
