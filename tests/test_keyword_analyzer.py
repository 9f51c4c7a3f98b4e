"""Tests for keyword density, extraction and competition analysis."""

import pytest

from content_seo_engine.keyword_analyzer import (
    check_keyword_stuffing,
    competition_level,
    density,
    extract_from_slug,
    extract_keywords,
    is_density_optimal,
    keyword_rich_excerpt,
    keyword_suggestions,
    multi_density,
    related_keywords,
    semantically_related,
)
from content_seo_engine.keyword_tables import DEFAULT_KEYWORD_TABLES, SEMANTIC_KEYWORDS, KeywordTables
from content_seo_engine.models import Difficulty, PageType, SearchVolume


class TestDensity:
    """Tests for single-keyword density."""

    def test_basic(self):
        """Test the canonical example."""
        assert density("the quick quick fox", "quick") == 50.0

    def test_case_insensitive(self):
        """Test that matching ignores case."""
        assert density("Forex forex FOREX trading", "forex") == 75.0

    def test_keyword_case_invariant(self):
        """Test that keyword casing never changes the result."""
        text = "Best MT4 robots for mt4 traders"
        assert density(text, "MT4") == density(text, "mt4") == 33.33

    def test_whole_words_only(self):
        """Test that a keyword inside a longer word does not count."""
        assert density("forexfactory forex", "forex") == 50.0

    def test_punctuation_is_ignored(self):
        """Test that punctuation around keywords does not prevent a match."""
        assert density("MT4, MT4! and more", "MT4") == 50.0

    def test_multi_word_keyword(self):
        """Test that phrases match as contiguous token runs."""
        assert density("forex robot and forex robot", "Forex Robot") == 40.0

    def test_rounded_to_two_decimals(self):
        """Test rounding of repeating decimals."""
        assert density("a b c", "a") == 33.33

    def test_empty_text(self):
        """Test that empty text has zero density."""
        assert density("", "forex") == 0.0
        assert density("...", "forex") == 0.0

    def test_empty_keyword(self):
        """Test that an empty keyword has zero density."""
        assert density("some text", "") == 0.0

    @pytest.mark.parametrize("text,keyword", [
        ("ea ea ea", "ea"),
        ("ea ea ea", "ea ea"),
        ("one two three", "four"),
        ("x", "x"),
    ])
    def test_bounded(self, text, keyword):
        """Test that density always lies in [0, 100]."""
        assert 0.0 <= density(text, keyword) <= 100.0


class TestMultiDensity:
    """Tests for multi-keyword density."""

    def test_reports_each_keyword_in_order(self):
        """Test that each keyword gets its own entry in input order."""
        result = multi_density("forex robot forex", ["robot", "forex"])
        assert list(result) == ["robot", "forex"]
        assert result == {"robot": 33.33, "forex": 66.67}

    def test_case_duplicates_collapse(self):
        """Test that keywords differing only by case produce one entry."""
        result = multi_density("forex robot forex", ["forex", "FOREX", "robot"])
        assert result == {"forex": 66.67, "robot": 33.33}

    def test_empty_keywords(self):
        """Test that no keywords gives an empty mapping."""
        assert multi_density("text", []) == {}


class TestIsDensityOptimal:
    """Tests for the optimal density band."""

    @pytest.mark.parametrize("value,expected", [
        (0.99, False),
        (1.0, True),
        (2.0, True),
        (3.0, True),
        (3.01, False),
    ])
    def test_band_is_inclusive(self, value, expected):
        """Test the inclusive 1-3% band."""
        assert is_density_optimal(value) is expected


class TestExtractKeywords:
    """Tests for top-N keyword extraction."""

    def test_short_words_and_stop_words_ignored(self):
        """Test that only stop words and short words yields nothing."""
        assert extract_keywords("The the the cat cat sat mat", limit=2) == []

    def test_four_letter_boundary(self):
        """Test that 4-letter words are kept and 3-letter words dropped."""
        assert extract_keywords("cat cats cat") == ["cats"]

    def test_most_frequent_first(self):
        """Test frequency ordering."""
        text = "trading robot trading signals trading robot"
        assert extract_keywords(text) == ["trading", "robot", "signals"]

    def test_ties_keep_first_appearance(self):
        """Test that equally frequent words keep text order."""
        assert extract_keywords("gold ruby opal ruby gold opal") == ["gold", "ruby", "opal"]

    def test_long_stop_words_ignored(self):
        """Test that stop words longer than 3 characters are still removed."""
        assert extract_keywords("could could should trading") == ["trading"]

    def test_limit(self):
        """Test that the limit caps the result."""
        assert extract_keywords("alpha beta gamma delta", limit=2) == ["alpha", "beta"]
        assert extract_keywords("alpha beta", limit=0) == []


class TestExtractFromSlug:
    """Tests for slug keyword extraction."""

    def test_drops_short_and_stop_words(self):
        """Test filtering of slug words."""
        assert extract_from_slug("best-mt4-expert-advisor-for-the-win") == [
            "best", "mt4", "expert", "advisor", "win"
        ]

    def test_splits_on_underscores(self):
        """Test that underscores separate words too."""
        assert extract_from_slug("gold-ea_v2_scalper") == ["gold", "scalper"]


class TestCompetitionLevel:
    """Tests for competition estimates."""

    def test_primary_keyword_is_hard(self):
        """Test that primary keywords are hard with high volume."""
        analysis = competition_level("MQL5")
        assert analysis.difficulty == Difficulty.HARD
        assert analysis.volume == SearchVolume.HIGH
        assert "very competitive" in analysis.recommendation

    def test_long_tail_keyword_is_easy(self):
        """Test that long-tail keywords are easy with low volume."""
        analysis = competition_level("free forex expert advisor download")
        assert analysis.difficulty == Difficulty.EASY
        assert analysis.volume == SearchVolume.LOW

    def test_unknown_keyword_is_medium(self):
        """Test the default classification."""
        analysis = competition_level("gold scalper")
        assert analysis.difficulty == Difficulty.MEDIUM
        assert analysis.volume == SearchVolume.MEDIUM

    def test_membership_is_case_sensitive(self):
        """Test that non-canonical casing falls through to medium."""
        assert competition_level("mql5").difficulty == Difficulty.MEDIUM

    def test_to_dict(self):
        """Test serialization uses enum values."""
        assert competition_level("MT4").to_dict() == {
            "keyword": "MT4",
            "difficulty": "Hard",
            "volume": "High",
            "recommendation": (
                "High-value keyword but very competitive. "
                "Focus on quality content and backlinks."
            ),
        }

    def test_custom_tables(self):
        """Test classification against replacement tables."""
        tables = KeywordTables(primary_keywords=("Gold Scalper",), long_tail_keywords=())
        assert competition_level("Gold Scalper", tables).difficulty == Difficulty.HARD
        assert competition_level("MQL5", tables).difficulty == Difficulty.MEDIUM


class TestRelatedKeywords:
    """Tests for semantic and category lookups."""

    def test_semantic_lookup_ignores_case(self):
        """Test case-insensitive semantic lookup."""
        assert semantically_related("forex ea") == list(SEMANTIC_KEYWORDS["Forex EA"])

    def test_unknown_keyword(self):
        """Test that unknown keywords have no related terms."""
        assert semantically_related("gold scalper") == []
        assert related_keywords("gold scalper") == []

    def test_related_includes_category_peers(self):
        """Test that platform peers are added after semantic terms."""
        related = related_keywords("MT4")
        assert related[0] == "MetaTrader 4 platform"
        assert "MT5" in related
        assert "MQL5" in related
        assert "MT4" not in related

    def test_related_is_deduplicated(self):
        """Test that terms shared by sources appear once."""
        related = related_keywords("Automated Trading")
        assert len(related) == len(set(related))
        assert related.count("algo trading") == 1
        assert "Backtesting" in related


class TestKeywordSuggestions:
    """Tests for page-type keyword targeting."""

    def test_blog(self):
        """Test suggestions for blog pages by name."""
        suggestions = keyword_suggestions("blog")
        assert suggestions.primary == "Forex Trading"
        assert suggestions.secondary == ("Trading Strategies", "Market Analysis", "Expert Tips")
        assert suggestions.target_density == 2.0
        assert suggestions.semantic_keywords == SEMANTIC_KEYWORDS["Forex Trading"]

    def test_home_collects_secondary_semantics(self):
        """Test that semantic terms of secondary keywords are merged without duplicates."""
        suggestions = keyword_suggestions(PageType.HOME)
        assert suggestions.primary == "Forex Factory"
        assert "MetaTrader 4 platform" in suggestions.semantic_keywords
        assert "algorithmic trading" in suggestions.semantic_keywords
        assert len(suggestions.semantic_keywords) == len(set(suggestions.semantic_keywords))

    def test_unknown_page_type(self):
        """Test that unknown page types raise ValueError."""
        with pytest.raises(ValueError):
            keyword_suggestions("LANDING")


class TestKeywordStuffing:
    """Tests for the keyword-stuffing checker."""

    def test_stuffed(self):
        """Test detection above 3.5%."""
        check = check_keyword_stuffing("forex " * 10, "forex")
        assert check.is_stuffed is True
        assert check.density == 100.0
        assert check.recommendation.startswith("Keyword density (100%) is too high")

    def test_too_low(self):
        """Test the low-density recommendation below 0.5%."""
        check = check_keyword_stuffing("word " * 300, "forex")
        assert check.is_stuffed is False
        assert "too low" in check.recommendation

    def test_optimal(self, optimized_body):
        """Test a 2% density body."""
        check = check_keyword_stuffing(optimized_body, "scalping")
        assert check.is_stuffed is False
        assert check.density == 2.0
        assert check.recommendation == "Keyword density (2%) is optimal."


class TestKeywordRichExcerpt:
    """Tests for excerpt generation."""

    CONTENT = "Intro sentence here. Scalping works well on MT4. Use tight stops! Final words."

    def test_starts_at_keyword_sentence(self):
        """Test that the excerpt starts at the first keyword sentence and adds the next one."""
        assert keyword_rich_excerpt(self.CONTENT, "scalping") == (
            "Scalping works well on MT4. Use tight stops"
        )

    def test_falls_back_to_first_sentence(self):
        """Test the fallback when the keyword is absent."""
        assert keyword_rich_excerpt(self.CONTENT, "martingale") == "Intro sentence here"

    def test_truncated(self):
        """Test that long excerpts are cut with an ellipsis."""
        content = "Scalping " + "x" * 200 + ". Next."
        excerpt = keyword_rich_excerpt(content, "scalping", length=50)
        assert len(excerpt) == 50
        assert excerpt.endswith("...")

    @pytest.mark.parametrize("length", [0, 2, 3])
    def test_tiny_length(self, length):
        """Test that tiny lengths are never exceeded."""
        assert len(keyword_rich_excerpt(self.CONTENT, "scalping", length=length)) <= length

    def test_default_tables_untouched(self):
        """Test that analysis never mutates the shared tables."""
        before = dict(DEFAULT_KEYWORD_TABLES.semantic_keywords)
        related_keywords("MT4")
        keyword_suggestions("HOME")
        assert dict(DEFAULT_KEYWORD_TABLES.semantic_keywords) == before
