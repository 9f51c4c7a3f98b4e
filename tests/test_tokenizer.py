"""Tests for tokenization and slug generation."""

import pytest

from content_seo_engine.keyword_tables import KeywordTables
from content_seo_engine.slug import slugify
from content_seo_engine.tokenizer import filter_stop_words, normalize, word_count


class TestNormalize:
    """Tests for text normalization."""

    def test_lowercases_and_strips_punctuation(self):
        """Test that punctuation is removed and text lower-cased."""
        assert normalize("Hello, World!  MT4/MT5") == ["hello", "world", "mt4mt5"]

    def test_empty_text(self):
        """Test that empty text yields no tokens."""
        assert normalize("") == []
        assert normalize("   \n\t ") == []

    def test_underscores_are_word_characters(self):
        """Test that underscores survive normalization."""
        assert normalize("snake_case stays") == ["snake_case", "stays"]

    def test_punctuation_only(self):
        """Test that punctuation-only text yields no tokens."""
        assert normalize("!!! ... ???") == []


class TestFilterStopWords:
    """Tests for stop-word filtering."""

    def test_removes_stop_words(self):
        """Test that stop words are dropped and order kept."""
        assert filter_stop_words(["the", "quick", "and", "fox"]) == ["quick", "fox"]

    def test_custom_tables(self):
        """Test filtering against a custom stop-word set."""
        tables = KeywordTables(stop_words=frozenset({"quick"}))
        assert filter_stop_words(["the", "quick", "fox"], tables) == ["the", "fox"]


class TestWordCount:
    """Tests for word counting."""

    def test_counts_whitespace_separated_words(self):
        """Test counting with irregular whitespace."""
        assert word_count("  one  two\tthree\nfour ") == 4

    def test_empty(self):
        """Test that empty text has zero words."""
        assert word_count("") == 0


class TestSlugify:
    """Tests for URL slug generation."""

    def test_basic(self):
        """Test the canonical example."""
        assert slugify("  Hello, World! 2024  ") == "hello-world-2024"

    def test_dots_are_dropped(self):
        """Test that version dots are removed rather than separated."""
        assert slugify("Gold Scalper EA v2.0") == "gold-scalper-ea-v20"

    def test_separator_runs_collapse(self):
        """Test that runs of spaces, underscores and hyphens become one hyphen."""
        assert slugify("a -- b__c   d") == "a-b-c-d"

    def test_accents_are_folded(self):
        """Test that accented letters map to ASCII."""
        assert slugify("Café Crème") == "cafe-creme"

    def test_non_latin_text_is_dropped(self):
        """Test that text with no ASCII equivalent yields an empty slug."""
        assert slugify("日本語") == ""

    def test_empty_and_separator_only(self):
        """Test inputs with nothing usable."""
        assert slugify("") == ""
        assert slugify("---___   ") == ""

    @pytest.mark.parametrize("text", [
        "  Hello, World! 2024  ",
        "Best MT4 Expert Advisor (2024) -- Free!",
        "Café_au_lait",
        "-leading and trailing-",
    ])
    def test_idempotent_and_url_safe(self, text):
        """Test that slugs only contain [a-z0-9-] and are stable."""
        slug = slugify(text)
        assert slugify(slug) == slug
        assert all(c.isascii() and (c.isdigit() or c.islower() or c == "-") for c in slug)
        assert "--" not in slug
        assert not slug.startswith("-")
        assert not slug.endswith("-")
