"""
Keyword statistics for page content.

This module provides:
- Single and multi-keyword density (percentage of tokens)
- Top-N frequent keyword extraction
- Keyword extraction from URL slugs
- Static competition estimates and related-term lookups
- A keyword-stuffing checker and keyword-rich excerpt generation

Every function is pure. The static tables come from keyword_tables and can
be replaced per call through the ``tables`` argument.
"""

import logging
import re
from collections import Counter
from typing import Iterable, Optional, Union

from .config import DEFAULT_SCORING, ScoringConfig
from .keyword_tables import KeywordTables, resolve_tables
from .models import (
    CompetitionAnalysis,
    Difficulty,
    KeywordSuggestions,
    PageType,
    SearchVolume,
    StuffingCheck,
)
from .templates import truncate
from .tokenizer import filter_stop_words, normalize

logger = logging.getLogger(__name__)

MIN_KEYWORD_LENGTH = 4  # extract_keywords keeps tokens longer than 3 chars
MIN_SLUG_WORD_LENGTH = 3

_SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")
_SLUG_SPLIT_RE = re.compile(r"[-_]")


def _count_phrase(tokens: list[str], phrase: list[str]) -> int:
    """Count non-overlapping occurrences of a token phrase."""
    size = len(phrase)
    count = 0
    i = 0
    while i <= len(tokens) - size:
        if tokens[i:i + size] == phrase:
            count += 1
            i += size
        else:
            i += 1
    return count


def density(text: str, keyword: str) -> float:
    """
    Calculate keyword density as a percentage of all tokens.

    Matching is whole-word and case-insensitive: both text and keyword go
    through the same normalization, and a multi-word keyword must appear as
    a contiguous run of tokens.

    Args:
        text: Content to measure.
        keyword: Keyword or phrase to count.

    Returns:
        Density rounded to 2 decimals, between 0 and 100. Returns 0 when
        the text has no tokens.

    Examples:
        >>> density("the quick quick fox", "quick")
        50.0
    """
    tokens = normalize(text)
    if not tokens:
        return 0.0

    phrase = normalize(keyword)
    if not phrase:
        return 0.0

    matches = _count_phrase(tokens, phrase)
    return round(matches / len(tokens) * 100, 2)


def multi_density(text: str, keywords: Iterable[str]) -> dict[str, float]:
    """
    Calculate density for several keywords.

    Keywords that differ only by case are the same keyword and produce one
    entry, keyed by the spelling first seen.

    Args:
        text: Content to measure.
        keywords: Keywords in the order the caller wants them reported.

    Returns:
        Mapping of keyword to density, in input order.
    """
    densities: dict[str, float] = {}
    spelling: dict[str, str] = {}

    for keyword in keywords:
        key = spelling.setdefault(keyword.strip().lower(), keyword)
        densities[key] = density(text, keyword)

    return densities


def is_density_optimal(value: float, config: Optional[ScoringConfig] = None) -> bool:
    """Check if a density falls inside the optimal 1-3% band."""
    return (config or DEFAULT_SCORING).is_density_optimal(value)


def extract_keywords(
    text: str,
    limit: int = 10,
    tables: Optional[KeywordTables] = None,
) -> list[str]:
    """
    Extract the most frequent meaningful words of a text.

    Stop words and words of 3 characters or fewer are ignored. Words with
    equal frequency keep the order in which they first appear.

    Args:
        text: Content to analyze.
        limit: Maximum number of words to return.
        tables: Optional keyword tables (for the stop-word set).

    Returns:
        Up to ``limit`` words, most frequent first.
    """
    if limit <= 0:
        return []

    words = [
        token for token in filter_stop_words(normalize(text), tables)
        if len(token) >= MIN_KEYWORD_LENGTH
    ]
    return [word for word, _ in Counter(words).most_common(limit)]


def extract_from_slug(slug: str, tables: Optional[KeywordTables] = None) -> list[str]:
    """
    Extract focus keywords from a URL slug.

    Args:
        slug: Slug such as ``"best-mt4-expert-advisor"``.
        tables: Optional keyword tables (for the slug stop-word set).

    Returns:
        Slug words longer than 2 characters, minus slug stop words.
    """
    stop_words = resolve_tables(tables).slug_stop_words
    return [
        word for word in _SLUG_SPLIT_RE.split(slug)
        if len(word) >= MIN_SLUG_WORD_LENGTH and word not in stop_words
    ]


def competition_level(
    keyword: str,
    tables: Optional[KeywordTables] = None,
) -> CompetitionAnalysis:
    """
    Estimate how hard a keyword is to rank for.

    Membership is exact and case-sensitive against the static lists, so
    callers must pass the canonical spelling (``"MQL5"``, not ``"mql5"``).

    Args:
        keyword: Keyword to classify.
        tables: Optional keyword tables.

    Returns:
        CompetitionAnalysis with difficulty, volume and a recommendation.
    """
    tables = resolve_tables(tables)

    if keyword in tables.long_tail_keywords:
        return CompetitionAnalysis(
            keyword=keyword,
            difficulty=Difficulty.EASY,
            volume=SearchVolume.LOW,
            recommendation="Good long-tail keyword with lower competition. Easier to rank for.",
        )

    if keyword in tables.primary_keywords:
        return CompetitionAnalysis(
            keyword=keyword,
            difficulty=Difficulty.HARD,
            volume=SearchVolume.HIGH,
            recommendation=(
                "High-value keyword but very competitive. "
                "Focus on quality content and backlinks."
            ),
        )

    return CompetitionAnalysis(
        keyword=keyword,
        difficulty=Difficulty.MEDIUM,
        volume=SearchVolume.MEDIUM,
        recommendation="Moderate competition. Create comprehensive content with good on-page SEO.",
    )


def semantically_related(keyword: str, tables: Optional[KeywordTables] = None) -> list[str]:
    """Look up semantically related terms. Returns [] for unknown keywords."""
    return list(resolve_tables(tables).semantic_lookup(keyword))


def related_keywords(keyword: str, tables: Optional[KeywordTables] = None) -> list[str]:
    """
    Collect keywords for content expansion.

    Combines the semantic terms of the keyword with the other members of
    every keyword category that contains it. Duplicates are removed and
    first-seen order is kept.
    """
    tables = resolve_tables(tables)

    related = list(tables.semantic_lookup(keyword))
    for members in tables.keyword_categories.values():
        if keyword in members:
            related.extend(member for member in members if member != keyword)

    return list(dict.fromkeys(related))


def keyword_suggestions(
    page_type: Union[PageType, str],
    tables: Optional[KeywordTables] = None,
) -> KeywordSuggestions:
    """
    Get keyword targeting for a page type.

    Args:
        page_type: PageType or its name (``"BLOG"``, ``"home"``, ...).
        tables: Optional keyword tables.

    Returns:
        KeywordSuggestions with semantic terms for the primary and every
        secondary keyword, de-duplicated.

    Raises:
        ValueError: If page_type is not a known page type.
    """
    tables = resolve_tables(tables)
    if not isinstance(page_type, PageType):
        page_type = PageType(str(page_type).strip().upper())

    target = tables.page_keywords[page_type]

    semantic: list[str] = list(tables.semantic_lookup(target.primary))
    for secondary in target.secondary:
        semantic.extend(tables.semantic_lookup(secondary))

    return KeywordSuggestions(
        primary=target.primary,
        secondary=tuple(target.secondary),
        target_density=target.density,
        semantic_keywords=tuple(dict.fromkeys(semantic)),
    )


def check_keyword_stuffing(
    text: str,
    keyword: str,
    config: Optional[ScoringConfig] = None,
) -> StuffingCheck:
    """
    Check content for keyword stuffing.

    Args:
        text: Content to check.
        keyword: Keyword to measure.
        config: Optional scoring config with the stuffing thresholds.

    Returns:
        StuffingCheck; is_stuffed is True above the stuffing threshold (3.5%).
    """
    config = config or DEFAULT_SCORING
    value = density(text, keyword)
    is_stuffed = value > config.stuffing_threshold

    if is_stuffed:
        recommendation = (
            f"Keyword density ({value:g}%) is too high. Reduce usage of "
            f"\"{keyword}\" for better readability and SEO."
        )
        logger.debug(f"Keyword stuffing detected for '{keyword}': {value}%")
    elif value < config.understuffed_threshold:
        recommendation = (
            f"Keyword density ({value:g}%) is too low. "
            f"Add more natural mentions of \"{keyword}\"."
        )
    else:
        recommendation = f"Keyword density ({value:g}%) is optimal."

    return StuffingCheck(is_stuffed=is_stuffed, density=value, recommendation=recommendation)


def keyword_rich_excerpt(content: str, keyword: str, length: int = 160) -> str:
    """
    Build an excerpt that leads with the keyword.

    Picks the first sentence mentioning the keyword (case-insensitive) and,
    if room remains, adds the sentence after it. Falls back to the first
    sentence when the keyword never appears.

    Args:
        content: Body text.
        keyword: Keyword the excerpt should contain.
        length: Maximum excerpt length including the ``...`` marker.

    Returns:
        Excerpt of at most ``length`` characters.
    """
    sentences = [s.strip() for s in _SENTENCE_SPLIT_RE.split(content)]
    needle = keyword.lower()

    for index, sentence in enumerate(sentences):
        if needle and needle in sentence.lower():
            excerpt = sentence
            following = next((s for s in sentences[index + 1:] if s), "")
            if len(excerpt) < length and following:
                excerpt = f"{excerpt}. {following}"
            return truncate(excerpt, length)

    first = next((s for s in sentences if s), "")
    return truncate(first, length)
