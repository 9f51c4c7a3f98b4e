"""
Static keyword tables used by the analyzer.

All tables are immutable (frozenset, tuple, MappingProxyType) and bundled in
a frozen KeywordTables instance, so they can be shared by any number of
threads. Alternative tables can be loaded with keyword_loader.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from .models import PageType


STOP_WORDS: frozenset[str] = frozenset({
    "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for",
    "of", "with", "by", "from", "is", "are", "was", "were", "be", "been",
    "have", "has", "had", "do", "does", "did", "will", "would", "could",
    "should", "may", "might", "can", "this", "that", "these", "those",
})

# Extra words dropped when reading keywords out of a URL slug
SLUG_STOP_WORDS: frozenset[str] = frozenset({"the", "and", "for", "with", "from"})

# High search volume, high competition
PRIMARY_KEYWORDS: tuple[str, ...] = (
    "Forex Factory",
    "MQL5",
    "MT5",
    "MT4",
    "Forex EA",
    "Expert Advisor",
    "Forex Trading",
    "Forex AI EA",
    "Forex Robot",
    "Automated Trading",
    "Best forex robots 2024",
    "MetaTrader 4",
    "MetaTrader 5",
)

# Lower competition, higher intent
LONG_TAIL_KEYWORDS: tuple[str, ...] = (
    # EA-specific
    "free forex expert advisor download",
    "best mt4 expert advisor 2024",
    "profitable forex ea free download",
    "mt5 expert advisor programming",
    "forex robot trading software",
    "automated forex trading system",
    "forex ea generator online",
    "scalping ea mt4 free download",
    "grid trading ea mt5",
    "martingale ea forex factory",
    "hedging ea expert advisor",
    "news trading ea mt4",
    # Indicator-specific
    "mt4 indicators free download",
    "mt5 custom indicators",
    "forex factory calendar indicator",
    "best forex indicators 2024",
    "trend following indicators mt4",
    "volume profile indicator mt5",
    "support resistance indicator",
    "price action indicators",
    # Platform-specific
    "metatrader 4 expert advisor tutorial",
    "metatrader 5 automated trading",
    "mql5 programming tutorial",
    "mql4 expert advisor development",
    "forex factory market data",
    "mt4 backtesting tutorial",
    "mt5 strategy tester optimization",
    # Strategy-specific
    "forex scalping robot",
    "swing trading expert advisor",
    "day trading forex robot",
    "position trading ea",
    "arbitrage trading bot mt4",
    "high frequency trading ea",
    # Comparison/Review
    "forex robot comparison 2024",
    "expert advisor reviews",
    "best free forex ea 2024",
    "top 10 forex robots",
    "forex ea performance results",
    "profitable expert advisors list",
)

SEMANTIC_KEYWORDS: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "Forex EA": (
        "trading algorithm",
        "automated strategy",
        "trading bot",
        "forex automation",
        "algorithmic trading",
        "robotic trading system",
    ),
    "MT4": (
        "MetaTrader 4 platform",
        "MT4 terminal",
        "forex trading platform",
        "retail trading software",
        "MT4 broker",
        "trading charts",
    ),
    "MT5": (
        "MetaTrader 5 platform",
        "MT5 terminal",
        "multi-asset platform",
        "advanced trading platform",
        "MT5 broker",
        "trading analytics",
    ),
    "Expert Advisor": (
        "EA programming",
        "automated trading system",
        "trading robot development",
        "MQL programming",
        "forex algorithm",
        "trading strategy automation",
    ),
    "Forex Trading": (
        "currency trading",
        "foreign exchange",
        "FX market",
        "currency pairs",
        "forex market analysis",
        "trading strategies",
    ),
    "MQL5": (
        "MQL5 code",
        "MetaQuotes Language",
        "MT5 programming",
        "trading script",
        "custom indicator development",
        "strategy coding",
    ),
    "Forex Robot": (
        "trading robot",
        "automated forex",
        "algo trading",
        "forex bot",
        "robotic trading",
    ),
    "Automated Trading": (
        "algorithmic trading",
        "algo trading",
        "systematic trading",
        "bot trading",
        "auto trading",
    ),
})

KEYWORD_CATEGORIES: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "PRODUCTS": ("Forex EA", "Expert Advisor", "Forex Robot", "Trading Bot", "MT4 EA", "MT5 EA"),
    "PLATFORMS": ("MT4", "MT5", "MetaTrader 4", "MetaTrader 5", "MQL4", "MQL5"),
    "STRATEGIES": ("Scalping", "Grid Trading", "Martingale", "Hedging", "News Trading", "Trend Following"),
    "FEATURES": (
        "Automated Trading",
        "Backtesting",
        "Optimization",
        "Risk Management",
        "Money Management",
        "Trade Management",
    ),
    "COMPARISON": (
        "Best Forex EA",
        "Top Trading Robots",
        "EA Reviews",
        "Performance Results",
        "Profitable EA",
        "Free Download",
    ),
})


@dataclass(frozen=True)
class PageKeywordTarget:
    """Keyword targeting for one page type."""
    primary: str
    secondary: tuple[str, ...]
    density: float


PAGE_KEYWORDS: Mapping[PageType, PageKeywordTarget] = MappingProxyType({
    PageType.HOME: PageKeywordTarget(
        "Forex Factory", ("Expert Advisor", "MT4", "MT5", "Automated Trading"), 2.5
    ),
    PageType.BLOG: PageKeywordTarget(
        "Forex Trading", ("Trading Strategies", "Market Analysis", "Expert Tips"), 2.0
    ),
    PageType.DOWNLOADS: PageKeywordTarget(
        "Forex EA Download", ("Free Expert Advisor", "MT4 EA", "MT5 Robot"), 2.8
    ),
    PageType.PRODUCT: PageKeywordTarget(
        "Expert Advisor", ("Trading Robot", "Automated System", "MQL5"), 3.0
    ),
    PageType.CATEGORY: PageKeywordTarget(
        "Forex Robot", ("Trading Bot", "EA Collection", "Best Forex EA"), 2.2
    ),
})


@dataclass(frozen=True)
class KeywordTables:
    """
    Bundle of every keyword table the analyzer reads.

    Instances are immutable; build a new one (see keyword_loader) instead
    of editing an existing one.
    """
    stop_words: frozenset[str] = STOP_WORDS
    slug_stop_words: frozenset[str] = SLUG_STOP_WORDS
    primary_keywords: tuple[str, ...] = PRIMARY_KEYWORDS
    long_tail_keywords: tuple[str, ...] = LONG_TAIL_KEYWORDS
    semantic_keywords: Mapping[str, tuple[str, ...]] = field(default_factory=lambda: SEMANTIC_KEYWORDS)
    keyword_categories: Mapping[str, tuple[str, ...]] = field(default_factory=lambda: KEYWORD_CATEGORIES)
    page_keywords: Mapping[PageType, PageKeywordTarget] = field(default_factory=lambda: PAGE_KEYWORDS)

    def semantic_lookup(self, keyword: str) -> tuple[str, ...]:
        """Find related terms for a keyword, ignoring case. Empty on miss."""
        if keyword in self.semantic_keywords:
            return self.semantic_keywords[keyword]
        lowered = keyword.strip().lower()
        for key, terms in self.semantic_keywords.items():
            if key.lower() == lowered:
                return terms
        return ()


DEFAULT_KEYWORD_TABLES = KeywordTables()


def resolve_tables(tables) -> KeywordTables:
    """Return the given tables or the process-wide defaults."""
    return tables if tables is not None else DEFAULT_KEYWORD_TABLES
