"""
Whitespace tokenization and stop-word filtering.

The engine does no NLP beyond this: text is lower-cased, stripped of
punctuation and split on whitespace.
"""

import re
from typing import Iterable, Optional

from .keyword_tables import resolve_tables, KeywordTables

_NON_WORD_RE = re.compile(r"[^\w\s]")


def normalize(text: str) -> list[str]:
    """
    Lower-case text, drop punctuation and split it into tokens.

    Args:
        text: Arbitrary text.

    Returns:
        Tokens in reading order. Empty text yields an empty list.

    Examples:
        >>> normalize("Hello, World!  MT4/MT5")
        ['hello', 'world', 'mt4mt5']
    """
    if not text:
        return []
    return _NON_WORD_RE.sub("", text.lower()).split()


def filter_stop_words(
    tokens: Iterable[str],
    tables: Optional[KeywordTables] = None,
) -> list[str]:
    """Remove stop words from a token sequence, keeping order."""
    stop_words = resolve_tables(tables).stop_words
    return [token for token in tokens if token not in stop_words]


def word_count(text: str) -> int:
    """Count whitespace-separated words."""
    return len(text.split()) if text else 0
