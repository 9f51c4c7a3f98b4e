"""
Keyword list loading from CSV and Excel files.

This module handles ingestion of keyword data from:
- CSV files
- Excel files (.xlsx, .xls)

Files are read into plain keyword lists (for density reports) or into a new
immutable KeywordTables (to replace the built-in primary/long-tail lists and
the semantic map).
"""

import logging
from dataclasses import replace
from pathlib import Path
from types import MappingProxyType
from typing import Optional, Union

import pandas as pd

from .keyword_tables import DEFAULT_KEYWORD_TABLES, KeywordTables

logger = logging.getLogger(__name__)


class KeywordLoadError(Exception):
    """Raised when keyword loading fails."""
    pass


# Common column name variations
KEYWORD_COLUMN_VARIANTS = ["keyword", "keywords", "term", "terms", "query", "queries", "phrase"]
TIER_COLUMN_VARIANTS = ["tier", "type", "kind", "keyword_type", "category"]
RELATED_COLUMN_VARIANTS = ["related", "semantic", "related_terms", "semantic_keywords", "lsi"]

PRIMARY_TIER_VALUES = {"primary", "head", "high"}
LONG_TAIL_TIER_VALUES = {"long_tail", "long-tail", "longtail", "long tail", "low"}


def _normalize_column_name(name: str) -> str:
    """Normalize column name for matching."""
    return str(name).lower().strip().replace(" ", "_").replace("-", "_")


def _find_column(df: pd.DataFrame, variants: list[str]) -> Optional[str]:
    """
    Find a column in the DataFrame matching one of the variant names.

    Args:
        df: The DataFrame to search.
        variants: List of possible column name variants.

    Returns:
        The actual column name if found, None otherwise.
    """
    normalized_columns = {_normalize_column_name(col): col for col in df.columns}

    for variant in variants:
        normalized = _normalize_column_name(variant)
        if normalized in normalized_columns:
            return normalized_columns[normalized]

    return None


def read_keyword_frame(file_path: Union[str, Path], sheet_name: Optional[str] = None) -> pd.DataFrame:
    """
    Read a keyword file into a DataFrame.

    Automatically detects file type based on extension.

    Raises:
        KeywordLoadError: If the file is missing, unsupported or unreadable.
    """
    path = Path(file_path)

    if not path.exists():
        raise KeywordLoadError(f"File not found: {file_path}")

    suffix = path.suffix.lower()
    if suffix == ".csv":
        try:
            df = pd.read_csv(path, encoding="utf-8")
        except UnicodeDecodeError:
            # Try alternative encoding
            try:
                df = pd.read_csv(path, encoding="latin-1")
            except Exception as e:
                raise KeywordLoadError(f"Failed to read CSV file: {e}")
        except Exception as e:
            raise KeywordLoadError(f"Failed to read CSV file: {e}")
    elif suffix in (".xlsx", ".xls"):
        try:
            if sheet_name:
                df = pd.read_excel(path, sheet_name=sheet_name)
            else:
                df = pd.read_excel(path)
        except Exception as e:
            raise KeywordLoadError(f"Failed to read Excel file: {e}")
    else:
        raise KeywordLoadError(
            f"Unsupported file format: {suffix}. Supported formats: .csv, .xlsx, .xls"
        )

    if df.empty:
        raise KeywordLoadError("Keyword file is empty")

    return df


def _keyword_column(df: pd.DataFrame) -> str:
    keyword_col = _find_column(df, KEYWORD_COLUMN_VARIANTS)
    if keyword_col is None:
        raise KeywordLoadError(
            f"No keyword column found. Expected one of: {', '.join(KEYWORD_COLUMN_VARIANTS)}. "
            f"Found columns: {', '.join(str(c) for c in df.columns)}"
        )
    return keyword_col


def _cell_text(value) -> Optional[str]:
    if pd.isna(value):
        return None
    text = str(value).strip()
    return text or None


def load_keywords(file_path: Union[str, Path], sheet_name: Optional[str] = None) -> list[str]:
    """
    Load a plain keyword list from a CSV or Excel file.

    Blank cells are skipped and duplicates (case-insensitive) keep their
    first occurrence.

    Args:
        file_path: Path to the keyword file.
        sheet_name: Optional sheet name for Excel files.

    Returns:
        Keyword phrases in file order.

    Raises:
        KeywordLoadError: If the file cannot be read or is invalid.
    """
    df = read_keyword_frame(file_path, sheet_name)
    keyword_col = _keyword_column(df)

    keywords: list[str] = []
    seen: set[str] = set()
    for value in df[keyword_col]:
        phrase = _cell_text(value)
        if phrase is None or phrase.lower() in seen:
            continue
        seen.add(phrase.lower())
        keywords.append(phrase)

    if not keywords:
        raise KeywordLoadError("No valid keywords found in file")

    logger.info(f"Loaded {len(keywords)} keywords from {file_path}")
    return keywords


def _split_related(value) -> tuple[str, ...]:
    text = _cell_text(value)
    if text is None:
        return ()
    return tuple(dict.fromkeys(part.strip() for part in text.split(",") if part.strip()))


def load_keyword_tables(
    file_path: Union[str, Path],
    base: KeywordTables = DEFAULT_KEYWORD_TABLES,
    merge: bool = True,
    sheet_name: Optional[str] = None,
) -> KeywordTables:
    """
    Build KeywordTables from a keyword file.

    Expected columns (names are matched loosely):
    - keyword (required): the keyword phrase, in canonical casing
    - tier (optional): ``primary`` or ``long_tail``
    - related (optional): comma-separated related terms

    Args:
        file_path: Path to the keyword file.
        base: Tables supplying everything the file does not define.
        merge: If True, file keywords are added to the base lists and the
            file's related terms override base entries. If False, the
            keyword lists and semantic map come from the file only.
        sheet_name: Optional sheet name for Excel files.

    Returns:
        A new KeywordTables; ``base`` is left untouched.

    Raises:
        KeywordLoadError: If the file cannot be read or holds no keywords.
    """
    df = read_keyword_frame(file_path, sheet_name)
    keyword_col = _keyword_column(df)
    tier_col = _find_column(df, TIER_COLUMN_VARIANTS)
    related_col = _find_column(df, RELATED_COLUMN_VARIANTS)

    primary: list[str] = list(base.primary_keywords) if merge else []
    long_tail: list[str] = list(base.long_tail_keywords) if merge else []
    semantic: dict[str, tuple[str, ...]] = dict(base.semantic_keywords) if merge else {}
    loaded = 0

    for row_number, (_, row) in enumerate(df.iterrows(), start=2):
        phrase = _cell_text(row[keyword_col])
        if phrase is None:
            continue
        loaded += 1

        if tier_col is not None:
            tier = _cell_text(row[tier_col])
            tier_key = tier.lower() if tier else None
            if tier_key in PRIMARY_TIER_VALUES:
                primary.append(phrase)
            elif tier_key in LONG_TAIL_TIER_VALUES:
                long_tail.append(phrase)
            elif tier_key is not None:
                logger.warning(f"Row {row_number}: unknown tier '{tier}' for '{phrase}', skipped")

        if related_col is not None:
            related = _split_related(row[related_col])
            if related:
                semantic[phrase] = related

    if loaded == 0:
        raise KeywordLoadError("No valid keywords found in file")

    tables = replace(
        base,
        primary_keywords=tuple(dict.fromkeys(primary)),
        long_tail_keywords=tuple(dict.fromkeys(long_tail)),
        semantic_keywords=MappingProxyType(semantic),
    )
    logger.info(
        f"Loaded keyword tables from {file_path}: {len(tables.primary_keywords)} primary, "
        f"{len(tables.long_tail_keywords)} long-tail, {len(tables.semantic_keywords)} semantic"
    )
    return tables
