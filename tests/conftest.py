"""
Pytest fixtures and configuration for Content SEO Engine tests.
"""

import pytest
from pathlib import Path

from content_seo_engine.models import ContentRecord


FILLER = " ".join(f"word{i}" for i in range(49))


@pytest.fixture(autouse=True)
def _clear_site_url(monkeypatch):
    """Keep a developer's SITE_URL from leaking into canonical URLs."""
    monkeypatch.delenv("SITE_URL", raising=False)


@pytest.fixture
def optimized_body() -> str:
    """350 words, keyword 'scalping' once per 50 words (2% density)."""
    return " ".join([f"Scalping {FILLER}."] * 7)


@pytest.fixture
def optimized_content(optimized_body: str) -> ContentRecord:
    """Content that passes every scoring rule."""
    return ContentRecord(
        title="Scalping EA Guide for MetaTrader Traders",
        description=("Learn scalping with expert advisors. " * 4).strip(),
        body=optimized_body,
        keyword="scalping",
        slug="scalping-ea-guide",
    )


@pytest.fixture
def weak_content() -> ContentRecord:
    """Content that fails most scoring rules."""
    return ContentRecord(
        title="EA",
        description="short",
        body="one two three",
        keyword="EA",
    )


@pytest.fixture
def sample_keywords_csv(tmp_path: Path) -> Path:
    """Create a plain keyword list CSV file."""
    csv_path = tmp_path / "keywords.csv"
    csv_content = """keyword,search_volume
forex ea,1200
Forex EA,1200
mt4 indicators free download,800

scalping ea mt4 free download,150
"""
    csv_path.write_text(csv_content)
    return csv_path


@pytest.fixture
def keyword_tables_csv(tmp_path: Path) -> Path:
    """Create a keyword table CSV with tiers and related terms."""
    csv_path = tmp_path / "tables.csv"
    csv_content = """Keyword,Tier,Related
Gold Scalper,primary,"gold ea, xauusd robot, gold ea"
best gold scalping ea 2024,long_tail,
Grid Hedger,bogus,
Night Owl EA,,"asian session ea"
"""
    csv_path.write_text(csv_content)
    return csv_path


@pytest.fixture
def sample_keywords_excel(tmp_path: Path) -> Path:
    """Create a keyword table Excel file."""
    import pandas as pd

    xlsx_path = tmp_path / "keywords.xlsx"
    data = {
        "term": ["Gold Scalper", "best gold scalping ea 2024", "News Trader"],
        "type": ["primary", "long-tail", "primary"],
    }
    df = pd.DataFrame(data)
    df.to_excel(xlsx_path, index=False)
    return xlsx_path
