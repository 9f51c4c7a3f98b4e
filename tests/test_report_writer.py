"""Tests for Word SEO report writing."""

import pytest
from pathlib import Path

from docx import Document
from docx.enum.text import WD_COLOR_INDEX

from content_seo_engine.config import ScoringConfig
from content_seo_engine.report_writer import (
    SeoReportWriter,
    density_status,
    score_highlight,
    write_seo_report,
)


def _paragraph_texts(path: Path) -> list[str]:
    return [p.text for p in Document(str(path)).paragraphs]


class TestHelpers:
    """Tests for highlight and status helpers."""

    @pytest.mark.parametrize("score,color", [
        (100, WD_COLOR_INDEX.BRIGHT_GREEN),
        (90, WD_COLOR_INDEX.BRIGHT_GREEN),
        (75, WD_COLOR_INDEX.YELLOW),
        (45, WD_COLOR_INDEX.RED),
    ])
    def test_score_highlight(self, score, color):
        """Test highlight colors per score band."""
        assert score_highlight(score) == color

    def test_density_status(self):
        """Test density status labels."""
        assert density_status(0.5) == "Too low"
        assert density_status(2.0) == "Optimal"
        assert density_status(4.0) == "Too high"

    def test_density_status_custom_band(self):
        """Test labels against a custom band."""
        config = ScoringConfig(density_min=0.5, density_max=1.0)
        assert density_status(0.75, config) == "Optimal"


class TestWriteSeoReport:
    """Tests for the report document."""

    def test_creates_docx(self, optimized_content, tmp_path: Path):
        """Test that the report is written with a .docx suffix."""
        output = write_seo_report(optimized_content, tmp_path / "report")

        assert output == tmp_path / "report.docx"
        assert output.exists()

    def test_sections(self, optimized_content, tmp_path: Path):
        """Test the report headings and clean-content message."""
        output = write_seo_report(
            optimized_content,
            tmp_path / "report.docx",
            source_url="https://forexfactory.cc/scalping-ea-guide",
        )
        texts = _paragraph_texts(output)

        assert texts[0] == "SEO Content Report"
        assert "Target Page: https://forexfactory.cc/scalping-ea-guide" in texts
        assert "SEO score: 100/100" in texts
        assert "No issues found." in texts
        for heading in ("Score Summary", "Meta Elements", "Issues", "Suggestions", "Keyword Density", "Top Keywords"):
            assert heading in texts

    def test_score_highlighted(self, optimized_content, tmp_path: Path):
        """Test that the score run carries the band highlight."""
        output = write_seo_report(optimized_content, tmp_path / "report.docx")
        doc = Document(str(output))

        score_para = next(p for p in doc.paragraphs if p.text.startswith("SEO score:"))
        assert score_para.runs[1].font.highlight_color == WD_COLOR_INDEX.BRIGHT_GREEN

    def test_issues_table(self, weak_content, tmp_path: Path):
        """Test that issues are listed in a table."""
        output = write_seo_report(weak_content, tmp_path / "weak.docx")
        doc = Document(str(output))

        issue_table = doc.tables[1]
        assert issue_table.rows[0].cells[1].text == "Issue"
        assert issue_table.rows[1].cells[1].text == "Title is too short (< 30 characters)"
        assert len(issue_table.rows) == 6
        assert "No issues found." not in _paragraph_texts(output)

    def test_meta_suggestions(self, weak_content, tmp_path: Path):
        """Test that the meta table suggests keyword-prefixed values."""
        output = write_seo_report(weak_content, tmp_path / "weak.docx")
        meta_table = Document(str(output)).tables[0]

        description_row = meta_table.rows[2]
        assert description_row.cells[0].text == "Meta Description"
        assert description_row.cells[1].text == "short"
        assert description_row.cells[3].text == "EA - short"

    def test_density_table(self, optimized_content, tmp_path: Path):
        """Test the keyword density table with secondary keywords."""
        output = write_seo_report(
            optimized_content,
            tmp_path / "report.docx",
            secondary_keywords=["martingale", "Scalping"],
        )
        density_table = Document(str(output)).tables[-1]
        rows = [[cell.text for cell in row.cells] for row in density_table.rows[1:]]

        assert rows == [
            ["scalping", "2.00%", "Optimal"],
            ["martingale", "0.00%", "Too low"],
        ]

    def test_related_keywords_section(self, tmp_path: Path, optimized_content):
        """Test that related keywords are listed for known keywords."""
        from dataclasses import replace

        output = write_seo_report(replace(optimized_content, keyword="MT4"), tmp_path / "mt4.docx")
        texts = _paragraph_texts(output)

        assert "Related Keywords" in texts
        assert "MetaTrader 4 platform" in texts

    def test_writer_instance(self, optimized_content, tmp_path: Path):
        """Test using the writer class directly with a precomputed score."""
        from content_seo_engine.models import SEOScore

        writer = SeoReportWriter()
        output = writer.write(
            optimized_content,
            tmp_path / "direct.docx",
            score=SEOScore(score=42, issues=("Custom issue",)),
        )
        texts = _paragraph_texts(output)
        assert "SEO score: 42/100" in texts
