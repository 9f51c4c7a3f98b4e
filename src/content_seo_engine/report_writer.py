"""
Word document writer for SEO audit reports.

This module generates a .docx report for one page with:
- Score summary, highlighted by score band
- Current vs suggested meta elements table
- Issues table and suggestion list
- Keyword density table with optimal/too low/too high status
- Top extracted keywords and related keywords
"""

import logging
from pathlib import Path
from typing import Iterable, Optional, Union

from docx import Document
from docx.enum.table import WD_TABLE_ALIGNMENT
from docx.enum.text import WD_COLOR_INDEX
from docx.oxml import OxmlElement
from docx.oxml.ns import qn
from docx.shared import Inches, Pt

from .config import DEFAULT_SCORING, ScoringConfig
from .keyword_analyzer import extract_keywords, multi_density, related_keywords
from .keyword_tables import KeywordTables
from .models import ContentRecord, SEOScore
from .scorer import score_content
from .templates import optimize_meta_description, optimize_title

logger = logging.getLogger(__name__)

FONT_NAME = "Poppins"
HEADER_SHADING = "D9D9D9"


def set_cell_shading(cell, color: str) -> None:
    """Set background color/shading for a table cell."""
    tc = cell._tc
    tcPr = tc.get_or_add_tcPr()
    shd = OxmlElement("w:shd")
    shd.set(qn("w:fill"), color)
    tcPr.append(shd)


def score_highlight(score: int, config: ScoringConfig = DEFAULT_SCORING) -> WD_COLOR_INDEX:
    """Pick the highlight color for a score band."""
    if score >= config.excellent_score:
        return WD_COLOR_INDEX.BRIGHT_GREEN
    if score >= config.good_score:
        return WD_COLOR_INDEX.YELLOW
    return WD_COLOR_INDEX.RED


def density_status(value: float, config: ScoringConfig = DEFAULT_SCORING) -> str:
    """Describe a density relative to the optimal band."""
    if value < config.density_min:
        return "Too low"
    if value > config.density_max:
        return "Too high"
    return "Optimal"


class SeoReportWriter:
    """
    Writes an SEO audit of one ContentRecord to a Word document.
    """

    def __init__(
        self,
        config: Optional[ScoringConfig] = None,
        tables: Optional[KeywordTables] = None,
    ):
        self.config = config or DEFAULT_SCORING
        self.tables = tables
        self.doc = Document()
        self._setup_styles()

    def _setup_styles(self) -> None:
        """Configure document styles with Poppins font."""
        normal_style = self.doc.styles["Normal"]
        normal_style.font.name = FONT_NAME
        normal_style.font.size = Pt(11)
        normal_style.paragraph_format.space_before = Pt(6)
        normal_style.paragraph_format.space_after = Pt(6)
        normal_style.paragraph_format.line_spacing = 1.15
        normal_style._element.rPr.rFonts.set(qn("w:eastAsia"), FONT_NAME)

        for style_name, font_size in (("Heading 1", Pt(20)), ("Heading 2", Pt(16))):
            if style_name in self.doc.styles:
                style = self.doc.styles[style_name]
                style.font.name = FONT_NAME
                style.font.size = font_size
                style.font.bold = True

        if "Table Grid" in self.doc.styles:
            self.doc.styles["Table Grid"].font.size = Pt(10)

    def write(
        self,
        content: ContentRecord,
        output_path: Union[str, Path],
        secondary_keywords: Iterable[str] = (),
        source_url: Optional[str] = None,
        score: Optional[SEOScore] = None,
    ) -> Path:
        """
        Write the audit for a piece of content.

        Args:
            content: The audited content.
            output_path: Path for the output .docx file.
            secondary_keywords: Extra keywords for the density table.
            source_url: Optional page URL to display at the top.
            score: Precomputed score; computed when omitted.

        Returns:
            Path to the created document.
        """
        output_path = Path(output_path)
        if output_path.suffix.lower() != ".docx":
            output_path = output_path.with_suffix(".docx")

        score = score or score_content(content, self.config)

        self.doc.add_heading("SEO Content Report", level=1)
        if source_url:
            url_para = self.doc.add_paragraph()
            url_para.add_run("Target Page: ").bold = True
            url_para.add_run(source_url)

        self._add_score_summary(score)
        self._add_meta_table(content)
        self._add_issues(score)
        self._add_density_table(content, list(secondary_keywords))
        self._add_keyword_lists(content)

        self.doc.save(str(output_path))
        logger.info(f"Wrote SEO report to {output_path}")
        return output_path

    def _add_header_row(self, table, headers: list[str]) -> None:
        header_cells = table.rows[0].cells
        for i, header in enumerate(headers):
            header_cells[i].text = header
            for paragraph in header_cells[i].paragraphs:
                for run in paragraph.runs:
                    run.font.bold = True
            set_cell_shading(header_cells[i], HEADER_SHADING)

    def _new_table(self, headers: list[str], widths: list):
        table = self.doc.add_table(rows=1, cols=len(headers))
        table.style = "Table Grid"
        table.alignment = WD_TABLE_ALIGNMENT.LEFT
        for i, width in enumerate(widths):
            table.columns[i].width = width
        self._add_header_row(table, headers)
        return table

    def _add_score_summary(self, score: SEOScore) -> None:
        self.doc.add_heading("Score Summary", level=2)
        para = self.doc.add_paragraph()
        para.add_run("SEO score: ")
        run = para.add_run(f"{score.score}/100")
        run.bold = True
        run.font.highlight_color = score_highlight(score.score, self.config)

    def _add_meta_table(self, content: ContentRecord) -> None:
        self.doc.add_heading("Meta Elements", level=2)
        table = self._new_table(
            ["Element", "Current", "Length", "Suggested"],
            [Inches(1.2), Inches(2.6), Inches(0.8), Inches(2.6)],
        )

        rows = [
            (
                "Title",
                content.title,
                optimize_title(content.title, content.keyword, self.config.title_max_length),
            ),
            (
                "Meta Description",
                content.description,
                optimize_meta_description(
                    content.description, content.keyword, self.config.description_max_length
                ),
            ),
        ]
        for element, current, suggested in rows:
            cells = table.add_row().cells
            cells[0].text = element
            cells[1].text = current or "(None)"
            cells[2].text = str(len(current))
            cells[3].text = suggested if suggested != current else "(No change)"

        self.doc.add_paragraph()

    def _add_issues(self, score: SEOScore) -> None:
        self.doc.add_heading("Issues", level=2)
        if not score.issues:
            self.doc.add_paragraph("No issues found.")
        else:
            table = self._new_table(["#", "Issue"], [Inches(0.5), Inches(6.7)])
            for number, issue in enumerate(score.issues, start=1):
                cells = table.add_row().cells
                cells[0].text = str(number)
                cells[1].text = issue

        self.doc.add_heading("Suggestions", level=2)
        for suggestion in score.suggestions:
            self.doc.add_paragraph(suggestion, style="List Bullet")

    def _add_density_table(self, content: ContentRecord, secondary: list[str]) -> None:
        self.doc.add_heading("Keyword Density", level=2)
        table = self._new_table(
            ["Keyword", "Density", "Status"],
            [Inches(3.6), Inches(1.2), Inches(1.4)],
        )
        densities = multi_density(content.body, [content.keyword, *secondary])
        for keyword, value in densities.items():
            cells = table.add_row().cells
            cells[0].text = keyword
            cells[1].text = f"{value:.2f}%"
            cells[2].text = density_status(value, self.config)

        self.doc.add_paragraph()

    def _add_keyword_lists(self, content: ContentRecord) -> None:
        top = extract_keywords(content.body, tables=self.tables)
        self.doc.add_heading("Top Keywords", level=2)
        self.doc.add_paragraph(", ".join(top) if top else "(None found)")

        related = related_keywords(content.keyword, tables=self.tables)
        if related:
            self.doc.add_heading("Related Keywords", level=2)
            for term in related:
                self.doc.add_paragraph(term, style="List Bullet")


def write_seo_report(
    content: ContentRecord,
    output_path: Union[str, Path],
    secondary_keywords: Iterable[str] = (),
    source_url: Optional[str] = None,
    config: Optional[ScoringConfig] = None,
    tables: Optional[KeywordTables] = None,
) -> Path:
    """
    Convenience function to write an SEO report to docx.

    Args:
        content: Content to audit.
        output_path: Output file path.
        secondary_keywords: Extra keywords for the density table.
        source_url: Optional page URL shown in the header.
        config: Optional scoring config.
        tables: Optional keyword tables.

    Returns:
        Path to created document.
    """
    writer = SeoReportWriter(config=config, tables=tables)
    return writer.write(
        content,
        output_path,
        secondary_keywords=secondary_keywords,
        source_url=source_url,
    )
