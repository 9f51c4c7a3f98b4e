"""
Content SEO Engine

On-page SEO toolkit for a content site that:
- Scores title, description and body against fixed on-page rules
- Measures keyword density and extracts frequent keywords
- Renders length-bounded titles and meta descriptions from templates
- Generates URL slugs, head meta tags and schema.org JSON-LD
- Writes Word audit reports
"""

__version__ = "1.0.0"
__author__ = "Content SEO Engine Team"

from .config import ScoringConfig, SiteConfig

from .models import (
    ArticleInput,
    AggregateRatingInput,
    BreadcrumbItem,
    CompetitionAnalysis,
    ContentRecord,
    CustomStructuredData,
    Difficulty,
    FAQItem,
    KeywordSuggestions,
    MetaTagBundle,
    PageMeta,
    PageType,
    SearchVolume,
    SEOScore,
    SoftwareApplicationInput,
    StructuredDataNode,
    StuffingCheck,
    TemplateDefinition,
)

from .keyword_tables import KeywordTables, DEFAULT_KEYWORD_TABLES

from .tokenizer import normalize, filter_stop_words, word_count

from .keyword_analyzer import (
    density,
    multi_density,
    is_density_optimal,
    extract_keywords,
    extract_from_slug,
    competition_level,
    semantically_related,
    related_keywords,
    keyword_suggestions,
    check_keyword_stuffing,
    keyword_rich_excerpt,
)

from .scorer import score_content

from .templates import (
    TemplateNotFoundError,
    TITLE_TEMPLATES,
    DESCRIPTION_TEMPLATES,
    render_title,
    render_description,
    optimize_title,
    optimize_meta_description,
)

from .slug import slugify

from .structured_data import (
    organization_schema,
    article_schema,
    software_application_schema,
    faq_page_schema,
    breadcrumb_schema,
    website_schema,
    to_json_ld,
)

from .meta_tags import canonicalize, assemble, build_structured_data

from .keyword_loader import KeywordLoadError, load_keywords, load_keyword_tables

from .report_writer import SeoReportWriter, write_seo_report

__all__ = [
    # Config
    "ScoringConfig",
    "SiteConfig",
    # Models
    "ArticleInput",
    "AggregateRatingInput",
    "BreadcrumbItem",
    "CompetitionAnalysis",
    "ContentRecord",
    "CustomStructuredData",
    "Difficulty",
    "FAQItem",
    "KeywordSuggestions",
    "MetaTagBundle",
    "PageMeta",
    "PageType",
    "SearchVolume",
    "SEOScore",
    "SoftwareApplicationInput",
    "StructuredDataNode",
    "StuffingCheck",
    "TemplateDefinition",
    # Keyword tables
    "KeywordTables",
    "DEFAULT_KEYWORD_TABLES",
    # Tokenizer
    "normalize",
    "filter_stop_words",
    "word_count",
    # Keyword analysis
    "density",
    "multi_density",
    "is_density_optimal",
    "extract_keywords",
    "extract_from_slug",
    "competition_level",
    "semantically_related",
    "related_keywords",
    "keyword_suggestions",
    "check_keyword_stuffing",
    "keyword_rich_excerpt",
    # Scoring
    "score_content",
    # Templates
    "TemplateNotFoundError",
    "TITLE_TEMPLATES",
    "DESCRIPTION_TEMPLATES",
    "render_title",
    "render_description",
    "optimize_title",
    "optimize_meta_description",
    # Slugs
    "slugify",
    # Structured data
    "organization_schema",
    "article_schema",
    "software_application_schema",
    "faq_page_schema",
    "breadcrumb_schema",
    "website_schema",
    "to_json_ld",
    # Meta tags
    "canonicalize",
    "assemble",
    "build_structured_data",
    # Loading / reporting
    "KeywordLoadError",
    "load_keywords",
    "load_keyword_tables",
    "SeoReportWriter",
    "write_seo_report",
]
