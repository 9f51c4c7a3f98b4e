"""
Data models for the Content SEO Engine.

This module defines the records passed into and returned from the engine.
Every instance is created fresh per call and never mutated afterwards.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Literal, Mapping, Optional, Union


SCHEMA_CONTEXT = "https://schema.org"


class Difficulty(Enum):
    """Ranking difficulty of a keyword."""
    EASY = "Easy"
    MEDIUM = "Medium"
    HARD = "Hard"


class SearchVolume(Enum):
    """Relative search volume of a keyword."""
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class PageType(Enum):
    """Page types with predefined keyword targeting."""
    HOME = "HOME"
    BLOG = "BLOG"
    DOWNLOADS = "DOWNLOADS"
    PRODUCT = "PRODUCT"
    CATEGORY = "CATEGORY"


@dataclass(frozen=True)
class ContentRecord:
    """The on-page content of a single page, as edited in the CMS."""
    title: str
    description: str
    body: str
    keyword: str
    slug: Optional[str] = None


@dataclass(frozen=True)
class SEOScore:
    """Result of scoring a ContentRecord."""
    score: int
    issues: tuple[str, ...] = ()
    suggestions: tuple[str, ...] = ()

    @property
    def has_issues(self) -> bool:
        """Check if any rule was violated."""
        return len(self.issues) > 0

    def to_dict(self) -> dict:
        return {
            "score": self.score,
            "issues": list(self.issues),
            "suggestions": list(self.suggestions),
        }


@dataclass(frozen=True)
class CompetitionAnalysis:
    """Static competition estimate for a keyword."""
    keyword: str
    difficulty: Difficulty
    volume: SearchVolume
    recommendation: str

    def to_dict(self) -> dict:
        return {
            "keyword": self.keyword,
            "difficulty": self.difficulty.value,
            "volume": self.volume.value,
            "recommendation": self.recommendation,
        }


@dataclass(frozen=True)
class StuffingCheck:
    """Outcome of the keyword-stuffing checker."""
    is_stuffed: bool
    density: float
    recommendation: str


@dataclass(frozen=True)
class KeywordSuggestions:
    """Keyword targeting for a page type."""
    primary: str
    secondary: tuple[str, ...]
    target_density: float
    semantic_keywords: tuple[str, ...]


@dataclass(frozen=True)
class TemplateDefinition:
    """
    A named title or description template.

    The pattern contains zero or more ``{key}`` placeholders. max_length is
    the hard ceiling applied after substitution; min_length, when set, is the
    length below which a call-to-action suffix is appended.
    """
    name: str
    pattern: str
    max_length: int
    min_length: Optional[int] = None
    examples: tuple[str, ...] = ()


# =============================================================================
# Structured data inputs
# =============================================================================

@dataclass(frozen=True)
class AggregateRatingInput:
    """Rating summary attached to a SoftwareApplication."""
    rating_value: float
    review_count: int


@dataclass(frozen=True)
class ArticleInput:
    """Fields needed for an Article node."""
    title: str
    description: str
    date_published: str
    author: str
    url: str
    date_modified: Optional[str] = None
    image: Optional[str] = None


@dataclass(frozen=True)
class SoftwareApplicationInput:
    """Fields needed for a SoftwareApplication node (a downloadable tool)."""
    name: str
    description: str
    application_category: str
    operating_system: str
    software_version: str
    download_url: str
    date_published: str
    date_modified: Optional[str] = None
    file_size: Optional[str] = None
    aggregate_rating: Optional[AggregateRatingInput] = None


@dataclass(frozen=True)
class FAQItem:
    """A question/answer pair."""
    question: str
    answer: str


@dataclass(frozen=True)
class BreadcrumbItem:
    """One step of a breadcrumb trail."""
    name: str
    url: str


# =============================================================================
# Structured data nodes (tagged union)
# =============================================================================

SchemaType = Literal[
    "Organization",
    "Article",
    "SoftwareApplication",
    "FAQPage",
    "BreadcrumbList",
    "WebSite",
]


@dataclass(frozen=True)
class StructuredDataNode:
    """
    A schema.org entity of one of the known top-level types.

    Fields are kept in insertion order so the serialized JSON-LD is
    reproducible. Nested entities are plain mappings with their own
    ``@type`` and no ``@context``.
    """
    schema_type: SchemaType
    fields: Mapping[str, Any]

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-LD ready mapping."""
        return {"@context": SCHEMA_CONTEXT, "@type": self.schema_type, **self.fields}


@dataclass(frozen=True)
class CustomStructuredData:
    """
    Opaque caller-supplied JSON-LD passed through unchanged.

    ``@context`` is added when the caller left it out.
    """
    data: Mapping[str, Any]

    @property
    def schema_type(self) -> Optional[str]:
        return self.data.get("@type")

    def to_dict(self) -> dict[str, Any]:
        result = dict(self.data)
        result.setdefault("@context", SCHEMA_CONTEXT)
        return result


StructuredData = Union[StructuredDataNode, CustomStructuredData]


# =============================================================================
# Meta tag assembly
# =============================================================================

OgType = Literal["website", "article", "product"]


@dataclass(frozen=True)
class PageMeta:
    """
    Everything the head of one page is generated from.

    Only title and description are required. Entity inputs are optional;
    each one that is present adds its structured-data node.
    """
    title: str
    description: str
    path: str = ""
    keywords: Optional[str] = None
    canonical: Optional[str] = None
    og_image: Optional[str] = None
    og_type: OgType = "website"
    author: Optional[str] = None
    published_time: Optional[str] = None
    modified_time: Optional[str] = None
    no_index: bool = False
    article: Optional[ArticleInput] = None
    software: Optional[SoftwareApplicationInput] = None
    faq_items: tuple[FAQItem, ...] = ()
    breadcrumbs: tuple[BreadcrumbItem, ...] = ()
    custom_structured_data: Optional[CustomStructuredData] = None
    publisher_name: Optional[str] = None
    publisher_url: Optional[str] = None

    @classmethod
    def from_content(cls, content: ContentRecord, path: str = "", **extras) -> "PageMeta":
        """Build page metadata from a ContentRecord.

        When no path is given and the record has a slug, the page is
        assumed to live at ``/<slug>``.
        """
        if not path and content.slug:
            path = f"/{content.slug}"
        return cls(
            title=content.title,
            description=content.description,
            path=path,
            keywords=extras.pop("keywords", content.keyword or None),
            **extras,
        )


@dataclass(frozen=True)
class MetaTagBundle:
    """Ordered, rendered head fragments for one page."""
    title: str
    canonical_url: str
    tags: tuple[str, ...]
    structured_data: tuple[dict, ...]

    def render(self) -> str:
        """Join the tags into a head snippet, one tag per line."""
        return "\n".join(self.tags)

    def __iter__(self):
        return iter(self.tags)

    def __len__(self) -> int:
        return len(self.tags)
