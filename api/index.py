"""
FastAPI wrapper for the Content SEO Engine - Vercel Serverless Function.

This module exposes scoring, keyword analysis, template rendering, slug
generation and head meta tag assembly as a REST API.
"""

import logging
from typing import Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse
from pydantic import BaseModel, Field

# Add src to path for imports
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from content_seo_engine import __version__
from content_seo_engine.config import SiteConfig
from content_seo_engine.keyword_analyzer import (
    check_keyword_stuffing,
    competition_level,
    extract_from_slug,
    extract_keywords,
    is_density_optimal,
    keyword_suggestions,
    multi_density,
    related_keywords,
)
from content_seo_engine.meta_tags import assemble
from content_seo_engine.models import (
    AggregateRatingInput,
    ArticleInput,
    BreadcrumbItem,
    ContentRecord,
    CustomStructuredData,
    FAQItem,
    OgType,
    PageMeta,
    SoftwareApplicationInput,
)
from content_seo_engine.scorer import score_content
from content_seo_engine.slug import slugify
from content_seo_engine.templates import TemplateNotFoundError, render_description, render_title

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Content SEO Engine API",
    description="On-page SEO scoring, keyword analysis and head metadata generation",
    version=__version__,
)

# Enable CORS for all origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ============================================================================
# Request / Response Models
# ============================================================================

class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    version: str


class ContentInput(BaseModel):
    """Content to score."""
    title: str
    description: str = ""
    body: str = ""
    keyword: str = Field(..., description="Primary keyword")


class ScoreResponse(BaseModel):
    """Scoring result."""
    score: int
    issues: list[str]
    suggestions: list[str]


class DensityRequest(BaseModel):
    """Request model for keyword density."""
    text: str
    keywords: list[str] = Field(..., min_length=1, description="Keywords to measure")


class DensityItem(BaseModel):
    """Density of one keyword."""
    keyword: str
    density: float
    optimal: bool


class StuffingRequest(BaseModel):
    """Request model for the stuffing check."""
    text: str
    keyword: str


class StuffingResponse(BaseModel):
    """Stuffing check result."""
    is_stuffed: bool
    density: float
    recommendation: str


class ExtractRequest(BaseModel):
    """Request model for keyword extraction."""
    text: str = ""
    slug: Optional[str] = Field(None, description="Also extract focus keywords from this slug")
    limit: int = Field(10, ge=0, le=100)


class ExtractResponse(BaseModel):
    """Extracted keywords."""
    keywords: list[str]
    slug_keywords: list[str] = Field(default_factory=list)


class CompetitionResponse(BaseModel):
    """Competition estimate for a keyword."""
    keyword: str
    difficulty: str
    volume: str
    recommendation: str


class SuggestionsResponse(BaseModel):
    """Keyword targeting for a page type."""
    primary: str
    secondary: list[str]
    target_density: float
    semantic_keywords: list[str]


class SlugRequest(BaseModel):
    """Request model for slug generation."""
    text: str


class TemplateRequest(BaseModel):
    """Request model for title/description rendering."""
    template: str = Field(..., description="Template name, e.g. HOME or BLOG_POST")
    variables: dict[str, str] = Field(default_factory=dict)


class RatingModel(BaseModel):
    rating_value: float
    review_count: int


class ArticleModel(BaseModel):
    title: str
    description: str
    date_published: str
    author: str
    url: str
    date_modified: Optional[str] = None
    image: Optional[str] = None


class SoftwareModel(BaseModel):
    name: str
    description: str
    application_category: str
    operating_system: str
    software_version: str
    download_url: str
    date_published: str
    date_modified: Optional[str] = None
    file_size: Optional[str] = None
    aggregate_rating: Optional[RatingModel] = None


class FAQModel(BaseModel):
    question: str
    answer: str


class BreadcrumbModel(BaseModel):
    name: str
    url: str


class MetaRequest(BaseModel):
    """Request model for head meta tag generation."""
    title: str
    description: str = ""
    path: str = ""
    keywords: Optional[str] = None
    canonical: Optional[str] = None
    og_image: Optional[str] = None
    og_type: OgType = "website"
    author: Optional[str] = None
    publisher_name: Optional[str] = None
    publisher_url: Optional[str] = None
    published_time: Optional[str] = None
    modified_time: Optional[str] = None
    no_index: bool = False
    article: Optional[ArticleModel] = None
    software: Optional[SoftwareModel] = None
    faq_items: list[FAQModel] = Field(default_factory=list)
    breadcrumbs: list[BreadcrumbModel] = Field(default_factory=list)
    structured_data: Optional[dict] = Field(None, description="Custom JSON-LD passed through unchanged")


class MetaResponse(BaseModel):
    """Generated head metadata."""
    title: str
    canonical_url: str
    tags: list[str]
    html: str
    structured_data: list[dict]


# ============================================================================
# Helpers
# ============================================================================

def _to_page_meta(request: MetaRequest) -> PageMeta:
    """Convert the API request into the engine's PageMeta."""
    software = None
    if request.software is not None:
        rating = request.software.aggregate_rating
        software = SoftwareApplicationInput(
            **request.software.model_dump(exclude={"aggregate_rating"}),
            aggregate_rating=AggregateRatingInput(**rating.model_dump()) if rating else None,
        )

    return PageMeta(
        title=request.title,
        description=request.description,
        path=request.path,
        keywords=request.keywords,
        canonical=request.canonical,
        og_image=request.og_image,
        og_type=request.og_type,
        author=request.author,
        publisher_name=request.publisher_name,
        publisher_url=request.publisher_url,
        published_time=request.published_time,
        modified_time=request.modified_time,
        no_index=request.no_index,
        article=ArticleInput(**request.article.model_dump()) if request.article else None,
        software=software,
        faq_items=tuple(FAQItem(**item.model_dump()) for item in request.faq_items),
        breadcrumbs=tuple(BreadcrumbItem(**item.model_dump()) for item in request.breadcrumbs),
        custom_structured_data=(
            CustomStructuredData(request.structured_data) if request.structured_data else None
        ),
    )


# ============================================================================
# Endpoints
# ============================================================================

@app.get("/", response_class=HTMLResponse)
async def root():
    """Serve a landing page pointing at the API docs."""
    return HTMLResponse(content="<h1>Content SEO Engine API</h1><p>Visit <a href='/docs'>/docs</a> for API documentation.</p>")


@app.get("/api/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint."""
    return HealthResponse(
        status="healthy",
        version=__version__,
    )


@app.post("/api/score", response_model=ScoreResponse)
async def score(request: ContentInput):
    """Score the on-page SEO of a piece of content."""
    content = ContentRecord(
        title=request.title,
        description=request.description,
        body=request.body,
        keyword=request.keyword,
    )
    result = score_content(content)
    return ScoreResponse(**result.to_dict())


@app.post("/api/density", response_model=list[DensityItem])
async def density(request: DensityRequest):
    """Keyword density for each requested keyword, in request order."""
    densities = multi_density(request.text, request.keywords)
    return [
        DensityItem(keyword=keyword, density=value, optimal=is_density_optimal(value))
        for keyword, value in densities.items()
    ]


@app.post("/api/density/stuffing", response_model=StuffingResponse)
async def stuffing(request: StuffingRequest):
    """Check a text for keyword stuffing."""
    check = check_keyword_stuffing(request.text, request.keyword)
    return StuffingResponse(
        is_stuffed=check.is_stuffed,
        density=check.density,
        recommendation=check.recommendation,
    )


@app.post("/api/keywords/extract", response_model=ExtractResponse)
async def extract(request: ExtractRequest):
    """Extract the most frequent keywords of a text (and optionally a slug)."""
    return ExtractResponse(
        keywords=extract_keywords(request.text, limit=request.limit),
        slug_keywords=extract_from_slug(request.slug) if request.slug else [],
    )


@app.get("/api/keywords/competition", response_model=CompetitionResponse)
async def competition(keyword: str):
    """Static competition estimate for a keyword."""
    return CompetitionResponse(**competition_level(keyword).to_dict())


@app.get("/api/keywords/related", response_model=list[str])
async def related(keyword: str):
    """Semantic and category peers of a keyword."""
    return related_keywords(keyword)


@app.get("/api/keywords/suggestions/{page_type}", response_model=SuggestionsResponse)
async def suggestions(page_type: str):
    """Keyword targeting for a page type."""
    try:
        result = keyword_suggestions(page_type)
    except ValueError:
        raise HTTPException(status_code=404, detail=f"Unknown page type: {page_type}")

    return SuggestionsResponse(
        primary=result.primary,
        secondary=list(result.secondary),
        target_density=result.target_density,
        semantic_keywords=list(result.semantic_keywords),
    )


@app.post("/api/slug")
async def slug(request: SlugRequest):
    """Convert text to a URL slug."""
    return {"slug": slugify(request.text)}


@app.post("/api/title")
async def title(request: TemplateRequest):
    """Render a title template."""
    try:
        rendered = render_title(request.template, request.variables)
    except TemplateNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.args[0])
    return {"title": rendered, "length": len(rendered)}


@app.post("/api/description")
async def description(request: TemplateRequest):
    """Render a meta description template."""
    try:
        rendered = render_description(request.template, request.variables, site=SiteConfig.from_env())
    except TemplateNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.args[0])
    return {"description": rendered, "length": len(rendered)}


@app.post("/api/meta", response_model=MetaResponse)
async def meta(request: MetaRequest):
    """Generate every head tag for a page."""
    bundle = assemble(_to_page_meta(request), site=SiteConfig.from_env())
    logger.debug(f"Generated {len(bundle)} tags for {bundle.canonical_url}")
    return MetaResponse(
        title=bundle.title,
        canonical_url=bundle.canonical_url,
        tags=list(bundle.tags),
        html=bundle.render(),
        structured_data=list(bundle.structured_data),
    )


@app.get("/api/info")
async def api_info():
    """Get API information and usage instructions."""
    return {
        "name": "Content SEO Engine API",
        "version": __version__,
        "description": "On-page SEO scoring and head metadata generation",
        "endpoints": {
            "GET /api/health": "Health check",
            "POST /api/score": "Score title, description and body for a keyword",
            "POST /api/density": "Keyword density for one or more keywords",
            "POST /api/density/stuffing": "Keyword stuffing check",
            "POST /api/keywords/extract": "Most frequent keywords of a text",
            "GET /api/keywords/competition": "Competition estimate for a keyword",
            "GET /api/keywords/related": "Related keywords",
            "GET /api/keywords/suggestions/{page_type}": "Keyword targeting for a page type",
            "POST /api/slug": "URL slug for a text",
            "POST /api/title": "Render a title template",
            "POST /api/description": "Render a meta description template",
            "POST /api/meta": "Head meta tags and JSON-LD for a page",
            "GET /api/info": "This endpoint",
        },
        "documentation": "/docs",
        "openapi": "/openapi.json",
    }
