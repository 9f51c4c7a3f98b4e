"""
Meta tag assembly for a page head.

Combines the canonical URL, scalar fields and structured data into an
ordered MetaTagBundle. Tag order is fixed:

1. title, meta title, description, keywords
2. canonical and hreflang alternate
3. robots / googlebot, author / publisher
4. Open Graph block (plus article:* tags for articles)
5. Twitter block
6. one JSON-LD script with every structured-data node
"""

import html
import logging
from typing import Optional

from .config import SiteConfig, resolve_site
from .models import MetaTagBundle, PageMeta, StructuredData
from .structured_data import (
    article_schema,
    breadcrumb_schema,
    faq_page_schema,
    organization_schema,
    software_application_schema,
    to_json_ld,
    website_schema,
)

logger = logging.getLogger(__name__)

INDEX_FOLLOW = "index, follow"
NOINDEX_NOFOLLOW = "noindex, nofollow"


def _strip_path(path: str) -> str:
    """Drop query string, fragment and trailing slashes from a path."""
    path = path.split("?", 1)[0].split("#", 1)[0]
    return path.rstrip("/")


def canonicalize(path: str, site: Optional[SiteConfig] = None) -> str:
    """
    Build the canonical URL for a path.

    Args:
        path: Site-relative path, e.g. ``"/blog/my-post/?ref=home"``.
        site: Optional site config.

    Returns:
        Site origin followed by the path without query string or trailing
        slash. The root path maps to the bare origin.

    Examples:
        >>> canonicalize("/blog/my-post/?ref=home")
        'https://forexfactory.cc/blog/my-post'
    """
    site = resolve_site(site)
    clean = _strip_path(path or "")
    if clean and not clean.startswith("/"):
        clean = f"/{clean}"
    return f"{site.site_url}{clean}"


def is_root_path(path: str) -> bool:
    """Check if a path points at the site root."""
    return _strip_path(path or "") == ""


def build_structured_data(page: PageMeta, site: Optional[SiteConfig] = None) -> list[StructuredData]:
    """
    Collect the structured-data nodes for a page, in output order.

    WebSite is always first. Organization follows on the root path only.
    Article, SoftwareApplication, FAQPage and BreadcrumbList are added when
    their inputs are present; the caller's custom node comes last.
    """
    site = resolve_site(site)
    nodes: list[StructuredData] = [website_schema(site)]

    if is_root_path(page.path):
        nodes.append(organization_schema(site))
    if page.article is not None:
        nodes.append(article_schema(page.article, site))
    if page.software is not None:
        nodes.append(software_application_schema(page.software, site))
    if page.faq_items:
        nodes.append(faq_page_schema(page.faq_items))
    if page.breadcrumbs:
        nodes.append(breadcrumb_schema(page.breadcrumbs))
    if page.custom_structured_data is not None:
        nodes.append(page.custom_structured_data)

    return nodes


def _meta_name(name: str, content: str) -> str:
    return f'<meta name="{name}" content="{html.escape(content)}" />'


def _meta_property(prop: str, content: str) -> str:
    return f'<meta property="{prop}" content="{html.escape(content)}" />'


def _link(rel: str, href: str, extra: str = "") -> str:
    return f'<link rel="{rel}"{extra} href="{html.escape(href)}" />'


def assemble(page: PageMeta, site: Optional[SiteConfig] = None) -> MetaTagBundle:
    """
    Generate every head tag for a page.

    Args:
        page: Page metadata and optional entity inputs.
        site: Optional site config.

    Returns:
        MetaTagBundle with tags in a deterministic order.
    """
    site = resolve_site(site)

    canonical_url = page.canonical or canonicalize(page.path, site)
    description = page.description.strip() or site.default_description
    full_title = f"{page.title} | {site.site_name}"
    author = page.author or site.site_name
    publisher_name = page.publisher_name or site.site_name
    publisher_url = page.publisher_url or site.site_url
    image = page.og_image or site.default_og_image
    robots = NOINDEX_NOFOLLOW if page.no_index else INDEX_FOLLOW

    tags: list[str] = [
        f"<title>{html.escape(full_title, quote=False)}</title>",
        _meta_name("title", full_title),
        _meta_name("description", description),
    ]
    if page.keywords:
        tags.append(_meta_name("keywords", page.keywords))

    tags.append(_link("canonical", canonical_url))
    tags.append(_link("alternate", canonical_url, extra=' hreflang="en"'))

    tags.append(_meta_name("robots", robots))
    tags.append(_meta_name("googlebot", robots))
    tags.append(_meta_name("author", author))
    tags.append(_meta_name("publisher", publisher_name))

    # Open Graph
    tags.extend([
        _meta_property("og:type", page.og_type),
        _meta_property("og:url", canonical_url),
        _meta_property("og:title", page.title),
        _meta_property("og:description", description),
        _meta_property("og:image", image),
        _meta_property("og:site_name", site.site_name),
        _meta_property("og:locale", site.locale),
    ])
    if page.published_time:
        tags.append(_meta_property("article:published_time", page.published_time))
    if page.modified_time:
        tags.append(_meta_property("article:modified_time", page.modified_time))
    if page.og_type == "article":
        tags.append(_meta_property("article:author", author))
        tags.append(_meta_property("article:publisher", publisher_url))

    # Twitter
    tags.extend([
        _meta_property("twitter:card", "summary_large_image"),
        _meta_property("twitter:url", canonical_url),
        _meta_property("twitter:title", page.title),
        _meta_property("twitter:description", description),
        _meta_property("twitter:image", image),
        _meta_property("twitter:site", site.twitter_handle),
        _meta_property("twitter:creator", site.twitter_handle),
    ])

    nodes = build_structured_data(page, site)
    tags.append(f'<script type="application/ld+json">{to_json_ld(nodes)}</script>')

    logger.debug(f"Assembled {len(tags)} head tags for {canonical_url}")

    return MetaTagBundle(
        title=full_title,
        canonical_url=canonical_url,
        tags=tuple(tags),
        structured_data=tuple(node.to_dict() for node in nodes),
    )
