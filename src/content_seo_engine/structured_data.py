"""
schema.org JSON-LD builders.

One builder per supported entity type. Each returns a StructuredDataNode
whose ``to_dict()`` yields the JSON-LD mapping with field names and nesting
exactly as search engines expect them. Field order is fixed so serialized
output is reproducible.
"""

import json
from typing import Any, Iterable, Optional

from .config import SiteConfig, resolve_site
from .models import (
    ArticleInput,
    BreadcrumbItem,
    FAQItem,
    SoftwareApplicationInput,
    StructuredData,
    StructuredDataNode,
)

BEST_RATING = 5
WORST_RATING = 1


def organization_schema(site: Optional[SiteConfig] = None) -> StructuredDataNode:
    """Build the Organization node for the site owner."""
    site = resolve_site(site)
    return StructuredDataNode("Organization", {
        "name": site.site_name,
        "url": site.site_url,
        "logo": site.logo_url,
        "description": site.organization_description,
        "sameAs": list(site.social_profiles),
        "contactPoint": {
            "@type": "ContactPoint",
            "contactType": "customer support",
            "email": site.support_email,
            "availableLanguage": ["English"],
        },
    })


def article_schema(article: ArticleInput, site: Optional[SiteConfig] = None) -> StructuredDataNode:
    """
    Build an Article node.

    dateModified falls back to datePublished and image to the site's
    default Open Graph image. The publisher is the site Organization.
    """
    site = resolve_site(site)
    return StructuredDataNode("Article", {
        "headline": article.title,
        "description": article.description,
        "datePublished": article.date_published,
        "dateModified": article.date_modified or article.date_published,
        "author": {
            "@type": "Person",
            "name": article.author,
        },
        "publisher": {
            "@type": "Organization",
            "name": site.site_name,
            "logo": {
                "@type": "ImageObject",
                "url": site.logo_url,
            },
        },
        "image": article.image or site.default_og_image,
        "mainEntityOfPage": {
            "@type": "WebPage",
            "@id": article.url,
        },
    })


def software_application_schema(
    app: SoftwareApplicationInput,
    site: Optional[SiteConfig] = None,
) -> StructuredDataNode:
    """
    Build a SoftwareApplication node for a free download.

    fileSize and aggregateRating are only present when supplied.
    """
    site = resolve_site(site)
    fields: dict[str, Any] = {
        "name": app.name,
        "description": app.description,
        "applicationCategory": app.application_category,
        "operatingSystem": app.operating_system,
        "softwareVersion": app.software_version,
        "downloadUrl": app.download_url,
        "datePublished": app.date_published,
        "dateModified": app.date_modified or app.date_published,
        "provider": {
            "@type": "Organization",
            "name": site.site_name,
            "url": site.site_url,
        },
        "offers": {
            "@type": "Offer",
            "price": "0",
            "priceCurrency": "USD",
        },
    }
    if app.file_size:
        fields["fileSize"] = app.file_size
    if app.aggregate_rating is not None:
        fields["aggregateRating"] = {
            "@type": "AggregateRating",
            "ratingValue": app.aggregate_rating.rating_value,
            "reviewCount": app.aggregate_rating.review_count,
            "bestRating": BEST_RATING,
            "worstRating": WORST_RATING,
        }
    return StructuredDataNode("SoftwareApplication", fields)


def faq_page_schema(items: Iterable[FAQItem]) -> StructuredDataNode:
    """Build an FAQPage node with one Question per item."""
    return StructuredDataNode("FAQPage", {
        "mainEntity": [
            {
                "@type": "Question",
                "name": item.question,
                "acceptedAnswer": {
                    "@type": "Answer",
                    "text": item.answer,
                },
            }
            for item in items
        ],
    })


def breadcrumb_schema(items: Iterable[BreadcrumbItem]) -> StructuredDataNode:
    """Build a BreadcrumbList node; positions start at 1 in input order."""
    return StructuredDataNode("BreadcrumbList", {
        "itemListElement": [
            {
                "@type": "ListItem",
                "position": position,
                "name": item.name,
                "item": item.url,
            }
            for position, item in enumerate(items, start=1)
        ],
    })


def website_schema(site: Optional[SiteConfig] = None) -> StructuredDataNode:
    """Build the WebSite node with its site-search action."""
    site = resolve_site(site)
    return StructuredDataNode("WebSite", {
        "name": site.site_name,
        "url": site.site_url,
        "description": site.tagline,
        "potentialAction": {
            "@type": "SearchAction",
            "target": {
                "@type": "EntryPoint",
                "urlTemplate": site.search_url_template,
            },
            "query-input": "required name=search_term_string",
        },
    })


def to_json_ld(nodes: Iterable[StructuredData]) -> str:
    """
    Serialize nodes for a ``<script type="application/ld+json">`` block.

    A single node is written as an object, several as an array. Output is
    compact and keeps non-ASCII text; ``</`` is escaped so the payload can
    never close the surrounding script element.
    """
    payload = [node.to_dict() for node in nodes]
    data: Any = payload[0] if len(payload) == 1 else payload
    serialized = json.dumps(data, ensure_ascii=False, separators=(",", ":"))
    return serialized.replace("</", "<\\/")
