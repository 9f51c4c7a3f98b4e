"""
Title and meta description generation from templates.

Templates are static TemplateDefinition records. Rendering substitutes
``{key}`` placeholders and then enforces the template's length bounds:
- titles: hard ceiling of 60 characters (57 + "...")
- descriptions: ceiling of 160 characters (157 + "..."); descriptions
  shorter than 150 characters get the site's call-to-action suffix when it
  still fits under the ceiling

Placeholders with no matching variable are left in the output as literal
``{key}`` text, so missing data is visible to editors instead of silently
dropped.
"""

import logging
import re
from types import MappingProxyType
from typing import Mapping, Optional

from .config import SiteConfig, resolve_site
from .models import TemplateDefinition

logger = logging.getLogger(__name__)

TITLE_MAX_LENGTH = 60
DESCRIPTION_MAX_LENGTH = 160
DESCRIPTION_MIN_LENGTH = 150
ELLIPSIS = "..."

_PLACEHOLDER_RE = re.compile(r"\{(\w+)\}")


class TemplateNotFoundError(KeyError):
    """Raised when a template name is not defined."""
    pass


def _title(name: str, pattern: str, *examples: str) -> TemplateDefinition:
    return TemplateDefinition(name, pattern, TITLE_MAX_LENGTH, examples=examples)


def _description(name: str, pattern: str, *examples: str) -> TemplateDefinition:
    return TemplateDefinition(
        name, pattern, DESCRIPTION_MAX_LENGTH, DESCRIPTION_MIN_LENGTH, examples=examples
    )


TITLE_TEMPLATES: Mapping[str, TemplateDefinition] = MappingProxyType({
    t.name: t for t in (
        _title(
            "HOME",
            "{primary} - Best {secondary} & MT4/MT5 Trading Bots",
            "Forex Factory - Best Expert Advisors & MT4/MT5 Trading Bots",
        ),
        _title(
            "BLOG_POST",
            "{title} | {category} - {site}",
            "Top 10 Scalping EAs for MT4 | Expert Advisors - ForexFactory",
        ),
        _title(
            "DOWNLOAD",
            "{name} {version} - Free {type} Download | {platform}",
            "Gold Scalper EA v2.0 - Free MT4 Download | ForexFactory",
        ),
        _title(
            "CATEGORY",
            "Best {category} {year} - {count}+ Free Downloads",
            "Best Scalping EAs 2024 - 50+ Free Downloads",
        ),
        _title(
            "SEARCH",
            "Search: {query} - {results} Expert Advisors Found",
            "Search: Martingale - 23 Expert Advisors Found",
        ),
    )
})

DESCRIPTION_TEMPLATES: Mapping[str, TemplateDefinition] = MappingProxyType({
    t.name: t for t in (
        _description(
            "HOME",
            "Download free {primary} for MT4/MT5. Access {count}+ professional trading robots, "
            "indicators & automated strategies. Updated {year}.",
        ),
        _description(
            "BLOG_POST",
            "Learn about {topic} with our comprehensive guide. Discover {benefit} and improve "
            "your {outcome}. Expert tips included.",
        ),
        _description(
            "DOWNLOAD",
            "Download {name} - {type} for {platform}. Features: {features}. {performance}. "
            "Free download with setup guide.",
        ),
        _description(
            "SIGNAL",
            "Browse {topic} for MT4/MT5. Get {benefit} and achieve {outcome}. "
            "Download free trading robots today.",
        ),
        _description(
            "CATEGORY",
            "Browse {count}+ free {category} for {platforms}. Compare features, download "
            "instantly & get setup guides. Updated {date}.",
        ),
    )
})


def get_template(templates: Mapping[str, TemplateDefinition], name: str) -> TemplateDefinition:
    """
    Look up a template by name (case-insensitive).

    Raises:
        TemplateNotFoundError: If no template has that name.
    """
    template = templates.get(name) or templates.get(name.upper())
    if template is None:
        raise TemplateNotFoundError(
            f"Unknown template '{name}'. Available: {', '.join(templates)}"
        )
    return template


def substitute(pattern: str, variables: Mapping[str, object]) -> str:
    """
    Replace ``{key}`` placeholders with values from ``variables``.

    Every occurrence of a placeholder is replaced. Placeholders without a
    value stay as literal text. Values are inserted verbatim and are never
    scanned for further placeholders.
    """
    def _replace(match: re.Match) -> str:
        key = match.group(1)
        if key in variables:
            return str(variables[key])
        return match.group(0)

    return _PLACEHOLDER_RE.sub(_replace, pattern)


def truncate(text: str, max_length: int) -> str:
    """Cut text to max_length characters, ending in '...' when cut.

    Limits too small to hold the ellipsis give a partial ellipsis.
    """
    max_length = max(max_length, 0)
    if len(text) <= max_length:
        return text
    if max_length < len(ELLIPSIS):
        return ELLIPSIS[:max_length]
    return text[:max_length - len(ELLIPSIS)] + ELLIPSIS


def render_title(name: str, variables: Mapping[str, object]) -> str:
    """
    Render a title template.

    Args:
        name: Template name (HOME, BLOG_POST, DOWNLOAD, CATEGORY, SEARCH).
        variables: Placeholder values.

    Returns:
        Title of at most 60 characters.
    """
    template = get_template(TITLE_TEMPLATES, name)
    title = substitute(template.pattern, variables)
    if len(title) > template.max_length:
        logger.warning(f"Title template {template.name} truncated from {len(title)} chars")
    return truncate(title, template.max_length)


def render_description(
    name: str,
    variables: Mapping[str, object],
    site: Optional[SiteConfig] = None,
) -> str:
    """
    Render a meta description template.

    Descriptions over the ceiling are truncated. Descriptions under the
    minimum length get the site's call-to-action suffix, but only when the
    result still fits under the ceiling; the output never exceeds 160
    characters.

    Args:
        name: Template name (HOME, BLOG_POST, DOWNLOAD, SIGNAL, CATEGORY).
        variables: Placeholder values.
        site: Optional site config supplying the call-to-action.

    Returns:
        Description of at most 160 characters.
    """
    template = get_template(DESCRIPTION_TEMPLATES, name)
    description = substitute(template.pattern, variables)

    if len(description) > template.max_length:
        return truncate(description, template.max_length)

    if template.min_length is not None and len(description) < template.min_length:
        with_cta = description + resolve_site(site).call_to_action
        if len(with_cta) <= template.max_length:
            return with_cta

    return description


def optimize_title(title: str, keyword: str, max_length: int = TITLE_MAX_LENGTH) -> str:
    """Prefix the keyword when the title lacks it, then enforce max_length."""
    if keyword and keyword.lower() not in title.lower():
        title = f"{keyword} - {title}"
    return truncate(title, max_length)


def optimize_meta_description(
    description: str,
    keyword: str,
    max_length: int = DESCRIPTION_MAX_LENGTH,
) -> str:
    """Prefix the keyword when the description lacks it, then enforce max_length."""
    if keyword and keyword.lower() not in description.lower():
        description = f"{keyword} - {description}"
    return truncate(description, max_length)
