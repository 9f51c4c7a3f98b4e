"""
On-page SEO scoring.

Scores a ContentRecord from 100 down by applying a fixed set of independent
rules (title length, description length, keyword placement, body length,
keyword density). Each violated rule adds an issue; density problems also
add a suggestion. A closing suggestion reflects the final score band.
"""

import logging
from typing import Optional

from .config import DEFAULT_SCORING, ScoringConfig
from .keyword_analyzer import density
from .models import ContentRecord, SEOScore
from .tokenizer import word_count

logger = logging.getLogger(__name__)


def score_content(content: ContentRecord, config: Optional[ScoringConfig] = None) -> SEOScore:
    """
    Score the on-page SEO of a piece of content.

    Rules, applied in this order:
    - title shorter than 30 / longer than 60 characters
    - keyword missing from the title (case-insensitive)
    - description shorter than 120 / longer than 160 characters
    - keyword missing from the description
    - body shorter than 300 words
    - keyword density below 1% or above 3%

    Args:
        content: The content to score.
        config: Optional thresholds and weights.

    Returns:
        SEOScore with a score in [0, 100], issues and suggestions.
    """
    config = config or DEFAULT_SCORING
    issues: list[str] = []
    suggestions: list[str] = []
    score = 100

    keyword = content.keyword.lower()

    # Title
    if len(content.title) < config.title_min_length:
        issues.append(f"Title is too short (< {config.title_min_length} characters)")
        score -= config.title_short_penalty
    if len(content.title) > config.title_max_length:
        issues.append(f"Title is too long (> {config.title_max_length} characters)")
        score -= config.title_long_penalty
    if keyword not in content.title.lower():
        issues.append("Primary keyword not in title")
        score -= config.keyword_missing_title_penalty

    # Meta description
    if len(content.description) < config.description_min_length:
        issues.append(
            f"Meta description is too short (< {config.description_min_length} characters)"
        )
        score -= config.description_short_penalty
    if len(content.description) > config.description_max_length:
        issues.append(
            f"Meta description is too long (> {config.description_max_length} characters)"
        )
        score -= config.description_long_penalty
    if keyword not in content.description.lower():
        issues.append("Primary keyword not in meta description")
        score -= config.keyword_missing_description_penalty

    # Body
    if word_count(content.body) < config.body_min_words:
        issues.append(f"Content is too short (< {config.body_min_words} words)")
        score -= config.content_short_penalty

    body_density = density(content.body, content.keyword)
    if body_density < config.density_min:
        issues.append(f"Keyword density too low (< {config.density_min:g}%)")
        suggestions.append("Add more instances of your primary keyword naturally")
        score -= config.density_low_penalty
    elif body_density > config.density_max:
        issues.append(f"Keyword density too high (> {config.density_max:g}%)")
        suggestions.append("Reduce keyword stuffing for better readability")
        score -= config.density_high_penalty

    score = max(0, score)

    if score >= config.excellent_score:
        suggestions.append("Your content is well-optimized!")
    elif score >= config.good_score:
        suggestions.append("Good SEO foundation, minor improvements needed")
    else:
        suggestions.append("Consider reviewing SEO best practices")

    logger.debug(f"Scored '{content.title[:40]}': {score} ({len(issues)} issues)")

    return SEOScore(score=score, issues=tuple(issues), suggestions=tuple(suggestions))
