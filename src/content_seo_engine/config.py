# -*- coding: utf-8 -*-
"""
Centralized configuration for the Content SEO Engine.

This module provides immutable configuration dataclasses:
- SiteConfig: site identity used by templates, structured data and meta tags
- ScoringConfig: thresholds and deduction weights for on-page scoring

Both are frozen so a single instance can be shared across threads.
"""

import os
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class SiteConfig:
    """
    Identity of the site the engine generates metadata for.

    Attributes:
        site_url: Site origin without a trailing slash. Prefixed to paths
            by canonicalize() and used in every schema.org node.
        site_name: Human-readable site name (og:site_name, publisher, ...).
        tagline: Short description used by the WebSite node.
        logo_path: Path of the logo image relative to the origin.
        og_image_path: Path of the default Open Graph image.
        twitter_handle: Handle used for twitter:site / twitter:creator.
        support_email: Contact email placed in the Organization node.
        social_profiles: URLs listed in Organization.sameAs.
        organization_description: Description of the Organization node.
        default_description: Fallback meta description for blank input.
        call_to_action: Suffix appended to short rendered descriptions.
        locale: og:locale value.
    """

    site_url: str = "https://forexfactory.cc"
    site_name: str = "ForexFactory.cc"
    tagline: str = "Best Forex Robots, EA Trading & MT4/MT5 Expert Advisors"
    logo_path: str = "/logo.png"
    og_image_path: str = "/og-image.png"
    twitter_handle: str = "@forexfactorycc"
    support_email: str = "support@forexfactory.cc"
    social_profiles: tuple[str, ...] = (
        "https://twitter.com/forexfactorycc",
        "https://facebook.com/forexfactorycc",
        "https://linkedin.com/company/forexfactorycc",
    )
    organization_description: str = (
        "Leading provider of free Forex Expert Advisors (EA), MT4/MT5 indicators, "
        "and automated trading solutions"
    )
    default_description: str = (
        "Download 500+ free Expert Advisors for MT4/MT5. "
        "Professional Forex robots updated daily."
    )
    call_to_action: str = " Start trading smarter today."
    locale: str = "en_US"

    def __post_init__(self):
        """Validate configuration values."""
        if not self.site_url.startswith(("http://", "https://")):
            raise ValueError(
                f"site_url must start with 'http://' or 'https://', got '{self.site_url}'"
            )
        if self.site_url.endswith("/"):
            raise ValueError(f"site_url must not end with '/', got '{self.site_url}'")
        if not self.site_name.strip():
            raise ValueError("site_name must not be empty")
        for path_field in ("logo_path", "og_image_path"):
            value = getattr(self, path_field)
            if not value.startswith("/"):
                raise ValueError(f"{path_field} must start with '/', got '{value}'")

    @property
    def logo_url(self) -> str:
        """Absolute URL of the site logo."""
        return f"{self.site_url}{self.logo_path}"

    @property
    def default_og_image(self) -> str:
        """Absolute URL of the default Open Graph image."""
        return f"{self.site_url}{self.og_image_path}"

    @property
    def search_url_template(self) -> str:
        """URL template advertised by the WebSite SearchAction."""
        return f"{self.site_url}/search?q={{search_term_string}}"

    @classmethod
    def from_env(cls, **overrides) -> "SiteConfig":
        """Create config honoring the SITE_URL environment variable.

        Args:
            **overrides: Override any config values.

        Returns:
            SiteConfig with site_url taken from SITE_URL when set.
        """
        defaults = {}
        env_url = os.environ.get("SITE_URL")
        if env_url:
            defaults["site_url"] = env_url.rstrip("/")
        defaults.update(overrides)
        return cls(**defaults)


@dataclass(frozen=True)
class ScoringConfig:
    """
    Thresholds and weights for the on-page content scorer.

    Lengths are in characters, body length in words, densities in percent.
    Every deduction is independent; the scorer applies them in a fixed order.
    """

    title_min_length: int = 30
    title_max_length: int = 60
    description_min_length: int = 120
    description_max_length: int = 160
    body_min_words: int = 300

    # Optimal keyword density band (inclusive)
    density_min: float = 1.0
    density_max: float = 3.0

    # Deductions
    title_short_penalty: int = 10
    title_long_penalty: int = 10
    keyword_missing_title_penalty: int = 15
    description_short_penalty: int = 10
    description_long_penalty: int = 10
    keyword_missing_description_penalty: int = 10
    content_short_penalty: int = 15
    density_low_penalty: int = 10
    density_high_penalty: int = 15

    # Closing suggestion bands
    excellent_score: int = 90
    good_score: int = 70

    # Stuffing checker (separate, looser band than the scorer)
    stuffing_threshold: float = 3.5
    understuffed_threshold: float = 0.5

    def __post_init__(self):
        """Validate configuration values."""
        if self.title_min_length > self.title_max_length:
            raise ValueError(
                f"title_min_length ({self.title_min_length}) must be <= "
                f"title_max_length ({self.title_max_length})"
            )
        if self.description_min_length > self.description_max_length:
            raise ValueError(
                f"description_min_length ({self.description_min_length}) must be <= "
                f"description_max_length ({self.description_max_length})"
            )
        if not 0 <= self.density_min <= self.density_max <= 100:
            raise ValueError(
                f"density band must satisfy 0 <= min <= max <= 100, "
                f"got [{self.density_min}, {self.density_max}]"
            )
        if self.good_score > self.excellent_score:
            raise ValueError(
                f"good_score ({self.good_score}) must be <= excellent_score ({self.excellent_score})"
            )

    def is_density_optimal(self, density: float) -> bool:
        """Check if a density (percent) falls inside the optimal band."""
        return self.density_min <= density <= self.density_max


DEFAULT_SITE = SiteConfig()
DEFAULT_SCORING = ScoringConfig()


def resolve_site(site: Optional[SiteConfig]) -> SiteConfig:
    """Return the given site config or the process-wide default."""
    return site if site is not None else DEFAULT_SITE
