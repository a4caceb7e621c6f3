"""Value records consumed by the SEO formatters.

Every record is immutable and request-scoped: it is built from the resolved
configuration or the profile content file, handed to a formatter, and dropped
once the formatter returns its markup.
"""
import math
from dataclasses import dataclass, field
from typing import List, Optional
from urllib.parse import urlsplit

from portfolio.services.seo.constants import SEO_CONSTANTS


@dataclass(frozen=True)
class SiteInfo:
    """Global site identity.

    Attributes:
        name: Site name shown in titles and og:site_name
        url: Absolute, protocol-qualified site URL
        domain: Bare domain without protocol
        author: Site owner
        description: Default site description
    """
    name: str
    url: str
    domain: str
    author: str
    description: str


@dataclass(frozen=True)
class MetaTagsConfig:
    """Page-level SEO metadata."""
    title: str
    description: str
    canonical_url: str
    keywords: Optional[List[str]] = None
    author: Optional[str] = None


@dataclass(frozen=True)
class OpenGraphTags:
    """Open Graph preview metadata (og_image should be at least 1200x630px)."""
    og_title: str
    og_description: str
    og_image: str
    og_type: str
    og_url: str
    og_site_name: Optional[str] = None


@dataclass(frozen=True)
class TwitterCardTags:
    """Twitter Card preview metadata."""
    twitter_card: str
    twitter_title: str
    twitter_description: str
    twitter_image: str
    twitter_site: Optional[str] = None
    twitter_creator: Optional[str] = None

    def __post_init__(self):
        card = getattr(self.twitter_card, "value", self.twitter_card)
        if card not in SEO_CONSTANTS.VALID_TWITTER_CARDS:
            raise ValueError(f"Invalid twitter card type: {self.twitter_card!r}")
        object.__setattr__(self, "twitter_card", card)


@dataclass(frozen=True)
class Location:
    city: str
    region: str
    country: str


@dataclass(frozen=True)
class SocialProfiles:
    github: str
    linkedin: str


@dataclass(frozen=True)
class PersonData:
    """Profile subject. Email and phone are opaque strings."""
    name: str
    job_title: str
    email: str
    phone: str
    location: Location
    social_profiles: SocialProfiles
    image: Optional[str] = None
    bio: Optional[str] = None


@dataclass(frozen=True)
class ExperienceData:
    """One employment period."""
    company: str
    role: str
    description: str
    start_date: str
    location: str
    end_date: Optional[str] = None
    skills: Optional[List[str]] = None
    company_url: Optional[str] = None


@dataclass(frozen=True)
class ProjectData:
    """One showcased project."""
    name: str
    description: str
    technologies: List[str] = field(default_factory=list)
    url: Optional[str] = None
    date_created: Optional[str] = None
    date_published: Optional[str] = None


@dataclass(frozen=True)
class EducationData:
    """One academic credential."""
    institution: str
    degree: str
    field: str
    start_date: str
    end_date: str
    gpa: Optional[str] = None
    location: Optional[str] = None


@dataclass(frozen=True)
class SitemapURL:
    """One crawlable page entry.

    A finite priority is clamped into [0, 1]. The change frequency must be one of the
    sitemap protocol values and loc must be absolute with no query string or
    fragment.

    Raises:
        ValueError: If changefreq, loc or priority are invalid
    """
    loc: str
    lastmod: str
    changefreq: str
    priority: float

    def __post_init__(self):
        changefreq = getattr(self.changefreq, "value", self.changefreq)
        if changefreq not in SEO_CONSTANTS.VALID_CHANGE_FREQUENCIES:
            raise ValueError(f"Invalid change frequency: {self.changefreq!r}")

        parts = urlsplit(self.loc)
        if not parts.scheme or not parts.netloc:
            raise ValueError(f"Sitemap loc must be an absolute URL: {self.loc!r}")
        if parts.query or parts.fragment or "?" in self.loc or "#" in self.loc:
            raise ValueError(f"Sitemap loc must not carry a query or fragment: {self.loc!r}")

        priority = float(self.priority)
        if not math.isfinite(priority):
            raise ValueError(f"Sitemap priority must be a finite number: {self.priority!r}")
        priority = min(max(priority, 0.0), 1.0)
        object.__setattr__(self, "changefreq", changefreq)
        object.__setattr__(self, "priority", priority)


@dataclass(frozen=True)
class SiteMeta:
    """Default page metadata derived from the site identity."""
    title: str
    description: str
    keywords: List[str]
    og_image: str


@dataclass(frozen=True)
class AnalyticsConfig:
    """Third-party analytics identifiers.

    Attributes:
        google_analytics_id: GA4 measurement ID ("" when not configured)
        google_search_console_id: Search Console verification token
        enable_debug: Emit analytics in debug mode (development only)
    """
    google_analytics_id: str = ""
    google_search_console_id: str = ""
    enable_debug: bool = False


@dataclass(frozen=True)
class SEOConfig:
    """Aggregate root built once per request from environment and defaults."""
    site: SiteInfo
    meta: SiteMeta
    person: PersonData
    analytics: AnalyticsConfig
    environment: str

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def sitemap_url(self) -> str:
        return f"{self.site.url.rstrip('/')}{SEO_CONSTANTS.SITEMAP_PATH}"
