"""SEO service module: meta tags, structured data, sitemap and robots.txt."""
from portfolio.services.seo.constants import (
    SEO_CONSTANTS,
    ChangeFrequency,
    SchemaType,
    TwitterCardType,
)
from portfolio.services.seo.models import (
    AnalyticsConfig,
    EducationData,
    ExperienceData,
    MetaTagsConfig,
    OpenGraphTags,
    PersonData,
    ProjectData,
    SEOConfig,
    SiteInfo,
    SitemapURL,
    TwitterCardTags,
)
from portfolio.services.seo.meta_tags import generate_meta_tags
from portfolio.services.seo.structured_data import render_json_ld_script
from portfolio.services.seo.sitemap_generator import SitemapGenerator, generate_sitemap
from portfolio.services.seo.robots import generate_robots_txt
from portfolio.services.seo.content import ProfileContent, ProfileDataLoader

__all__ = [
    "SEO_CONSTANTS",
    "ChangeFrequency",
    "SchemaType",
    "TwitterCardType",
    "AnalyticsConfig",
    "EducationData",
    "ExperienceData",
    "MetaTagsConfig",
    "OpenGraphTags",
    "PersonData",
    "ProjectData",
    "SEOConfig",
    "SiteInfo",
    "SitemapURL",
    "TwitterCardTags",
    "generate_meta_tags",
    "render_json_ld_script",
    "SitemapGenerator",
    "generate_sitemap",
    "generate_robots_txt",
    "ProfileContent",
    "ProfileDataLoader",
]
