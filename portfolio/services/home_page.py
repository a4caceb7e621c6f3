"""Assembles the template context for the home page."""
from typing import Any, Dict, Optional

from portfolio.services.seo.analytics import (
    generate_analytics_init_code,
    generate_analytics_script,
    generate_search_console_tag,
)
from portfolio.services.seo.constants import SEO_CONSTANTS
from portfolio.services.seo.content import ProfileContent
from portfolio.services.seo.images import (
    ResponsiveImageConfig,
    generate_optimized_img,
    generate_responsive_image,
)
from portfolio.services.seo.meta_tags import generate_meta_tags
from portfolio.services.seo.models import (
    MetaTagsConfig,
    OpenGraphTags,
    SEOConfig,
    TwitterCardTags,
)
from portfolio.services.seo.structured_data import (
    generate_creative_work_schema,
    generate_education_schema,
    generate_person_schema,
    generate_work_experience_schema,
    render_json_ld_script,
)


class HomePageBuilder:
    """Builds everything the index template needs from config and content.

    The meta fragment, JSON-LD blocks and analytics snippets are produced
    here as ready-made markup; the template only places them.
    """

    def __init__(self, seo_config: SEOConfig, content: ProfileContent, twitter_handle: Optional[str] = None):
        self.seo_config = seo_config
        self.content = content
        self.twitter_handle = twitter_handle

    def build_meta_tags(self) -> str:
        site = self.seo_config.site
        meta = self.seo_config.meta
        return generate_meta_tags(
            MetaTagsConfig(
                title=meta.title,
                description=meta.description,
                canonical_url=site.url,
                keywords=meta.keywords,
                author=site.author,
            ),
            OpenGraphTags(
                og_title=meta.title,
                og_description=meta.description,
                og_image=meta.og_image,
                og_type=SEO_CONSTANTS.OG_TYPE_WEBSITE,
                og_url=site.url,
                og_site_name=site.name,
            ),
            TwitterCardTags(
                twitter_card=SEO_CONSTANTS.DEFAULT_TWITTER_CARD,
                twitter_title=meta.title,
                twitter_description=meta.description,
                twitter_image=meta.og_image,
                twitter_site=self.twitter_handle,
                twitter_creator=self.twitter_handle,
            ),
        )

    def build_structured_data(self) -> list:
        """Person, work experience, projects and education, in that order."""
        payloads = [
            generate_person_schema(self.seo_config.person, self.seo_config.site.url),
            generate_work_experience_schema(self.content.experience),
            generate_creative_work_schema(self.content.projects, self.seo_config.person.name),
            generate_education_schema(self.content.education),
        ]
        return [render_json_ld_script(payload) for payload in payloads]

    def build_context(self) -> Dict[str, Any]:
        analytics = self.seo_config.analytics
        person = self.seo_config.person
        return {
            "meta_tags": self.build_meta_tags(),
            "structured_data": self.build_structured_data(),
            "search_console_tag": generate_search_console_tag(analytics),
            "analytics_script": generate_analytics_script(analytics),
            "analytics_init": generate_analytics_init_code(analytics),
            "avatar": generate_responsive_image(ResponsiveImageConfig(
                src=person.image,
                alt=person.name,
                loading="eager",
                class_name="hero-avatar",
            )),
            "logo": generate_optimized_img(ResponsiveImageConfig(
                src=SEO_CONSTANTS.LOGO_PATH,
                alt="",
                loading="eager",
                class_name="nav-logo-mark",
            )),
            "site": self.seo_config.site,
            "person": person,
            "experience": self.content.experience,
            "projects": self.content.projects,
            "education": self.content.education,
        }
