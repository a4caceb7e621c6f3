"""Application configuration using Pydantic Settings.

This module centralizes all configuration values that may vary between environments.
Values can be overridden via environment variables or .env file.

SEO configuration is resolved per request by resolve_seo_config(), which checks
three layers for each key: caller-supplied bindings, then process environment
(through Settings), then literal defaults. An empty string counts as absent
at every layer.
"""
import logging
from dataclasses import replace
from functools import lru_cache
from typing import Mapping, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from portfolio.services.seo.constants import SEO_CONSTANTS
from portfolio.services.seo.content import ProfileContent, ProfileDataLoader
from portfolio.services.seo.models import AnalyticsConfig, SEOConfig, SiteInfo, SiteMeta

logger = logging.getLogger(__name__)

PRODUCTION = "production"
DEVELOPMENT = "development"

Env = Mapping[str, Optional[str]]


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        # Allow extra fields from .env that aren't defined here
        extra="ignore",
    )

    # ===== Site Identity =====
    SITE_URL: Optional[str] = None
    SITE_DOMAIN: Optional[str] = None

    # ===== Analytics =====
    GA_MEASUREMENT_ID: Optional[str] = None
    GSC_VERIFICATION_ID: Optional[str] = None

    # ===== Environment =====
    ENVIRONMENT: Optional[str] = None

    # ===== Social =====
    TWITTER_HANDLE: Optional[str] = None

    # ===== Content =====
    PROFILE_DATA_PATH: Optional[str] = None

    # ===== Logging =====
    LOG_LEVEL: str = "INFO"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance for application-level values.

    SEO values are not read from here: resolve_seo_config() builds a fresh
    Settings so each request sees the current environment.
    """
    return Settings()


ENV_DEFAULTS = {
    "SITE_URL": SEO_CONSTANTS.DEFAULT_SITE_URL,
    "SITE_DOMAIN": SEO_CONSTANTS.DEFAULT_SITE_DOMAIN,
    "GA_MEASUREMENT_ID": "",
    "GSC_VERIFICATION_ID": "",
    "ENVIRONMENT": PRODUCTION,
}


def get_env(key: str, env: Optional[Env] = None, settings: Optional[Settings] = None) -> str:
    """Return the first non-empty value for key across bindings, process env and defaults."""
    if env and env.get(key):
        return env[key]

    if settings is None:
        settings = Settings()
    value = getattr(settings, key, None)
    if value:
        return value

    return ENV_DEFAULTS.get(key, "")


def resolve_environment(env: Optional[Env] = None, settings: Optional[Settings] = None) -> str:
    """Anything other than "production" runs as development."""
    environment = get_env("ENVIRONMENT", env, settings)
    logger.debug(f"Resolved environment {environment!r}")
    return PRODUCTION if environment == PRODUCTION else DEVELOPMENT


def resolve_site_config(env: Optional[Env] = None, settings: Optional[Settings] = None) -> dict:
    """Resolve the configurable parts of the site identity."""
    if settings is None:
        settings = Settings()
    return {
        "url": get_env("SITE_URL", env, settings),
        "domain": get_env("SITE_DOMAIN", env, settings),
    }


def resolve_analytics_config(env: Optional[Env] = None, settings: Optional[Settings] = None) -> AnalyticsConfig:
    """Resolve analytics identifiers; debug mode is on outside production."""
    if settings is None:
        settings = Settings()
    return AnalyticsConfig(
        google_analytics_id=get_env("GA_MEASUREMENT_ID", env, settings),
        google_search_console_id=get_env("GSC_VERIFICATION_ID", env, settings),
        enable_debug=resolve_environment(env, settings) != PRODUCTION,
    )


def resolve_seo_config(
    env: Optional[Env] = None,
    settings: Optional[Settings] = None,
    content: Optional[ProfileContent] = None,
) -> SEOConfig:
    """Build the complete SEO configuration.

    Args:
        env: Runtime bindings that take precedence over the process environment
        settings: Settings to read the process layer from (a fresh instance if None)
        content: Profile content; loaded from the configured file if None

    Returns:
        Immutable SEOConfig
    """
    if settings is None:
        settings = Settings()
    if content is None:
        content = ProfileDataLoader(settings.PROFILE_DATA_PATH).load()

    site_config = resolve_site_config(env, settings)
    site_url = site_config["url"]
    profile_image = f"{site_url.rstrip('/')}{SEO_CONSTANTS.PROFILE_IMAGE_PATH}"

    return SEOConfig(
        site=SiteInfo(
            name=SEO_CONSTANTS.SITE_NAME,
            url=site_url,
            domain=site_config["domain"],
            author=SEO_CONSTANTS.SITE_AUTHOR,
            description=SEO_CONSTANTS.SITE_DESCRIPTION,
        ),
        meta=SiteMeta(
            title=SEO_CONSTANTS.SITE_NAME,
            description=SEO_CONSTANTS.SITE_DESCRIPTION,
            keywords=list(SEO_CONSTANTS.ALL_KEYWORDS),
            og_image=profile_image,
        ),
        person=replace(content.person, image=profile_image),
        analytics=resolve_analytics_config(env, settings),
        environment=resolve_environment(env, settings),
    )
