"""Shared dependencies for page and crawler routes."""
import logging

from fastapi import Depends, HTTPException, Request

from portfolio.config import get_settings, resolve_seo_config
from portfolio.services.seo.content import ProfileContent, ProfileDataLoader
from portfolio.services.seo.models import SEOConfig

logger = logging.getLogger(__name__)


def get_profile_content() -> ProfileContent:
    """Load the profile content for this request.

    Raises:
        HTTPException: 500 if the content file is missing or invalid
    """
    settings = get_settings()
    try:
        return ProfileDataLoader(settings.PROFILE_DATA_PATH).load()
    except (ValueError, IOError) as e:
        logger.error(f"Error loading profile content: {e}")
        raise HTTPException(status_code=500, detail="Profile content unavailable")


def get_seo_config(
    request: Request,
    content: ProfileContent = Depends(get_profile_content),
) -> SEOConfig:
    """Resolve SEO configuration, letting the app's runtime bindings win over the environment."""
    bindings = getattr(request.app.state, "env_bindings", None)
    return resolve_seo_config(bindings, content=content)
