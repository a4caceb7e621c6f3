"""Server-rendered portfolio page."""
import logging
from pathlib import Path

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from portfolio.api.dependencies import get_profile_content, get_seo_config
from portfolio.config import get_settings
from portfolio.services.home_page import HomePageBuilder
from portfolio.services.seo.content import ProfileContent
from portfolio.services.seo.models import SEOConfig

logger = logging.getLogger(__name__)

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent.parent / "templates"))

router = APIRouter(tags=["pages"])


@router.get("/", response_class=HTMLResponse)
async def home_page(
    request: Request,
    seo_config: SEOConfig = Depends(get_seo_config),
    content: ProfileContent = Depends(get_profile_content),
):
    """Render the portfolio page with meta tags, JSON-LD and analytics."""
    builder = HomePageBuilder(seo_config, content, twitter_handle=get_settings().TWITTER_HANDLE)
    context = builder.build_context()
    logger.info(f"Rendered home page for {seo_config.site.url} ({seo_config.environment})")
    return templates.TemplateResponse(request=request, name="index.html", context=context)
