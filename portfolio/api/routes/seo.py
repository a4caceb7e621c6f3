"""Crawler-facing files: sitemap.xml and robots.txt."""
import logging

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse, Response

from portfolio.api.dependencies import get_seo_config
from portfolio.services.seo.models import SEOConfig
from portfolio.services.seo.robots import generate_robots_txt
from portfolio.services.seo.sitemap_generator import SitemapGenerator

logger = logging.getLogger(__name__)

router = APIRouter(tags=["seo"])


@router.get("/sitemap.xml")
async def sitemap(seo_config: SEOConfig = Depends(get_seo_config)):
    """Generate the sitemap for the site's pages."""
    generator = SitemapGenerator(seo_config.site.url)
    sitemap_xml = generator.generate_sitemap_xml()
    return Response(content=sitemap_xml, media_type="application/xml")


@router.get("/robots.txt", response_class=PlainTextResponse)
async def robots(seo_config: SEOConfig = Depends(get_seo_config)):
    """Generate robots.txt referencing the absolute sitemap URL."""
    logger.info(f"Serving robots.txt with sitemap {seo_config.sitemap_url}")
    return PlainTextResponse(generate_robots_txt(seo_config.sitemap_url))
