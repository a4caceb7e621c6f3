"""Sitemap generation following the sitemap protocol."""
import logging
from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional
from urllib.parse import urljoin

from portfolio.services.seo.constants import SEO_CONSTANTS, ChangeFrequency
from portfolio.services.seo.formatting import escape_xml, format_iso_datetime, format_priority
from portfolio.services.seo.models import SitemapURL

logger = logging.getLogger(__name__)


def generate_sitemap(urls: List[SitemapURL]) -> str:
    """Generate an XML sitemap from URL entries.

    Each entry yields exactly one <url> block with <loc>, <lastmod>,
    <changefreq> and <priority> in that order. Only loc is escaped; the other
    values are constrained dates, enum members and numbers.

    Args:
        urls: Sitemap URL entries

    Returns:
        XML sitemap document
    """
    xml_content = [SEO_CONSTANTS.SITEMAP_XML_DECLARATION]
    xml_content.append(f'<urlset xmlns="{SEO_CONSTANTS.SITEMAP_NAMESPACE}">')

    for url in urls:
        xml_content.append('  <url>')
        xml_content.append(f'    <loc>{escape_xml(url.loc)}</loc>')
        xml_content.append(f'    <lastmod>{url.lastmod}</lastmod>')
        xml_content.append(f'    <changefreq>{url.changefreq}</changefreq>')
        xml_content.append(f'    <priority>{format_priority(url.priority)}</priority>')
        xml_content.append('  </url>')

    xml_content.append('</urlset>')
    return '\n'.join(xml_content)


@dataclass(frozen=True)
class StaticPage:
    """Represents a static page configuration."""
    path: str
    priority: float
    changefreq: ChangeFrequency


class SitemapGenerator:
    """Builds the sitemap entries for the site's pages."""

    def __init__(self, site_url: str, pages: Optional[List[StaticPage]] = None):
        self.site_url = site_url.rstrip('/')
        self.static_pages = pages if pages is not None else self._define_static_pages()

    def _define_static_pages(self) -> List[StaticPage]:
        """The portfolio is a single page."""
        return [
            StaticPage(path="/", priority=1.0, changefreq=ChangeFrequency.WEEKLY),
        ]

    def create_url_entry(self, page: StaticPage, lastmod: Optional[datetime] = None) -> SitemapURL:
        """Create a sitemap URL entry from a static page."""
        return SitemapURL(
            loc=urljoin(self.site_url + '/', page.path.lstrip('/')),
            lastmod=format_iso_datetime(lastmod),
            changefreq=page.changefreq.value,
            priority=page.priority,
        )

    def generate_static_urls(self, lastmod: Optional[datetime] = None) -> List[SitemapURL]:
        """Generate URLs for static pages."""
        return [self.create_url_entry(page, lastmod) for page in self.static_pages]

    def generate_sitemap_xml(self, lastmod: Optional[datetime] = None) -> str:
        """Render the sitemap document for all static pages."""
        urls = self.generate_static_urls(lastmod)
        logger.info(f"Generated sitemap with {len(urls)} URLs for {self.site_url}")
        return generate_sitemap(urls)
