"""Tests for sitemap generation."""
import xml.etree.ElementTree as ET
from datetime import datetime

import pytest
from hypothesis import given, strategies as st

from portfolio.services.seo.constants import ChangeFrequency
from portfolio.services.seo.models import SitemapURL
from portfolio.services.seo.sitemap_generator import SitemapGenerator, StaticPage, generate_sitemap

NAMESPACE = {"sm": "http://www.sitemaps.org/schemas/sitemap/0.9"}
LASTMOD = datetime(2024, 1, 15, 10, 30, 0)


class TestGenerateSitemap:
    """Test the sitemap document layout."""

    def test_single_url_document(self):
        urls = [
            SitemapURL(
                loc="https://example.com/",
                lastmod="2024-01-15T10:30:00.000Z",
                changefreq="weekly",
                priority=1.0,
            ),
        ]
        assert generate_sitemap(urls) == "\n".join([
            '<?xml version="1.0" encoding="UTF-8"?>',
            '<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">',
            "  <url>",
            "    <loc>https://example.com/</loc>",
            "    <lastmod>2024-01-15T10:30:00.000Z</lastmod>",
            "    <changefreq>weekly</changefreq>",
            "    <priority>1</priority>",
            "  </url>",
            "</urlset>",
        ])

    def test_empty_urlset(self):
        assert generate_sitemap([]).endswith('<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">\n</urlset>')

    def test_loc_is_escaped(self):
        urls = [SitemapURL(loc="https://example.com/a&b", lastmod="x", changefreq="daily", priority=0.5)]
        output = generate_sitemap(urls)
        assert "<loc>https://example.com/a&amp;b</loc>" in output
        assert "<priority>0.5</priority>" in output

    @given(st.lists(
        st.tuples(
            st.sampled_from([freq.value for freq in ChangeFrequency]),
            st.floats(min_value=0.0, max_value=1.0),
        ),
        max_size=10,
    ))
    def test_one_url_block_per_entry(self, entries):
        """Property: The document parses and holds one <url> per entry."""
        urls = [
            SitemapURL(loc=f"https://example.com/page-{i}", lastmod="2024-01-15T10:30:00.000Z",
                       changefreq=changefreq, priority=priority)
            for i, (changefreq, priority) in enumerate(entries)
        ]
        root = ET.fromstring(generate_sitemap(urls).encode("utf-8"))
        blocks = root.findall("sm:url", NAMESPACE)
        assert len(blocks) == len(urls)
        for block, url in zip(blocks, urls):
            assert block.find("sm:loc", NAMESPACE).text == url.loc
            assert block.find("sm:changefreq", NAMESPACE).text == url.changefreq


class TestSitemapGenerator:
    """Test the page-driven generator."""

    @pytest.mark.parametrize("site_url", ["https://example.com", "https://example.com/"])
    def test_home_page_entry(self, site_url):
        generator = SitemapGenerator(site_url)
        urls = generator.generate_static_urls(LASTMOD)
        assert len(urls) == 1
        assert urls[0].loc == "https://example.com/"
        assert urls[0].lastmod == "2024-01-15T10:30:00.000Z"
        assert urls[0].changefreq == "weekly"
        assert urls[0].priority == 1.0

    def test_custom_pages(self):
        pages = [
            StaticPage(path="/", priority=1.0, changefreq=ChangeFrequency.WEEKLY),
            StaticPage(path="/projects", priority=0.8, changefreq=ChangeFrequency.MONTHLY),
        ]
        urls = SitemapGenerator("https://example.com", pages=pages).generate_static_urls(LASTMOD)
        assert [url.loc for url in urls] == ["https://example.com/", "https://example.com/projects"]

    def test_sitemap_xml(self):
        xml = SitemapGenerator("https://example.com").generate_sitemap_xml(LASTMOD)
        assert "<loc>https://example.com/</loc>" in xml
        assert "<priority>1</priority>" in xml
        assert "<changefreq>weekly</changefreq>" in xml
        assert "<lastmod>2024-01-15T10:30:00.000Z</lastmod>" in xml

    def test_nan_page_priority_never_reaches_document(self):
        pages = [StaticPage(path="/", priority=float("nan"), changefreq=ChangeFrequency.WEEKLY)]
        generator = SitemapGenerator("https://example.com", pages=pages)
        with pytest.raises(ValueError):
            generator.generate_sitemap_xml(LASTMOD)
