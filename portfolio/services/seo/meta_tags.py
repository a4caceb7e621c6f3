"""HTML meta tag generation for search engines and social previews.

Produces the head fragment for a page: charset and viewport declarations,
title, description, keywords, author, canonical link, Open Graph tags and
Twitter Card tags. Every configured value goes through escape_html before
interpolation; only the fixed tag syntax is emitted raw.
"""
from typing import List, Optional

from portfolio.services.seo.constants import SEO_CONSTANTS
from portfolio.services.seo.formatting import (
    escape_html,
    is_present,
    present_items,
    truncate_description,
)
from portfolio.services.seo.models import MetaTagsConfig, OpenGraphTags, TwitterCardTags


def _meta_name(name: str, content: str) -> str:
    return f'<meta name="{name}" content="{escape_html(content)}">'


def _meta_property(prop: str, content: str) -> str:
    return f'<meta property="{prop}" content="{escape_html(content)}">'


def generate_basic_meta_tags(config: MetaTagsConfig) -> str:
    """Generate charset, viewport, title, description, keywords, author and canonical tags.

    Args:
        config: Page-level metadata

    Returns:
        Newline-joined HTML tags
    """
    tags: List[str] = [
        SEO_CONSTANTS.CHARSET_TAG,
        SEO_CONSTANTS.VIEWPORT_TAG,
        f"<title>{escape_html(config.title)}</title>",
        _meta_name("description", truncate_description(config.description)),
    ]

    keywords = present_items(config.keywords)
    if keywords:
        tags.append(_meta_name("keywords", ", ".join(keywords)))

    if is_present(config.author):
        tags.append(_meta_name("author", config.author))

    tags.append(f'<link rel="canonical" href="{escape_html(config.canonical_url)}">')
    return "\n".join(tags)


def generate_open_graph_tags(config: OpenGraphTags) -> str:
    """Generate the five required og:* tags plus og:site_name when set."""
    tags = [
        _meta_property("og:title", config.og_title),
        _meta_property("og:description", config.og_description),
        _meta_property("og:image", config.og_image),
        _meta_property("og:type", config.og_type),
        _meta_property("og:url", config.og_url),
    ]
    if is_present(config.og_site_name):
        tags.append(_meta_property("og:site_name", config.og_site_name))
    return "\n".join(tags)


def generate_twitter_card_tags(config: TwitterCardTags) -> str:
    """Generate the four required twitter:* tags plus optional handles."""
    tags = [
        _meta_name("twitter:card", config.twitter_card),
        _meta_name("twitter:title", config.twitter_title),
        _meta_name("twitter:description", config.twitter_description),
        _meta_name("twitter:image", config.twitter_image),
    ]
    if is_present(config.twitter_site):
        tags.append(_meta_name("twitter:site", config.twitter_site))
    if is_present(config.twitter_creator):
        tags.append(_meta_name("twitter:creator", config.twitter_creator))
    return "\n".join(tags)


def generate_meta_tags(
    meta: MetaTagsConfig,
    open_graph: Optional[OpenGraphTags] = None,
    twitter: Optional[TwitterCardTags] = None,
) -> str:
    """Compose basic, Open Graph and Twitter Card tags into one fragment.

    Args:
        meta: Page-level metadata
        open_graph: Open Graph tags; the block is skipped when None
        twitter: Twitter Card tags; the block is skipped when None

    Returns:
        HTML fragment for the document head
    """
    sections = [generate_basic_meta_tags(meta)]
    if open_graph is not None:
        sections.append(generate_open_graph_tags(open_graph))
    if twitter is not None:
        sections.append(generate_twitter_card_tags(twitter))
    return "\n".join(sections)
