"""Constants for the SEO metadata service."""
from enum import Enum


class TwitterCardType(str, Enum):
    """Twitter card types accepted by twitter:card."""
    SUMMARY = "summary"
    SUMMARY_LARGE_IMAGE = "summary_large_image"
    APP = "app"
    PLAYER = "player"


class ChangeFrequency(str, Enum):
    """Sitemap protocol change frequencies."""
    ALWAYS = "always"
    HOURLY = "hourly"
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"
    NEVER = "never"


class SchemaType(str, Enum):
    """Top-level Schema.org types emitted as JSON-LD."""
    PERSON = "Person"
    WORK_EXPERIENCE = "WorkExperience"
    CREATIVE_WORK = "CreativeWork"
    EDUCATIONAL_CREDENTIAL = "EducationalOccupationalCredential"


class SEO_CONSTANTS:
    """Constants for metadata generation and site defaults."""

    # Character limits for SEO content
    DESCRIPTION_MAX_LENGTH = 160
    TRUNCATION_SUFFIX = "..."

    # Fixed document-level tags
    CHARSET_TAG = '<meta charset="UTF-8">'
    VIEWPORT_TAG = '<meta name="viewport" content="width=device-width, initial-scale=1.0">'

    # JSON-LD schema context
    SCHEMA_CONTEXT = "https://schema.org"

    # Sitemap protocol
    SITEMAP_XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'
    SITEMAP_NAMESPACE = "http://www.sitemaps.org/schemas/sitemap/0.9"
    SITEMAP_PATH = "/sitemap.xml"
    ROBOTS_PATH = "/robots.txt"

    # Social preview defaults
    OG_TYPE_WEBSITE = "website"
    DEFAULT_TWITTER_CARD = TwitterCardType.SUMMARY_LARGE_IMAGE.value
    PROFILE_IMAGE_PATH = "/static/profile.jpg"
    LOGO_PATH = "/static/favicon.svg"

    # Site identity
    DEFAULT_SITE_URL = "https://sandeepkommineni.me"
    DEFAULT_SITE_DOMAIN = "sandeepkommineni.me"
    SITE_NAME = "Sandeep Kommineni — AI/ML Engineer & Full-Stack Developer"
    SITE_AUTHOR = "Sandeep Kommineni"
    SITE_DESCRIPTION = (
        "Sandeep Kommineni — AI/ML Engineer building production-grade AI platforms. "
        "Expert in Generative AI, LLMs, real-time systems, and full-stack development."
    )

    # Keyword groups, combined in this order
    PRIMARY_KEYWORDS = [
        "Sandeep Kommineni",
        "AI/ML Engineer",
        "Full-Stack Developer",
        "Generative AI Engineer",
        "LLM Engineer",
        "AI Developer",
    ]
    SECONDARY_KEYWORDS = [
        "React Developer",
        "Python Developer",
        "FastAPI",
        "Next.js",
        "LiveKit",
        "OpenAI",
        "Machine Learning",
        "Deep Learning",
        "NLP",
        "Computer Vision",
        "RAG",
        "Agentic AI",
        "Real-time AI",
        "Multimodal AI",
    ]
    LOCATION_KEYWORDS = [
        "Guntur",
        "Andhra Pradesh",
        "India",
        "AI Engineer India",
        "ML Engineer Andhra Pradesh",
    ]
    ALL_KEYWORDS = PRIMARY_KEYWORDS + SECONDARY_KEYWORDS + LOCATION_KEYWORDS

    # Valid enumeration values
    VALID_TWITTER_CARDS = {card.value for card in TwitterCardType}
    VALID_CHANGE_FREQUENCIES = {freq.value for freq in ChangeFrequency}
    VALID_SCHEMA_TYPES = {schema.value for schema in SchemaType}

    # Profile content file
    PROFILE_DATA_FILE_NAME = "profile.json"
