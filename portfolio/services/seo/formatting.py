"""Escaping and formatting helpers shared by the SEO formatters."""
import math
from datetime import datetime, timezone
from typing import Iterable, List, Optional
import xml.sax.saxutils as saxutils

from portfolio.services.seo.constants import SEO_CONSTANTS

_HTML_ESCAPES = str.maketrans({
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#039;",
})

_XML_ATTRIBUTE_ENTITIES = {
    '"': "&quot;",
    "'": "&apos;",
}


def escape_html(text: str) -> str:
    """Escape the five HTML special characters for use in text or attributes."""
    return text.translate(_HTML_ESCAPES)


def escape_xml(text: str) -> str:
    """Escape XML special characters.

    Call once per raw value; already-escaped input is escaped again.
    """
    return saxutils.escape(text, _XML_ATTRIBUTE_ENTITIES)


def truncate_description(text: str, max_length: int = SEO_CONSTANTS.DESCRIPTION_MAX_LENGTH) -> str:
    """Shorten a description to at most max_length characters.

    Text that already fits is returned unchanged. Longer text keeps its first
    max_length - 3 characters followed by "...".
    """
    if len(text) <= max_length:
        return text
    suffix = SEO_CONSTANTS.TRUNCATION_SUFFIX
    return text[:max_length - len(suffix)] + suffix


def is_present(value: Optional[str]) -> bool:
    """Optional string fields count as absent when None or blank."""
    return value is not None and bool(str(value).strip())


def present_items(values: Optional[Iterable[str]]) -> List[str]:
    """Drop blank entries from an optional list of strings."""
    if not values:
        return []
    return [value for value in values if is_present(value)]


def format_iso_datetime(date_obj: Optional[datetime] = None) -> str:
    """Format a timestamp as ISO-8601 UTC with millisecond precision.

    Naive datetimes are taken to be UTC. Defaults to the current time.
    """
    if date_obj is None:
        date_obj = datetime.now(timezone.utc)
    elif date_obj.tzinfo is None:
        date_obj = date_obj.replace(tzinfo=timezone.utc)
    date_obj = date_obj.astimezone(timezone.utc)
    return date_obj.strftime("%Y-%m-%dT%H:%M:%S") + f".{date_obj.microsecond // 1000:03d}Z"


def format_priority(priority: float) -> str:
    """Render a sitemap priority in its shortest numeric form (1.0 -> "1").

    Raises:
        ValueError: If priority is NaN or infinite
    """
    value = float(priority)
    if not math.isfinite(value):
        raise ValueError(f"Invalid sitemap priority: {priority!r}")
    value = min(max(value, 0.0), 1.0)
    if value.is_integer():
        return str(int(value))
    return repr(value)
