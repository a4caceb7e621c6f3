"""Response headers for caching and basic hardening."""
import re
from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from portfolio.services.seo.constants import SEO_CONSTANTS

STATIC_ASSET_PATTERN = re.compile(r"\.(jpg|jpeg|png|gif|webp|svg|ico|woff|woff2|ttf|eot|css|js)$", re.IGNORECASE)

CACHE_CONTROL_IMMUTABLE = "public, max-age=31536000, immutable"  # 1 year
CACHE_CONTROL_DOCUMENT = "public, max-age=3600, must-revalidate"  # 1 hour
CACHE_CONTROL_CRAWLER_FILES = "public, max-age=86400"  # 1 day

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "SAMEORIGIN",
}


def cache_control_for_path(path: str) -> Optional[str]:
    """Pick the Cache-Control directive for a request path, or None to leave it unset."""
    if STATIC_ASSET_PATTERN.search(path):
        return CACHE_CONTROL_IMMUTABLE
    if path == "/" or path.endswith(".html"):
        return CACHE_CONTROL_DOCUMENT
    if path in (SEO_CONSTANTS.SITEMAP_PATH, SEO_CONSTANTS.ROBOTS_PATH):
        return CACHE_CONTROL_CRAWLER_FILES
    return None


class CacheHeadersMiddleware(BaseHTTPMiddleware):
    """Attach Cache-Control by path to successful responses and the fixed security headers to every response."""

    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)

        # Error responses must not be cached under the long-lived directives.
        cache_control = cache_control_for_path(request.url.path)
        if cache_control and response.status_code < 400:
            response.headers["Cache-Control"] = cache_control

        for name, value in SECURITY_HEADERS.items():
            response.headers[name] = value

        return response
