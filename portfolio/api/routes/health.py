"""Health check endpoints."""
import logging

from fastapi import APIRouter, Request, Response, status

from portfolio.api.schemas import ComponentHealthSchema, DetailedHealthSchema, HealthSchema
from portfolio.config import get_settings, resolve_environment
from portfolio.services.seo.content import ProfileDataLoader

logger = logging.getLogger(__name__)

HEALTHY = "healthy"
UNHEALTHY = "unhealthy"

router = APIRouter()


@router.get("/health", tags=["health"], response_model=HealthSchema)
async def simple_health_check() -> HealthSchema:
    """
    Simple health check for load balancer - no dependency checks.

    Returns HTTP 200 OK if the application is running.
    """
    return HealthSchema(status="ok")


def _check_profile_content() -> ComponentHealthSchema:
    try:
        ProfileDataLoader(get_settings().PROFILE_DATA_PATH).load()
    except (ValueError, IOError) as e:
        logger.warning(f"Profile content check failed: {e}")
        return ComponentHealthSchema(name="profile_content", status=UNHEALTHY, detail=str(e))
    return ComponentHealthSchema(name="profile_content", status=HEALTHY)


@router.get("/health/detailed", tags=["health"], response_model=DetailedHealthSchema)
async def detailed_health_check(request: Request, response: Response) -> DetailedHealthSchema:
    """
    Detailed health check with dependency checks.

    Returns HTTP 200 if the profile content loads, HTTP 503 otherwise.
    """
    components = [_check_profile_content()]
    healthy = all(component.status == HEALTHY for component in components)

    response.status_code = status.HTTP_200_OK if healthy else status.HTTP_503_SERVICE_UNAVAILABLE
    bindings = getattr(request.app.state, "env_bindings", None)
    return DetailedHealthSchema(
        status=HEALTHY if healthy else UNHEALTHY,
        environment=resolve_environment(bindings),
        components=components,
    )
