from contextlib import asynccontextmanager
from pathlib import Path
from typing import Mapping, Optional
import logging

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from portfolio.api.middleware import CacheHeadersMiddleware
from portfolio.api.routes.health import router as health_router
from portfolio.api.routes.pages import router as pages_router
from portfolio.api.routes.seo import router as seo_router
from portfolio.config import get_settings

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).resolve().parent / "static"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown events."""
    logger.info("Starting up portfolio site...")
    yield
    logger.info("Shutting down portfolio site...")


def create_app(env_bindings: Optional[Mapping[str, Optional[str]]] = None) -> FastAPI:
    """Create FastAPI application and include routers.

    Args:
        env_bindings: Runtime configuration that takes precedence over the
            process environment when resolving SEO settings
    """
    settings = get_settings()
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    app = FastAPI(
        title="Portfolio Site",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.env_bindings = dict(env_bindings) if env_bindings else None

    app.add_middleware(CacheHeadersMiddleware)

    app.include_router(pages_router)
    app.include_router(seo_router)
    app.include_router(health_router)
    app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")
    return app


app = create_app()
