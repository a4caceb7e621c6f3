"""
Pytest configuration and shared fixtures for the portfolio tests.

This module provides test fixtures for:
- A process environment with no site configuration
- FastAPI test clients with optional runtime bindings
- Resolved SEO configuration and profile content
"""
from typing import Callable, Mapping, Optional

import pytest
from fastapi.testclient import TestClient

from portfolio.config import get_settings, resolve_seo_config
from portfolio.main import create_app
from portfolio.services.seo.content import ProfileDataLoader

CONFIG_ENV_VARS = [
    "SITE_URL",
    "SITE_DOMAIN",
    "GA_MEASUREMENT_ID",
    "GSC_VERIFICATION_ID",
    "ENVIRONMENT",
    "TWITTER_HANDLE",
    "PROFILE_DATA_PATH",
]


# ==============================================================================
# ENVIRONMENT FIXTURES
# ==============================================================================

@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove site configuration from the process environment for every test."""
    for name in CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# ==============================================================================
# APPLICATION FIXTURES
# ==============================================================================

@pytest.fixture
def make_client() -> Callable[..., TestClient]:
    """Build a test client, optionally with runtime bindings."""
    def _make_client(bindings: Optional[Mapping[str, Optional[str]]] = None) -> TestClient:
        return TestClient(create_app(env_bindings=bindings))
    return _make_client


@pytest.fixture
def client(make_client) -> TestClient:
    """Test client with default configuration."""
    return make_client()


# ==============================================================================
# DATA FIXTURES
# ==============================================================================

@pytest.fixture
def profile_content():
    """Packaged profile content."""
    return ProfileDataLoader().load()


@pytest.fixture
def seo_config(profile_content):
    """SEO configuration resolved from defaults only."""
    return resolve_seo_config(content=profile_content)
