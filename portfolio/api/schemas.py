"""Schemas for health endpoints."""
from typing import List, Optional

from pydantic import BaseModel


class HealthSchema(BaseModel):
    """Load balancer health response."""
    status: str


class ComponentHealthSchema(BaseModel):
    """Health of one thing the page depends on."""
    name: str
    status: str  # "healthy", "unhealthy"
    detail: Optional[str] = None


class DetailedHealthSchema(BaseModel):
    """Overall status plus per-component results."""
    status: str
    environment: str
    components: List[ComponentHealthSchema]
