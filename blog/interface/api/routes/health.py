"""Health check routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from blog.config import Settings

router = APIRouter(tags=["health"], route_class=DishkaRoute)


class HealthResponse(BaseModel):
    """Health check response."""

    success: bool = True
    message: str
    version: str
    git_sha: str


@router.get("/", response_model=HealthResponse)
async def index(settings: FromDishka[Settings]) -> HealthResponse:
    """Service banner."""
    return HealthResponse(
        message="Blog API is running",
        version="0.1.0",
        git_sha=settings.git_sha,
    )


@router.get("/v1/health", response_model=HealthResponse)
async def health_check(settings: FromDishka[Settings]) -> HealthResponse:
    """Basic health check endpoint.

    Returns:
        Health status indicating the service is running
    """
    return HealthResponse(
        message="healthy",
        version="0.1.0",
        git_sha=settings.git_sha,
    )
