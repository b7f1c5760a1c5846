"""FastAPI application for the blog API."""

from contextlib import asynccontextmanager

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from blog.config import Settings
from blog.interface.api.errors import register_error_handlers
from blog.interface.api.routes import health, posts, tags
from blog.util.di.container import create_container, setup_di
from blog.util.observability import instrument_fastapi


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Close the DI container on shutdown, disposing the connection pool."""
    yield
    await app.state.dishka_container.close()


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Build the API app with its routes, error handlers and DI container.

    Logfire must already be configured: scripts/start_app.py does it in
    production and tests/conftest.py in tests.

    Args:
        container: DI container to use instead of the production one
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Blog API",
        description="Read-only API for browsing published blog posts and tags",
        version="0.1.0",
        lifespan=lifespan,
    )

    instrument_fastapi(app_instance)

    # The API is read-only
    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_credentials=False,
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["Accept", "Content-Type", "Origin"],
        max_age=600,
    )

    # Routes resolve use cases per request from the container
    if container is None:
        container = create_container()
    setup_di(app_instance, container)

    register_error_handlers(app_instance)

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(posts.router)
    app_instance.include_router(tags.router)

    return app_instance


# Imported by uvicorn (see scripts/start_app.py), after logfire is configured
app = create_app()
