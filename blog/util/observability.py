"""Logfire setup for the blog API.

Application code logs straight through logfire:

    with logfire.span("list_posts.execute", order_by=..., has_search=True):
        logfire.info("Posts listed", count=len(posts), total=total)

Search text is user input and may be personal, so no application span
or log carries it. Spans record ``has_search`` instead, and request spans
drop the value of the search parameter.
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from blog.config import Settings

SERVICE_NAME = "blog-api"
SERVICE_VERSION = "0.1.0"

# Polled by load balancers; tracing them only adds noise
UNTRACED_URLS = "/v1/health,/$"


def _send_to_logfire(settings: Settings) -> bool:
    # Explicit setting wins, then token presence
    if settings.observability.send_to_logfire is not None:
        return settings.observability.send_to_logfire
    return bool(settings.observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire once per process, before the app is imported.

    Set OBSERVABILITY__LOGFIRE_TOKEN to ship telemetry to Logfire cloud.
    Without a token everything stays on the console.

    Args:
        settings: Application settings
    """
    send = _send_to_logfire(settings)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=SERVICE_VERSION,
        environment=settings.environment,
        send_to_logfire=send,
        token=settings.observability.logfire_token,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send,
        git_sha=settings.git_sha,
    )


def _request_attributes(request, attributes):
    """Keep parameter names from the query string, drop the search value."""
    result = {**attributes}
    values = result.get("values")
    if isinstance(values, dict) and "search" in values:
        result["values"] = {k: v for k, v in values.items() if k != "search"}
    result["path"] = request.url.path
    result["query_params"] = sorted(request.query_params.keys())
    return result


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every API request except health checks.

    Args:
        app: FastAPI application instance
    """
    logfire.instrument_fastapi(
        app,
        request_attributes_mapper=_request_attributes,
        excluded_urls=UNTRACED_URLS,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace SQL statements and pool checkouts on the engine.

    Statements only ever contain bound placeholders, so search patterns
    stay out of the recorded SQL.

    Args:
        engine: Async engine backing the connection pool
    """
    logfire.instrument_sqlalchemy(engine=engine.sync_engine)
    logfire.debug("SQLAlchemy instrumented", pool_size=engine.pool.size())
