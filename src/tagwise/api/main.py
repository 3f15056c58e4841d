"""FastAPI application for tagwise API."""

import logging
import time
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from starlette.middleware.base import RequestResponseEndpoint
from starlette.responses import Response

from tagwise import __version__
from tagwise.api.exception_handlers import register_exception_handlers
from tagwise.api.middleware import RequestIdFilter, RequestIdMiddleware
from tagwise.api.routers import articles, health, tags
from tagwise.config.database import db_manager
from tagwise.config.settings import settings

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s [%(request_id)s] %(name)s: %(message)s"


def configure_logging(level: str) -> None:
    """Configure root logging with request IDs on every record."""
    logging.basicConfig(level=level, format=LOG_FORMAT)
    for handler in logging.getLogger().handlers:
        if not any(isinstance(f, RequestIdFilter) for f in handler.filters):
            handler.addFilter(RequestIdFilter())


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    configure_logging(settings.log_level)
    if settings.is_sqlite:
        # Postgres schemas are managed by Alembic
        await db_manager.create_tables()
    logger.info("tagwise API %s started", __version__)
    yield
    await db_manager.close()


app = FastAPI(
    title="tagwise API",
    description="Articles with free-text tags, tag lookup and a weighted tag cloud",
    version=__version__,
    lifespan=lifespan,
)


def _get_client_ip(request: Request) -> str:
    """Extract client IP from request, handling proxied requests."""
    forwarded_for = request.headers.get("x-forwarded-for")
    if forwarded_for:
        return forwarded_for.split(",")[0].strip()
    if request.client:
        return request.client.host
    return "unknown"


@app.middleware("http")
async def log_requests(
    request: Request, call_next: RequestResponseEndpoint
) -> Response:
    """
    Log each request and its response status with timing.

    Responses log at INFO for 2xx/3xx, WARNING for 4xx and ERROR for 5xx.
    """
    start_time = time.perf_counter()
    method = request.method
    path = request.url.path

    logger.info("Request: %s %s from %s", method, path, _get_client_ip(request))

    response = await call_next(request)

    duration = time.perf_counter() - start_time
    status_code = response.status_code
    if status_code >= 500:
        log_level = logging.ERROR
    elif status_code >= 400:
        log_level = logging.WARNING
    else:
        log_level = logging.INFO

    logger.log(
        log_level,
        "Response: %s %s - %d (%.3fs)",
        method,
        path,
        status_code,
        duration,
    )
    return response


# Added last so it runs first and the request ID is set for log_requests
app.add_middleware(RequestIdMiddleware)

register_exception_handlers(app)

app.include_router(health.router, prefix=settings.api_prefix, tags=["health"])
app.include_router(articles.router, prefix=settings.api_prefix, tags=["articles"])
app.include_router(tags.router, prefix=settings.api_prefix, tags=["tags"])
