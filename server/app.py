"""FastAPI application factory for local invocation of the action handlers."""

import json
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from server.dependencies import get_router
from server.routes import health, invoke
from server.schemas.responses import UnhandledErrorDTO
from utils.logger import get_logger

logger = get_logger(__name__)

# httpx.InvalidURL does not derive from httpx.HTTPError
UPSTREAM_ERRORS = (httpx.HTTPError, httpx.InvalidURL, json.JSONDecodeError)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan event handler for startup/shutdown logic."""
    logger.info("FastAPI server starting up")
    # Build config and clients up front, as a Lambda cold start does
    get_router()

    yield

    logger.info("FastAPI server shutting down")


async def upstream_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Report faults from the page or search upstream the way Lambda reports them."""
    logger.error(
        "Unhandled upstream error",
        extra={"extra_fields": {"path": request.url.path, "error_type": type(exc).__name__}},
    )
    payload = UnhandledErrorDTO(errorType=type(exc).__name__, errorMessage=str(exc))
    return JSONResponse(status_code=status.HTTP_502_BAD_GATEWAY, content=payload.model_dump())


def create_app() -> FastAPI:
    """Factory function to create FastAPI application."""
    app = FastAPI(
        title="Agent Web Actions",
        description="Local runner for the scrape / google_search agent action group",
        version="1.0.0",
        lifespan=lifespan,
    )

    for exc_class in UPSTREAM_ERRORS:
        app.add_exception_handler(exc_class, upstream_error_handler)

    app.include_router(health.router)
    app.include_router(invoke.router)

    return app
