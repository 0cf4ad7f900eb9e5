"""FastAPI application entry point for the Show Vote API."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from structlog import get_logger

from showvote import __version__
from showvote.api.dependencies.voting import get_app_config
from showvote.api.middleware.logging_middleware import LoggingMiddleware
from showvote.api.routes.admin import router as admin_router
from showvote.api.routes.daily_shows import router as daily_shows_router
from showvote.api.routes.health import router as health_router
from showvote.api.routes.results import router as results_router
from showvote.api.routes.vote import router as vote_router
from showvote.api.startup import (
    configure_logging,
    load_environment,
    prepare_database,
    validate_configuration,
)
from showvote.bootstrap.database import close_database_engine

logger = get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    validate_configuration()
    await prepare_database()
    yield
    await close_database_engine()


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Render request validation failures in the {"error": ...} shape."""
    first = exc.errors()[0] if exc.errors() else {}
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "Invalid request.")
    return JSONResponse(
        status_code=422,
        content={
            "error": f"{location}: {message}" if location else message,
            "detail": _validation_details(exc),
        },
    )


def _validation_details(exc: RequestValidationError) -> list[dict]:
    return [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg"), "type": error.get("type")}
        for error in exc.errors()
    ]


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(
        "unhandled_exception",
        path=request.url.path,
        error_type=type(exc).__name__,
    )
    return JSONResponse(status_code=500, content={"error": str(exc)})


def create_app() -> FastAPI:
    """Build the application with middleware and routers."""
    load_environment()
    configure_logging()

    app = FastAPI(
        title="Show Vote API",
        description="Daily TV show voting",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(LoggingMiddleware)
    origins = get_app_config().cors_origins
    if origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=origins,
            allow_credentials=True,
            allow_methods=["GET", "POST"],
            allow_headers=["*"],
        )

    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    app.include_router(health_router)
    app.include_router(daily_shows_router)
    app.include_router(vote_router)
    app.include_router(results_router)
    app.include_router(admin_router)
    return app


app = create_app()
