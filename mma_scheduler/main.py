"""ASGI entry point: ``uvicorn mma_scheduler.main:app``."""

import logging
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from fastapi.staticfiles import StaticFiles

from mma_scheduler import __version__
from mma_scheduler.api import events, fighters, filter_options
from mma_scheduler.db.connection import (
    create_engine,
    create_session_factory,
    sanitize_database_url,
)
from mma_scheduler.errors import UpstreamQueryError
from mma_scheduler.schemas.error import ErrorPage, ErrorResponse, ErrorType
from mma_scheduler.settings import AppSettings, get_settings
from mma_scheduler.utils.request_context import get_request_id, set_request_id
from mma_scheduler.web import pages
from mma_scheduler.web.templating import STATIC_DIR, render_error_page

logger = logging.getLogger(__name__)

API_PREFIX = "/api"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _report_startup(settings: AppSettings) -> None:
    for warning in settings.optional_config_warnings():
        logger.warning("Configuration: %s", warning)
    logger.info(
        "MMA Scheduler %s using %s database at %s",
        __version__,
        settings.database_type,
        sanitize_database_url(settings.resolved_database_url),
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Own the database engine for the lifetime of the process."""
    settings: AppSettings = app.state.settings
    _report_startup(settings)

    engine = create_engine(settings)
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)
    try:
        yield
    finally:
        logger.info("Disposing database engine")
        await engine.dispose()


async def request_id_middleware(request: Request, call_next) -> Response:
    """Tag the request (logs and ``X-Request-ID`` header) with a fresh id."""
    request_id = uuid.uuid4().hex
    set_request_id(request_id)
    response = await call_next(request)
    response.headers["X-Request-ID"] = request_id
    return response


async def handle_upstream_query_error(request: Request, exc: UpstreamQueryError) -> Response:
    """A failed store read becomes ``{"error": ...}`` for the API, an error page otherwise."""
    logger.error("Request %s to %s failed: %s", get_request_id(), request.url.path, exc)
    if request.url.path.startswith(API_PREFIX):
        body = ErrorResponse(error=f"Failed to fetch {exc.table}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=body.model_dump()
        )
    return render_error_page(
        request,
        ErrorPage(
            error_type=ErrorType.DATABASE_ERROR,
            title="Something went wrong",
            message="We could not load this page. Please try again later.",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            request_id=get_request_id(),
        ),
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> Response:
    """Last-resort 500, sent from outside the middleware stack with the request id re-attached."""
    request_id = get_request_id()
    logger.exception(
        "Unhandled %s for request %s to %s",
        type(exc).__name__,
        request_id,
        request.url.path,
    )
    if request.url.path.startswith(API_PREFIX):
        response: Response = JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ErrorResponse(error="Internal server error").model_dump(),
        )
    else:
        response = render_error_page(
            request,
            ErrorPage(
                error_type=ErrorType.INTERNAL_ERROR,
                title="Unexpected error",
                message="Something broke on our side. Please try again later.",
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                request_id=request_id or None,
            ),
        )
    if request_id:
        response.headers["X-Request-ID"] = request_id
    return response


def create_app(settings: AppSettings | None = None) -> FastAPI:
    """Build the FastAPI application.

    Args:
        settings: Configuration to use; defaults to the cached environment settings.
    """
    settings = settings or get_settings()
    logging.basicConfig(level=settings.log_level_numeric, format=LOG_FORMAT)

    app = FastAPI(
        title="MMA Scheduler",
        version=__version__,
        description="UFC event schedules, fighter profiles and divisional rankings.",
        lifespan=lifespan,
        redirect_slashes=False,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
    )
    app.middleware("http")(request_id_middleware)
    app.add_exception_handler(UpstreamQueryError, handle_upstream_query_error)
    app.add_exception_handler(Exception, handle_unexpected_error)

    @app.get("/health", tags=["system"])
    async def healthcheck() -> dict[str, str]:
        return {"status": "ok"}

    app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")
    app.include_router(fighters.router, prefix=API_PREFIX, tags=["fighters"])
    app.include_router(events.router, prefix=API_PREFIX, tags=["events"])
    app.include_router(filter_options.router, prefix=API_PREFIX, tags=["fighters"])
    app.include_router(pages.router, tags=["pages"])

    return app


app = create_app()
