"""FastAPI application for the invoice calculation API."""

import time
import uuid
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from invonest.api.routes import health_router, invoice_router
from invonest.config import get_settings
from invonest.container import get_container, reset_container
from invonest.exceptions import InvoNestError
from invonest.logging_config import (
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
)

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    settings = get_settings()
    configure_logging(settings)

    container = get_container()
    calculator = container.calculator
    logger.info(
        "api_started",
        version=settings.app_version,
        environment=settings.environment.value,
        rounding_strategy=calculator.rounding.value,
        hsn_codes=len(container.hsn_table),
    )

    yield

    reset_container()
    logger.info("api_stopped")


async def log_request_middleware(request: Request, call_next):
    """Tag every event logged while serving a request with a short request id."""
    request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex[:8]
    bind_context(request_id=request_id, method=request.method, path=request.url.path)
    started = time.perf_counter()

    try:
        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = request_id
        logger.debug(
            "request_completed",
            status_code=response.status_code,
            duration_ms=round((time.perf_counter() - started) * 1000, 2),
        )
        return response
    finally:
        clear_context()


async def domain_exception_handler(request: Request, exc: InvoNestError) -> JSONResponse:
    """Answer domain errors with ``{"success": false, "error": ...}``."""
    logger.warning(
        "domain_exception",
        error_code=exc.error_code,
        status_code=exc.status_code,
        context=exc.context,
    )
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


def create_app() -> FastAPI:
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="GST-aware invoice tax calculation for Indian businesses",
        version=settings.app_version,
        debug=settings.debug,
        lifespan=lifespan,
    )

    app.middleware("http")(log_request_middleware)
    app.add_exception_handler(InvoNestError, domain_exception_handler)

    app.include_router(health_router)
    app.include_router(invoice_router)

    return app


app = create_app()
