from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy import text

from paged_catalog.config import settings
from paged_catalog.db.session import shutdown
from paged_catalog.dependencies import DB
from paged_catalog.exceptions import (
    AccessorUnavailable,
    ConflictError,
    DomainError,
    InvalidPageRequest,
    NotFoundError,
)
from paged_catalog.logging import get_logger
from paged_catalog.middleware import RequestIDMiddleware
from paged_catalog.routers.product import router as product_router
from paged_catalog.schemas.error import ErrorDetail, ErrorResponse

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Nothing to warm up on startup; close pooled connections on shutdown."""
    yield
    await shutdown()


app = FastAPI(title="paged-catalog", lifespan=lifespan)
app.add_middleware(RequestIDMiddleware)
app.include_router(product_router)


def _error_json(code: str, message: str) -> dict[str, object]:
    """Build the standard error envelope as a dict for JSONResponse."""
    return ErrorResponse(error=ErrorDetail(code=code, message=message)).model_dump()


@app.exception_handler(InvalidPageRequest)
async def invalid_page_request_handler(request: Request, exc: InvalidPageRequest) -> JSONResponse:
    """Out-of-bounds page or size is the client's fault: 400."""
    logger.warning(
        "invalid_page_request",
        parameter=exc.parameter,
        value=exc.value,
        path=request.url.path,
    )
    return JSONResponse(status_code=400, content=_error_json("invalid_page_request", exc.message))


@app.exception_handler(AccessorUnavailable)
async def accessor_unavailable_handler(request: Request, exc: AccessorUnavailable) -> JSONResponse:
    """Backing store down: 503, no retry. The cause stays in the logs only."""
    logger.error(
        "accessor_unavailable",
        collection=exc.collection,
        error=exc.message,
        path=request.url.path,
    )
    return JSONResponse(
        status_code=503,
        content=_error_json("accessor_unavailable", f"{exc.collection} is temporarily unavailable"),
    )


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    return JSONResponse(status_code=404, content=_error_json("not_found", exc.message))


@app.exception_handler(ConflictError)
async def conflict_handler(request: Request, exc: ConflictError) -> JSONResponse:
    logger.warning("conflict", error=exc.message, path=request.url.path)
    return JSONResponse(status_code=409, content=_error_json("conflict", exc.message))


@app.exception_handler(DomainError)
async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Return 400 for any other domain-level violation."""
    logger.warning("domain_error", error=exc.message, path=request.url.path)
    return JSONResponse(status_code=400, content=_error_json("domain_error", exc.message))


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log the traceback (with request_id) and return a generic 500."""
    logger.exception("unhandled_exception", path=request.url.path, method=request.method)
    return JSONResponse(
        status_code=500,
        content=_error_json("internal_error", "Internal server error"),
    )


@app.get("/health")
async def health(db: DB) -> dict[str, str]:
    """Liveness plus database connectivity, for load balancers and orchestrators."""
    await db.execute(text("SELECT 1"))
    return {"status": "ok"}


def run() -> None:
    """Console entry point: serve the app with uvicorn (``paged-catalog``)."""
    # log_config=None keeps uvicorn on the structlog handlers configured above.
    uvicorn.run(app, host=settings.api_host, port=settings.api_port, log_config=None)
