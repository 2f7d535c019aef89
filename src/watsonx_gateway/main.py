"""
FastAPI application for watsonx-gateway.

Mounts the watsonx chat routes and the tool stubs, tags every request
with an id and closes the shared watsonx HTTP client on shutdown.
"""

from __future__ import annotations

import time
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from .api import tools_router, watsonx_router
from .services import close_watsonx_client
from .core import (
    get_logger,
    get_settings,
    GatewayError,
    generate_request_id,
    log_error,
)

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    logger.info(
        "Starting watsonx-gateway",
        version=settings.app_version,
        environment=settings.environment,
        endpoint=settings.watsonx.endpoint,
        configured=settings.watsonx.is_configured,
    )
    yield
    await close_watsonx_client()
    logger.info("Shutting down watsonx-gateway")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Binds a request id to the log context and echoes it back."""

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get("x-request-id") or generate_request_id()
        request.state.request_id = request_id
        started = time.perf_counter()

        with structlog.contextvars.bound_contextvars(request_id=request_id):
            logger.info(
                "Request started",
                method=request.method,
                path=request.url.path,
                client_ip=request.client.host if request.client else "unknown",
            )
            response = await call_next(request)
            logger.info(
                "Request completed",
                method=request.method,
                path=request.url.path,
                status_code=response.status_code,
                duration_ms=round((time.perf_counter() - started) * 1000, 2),
            )

        response.headers["X-Request-ID"] = request_id
        return response


def create_app() -> FastAPI:
    """Create and configure FastAPI application."""
    settings = get_settings()
    docs = settings.debug

    app = FastAPI(
        title=settings.app_name,
        description=settings.app_description,
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/docs" if docs else None,
        redoc_url="/redoc" if docs else None,
        openapi_url="/openapi.json" if docs else None,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.server.cors_origins,
        allow_credentials=True,
        allow_methods=settings.server.cors_methods,
        allow_headers=settings.server.cors_headers,
    )
    app.add_middleware(RequestLoggingMiddleware)

    app.include_router(watsonx_router)
    app.include_router(tools_router)

    @app.get("/health")
    async def liveness():
        return {
            "status": "healthy",
            "version": settings.app_version,
            "timestamp": time.time(),
        }

    @app.exception_handler(GatewayError)
    async def gateway_error_handler(request: Request, exc: GatewayError):
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": {"message": exc.detail, "type": "http_error"}},
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        log_error(logger, exc, context={"method": request.method, "path": request.url.path})
        return JSONResponse(
            status_code=500,
            content={"error": {"message": "Internal server error", "type": "internal_error"}},
        )

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "watsonx_gateway.main:app",
        host=settings.server.host,
        port=settings.server.port,
        reload=settings.server.reload,
        workers=1 if settings.server.reload else settings.server.workers,
        log_level=settings.logging.level.lower(),
        access_log=False,
    )
