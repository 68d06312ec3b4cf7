"""FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from quote_proxy.config.logging_config import setup_logging
from quote_proxy.api.routers import health_router, quote_router
from quote_proxy.core.exceptions import AppError
from quote_proxy.middleware import install_middleware


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup
    setup_logging()
    yield
    # Shutdown (nothing to clean up)


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Global handler for application errors."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.code, "message": exc.message},
    )


def create_app() -> FastAPI:
    """Build the application: routes, error handling and the middleware chain."""
    app = FastAPI(
        title="Quote Proxy",
        description="Trimmed daily stock quotes with average closing price",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.include_router(health_router)
    app.include_router(quote_router)
    app.add_exception_handler(AppError, app_error_handler)
    install_middleware(app)
    return app


app = create_app()
