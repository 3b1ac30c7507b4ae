"""
FastAPI application entry point for the finance dashboard analysis backend.

Serves the Fibonacci/Gann/PRZ engine behind `/api/analysis` for the
dashboard's chart overlay. The engine is pure and in-process, so startup only
has to validate settings; there are no connections to open or close.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.trustedhost import TrustedHostMiddleware
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from .api.analysis import ANALYSIS_ASSETS
from .api.analysis import router as analysis_router
from .api.dependencies.rate_limit import RETRY_AFTER_SECONDS, limiter
from .api.health import router as health_router
from .core.config import Settings, get_settings
from .core.exceptions import AppError

logging.basicConfig(level=get_settings().log_level)

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Log the engine configuration the service starts with."""
    settings = get_settings()
    logger.info(
        "Analysis backend starting",
        environment=settings.environment,
        version=settings.app_version,
        prz_tolerance=settings.prz_tolerance,
        trend_neutral_band=settings.trend_neutral_band,
        history_days=(settings.analysis_min_days, settings.analysis_max_days),
        assets_count=len(ANALYSIS_ASSETS),
    )
    yield
    logger.info("Analysis backend stopped")


def _add_middleware(app: FastAPI, settings: Settings) -> None:
    if settings.is_production:
        app.add_middleware(TrustedHostMiddleware, allowed_hosts=settings.allowed_hosts)

    # The dashboard frontend only reads analyses and posts price series
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    # SlowAPIMiddleware does not play well with TestClient
    app.state.limiter = limiter
    if settings.environment != "test":
        app.add_middleware(SlowAPIMiddleware)


def _add_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(RateLimitExceeded)
    async def rate_limit_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
        logger.warning("Analysis rate limit exceeded", path=request.url.path, limit=exc.detail)
        return JSONResponse(
            status_code=429,
            content={"success": False, "message": f"Rate limit exceeded: {exc.detail}"},
            headers={"Retry-After": str(RETRY_AFTER_SECONDS)},
        )

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
        # Client mistakes are expected traffic; only server-side errors are logged as errors
        log = logger.warning if exc.status_code < 500 else logger.error
        log("Analysis request failed", path=request.url.path, method=request.method, **exc.to_dict())
        return JSONResponse(status_code=exc.status_code, content=exc.to_response())


def create_app() -> FastAPI:
    """Create and configure FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title="Finance Dashboard Analysis API",
        description="Fibonacci, Gann and PRZ technical analysis for the dashboard",
        version=settings.app_version,
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
        lifespan=lifespan,
    )

    _add_middleware(app, settings)
    _add_error_handlers(app)

    app.include_router(health_router, prefix="/api", tags=["health"])
    app.include_router(analysis_router)

    @app.get("/")
    async def root() -> dict[str, str]:
        """Service banner for connectivity checks."""
        return {
            "message": "Finance Dashboard Analysis API",
            "version": settings.app_version,
            "environment": settings.environment,
        }

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host="0.0.0.0",  # nosec B104 - Required for Docker container
        port=8000,
        reload=get_settings().is_development,
        log_config=None,
    )
