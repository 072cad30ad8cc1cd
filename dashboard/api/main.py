"""
FastAPI Application Main
Read-only Query Service für gespeicherte Zusammenfassungen
"""

import time
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from dashboard.api.models import HealthResponse
from dashboard.common.logging_utils import get_logger
from dashboard.core.config import Settings
from dashboard.database.manager import DatabaseManager
from dashboard.monitoring.prometheus_metrics import PrometheusMetrics


def create_fastapi_app(
    settings: Settings,
    db_manager: DatabaseManager,
    *,
    metrics: Optional[PrometheusMetrics] = None,
) -> FastAPI:
    """Factory function to create the FastAPI app.

    The DatabaseManager is owned by the caller: it must already be initialized
    and is never closed by the app.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application Lifespan Management"""
        logger = get_logger(__name__)
        logger.info("Starting Data Summary API")
        yield
        logger.info("Shutting down Data Summary API")

    app = FastAPI(
        title="Data Summary API",
        description="Read-only access to collected source summaries",
        version="1.0.0",
        lifespan=lifespan,
    )

    # Make shared dependencies available to endpoints
    app.state.db = db_manager
    app.state.metrics = metrics

    # CORS Middleware (tighten in non-development)
    cors_origins = settings.cors_origins
    if settings.environment != "development":
        cors_origins = [o for o in cors_origins if o != "*"]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials=False,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    if metrics:

        @app.middleware("http")
        async def metrics_http_middleware(request: Request, call_next):
            start = time.perf_counter()
            status = "500"
            try:
                response = await call_next(request)
                status = str(response.status_code)
                return response
            finally:
                metrics.record_api_request(
                    method=request.method,
                    endpoint=request.url.path,
                    status=status,
                    duration=time.perf_counter() - start,
                )

    @app.get("/health", response_model=HealthResponse)
    def health_check():
        """Basic health check endpoint"""
        database = db_manager.health_check()
        return HealthResponse(
            status="healthy" if database.get("status") == "healthy" else "degraded",
            timestamp=datetime.now(timezone.utc),
            database=database,
        )

    # Include aggregated API router
    from dashboard.api.router import api_router
    app.include_router(api_router)

    return app
