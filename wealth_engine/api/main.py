"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from wealth_engine.api.middleware import RequestIDMiddleware, MetricsMiddleware
from wealth_engine.api.v1 import projection, rates, summary, yields
from wealth_engine.infrastructure.observability.logging import setup_logging
from wealth_engine.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Wealth Engine",
        description="Fixed-income yield, withholding tax and wealth projection service",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(rates.router, prefix="/v1", tags=["rates"])
    app.include_router(yields.router, prefix="/v1", tags=["yields"])
    app.include_router(projection.router, prefix="/v1", tags=["projections"])
    app.include_router(summary.router, prefix="/v1", tags=["summary"])

    return app


app = create_app()
