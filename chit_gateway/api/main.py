"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from chit_gateway.api.middleware import RequestIDMiddleware, MetricsMiddleware
from chit_gateway.api.v1 import chits, preview, regime
from chit_gateway.infrastructure.observability.logging import setup_logging
from chit_gateway.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Chit Gateway",
        description="Chit fund payment schedules and fairness warnings",
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
    app.include_router(preview.router, prefix="/v1", tags=["preview"])
    app.include_router(regime.router, prefix="/v1", tags=["regime"])
    app.include_router(chits.router, prefix="/v1", tags=["chits"])

    return app


app = create_app()
