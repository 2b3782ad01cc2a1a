"""FastAPI application factory"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from credit_risk.api.middleware import RequestIDMiddleware, MetricsMiddleware
from credit_risk.api.v1 import evaluations, reports
from credit_risk.domain.exceptions import CustomerDataFormatError, CustomerDataNotFoundError
from credit_risk.infrastructure.observability.logging import setup_logging
from credit_risk.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Credit Risk Assessor",
        description="Customer credit scoring and risk reporting service",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    @app.exception_handler(CustomerDataNotFoundError)
    async def customer_data_not_found(request: Request, exc: CustomerDataNotFoundError):
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(CustomerDataFormatError)
    async def customer_data_malformed(request: Request, exc: CustomerDataFormatError):
        return JSONResponse(status_code=422, content={"detail": str(exc)})

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(evaluations.router, prefix="/v1", tags=["evaluations"])
    app.include_router(reports.router, prefix="/v1", tags=["reports"])

    return app


app = create_app()
