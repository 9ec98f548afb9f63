"""
Products Service.

``create_app`` assembles the FastAPI application: loguru logging, request
tracing and Prometheus metrics middleware, CORS and security headers, the
``/api`` routers, and the product store whose lifetime follows the
application's lifespan. ``app`` is built at import time for uvicorn::

    uvicorn main:app --port 8001
"""
import time
import uuid
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

import products
import sample
from config import Settings, settings as default_settings
from logging_config import setup_logging
from metrics import REQUEST_COUNT, REQUEST_LATENCY, endpoint_label
from outcomes import Invalid, render
from schemas import HealthResponse
from store import ProductStore

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "no-referrer",
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.store = ProductStore.with_seed_data()
    logger.info(f"Product store ready with {len(app.state.store)} products")
    yield
    logger.info("Releasing product store")
    app.state.store = None


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or default_settings
    setup_logging(settings)

    app = FastAPI(title="Products Service", lifespan=lifespan)
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def security_headers(request: Request, call_next):
        response = await call_next(request)
        for header, value in SECURITY_HEADERS.items():
            response.headers.setdefault(header, value)
        return response

    # Middleware pour logger les requests avec correlation ID
    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        # Generate or propagate correlation ID (trace-id)
        trace_id = request.headers.get("X-Trace-ID", str(uuid.uuid4()))
        start_time = time.time()

        with logger.contextualize(trace_id=trace_id, service=settings.service_name):
            logger.bind(method=request.method, url=str(request.url)).info(
                f"Request: {request.method} {request.url.path}"
            )

            response = await call_next(request)

            latency = time.time() - start_time
            REQUEST_COUNT.labels(
                service=settings.service_name,
                method=request.method,
                endpoint=endpoint_label(request),
                status=response.status_code
            ).inc()
            REQUEST_LATENCY.labels(
                service=settings.service_name,
                method=request.method,
                endpoint=endpoint_label(request)
            ).observe(latency)

            logger.bind(status=response.status_code, latency=latency).info(
                f"Response status: {response.status_code}"
            )

            response.headers["X-Trace-ID"] = trace_id
            return response

    @app.exception_handler(RequestValidationError)
    async def invalid_body_handler(request: Request, exc: RequestValidationError):
        logger.debug(f"Rejected request body: {exc.errors()}")
        return render(products.record_failure(request, Invalid()))

    @app.get("/metrics")
    async def metrics():
        """Endpoint /metrics compatible Prometheus"""
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    @app.get("/health", response_model=HealthResponse)
    async def health():
        """Health check endpoint"""
        return HealthResponse(status="healthy", service=settings.service_name)

    app.include_router(products.router, prefix="/api/products", tags=["products"])
    app.include_router(sample.router, prefix="/api", tags=["sample"])

    return app


app = create_app()


if __name__ == "__main__":
    logger.info(f"Starting Products Service on port {default_settings.port}")
    import uvicorn
    uvicorn.run(app, host=default_settings.host, port=default_settings.port)
