"""
FastAPI application setup with dependency injection.
"""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
import logging
import time
import uuid
from contextlib import asynccontextmanager

from app.config import get_settings
from app.core.dependencies import service_container
from app.core.error_handlers import setup_error_handlers
from app.core.logging import configure_logging

# Get application settings
settings = get_settings()

configure_logging(
    level=settings.log_level.value,
    fmt=settings.log_format,
    log_file=settings.log_file,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan management with service container.
    Loads dictionaries and mapping tables before traffic is served.
    """
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")

    await service_container.initialize_services()
    app.state.service_container = service_container
    if service_container.initialized:
        logger.info("Application startup complete")
    else:
        logger.error("Application started without an initialized converter")

    try:
        yield
    finally:
        logger.info("Shutting down application")
        await service_container.cleanup_services()
        logger.info("Application shutdown complete")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application.

    Returns:
        FastAPI: Configured application instance
    """
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=lifespan
    )
    app.state.service_container = service_container

    app.add_middleware(
        CORSMiddleware,
        **settings.get_cors_config()
    )

    setup_error_handlers(app)

    @app.middleware("http")
    async def logging_middleware(request: Request, call_next):
        """Log requests and responses with timing information."""
        request_id = str(uuid.uuid4())
        request.state.request_id = request_id

        start_time = time.time()

        logger.info(
            f"Request {request_id} started: {request.method} {request.url.path}",
            extra={
                'request_id': request_id,
                'method': request.method,
                'path': request.url.path,
                'client_ip': request.client.host if request.client else 'unknown'
            }
        )

        response = await call_next(request)

        processing_time = (time.time() - start_time) * 1000

        logger.info(
            f"Request {request_id} completed: {response.status_code} ({processing_time:.2f}ms)",
            extra={
                'request_id': request_id,
                'status_code': response.status_code,
                'processing_time_ms': processing_time
            }
        )

        return response

    from app.api.convert_endpoints import router as convert_router
    from app.api.corrections_endpoints import router as corrections_router
    from app.api.health_endpoints import router as health_router
    app.include_router(convert_router)
    app.include_router(corrections_router)
    app.include_router(health_router)

    @app.get("/")
    async def root():
        """Root endpoint for basic health check."""
        return {
            "message": f"Welcome to {settings.app_name}",
            "version": settings.app_version,
            "status": "running"
        }

    return app


# Create application instance
app = create_app()
