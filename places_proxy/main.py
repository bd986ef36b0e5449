"""Main FastAPI application."""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from places_proxy import __version__
from places_proxy.config import settings
from places_proxy.exceptions import ApiError, api_error_handler, validation_error_handler
from places_proxy.middleware import (
    CORS_ALLOW_HEADERS,
    CORS_ALLOW_METHODS,
    RequestLoggingMiddleware,
)
from places_proxy.routers import chat, places

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Server running on port {settings.api_port}")
    logger.info(f"Ola Maps API key present: {bool(settings.ola_maps_api_key)}")
    yield
    logger.info("Server shutting down")


# Create FastAPI app
app = FastAPI(
    title="Nearby Places Proxy",
    description="Proxy for Ola Maps place search and nearby aggregation",
    version=__version__,
    docs_url="/docs" if settings.environment == "development" else None,
    redoc_url="/redoc" if settings.environment == "development" else None,
    lifespan=lifespan,
)

app.add_exception_handler(ApiError, api_error_handler)
app.add_exception_handler(RequestValidationError, validation_error_handler)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=CORS_ALLOW_METHODS,
    allow_headers=CORS_ALLOW_HEADERS,
)

# Added last so it wraps CORSMiddleware and answers every OPTIONS itself
app.add_middleware(RequestLoggingMiddleware)

# Include routers
app.include_router(chat.router)
app.include_router(places.router)


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "Welcome to Nearby Places Proxy",
        "version": __version__,
        "docs": "/docs" if settings.environment == "development" else "disabled",
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


@app.get("/debug/config")
async def debug_config():
    """Debug endpoint to check configuration (development only)."""
    if settings.environment != "development":
        return {"error": "Not available in production"}

    def mask_key(key: str) -> str:
        """Mask API key showing only first/last 4 chars."""
        if not key:
            return "NOT_SET"
        if len(key) < 12:
            return f"{key[:4]}...{key[-4:]}"
        return f"{key[:8]}...{key[-8:]}"

    return {
        "status": "ok",
        "ola_maps_api_key": mask_key(settings.ola_maps_api_key),
        "ola_maps_base_url": settings.ola_maps_base_url,
        "default_origin": settings.default_origin,
        "nearby_result_limit": settings.nearby_result_limit,
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "places_proxy.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )
