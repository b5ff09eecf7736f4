"""
FastAPI application for domain name generation.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from domain_generator import __version__
from domain_generator.config import settings
from domain_generator.core.logging import configure_logging, get_logger
from domain_generator.routers.domains import (
    INVALID_REQUEST_MESSAGE,
    error_response,
    router as domains_router,
)

log = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    # Startup
    configure_logging(log_level=settings.log_level, json_output=settings.json_logs)
    log.info("application_starting", version=__version__, model=settings.gemini_model)

    if not settings.gemini_api_key:
        if settings.require_api_key:
            log.error("gemini_api_key_not_set")
            raise RuntimeError("GEMINI_API_KEY is required")
        log.warning("gemini_api_key_not_set", reason="requests will fail with a configuration error")

    yield

    # Shutdown
    log.info("application_stopped")


app = FastAPI(
    title="Domain Name Generator",
    description="Brandable domain name ideas powered by Gemini",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["POST", "GET", "OPTIONS"],
    allow_headers=["*"],
)

app.include_router(domains_router)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Return body parsing failures in the same shape as other errors."""
    details = "; ".join(error.get("msg", "") for error in exc.errors())
    log.info("request_body_invalid", path=request.url.path, details=details)
    return error_response(400, INVALID_REQUEST_MESSAGE, details)


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy", "version": __version__, "model": settings.gemini_model}


# Run with: uvicorn domain_generator.main:app --host 0.0.0.0 --port 8000
