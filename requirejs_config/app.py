import logging
import time
from datetime import datetime
from typing import Optional

from fastapi import FastAPI, Header, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response

from .configuration import Configuration
from .core.config import Config
from .core.middleware import global_exception_handler, log_requests
from .core.validation import validate_locale, validate_variable
from .factory import create_builder

logger = logging.getLogger(__name__)


def build_configuration(accept_language: Optional[str], locale: Optional[str]) -> Configuration:
    """Build the RequireJS configuration for one request.

    Settings problems (bad namespace pairs, unreadable config file) surface
    as 500s with a readable detail; collaborator errors propagate to the
    global exception handler.
    """
    validate_locale(locale)
    try:
        builder = create_builder(accept_language=accept_language, locale=locale)
    except ValueError as e:
        logger.error(f"Invalid RequireJS settings: {e}")
        raise HTTPException(status_code=500, detail=f"Invalid RequireJS settings: {e}")
    return builder.get_configuration()


# Initialize FastAPI
app = FastAPI(title="RequireJS Configuration API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=Config.allowed_origins(),
    allow_credentials=True,
    allow_methods=["GET", "OPTIONS"],
    allow_headers=["*"],
)

@app.middleware("http")
async def _log_requests(request, call_next):
    return await log_requests(request, call_next)

@app.exception_handler(Exception)
async def _global_exception_handler(request, exc):
    return await global_exception_handler(request, exc)


@app.get("/requirejs/config.json")
async def requirejs_config_json(
    locale: Optional[str] = Query(None),
    accept_language: Optional[str] = Header(None),
):
    """Return the RequireJS configuration as a JSON document."""
    configuration = build_configuration(accept_language, locale)
    return JSONResponse(content=configuration.to_dict())


@app.get("/requirejs/config.js")
async def requirejs_config_script(
    locale: Optional[str] = Query(None),
    variable: str = Query("require"),
    accept_language: Optional[str] = Header(None),
):
    """Return ``var require = {...};`` for inclusion before require.js."""
    validate_variable(variable)
    configuration = build_configuration(accept_language, locale)
    return Response(content=configuration.to_script(variable), media_type="application/javascript")


@app.get("/health")
async def health_check():
    """Check that the settings produce a configuration."""
    health_start_time = time.time()

    try:
        Config.validate()
        create_builder().get_configuration()

        health_duration = time.time() - health_start_time

        return {
            "status": "healthy",
            "service": "requirejs-config-api",
            "timestamp": datetime.now().isoformat(),
            "response_time_ms": round(health_duration * 1000, 2)
        }
    except Exception as e:
        health_duration = time.time() - health_start_time
        logger.error(f"Health check failed: {str(e)} - Duration: {health_duration:.1f}s")

        return {
            "status": "unhealthy",
            "service": "requirejs-config-api",
            "timestamp": datetime.now().isoformat(),
            "error": str(e),
            "response_time_ms": round(health_duration * 1000, 2)
        }


@app.get("/")
async def root():
    """Return basic API information."""

    return {
        "service": "RequireJS Configuration API",
        "version": "1.0",
        "endpoints": {
            "config_json": "/requirejs/config.json",
            "config_script": "/requirejs/config.js",
            "health": "/health"
        },
        "timestamp": datetime.now().isoformat(),
        "description": "Serves RequireJS loader configuration assembled from application settings"
    }
