"""FastAPI application for the IPv4 subnet calculator.

Run with Uvicorn (or the `subnet-calculator-api` script):
    uvicorn subnet_calculator.main:app

Environment Variables:
    LOG_LEVEL: Logging level (default: INFO)
    HOST, PORT: Bind address for run() (default: 127.0.0.1, 8000)

    CORS Configuration:
        CORS_ORIGINS: Comma-separated list of allowed CORS origins
                     If not set or empty, localhost development origins are used
                     Example: http://localhost:3000,http://localhost:5173
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

from . import __version__
from .config import (
    DEFAULT_CORS_ORIGINS,
    configure_logging,
    get_cors_origins,
    get_log_level,
    get_server_host,
    get_server_port,
)
from .routers import health, subnets

configure_logging()
logger = logging.getLogger(__name__)

app = FastAPI(
    title="IPv4 Subnet Calculator API",
    description="Network, broadcast and host range calculation from CIDR prefix or subnet mask",
    version=__version__,
    docs_url="/api/v1/docs",
    redoc_url="/api/v1/redoc",
    openapi_url="/api/v1/openapi.json",
)

cors_origins = get_cors_origins()
if not cors_origins:
    cors_origins = DEFAULT_CORS_ORIGINS
    logger.warning("CORS: Using default localhost origins for development")
else:
    logger.info(f"CORS: Allowed origins: {', '.join(cors_origins)}")

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(subnets.router)


@app.get("/")
async def root():
    """Root endpoint with API information."""
    return {
        "name": "IPv4 Subnet Calculator API",
        "version": __version__,
        "docs": "/api/v1/docs",
        "openapi": "/api/v1/openapi.json",
        "health": "/api/v1/health",
    }


def run():
    """Serve the API with Uvicorn using HOST, PORT and LOG_LEVEL."""
    uvicorn.run(
        app,
        host=get_server_host(),
        port=get_server_port(),
        log_level=get_log_level().lower(),
    )


if __name__ == "__main__":
    run()
