"""
Application configuration management.

Loads settings from environment variables:
    LOG_LEVEL: Logging level name (default: INFO)
    HOST, PORT: Uvicorn bind address (default: 127.0.0.1:8000)
    CORS_ORIGINS: Comma-separated list of allowed CORS origins
"""

import logging
import os

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

# Used when CORS_ORIGINS is unset
DEFAULT_CORS_ORIGINS = [
    "http://localhost:3000",
    "http://localhost:8001",
    "http://localhost:5173",
]


def get_log_level() -> str:
    """
    Get the configured log level.

    Returns:
        str: Upper-case level name (default: INFO)

    Raises:
        ValueError: If LOG_LEVEL is not a standard level name
    """
    level = os.getenv("LOG_LEVEL", "INFO").strip().upper()

    if level not in VALID_LOG_LEVELS:
        raise ValueError(f"Invalid LOG_LEVEL: '{level}'. Valid options: {', '.join(VALID_LOG_LEVELS)}")

    return level


def get_cors_origins() -> list[str]:
    """
    Get allowed CORS origins from environment.

    Returns:
        List[str]: Origins, empty list if CORS_ORIGINS is unset or blank
    """
    origins_str = os.getenv("CORS_ORIGINS", "").strip()

    if not origins_str:
        return []

    origins = [origin.strip() for origin in origins_str.split(",")]
    return [origin for origin in origins if origin]


def configure_logging():
    """Configure root logging from LOG_LEVEL."""
    logging.basicConfig(
        level=get_log_level(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def get_server_port() -> int:
    """
    Get the port for the Uvicorn server.

    Returns:
        int: Port from PORT (default: 8000)

    Raises:
        ValueError: If PORT is not an integer in 1-65535
    """
    port_str = os.getenv("PORT", "8000").strip()

    try:
        port = int(port_str)
    except ValueError as e:
        raise ValueError(f"Invalid PORT: '{port_str}'") from e

    if not 1 <= port <= 65535:
        raise ValueError(f"Invalid PORT: {port} outside 1-65535")

    return port


def get_server_host() -> str:
    """Get the bind address for the Uvicorn server (default: 127.0.0.1)."""
    return os.getenv("HOST", "127.0.0.1").strip() or "127.0.0.1"
