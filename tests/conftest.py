"""Pytest configuration and shared fixtures."""

import os

import pytest


@pytest.fixture(autouse=True)
def reset_environment():
    """Reset environment variables before each test."""
    original_env = os.environ.copy()

    os.environ.pop("LOG_LEVEL", None)
    os.environ.pop("CORS_ORIGINS", None)

    yield

    os.environ.clear()
    os.environ.update(original_env)
