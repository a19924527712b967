"""Tests for main FastAPI application routes."""

import pytest
from fastapi.testclient import TestClient

from subnet_calculator.calculator import compute_subnet_from_cidr
from subnet_calculator.errors import FormatError
from subnet_calculator.main import app
from subnet_calculator.routers import health


@pytest.fixture
def client():
    """Create test client."""
    return TestClient(app)


def test_root_endpoint(client):
    """Test root endpoint returns API information."""
    response = client.get("/")
    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "IPv4 Subnet Calculator API"
    assert data["version"] == "1.0.0"
    assert data["docs"] == "/api/v1/docs"
    assert data["health"] == "/api/v1/health"


def test_health_endpoint(client):
    """Test health endpoint."""
    response = client.get("/api/v1/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["version"] == "1.0.0"


def test_health_ready_endpoint(client):
    """Test readiness runs the calculator checks."""
    response = client.get("/api/v1/health/ready")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ready"
    assert data["checks"] == {"cidr": "ok", "mask": "ok", "mask_table": "ok"}


def test_health_ready_reports_failed_calculation(client, monkeypatch):
    """Test readiness returns 503 when a known calculation comes out wrong."""
    wrong = compute_subnet_from_cidr("10.0.0.5", 32)
    monkeypatch.setattr(health, "compute_subnet_from_cidr", lambda ip, prefix: wrong)

    response = client.get("/api/v1/health/ready")
    assert response.status_code == 503
    data = response.json()
    assert data["status"] == "not_ready"
    assert data["checks"]["cidr"] == "failed"
    assert data["checks"]["mask"] == "ok"


def test_health_ready_reports_raised_error(client, monkeypatch):
    """Test readiness returns 503 when the core raises."""

    def broken(ip, mask):
        raise FormatError("broken")

    monkeypatch.setattr(health, "compute_subnet_from_mask", broken)

    response = client.get("/api/v1/health/ready")
    assert response.status_code == 503
    assert response.json()["checks"]["mask"] == "failed"


def test_health_live_endpoint(client):
    response = client.get("/api/v1/health/live")
    assert response.status_code == 200
    assert response.json()["status"] == "alive"


def test_docs_accessible(client):
    """Test Swagger UI is accessible."""
    response = client.get("/api/v1/docs")
    assert response.status_code == 200


def test_openapi_schema_accessible(client):
    """Test OpenAPI schema lists the subnet endpoints."""
    response = client.get("/api/v1/openapi.json")
    assert response.status_code == 200
    schema = response.json()
    assert schema["info"]["title"] == "IPv4 Subnet Calculator API"
    assert "/api/v1/ipv4/subnet/cidr" in schema["paths"]
    assert "/api/v1/ipv4/subnet/mask" in schema["paths"]
    assert "/api/v1/ipv4/subnet" in schema["paths"]
    assert "/api/v1/ipv4/validate" in schema["paths"]
    assert "/api/v1/ipv4/masks" in schema["paths"]


def test_cors_preflight_default_origin(client):
    """Test a localhost development origin is allowed by default."""
    response = client.options(
        "/api/v1/ipv4/subnet/cidr",
        headers={
            "Origin": "http://localhost:3000",
            "Access-Control-Request-Method": "POST",
        },
    )
    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "http://localhost:3000"


def test_cors_rejects_unknown_origin(client):
    """Test an unlisted origin gets no CORS allow header."""
    response = client.get("/api/v1/health", headers={"Origin": "https://evil.example.com"})
    assert response.status_code == 200
    assert "access-control-allow-origin" not in response.headers
