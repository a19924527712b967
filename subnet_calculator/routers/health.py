"""Health check endpoints.

- /health: Service identity and version
- /health/ready: Runs a known calculation through the core
- /health/live: Process is up
"""

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from .. import __version__
from ..calculator import canonical_masks, compute_subnet_from_cidr, compute_subnet_from_mask
from ..errors import SubnetCalculatorError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["health"])

SERVICE_NAME = "IPv4 Subnet Calculator API"


def calculator_self_check() -> dict[str, str]:
    """Run known inputs through the core and report each check as ok or failed."""
    checks = {}

    try:
        subnet = compute_subnet_from_cidr("192.168.1.10", 24)
        ok = (subnet.network_address, subnet.broadcast_address, subnet.total_hosts) == (
            "192.168.1.0",
            "192.168.1.255",
            254,
        )
        checks["cidr"] = "ok" if ok else "failed"
    except SubnetCalculatorError as e:
        logger.error("Readiness: CIDR calculation raised %s", e)
        checks["cidr"] = "failed"

    try:
        ok = compute_subnet_from_mask("172.16.5.200", "255.255.255.128").prefix_length == 25
        checks["mask"] = "ok" if ok else "failed"
    except SubnetCalculatorError as e:
        logger.error("Readiness: mask calculation raised %s", e)
        checks["mask"] = "failed"

    checks["mask_table"] = "ok" if len(canonical_masks()) == 33 else "failed"
    return checks


@router.get("/health")
async def health_check():
    """Service identity and version."""
    return {
        "status": "healthy",
        "service": SERVICE_NAME,
        "version": __version__,
    }


@router.get("/health/ready")
async def readiness_check():
    """Readiness check.

    Returns:
        200 with per-check results when every calculator check passes,
        503 otherwise
    """
    checks = calculator_self_check()
    if all(result == "ok" for result in checks.values()):
        return {"status": "ready", "checks": checks}

    logger.warning("Readiness: calculator checks failed: %s", checks)
    return JSONResponse(status_code=503, content={"status": "not_ready", "checks": checks})


@router.get("/health/live")
async def liveness_check():
    """Liveness check for container orchestrators."""
    return {"status": "alive"}
