"""IPv4 subnet calculation endpoints.

Thin wrappers around the calculator core. All input validation happens in
the core; FormatError and RangeError become HTTP 400 responses.
"""

import logging

from fastapi import APIRouter, HTTPException

from ..calculator import (
    canonical_masks,
    compute_subnet,
    compute_subnet_from_cidr,
    compute_subnet_from_mask,
)
from ..codec import parse_address
from ..errors import SubnetCalculatorError
from ..models.subnet import (
    CIDRRequest,
    MaskRequest,
    NetworkRequest,
    Subnet,
    ValidateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/ipv4", tags=["ipv4"])


def _bad_request(e: SubnetCalculatorError) -> HTTPException:
    logger.info("Rejected request: %s", e)
    return HTTPException(status_code=400, detail=str(e))


@router.post("/subnet/cidr", response_model=Subnet)
async def subnet_from_cidr(request: CIDRRequest):
    """Calculate subnet information from an address and CIDR prefix length.

    Raises:
        HTTPException: 400 if the address is malformed or prefix is outside 0-32
    """
    try:
        return compute_subnet_from_cidr(request.address, request.prefix_length)
    except SubnetCalculatorError as e:
        raise _bad_request(e)


@router.post("/subnet/mask", response_model=Subnet)
async def subnet_from_mask(request: MaskRequest):
    """Calculate subnet information from an address and dotted-decimal mask.

    Raises:
        HTTPException: 400 if the address or mask is malformed or the mask
            is not contiguous
    """
    try:
        return compute_subnet_from_mask(request.address, request.subnet_mask)
    except SubnetCalculatorError as e:
        raise _bad_request(e)


@router.post("/subnet", response_model=Subnet)
async def subnet_from_notation(request: NetworkRequest):
    """Calculate subnet information from address/prefix or address/mask."""
    try:
        return compute_subnet(request.network)
    except SubnetCalculatorError as e:
        raise _bad_request(e)


@router.post("/validate")
async def validate_address(request: ValidateRequest):
    """Validate a dotted-decimal IPv4 address.

    Returns:
        Validation result with the address's 32-bit integer value

    Raises:
        HTTPException: 400 if the address is malformed
    """
    try:
        decimal = parse_address(request.address)
    except SubnetCalculatorError as e:
        raise _bad_request(e)

    return {"valid": True, "address": request.address, "decimal": decimal}


@router.get("/masks")
async def list_masks():
    """List the 33 canonical subnet masks with their prefix lengths."""
    return [
        {"prefix_length": prefix, "subnet_mask": mask}
        for prefix, mask in enumerate(canonical_masks())
    ]
