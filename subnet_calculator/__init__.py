"""IPv4 subnet calculator: address codec, subnet arithmetic and HTTP API."""

from .calculator import (
    canonical_masks,
    compute_subnet,
    compute_subnet_from_cidr,
    compute_subnet_from_mask,
    is_canonical_mask,
    mask_to_prefix,
    prefix_to_mask,
)
from .codec import MAX_ADDRESS, format_address, is_valid_address, parse_address
from .errors import FormatError, RangeError, SubnetCalculatorError
from .models.subnet import Subnet

__version__ = "1.0.0"

__all__ = [
    "MAX_ADDRESS",
    "FormatError",
    "RangeError",
    "Subnet",
    "SubnetCalculatorError",
    "canonical_masks",
    "compute_subnet",
    "compute_subnet_from_cidr",
    "compute_subnet_from_mask",
    "format_address",
    "is_canonical_mask",
    "is_valid_address",
    "mask_to_prefix",
    "parse_address",
    "prefix_to_mask",
]
