"""Dotted-decimal IPv4 codec.

Converts between ``a.b.c.d`` text and the unsigned 32-bit integer form
used by the calculator. Octet 0 is the most significant byte.
"""

import logging
from ipaddress import AddressValueError, IPv4Address

from .errors import FormatError, RangeError

logger = logging.getLogger(__name__)

MAX_ADDRESS = 0xFFFFFFFF


def parse_address(text: str) -> int:
    """Parse a dotted-decimal IPv4 address into a 32-bit integer.

    Args:
        text: Address such as ``192.168.1.10``. No surrounding whitespace,
            signs or leading zeros are accepted, and each octet has at
            most 3 digits.

    Returns:
        The address packed most-significant octet first.

    Raises:
        FormatError: If the text is not exactly four decimal octets 0-255
    """
    if not isinstance(text, str):
        logger.debug("Rejected address of type %s", type(text).__name__)
        raise FormatError(f"Address must be a string, got {type(text).__name__}")

    try:
        return int(IPv4Address(text))
    except AddressValueError as e:
        logger.debug("Rejected address %r: %s", text, e)
        raise FormatError(f"Invalid IPv4 address '{text}': {e}") from e


def format_address(value: int) -> str:
    """Format a 32-bit integer as dotted-decimal text.

    Raises:
        RangeError: If value is not an integer in 0..2**32-1
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise RangeError(f"Address value must be an integer, got {type(value).__name__}")
    if not 0 <= value <= MAX_ADDRESS:
        raise RangeError(f"Address value {value} outside 32-bit range")

    return str(IPv4Address(value))


def is_valid_address(text: str) -> bool:
    """Return True if text parses as a dotted-decimal IPv4 address."""
    try:
        parse_address(text)
    except FormatError:
        return False
    return True
