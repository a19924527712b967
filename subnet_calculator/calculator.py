"""IPv4 subnet calculations.

Derives network, broadcast and usable host range from an address plus a
mask given either as a CIDR prefix length or in dotted-decimal form.

The host formulas are applied uniformly for every prefix length. /31 and
/32 are not special-cased: a /31 reports 0 usable hosts and a /32
reports -1, with first/last host wrapping modulo 2**32.
"""

import logging
from ipaddress import IPv4Network, NetmaskValueError

from .codec import MAX_ADDRESS, format_address, parse_address
from .errors import FormatError, RangeError
from .models.subnet import Subnet

logger = logging.getLogger(__name__)


def prefix_to_mask(prefix_length: int) -> int:
    """Convert a CIDR prefix length to a 32-bit mask.

    Raises:
        RangeError: If prefix_length is not an integer in 0..32
    """
    if isinstance(prefix_length, bool) or not isinstance(prefix_length, int):
        raise RangeError(f"Prefix length must be an integer, got {type(prefix_length).__name__}")
    if not 0 <= prefix_length <= 32:
        logger.debug("Rejected prefix length %d", prefix_length)
        raise RangeError(f"Prefix length {prefix_length} outside 0-32")

    if prefix_length == 0:
        return 0
    return (MAX_ADDRESS << (32 - prefix_length)) & MAX_ADDRESS


def mask_to_prefix(mask: int) -> int:
    """Return the prefix length of a contiguous mask.

    Raises:
        FormatError: If the mask's 1 bits are not an unbroken prefix
    """
    mask_text = format_address(mask)
    try:
        network = IPv4Network(f"0.0.0.0/{mask_text}")
    except NetmaskValueError as e:
        logger.debug("Rejected subnet mask %s: %s", mask_text, e)
        raise FormatError(f"Subnet mask {mask_text} is not contiguous") from e

    # ipaddress also accepts hostmasks such as 0.0.0.255
    if int(network.netmask) != mask:
        logger.debug("Rejected subnet mask %s: hostmask form", mask_text)
        raise FormatError(f"Subnet mask {mask_text} is not contiguous")
    return network.prefixlen


def is_canonical_mask(mask: int) -> bool:
    """Return True if mask is a run of 1 bits followed by a run of 0 bits."""
    try:
        mask_to_prefix(mask)
    except FormatError:
        return False
    return True


def canonical_masks() -> list[str]:
    """Return the 33 dotted-decimal masks ordered from /0 to /32."""
    return [format_address(prefix_to_mask(prefix)) for prefix in range(33)]


def _derive(ip_text: str, ip_decimal: int, mask_decimal: int, prefix_length: int) -> Subnet:
    network = ip_decimal & mask_decimal
    wildcard = ~mask_decimal & MAX_ADDRESS
    broadcast = network | wildcard

    subnet = Subnet(
        ip_address=ip_text,
        subnet_mask=format_address(mask_decimal),
        prefix_length=prefix_length,
        wildcard_mask=format_address(wildcard),
        network_address=format_address(network),
        broadcast_address=format_address(broadcast),
        first_host=format_address((network + 1) & MAX_ADDRESS),
        last_host=format_address((broadcast - 1) & MAX_ADDRESS),
        total_hosts=broadcast - network - 1,
    )
    logger.debug(
        "Calculated %s/%d: network=%s broadcast=%s hosts=%d",
        ip_text,
        prefix_length,
        subnet.network_address,
        subnet.broadcast_address,
        subnet.total_hosts,
    )
    return subnet


def compute_subnet_from_cidr(ip: str, prefix_length: int) -> Subnet:
    """Calculate subnet fields from an address and a CIDR prefix length.

    Args:
        ip: Dotted-decimal IPv4 address
        prefix_length: Number of network bits, 0-32

    Returns:
        Subnet with network, broadcast, host range and host count

    Raises:
        RangeError: If prefix_length is outside 0-32
        FormatError: If ip is not a valid dotted-decimal address
    """
    mask = prefix_to_mask(prefix_length)
    ip_decimal = parse_address(ip)
    return _derive(ip, ip_decimal, mask, prefix_length)


def compute_subnet_from_mask(ip: str, mask: str) -> Subnet:
    """Calculate subnet fields from an address and a dotted-decimal mask.

    Args:
        ip: Dotted-decimal IPv4 address
        mask: Dotted-decimal subnet mask, one of the 33 canonical masks

    Returns:
        Subnet identical to the CIDR form with the equivalent prefix length

    Raises:
        FormatError: If either value fails to parse or the mask is not contiguous
    """
    ip_decimal = parse_address(ip)
    mask_decimal = parse_address(mask)
    prefix_length = mask_to_prefix(mask_decimal)
    return _derive(ip, ip_decimal, mask_decimal, prefix_length)


def compute_subnet(network: str) -> Subnet:
    """Calculate subnet fields from slash notation.

    Accepts ``192.168.1.10/24`` or ``192.168.1.10/255.255.255.0``.

    Raises:
        FormatError: If the notation, address or mask is malformed
        RangeError: If a numeric prefix is outside 0-32
    """
    if not isinstance(network, str) or network.count("/") != 1:
        logger.debug("Rejected network notation %r", network)
        raise FormatError(f"Network '{network}' must be in address/prefix or address/mask form")

    ip, _, suffix = network.partition("/")
    if "." in suffix:
        return compute_subnet_from_mask(ip, suffix)
    if not suffix or not set(suffix) <= set("0123456789"):
        logger.debug("Rejected prefix %r in %r", suffix, network)
        raise FormatError(f"Invalid prefix length '{suffix}' in '{network}'")
    # any prefix longer than two digits is out of range; avoids int() on huge strings
    if len(suffix) > 2:
        logger.debug("Rejected prefix %r in %r: too long", suffix, network)
        raise RangeError(f"Prefix length '{suffix}' outside 0-32")
    return compute_subnet_from_cidr(ip, int(suffix))
