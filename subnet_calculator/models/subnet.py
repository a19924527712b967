"""Pydantic models for subnet calculator results and API requests."""

from pydantic import BaseModel, ConfigDict, Field


class Subnet(BaseModel):
    """Result of one subnet calculation.

    Immutable and compared by value. ``total_hosts`` is ``broadcast -
    network - 1`` without clamping, so a /31 yields 0 and a /32 yields -1.
    """

    model_config = ConfigDict(frozen=True)

    ip_address: str
    subnet_mask: str
    prefix_length: int
    wildcard_mask: str
    network_address: str
    broadcast_address: str
    first_host: str
    last_host: str
    total_hosts: int


class CIDRRequest(BaseModel):
    """Request model for a calculation from a CIDR prefix length."""

    address: str = Field(..., description="IPv4 address (e.g., 192.168.1.10)")
    prefix_length: int = Field(..., description="CIDR prefix length, 0-32")


class MaskRequest(BaseModel):
    """Request model for a calculation from a dotted-decimal mask."""

    address: str = Field(..., description="IPv4 address (e.g., 192.168.1.10)")
    subnet_mask: str = Field(..., description="Subnet mask (e.g., 255.255.255.0)")


class NetworkRequest(BaseModel):
    """Request model for slash notation (address/prefix or address/mask)."""

    network: str = Field(
        ..., description="Network such as 192.168.1.10/24 or 192.168.1.10/255.255.255.0"
    )


class ValidateRequest(BaseModel):
    """Request model for IPv4 address validation."""

    address: str = Field(..., description="Dotted-decimal IPv4 address")
