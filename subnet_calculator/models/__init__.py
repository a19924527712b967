from .subnet import CIDRRequest, MaskRequest, NetworkRequest, Subnet, ValidateRequest

__all__ = ["CIDRRequest", "MaskRequest", "NetworkRequest", "Subnet", "ValidateRequest"]
