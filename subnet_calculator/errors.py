"""Exceptions raised by the subnet calculator core."""


class SubnetCalculatorError(ValueError):
    """Base class for all calculator input errors."""


class FormatError(SubnetCalculatorError):
    """Input is not a valid dotted-decimal address or canonical mask."""


class RangeError(SubnetCalculatorError):
    """Numeric input (prefix length, 32-bit value) is out of range."""
