"""fifomap exception hierarchy.

Keep this module small and dependency-free: it is imported by every other
module in the package and by tests.
"""


class FifoMapError(Exception):
    """Base exception for all fifomap errors."""


class InvalidCapacityError(FifoMapError, ValueError):
    """Raised when a map is constructed with a capacity that is not a positive integer."""


class FifoMapConfigError(FifoMapError):
    """Raised for an invalid or unreadable config file."""
