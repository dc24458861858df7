from __future__ import annotations

from importlib import metadata

from fifomap.errors import FifoMapConfigError, FifoMapError, InvalidCapacityError
from fifomap.fifo_map import BoundedFifoMap

_DISTRIBUTION = "fifomap"

try:
    __version__ = metadata.version(_DISTRIBUTION)
except metadata.PackageNotFoundError:
    # Imported from src/ without an install.
    __version__ = "0.0.0"

__all__ = [
    "BoundedFifoMap",
    "FifoMapConfigError",
    "FifoMapError",
    "InvalidCapacityError",
    "__version__",
]
