from __future__ import annotations

import fifomap


def test_map_is_exported() -> None:
    from fifomap.fifo_map import BoundedFifoMap  # noqa: PLC0415

    assert fifomap.BoundedFifoMap is BoundedFifoMap


def test_exceptions_are_exported() -> None:
    from fifomap import (  # noqa: PLC0415
        FifoMapConfigError,
        FifoMapError,
        InvalidCapacityError,
    )

    for exc in (FifoMapError, FifoMapConfigError, InvalidCapacityError):
        assert issubclass(exc, Exception)


def test_version_is_a_string() -> None:
    assert isinstance(fifomap.__version__, str)
    assert fifomap.__version__
