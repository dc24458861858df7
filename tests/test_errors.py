import pytest

from fifomap.errors import FifoMapConfigError, FifoMapError, InvalidCapacityError


def test_all_errors_are_subclasses_of_fifomap_error() -> None:
    assert issubclass(InvalidCapacityError, FifoMapError)
    assert issubclass(FifoMapConfigError, FifoMapError)


def test_invalid_capacity_is_a_value_error() -> None:
    assert issubclass(InvalidCapacityError, ValueError)


def test_error_message_is_preserved() -> None:
    msg = "boom"
    err = FifoMapConfigError(msg)
    assert str(err) == msg


def test_can_catch_any_fifomap_error() -> None:
    def raise_one() -> None:
        raise InvalidCapacityError("nope")

    with pytest.raises(FifoMapError):
        raise_one()
