import logging

import pytest

from byteslice.range import ExceedsBoundError, RangeError, ResolvedRange, resolve_range


def test_no_constraints_reads_everything() -> None:
    for size in (0, 1, 10, 4096):
        assert resolve_range(size) == ResolvedRange(0, size)


def test_start_only() -> None:
    assert resolve_range(10, start=8).as_tuple() == (8, 2)
    assert resolve_range(10, start=0).as_tuple() == (0, 10)


def test_start_at_input_size_is_empty() -> None:
    assert resolve_range(10, start=10).as_tuple() == (10, 0)


def test_bytes_only() -> None:
    assert resolve_range(10, length=3).as_tuple() == (0, 3)
    assert resolve_range(10, length=10).as_tuple() == (0, 10)


def test_start_and_bytes_unchanged() -> None:
    assert resolve_range(10, start=2, length=3).as_tuple() == (2, 3)
    assert resolve_range(10, start=7, length=3).as_tuple() == (7, 3)


def test_end_only() -> None:
    assert resolve_range(10, end=5).as_tuple() == (0, 5)
    assert resolve_range(10, end=0).as_tuple() == (0, 0)


def test_start_and_end() -> None:
    assert resolve_range(10, start=3, end=7).as_tuple() == (3, 4)
    assert resolve_range(10, start=3, end=3).as_tuple() == (3, 0)


def test_bytes_and_end() -> None:
    assert resolve_range(10, length=4, end=6).as_tuple() == (0, 4)


def test_all_three_consistent() -> None:
    r = resolve_range(10, start=2, length=3, end=5)
    assert r.as_tuple() == (2, 3)
    assert r.end == 5


def test_all_three_underfill_warns(caplog) -> None:
    with caplog.at_level(logging.WARNING, logger="byteslice.range"):
        r = resolve_range(10, start=2, length=1, end=5)
    assert r.as_tuple() == (2, 1)
    assert "stops before end" in caplog.text


def test_bytes_exceeds_input_size() -> None:
    with pytest.raises(ExceedsBoundError) as exc:
        resolve_range(10, length=20)
    assert exc.value.quantity == "bytes"
    assert exc.value.bound == "input size"
    assert str(exc.value) == "value of bytes (20) cannot exceed input size (10)"


@pytest.mark.parametrize(
    "kwargs, quantity",
    [
        ({"start": 11}, "start"),
        ({"end": 11}, "end"),
        ({"start": 6, "length": 5}, "start + bytes"),
        ({"start": 11, "length": 1}, "start + bytes"),
    ],
)
def test_exceeds_input_size_names_quantity(kwargs, quantity) -> None:
    with pytest.raises(ExceedsBoundError) as exc:
        resolve_range(10, **kwargs)
    assert exc.value.quantity == quantity
    assert exc.value.bound == "input size"


@pytest.mark.parametrize(
    "kwargs, quantity",
    [
        ({"start": 6, "end": 5}, "start"),
        ({"length": 6, "end": 5}, "bytes"),
        ({"start": 2, "length": 4, "end": 5}, "start + bytes"),
    ],
)
def test_end_becomes_ceiling(kwargs, quantity) -> None:
    with pytest.raises(ExceedsBoundError) as exc:
        resolve_range(10, **kwargs)
    assert exc.value.quantity == quantity
    assert exc.value.bound == "end"
    assert exc.value.limit == 5


def test_range_error_is_value_error() -> None:
    with pytest.raises(RangeError):
        resolve_range(0, start=1)
    assert issubclass(RangeError, ValueError)


def test_huge_sum_does_not_wrap() -> None:
    big = (1 << 64) - 1
    with pytest.raises(ExceedsBoundError) as exc:
        resolve_range(big, start=big, length=big)
    assert exc.value.quantity == "start + bytes"


def test_rejects_negative_values() -> None:
    with pytest.raises(ValueError):
        resolve_range(10, start=-1)
    with pytest.raises(ValueError):
        resolve_range(-1)
