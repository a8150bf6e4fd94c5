import argparse

import pytest

from byteslice.literals import U64_MAX, parse_u64, u64_arg


def test_parse_decimal() -> None:
    assert parse_u64("0") == 0
    assert parse_u64("42") == 42
    assert parse_u64("1_000") == 1000


def test_parse_prefixed() -> None:
    assert parse_u64("0xff") == 255
    assert parse_u64("0xFF") == 255
    assert parse_u64("0x_ff") == 255
    assert parse_u64("0o17") == 15
    assert parse_u64("0b101") == 5
    assert parse_u64("0b_1111_0000") == 0xF0


def test_parse_u64_limits() -> None:
    assert parse_u64(str(U64_MAX)) == U64_MAX
    assert parse_u64("0xffff_ffff_ffff_ffff") == U64_MAX
    with pytest.raises(ValueError, match="too large"):
        parse_u64(str(U64_MAX + 1))


@pytest.mark.parametrize("text", ["", "_", "0x", "0b_", "-1", "+1", " 1", "12a", "0b102", "0o8", "0X10", "0x0x1", "1.5"])
def test_parse_rejects_malformed(text: str) -> None:
    with pytest.raises(ValueError):
        parse_u64(text)


def test_u64_arg_reports_to_argparse() -> None:
    assert u64_arg("0x10") == 16
    with pytest.raises(argparse.ArgumentTypeError, match="invalid digit"):
        u64_arg("0xzz")
