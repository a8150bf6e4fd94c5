"""Unsigned integer literals as accepted on the command line.

Grammar:
    [0x | 0o | 0b] digits

Underscores are stripped before parsing, so ``0x_dead_beef`` and ``1_000``
are both valid. Without a prefix the literal is base 10. Values must fit in an
unsigned 64-bit integer.
"""

from __future__ import annotations

import argparse
from typing import Dict

U64_MAX = (1 << 64) - 1

_PREFIX_BASES: Dict[str, int] = {
    "0x": 16,
    "0o": 8,
    "0b": 2,
}

_DIGITS = "0123456789abcdef"


def _valid_digits(base: int) -> str:
    return _DIGITS[:base] + _DIGITS[10:base].upper()


def parse_u64(text: str) -> int:
    """Parse ``text`` into an unsigned 64-bit integer.

    Raises:
        ValueError: if the literal is empty, has a digit invalid for its base,
            or does not fit in 64 bits.
    """
    raw = text
    text = text.replace("_", "")

    prefix = text[:2] if len(text) >= 2 else ""
    base = _PREFIX_BASES.get(prefix, 10)
    digits = text[2:] if base != 10 else text

    if not digits:
        raise ValueError(f"cannot parse integer from empty string: {raw!r}")

    # int() is more lenient than we want (signs, whitespace, nested prefixes)
    allowed = _valid_digits(base)
    for ch in digits:
        if ch not in allowed:
            raise ValueError(f"invalid digit {ch!r} found in {raw!r}")

    value = int(digits, base)
    if value > U64_MAX:
        raise ValueError(f"number too large to fit in an unsigned 64-bit integer: {raw!r}")
    return value


def u64_arg(text: str) -> int:
    """argparse ``type=`` adapter for :func:`parse_u64`."""
    try:
        return parse_u64(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e
