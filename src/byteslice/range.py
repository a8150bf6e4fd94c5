"""Resolve user supplied start/bytes/end constraints into a concrete range.

No IO happens here; the caller provides the total input size and receives a
:class:`ResolvedRange` ready for :func:`byteslice.copier.copy_range`.

Ranges are half-open: ``[start, end)``. When ``end`` is given it replaces the
input size as the ceiling that every other quantity is checked against.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .literals import U64_MAX

logger = logging.getLogger(__name__)

INPUT_SIZE = "input size"
START = "start"
BYTES = "bytes"
END = "end"
START_PLUS_BYTES = "start + bytes"


class RangeError(ValueError):
    """Base error for ranges that cannot be satisfied."""
    pass


class ExceedsBoundError(RangeError):
    """Raised when a supplied quantity is larger than the ceiling it must respect."""

    def __init__(self, quantity: str, value: int, bound: str, limit: int):
        self.quantity = quantity
        self.value = value
        self.bound = bound
        self.limit = limit
        super().__init__(f"value of {quantity} ({value}) cannot exceed {bound} ({limit})")


@dataclass(frozen=True)
class ResolvedRange:
    start: int
    length: int

    @property
    def end(self) -> int:
        return self.start + self.length

    def as_tuple(self) -> Tuple[int, int]:
        return self.start, self.length


def _check_u64(name: str, value: Optional[int]) -> None:
    if value is None:
        return
    if value < 0 or value > U64_MAX:
        raise ValueError(f"{name} must be an unsigned 64-bit integer, got {value}")


def _check_ceiling(quantities: List[Tuple[str, int]], bound: str, limit: int) -> None:
    """Raise for the largest quantity above ``limit``.

    Ties go to the quantity listed last.
    """
    worst: Optional[Tuple[str, int]] = None
    for name, value in quantities:
        if worst is None or value >= worst[1]:
            worst = (name, value)
    if worst is not None and worst[1] > limit:
        raise ExceedsBoundError(worst[0], worst[1], bound, limit)


def resolve_range(
    input_size: int,
    start: Optional[int] = None,
    length: Optional[int] = None,
    end: Optional[int] = None,
) -> ResolvedRange:
    """Compute the ``(start, length)`` to read from an input of ``input_size`` bytes.

    Args:
        input_size: Total size of the input in bytes.
        start: Inclusive offset to begin at.
        length: Number of bytes to read (the ``--bytes`` flag).
        end: Exclusive offset to stop before.

    Returns:
        The resolved range.

    Raises:
        ExceedsBoundError: if a supplied quantity exceeds the input size, or
            exceeds ``end`` when ``end`` is supplied.
    """
    _check_u64(INPUT_SIZE, input_size)
    _check_u64(START, start)
    _check_u64(BYTES, length)
    _check_u64(END, end)

    quantities: List[Tuple[str, int]] = []
    if start is not None:
        quantities.append((START, start))
    if length is not None:
        quantities.append((BYTES, length))
    if start is not None and length is not None:
        quantities.append((START_PLUS_BYTES, start + length))

    _check_ceiling(quantities + ([(END, end)] if end is not None else []), INPUT_SIZE, input_size)

    ceiling = input_size
    if end is not None:
        _check_ceiling(quantities, END, end)
        ceiling = end

    if start is not None and length is not None:
        if end is not None and start + length < end:
            logger.warning(
                "start + bytes (%d) stops before end (%d); the last %d byte(s) up to end are not read",
                start + length,
                end,
                end - (start + length),
            )
        resolved = ResolvedRange(start, length)
    elif start is not None:
        resolved = ResolvedRange(start, ceiling - start)
    elif length is not None:
        resolved = ResolvedRange(0, length)
    else:
        resolved = ResolvedRange(0, ceiling)

    logger.debug(
        "Resolved range start=%d length=%d (input_size=%d, ceiling=%d)",
        resolved.start,
        resolved.length,
        input_size,
        ceiling,
    )
    return resolved
