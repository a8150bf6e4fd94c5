from __future__ import annotations

import logging
from typing import BinaryIO

logger = logging.getLogger(__name__)


def _read_up_to(source: BinaryIO, length: int) -> bytearray:
    # Unbuffered and pipe-backed streams may return short reads before EOF
    buf = bytearray()
    remaining = length
    while remaining > 0:
        data = source.read(remaining)
        if not data:
            break
        buf += data
        remaining -= len(data)
    return buf


def copy_range(start: int, length: int, source: BinaryIO, sink: BinaryIO) -> int:
    """Copy ``length`` bytes of ``source`` beginning at ``start`` into ``sink``.

    The whole range is read into memory and written with a single call.
    Hitting EOF before ``length`` bytes is not an error; whatever was read is
    written. Returns the number of bytes written.
    """
    if start > 0:
        source.seek(start)
    data = _read_up_to(source, length)
    if len(data) < length:
        logger.debug("EOF after %d of %d requested bytes", len(data), length)

    sink.write(data)
    sink.flush()
    logger.debug("Copied %d bytes starting at offset %d", len(data), start)
    return len(data)
