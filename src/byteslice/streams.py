"""Opening the input and output ends of a copy.

``-`` selects the standard streams. Standard input cannot seek, so it is read
fully into memory first; its size is then simply the number of bytes read.
"""

from __future__ import annotations

import io
import logging
import os
import sys
from contextlib import contextmanager
from typing import BinaryIO, Iterator, Optional, Tuple

logger = logging.getLogger(__name__)

STDIO = "-"


class ByteSliceError(Exception):
    """Base error for failures reported to the user."""
    pass


class PathError(ByteSliceError):
    """Raised when a path given on the command line cannot be used."""
    pass


def _is_text(path: str) -> bool:
    # Undecodable argv bytes arrive as lone surrogates
    try:
        path.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


@contextmanager
def open_input(path: str, stdin: Optional[BinaryIO] = None) -> Iterator[Tuple[BinaryIO, int]]:
    """Yield a seekable binary handle for ``path`` along with its size in bytes."""
    if path == STDIO:
        stream = stdin if stdin is not None else sys.stdin.buffer
        data = stream.read()
        logger.debug("Buffered %d bytes from standard input", len(data))
        with io.BytesIO(data) as buf:
            yield buf, len(data)
        return

    if not os.path.exists(path):
        # Only a missing path needs a printable name
        if not _is_text(path):
            raise PathError("specified path was invalid UTF-8!")
        raise PathError(f"invalid path {path}!")

    with open(path, "rb") as f:
        size = os.fstat(f.fileno()).st_size
        logger.debug("Opened %r (%d bytes)", path, size)
        yield f, size


@contextmanager
def open_output(path: Optional[str], stdout: Optional[BinaryIO] = None) -> Iterator[BinaryIO]:
    """Yield a binary sink for ``path``; ``None`` or ``-`` is standard output.

    Standard output is flushed but left open.
    """
    if path is None or path == STDIO:
        stream = stdout if stdout is not None else sys.stdout.buffer
        try:
            yield stream
        finally:
            stream.flush()
        return

    if not _is_text(path):
        raise PathError("invalid UTF-8 in output file!")

    with open(path, "wb") as f:
        logger.debug("Writing to %s", path)
        yield f
