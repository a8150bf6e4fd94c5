from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from . import __version__
from .copier import copy_range
from .literals import u64_arg
from .logging_config import get_logger, setup_logging
from .profile import load_profile
from .range import RangeError, resolve_range
from .streams import ByteSliceError, open_input, open_output

PROG = "bslice"

log = get_logger("cli")

_EPILOG = """\
numbers may be written in decimal, or with a 0x (hex), 0o (octal) or 0b
(binary) prefix; underscores between digits are ignored, e.g. 0x1_0000.

with no range flags the whole input is copied. --end is exclusive and, when
given, no other value may exceed it.
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Copy a contiguous byte range of a file to another file or stdout.",
        epilog=_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("input", type=str, help="path of the file to read ('-' reads stdin)")
    parser.add_argument("-o", "--output", type=str, default=None, help="file to write to (default: stdout)")
    parser.add_argument(
        "-n", "--bytes", type=u64_arg, default=None, metavar="N", help="number of bytes to read (default: all)"
    )
    parser.add_argument(
        "-s", "--start", "--skip", dest="start", type=u64_arg, default=None, metavar="OFFSET",
        help="byte to start reading at, inclusive (default: 0)",
    )
    parser.add_argument(
        "-e", "--end", type=u64_arg, default=None, metavar="OFFSET",
        help="byte to stop reading at, exclusive (default: end of input)",
    )
    parser.add_argument("--profile", type=Path, default=None, help="YAML profile with default settings")

    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="count", default=0, help="more logging (-vv for debug)")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="only log errors")

    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _log_level(args: argparse.Namespace, logging_cfg: Dict[str, Any]) -> int:
    if args.quiet:
        return logging.ERROR
    if args.verbose >= 2:
        return logging.DEBUG
    if args.verbose == 1:
        return logging.INFO
    level = getattr(logging, str(logging_cfg.get("level") or "WARNING").upper(), None)
    return level if isinstance(level, int) else logging.WARNING


def _configure_logging(args: argparse.Namespace, profile: Dict[str, Any]) -> None:
    logging_cfg = profile.get("logging") or {}
    log_file = logging_cfg.get("file")
    setup_logging(
        level=_log_level(args, logging_cfg),
        log_file=Path(log_file).expanduser() if log_file else None,
        module_levels=logging_cfg.get("module_levels") or "",
        force=True,
    )


def cmd_slice(args: argparse.Namespace, profile: Dict[str, Any]) -> None:
    output = args.output if args.output is not None else profile.get("output")

    with open_input(args.input) as (source, input_size):
        byte_range = resolve_range(input_size, start=args.start, length=args.bytes, end=args.end)
        log.info(
            "Copying bytes [%d, %d) of %r (%d bytes)",
            byte_range.start,
            byte_range.end,
            args.input,
            input_size,
        )
        with open_output(output) as sink:
            written = copy_range(byte_range.start, byte_range.length, source, sink)
    log.info("Wrote %d bytes to %s", written, output or "stdout")


def _fail(message: str) -> int:
    sys.stderr.write(f"{PROG}: error: {message}\n")
    return 1


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        profile = load_profile(args.profile)
    except (OSError, ValueError, yaml.YAMLError) as e:
        return _fail(str(e))

    _configure_logging(args, profile)

    try:
        cmd_slice(args, profile)
    except BrokenPipeError:
        log.debug("Output pipe closed early")
        # Keep the interpreter from tripping over stdout again at exit
        devnull = os.open(os.devnull, os.O_WRONLY)
        try:
            os.dup2(devnull, sys.stdout.fileno())
        finally:
            os.close(devnull)
        return 1
    except (ByteSliceError, RangeError) as e:
        log.debug("Slice failed", exc_info=True)
        return _fail(str(e))
    except OSError as e:
        log.debug("I/O failure", exc_info=True)
        return _fail(str(e))
    return 0


if __name__ == "__main__":
    sys.exit(main())
