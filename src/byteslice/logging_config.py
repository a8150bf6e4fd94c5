"""Centralized logging configuration for byteslice.

Usage:
    from byteslice.logging_config import setup_logging
    setup_logging()  # Call once at startup

    # Then in any module:
    import logging
    log = logging.getLogger("byteslice.mymodule")
"""

from __future__ import annotations

import logging
import re
import sys
from pathlib import Path
from typing import Dict, Optional

ROOT_LOGGER = "byteslice"

_CONFIGURED = False


def parse_module_levels(spec: str) -> Dict[str, int]:
    """Parse per-module logger levels from a profile string.

    Format:
        "byteslice.copier=DEBUG,byteslice.range=INFO"

    Notes:
      - Names not starting with "byteslice" are auto-prefixed.
      - Separators: comma/semicolon. Assignment: "=" or ":".
      - Invalid entries are ignored.
    """
    out: Dict[str, int] = {}
    if not spec:
        return out
    for part in re.split(r"[;,]+", spec):
        part = part.strip()
        if not part:
            continue
        if "=" in part:
            name, level_str = part.split("=", 1)
        elif ":" in part:
            name, level_str = part.split(":", 1)
        else:
            continue
        name = name.strip()
        level_str = level_str.strip().upper()
        if not name or not level_str:
            continue
        if not name.startswith(ROOT_LOGGER):
            name = f"{ROOT_LOGGER}.{name}"
        level = getattr(logging, level_str, None)
        if isinstance(level, int):
            out[name] = level
    return out


def setup_logging(
    level: int = logging.WARNING,
    log_file: Optional[Path] = None,
    format_string: Optional[str] = None,
    module_levels: str = "",
    *,
    force: bool = False,
) -> None:
    """Configure logging for the byteslice package.

    Args:
        level: Logging level (default: WARNING, the tool is quiet unless asked)
        log_file: Optional file path to write logs to
        format_string: Custom format string (default uses a standard format)
        module_levels: Per-module overrides, see :func:`parse_module_levels`
        force: Reconfigure even if logging was already set up
    """
    global _CONFIGURED
    if _CONFIGURED and not force:
        return

    if format_string is None:
        format_string = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)

    # Remove existing handlers to avoid duplicates
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    # stdout may carry the extracted bytes, so logs always go to stderr
    console_handler = logging.StreamHandler(sys.stderr)
    # Keep handler permissive so per-module overrides can enable DEBUG without
    # globally switching everything to DEBUG.
    console_handler.setLevel(logging.DEBUG)
    console_handler.setFormatter(logging.Formatter(format_string, datefmt="%Y-%m-%d %H:%M:%S"))
    logger.addHandler(console_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(format_string, datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(file_handler)

    # Don't propagate to root logger
    logger.propagate = False

    for name, lvl in parse_module_levels(module_levels).items():
        logging.getLogger(name).setLevel(lvl)

    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given module name.

    If name doesn't start with 'byteslice', it will be prefixed.
    """
    if not name.startswith(ROOT_LOGGER):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)
