"""Extract a contiguous byte range from a file or standard input."""

from .copier import copy_range
from .range import ExceedsBoundError, RangeError, ResolvedRange, resolve_range

__all__ = [
    "__version__",
    "ExceedsBoundError",
    "RangeError",
    "ResolvedRange",
    "copy_range",
    "resolve_range",
]
__version__ = "0.5.0"
