"""IRC line handling package.

Contains the message model, the single-pass parser, the per-line stream
helpers and the formatter.
"""

from .formatter import format_message  # noqa: F401
from .models import Message  # noqa: F401
from .parser import parse, parse_line, parse_single, split_lines  # noqa: F401
from .stream import LineResult, aiter_results, iter_results  # noqa: F401

__all__ = [
    "Message",
    "LineResult",
    "parse",
    "parse_line",
    "parse_single",
    "split_lines",
    "iter_results",
    "aiter_results",
    "format_message",
]
