"""
Core string primitives for ConsoleTools.

Pure functions with no terminal I/O.
"""

from .segments import repeat_segment, spacing, strip_ansi, strip_styles
from .parsing import ParseStatus, ParsedChoice, parse_choice, INT32_MIN, INT32_MAX

__all__ = [
    # Segments
    "repeat_segment",
    "spacing",
    "strip_ansi",
    "strip_styles",
    # Parsing
    "ParseStatus",
    "ParsedChoice",
    "parse_choice",
    "INT32_MIN",
    "INT32_MAX",
]
