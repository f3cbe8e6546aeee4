"""
Reusable visual building blocks.

Pure formatters: each returns a styled string and writes nothing.
"""

from .header import (
    header,
    advanced_header,
)
from .progress import (
    FILL_CHAR,
    UNFILLED_CHAR,
    progress_fraction,
    progress_bar,
    advanced_progress_bar,
)
from .labels import (
    error,
    warning,
)
from .notification import notification

__all__ = [
    # Header
    "header",
    "advanced_header",
    # Progress
    "FILL_CHAR",
    "UNFILLED_CHAR",
    "progress_fraction",
    "progress_bar",
    "advanced_progress_bar",
    # Labels
    "error",
    "warning",
    # Notification
    "notification",
]
