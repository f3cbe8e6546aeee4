"""
Repeated-segment building and style stripping.

Every formatter builds its line and bar regions through repeat_segment().
"""

import re

ANSI_PATTERN = re.compile(r'\x1b\[[0-9;]*m')

RESET = "\033[0m"


def repeat_segment(unit: str, count: int) -> str:
    """Return `unit` concatenated `count` times. Zero or negative counts give ''."""
    if count <= 0:
        return ""
    return unit * count


def spacing(count: int) -> str:
    """Return `count` newline characters."""
    return repeat_segment("\n", count)


def strip_ansi(text: str) -> str:
    """Remove ANSI escape codes from text."""
    return ANSI_PATTERN.sub('', text)


def strip_styles(text: str, *tokens: str) -> str:
    """
    Remove the reset token and each given style token from text.

    Unlike strip_ansi(), this works for arbitrary caller-supplied tokens,
    which are not required to be valid escape sequences.

    Args:
        text: Formatter output
        *tokens: Style tokens that were passed to the formatter

    Returns:
        The text with every occurrence of each token removed
    """
    # Longest first so a token containing another is removed whole
    for token in sorted({RESET, *tokens}, key=len, reverse=True):
        if token:
            text = text.replace(token, "")
    return text
