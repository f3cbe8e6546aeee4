"""
Header components.

A header is a line segment, the text padded by a spacing character on each
side, and a closing line segment, each part in its own color.
"""

from ...core.segments import repeat_segment
from ..colors import Colors


def header(
    line_char: str,
    line_count: int,
    text: str,
    spacing_char: str,
    line_color: str,
    text_color: str,
    spacing_color: str,
) -> str:
    """
    Build a symmetric header such as "===== HEADER =====".

    Args:
        line_char: Character (or string) repeated on both sides
        line_count: How many times to repeat it per side
        text: Header text
        spacing_char: Padding between the lines and the text
        line_color: Style for both line segments
        text_color: Style for the text
        spacing_color: Style for the padding

    Returns:
        The styled header, ending with a reset
    """
    segment = repeat_segment(line_char, line_count)
    return (
        f"{line_color}{segment}"
        f"{spacing_color}{spacing_char}"
        f"{text_color}{text}"
        f"{spacing_color}{spacing_char}"
        f"{line_color}{segment}"
        f"{Colors.RESET}"
    )


def advanced_header(
    left_char: str,
    left_count: int,
    right_char: str,
    right_count: int,
    text: str,
    spacing_char: str,
    left_color: str,
    right_color: str,
    text_color: str,
    spacing_color: str,
    reset_on_end: bool = True,
) -> str:
    """
    Build a header whose left and right segments differ.

    With reset_on_end=False the trailing reset is omitted, so whatever is
    printed next keeps right_color.
    """
    result = (
        f"{left_color}{repeat_segment(left_char, left_count)}"
        f"{spacing_color}{spacing_char}"
        f"{text_color}{text}"
        f"{spacing_color}{spacing_char}"
        f"{right_color}{repeat_segment(right_char, right_count)}"
    )
    if reset_on_end:
        result += Colors.RESET
    return result
