"""
Progress bar components.

Both bars clamp the current value into [0, maximum] and treat a
non-positive maximum as zero progress.
"""

import math

from ...core.segments import repeat_segment
from ..colors import Colors

FILL_CHAR = "#"
UNFILLED_CHAR = "-"


def progress_fraction(current: int, maximum: int) -> float:
    """Clamp current into [0, maximum] and return current / maximum (0.0 if maximum <= 0)."""
    if current < 0:
        current = 0
    if current > maximum:
        current = maximum
    if maximum <= 0:
        return 0.0
    return current / maximum


def _split_width(fraction: float, width: int) -> tuple[int, int]:
    filled = math.floor(fraction * width) if width > 0 else 0
    return filled, max(0, width - filled)


def progress_bar(
    current: int,
    maximum: int,
    width: int,
    bar_color: str,
    show_percentage: bool,
    percentage_color: str,
) -> str:
    """
    Build a simple "#####-----" bar with an optional percentage.

    Args:
        current: Current progress (clamped into [0, maximum])
        maximum: Value at which the bar is full
        width: Bar width in characters
        bar_color: Style for the bar
        show_percentage: Append " NN%" after the bar
        percentage_color: Style for the percentage

    Returns:
        Formatted bar string
    """
    fraction = progress_fraction(current, maximum)
    filled, unfilled = _split_width(fraction, width)

    bar = (
        f"{bar_color}"
        f"{repeat_segment(FILL_CHAR, filled)}"
        f"{repeat_segment(UNFILLED_CHAR, unfilled)}"
        f"{Colors.RESET}"
    )
    if show_percentage:
        bar += f" {percentage_color}{math.floor(fraction * 100)}%{Colors.RESET}"
    return bar


def advanced_progress_bar(
    current: int,
    maximum: int,
    width: int,
    prefix_text: str = "",
    suffix_text: str = "",
    fill_char: str = FILL_CHAR,
    unfilled_char: str = UNFILLED_CHAR,
    fill_color: str = "",
    unfilled_color: str = "",
    text_color: str = "",
    prefix_color: str = "",
    suffix_color: str = "",
    bracket_color: str = "",
    show_percentage: bool = True,
    show_brackets: bool = True,
    reset_on_completion: bool = True,
) -> str:
    """
    Build a customizable progress bar.

    Layout: prefix, "[", filled glyphs, unfilled glyphs, "]", " NN%", " suffix".
    Prefix and suffix are only written when non-empty; brackets, percentage
    and the trailing reset are each switchable.
    """
    fraction = progress_fraction(current, maximum)
    filled, unfilled = _split_width(fraction, width)

    parts = []
    if prefix_text:
        parts.append(f"{prefix_color}{prefix_text}")
    if show_brackets:
        parts.append(f"{bracket_color}[")

    parts.append(f"{fill_color}{repeat_segment(fill_char, filled)}")
    parts.append(f"{unfilled_color}{repeat_segment(unfilled_char, unfilled)}")

    if show_brackets:
        parts.append(f"{bracket_color}]")
    if show_percentage:
        parts.append(f"{text_color} {math.floor(fraction * 100)}%")
    if suffix_text:
        parts.append(f" {suffix_color}{suffix_text}")
    if reset_on_completion:
        parts.append(Colors.RESET)

    return "".join(parts)
