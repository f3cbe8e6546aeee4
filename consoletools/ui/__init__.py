"""
User interface module.

Colors, string formatters and blocking console interactions.
"""

from .colors import Colors, COLOR_NAMES, get_color
from .console import ConsoleIO, default_console
from .components import (
    header,
    advanced_header,
    progress_fraction,
    progress_bar,
    advanced_progress_bar,
    error,
    warning,
    notification,
)
from .effects import SPINNER_FRAMES, print_typing_text_effect, print_spinner
from .prompts import pause_console, prompt_numbered_menu, read_menu_choice, render_menu

__all__ = [
    # Colors
    "Colors",
    "COLOR_NAMES",
    "get_color",
    # Console
    "ConsoleIO",
    "default_console",
    # Components
    "header",
    "advanced_header",
    "progress_fraction",
    "progress_bar",
    "advanced_progress_bar",
    "error",
    "warning",
    "notification",
    # Effects
    "SPINNER_FRAMES",
    "print_typing_text_effect",
    "print_spinner",
    # Prompts
    "pause_console",
    "prompt_numbered_menu",
    "read_menu_choice",
    "render_menu",
]
