"""
Shared color definitions for terminal output.

Every token is a plain ANSI escape string. Nothing in the library parses
them; they are concatenated verbatim.
"""

from types import MappingProxyType

from ..exceptions import UnknownColorError


class Colors:
    # Standard colors
    RED = "\033[31m"
    ORANGE = "\033[38;5;208m"
    YELLOW = "\033[33m"
    GREEN = "\033[32m"
    BLUE = "\033[34m"
    PURPLE = "\033[35m"
    CYAN = "\033[36m"

    # Normal colors
    WHITE = "\033[37m"
    GRAY = "\033[90m"
    BLACK = "\033[30m"

    # Light colors
    LIGHT_RED = "\033[91m"
    LIGHT_ORANGE = "\033[38;5;214m"
    LIGHT_YELLOW = "\033[93m"
    LIGHT_GREEN = "\033[92m"
    LIGHT_BLUE = "\033[94m"
    LIGHT_PURPLE = "\033[95m"
    LIGHT_CYAN = "\033[96m"

    RESET = "\033[0m"


COLOR_NAMES = MappingProxyType({
    name.lower(): value
    for name, value in vars(Colors).items()
    if name.isupper()
})


def get_color(name: str) -> str:
    """
    Look up a color token by name.

    Args:
        name: Color name, case-insensitive (e.g. "light_blue", "RESET")

    Returns:
        The ANSI escape string for that color

    Raises:
        UnknownColorError: If no color has that name
    """
    try:
        return COLOR_NAMES[name.strip().lower()]
    except KeyError:
        raise UnknownColorError(name) from None
