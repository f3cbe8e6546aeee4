"""
Error and warning labels.

Neither label ends with a reset; the caller decides when the style ends.
"""

from ..colors import Colors


def error(message: str) -> str:
    return f"{Colors.LIGHT_RED}[ERROR]: {message}"


def warning(message: str) -> str:
    return f"{Colors.LIGHT_YELLOW}[WARNING]: {message}"
