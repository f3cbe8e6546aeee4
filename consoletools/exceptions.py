"""
Exception types for ConsoleTools.

Formatters never raise. The menu prompt raises the MenuError family
internally and turns each one into a printed diagnostic.
"""

from typing import Optional


class ConsoleToolsError(Exception):
    """Base class for all library errors."""
    pass


class UnknownColorError(ConsoleToolsError, KeyError):
    """Raised when a color name is not in the palette."""

    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self):
        return f"Unknown color: {self.name!r}"


class SettingsError(ConsoleToolsError):
    """Raised when a settings file holds values of the wrong type."""
    pass


class MenuError(ConsoleToolsError):
    """Base class for numbered-menu failures. `message` is shown to the user."""

    message = "Invalid selection."

    def __init__(self, message: Optional[str] = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class EmptyOptions(MenuError):
    message = "No menu options provided."


class InputReadFailure(MenuError):
    message = "Input error. Exiting."


class MalformedNumericInput(MenuError):
    message = "Invalid input. Please enter a numeric value."

    def __init__(self, text: str):
        super().__init__()
        self.text = text


class SelectionOutOfRange(MenuError):
    def __init__(self, value: int, option_count: int, message: Optional[str] = None):
        self.value = value
        self.option_count = option_count
        if message is None:
            message = (
                f"Invalid choice. Please enter a number between 1 and {option_count}."
            )
        super().__init__(message)


class NumericOverflow(SelectionOutOfRange):
    """The entered number does not fit in a 32-bit signed integer."""

    def __init__(self, text: str, option_count: int):
        super().__init__(
            None,
            option_count,
            "The number you entered is out of range. Please try again.",
        )
        self.text = text
