"""
ConsoleTools - colored console formatting and simple prompts.

Formatters return styled strings; interactive routines write to a ConsoleIO.

Import from submodules directly or from the package:
    from consoletools import Colors, header, progress_bar
    from consoletools.ui.prompts import prompt_numbered_menu
    from consoletools.config import ConsoleSettings
"""

__version__ = "1.0.0"

from . import logging_setup  # noqa: F401  (installs the package NullHandler)
from .core import spacing, strip_ansi, strip_styles
from .config import ConsoleSettings
from .exceptions import (
    ConsoleToolsError,
    UnknownColorError,
    SettingsError,
    MenuError,
    EmptyOptions,
    InputReadFailure,
    MalformedNumericInput,
    SelectionOutOfRange,
    NumericOverflow,
)
from .ui import (
    Colors,
    COLOR_NAMES,
    get_color,
    ConsoleIO,
    header,
    advanced_header,
    progress_bar,
    advanced_progress_bar,
    error,
    warning,
    notification,
    print_typing_text_effect,
    print_spinner,
    pause_console,
    prompt_numbered_menu,
)
