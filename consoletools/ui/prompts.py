"""
Line-based console prompts.

pause_console() waits for Enter. prompt_numbered_menu() shows a numbered
list and reads a single choice.

Menu states:
    NO_OPTIONS       empty option list, nothing is shown or read
    READ_ERROR       the input stream is closed or failed
    INVALID_FORMAT   the line is not an integer
    NUMERIC_OVERFLOW the integer does not fit in 32 bits
    OUT_OF_RANGE     the integer is not between 1 and the option count
    VALID_SELECTION  returns the zero-based index

The prompt makes a single attempt: every failure prints a diagnostic and
returns None. Callers that want to re-ask just call it again.
"""

import logging
from typing import Optional, Sequence

from ..core.parsing import ParseStatus, parse_choice
from ..exceptions import (
    EmptyOptions,
    InputReadFailure,
    MalformedNumericInput,
    MenuError,
    NumericOverflow,
    SelectionOutOfRange,
)
from .colors import Colors
from .console import ConsoleIO, default_console

logger = logging.getLogger(__name__)


def pause_console(message: str, *, io: Optional[ConsoleIO] = None):
    """Print message, then block until a line (or end of input) is read."""
    io = io or default_console()
    io.write(f"{message}\n", flush=True)
    io.readline()


def read_menu_choice(line: Optional[str], option_count: int) -> int:
    """
    Validate one input line against a menu of option_count entries.

    Args:
        line: Raw line as read, or None if reading failed
        option_count: Number of options shown

    Returns:
        Zero-based index of the chosen option

    Raises:
        EmptyOptions: option_count is zero
        InputReadFailure: line is None
        MalformedNumericInput: line is not an integer
        NumericOverflow: the integer does not fit in 32 bits
        SelectionOutOfRange: the integer is outside 1..option_count
    """
    if option_count <= 0:
        raise EmptyOptions()
    if line is None:
        raise InputReadFailure()

    parsed = parse_choice(line)
    if parsed.status is ParseStatus.MALFORMED:
        raise MalformedNumericInput(parsed.text)
    if parsed.status is ParseStatus.OVERFLOW:
        raise NumericOverflow(parsed.text, option_count)

    if parsed.value < 1 or parsed.value > option_count:
        raise SelectionOutOfRange(parsed.value, option_count)
    return parsed.value - 1


def render_menu(
    options: Sequence[str],
    separator: str,
    prompt_message: str,
    message_color: str,
    number_color: str,
    separator_color: str,
    option_color: str,
) -> str:
    """Render the prompt message and the numbered option lines."""
    lines = [f"{message_color}{prompt_message}\n"]
    for number, label in enumerate(options, start=1):
        lines.append(
            f"{number_color}{number}"
            f"{separator_color}{separator}"
            f"{option_color}{label}"
            f"{Colors.RESET}\n"
        )
    return "".join(lines)


def prompt_numbered_menu(
    options: Sequence[str],
    separator: str,
    prompt_message: str,
    input_question: str,
    message_color: str,
    number_color: str,
    separator_color: str,
    option_color: str,
    input_question_color: str,
    error_color: str,
    *,
    io: Optional[ConsoleIO] = None,
) -> Optional[int]:
    """
    Show a numbered menu and read one choice.

    Args:
        options: Option labels, shown as 1..N
        separator: Text between the number and the label (e.g. ". ")
        prompt_message: Line shown above the options
        input_question: Text shown before the input cursor
        message_color: Style for prompt_message
        number_color: Style for option numbers and the typed answer
        separator_color: Style for the separator
        option_color: Style for option labels
        input_question_color: Style for input_question
        error_color: Style for diagnostics
        io: Console to use (process streams by default)

    Returns:
        Zero-based index of the chosen option, or None if no valid choice
        was made (a diagnostic has been printed)
    """
    io = io or default_console()

    if not options:
        logger.debug("Menu state: NO_OPTIONS")
        io.write_err(f"{EmptyOptions.message}\n")
        return None

    io.write(render_menu(
        options, separator, prompt_message,
        message_color, number_color, separator_color, option_color,
    ))
    io.write(f"{input_question_color}\n{input_question}{number_color}", flush=True)

    try:
        line = io.readline()
    except (OSError, ValueError) as e:
        # ValueError covers undecodable bytes and reads from a closed stream
        logger.debug("Menu input stream failed: %s", e)
        line = None

    try:
        index = read_menu_choice(line, len(options))
    except InputReadFailure as e:
        logger.debug("Menu state: READ_ERROR")
        io.write(error_color)
        io.write_err(f"{e.message}\n")
        io.write(Colors.RESET, flush=True)
        return None
    except MenuError as e:
        logger.debug("Menu state: %s (%r)", type(e).__name__, line)
        io.write(f"{error_color}{e.message}\n\n{Colors.RESET}", flush=True)
        return None

    logger.debug("Menu state: VALID_SELECTION (%d)", index)
    io.write(Colors.RESET, flush=True)
    return index
