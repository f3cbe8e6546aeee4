"""
Menu choice parsing.

Turns a raw input line into an explicit result instead of raising, so the
prompt can branch on malformed vs overflowing input.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

# Numbers outside this range are reported as overflow, matching a C int
INT32_MIN = -2 ** 31
INT32_MAX = 2 ** 31 - 1

_INTEGER = re.compile(r'[+-]?[0-9]+')


class ParseStatus(Enum):
    OK = "ok"
    MALFORMED = "malformed"
    OVERFLOW = "overflow"


@dataclass(frozen=True)
class ParsedChoice:
    status: ParseStatus
    value: Optional[int] = None
    text: str = ""

    @property
    def ok(self) -> bool:
        return self.status is ParseStatus.OK


def parse_choice(line: str) -> ParsedChoice:
    """
    Parse one line of user input as a signed decimal integer.

    Surrounding whitespace is ignored. Anything else that is not a digit
    (after an optional leading sign) makes the line malformed.

    Returns:
        ParsedChoice with status OK and the integer value, MALFORMED, or
        OVERFLOW when the number does not fit in 32 bits
    """
    text = line.strip()
    if not _INTEGER.fullmatch(text):
        return ParsedChoice(ParseStatus.MALFORMED, text=text)

    sign = text[0] if text[0] in "+-" else ""
    digits = text.lstrip("+-").lstrip("0") or "0"
    # Check digit count first; int() refuses very long digit strings
    if len(digits) > 10:
        return ParsedChoice(ParseStatus.OVERFLOW, text=text)

    value = int(sign + digits)
    if value < INT32_MIN or value > INT32_MAX:
        return ParsedChoice(ParseStatus.OVERFLOW, text=text)
    return ParsedChoice(ParseStatus.OK, value=value, text=text)
