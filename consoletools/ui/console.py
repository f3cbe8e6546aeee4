"""
Console stream bundle.

Interactive routines never touch sys.stdout/sys.stdin directly; they write
through a ConsoleIO so tests can swap in StringIO buffers.
"""

import sys
from dataclasses import dataclass, field
from typing import Optional, TextIO

from ..core.segments import strip_ansi


@dataclass
class ConsoleIO:
    """Output, error and input streams used by the interactive routines."""
    out: TextIO = field(default_factory=lambda: sys.stdout)
    err: TextIO = field(default_factory=lambda: sys.stderr)
    inp: TextIO = field(default_factory=lambda: sys.stdin)
    use_color: bool = True

    def _prepare(self, text: str) -> str:
        return text if self.use_color else strip_ansi(text)

    def write(self, text: str, flush: bool = False):
        """Write text to the output stream."""
        self.out.write(self._prepare(text))
        if flush:
            self.out.flush()

    def write_err(self, text: str):
        """Write text to the error stream and flush it."""
        self.err.write(self._prepare(text))
        self.err.flush()

    def flush(self):
        self.out.flush()

    def readline(self) -> Optional[str]:
        """
        Read one line from the input stream.

        Returns:
            The line without its trailing newline, or None at end of input
        """
        line = self.inp.readline()
        if line == "":
            return None
        return line.rstrip("\r\n")


def default_console() -> ConsoleIO:
    """ConsoleIO bound to the process streams at call time."""
    return ConsoleIO()
