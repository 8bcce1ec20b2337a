"""
EE Toolbox - Validated Console Input

Line-oriented prompt/response helpers used by every menu.  Each read method
prints a prompt, reads one line and keeps asking until the line holds a
single number that satisfies the requested bound:

    read_int(prompt, minimum, maximum)   integer in [minimum, maximum]
    read_positive_float(prompt)          finite float > 0
    confirm(prompt)                      True only for a 'y' / 'Y' answer

Leading whitespace is accepted; after the number only spaces, tabs and the
line terminator may follow.

Running out of input is the one unrecoverable condition: the reader prints
"Input error. Exiting." and raises InputClosedError.  A line that cannot be
decoded is logged and treated like any other invalid entry.

Testing note: pass io.StringIO objects as stdin / stdout to script a session.
"""

from __future__ import annotations

import logging
import math
import re
import sys
from typing import TextIO

from ee_toolbox.errors import InputClosedError

log = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Number grammar
# ---------------------------------------------------------------------------

_INT_PREFIX = re.compile(r"\s*[+-]?\d+")

_FLOAT_PREFIX = re.compile(
    r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?"
)

# Characters allowed after the number.
_TRAILING_OK = " \t\r\n"

# Stands in for a line whose bytes are not valid in the input encoding.
_UNDECODABLE_LINE = "\ufffd\n"


def _split_number(pattern: re.Pattern, line: str) -> tuple[str | None, str]:
    """Return (number_text, remainder) or (None, line) if no number leads."""
    match = pattern.match(line)
    if match is None:
        return None, line
    return match.group(0), line[match.end():]


# ---------------------------------------------------------------------------
# Console
# ---------------------------------------------------------------------------

class Console:
    """Prompting console bound to a text input and a text output stream.

    Args:
        stdin:  Line source; defaults to sys.stdin.
        stdout: Output sink; defaults to sys.stdout.
    """

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self._in  = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def write(self, text: str) -> None:
        self._out.write(text)
        self._out.flush()

    def line(self, text: str = "") -> None:
        self.write(text + "\n")

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def _raw_line(self) -> str:
        try:
            return self._in.readline()
        except UnicodeDecodeError as exc:
            log.warning("Discarding undecodable input line: %s", exc)
            return _UNDECODABLE_LINE

    def _read_line(self) -> str:
        """Read one raw line; an empty string means end of input."""
        line = self._raw_line()
        if not line:
            self.line("\nInput error. Exiting.")
            raise InputClosedError("end of input")
        return line

    def read_int(self, prompt: str, minimum: int, maximum: int) -> int:
        """Prompt until the user enters an integer in [minimum, maximum]."""
        while True:
            self.write(prompt)
            text, rest = _split_number(_INT_PREFIX, self._read_line())

            if text is None:
                self.line("Please enter an integer.")
                continue
            if rest.strip(_TRAILING_OK):
                self.line("Unexpected characters. Try again.")
                continue

            value = int(text)
            if value < minimum or value > maximum:
                self.line(f"Value must be between {minimum} and {maximum}.")
                continue

            return value

    def read_positive_float(self, prompt: str) -> float:
        """Prompt until the user enters a finite number greater than zero."""
        while True:
            self.write(prompt)
            text, rest = _split_number(_FLOAT_PREFIX, self._read_line())

            if text is None:
                self.line("Enter a valid number.")
                continue
            if rest.strip(_TRAILING_OK):
                self.line("Invalid characters. Try again.")
                continue

            value = float(text)
            if not math.isfinite(value):
                self.line("Enter a valid number.")
                continue
            if value <= 0.0:
                self.line("Value must be > 0.")
                continue

            return value

    def confirm(self, prompt: str) -> bool:
        """Ask a yes/no question; anything but 'y'/'Y' (including EOF) is no."""
        self.write(prompt)
        answer = self._raw_line()
        if not answer:
            self.line()
            return False
        return answer[:1] in ("y", "Y")
