"""
EE Toolbox - Result Log File

Append-only plain-text history of calculations, one summary per line.

Every call opens the file, does its work and closes it again; no handle is
kept between calls.  File errors are logged and reported through the return
value so a failed save never loses the calculation on screen.

Not safe for several processes writing the same file (no locking).
"""

from __future__ import annotations

import logging
import os

log = logging.getLogger(__name__)


class ResultLog:
    """Text file holding one calculation summary per line.

    Args:
        path: Log file location; relative paths resolve against the working
              directory at call time.
    """

    def __init__(self, path: str | os.PathLike) -> None:
        self.path = os.fspath(path)

    def append(self, summary: str) -> bool:
        """Add *summary* as one line.  Returns False if the file can't be written."""
        try:
            with open(self.path, "a", encoding="utf-8") as fh:
                fh.write(summary + "\n")
        except OSError as exc:
            log.warning("Cannot append to %s: %s", self.path, exc)
            return False
        log.debug("Appended to %s: %s", self.path, summary)
        return True

    def view(self) -> str | None:
        """Return the whole file, or None if it is missing or unreadable."""
        try:
            with open(self.path, "r", encoding="utf-8") as fh:
                return fh.read()
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as exc:
            log.warning("Cannot read %s: %s", self.path, exc)
            return None

    def clear(self) -> bool:
        """Truncate the file to empty.  Returns False if it can't be opened."""
        try:
            with open(self.path, "w", encoding="utf-8"):
                pass
        except OSError as exc:
            log.warning("Cannot clear %s: %s", self.path, exc)
            return False
        log.info("Cleared %s", self.path)
        return True
