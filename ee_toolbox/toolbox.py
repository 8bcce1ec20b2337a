"""
EE Toolbox - Menu Controller

The Toolbox owns the top-level menu.  Tool modules are registered in display
order and numbered 1..n; choosing 0 leaves the toolbox.  Each module runs its
own sub-menu loop inside run() and returns when the user picks 0 (or after a
single calculation for one-shot tools), which brings the user back here.

    toolbox = Toolbox(console)
    toolbox.register_module(ColorCodeMenu(console, result_log))
    ...
    toolbox.run()

Module interface:
    title: str         – line shown in the top-level menu
    run() -> None      – interact until the user backs out
"""

from __future__ import annotations

import logging

from ee_toolbox.console import Console
from ee_toolbox.result_log import ResultLog

log = logging.getLogger(__name__)

_BANNER = "=" * 36


# ---------------------------------------------------------------------------
# ToolModule
# ---------------------------------------------------------------------------

class ToolModule:
    """Base class for a toolbox module menu.

    Subclasses set ``title`` and implement run().  offer_save() is the shared
    "save this result?" step.
    """

    title = ""

    def __init__(self, console: Console, result_log: ResultLog) -> None:
        self.console = console
        self.result_log = result_log

    def run(self) -> None:
        raise NotImplementedError

    def offer_save(self, summary: str) -> bool:
        """Ask whether to append *summary* to the log; True if it was saved."""
        prompt = f'\nSave this result to "{self.result_log.path}"? (y/n): '
        if not self.console.confirm(prompt):
            self.console.line("Not saved.")
            return False
        if not self.result_log.append(summary):
            self.console.line("Could not open log file.")
            return False
        self.console.line("Saved.")
        return True


# ---------------------------------------------------------------------------
# Toolbox
# ---------------------------------------------------------------------------

class Toolbox:
    """Top-level menu that dispatches to registered modules by number."""

    def __init__(self, console: Console) -> None:
        self.console = console
        self._modules: list[ToolModule] = []

    @property
    def modules(self) -> tuple[ToolModule, ...]:
        return tuple(self._modules)

    def register_module(self, module: ToolModule) -> int:
        """Add *module* to the menu and return its menu number."""
        self._modules.append(module)
        number = len(self._modules)
        log.debug("Registered module %d: %s", number, module.title)
        return number

    def select(self, number: int) -> None:
        """Run the module listed as *number* (1-based)."""
        if not 1 <= number <= len(self._modules):
            raise ValueError(f"No module registered as {number}")
        module = self._modules[number - 1]
        log.debug("Entering %s", module.title)
        module.run()

    def run(self) -> None:
        """Show the toolbox menu until the user selects 0."""
        while True:
            self.console.line()
            self.console.line(_BANNER)
            self.console.line("     Electrical Engineering Toolbox")
            self.console.line(_BANNER)
            for number, module in enumerate(self._modules, start=1):
                self.console.line(f"{number}. {module.title}")
            self.console.line("0. Back to Main Menu")

            choice = self.console.read_int("Select: ", 0, len(self._modules))
            if choice == 0:
                return
            self.select(choice)
