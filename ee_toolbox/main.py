"""
EE Toolbox - Main Entry Point

Builds the console, the result log and the toolbox menu, then runs the menu
loop until the user backs out.

Exit status:
    0                    user left through the menus
    EXIT_INPUT_CLOSED    standard input ended while a prompt was waiting

Run with:
    python -m ee_toolbox
    ee-toolbox
"""

from __future__ import annotations

import logging
import sys

from ee_toolbox import config
from ee_toolbox.console import Console
from ee_toolbox.errors import InputClosedError
from ee_toolbox.menu_color_code import ColorCodeMenu
from ee_toolbox.menu_log import LogMenu
from ee_toolbox.menu_ohm import OhmMenu
from ee_toolbox.menu_rc import RCMenu
from ee_toolbox.menu_resistors import SeriesParallelMenu
from ee_toolbox.menu_signal import SignalMenu
from ee_toolbox.result_log import ResultLog
from ee_toolbox.toolbox import Toolbox

log = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INPUT_CLOSED = 1


def build_toolbox(console: Console, result_log: ResultLog) -> Toolbox:
    """Return a Toolbox with every module registered in menu order."""
    toolbox = Toolbox(console)
    for module_cls in (
        ColorCodeMenu,
        SeriesParallelMenu,
        RCMenu,
        OhmMenu,
        SignalMenu,
        LogMenu,
    ):
        toolbox.register_module(module_cls(console, result_log))
    return toolbox


def main(console: Console | None = None, log_path: str = config.LOG_FILENAME) -> int:
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format=config.LOG_FORMAT,
        stream=sys.stderr,
    )

    console = console if console is not None else Console()
    toolbox = build_toolbox(console, ResultLog(log_path))
    log.info("EE Toolbox started (log file %s)", log_path)

    try:
        toolbox.run()
    except InputClosedError:
        log.error("Standard input closed; exiting")
        return EXIT_INPUT_CLOSED

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
