"""
EE Toolbox - Series / Parallel Resistors Menu

One-shot tool: read up to MAX_RESISTORS values, pick the connection type and
print the equivalent resistance.
"""

from __future__ import annotations

import logging

from ee_toolbox.color_code import format_resistance
from ee_toolbox.config import MAX_RESISTORS
from ee_toolbox.errors import ComputationError
from ee_toolbox.resistance import parallel_resistance, series_resistance
from ee_toolbox.toolbox import ToolModule

log = logging.getLogger(__name__)


class SeriesParallelMenu(ToolModule):

    title = "Series/Parallel Resistors"

    def run(self) -> float | None:
        con = self.console
        con.line("\n==== Series / Parallel Resistors ====")

        count = con.read_int(f"Number of resistors (1–{MAX_RESISTORS}): ", 1, MAX_RESISTORS)
        values = [con.read_positive_float(f"Enter R{i + 1} (Ω): ") for i in range(count)]

        con.line("\nConnection Type:")
        con.line("1. Series")
        con.line("2. Parallel")
        mode = "series" if con.read_int("Select: ", 1, 2) == 1 else "parallel"

        try:
            if mode == "series":
                total = series_resistance(values)
            else:
                total = parallel_resistance(values)
        except ComputationError as exc:
            log.warning("%s combination failed: %s", mode.capitalize(), exc)
            con.line("Math error.")
            return None

        con.line(f"\n--- {mode.capitalize()} Result ---")
        con.line(f"Approx resistance: {format_resistance(total)}")

        self.offer_save(f"Series/Parallel: n={count}, mode={mode} → {total:.6g} Ω")
        return total
