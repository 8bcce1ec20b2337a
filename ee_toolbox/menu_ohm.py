"""
EE Toolbox - Ohm's Law & Power Menu
"""

from __future__ import annotations

import logging

from ee_toolbox.errors import ComputationError
from ee_toolbox.ohm_law import KnownPair, OhmResult, solve
from ee_toolbox.toolbox import ToolModule

log = logging.getLogger(__name__)

# Prompt per quantity symbol
_PROMPTS = {"V": "V(V): ", "I": "I(A): ", "R": "R(Ω): ", "P": "P(W): "}


class OhmMenu(ToolModule):

    title = "Ohm’s Law & Power"

    def run(self) -> OhmResult | None:
        con = self.console
        con.line("\n==== Ohm’s Law / Power ====")
        con.line("Choose known quantities:")
        for pair in KnownPair:
            con.line(f"{pair.value}. {pair.label}")

        pair = KnownPair(con.read_int("Select: ", 1, len(KnownPair)))
        first, second = (con.read_positive_float(_PROMPTS[q]) for q in pair.quantities)
        try:
            result = solve(pair, first, second)
        except ComputationError as exc:
            log.warning("Ohm's law calculation failed: %s", exc)
            con.line("Math error.")
            return None

        con.line("\n--- Result ---")
        con.line(f"Voltage  V = {result.voltage:.6g} V")
        con.line(f"Current  I = {result.current:.6g} A")
        con.line(f"Resistance R = {result.resistance:.6g} Ω")
        con.line(f"Power     P = {result.power:.6g} W")

        self.offer_save(
            f"Ohm/Power: V={result.voltage:.6g}, I={result.current:.6g}, "
            f"R={result.resistance:.6g}, P={result.power:.6g}"
        )
        return result
