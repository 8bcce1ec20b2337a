"""
EE Toolbox - RC Charging / Discharging Menu
"""

from __future__ import annotations

import logging

from ee_toolbox.errors import ComputationError
from ee_toolbox.rc_circuit import rc_charge, rc_discharge, time_constant
from ee_toolbox.toolbox import ToolModule

log = logging.getLogger(__name__)


class RCMenu(ToolModule):

    title = "RC Charge/Discharge"

    def run(self) -> float | None:
        con = self.console
        con.line("\n==== RC Charging/Discharging ====")
        con.line("Use SI units: R(Ω), C(F), t(s)\n")

        r = con.read_positive_float("Enter R (Ω): ")
        c = con.read_positive_float("Enter C (F): ")
        con.line(f"\nTime constant τ = {time_constant(r, c):.6g} s")

        con.line("\nCalculation mode:")
        con.line("1. Charging: Vc(t) = V(1 - e^(-t/RC))")
        con.line("2. Discharging: Vc(t) = V0 e^(-t/RC)")
        mode = con.read_int("Select: ", 1, 2)

        t = con.read_positive_float("Enter time t (s): ")

        try:
            if mode == 1:
                v = con.read_positive_float("Enter supply voltage V (V): ")
                vc = rc_charge(r, c, v, t)
                heading = "Charging"
                summary = f"RC charge: R={r:.6g}, C={c:.6g}, V={v:.6g}, t={t:.6g} → {vc:.6g} V"
            else:
                v0 = con.read_positive_float("Enter initial voltage V0 (V): ")
                vc = rc_discharge(r, c, v0, t)
                heading = "Discharging"
                summary = f"RC discharge: R={r:.6g}, C={c:.6g}, V0={v0:.6g}, t={t:.6g} → {vc:.6g} V"
        except ComputationError as exc:
            log.warning("RC calculation failed: %s", exc)
            con.line("Math error.")
            return None

        con.line(f"\n--- {heading} Result ---")
        con.line(f"Vc(t = {t:.6g} s) = {vc:.6g} V")
        self.offer_save(summary)
        return vc
