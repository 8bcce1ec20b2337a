"""
EE Toolbox - Signal Generation / Analysis Menu

    1. Given f → T & ω
    2. Generate sine samples
    3. Generate square samples
    4. Generate triangle samples
    0. Back
"""

from __future__ import annotations

import logging

from ee_toolbox.config import MAX_SAMPLES
from ee_toolbox.errors import ComputationError
from ee_toolbox.signal_gen import (
    Sample,
    period_and_angular,
    sine_samples,
    square_samples,
    triangle_samples,
)
from ee_toolbox.toolbox import ToolModule

log = logging.getLogger(__name__)

# choice -> (log name, formula shown to the user, generator)
_WAVEFORMS = {
    2: ("Sine",     "x(t) = A sin(2πft)",            sine_samples),
    3: ("Square",   "x(t) = A sgn(sin(2πft))",       square_samples),
    4: ("Triangle", "x(t) = (2A/π) asin(sin(2πft))", triangle_samples),
}


class SignalMenu(ToolModule):

    title = "Signal Generation/Analysis"

    def run(self) -> None:
        self.console.line("\n==== Signal Generation / Analysis ====")
        while True:
            self.console.line("\n1. Given f → T & ω")
            self.console.line("2. Generate sine samples")
            self.console.line("3. Generate square samples")
            self.console.line("4. Generate triangle samples")
            self.console.line("0. Back")

            choice = self.console.read_int("Select: ", 0, 4)
            if choice == 0:
                return
            if choice == 1:
                self.period_and_angular()
            else:
                self.generate(choice)

    def period_and_angular(self) -> tuple[float, float] | None:
        con = self.console
        f = con.read_positive_float("Enter f (Hz): ")
        try:
            period, omega = period_and_angular(f)
        except ComputationError as exc:
            log.warning("Period calculation failed: %s", exc)
            con.line("Math error.")
            return None

        con.line("\n--- Result ---")
        con.line(f"Period T = {period:.6g} s")
        con.line(f"Angular freq ω = {omega:.6g} rad/s")

        self.offer_save(f"Signal: f={f:.6g} Hz, T={period:.6g} s, ω={omega:.6g} rad/s")
        return period, omega

    def generate(self, choice: int) -> list[Sample] | None:
        name, formula, generator = _WAVEFORMS[choice]
        con = self.console

        con.line(f"\nSignal: {formula}")
        f  = con.read_positive_float("Frequency f (Hz): ")
        a  = con.read_positive_float("Amplitude A: ")
        fs = con.read_positive_float("Sampling freq fs (Hz): ")
        n  = con.read_int(f"Number of samples (1–{MAX_SAMPLES}): ", 1, MAX_SAMPLES)

        try:
            samples = generator(f, a, fs, n)
        except ComputationError as exc:
            log.warning("%s sample generation failed: %s", name, exc)
            con.line("Math error.")
            return None

        con.line("\nn\t t(s)\t\t x[n]")
        for s in samples:
            con.line(f"{s.n}\t {s.t:.6g}\t {s.x:.6g}")

        self.offer_save(f"{name}: f={f:.6g} Hz, A={a:.6g}, fs={fs:.6g} Hz, N={n}")
        return samples
