"""
EE Toolbox - Resistor Color Code Menu

    1. Color → Resistance   pick four band indices, show the value
    2. Resistance → Color   enter ohms, suggest bands 1-3
    3. Show Tables          print every band table
    0. Back
"""

from __future__ import annotations

from ee_toolbox.color_code import (
    BandSelection,
    DecodedBands,
    decode,
    describe_selection,
    encode,
    format_resistance,
)
from ee_toolbox.color_tables import (
    DIGIT_BANDS,
    MULTIPLIER_BANDS,
    TOLERANCE_BANDS,
    digit_label,
    multiplier_label,
    tolerance_label,
)
from ee_toolbox.toolbox import ToolModule


class ColorCodeMenu(ToolModule):

    title = "Resistor Color Code"

    def run(self) -> None:
        while True:
            self.console.line("\n== Resistor Color Code Tool ==")
            self.console.line("1. Color → Resistance")
            self.console.line("2. Resistance → Color")
            self.console.line("3. Show Tables")
            self.console.line("0. Back")

            choice = self.console.read_int("Select: ", 0, 3)
            if choice == 0:
                return
            if choice == 1:
                self.color_to_resistance()
            elif choice == 2:
                self.resistance_to_color()
            else:
                self.print_tables()

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def color_to_resistance(self) -> float:
        con = self.console
        con.line("\n=== Color → Resistance (4-band) ===")

        self._print_digit_table()
        digit1 = con.read_int("Select Band 1 (0–9): ", 0, len(DIGIT_BANDS) - 1)
        digit2 = con.read_int("Select Band 2 (0–9): ", 0, len(DIGIT_BANDS) - 1)

        self._print_multiplier_table()
        multiplier = con.read_int("Select Multiplier (0–11): ", 0, len(MULTIPLIER_BANDS) - 1)

        self._print_tolerance_table()
        tolerance = con.read_int("Select Tolerance (0–7): ", 0, len(TOLERANCE_BANDS) - 1)

        selection = BandSelection(digit1, digit2, multiplier, tolerance)
        ohms = encode(selection)

        con.line("\n--- Result ---")
        con.line(f"Bands: {describe_selection(selection)}")
        con.line(f"Approx resistance: {format_resistance(ohms)}")
        con.line(f"Tolerance: {selection.tolerance_text}")

        self.offer_save(
            f"[Color→Resistance] ({digit1},{digit2},m={multiplier},t={tolerance}) "
            f"= {ohms:.6g} Ω, tol {selection.tolerance_text}"
        )
        return ohms

    def resistance_to_color(self) -> DecodedBands:
        con = self.console
        con.line("\n=== Resistance → Color (approx) ===")
        con.line("Uses two significant digits.")

        ohms = con.read_positive_float("Enter resistance (Ω): ")
        bands = decode(ohms)

        con.line("\n--- Suggested Colors ---")
        con.line(f"Approx resistance: {format_resistance(ohms)}")
        con.line(f"Band 1: {digit_label(bands.digit1)}")
        con.line(f"Band 2: {digit_label(bands.digit2)}")
        con.line(f"Band 3: {multiplier_label(bands.multiplier)}")
        con.line("Band 4: (choose based on component tolerance)")
        if not bands.in_range:
            con.line(
                "Warning: value is outside the 4-band range; bands encode "
                f"{format_resistance(bands.resistance)}."
            )

        self.offer_save(
            f"[Resistance→Color] R={ohms:.6g} → "
            f"({bands.digit1},{bands.digit2},m={bands.multiplier})"
        )
        return bands

    def print_tables(self) -> None:
        self.console.line("\n=== Resistor Color Code Tables ===")
        self._print_digit_table()
        self._print_multiplier_table()
        self._print_tolerance_table()
        self.console.line(
            "\n4-band meaning:\n"
            "  Band 1: 1st digit\n"
            "  Band 2: 2nd digit\n"
            "  Band 3: multiplier\n"
            "  Band 4: tolerance"
        )

    # ------------------------------------------------------------------
    # Tables
    # ------------------------------------------------------------------

    def _print_digit_table(self) -> None:
        self.console.line("\n== Digit Color Table (Band 1 & 2) ==")
        for i in range(len(DIGIT_BANDS)):
            self.console.line(digit_label(i))

    def _print_multiplier_table(self) -> None:
        self.console.line("\n== Multiplier Color Table (Band 3) ==")
        for i in range(len(MULTIPLIER_BANDS)):
            self.console.line(multiplier_label(i))

    def _print_tolerance_table(self) -> None:
        self.console.line("\n== Tolerance Color Table (Band 4) ==")
        for i in range(len(TOLERANCE_BANDS)):
            self.console.line(tolerance_label(i))
