"""
EE Toolbox - Resistor Color Code Conversion

Converts between 4-band color selections and resistance values.

Exports:
    BandSelection       – validated (digit, digit, multiplier, tolerance) indices
    DecodedBands        – result of decode(): two digits + multiplier index
    encode              – bands → ohms
    decode              – ohms → nearest two-significant-digit bands
    format_resistance   – ohms → '3.9 kΩ'
    describe_selection  – band labels joined for display
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from ee_toolbox.color_tables import (
    DIGIT_BANDS,
    MAX_DECODE_MULTIPLIER,
    MULTIPLIER_BANDS,
    TOLERANCE_BANDS,
    digit_label,
    multiplier_label,
    tolerance_label,
)


# ---------------------------------------------------------------------------
# Band containers
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class BandSelection:
    """Four band indices as picked from the color tables."""

    digit1: int
    digit2: int
    multiplier: int
    tolerance: int

    def __post_init__(self) -> None:
        _check_index("digit1", self.digit1, len(DIGIT_BANDS))
        _check_index("digit2", self.digit2, len(DIGIT_BANDS))
        _check_index("multiplier", self.multiplier, len(MULTIPLIER_BANDS))
        _check_index("tolerance", self.tolerance, len(TOLERANCE_BANDS))

    @property
    def tolerance_text(self) -> str:
        return TOLERANCE_BANDS[self.tolerance].text


@dataclass(frozen=True)
class DecodedBands:
    """Bands 1-3 suggested for a resistance.

    There is no tolerance band: it depends on the part, not the value.
    ``in_range`` is False when the value lies outside what two digits and a
    Black..White multiplier can express (it rounds to 0 Ω, or lies at/above
    ~99.5 GΩ); the bands are then the clamped approximation.
    """

    digit1: int
    digit2: int
    multiplier: int
    in_range: bool = True

    @property
    def resistance(self) -> float:
        """Resistance the suggested bands actually encode."""
        base = self.digit1 * 10 + self.digit2
        return base * MULTIPLIER_BANDS[self.multiplier].factor


def _check_index(field: str, value: int, size: int) -> None:
    if not 0 <= value < size:
        raise ValueError(f"{field} index {value} out of range 0..{size - 1}")


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def encode(selection: BandSelection) -> float:
    """Return the resistance in ohms encoded by *selection*."""
    base = selection.digit1 * 10 + selection.digit2
    return base * MULTIPLIER_BANDS[selection.multiplier].factor


def decode(ohms: float) -> DecodedBands:
    """Approximate *ohms* with two significant digits and a multiplier band.

    The value is scaled down by 10 until it falls below 100 (or the White x1G
    band is reached), rounded half up, and split into tens / ones digits.
    A rounding carry to 100 becomes 10 on the next multiplier.  Values under
    10 Ω stay on the x1 band with a leading Black digit; anything that rounds
    to 0 Ω (below 0.5 Ω) is flagged out of range.

    Fractional multipliers (Gold, Silver) are never chosen.
    """
    if not math.isfinite(ohms) or ohms < 0:
        raise ValueError(f"resistance must be a finite value >= 0, got {ohms!r}")

    base = float(ohms)
    multiplier = 0
    while base >= 100 and multiplier < MAX_DECODE_MULTIPLIER:
        base /= 10
        multiplier += 1

    rounded = math.floor(base + 0.5)
    in_range = rounded >= 1

    if rounded >= 100:
        if multiplier < MAX_DECODE_MULTIPLIER:
            rounded = 10
            multiplier += 1
        else:
            # Pinned at 99 x1G.
            rounded = 99
            in_range = False

    return DecodedBands(
        digit1=rounded // 10,
        digit2=rounded % 10,
        multiplier=multiplier,
        in_range=in_range,
    )


def format_resistance(ohms: float) -> str:
    """Format *ohms* with an Ω / kΩ / MΩ unit and 4 significant digits."""
    if abs(ohms) >= 1e6:
        scaled, unit = ohms / 1e6, "MΩ"
    elif abs(ohms) >= 1e3:
        scaled, unit = ohms / 1e3, "kΩ"
    else:
        scaled, unit = ohms, "Ω"
    return f"{scaled:.4g} {unit}"


def describe_selection(selection: BandSelection) -> str:
    """'3 Orange | 9 White | 2 Red x100 | 0 Brown ±1%'"""
    return " | ".join((
        digit_label(selection.digit1),
        digit_label(selection.digit2),
        multiplier_label(selection.multiplier),
        tolerance_label(selection.tolerance),
    ))
