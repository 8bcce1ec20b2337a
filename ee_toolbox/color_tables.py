"""
EE Toolbox - Resistor Color-Code Tables

4-band color code lookup data, indexed the way the menus number them:

    DIGIT_BANDS       band 1 & 2   index 0-9  -> color name
    MULTIPLIER_BANDS  band 3       index 0-11 -> (name, label, factor)
    TOLERANCE_BANDS   band 4       index 0-7  -> (name, tolerance text)

All tables are tuples built once at import and never modified.
"""

from __future__ import annotations

from typing import NamedTuple


class MultiplierBand(NamedTuple):
    name: str
    label: str
    factor: float


class ToleranceBand(NamedTuple):
    name: str
    text: str


# Significant-digit colors (index == digit value).
DIGIT_BANDS: tuple[str, ...] = (
    "Black", "Brown", "Red", "Orange", "Yellow",
    "Green", "Blue", "Violet", "Grey", "White",
)

MULTIPLIER_BANDS: tuple[MultiplierBand, ...] = (
    MultiplierBand("Black",  "x1",    1.0),
    MultiplierBand("Brown",  "x10",   10.0),
    MultiplierBand("Red",    "x100",  100.0),
    MultiplierBand("Orange", "x1k",   1e3),
    MultiplierBand("Yellow", "x10k",  1e4),
    MultiplierBand("Green",  "x100k", 1e5),
    MultiplierBand("Blue",   "x1M",   1e6),
    MultiplierBand("Violet", "x10M",  1e7),
    MultiplierBand("Grey",   "x100M", 1e8),
    MultiplierBand("White",  "x1G",   1e9),
    # Fractional multipliers
    MultiplierBand("Gold",   "x0.1",  0.1),
    MultiplierBand("Silver", "x0.01", 0.01),
)

TOLERANCE_BANDS: tuple[ToleranceBand, ...] = (
    ToleranceBand("Brown",  "±1%"),
    ToleranceBand("Red",    "±2%"),
    ToleranceBand("Green",  "±0.5%"),
    ToleranceBand("Blue",   "±0.25%"),
    ToleranceBand("Violet", "±0.1%"),
    ToleranceBand("Grey",   "±0.05%"),
    ToleranceBand("Gold",   "±5%"),
    ToleranceBand("Silver", "±10%"),
)

# Highest multiplier index a decoded resistance may use (White, x1G).
MAX_DECODE_MULTIPLIER = 9


# ---------------------------------------------------------------------------
# Menu labels
# ---------------------------------------------------------------------------

def digit_label(index: int) -> str:
    """'3 Orange'"""
    return f"{index} {DIGIT_BANDS[index]}"


def multiplier_label(index: int) -> str:
    """'2 Red x100'"""
    band = MULTIPLIER_BANDS[index]
    return f"{index} {band.name} {band.label}"


def tolerance_label(index: int) -> str:
    """'6 Gold ±5%'"""
    band = TOLERANCE_BANDS[index]
    return f"{index} {band.name} {band.text}"
