"""
EE Toolbox - Series / Parallel Resistance

    series    R = R1 + R2 + ... + Rn
    parallel  R = 1 / (1/R1 + 1/R2 + ... + 1/Rn)

Inputs are expected to be positive; the console enforces that before any
value reaches these functions.  A sum that overflows, or a reciprocal sum of
zero, raises ComputationError.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from ee_toolbox.errors import ComputationError


def series_resistance(values: Sequence[float]) -> float:
    """Equivalent resistance of *values* connected in series.

    Raises:
        ComputationError: If the sum overflows.
    """
    if not values:
        raise ValueError("at least one resistor is required")
    total = float(sum(values))
    if not math.isfinite(total):
        raise ComputationError(f"series sum is not finite: {total!r}")
    return total


def parallel_resistance(values: Sequence[float]) -> float:
    """Equivalent resistance of *values* connected in parallel.

    Raises:
        ComputationError: If the reciprocal sum is zero or not finite.
    """
    if not values:
        raise ValueError("at least one resistor is required")

    inv_sum = sum(1.0 / r for r in values)
    if inv_sum == 0.0:
        raise ComputationError("sum of reciprocal resistances is zero")
    if not math.isfinite(inv_sum):
        raise ComputationError(f"sum of reciprocal resistances is not finite: {inv_sum!r}")
    return 1.0 / inv_sum
