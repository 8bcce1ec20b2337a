"""
EE Toolbox - Ohm's Law & Power Solver

Given two of voltage V, current I, resistance R and power P, derive the other
two using V = I * R and P = V * I.  Each supported pair has its own fixed
derivation:

    V & R   I = V / R        P = V * I
    V & I   R = V / I        P = V * I
    V & P   I = P / V        R = V / I
    I & R   V = I * R        P = V * I
    I & P   V = P / I        R = V / I
    R & P   V = sqrt(P * R)  I = V / R
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from ee_toolbox.errors import ComputationError


class KnownPair(Enum):
    """Which two quantities the user supplies; value == menu number."""

    VR = 1
    VI = 2
    VP = 3
    IR = 4
    IP = 5
    RP = 6

    @property
    def quantities(self) -> tuple[str, str]:
        """Symbols of the two known quantities, in prompt order."""
        return self.name[0], self.name[1]

    @property
    def label(self) -> str:
        first, second = self.quantities
        return f"{first} & {second}"


@dataclass(frozen=True)
class OhmResult:
    voltage: float
    current: float
    resistance: float
    power: float


# ---------------------------------------------------------------------------
# One handler per pair
# ---------------------------------------------------------------------------

def _div(numerator: float, denominator: float) -> float:
    if denominator == 0.0:
        raise ComputationError("division by zero (value underflowed)")
    return numerator / denominator


def _from_vr(v: float, r: float) -> OhmResult:
    i = _div(v, r)
    return OhmResult(voltage=v, current=i, resistance=r, power=v * i)


def _from_vi(v: float, i: float) -> OhmResult:
    return OhmResult(voltage=v, current=i, resistance=_div(v, i), power=v * i)


def _from_vp(v: float, p: float) -> OhmResult:
    i = _div(p, v)
    return OhmResult(voltage=v, current=i, resistance=_div(v, i), power=p)


def _from_ir(i: float, r: float) -> OhmResult:
    v = i * r
    return OhmResult(voltage=v, current=i, resistance=r, power=v * i)


def _from_ip(i: float, p: float) -> OhmResult:
    v = _div(p, i)
    return OhmResult(voltage=v, current=i, resistance=_div(v, i), power=p)


def _from_rp(r: float, p: float) -> OhmResult:
    v = math.sqrt(p * r)
    return OhmResult(voltage=v, current=_div(v, r), resistance=r, power=p)


_HANDLERS: dict[KnownPair, Callable[[float, float], OhmResult]] = {
    KnownPair.VR: _from_vr,
    KnownPair.VI: _from_vi,
    KnownPair.VP: _from_vp,
    KnownPair.IR: _from_ir,
    KnownPair.IP: _from_ip,
    KnownPair.RP: _from_rp,
}


def solve(pair: KnownPair, first: float, second: float) -> OhmResult:
    """Derive all four quantities from the two known ones.

    Args:
        pair:   Which quantities *first* and *second* are, in
                ``pair.quantities`` order.
        first:  Value of the first known quantity (SI units, > 0).
        second: Value of the second known quantity (SI units, > 0).

    Raises:
        ComputationError: If a derived value underflows a divisor to zero
                          or overflows to inf.
    """
    result = _HANDLERS[pair](first, second)
    if not all(math.isfinite(q) for q in
               (result.voltage, result.current, result.resistance, result.power)):
        raise ComputationError(f"{pair.label}: result is not finite: {result}")
    return result
