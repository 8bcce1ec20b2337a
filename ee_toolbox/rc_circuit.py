"""
EE Toolbox - RC Charging / Discharging

Capacitor voltage in a series RC circuit, SI units throughout:

    tau            = R * C
    charging       Vc(t) = V  * (1 - e^(-t / tau))
    discharging    Vc(t) = V0 * e^(-t / tau)

A time constant that underflows to 0 or overflows to inf raises
ComputationError instead of producing a meaningless voltage.
"""

import math

from ee_toolbox.errors import ComputationError


def time_constant(resistance: float, capacitance: float) -> float:
    """Return tau = R * C in seconds."""
    return resistance * capacitance


def _checked_tau(resistance: float, capacitance: float) -> float:
    tau = time_constant(resistance, capacitance)
    if tau == 0.0 or not math.isfinite(tau):
        raise ComputationError(f"time constant R*C = {tau!r} is not usable")
    return tau


def _checked_voltage(vc: float) -> float:
    if not math.isfinite(vc):
        raise ComputationError(f"capacitor voltage {vc!r} is not finite")
    return vc


def rc_charge(resistance: float, capacitance: float, supply: float, t: float) -> float:
    """Capacitor voltage *t* seconds after a step to *supply* volts from 0 V."""
    tau = _checked_tau(resistance, capacitance)
    return _checked_voltage(supply * (1.0 - math.exp(-t / tau)))


def rc_discharge(resistance: float, capacitance: float, initial: float, t: float) -> float:
    """Capacitor voltage *t* seconds into discharging from *initial* volts."""
    tau = _checked_tau(resistance, capacitance)
    return _checked_voltage(initial * math.exp(-t / tau))
