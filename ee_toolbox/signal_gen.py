"""
EE Toolbox - Signal Generation / Analysis

    period_and_angular(f)          T = 1 / f,  w = 2*pi*f
    sine_samples(f, A, fs, N)      x[n] = A sin(2*pi*f*n/fs)
    square_samples(f, A, fs, N)    x[n] = +A / -A on the sign of the sine
    triangle_samples(f, A, fs, N)  x[n] = (2A/pi) asin(sin(2*pi*f*n/fs))

Sample generators return a fresh list of Sample(n, t, x) on every call.
Inputs that push T, w, t or x out of the finite float range raise
ComputationError.
"""

from __future__ import annotations

import math
from typing import NamedTuple

import numpy as np

from ee_toolbox.config import MAX_SAMPLES
from ee_toolbox.errors import ComputationError


class Sample(NamedTuple):
    n: int
    t: float
    x: float


def period_and_angular(frequency: float) -> tuple[float, float]:
    """Return (period in s, angular frequency in rad/s) for *frequency* Hz."""
    period, omega = 1.0 / frequency, 2.0 * math.pi * frequency
    if not (math.isfinite(period) and math.isfinite(omega)):
        raise ComputationError(f"f = {frequency!r} Hz gives T = {period!r}, w = {omega!r}")
    return period, omega


def _phase(frequency: float, sample_rate: float, count: int) -> tuple[np.ndarray, np.ndarray]:
    if not 1 <= count <= MAX_SAMPLES:
        raise ValueError(f"sample count must be in 1..{MAX_SAMPLES}, got {count}")
    with np.errstate(all="ignore"):
        t = np.arange(count) / sample_rate
        phase = 2.0 * np.pi * frequency * t
    if not (np.all(np.isfinite(t)) and np.all(np.isfinite(phase))):
        raise ComputationError(
            f"f = {frequency!r} Hz, fs = {sample_rate!r} Hz overflow the sample times"
        )
    return t, phase


def _to_samples(t: np.ndarray, x: np.ndarray) -> list[Sample]:
    if not np.all(np.isfinite(x)):
        raise ComputationError("sample values are not finite")
    return [Sample(n, float(tn), float(xn)) for n, (tn, xn) in enumerate(zip(t, x))]


def sine_samples(frequency: float, amplitude: float,
                 sample_rate: float, count: int) -> list[Sample]:
    t, phase = _phase(frequency, sample_rate, count)
    with np.errstate(all="ignore"):
        x = amplitude * np.sin(phase)
    return _to_samples(t, x)


def square_samples(frequency: float, amplitude: float,
                   sample_rate: float, count: int) -> list[Sample]:
    t, phase = _phase(frequency, sample_rate, count)
    return _to_samples(t, np.where(np.sin(phase) >= 0.0, amplitude, -amplitude))


def triangle_samples(frequency: float, amplitude: float,
                     sample_rate: float, count: int) -> list[Sample]:
    t, phase = _phase(frequency, sample_rate, count)
    with np.errstate(all="ignore"):
        x = (2.0 * amplitude / np.pi) * np.arcsin(np.sin(phase))
    return _to_samples(t, x)
