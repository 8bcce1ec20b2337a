"""
Formula module tests: series/parallel, RC transients, Ohm's law, signals.
"""

import math
import unittest

from ee_toolbox.errors import ComputationError
from ee_toolbox.ohm_law import KnownPair, OhmResult, solve
from ee_toolbox.rc_circuit import rc_charge, rc_discharge, time_constant
from ee_toolbox.resistance import parallel_resistance, series_resistance
from ee_toolbox.signal_gen import (
    Sample,
    period_and_angular,
    sine_samples,
    square_samples,
    triangle_samples,
)


# ---------------------------------------------------------------------------
# Series / parallel
# ---------------------------------------------------------------------------

class TestResistance(unittest.TestCase):

    def test_series(self):
        self.assertAlmostEqual(series_resistance([10, 20, 30]), 60.0)

    def test_parallel(self):
        self.assertAlmostEqual(parallel_resistance([10, 20, 30]), 60.0 / 11.0)
        self.assertAlmostEqual(parallel_resistance([10, 20, 30]), 5.4545, places=4)

    def test_equal_resistors(self):
        for n in range(1, 11):
            self.assertAlmostEqual(series_resistance([470.0] * n), 470.0 * n)
            self.assertAlmostEqual(parallel_resistance([470.0] * n), 470.0 / n)

    def test_single_resistor(self):
        self.assertEqual(series_resistance([330.0]), 330.0)
        self.assertAlmostEqual(parallel_resistance([330.0]), 330.0)

    def test_empty_input_rejected(self):
        with self.assertRaises(ValueError):
            series_resistance([])
        with self.assertRaises(ValueError):
            parallel_resistance([])

    def test_zero_reciprocal_sum_is_computation_error(self):
        # 1/inf == 0; the console never lets inf through.
        with self.assertRaises(ComputationError):
            parallel_resistance([float("inf")])

    def test_reciprocal_overflow_is_computation_error(self):
        with self.assertRaises(ComputationError):
            parallel_resistance([1e-320, 1e-320])

    def test_series_overflow_is_computation_error(self):
        with self.assertRaises(ComputationError):
            series_resistance([1e308, 1e308])


# ---------------------------------------------------------------------------
# RC
# ---------------------------------------------------------------------------

class TestRC(unittest.TestCase):

    def test_time_constant(self):
        self.assertAlmostEqual(time_constant(1000.0, 1e-6), 1e-3)

    def test_charge_after_one_tau(self):
        vc = rc_charge(1000.0, 1e-6, 5.0, 1e-3)
        self.assertAlmostEqual(vc, 5.0 * (1.0 - math.exp(-1.0)))
        self.assertAlmostEqual(vc, 3.16, places=2)

    def test_discharge_after_one_tau(self):
        self.assertAlmostEqual(rc_discharge(1000.0, 1e-6, 5.0, 1e-3), 5.0 * math.exp(-1.0))

    def test_initial_values(self):
        self.assertEqual(rc_charge(1000.0, 1e-6, 5.0, 0.0), 0.0)
        self.assertEqual(rc_discharge(1000.0, 1e-6, 5.0, 0.0), 5.0)

    def test_long_time_limits(self):
        self.assertAlmostEqual(rc_charge(1000.0, 1e-6, 5.0, 1.0), 5.0)
        self.assertAlmostEqual(rc_discharge(1000.0, 1e-6, 5.0, 1.0), 0.0)

    def test_charge_and_discharge_are_complementary(self):
        for t in (1e-4, 5e-4, 2e-3):
            total = rc_charge(220.0, 1e-5, 12.0, t) + rc_discharge(220.0, 1e-5, 12.0, t)
            self.assertAlmostEqual(total, 12.0)

    def test_time_constant_underflow_is_computation_error(self):
        self.assertEqual(time_constant(1e-200, 1e-200), 0.0)
        with self.assertRaises(ComputationError):
            rc_charge(1e-200, 1e-200, 5.0, 1.0)
        with self.assertRaises(ComputationError):
            rc_discharge(1e-200, 1e-200, 5.0, 1.0)

    def test_time_constant_overflow_is_computation_error(self):
        with self.assertRaises(ComputationError):
            rc_charge(1e200, 1e200, 5.0, 1.0)


# ---------------------------------------------------------------------------
# Ohm's law
# ---------------------------------------------------------------------------

class TestOhmLaw(unittest.TestCase):

    def _assert_consistent(self, result):
        self.assertAlmostEqual(result.voltage, result.current * result.resistance)
        self.assertAlmostEqual(result.power, result.voltage * result.current)

    def test_every_pair_is_consistent(self):
        inputs = {
            KnownPair.VR: (12.0, 4.0),
            KnownPair.VI: (9.0, 0.5),
            KnownPair.VP: (5.0, 0.25),
            KnownPair.IR: (0.01, 330.0),
            KnownPair.IP: (2.0, 8.0),
            KnownPair.RP: (100.0, 0.25),
        }
        self.assertEqual(set(inputs), set(KnownPair))
        for pair, (first, second) in inputs.items():
            self._assert_consistent(solve(pair, first, second))

    def test_known_values_are_kept(self):
        result = solve(KnownPair.IP, 2.0, 8.0)
        self.assertEqual(result.current, 2.0)
        self.assertEqual(result.power, 8.0)

    def test_voltage_and_resistance(self):
        result = solve(KnownPair.VR, 12.0, 4.0)
        self.assertEqual(result, OhmResult(voltage=12.0, current=3.0, resistance=4.0, power=36.0))

    def test_current_and_resistance(self):
        result = solve(KnownPair.IR, 0.01, 330.0)
        self.assertAlmostEqual(result.voltage, 3.3)
        self.assertAlmostEqual(result.power, 0.033)

    def test_resistance_and_power(self):
        result = solve(KnownPair.RP, 100.0, 0.25)
        self.assertAlmostEqual(result.voltage, 5.0)
        self.assertAlmostEqual(result.current, 0.05)

    def test_voltage_and_power(self):
        result = solve(KnownPair.VP, 5.0, 0.25)
        self.assertAlmostEqual(result.current, 0.05)
        self.assertAlmostEqual(result.resistance, 100.0)

    def test_pair_metadata(self):
        self.assertEqual([p.value for p in KnownPair], [1, 2, 3, 4, 5, 6])
        self.assertEqual(KnownPair.RP.quantities, ("R", "P"))
        self.assertEqual(KnownPair.VI.label, "V & I")

    def test_underflowed_divisor_is_computation_error(self):
        # P / V underflows to 0, so R = V / I has no finite value.
        with self.assertRaises(ComputationError):
            solve(KnownPair.VP, 1e300, 1e-300)

    def test_overflowing_result_is_computation_error(self):
        with self.assertRaises(ComputationError):
            solve(KnownPair.VR, 1e300, 1e-300)
        with self.assertRaises(ComputationError):
            solve(KnownPair.IR, 1e300, 1e300)
        with self.assertRaises(ComputationError):
            solve(KnownPair.IP, 1e-300, 1e300)


# ---------------------------------------------------------------------------
# Signals
# ---------------------------------------------------------------------------

class TestSignals(unittest.TestCase):

    def test_period_and_angular(self):
        period, omega = period_and_angular(50.0)
        self.assertAlmostEqual(period, 0.02)
        self.assertAlmostEqual(omega, 100.0 * math.pi)

    def test_tiny_frequency_is_computation_error(self):
        with self.assertRaises(ComputationError):
            period_and_angular(1e-320)

    def test_sine_starts_at_zero(self):
        for f, a, fs in ((1.0, 1.0, 10.0), (50.0, 3.3, 1000.0), (7.3, 0.2, 44.1)):
            self.assertEqual(sine_samples(f, a, fs, 5)[0].x, 0.0)

    def test_sine_amplitude_bound(self):
        samples = sine_samples(13.0, 2.5, 100.0, 100)
        self.assertEqual(len(samples), 100)
        for s in samples:
            self.assertLessEqual(abs(s.x), 2.5)

    def test_sine_sample_values(self):
        samples = sine_samples(1.0, 2.0, 4.0, 4)
        self.assertEqual([s.n for s in samples], [0, 1, 2, 3])
        self.assertEqual([s.t for s in samples], [0.0, 0.25, 0.5, 0.75])
        self.assertAlmostEqual(samples[1].x, 2.0)
        self.assertAlmostEqual(samples[2].x, 0.0)
        self.assertAlmostEqual(samples[3].x, -2.0)

    def test_samples_are_plain_tuples(self):
        sample = sine_samples(1.0, 1.0, 8.0, 1)[0]
        self.assertIsInstance(sample, Sample)
        self.assertIsInstance(sample.t, float)
        self.assertIsInstance(sample.x, float)

    def test_each_call_recomputes(self):
        first = sine_samples(5.0, 1.0, 50.0, 10)
        second = sine_samples(5.0, 1.0, 50.0, 10)
        self.assertEqual(first, second)
        self.assertIsNot(first, second)

    def test_sample_count_bounds(self):
        for generator in (sine_samples, square_samples, triangle_samples):
            with self.assertRaises(ValueError):
                generator(1.0, 1.0, 10.0, 0)
            with self.assertRaises(ValueError):
                generator(1.0, 1.0, 10.0, 101)
            self.assertEqual(len(generator(1.0, 1.0, 10.0, 100)), 100)

    def test_square_levels(self):
        samples = square_samples(1.0, 3.0, 8.0, 8)
        self.assertEqual([s.x for s in samples[1:4]], [3.0, 3.0, 3.0])
        self.assertEqual([s.x for s in samples[5:8]], [-3.0, -3.0, -3.0])

    def test_triangle_shape(self):
        samples = triangle_samples(1.0, 2.0, 8.0, 8)
        self.assertAlmostEqual(samples[0].x, 0.0)
        self.assertAlmostEqual(samples[1].x, 1.0)
        self.assertAlmostEqual(samples[2].x, 2.0)
        self.assertAlmostEqual(samples[6].x, -2.0)
        for s in samples:
            self.assertLessEqual(abs(s.x), 2.0 + 1e-12)

    def test_overflowing_sample_times_are_computation_error(self):
        for generator in (sine_samples, square_samples, triangle_samples):
            with self.assertRaises(ComputationError):
                generator(1.0, 1.0, 1e-320, 3)

    def test_overflowing_phase_is_computation_error(self):
        with self.assertRaises(ComputationError):
            sine_samples(1e308, 1.0, 1e-10, 3)


if __name__ == "__main__":
    unittest.main()
