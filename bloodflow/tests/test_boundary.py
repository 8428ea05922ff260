"""
Pytest tests for the pressure inflow boundary condition.

Tests verify:
1. Shape of the inflow pressure pulse
2. Ghost state follows the inlet pressure, passive fields pass through
3. Left/right ordering by boundary direction
4. Boundary flux equals the interior flux of (inner, ghost)
"""

import numpy as np
import pytest
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from bloodflow.src import (
    BloodFlowEquations1D, VesselState, InflowPulse, DEFAULT_PULSE, pressure_in,
    boundary_state_pressure_in, boundary_condition_pressure_in, inv_pressure,
    pressure_state, flux1, flux2, SURFACE_FLUX, NonConvergentInverseError
)
from bloodflow.tests.vessels import rest_state, flowing_state


@pytest.fixture
def eq():
    """Default blood flow equations."""
    return BloodFlowEquations1D()


def recording_flux_pair():
    """Flux pair that returns the states it was called with."""
    def first(u_ll, u_rr, orientation, eq):
        return ('flux1', u_ll, u_rr, orientation)

    def second(u_ll, u_rr, orientation, eq):
        return ('flux2', u_ll, u_rr, orientation)

    return first, second


class TestInflowPulse:
    """Raised half-sine pulse followed by a quiescent phase."""

    def test_zero_at_start(self):
        assert pressure_in(0.0) == 0.0

    def test_peak(self):
        assert pressure_in(0.0625) == pytest.approx(2e4, rel=1e-12)

    def test_vanishes_at_end_of_pulse(self):
        assert pressure_in(0.125 - 1e-9) == pytest.approx(0.0, abs=1e-8)

    @pytest.mark.parametrize("t", [0.125, 0.2, 1.0, 10.0])
    def test_quiescent(self, t):
        assert pressure_in(t) == 0.0

    def test_non_negative_during_pulse(self):
        t = np.linspace(0.0, 0.125, 101)[:-1]
        P = pressure_in(t)
        assert np.all(P >= 0)
        assert np.argmax(P) == 50

    def test_custom_pulse(self):
        pulse = InflowPulse(amplitude=1e4, duration=0.5)
        assert pulse.pressure(0.25) == pytest.approx(1e4)
        assert pulse.pressure(0.5) == 0.0

    def test_invalid_duration(self):
        with pytest.raises(ValueError):
            InflowPulse(duration=0.0)


class TestBoundaryState:
    """Ghost state built from the prescribed pressure."""

    def test_peak_dilates_vessel(self, eq):
        u_inner = VesselState(a=0.0, Q=0.0, E=1e7, A0=4 * np.pi)
        u_b = boundary_state_pressure_in(u_inner, 0.0625, eq)
        assert inv_pressure(2e4, u_inner, eq) > u_inner.A0
        assert u_b.a > 0
        assert pressure_state(u_b, eq) == pytest.approx(2e4, rel=1e-9)

    def test_passthrough_fields(self, eq):
        u_inner = flowing_state(a=0.2, Q=7.0, R0=1.5, E=2e7)
        u_b = boundary_state_pressure_in(u_inner, 0.03, eq)
        assert u_b.Q == u_inner.Q
        assert u_b.E == u_inner.E
        assert u_b.A0 == u_inner.A0

    def test_quiescent_reference_area(self, eq):
        """After the pulse the ghost area relaxes to A0."""
        u_inner = flowing_state(a=0.5, Q=2.0)
        u_b = boundary_state_pressure_in(u_inner, 0.3, eq)
        assert u_b.a == pytest.approx(0.0, abs=1e-12)

    def test_unreachable_pulse_raises(self, eq):
        pulse = InflowPulse(amplitude=1e9)
        with pytest.raises(NonConvergentInverseError):
            boundary_state_pressure_in(rest_state(), 0.0625, eq, pulse)


class TestBoundaryFlux:
    """Boundary flux pair with direction-dependent ordering."""

    def test_even_direction_inner_is_left(self, eq):
        u_inner = rest_state()
        f1, f2 = boundary_condition_pressure_in(u_inner, 1.0, 2, 1.0, 0.0625,
                                                recording_flux_pair(), eq)
        assert f1[0] == 'flux1' and f2[0] == 'flux2'
        assert f1[1] is u_inner
        assert f2[1] is u_inner
        assert f1[2].a > 0

    def test_odd_direction_inner_is_right(self, eq):
        u_inner = rest_state()
        f1, f2 = boundary_condition_pressure_in(u_inner, 1.0, 1, 0.0, 0.0625,
                                                recording_flux_pair(), eq)
        assert f1[2] is u_inner
        assert f2[2] is u_inner
        assert f1[1].a > 0

    def test_orientation_passed_through(self, eq):
        f1, _ = boundary_condition_pressure_in(rest_state(), -1.0, 1, 0.0, 0.01,
                                               recording_flux_pair(), eq)
        assert f1[3] == -1.0

    def test_matches_interior_flux(self, eq):
        """Inlet at the left end: ghost on the left, interior on the right."""
        u_inner = flowing_state(a=0.1, Q=3.0)
        t = 0.04
        f1, f2 = boundary_condition_pressure_in(u_inner, 1.0, 1, 0.0, t, SURFACE_FLUX, eq)

        u_b = boundary_state_pressure_in(u_inner, t, eq)
        np.testing.assert_allclose(f1, flux1(u_b, u_inner, 1.0, eq))
        np.testing.assert_allclose(f2, flux2(u_b, u_inner, 1.0, eq))

    def test_positive_pressure_pushes_inward(self, eq):
        """High inlet pressure at the left end gives a falling pressure into the vessel."""
        u_inner = rest_state()
        _, f2 = boundary_condition_pressure_in(u_inner, 1.0, 1, 0.0, 0.0625, SURFACE_FLUX, eq)
        # P_inner - P_inlet < 0
        assert f2[1] < 0

    def test_requires_flux_pair(self, eq):
        with pytest.raises(ValueError):
            boundary_condition_pressure_in(rest_state(), 1.0, 1, 0.0, 0.0,
                                           (flux1,), eq)

    def test_default_pulse_used(self, eq):
        u_inner = rest_state()
        a = boundary_condition_pressure_in(u_inner, 1.0, 1, 0.0, 0.05, SURFACE_FLUX, eq)
        b = boundary_condition_pressure_in(u_inner, 1.0, 1, 0.0, 0.05, SURFACE_FLUX, eq,
                                           DEFAULT_PULSE)
        np.testing.assert_array_equal(a[0], b[0])
        np.testing.assert_array_equal(a[1], b[1])
