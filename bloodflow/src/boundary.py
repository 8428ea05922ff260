"""
Boundary conditions for the 1D blood flow model.
"""

import numpy as np
from dataclasses import dataclass

from .equations import BloodFlowEquations1D
from .pressure import inv_pressure
from .state import VesselState


@dataclass(frozen=True)
class InflowPulse:
    """
    Raised half-sine pressure pulse at the inlet.

        P_in(t) = amplitude * sin(pi*t/duration)²   for t < duration
        P_in(t) = 0                                  otherwise
    """
    amplitude: float = 2e4      # Peak pressure [dyn/cm²]
    duration: float = 0.125     # Pulse length [s]

    def __post_init__(self):
        if self.duration <= 0:
            raise ValueError(f"Pulse duration must be positive, got {self.duration}")

    def pressure(self, t):
        """Prescribed inlet pressure at time t."""
        active = self.amplitude * np.sin(np.pi * t / self.duration)**2
        return np.where(t < self.duration, active, 0.0)[()]


DEFAULT_PULSE = InflowPulse()


def pressure_in(t, pulse: InflowPulse = DEFAULT_PULSE):
    """Inlet pressure of the default pulse (or the given one) at time t."""
    return pulse.pressure(t)


def boundary_state_pressure_in(u_inner: VesselState, t, eq: BloodFlowEquations1D,
                               pulse: InflowPulse = DEFAULT_PULSE) -> VesselState:
    """
    Ghost state for a prescribed inlet pressure.

    The area follows the inlet pressure through the inverse wall law; flow
    rate, elasticity and reference area are copied from the interior.
    """
    A_in = inv_pressure(pulse.pressure(t), u_inner, eq)
    return VesselState(a=A_in - u_inner.A0, Q=u_inner.Q, E=u_inner.E, A0=u_inner.A0)


def boundary_condition_pressure_in(u_inner: VesselState, orientation, direction, x, t,
                                   surface_flux_functions, eq: BloodFlowEquations1D,
                                   pulse: InflowPulse = DEFAULT_PULSE):
    """
    Boundary flux pair for a pulsatile pressure inflow.

    Args:
        u_inner: State inside the domain next to the boundary
        orientation: Interface normal passed to the flux functions
        direction: Boundary index; even means u_inner is the left state,
                   odd means u_inner is the right state
        x: Boundary position
        t: Time [s]
        surface_flux_functions: Pair (flux1, flux2)
        eq: Equation descriptor
        pulse: Inlet pressure pulse

    Returns:
        (flux1, flux2) evaluated exactly as at an interior interface
    """
    if len(surface_flux_functions) != 2:
        raise ValueError("surface_flux_functions must be a (conservative, nonconservative) pair")
    conservative, nonconservative = surface_flux_functions

    u_boundary = boundary_state_pressure_in(u_inner, t, eq, pulse)

    if direction % 2 == 0:
        # u_inner is "left" of boundary, u_boundary is "right" of boundary
        u_ll, u_rr = u_inner, u_boundary
    else:
        # u_boundary is "left" of boundary, u_inner is "right" of boundary
        u_ll, u_rr = u_boundary, u_inner

    f1 = conservative(u_ll, u_rr, orientation, eq)
    f2 = nonconservative(u_ll, u_rr, orientation, eq)
    return f1, f2
