"""
Source terms for the 1D blood flow model.

Notation:
    u   - vessel state (a, Q, E, A0)
    S   - source rate array in state order (same shape as u.to_array())
"""

import numpy as np

from .equations import BloodFlowEquations1D
from .pressure import radius
from .state import VesselState, stack_components


def friction(u: VesselState, x, eq: BloodFlowEquations1D):
    """
    Viscous friction coefficient k = -11*nu/R.

    Negative by convention: inserted in source_term_simple it gives
    -22*pi*nu*Q/A, which opposes the flow (velocity profile coefficient 1.1).
    """
    R = radius(u, eq)
    return -11 * eq.nu / R


def source_term_simple(u: VesselState, x, t, eq: BloodFlowEquations1D) -> np.ndarray:
    """
    Friction source S = (0, 2*pi*k*R*Q/A, 0, 0).

    Only the momentum equation is forced.
    """
    k = friction(u, x, eq)
    R = radius(u, eq)
    s2 = 2 * np.pi * k * R * u.Q / u.A
    zero = np.zeros_like(s2, dtype=float)
    return stack_components(zero, s2, zero, zero)
