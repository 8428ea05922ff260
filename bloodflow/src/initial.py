"""
Initial conditions for the 1D blood flow model.
"""

import numpy as np

from .equations import BloodFlowEquations1D
from .state import VesselState


def initial_condition_simple(x, t, eq: BloodFlowEquations1D, R0: float = 2.0) -> VesselState:
    """
    Vessel at rest with reference radius R0.

    Zero area perturbation, zero flow, E = 1e7 and A0 = pi*R0². Array
    positions give one state per point.
    """
    x = np.asarray(x, dtype=float)
    zero = np.zeros_like(x)
    return VesselState(
        a=zero,
        Q=zero.copy(),
        E=np.full_like(x, 1e7),
        A0=np.full_like(x, np.pi * R0**2),
    )
