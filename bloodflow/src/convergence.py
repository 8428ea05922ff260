"""
Manufactured solution for convergence studies.

Smooth travelling wave in a vessel with spatially varying reference area:

    A0(x)   = pi * (1 + 0.1*cos(2*pi*x))
    E       = 1e7
    a(x, t) = 0.05*pi * sin(2*pi*(x - t))
    Q(x, t) = 1 + 0.5 * sin(2*pi*(x - t))

source_terms_convergence_test returns the friction source plus the residual
of the exact solution, so that it satisfies

    dU/dt + d/dx f(U) + (A/rho) dP/dx = S
"""

import numpy as np

from .equations import BloodFlowEquations1D
from .sources import source_term_simple
from .state import VesselState, stack_components

OMEGA = 2 * np.pi
ELASTICITY = 1e7


def initial_condition_convergence_test(x, t, eq: BloodFlowEquations1D) -> VesselState:
    """Exact manufactured state at (x, t)."""
    x = np.asarray(x, dtype=float)
    phase = OMEGA * (x - t)
    A0 = np.pi * (1 + 0.1 * np.cos(OMEGA * x))
    a = 0.05 * np.pi * np.sin(phase)
    Q = 1 + 0.5 * np.sin(phase)
    return VesselState(a=a, Q=Q, E=np.full_like(x, ELASTICITY), A0=A0)


def _manufactured_residual(x, t, eq: BloodFlowEquations1D):
    x = np.asarray(x, dtype=float)
    phase = OMEGA * (x - t)
    s, c = np.sin(phase), np.cos(phase)

    exact = initial_condition_convergence_test(x, t, eq)
    A0, Q, A = exact.A0, exact.Q, exact.A

    # Derivatives of the exact fields
    A0_x = -0.1 * np.pi * OMEGA * np.sin(OMEGA * x)
    a_t = -0.05 * np.pi * OMEGA * c
    a_x = 0.05 * np.pi * OMEGA * c
    Q_t = -0.5 * OMEGA * c
    Q_x = 0.5 * OMEGA * c
    A_x = A0_x + a_x

    R = np.sqrt(A / np.pi)
    R0 = np.sqrt(A0 / np.pi)
    R_x = A_x / (2 * np.pi * R)
    R0_x = A0_x / (2 * np.pi * R0)
    P_x = eq.stiffness(ELASTICITY) * (R_x / R**2 - R0_x / R0**2)

    r1 = a_t + Q_x
    r2 = Q_t + 2 * Q * Q_x / A - Q**2 * A_x / A**2 + A * P_x / eq.rho
    return exact, r1, r2


def source_terms_convergence_test(u: VesselState, x, t, eq: BloodFlowEquations1D) -> np.ndarray:
    """
    Source term driving the manufactured solution.

    Friction is evaluated on the numerical state u; the manufactured part
    removes the friction of the exact state so the two cancel at u = exact.
    """
    exact, r1, r2 = _manufactured_residual(x, t, eq)
    S_exact_friction = source_term_simple(exact, x, t, eq)
    zero = np.zeros_like(r1)
    S_mms = stack_components(r1, r2 - S_exact_friction[1], zero, zero)
    return source_term_simple(u, x, t, eq) + S_mms
