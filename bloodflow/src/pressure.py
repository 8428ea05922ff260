"""
Pressure-area closure for the elastic vessel wall.

Thin-wall law relating transmural pressure to the vessel radius:

    P(A) = E*h/(1 - xi²) * (1/R0 - 1/R),    R = sqrt(A/pi), R0 = sqrt(A0/pi)

P is smooth and strictly increasing in A > 0, vanishes at A = A0 and tends
to E*h/((1 - xi²)*R0) as A -> inf, so pressures at or above that limit have
no corresponding area.
"""

import logging

import numpy as np
from scipy.optimize import root_scalar

from .equations import BloodFlowEquations1D, DEFAULT_EQUATIONS
from .errors import InvalidStateError, NonConvergentInverseError, DomainConstantError
from .state import VesselState

logger = logging.getLogger(__name__)


def _check_positive(A, E, A0):
    if np.any(np.asarray(E) <= 0) or np.any(np.asarray(A0) <= 0):
        logger.debug("Non-positive closure parameters: E=%s, A0=%s", E, A0)
        raise DomainConstantError("Elasticity E and reference area A0 must be positive")
    A = np.asarray(A)
    if not np.all(np.isfinite(A)) or np.any(A <= 0):
        logger.debug("Invalid area in pressure law: A=%s", A)
        raise InvalidStateError(f"Cross-sectional area must be positive, got A={A}")


def pressure(A, E, A0, eq: BloodFlowEquations1D = None):
    """
    Transmural pressure [dyn/cm²] for area A.

    Args:
        A: Cross-sectional area [cm²]
        E: Wall elasticity [dyn/cm²]
        A0: Reference area [cm²]
        eq: Equation descriptor (default constants when None)

    Returns:
        P, with pressure(A0, E, A0) == 0 exactly
    """
    eq = eq if eq is not None else DEFAULT_EQUATIONS
    _check_positive(A, E, A0)
    R = np.sqrt(A / np.pi)
    R0 = np.sqrt(A0 / np.pi)
    return eq.stiffness(E) * (1 / R0 - 1 / R)


def pressure_state(u: VesselState, eq: BloodFlowEquations1D):
    """Pressure of a vessel state."""
    return pressure(u.A, u.E, u.A0, eq)


def pressure_derivative(u: VesselState, eq: BloodFlowEquations1D):
    """dP/dA at fixed E, A0: b / (2*pi*R³)."""
    R = radius(u, eq)
    return eq.stiffness(u.E) / (2 * np.pi * R**3)


def inv_pressure(P, u: VesselState, eq: BloodFlowEquations1D):
    """
    Area A such that pressure(A, E, A0) == P, using E and A0 of state u.

    Closed form inverse of the thin-wall law:
        R = R0*b / (b - R0*P),  A = pi*R²

    Raises:
        NonConvergentInverseError: P >= b/R0, no finite area reaches P
    """
    E, A0 = u.E, u.A0
    if np.any(np.asarray(E) <= 0) or np.any(np.asarray(A0) <= 0):
        logger.debug("Non-positive closure parameters: E=%s, A0=%s", E, A0)
        raise DomainConstantError("Elasticity E and reference area A0 must be positive")

    b = eq.stiffness(E)
    R0 = np.sqrt(A0 / np.pi)
    denom = b - R0 * P
    if np.any(denom <= 0):
        logger.debug("Pressure beyond wall limit: P=%s, limit=%s", P, b / R0)
        raise NonConvergentInverseError(
            f"Pressure {P} is not reachable, wall law saturates at {b / R0}")
    R = R0 * b / denom
    return np.pi * R**2


def _bracketed_root(P: float, E: float, A0: float, eq: BloodFlowEquations1D,
                    maxiter: int) -> float:
    def residual(A):
        return pressure(A, E, A0, eq) - P

    f0 = residual(A0)
    if f0 == 0:
        return A0

    # P(A) -> -inf as A -> 0 and is increasing, so shrink or grow from A0
    # until the sign changes
    A_lo, A_hi = A0, A0
    for _ in range(maxiter):
        if f0 > 0:
            A_lo *= 0.5
            if residual(A_lo) < 0:
                break
        else:
            A_hi *= 2.0
            if residual(A_hi) > 0:
                break
    else:
        logger.debug("No bracket for P=%s (E=%s, A0=%s)", P, E, A0)
        raise NonConvergentInverseError(f"Could not bracket an area for pressure {P}")

    sol = root_scalar(residual, bracket=(A_lo, A_hi), method='brentq',
                      xtol=1e-14 * A0, rtol=4 * np.finfo(float).eps, maxiter=maxiter)
    logger.debug("Bracketed inverse: P=%s, A=%s, iterations=%d",
                 P, sol.root, sol.iterations)
    if not sol.converged:
        raise NonConvergentInverseError(
            f"Root-find for pressure {P} did not converge: {sol.flag}")
    return sol.root


def inv_pressure_bracketed(P, u: VesselState, eq: BloodFlowEquations1D,
                           maxiter: int = 100):
    """
    Area for pressure P by bracketed root-finding (Brent's method).

    Works for any monotone pressure law; for the thin-wall law it agrees with
    inv_pressure to root-finder tolerance. Broadcasts over array inputs.

    Args:
        P: Target pressure [dyn/cm²]
        u: State supplying E and A0
        eq: Equation descriptor
        maxiter: Budget for both bracket growth and Brent iterations

    Raises:
        NonConvergentInverseError: no bracket or no convergence within maxiter
    """
    solve = np.vectorize(lambda p, e, a0: _bracketed_root(p, e, a0, eq, maxiter),
                         otypes=[float])
    A = solve(P, u.E, u.A0)
    return A[()] if A.ndim == 0 else A


def radius(u: VesselState, eq: BloodFlowEquations1D):
    """Vessel radius sqrt(A/pi) [cm]."""
    A = np.asarray(u.A)
    if not np.all(np.isfinite(A)) or np.any(A <= 0):
        logger.debug("Invalid area for radius: a=%s, A0=%s", u.a, u.A0)
        raise InvalidStateError(f"Cross-sectional area must be positive, got A={A}")
    return np.sqrt(u.A / np.pi)


def wave_celerity(u: VesselState, eq: BloodFlowEquations1D):
    """Pulse wave speed c = sqrt(A/rho * dP/dA) [cm/s]."""
    return np.sqrt(u.A / eq.rho * pressure_derivative(u, eq))


def max_abs_speed(u: VesselState, orientation, eq: BloodFlowEquations1D):
    """
    Largest characteristic speed |Q/A| + c along the orientation.

    Non-negative, and finite whenever A > 0.
    """
    u.validate()
    return (np.abs(u.Q / u.A) + wave_celerity(u, eq)) * np.abs(orientation)


def max_abs_speed_naive(u_l: VesselState, u_r: VesselState, orientation,
                        eq: BloodFlowEquations1D):
    """Wave speed estimate for an interface: max over both neighbours."""
    return np.maximum(max_abs_speed(u_l, orientation, eq),
                      max_abs_speed(u_r, orientation, eq))
