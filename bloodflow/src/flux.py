"""
Numerical fluxes for the 1D blood flow model.

The momentum balance

    dQ/dt + d/dx(Q²/A) + (A/rho) dP/dx = S

contains the product A dP/dx. With E and A0 varying in x it is not the
divergence of a flux, so the interface flux is split into two parts:

    flux1 - conservative advective flux (local Lax-Friedrichs)
    flux2 - nonconservative pressure fluctuation, mean area times pressure jump

Both take (u_l, u_r, orientation, eq), where orientation is the signed
interface normal in 1D (u_l on the side the normal points away from), and
return arrays in state order (a, Q, E, A0). The passive fields E and A0
never receive a flux.
"""

import numpy as np

from .equations import BloodFlowEquations1D
from .pressure import pressure_state, max_abs_speed_naive
from .state import VesselState, stack_components


def physical_flux(u: VesselState, orientation, eq: BloodFlowEquations1D) -> np.ndarray:
    """
    Advective flux f(u) = (Q, Q²/A, 0, 0) projected on the orientation.
    """
    u.validate()
    zero = np.zeros_like(u.Q, dtype=float)
    return stack_components(orientation * u.Q, orientation * u.Q**2 / u.A, zero, zero)


def flux1(u_l: VesselState, u_r: VesselState, orientation,
          eq: BloodFlowEquations1D) -> np.ndarray:
    """
    Conservative interface flux (Rusanov).

        F = 0.5*(f(u_l) + f(u_r)) - 0.5*lambda*|n|*(U_r - U_l)

    The dissipation acts on the area perturbation a and on Q only. Two rest
    states with different A0 have equal a = 0, so no mass is exchanged.
    """
    smax = max_abs_speed_naive(u_l, u_r, 1.0, eq)
    FL = physical_flux(u_l, orientation, eq)
    FR = physical_flux(u_r, orientation, eq)

    n_abs = np.abs(orientation)
    zero = np.zeros_like(smax, dtype=float)
    jump = stack_components(u_r.a - u_l.a, u_r.Q - u_l.Q, zero, zero)

    return 0.5 * (FL + FR) - 0.5 * smax * n_abs * jump


def flux2(u_l: VesselState, u_r: VesselState, orientation,
          eq: BloodFlowEquations1D) -> np.ndarray:
    """
    Nonconservative pressure fluctuation at an interface.

        G = (0, |n| * 0.5*(A_l + A_r) * (P_r - P_l) / rho, 0, 0)

    For constant E and A0 this is the mean-value discretisation of
    (A/rho) dP/dx. Two rest states have P = 0 on both sides, so G vanishes
    regardless of the jump in E and A0.
    """
    p_ll = pressure_state(u_l, eq)
    p_rr = pressure_state(u_r, eq)
    A_mean = 0.5 * (u_l.A + u_r.A)

    g2 = np.abs(orientation) * A_mean * (p_rr - p_ll) / eq.rho
    zero = np.zeros_like(g2, dtype=float)
    return stack_components(zero, g2, zero, zero)


SURFACE_FLUX = (flux1, flux2)
