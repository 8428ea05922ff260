"""
1D Blood Flow Model Package
===========================

Equation model for one-dimensional blood flow in an elastic artery, meant to
be driven by an external finite-volume or DG solver.

Features:
- Augmented state with passive elasticity and reference area fields
- Thin-wall pressure-area law with closed-form and bracketed inverses
- Well-balanced flux split (conservative + nonconservative)
- Viscous friction source term
- Pulsatile pressure inflow boundary
- Manufactured solution for convergence studies

State representation:
    a   - area perturbation A - A0 [cm²]
    Q   - flow rate [cm³/s]
    E   - wall elasticity [dyn/cm²]
    A0  - reference area [cm²]

Example:
    eq = BloodFlowEquations1D()
    u = initial_condition_simple(0.0, 0.0, eq)

    # Interface fluxes
    F1 = flux1(u_left, u_right, 1.0, eq)
    F2 = flux2(u_left, u_right, 1.0, eq)

    # Pressure law and its inverse
    P = pressure(u.A, u.E, u.A0, eq)
    A = inv_pressure(P, u, eq)
"""

from .errors import (
    BloodFlowError, InvalidStateError, NonConvergentInverseError, DomainConstantError
)
from .equations import BloodFlowEquations1D, DEFAULT_EQUATIONS
from .state import VesselState, stack_components
from .pressure import (
    pressure, pressure_state, pressure_derivative, inv_pressure, inv_pressure_bracketed,
    radius, wave_celerity, max_abs_speed, max_abs_speed_naive
)
from .flux import physical_flux, flux1, flux2, SURFACE_FLUX
from .sources import friction, source_term_simple
from .initial import initial_condition_simple
from .boundary import (
    InflowPulse, DEFAULT_PULSE, pressure_in, boundary_state_pressure_in,
    boundary_condition_pressure_in
)
from .convergence import initial_condition_convergence_test, source_terms_convergence_test

__all__ = [
    # Errors
    'BloodFlowError',
    'InvalidStateError',
    'NonConvergentInverseError',
    'DomainConstantError',

    # Equations
    'BloodFlowEquations1D',
    'DEFAULT_EQUATIONS',

    # State
    'VesselState',
    'stack_components',

    # Pressure law
    'pressure',
    'pressure_state',
    'pressure_derivative',
    'inv_pressure',
    'inv_pressure_bracketed',
    'radius',
    'wave_celerity',
    'max_abs_speed',
    'max_abs_speed_naive',

    # Fluxes
    'physical_flux',
    'flux1',
    'flux2',
    'SURFACE_FLUX',

    # Sources
    'friction',
    'source_term_simple',

    # Initial conditions
    'initial_condition_simple',

    # Boundary conditions
    'InflowPulse',
    'DEFAULT_PULSE',
    'pressure_in',
    'boundary_state_pressure_in',
    'boundary_condition_pressure_in',

    # Manufactured solution
    'initial_condition_convergence_test',
    'source_terms_convergence_test',
]

__version__ = '1.0.0'
