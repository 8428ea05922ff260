"""
Blood Flow Package - 1D Elastic Vessel Model
============================================

Re-exports all public components from bloodflow.src
"""

from bloodflow.src import (
    # Errors
    BloodFlowError,
    InvalidStateError,
    NonConvergentInverseError,
    DomainConstantError,
    # Equations
    BloodFlowEquations1D,
    # State
    VesselState,
    # Pressure law
    pressure,
    inv_pressure,
    inv_pressure_bracketed,
    radius,
    max_abs_speed,
    # Fluxes
    flux1,
    flux2,
    SURFACE_FLUX,
    # Sources
    friction,
    source_term_simple,
    # Initial and boundary conditions
    initial_condition_simple,
    InflowPulse,
    boundary_condition_pressure_in,
    # Manufactured solution
    initial_condition_convergence_test,
    source_terms_convergence_test,
)

__all__ = [
    'BloodFlowError',
    'InvalidStateError',
    'NonConvergentInverseError',
    'DomainConstantError',
    'BloodFlowEquations1D',
    'VesselState',
    'pressure',
    'inv_pressure',
    'inv_pressure_bracketed',
    'radius',
    'max_abs_speed',
    'flux1',
    'flux2',
    'SURFACE_FLUX',
    'friction',
    'source_term_simple',
    'initial_condition_simple',
    'InflowPulse',
    'boundary_condition_pressure_in',
    'initial_condition_convergence_test',
    'source_terms_convergence_test',
]
