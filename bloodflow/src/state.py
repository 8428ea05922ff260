"""
Vessel state representation.

State is defined by:
    a   - area perturbation a = A - A0 [cm²]
    Q   - volumetric flow rate [cm³/s]
    E   - wall elasticity [dyn/cm²] (passive, not transported)
    A0  - reference cross-sectional area [cm²] (passive, not transported)

The index order (a, Q, E, A0) is shared by states, fluxes and sources.
"""

import logging

import numpy as np
from dataclasses import dataclass

from .errors import InvalidStateError, DomainConstantError

logger = logging.getLogger(__name__)


def stack_components(c1, c2, c3, c4) -> np.ndarray:
    """
    Stack four components into a float array.

    Scalars give shape (4,), arrays of n points give shape (4, n).
    """
    return np.array(np.broadcast_arrays(c1, c2, c3, c4), dtype=float)


@dataclass(frozen=True)
class VesselState:
    """
    State of the vessel at a point (or at a batch of points).

    Fields may be floats or numpy arrays of equal shape. Instances are never
    modified; evaluators build new states.

    Derived quantities (computed as properties):
        A, R, R0, u
    """
    a: np.ndarray       # Area perturbation [cm²]
    Q: np.ndarray       # Flow rate [cm³/s]
    E: np.ndarray       # Elasticity [dyn/cm²]
    A0: np.ndarray      # Reference area [cm²]

    # --- Derived quantities as properties ---

    @property
    def A(self) -> np.ndarray:
        """Cross-sectional area [cm²]."""
        return self.a + self.A0

    @property
    def R(self) -> np.ndarray:
        """Vessel radius [cm]."""
        return np.sqrt(self.A / np.pi)

    @property
    def R0(self) -> np.ndarray:
        """Reference radius [cm]."""
        return np.sqrt(self.A0 / np.pi)

    @property
    def u(self) -> np.ndarray:
        """Mean velocity Q/A [cm/s]."""
        return self.Q / self.A

    def validate(self) -> 'VesselState':
        """
        Check the positivity invariants and return self.

        Raises:
            DomainConstantError: E <= 0 or A0 <= 0
            InvalidStateError: A <= 0 or A not finite
        """
        if np.any(np.asarray(self.E) <= 0) or np.any(np.asarray(self.A0) <= 0):
            logger.debug("Non-positive passive field: E=%s, A0=%s", self.E, self.A0)
            raise DomainConstantError("Elasticity E and reference area A0 must be positive")
        A = np.asarray(self.A)
        if not np.all(np.isfinite(A)) or np.any(A <= 0):
            logger.debug("Invalid area: a=%s, A0=%s", self.a, self.A0)
            raise InvalidStateError(f"Cross-sectional area must be positive, got A={A}")
        return self

    # --- Array conversion methods ---

    def to_array(self) -> np.ndarray:
        """
        Convert to a state array.

        Returns:
            U: Array of shape (4,) or (4, n_points) [a, Q, E, A0]
        """
        return stack_components(self.a, self.Q, self.E, self.A0)

    @classmethod
    def from_array(cls, U: np.ndarray) -> 'VesselState':
        """
        Create a VesselState from a state array.

        Args:
            U: State array [a, Q, E, A0] with leading dimension 4
        """
        U = np.asarray(U, dtype=float)
        if U.shape[0] != 4:
            raise ValueError(f"State array must have 4 components, got shape {U.shape}")
        return cls(a=U[0], Q=U[1], E=U[2], A0=U[3])

    @classmethod
    def from_area(cls, A, Q, E, A0) -> 'VesselState':
        """Create a VesselState from the total area instead of the perturbation."""
        return cls(a=A - A0, Q=Q, E=E, A0=A0)
