"""
Equation descriptor for the 1D blood flow model.
"""

from dataclasses import dataclass

from .errors import DomainConstantError


@dataclass(frozen=True)
class BloodFlowEquations1D:
    """
    Immutable description of the 1D elastic-vessel blood flow system.

    Four variables (a, Q, E, A0) in one space dimension. The wall elasticity
    E and the reference area A0 live in the state vector, so a single
    instance serves every point of the mesh. CGS units.
    """
    h: float = 0.1          # Wall thickness [cm]
    rho: float = 1.0        # Blood density [g/cm³]
    xi: float = 0.25        # Poisson ratio of the wall
    nu: float = 0.04        # Kinematic viscosity [cm²/s]

    def __post_init__(self):
        if self.h <= 0 or self.rho <= 0 or self.nu <= 0:
            raise DomainConstantError(
                f"h, rho and nu must be positive, got h={self.h}, "
                f"rho={self.rho}, nu={self.nu}")
        if not 0 <= self.xi < 1:
            raise DomainConstantError(f"Poisson ratio must lie in [0, 1), got {self.xi}")

    @property
    def num_variables(self) -> int:
        return 4

    @property
    def num_dimensions(self) -> int:
        return 1

    @property
    def varnames(self) -> tuple:
        return ('a', 'Q', 'E', 'A0')

    def stiffness(self, E):
        """Wall stiffness E*h/(1 - xi²) [dyn/cm]."""
        return E * self.h / (1 - self.xi**2)


DEFAULT_EQUATIONS = BloodFlowEquations1D()
