"""
Exceptions raised by the blood flow model.

Every failure is numerical and local: the model never clamps a bad state,
it raises and leaves the decision (abort, shrink dt, reject) to the caller.
"""


class BloodFlowError(Exception):
    """Base class for all model errors."""


class InvalidStateError(BloodFlowError, ValueError):
    """Cross-sectional area A = a + A0 is non-positive or not finite."""


class NonConvergentInverseError(BloodFlowError, ArithmeticError):
    """Pressure could not be inverted to a positive area."""


class DomainConstantError(BloodFlowError, ValueError):
    """Elasticity, reference area or a model constant is out of range."""
