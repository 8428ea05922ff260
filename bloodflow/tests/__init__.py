"""
Test cases for the 1D blood flow model.

Run tests with pytest:
    pytest bloodflow/tests/ -v

Or run individual test files:
    pytest bloodflow/tests/test_pressure.py -v
    pytest bloodflow/tests/test_flux.py -v
"""

from .vessels import rest_state, flowing_state, tapered_states

__all__ = [
    'rest_state',
    'flowing_state',
    'tapered_states',
]
