# File: rotor_bem/components/__init__.py

"""
Single-section BEM solve

Exports:
- solve: single-section entry point
- residual, Outputs: BEM residual and its result record
- quadrant helpers used by the bracket search
"""

from .residual import Outputs, residual
from .quadrants import (
    Q1, Q2, Q3, Q4,
    QUADRANTS,
    quadrant_order,
    backward_search,
    search_quadrant,
)
from .solver import solve, SolveFailureWarning

__all__ = [
    'solve',
    'SolveFailureWarning',
    'residual',
    'Outputs',
    'Q1',
    'Q2',
    'Q3',
    'Q4',
    'QUADRANTS',
    'quadrant_order',
    'backward_search',
    'search_quadrant',
]
