# File: rotor_bem/components/solver.py

"""
Section solver

solve(rotor, section, op) finds the inflow angle phi* with R(phi*) = 0 and
returns the corresponding Outputs:

    1. hub/tip station or no inflow      -> zero Outputs, no solve
    2. for each quadrant in search order -> scan for a sign change
    3. bracket found                     -> Brent refinement, final residual call
    4. no bracket in any quadrant        -> SolveFailureWarning, zero Outputs

One call handles exactly one section at one operating point. Map it over
sections/azimuths for a whole rotor; calls share no state.
"""

import warnings
from collections.abc import Sequence as _Sequence

import numpy as np

from ..core.geometry import Rotor, Section, OperatingPoint
from ..core.correlations import brent
from .residual import Outputs, residual, ATOL
from .quadrants import quadrant_order, search_quadrant, NPTS


class SolveFailureWarning(UserWarning):
    """No sign change of the residual was found for a section"""
    pass


def _is_sequence(obj) -> bool:
    return isinstance(obj, (_Sequence, np.ndarray))


def solve(rotor: Rotor, section: Section, op: OperatingPoint, npts: int = NPTS) -> Outputs:
    """
    Solve the BEM equations for one section at one operating point

    Args:
        rotor: Rotor properties
        section: Section properties
        op: Operating point
        npts: Discretization points per quadrant for the bracket search

    Returns:
        Outputs: loads, induction factors, etc. All zero at the hub/tip,
                 without inflow, or when no solution was found.

    Example:
        >>> outputs = [solve(rotor, s, o) for s, o in zip(sections, ops)]
    """
    # error handling
    if _is_sequence(section) or _is_sequence(op):
        raise TypeError(
            "solve() accepts a single Section and OperatingPoint, got a sequence. "
            "Map over the sections instead: [solve(rotor, s, o) for s, o in zip(sections, ops)]"
        )

    # no loads at (or beyond) the hub/tip
    r = section.r
    if r - rotor.Rhub <= ATOL or rotor.Rtip - r <= ATOL:
        return Outputs()

    theta = section.theta + op.pitch

    # ---- determine quadrants based on case -----
    order, startfrom90 = quadrant_order(op.Vx, op.Vy, theta)
    if not order:  # Vx = Vy = 0
        return Outputs()

    # ----- solve residual function ------
    def R(phi):
        return residual(phi, rotor, section, op)[0]

    # in most cases the root is found in the first quadrant searched
    for quadrant in order:
        bracket = search_quadrant(R, quadrant, startfrom90, npts)

        if bracket is not None:
            phiL, phiU = bracket
            phistar, _ = brent(R, phiL, phiU)
            _, outputs = residual(phistar, rotor, section, op)
            return outputs

    warnings.warn(
        f"No solution found for section at r={r:g} (Vx={op.Vx:g}, Vy={op.Vy:g}); "
        "invalid data likely. Zero loading assumed.",
        SolveFailureWarning,
        stacklevel=2,
    )
    return Outputs()
