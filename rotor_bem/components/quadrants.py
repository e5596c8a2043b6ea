# File: rotor_bem/components/quadrants.py

"""
Flow quadrants and bracket search for the inflow angle

The residual is discontinuous at phi = 0 and phi = +/-pi/2, so the search
domain is split into four quadrants that avoid those points:

    Q1 = ( eps,      pi/2)      propeller / windmill, Vx > 0, Vy > 0
    Q2 = (-pi/2,    -eps )      Vx < 0, Vy > 0
    Q3 = ( pi/2,     pi - eps)  Vx > 0, Vy < 0
    Q4 = (-pi + eps, -pi/2)     Vx < 0, Vy < 0

The quadrant order and scan direction only decide how fast the expected
root is found; every quadrant in the order is eventually scanned.
"""

import math
from typing import Callable, Optional, Tuple

from ..core.correlations import first_bracket
from .residual import ATOL


EPSILON = 1e-6
NPTS = 20  # discretization points per quadrant for the bracket search

Q1 = (EPSILON, math.pi / 2)
Q2 = (-math.pi / 2, -EPSILON)
Q3 = (math.pi / 2, math.pi - EPSILON)
Q4 = (-math.pi + EPSILON, -math.pi / 2)

QUADRANTS = {'Q1': Q1, 'Q2': Q2, 'Q3': Q3, 'Q4': Q4}


def quadrant_order(Vx: float, Vy: float, theta: float):
    """
    Quadrant search order from the inflow signs

    Args:
        Vx: Axial inflow velocity (m/s)
        Vy: Tangential inflow velocity (m/s)
        theta: Twist plus pitch (rad), only used when Vx or Vy is ~0

    Returns:
        tuple: (order, startfrom90). order is a tuple of (phimin, phimax)
               pairs; startfrom90 is True when the scan should start near
               +/-pi/2 instead of near 0. order is empty when both
               velocities are ~0.
    """
    Vx_is_zero = abs(Vx) <= ATOL
    Vy_is_zero = abs(Vy) <= ATOL

    if Vx_is_zero and Vy_is_zero:
        return (), False

    elif Vx_is_zero:

        startfrom90 = False  # start bracket at 0 deg

        if Vy > 0 and theta > 0:
            order = (Q1, Q2)
        elif Vy > 0 and theta < 0:
            order = (Q2, Q1)
        elif Vy < 0 and theta > 0:
            order = (Q3, Q4)
        else:  # Vy < 0 and theta < 0
            order = (Q4, Q3)

    elif Vy_is_zero:

        startfrom90 = True  # start bracket search from 90 deg

        if Vx > 0 and abs(theta) < math.pi / 2:
            order = (Q1, Q3)
        elif Vx < 0 and abs(theta) < math.pi / 2:
            order = (Q2, Q4)
        elif Vx > 0 and abs(theta) > math.pi / 2:
            order = (Q3, Q1)
        else:  # Vx < 0 and abs(theta) > pi/2
            order = (Q4, Q2)

    else:  # normal case

        startfrom90 = False

        if Vx > 0 and Vy > 0:
            order = (Q1, Q2, Q3, Q4)
        elif Vx < 0 and Vy > 0:
            order = (Q2, Q1, Q4, Q3)
        elif Vx > 0 and Vy < 0:
            order = (Q3, Q4, Q1, Q2)
        else:  # Vx < 0 and Vy < 0
            order = (Q4, Q3, Q2, Q1)

    return order, startfrom90


def backward_search(quadrant: Tuple[float, float], startfrom90: bool) -> bool:
    """
    Whether to scan a quadrant from its upper bound downward

    Scans start from the end expected to be closest to the root: near 0
    in the usual case (Q2, Q4 run backward), near 90 deg when the
    tangential inflow vanishes (Q1 runs backward).
    """
    phimin, phimax = quadrant
    if not startfrom90:
        return phimin == -math.pi / 2 or phimax == -math.pi / 2  # Q2 or Q4
    return phimax == math.pi / 2  # Q1


def search_quadrant(
    f: Callable[[float], float],
    quadrant: Tuple[float, float],
    startfrom90: bool,
    npts: int = NPTS,
) -> Optional[Tuple[float, float]]:
    """
    Scan one quadrant for a sign change of f

    Returns:
        (phiL, phiU) bracket, or None if f does not change sign
    """
    phimin, phimax = quadrant
    success, phiL, phiU = first_bracket(
        f, phimin, phimax, npts, backward_search(quadrant, startfrom90)
    )
    if success:
        return phiL, phiU
    return None
