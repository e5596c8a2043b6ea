# File: rotor_bem/core/correlations.py
"""
Generic numerical utilities used by the section solver

- first_bracket: scan an interval for the first sign change
- brent: bracketing root refinement (scipy brentq)
- trapz: trapezoidal integration
"""

import numpy as np
from scipy import optimize
from scipy import integrate


def first_bracket(f, xmin: float, xmax: float, n: int, backwardsearch: bool = False):
    """
    Find a bracket for the root closest to xmin (or xmax)

    Subdivides (xmin, xmax) into n points and returns the first adjacent
    pair where f changes sign. NaN values never count as a sign change.

    Args:
        f: Scalar function
        xmin: Lower end of the interval
        xmax: Upper end of the interval
        n: Number of discretization points
        backwardsearch: Start from xmax and work backwards

    Returns:
        tuple: (found, xl, xu) with xl < xu when found, else (False, 0.0, 0.0)
    """
    xvec = np.linspace(xmin, xmax, n)
    if backwardsearch:
        xvec = xvec[::-1]

    fprev = f(xvec[0])
    for i in range(1, n):
        fnext = f(xvec[i])
        if fprev * fnext < 0:  # bracket found
            if backwardsearch:
                return True, float(xvec[i]), float(xvec[i - 1])
            return True, float(xvec[i - 1]), float(xvec[i])
        fprev = fnext

    return False, 0.0, 0.0


def brent(f, a: float, b: float, atol: float = 2e-12,
          rtol: float = 4 * np.finfo(float).eps, maxiter: int = 100):
    """
    Brent's method on a sign-changing interval

    Args:
        f: Scalar function with f(a) * f(b) < 0
        a, b: Bracket ends
        atol: Absolute tolerance on the root
        rtol: Relative tolerance on the root
        maxiter: Maximum iterations

    Returns:
        tuple: (root, f(root))
    """
    root = optimize.brentq(f, a, b, xtol=atol, rtol=rtol, maxiter=maxiter, disp=False)
    return root, f(root)


def trapz(x, y) -> float:
    """Trapezoidal integral of y(x)"""
    return float(integrate.trapezoid(np.asarray(y, dtype=float), np.asarray(x, dtype=float)))
