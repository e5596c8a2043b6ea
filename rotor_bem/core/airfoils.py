# File: rotor_bem/core/airfoils.py
"""
Airfoil polars

A polar is any callable  cl, cd = af(alpha, Re, Mach)  with alpha in
radians. The solver treats it as an opaque, total function, so every
polar here must return finite values for any real alpha.

- linear_polar: thin-airfoil lift with constant drag
- Airfoil: tabulated data on an (alpha, Re) grid, smoothed bivariate spline
"""

import math
from typing import Any, Dict, Optional, Sequence, Tuple

import numpy as np
from scipy.interpolate import RectBivariateSpline


class AirfoilException(Exception):
    """Exception raised for malformed airfoil data"""
    pass


def linear_polar(cl_alpha: float = 2 * math.pi, alpha0: float = 0.0, cd0: float = 0.0):
    """
    Thin-airfoil polar

    cl = cl_alpha * (alpha - alpha0), cd = cd0, independent of Re and Mach

    Args:
        cl_alpha: Lift curve slope (1/rad)
        alpha0: Zero-lift angle (rad)
        cd0: Constant drag coefficient

    Returns:
        Callable af(alpha, Re, Mach) -> (cl, cd)
    """
    def af(alpha, Re, Mach):
        return cl_alpha * (alpha - alpha0), cd0

    return af


class Airfoil:
    """
    Tabulated airfoil polar

    Data on an (alpha, Re) grid are fitted with a bivariate spline. A small
    amount of smoothing keeps the lift curve free of wiggles that would
    create spurious extra roots in the residual. Mach effects are left to
    the rotor's Mach correction.

    Args:
        alpha: Angles of attack (rad), ideally spanning -pi..pi
        cl: Lift coefficients, shape (len(alpha),) or (len(alpha), len(Re))
        cd: Drag coefficients, same shape as cl
        Re: Reynolds numbers of the data columns (None or one value for a single polar)
        cl_smoothing: Spline smoothing factor for lift
        cd_smoothing: Spline smoothing factor for drag

    Example:
        >>> af = Airfoil(alpha, cl, cd)
        >>> cl, cd = af(math.radians(4.0), 1e6, 0.1)
    """

    def __init__(
        self,
        alpha: Sequence[float],
        cl,
        cd,
        Re: Optional[Sequence[float]] = None,
        cl_smoothing: float = 0.1,
        cd_smoothing: float = 0.001,
    ):
        alpha = np.asarray(alpha, dtype=float)
        cl = np.asarray(cl, dtype=float)
        cd = np.asarray(cd, dtype=float)
        Re = np.atleast_1d(np.asarray([] if Re is None else Re, dtype=float))

        if alpha.ndim != 1 or len(alpha) < 2:
            raise AirfoilException("alpha must be a 1-D array with at least two values")
        if np.any(np.diff(alpha) <= 0):
            raise AirfoilException("alpha must be strictly increasing")

        if cl.ndim == 1:
            cl = cl[:, np.newaxis]
        if cd.ndim == 1:
            cd = cd[:, np.newaxis]

        if cl.shape != cd.shape:
            raise AirfoilException(f"cl shape {cl.shape} does not match cd shape {cd.shape}")
        if cl.shape[0] != len(alpha):
            raise AirfoilException(
                f"cl/cd have {cl.shape[0]} rows but alpha has {len(alpha)} values"
            )

        # need at least two Reynolds numbers for a bivariate spline
        self.one_Re = len(Re) < 2
        if self.one_Re:
            if cl.shape[1] != 1:
                raise AirfoilException("Multiple cl/cd columns given without Reynolds numbers")
            Re = np.array([1e1, 1e15])
            cl = np.hstack([cl, cl])
            cd = np.hstack([cd, cd])
        elif cl.shape[1] != len(Re):
            raise AirfoilException(
                f"cl/cd have {cl.shape[1]} columns but Re has {len(Re)} values"
            )

        kx = min(len(alpha) - 1, 3)
        ky = min(len(Re) - 1, 3)

        self.alpha = alpha
        self.Re = Re
        self.cl_spline = RectBivariateSpline(alpha, Re, cl, kx=kx, ky=ky, s=cl_smoothing)
        self.cd_spline = RectBivariateSpline(alpha, Re, cd, kx=kx, ky=ky, s=cd_smoothing)

    def __call__(self, alpha: float, Re: float, Mach: float) -> Tuple[float, float]:
        """Lift/drag coefficient at angle of attack (rad) and Reynolds number"""
        if self.one_Re:
            Re = self.Re[0]
        cl = self.cl_spline.ev(alpha, Re)
        cd = self.cd_spline.ev(alpha, Re)
        return float(cl), float(cd)

    @classmethod
    def from_degrees(cls, alpha_deg, cl, cd, Re=None, **kwargs) -> "Airfoil":
        """Create from angles of attack given in degrees"""
        return cls(np.radians(alpha_deg), cl, cd, Re=Re, **kwargs)

    def __repr__(self):
        return (f"Airfoil(alpha=[{math.degrees(self.alpha[0]):.1f}, "
                f"{math.degrees(self.alpha[-1]):.1f}] deg, n_Re={1 if self.one_Re else len(self.Re)})")


def airfoil_from_config(entry: Dict[str, Any]):
    """
    Build a polar from a configuration mapping

    Supported:
        {'type': 'linear', 'cl_alpha': ..., 'alpha0': ..., 'cd0': ...}
        {'type': 'table', 'alpha_deg': [...], 'cl': [...], 'cd': [...], 'Re': [...]}
    """
    params = dict(entry)
    kind = params.pop('type', 'linear')

    if kind == 'linear':
        return linear_polar(**params)
    elif kind == 'table':
        try:
            alpha_deg = params.pop('alpha_deg')
            cl = params.pop('cl')
            cd = params.pop('cd')
        except KeyError as e:
            raise AirfoilException(f"Tabulated airfoil entry missing {e}")
        return Airfoil.from_degrees(alpha_deg, cl, cd, **params)
    else:
        raise ValueError(f"Unknown airfoil type: {kind}. Use 'linear' or 'table'")
