# File: rotor_bem/analysis/inflow.py
"""
Inflow constructors

Build the OperatingPoint seen by one section from rotor-level conditions:

- simple_op:      uniform axial inflow plus rotation (propellers, fans, hover)
- windturbine_op: hub-height wind with power-law shear, yaw, tilt and azimuth

Angles in radians. Like solve(), both functions take a single radius;
map them over the blade for a full rotor.
"""

import math
from collections.abc import Sequence

import numpy as np

from ..core.geometry import OperatingPoint


def _check_scalar(r) -> None:
    if isinstance(r, (Sequence, np.ndarray)):
        raise TypeError(
            "Expected a single radius, got a sequence. "
            "Map over the radii instead: [simple_op(Vinf, Omega, r, rho) for r in radii]"
        )


def simple_op(Vinf: float, Omega: float, r: float, rho: float,
              pitch: float = 0.0, mu: float = 1.0, asound: float = 1.0,
              precone: float = 0.0) -> OperatingPoint:
    """
    Uniform inflow through the rotor

    Args:
        Vinf: Freestream speed (m/s)
        Omega: Rotation speed (rad/s)
        r: Radial location where inflow is computed (m)
        rho: Fluid density (kg/m³)
        pitch: Pitch angle (rad)
        mu: Dynamic viscosity (Pa-s)
        asound: Speed of sound (m/s)
        precone: Precone angle (rad)

    Returns:
        OperatingPoint with Vx = Vinf cos(precone), Vy = Omega r cos(precone)
    """
    _check_scalar(r)

    Vx = Vinf * math.cos(precone)
    Vy = Omega * r * math.cos(precone)

    return OperatingPoint(Vx, Vy, rho, pitch, mu, asound)


def windturbine_op(Vhub: float, Omega: float, pitch: float, r: float,
                   precone: float, yaw: float, tilt: float, azimuth: float,
                   hubHt: float, shearExp: float, rho: float,
                   mu: float = 1.0, asound: float = 1.0) -> OperatingPoint:
    """
    Relative wind velocity at a blade section of a wind turbine

    Accounts for power-law wind shear and the orientation of the turbine
    (yaw, tilt, precone) at the given blade azimuth.

    Args:
        Vhub: Freestream speed at hub height (m/s)
        Omega: Rotation speed (rad/s)
        pitch: Pitch angle (rad)
        r: Radial location where inflow is computed (m)
        precone: Precone angle (rad)
        yaw: Yaw angle (rad)
        tilt: Tilt angle (rad)
        azimuth: Blade azimuth angle (rad)
        hubHt: Hub height (m), used for shear
        shearExp: Power law shear exponent
        rho: Air density (kg/m³)
        mu: Dynamic viscosity (Pa-s)
        asound: Speed of sound (m/s)

    Returns:
        OperatingPoint in the blade coordinate system
    """
    _check_scalar(r)

    sy = math.sin(yaw)
    cy = math.cos(yaw)
    st = math.sin(tilt)
    ct = math.cos(tilt)
    sa = math.sin(azimuth)
    ca = math.cos(azimuth)
    sc = math.sin(precone)
    cc = math.cos(precone)

    # coordinate in azimuthal coordinate system (no presweep, y_az = 0)
    x_az = -r * sc
    z_az = r * cc
    y_az = 0.0

    # section height in wind-aligned coordinate system
    heightFromHub = (y_az * sa + z_az * ca) * ct - x_az * st

    # velocity with shear
    V = Vhub * (1 + heightFromHub / hubHt)**shearExp

    # transform wind to blade c.s.
    Vwind_x = V * ((cy * st * ca + sy * sa) * sc + cy * ct * cc)
    Vwind_y = V * (cy * st * sa - sy * ca)

    # wind from rotation to blade c.s.
    Vrot_x = -Omega * y_az * sc
    Vrot_y = Omega * z_az

    # total velocity
    Vx = Vwind_x + Vrot_x
    Vy = Vwind_y + Vrot_y

    return OperatingPoint(Vx, Vy, rho, pitch, mu, asound)
