# File: rotor_bem/core/__init__.py

"""
Core utilities for blade-element momentum calculations

This module provides:
- Rotor, section and operating point definitions
- Fluid property calculations using CoolProp
- Trigonometric functions in degrees (cosd, sind, tand)
- Numerical utilities (bracket search, Brent's method, trapezoidal rule)
- Airfoil polars (linear and tabulated)

Usage:
    from rotor_bem.core import Rotor, Section, OperatingPoint, linear_polar

    rotor = Rotor(Rhub=0.1, Rtip=1.0, B=3)
    section = Section(r=0.5, chord=0.1, theta=0.2, af=linear_polar())
    op = OperatingPoint(Vx=10.0, Vy=50.0, rho=1.225)
"""

# ============================================================================
# Trigonometric functions (degrees) - from geometry.py
# ============================================================================
from .geometry import cosd, sind, tand

# ============================================================================
# Rotor, section and operating point - from geometry.py
# ============================================================================
from .geometry import (
    Rotor,
    Section,
    OperatingPoint,
    create_example_rotor,
    create_example_sections,
    create_example_operating_point,
)

# ============================================================================
# Fluid properties - from thermodynamics.py
# ============================================================================
from .thermodynamics import (
    FluidState,
    Fluid,
    ThermoException,
    standard_air,
)

# ============================================================================
# Numerical utilities - from correlations.py
# ============================================================================
from .correlations import (
    first_bracket,
    brent,
    trapz,
)

# ============================================================================
# Airfoil polars - from airfoils.py
# ============================================================================
from .airfoils import (
    Airfoil,
    AirfoilException,
    linear_polar,
    airfoil_from_config,
)

# ============================================================================
# Public API
# ============================================================================
__all__ = [
    # Trigonometric functions
    'cosd',
    'sind',
    'tand',

    # Geometry
    'Rotor',
    'Section',
    'OperatingPoint',
    'create_example_rotor',
    'create_example_sections',
    'create_example_operating_point',

    # Fluid properties
    'FluidState',
    'Fluid',
    'ThermoException',
    'standard_air',

    # Numerics
    'first_bracket',
    'brent',
    'trapz',

    # Airfoils
    'Airfoil',
    'AirfoilException',
    'linear_polar',
    'airfoil_from_config',
]
