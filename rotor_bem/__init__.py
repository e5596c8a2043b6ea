# File: rotor_bem/__init__.py
"""
Blade element momentum model for rotors
(propellers, fans, wind turbines, helicopter rotors)
"""

__version__ = "0.1.0"

from rotor_bem.core.geometry import Rotor, Section, OperatingPoint
from rotor_bem.core.airfoils import Airfoil, linear_polar
from rotor_bem.core.thermodynamics import Fluid, FluidState, ThermoException
from rotor_bem.components.residual import Outputs
from rotor_bem.components.solver import solve, SolveFailureWarning
from rotor_bem.analysis.inflow import simple_op, windturbine_op
from rotor_bem.analysis.performance import thrust_torque, thrust_torque_azimuthal, nondim

__all__ = [
    # Inputs
    "Rotor",
    "Section",
    "OperatingPoint",
    "Airfoil",
    "linear_polar",
    "Fluid",
    "FluidState",
    "ThermoException",

    # Solve
    "solve",
    "Outputs",
    "SolveFailureWarning",

    # Inflow
    "simple_op",
    "windturbine_op",

    # Performance
    "thrust_torque",
    "thrust_torque_azimuthal",
    "nondim",
]
