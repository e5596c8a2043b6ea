"""
Analysis tools built on the section solve

Includes:
- Inflow constructors (uniform, wind turbine with shear/yaw/tilt)
- Thrust/torque integration and azimuthal averaging
- Nondimensional performance coefficients
- Columnar access to section outputs
"""

from .inflow import (
    simple_op,
    windturbine_op,
)
from .performance import (
    thrust_torque,
    thrust_torque_azimuthal,
    nondim,
    available_rotor_types,
    outputs_to_arrays,
    outputs_to_frame,
)

__all__ = [
    'simple_op',
    'windturbine_op',
    'thrust_torque',
    'thrust_torque_azimuthal',
    'nondim',
    'available_rotor_types',
    'outputs_to_arrays',
    'outputs_to_frame',
]
