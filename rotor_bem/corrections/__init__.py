# File: rotor_bem/corrections/__init__.py

"""
Correction framework

Exports:
- Correction variants for Mach, Reynolds, rotation and hub/tip loss
- apply_airfoil_corrections / tip_loss_factor: used by the residual
- Registry helpers: get_correction, available_corrections, correction_from_config
"""

from .models import (
    AVAILABLE_CORRECTIONS,
    get_correction,
    MachCorrection,
    NoMachCorrection,
    PrandtlGlauert,
    KarmanTsien,
    ReCorrection,
    NoReCorrection,
    SkinFriction,
    RotationCorrection,
    NoRotationCorrection,
    DuSeligEggers,
    TipCorrection,
    NoTipCorrection,
    PrandtlTipOnly,
    Prandtl,
)
from .calculator import (
    apply_airfoil_corrections,
    tip_loss_factor,
    correction_from_config,
    available_corrections,
)

__all__ = [
    'AVAILABLE_CORRECTIONS',
    'get_correction',
    'available_corrections',
    'correction_from_config',
    'apply_airfoil_corrections',
    'tip_loss_factor',

    # Mach
    'MachCorrection',
    'NoMachCorrection',
    'PrandtlGlauert',
    'KarmanTsien',

    # Reynolds
    'ReCorrection',
    'NoReCorrection',
    'SkinFriction',

    # Rotation
    'RotationCorrection',
    'NoRotationCorrection',
    'DuSeligEggers',

    # Hub/tip loss
    'TipCorrection',
    'NoTipCorrection',
    'PrandtlTipOnly',
    'Prandtl',
]
