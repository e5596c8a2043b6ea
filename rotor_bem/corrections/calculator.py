# File: rotor_bem/corrections/calculator.py

"""
Correction calculator

Applies the rotor's airfoil corrections in the fixed order
Mach -> Reynolds -> Rotation and evaluates the hub/tip loss factor.
Also turns configuration entries (names or mappings) into correction
instances.
"""

from typing import Any, Dict, Optional, Union

from .models import (
    AVAILABLE_CORRECTIONS,
    MachCorrection,
    ReCorrection,
    RotationCorrection,
    TipCorrection,
    get_correction,
)


_BASE_CLASSES = {
    'mach': MachCorrection,
    'reynolds': ReCorrection,
    'rotation': RotationCorrection,
    'tip': TipCorrection,
}


def apply_airfoil_corrections(rotor, cl, cd, Re, Mach, cr, rR, tsr, alpha, phi):
    """
    Apply Mach, Reynolds and rotation corrections to airfoil coefficients

    Args:
        rotor: Rotor carrying the correction strategies
        cl, cd: Raw airfoil coefficients
        Re: Local Reynolds number
        Mach: Local Mach number
        cr: Local chord / radius
        rR: Local radius / tip radius
        tsr: Local tip-speed ratio (Vy/Vx * Rtip/r)
        alpha: Angle of attack (rad)
        phi: Inflow angle (rad)

    Returns:
        (cl, cd) after all corrections
    """
    cl, cd = rotor.mach_correction.apply(cl, cd, Mach)
    cl, cd = rotor.re_correction.apply(cl, cd, Re)
    cl, cd = rotor.rotation_correction.apply(cl, cd, cr, rR, tsr, alpha, phi)
    return cl, cd


def tip_loss_factor(rotor, r, phi):
    """Hub/tip loss factor F for the rotor's tip correction"""
    return rotor.tip_correction.factor(r, rotor.Rhub, rotor.Rtip, phi, rotor.B)


def correction_from_config(
    kind: str,
    entry: Union[None, str, Dict[str, Any], Any],
):
    """
    Build a correction from a configuration entry

    Args:
        kind: 'mach', 'reynolds', 'rotation' or 'tip'
        entry: One of
            - None: the family's 'none' variant
            - str: variant name, e.g. 'prandtl_glauert'
            - dict: {'name': ..., **params}
            - an existing correction instance (returned unchanged)

    Returns:
        Correction instance
    """
    if kind not in _BASE_CLASSES:
        available = ', '.join(_BASE_CLASSES.keys())
        raise ValueError(f"Unknown correction kind '{kind}'. Choose from: {available}")

    if entry is None:
        return get_correction(kind, 'none')

    if isinstance(entry, _BASE_CLASSES[kind]):
        return entry

    if isinstance(entry, str):
        return get_correction(kind, entry)

    if isinstance(entry, dict):
        params = dict(entry)
        try:
            name = params.pop('name')
        except KeyError:
            raise ValueError(f"Correction entry for '{kind}' needs a 'name' key: {entry}")
        return get_correction(kind, name, **params)

    raise ValueError(f"Cannot build '{kind}' correction from {entry!r}")


def available_corrections(kind: Optional[str] = None):
    """
    List correction variants

    Args:
        kind: Family to list, or None for all families

    Returns:
        list of names for one family, dict of lists for all
    """
    if kind is None:
        return {k: list(v.keys()) for k, v in AVAILABLE_CORRECTIONS.items()}

    if kind not in AVAILABLE_CORRECTIONS:
        available = ', '.join(AVAILABLE_CORRECTIONS.keys())
        raise ValueError(f"Unknown correction kind '{kind}'. Choose from: {available}")

    return list(AVAILABLE_CORRECTIONS[kind].keys())
