# File: rotor_bem/corrections/models.py

"""
Airfoil and loss correction models

Each family is a closed set of immutable variants sharing one method:

    Mach:      apply(cl, cd, Mach)                       -> (cl, cd)
    Reynolds:  apply(cl, cd, Re)                         -> (cl, cd)
    Rotation:  apply(cl, cd, cr, rR, tsr, alpha, phi)    -> (cl, cd)
    Tip/hub:   factor(r, Rhub, Rtip, phi, B)             -> F

Arithmetic uses numpy so degenerate inputs (M >= 1, Re = 0, ...) give
inf/NaN instead of raising.
"""

import math
from dataclasses import dataclass

import numpy as np


# ============================================================================
# BASE CLASSES
# ============================================================================

class MachCorrection:
    """Base class for compressibility corrections"""

    name = "base"

    def apply(self, cl, cd, Mach):
        raise NotImplementedError(f"{type(self).__name__} must implement apply")


class ReCorrection:
    """Base class for Reynolds number corrections"""

    name = "base"

    def apply(self, cl, cd, Re):
        raise NotImplementedError(f"{type(self).__name__} must implement apply")


class RotationCorrection:
    """Base class for rotational augmentation corrections"""

    name = "base"

    def apply(self, cl, cd, cr, rR, tsr, alpha, phi):
        raise NotImplementedError(f"{type(self).__name__} must implement apply")


class TipCorrection:
    """Base class for hub/tip loss models"""

    name = "base"

    def factor(self, r, Rhub, Rtip, phi, B):
        raise NotImplementedError(f"{type(self).__name__} must implement factor")


# ============================================================================
# MACH
# ============================================================================

@dataclass(frozen=True)
class NoMachCorrection(MachCorrection):
    """Leave coefficients unchanged"""

    name = "none"

    def apply(self, cl, cd, Mach):
        return cl, cd


@dataclass(frozen=True)
class PrandtlGlauert(MachCorrection):
    """
    Prandtl-Glauert compressibility correction

    cl = cl / sqrt(1 - M²), drag unaffected
    """

    name = "prandtl_glauert"

    def apply(self, cl, cd, Mach):
        beta = np.sqrt(1 - Mach**2)
        cl = cl / beta
        return cl, cd


@dataclass(frozen=True)
class KarmanTsien(MachCorrection):
    """
    Karman-Tsien compressibility correction

    cl = 1 / (beta/cl + M² / (2(1 + beta))),  beta = sqrt(1 - M²)
    """

    name = "karman_tsien"

    def apply(self, cl, cd, Mach):
        beta = np.sqrt(1 - Mach**2)
        cl = 1.0 / (beta / cl + Mach**2 / (2 * (1 + beta)))
        return cl, cd


# ============================================================================
# REYNOLDS NUMBER
# ============================================================================

@dataclass(frozen=True)
class NoReCorrection(ReCorrection):
    """Leave coefficients unchanged"""

    name = "none"

    def apply(self, cl, cd, Re):
        return cl, cd


@dataclass(frozen=True)
class SkinFriction(ReCorrection):
    """
    Skin friction scaling of drag

    cd = cd * (Re0 / Re)^p

    Attributes:
        Re0: Reference Reynolds number of the polar data
        p: Exponent, ~0.2 fully turbulent (Schlichting), 0.5 fully laminar (Blasius)
    """
    Re0: float
    p: float = 0.2

    name = "skin_friction"

    def apply(self, cl, cd, Re):
        cd = cd * np.power(np.float64(self.Re0) / Re, self.p)
        return cl, cd


# ============================================================================
# ROTATION
# ============================================================================

@dataclass(frozen=True)
class NoRotationCorrection(RotationCorrection):
    """Leave coefficients unchanged"""

    name = "none"

    def apply(self, cl, cd, cr, rR, tsr, alpha, phi):
        return cl, cd


@dataclass(frozen=True)
class DuSeligEggers(RotationCorrection):
    """
    Du-Selig lift augmentation with Eggers drag correction

    Lift is pushed toward the linear lift curve 2π(α - α0) by a factor that
    depends on local solidity (c/r), radial position and tip-speed ratio.
    The lift increment is mapped into a drag increment through the local
    inflow angle.

    Attributes:
        a, b, d: Du-Selig shape parameters
        alpha0: Zero-lift angle of the linear lift estimate (rad)
    """
    a: float = 1.0
    b: float = 1.0
    d: float = 1.0
    alpha0: float = 0.0

    name = "du_selig_eggers"

    def apply(self, cl, cd, cr, rR, tsr, alpha, phi):
        # Du-Selig correction for lift
        if np.isinf(tsr):
            Lambda = np.sign(tsr)
        else:
            Lambda = tsr / np.sqrt(1 + tsr**2)
        expon = self.d / (Lambda * rR)
        crx = np.power(np.float64(cr), expon)
        fcl = 1.0 / (2 * math.pi) * (1.6 * cr / 0.1267 * (self.a - crx) / (self.b + crx) - 1)
        cl_linear = 2 * math.pi * (alpha - self.alpha0)
        deltacl = fcl * (cl_linear - cl)
        cl = cl + deltacl

        # Eggers correction for drag, evaluated with the local inflow angle
        sphi = np.sin(phi)
        cphi = np.cos(phi)
        deltacd = deltacl * (sphi - 0.12 * cphi) / (cphi + 0.12 * sphi)
        cd = cd + deltacd

        return cl, cd


# ============================================================================
# HUB / TIP LOSS
# ============================================================================

def _prandtl(factor):
    return 2.0 / math.pi * np.arccos(np.exp(-factor))


@dataclass(frozen=True)
class NoTipCorrection(TipCorrection):
    """No hub/tip loss, F = 1"""

    name = "none"

    def factor(self, r, Rhub, Rtip, phi, B):
        return 1.0


@dataclass(frozen=True)
class PrandtlTipOnly(TipCorrection):
    """Prandtl tip loss only"""

    name = "prandtl_tip_only"

    def factor(self, r, Rhub, Rtip, phi, B):
        asphi = np.abs(np.sin(phi))
        factortip = B / 2.0 * (Rtip / r - 1) / asphi
        return _prandtl(factortip)


@dataclass(frozen=True)
class Prandtl(TipCorrection):
    """Prandtl tip and hub loss, F = Ftip * Fhub"""

    name = "prandtl"

    def factor(self, r, Rhub, Rtip, phi, B):
        asphi = np.abs(np.sin(phi))
        factortip = B / 2.0 * (Rtip / r - 1) / asphi
        Ftip = _prandtl(factortip)
        factorhub = B / 2.0 * (np.float64(r) / Rhub - 1) / asphi
        Fhub = _prandtl(factorhub)
        return Ftip * Fhub


# ============================================================================
# REGISTRY
# ============================================================================

AVAILABLE_CORRECTIONS = {
    'mach': {
        'none': NoMachCorrection,
        'prandtl_glauert': PrandtlGlauert,
        'karman_tsien': KarmanTsien,
    },
    'reynolds': {
        'none': NoReCorrection,
        'skin_friction': SkinFriction,
    },
    'rotation': {
        'none': NoRotationCorrection,
        'du_selig_eggers': DuSeligEggers,
    },
    'tip': {
        'none': NoTipCorrection,
        'prandtl_tip_only': PrandtlTipOnly,
        'prandtl': Prandtl,
    },
}


def get_correction(kind: str, name: str, **params):
    """
    Get correction instance by family and name

    Args:
        kind: 'mach', 'reynolds', 'rotation' or 'tip'
        name: Variant name within the family (case-insensitive)
        **params: Variant parameters (e.g. Re0, p for skin_friction)

    Returns:
        Correction instance
    """
    kind_key = kind.lower()
    if kind_key not in AVAILABLE_CORRECTIONS:
        available = ', '.join(AVAILABLE_CORRECTIONS.keys())
        raise ValueError(f"Unknown correction kind '{kind}'. Choose from: {available}")

    variants = AVAILABLE_CORRECTIONS[kind_key]
    name_key = name.lower()
    if name_key not in variants:
        available = ', '.join(variants.keys())
        raise ValueError(
            f"Correction '{name}' not available for '{kind_key}'. Choose from: {available}"
        )

    return variants[name_key](**params)
