# File: rotor_bem/components/residual.py

"""
BEM residual for one blade section

The residual is written in terms of the inflow angle phi only, which
makes it a one-dimensional root finding problem that can be bracketed
reliably in every flow quadrant:

    R(phi) = sin(phi)/(1 + a) - Vx/Vy * cos(phi)/(1 - ap)

with the induction factors a, ap following directly from phi through the
local airfoil loads. Momentum theory is used for k >= -2/3 and an
empirical (Buhl) fit in the turbulent-wake region below that. Pure axial
(Vx ~ 0) and pure tangential (Vy ~ 0) inflow are solved directly.

Notation:
    phi   = inflow angle (rad)
    alpha = angle of attack (rad)
    a, ap = axial and tangential induction factors
    u, v  = axial and tangential induced velocities (m/s)
    W     = relative inflow speed (m/s)
    F     = hub/tip loss factor
    G     = effective hub/tip loss factor applied to u, v

Reference:
    Ning, S. A. (2014). A simple solution method for the blade element
    momentum equations with guaranteed convergence. Wind Energy 17(9).
"""

import math
from dataclasses import dataclass, fields

import numpy as np

from ..core.geometry import Rotor, Section, OperatingPoint
from ..corrections.calculator import apply_airfoil_corrections, tip_loss_factor


# Tolerance used by every branch guard
ATOL = 1e-6


def _is_zero(x, atol: float = ATOL) -> bool:
    return abs(x) <= atol


# ============================================================================
# OUTPUTS
# ============================================================================

@dataclass(frozen=True)
class Outputs:
    """
    BEM outputs for one section

    Every field defaults to zero so Outputs() is the zero-load record used
    at the hub/tip, for hover without rotation and for failed solves.

    Attributes:
        Np: Normal force per unit length (N/m)
        Tp: Tangential force per unit length (N/m)
        a: Axial induction factor
        ap: Tangential induction factor
        u: Axial induced velocity (m/s)
        v: Tangential induced velocity (m/s)
        phi: Inflow angle (rad)
        alpha: Angle of attack (rad)
        W: Relative inflow speed (m/s)
        cl: Lift coefficient
        cd: Drag coefficient
        cn: Normal force coefficient
        ct: Tangential force coefficient
        F: Hub/tip loss factor
        G: Effective hub/tip loss factor for induced velocities,
           u = Vx * a * G, v = Vy * ap * G
    """
    Np: float = 0.0
    Tp: float = 0.0
    a: float = 0.0
    ap: float = 0.0
    u: float = 0.0
    v: float = 0.0
    phi: float = 0.0
    alpha: float = 0.0
    W: float = 0.0
    cl: float = 0.0
    cd: float = 0.0
    cn: float = 0.0
    ct: float = 0.0
    F: float = 0.0
    G: float = 0.0

    @property
    def is_zero(self) -> bool:
        """True if every field is exactly zero"""
        return all(getattr(self, f.name) == 0.0 for f in fields(self))

    def negated(self) -> "Outputs":
        """
        Turbine sign convention

        Loads, induction, angle of attack and lift/force coefficients flip
        sign; phi, cd, W, F and G are unchanged.
        """
        return Outputs(
            -self.Np, -self.Tp, -self.a, -self.ap, -self.u, -self.v,
            self.phi, -self.alpha, self.W, -self.cl, self.cd, -self.cn, -self.ct,
            self.F, self.G,
        )

    def as_dict(self) -> dict:
        return {f.name: getattr(self, f.name) for f in fields(self)}


# ============================================================================
# RESIDUAL
# ============================================================================

def residual(phi: float, rotor: Rotor, section: Section, op: OperatingPoint):
    """
    Evaluate the BEM residual at inflow angle phi

    The caller must short-circuit Vx ~ 0 and Vy ~ 0 together (no inflow)
    before calling this function.

    Args:
        phi: Candidate inflow angle (rad)
        rotor: Rotor definition
        section: Section definition
        op: Operating point

    Returns:
        tuple: (R, Outputs). R = 1.0 with zero Outputs flags a singular
               state that cannot be a root.
    """
    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        return _residual(phi, rotor, section, op)


def _residual(phi, rotor, section, op):

    # unpack inputs
    r = section.r
    chord = section.chord
    theta = section.theta
    af = section.af

    Rhub = rotor.Rhub
    Rtip = rotor.Rtip
    B = rotor.B

    Vx = op.Vx
    Vy = op.Vy
    rho = op.rho
    pitch = op.pitch

    # constants
    sigma_p = B * chord / (2.0 * math.pi * r)
    sphi = np.sin(phi)
    cphi = np.cos(phi)

    # angle of attack
    alpha = (theta + pitch) - phi

    # Reynolds/Mach number from the uninduced speed
    W0 = math.sqrt(Vx**2 + Vy**2)
    Re = rho * W0 * chord / op.mu
    Mach = W0 / op.asound

    # airfoil cl/cd
    if rotor.flipcamber:
        cl, cd = af(-alpha, Re, Mach)
        cl = -cl
    else:
        cl, cd = af(alpha, Re, Mach)

    # airfoil corrections: Mach -> Reynolds -> rotation
    tsr = np.divide(np.float64(Vy), Vx) * Rtip / r
    cl, cd = apply_airfoil_corrections(
        rotor, cl, cd, Re, Mach, chord / r, r / Rtip, tsr, alpha, phi
    )

    # resolve into normal and tangential forces
    cn = cl * cphi - cd * sphi
    ct = cl * sphi + cd * cphi

    # hub/tip loss
    F = tip_loss_factor(rotor, r, phi)

    # sec parameters
    k = cn * sigma_p / (4.0 * F * sphi * sphi)
    kp = ct * sigma_p / (4.0 * F * sphi * cphi)

    # --- solve for induced velocities ------
    if _is_zero(Vx):

        # ap = v = 0 here; the tangential load only enters through u
        u = np.sign(phi) * kp * cn / ct * Vy
        v = 0.0
        a = 0.0
        ap = 0.0
        R = np.sign(phi) - k

    elif _is_zero(Vy):

        u = 0.0
        v = k * ct / cn * abs(Vx)
        a = 0.0
        ap = 0.0
        R = np.sign(Vx) + kp

    else:

        if phi < 0:
            k = -k

        if _is_zero(k - 1.0):  # corresponds to Vx = 0, not a root
            return 1.0, Outputs()

        if k >= -2.0 / 3:  # momentum region
            a = k / (1 - k)

        else:  # empirical region
            g1 = F * (2 * k - 1) + 10.0 / 9
            g2 = F * (F - 2 * k - 4.0 / 3)
            g3 = 2 * F * (1 - k) - 25.0 / 9

            if _is_zero(g3):  # avoid singularity
                a = 1.0 / (2.0 * np.sqrt(g2)) - 1
            else:
                a = (g1 + np.sqrt(g2)) / g3

        u = a * Vx

        # -------- tangential induction ----------
        if Vx < 0:
            kp = -kp

        if _is_zero(kp + 1.0):  # corresponds to Vy = 0, not a root
            return 1.0, Outputs()

        ap = kp / (1 + kp)
        v = ap * Vy

        # ------- residual function -------------
        R = sphi / (1 + a) - Vx / Vy * cphi / (1 - ap)

    # ------- loads ---------
    W = np.sqrt((Vx + u)**2 + (Vy - v)**2)
    Np = cn * 0.5 * rho * W**2 * chord
    Tp = ct * 0.5 * rho * W**2 * chord

    # Hub/tip losses are applied to the loads, so the raw induced velocities
    # carry no loss. G is the effective factor that gives the same thrust
    # when applied to the velocities instead:
    #     CT = 4 a (1 + a) F = 4 a G (1 + a G)
    if _is_zero(Vx):
        G = np.sqrt(F)
    elif _is_zero(Vy):
        G = F
    elif _is_zero(a):
        G = F  # limit a -> 0
    else:
        G = (-1.0 + np.sqrt(1.0 + 4 * a * (1.0 + a) * F)) / (2 * a)
    u = u * G
    v = v * G

    outputs = Outputs(Np, Tp, a, ap, u, v, phi, alpha, W, cl, cd, cn, ct, F, G)

    if rotor.negateoutputs:
        outputs = outputs.negated()

    return R, outputs
