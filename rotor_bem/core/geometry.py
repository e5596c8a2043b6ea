# File: rotor_bem/core/geometry.py
"""
Geometry and operating-point definitions for a blade-element momentum solve

Rotor:          scalar rotor parameters plus the correction strategies
Section:        one spanwise station (radius, chord, twist, airfoil polar)
OperatingPoint: local inflow seen by one section

All three are immutable value inputs; they can be shared freely between
section solves.

Coordinate convention:
    x = axial direction (Vx)
    y = tangential direction in the rotor plane (Vy)
"""

import math
from dataclasses import dataclass, field, fields
from typing import Any, Callable, Dict, Tuple, TYPE_CHECKING

from ..corrections.models import (
    MachCorrection,
    ReCorrection,
    RotationCorrection,
    TipCorrection,
    NoMachCorrection,
    NoReCorrection,
    NoRotationCorrection,
    Prandtl,
)

if TYPE_CHECKING:
    from .thermodynamics import FluidState


def cosd(degrees: float) -> float:
    """Cosine of angle in degrees"""
    return math.cos(math.radians(degrees))


def sind(degrees: float) -> float:
    """Sine of angle in degrees"""
    return math.sin(math.radians(degrees))


def tand(degrees: float) -> float:
    """Tangent of angle in degrees"""
    return math.tan(math.radians(degrees))


# Airfoil polar: (alpha [rad], Re, Mach) -> (cl, cd)
Polar = Callable[[float, float, float], Tuple[float, float]]


@dataclass(frozen=True)
class Rotor:
    """
    Scalar parameters defining the rotor

    Attributes:
        Rhub: Hub radius along the blade (m)
        Rtip: Tip radius along the blade (m)
        B: Number of blades
        precone: Precone angle (rad)
        flipcamber: Flip airfoil camber (turbine convention)
        negateoutputs: Negate loads/induction in the outputs (turbine convention)
        mach_correction: Compressibility correction applied to cl
        re_correction: Reynolds number correction applied to cd
        rotation_correction: Rotational (stall delay) correction
        tip_correction: Hub/tip loss model

    Example:
        >>> rotor = Rotor(Rhub=0.1, Rtip=1.0, B=3, tip_correction=PrandtlTipOnly())
    """
    Rhub: float
    Rtip: float
    B: int
    precone: float = 0.0
    flipcamber: bool = False
    negateoutputs: bool = False

    mach_correction: MachCorrection = field(default_factory=NoMachCorrection)
    re_correction: ReCorrection = field(default_factory=NoReCorrection)
    rotation_correction: RotationCorrection = field(default_factory=NoRotationCorrection)
    tip_correction: TipCorrection = field(default_factory=Prandtl)

    def __post_init__(self) -> None:
        if isinstance(self.B, bool) or not isinstance(self.B, int) or self.B < 1:
            raise ValueError(f"Blade count must be a positive integer, got {self.B!r}")
        if self.Rhub < 0:
            raise ValueError(f"Hub radius must be non-negative, got {self.Rhub}")
        if self.Rtip <= self.Rhub:
            raise ValueError(
                f"Tip radius ({self.Rtip}) must be larger than hub radius ({self.Rhub})"
            )

    @property
    def diameter(self) -> float:
        """Rotor diameter projected on the rotor plane (m)"""
        return 2.0 * self.Rtip * math.cos(self.precone)

    @property
    def disk_area(self) -> float:
        """Swept area projected on the rotor plane (m²)"""
        Rp = self.Rtip * math.cos(self.precone)
        return math.pi * Rp**2

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Rotor":
        """
        Create a Rotor from a configuration mapping

        Correction entries may be a name (e.g. "prandtl_glauert"), a mapping
        with a "name" key plus parameters, or a correction instance.

        Example:
            >>> Rotor.from_dict({
            ...     "Rhub": 0.1, "Rtip": 1.0, "B": 3,
            ...     "re_correction": {"name": "skin_friction", "Re0": 1e6, "p": 0.2},
            ... })
        """
        from ..corrections.calculator import correction_from_config

        safe_names = [f.name for f in fields(cls)]
        d = {k: v for k, v in data.items() if k in safe_names}

        for key, kind in (
            ("mach_correction", "mach"),
            ("re_correction", "reynolds"),
            ("rotation_correction", "rotation"),
            ("tip_correction", "tip"),
        ):
            if key in d:
                d[key] = correction_from_config(kind, d[key])

        if "B" in d:
            d["B"] = int(d["B"])

        return cls(**d)


@dataclass(frozen=True)
class Section:
    """
    Sectional properties for one station along the rotor

    Attributes:
        r: Radial location along blade (Rhub < r < Rtip) (m)
        chord: Local chord length (m)
        theta: Local twist angle (rad)
        af: Airfoil polar, cl, cd = af(alpha, Re, Mach)
    """
    r: float
    chord: float
    theta: float
    af: Polar = field(repr=False, compare=False)


@dataclass(frozen=True)
class OperatingPoint:
    """
    Local inflow at one section

    Vx and Vy may have any sign (including zero) so hover, reversed flow
    and windmilling states are all representable.

    Attributes:
        Vx: Inflow velocity in x (axial) direction (m/s)
        Vy: Inflow velocity in y (tangential) direction (m/s)
        rho: Fluid density (kg/m³)
        pitch: Pitch angle (rad)
        mu: Dynamic viscosity (Pa-s), only used for Reynolds number
        asound: Speed of sound (m/s), only used for Mach number
    """
    Vx: float
    Vy: float
    rho: float
    pitch: float = 0.0
    mu: float = 1.0
    asound: float = 1.0

    @property
    def speed(self) -> float:
        """Inflow speed without induction (m/s)"""
        return math.sqrt(self.Vx**2 + self.Vy**2)

    @classmethod
    def from_fluid_state(cls, Vx: float, Vy: float, state: "FluidState",
                         pitch: float = 0.0) -> "OperatingPoint":
        """
        Create an operating point taking rho, mu and asound from a FluidState

        Example:
            >>> air = Fluid("Air").thermo_prop("PT", 101325, 288.15)
            >>> op = OperatingPoint.from_fluid_state(10.0, 50.0, air)
        """
        return cls(Vx, Vy, rho=state.D, pitch=pitch, mu=state.V, asound=state.A)


# ============================================================================
# EXAMPLE CONFIGURATIONS
# ============================================================================

def create_example_rotor() -> Rotor:
    """Create a small two-bladed propeller (10 x 4.5 in class)"""
    return Rotor(
        Rhub=0.0254 * 0.5,
        Rtip=0.0254 * 5.0,
        B=2,
    )


def create_example_sections(af: Polar = None, n: int = 12) -> list:
    """
    Create sections for the example propeller

    Chord tapers linearly toward the tip, twist follows a constant
    geometric pitch of about 4.5 in.
    """
    from .airfoils import linear_polar

    if af is None:
        af = linear_polar(cl_alpha=2 * math.pi, cd0=0.01)

    rotor = create_example_rotor()
    pitch_length = 0.0254 * 4.5
    dr = (rotor.Rtip - rotor.Rhub) / (n + 1)

    sections = []
    for i in range(1, n + 1):
        r = rotor.Rhub + i * dr
        chord = 0.03 - 0.015 * (r - rotor.Rhub) / (rotor.Rtip - rotor.Rhub)
        theta = math.atan(pitch_length / (2 * math.pi * r))
        sections.append(Section(r, chord, theta, af))

    return sections


def create_example_operating_point(r: float, Vinf: float = 10.0,
                                   rpm: float = 5400.0) -> OperatingPoint:
    """Create sea-level operating point at radius r for the example propeller"""
    omega = rpm * 2 * math.pi / 60
    return OperatingPoint(Vx=Vinf, Vy=omega * r, rho=1.225, mu=1.81e-5, asound=340.3)
