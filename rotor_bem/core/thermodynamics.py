# File: rotor_bem/core/thermodynamics.py
"""
Fluid properties for operating points

Density, dynamic viscosity and speed of sound from CoolProp, so an
OperatingPoint can be built for any working fluid and ambient state
(air at altitude, water for marine propellers, ...).
"""

import math
from dataclasses import dataclass, field
import CoolProp.CoolProp as CP


class ThermoException(Exception):
    """Exception raised when fluid property calculation fails"""
    pass


@dataclass(frozen=True)
class FluidState:
    """
    Fluid properties at one state

    Only the properties the blade-element solve needs are stored.
    """
    P: float = math.nan      # Pressure (Pa)
    T: float = math.nan      # Temperature (K)
    D: float = math.nan      # Density (kg/m³)
    A: float = math.nan      # Speed of sound (m/s)
    V: float = math.nan      # Dynamic viscosity (Pa-s)
    fluid: 'Fluid' = field(default=None, repr=False)  # Reference to fluid

    @property
    def is_valid(self) -> bool:
        """Check if state has valid density"""
        return not math.isnan(self.D)

    @property
    def kinematic_viscosity(self) -> float:
        """Kinematic viscosity (m²/s)"""
        return self.V / self.D


class Fluid:
    """
    Fluid property calculator using CoolProp
    """

    def __init__(self, fluid_name: str = "Air"):
        """
        Initialize fluid calculator

        Args:
            fluid_name: CoolProp fluid identifier (e.g., "Air", "Water", "Helium")
        """
        self.name = fluid_name

        # Validate fluid availability in CoolProp
        try:
            CP.PropsSI('M', fluid_name)
        except ValueError:
            raise ValueError(f"Fluid '{fluid_name}' not available in CoolProp")

    def thermo_prop(self, mode: str, val1: float, val2: float) -> FluidState:
        """
        Calculate fluid properties

        Args:
            mode: Property pair identifier ("PT" or "PD")
            val1: Pressure (Pa)
            val2: Temperature (K) for "PT", density (kg/m³) for "PD"

        Returns:
            FluidState object

        Example:
            >>> air = Fluid("Air").thermo_prop("PT", 101325, 288.15)
            >>> round(air.D, 3)
            1.225
        """
        if mode not in ("PT", "PD"):
            raise ValueError(f"Unknown mode: {mode}. Use PT or PD")

        key2 = 'T' if mode == "PT" else 'D'
        P = val1

        try:
            props = {
                prop: CP.PropsSI(prop, 'P', P, key2, val2, self.name)
                for prop in ('T', 'D', 'A', 'V')
            }
        except ValueError as e:
            raise ThermoException(f"Property calculation failed for {mode}({val1}, {val2}): {e}")

        return FluidState(
            P=P,
            T=props['T'],
            D=props['D'],
            A=props['A'],
            V=props['V'],
            fluid=self,
        )

    def __repr__(self):
        return f"Fluid('{self.name}')"


def standard_air() -> FluidState:
    """Air at ISA sea level (101325 Pa, 288.15 K)"""
    return Fluid("Air").thermo_prop("PT", 101325.0, 288.15)
