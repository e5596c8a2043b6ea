# File: rotor_bem/analysis/performance.py
"""
Rotor performance from section outputs

- thrust_torque:           trapezoidal integration of Np, Tp along the blade
- thrust_torque_azimuthal: same, averaged over azimuthal positions
- nondim:                  wind turbine / propeller / helicopter coefficients
- outputs_to_arrays / outputs_to_frame: columnar view of a list of Outputs

Loads are taken as zero at the hub and tip, the same convention solve()
uses for stations located there.
"""

import math
from dataclasses import fields
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np
import pandas as pd

from ..core.geometry import Rotor, Section
from ..core.correlations import trapz
from ..components.residual import Outputs


OUTPUT_FIELDS = tuple(f.name for f in fields(Outputs))


# ============================================================================
# COLUMNAR ACCESS
# ============================================================================

def outputs_to_arrays(outputs: Sequence[Outputs]) -> Dict[str, np.ndarray]:
    """
    Columnar view of a sequence of Outputs

    Example:
        >>> cols = outputs_to_arrays(outputs)
        >>> cols['Np'].max()
    """
    return {
        name: np.array([getattr(o, name) for o in outputs], dtype=float)
        for name in OUTPUT_FIELDS
    }


def outputs_to_frame(outputs: Sequence[Outputs],
                     sections: Optional[Sequence[Section]] = None) -> pd.DataFrame:
    """
    Outputs as a DataFrame, one row per section

    If sections are given, a leading 'r' column holds the radii.
    """
    df = pd.DataFrame(outputs_to_arrays(outputs), columns=list(OUTPUT_FIELDS))
    if sections is not None:
        if len(sections) != len(outputs):
            raise ValueError(
                f"Got {len(sections)} sections for {len(outputs)} outputs"
            )
        df.insert(0, 'r', [s.r for s in sections])
    return df


# ============================================================================
# INTEGRATION
# ============================================================================

def thrust_torque(rotor: Rotor, sections: Sequence[Section],
                  outputs: Sequence[Outputs]) -> Tuple[float, float]:
    """
    Integrate thrust and torque across the blade

    Args:
        rotor: Rotor object
        sections: Sections ordered by increasing radius
        outputs: Outputs for each section

    Returns:
        tuple: (T, Q) thrust (N) and torque (N-m) along the x-direction
    """
    if len(sections) != len(outputs):
        raise ValueError(f"Got {len(sections)} sections for {len(outputs)} outputs")

    # add hub/tip for complete integration. loads go to zero at hub/tip.
    rfull = np.concatenate(([rotor.Rhub], [s.r for s in sections], [rotor.Rtip]))
    Npfull = np.concatenate(([0.0], [o.Np for o in outputs], [0.0]))
    Tpfull = np.concatenate(([0.0], [o.Tp for o in outputs], [0.0]))

    # integrate thrust and torque (trapezoidal)
    thrust = Npfull * math.cos(rotor.precone)
    torque = Tpfull * rfull * math.cos(rotor.precone)

    T = rotor.B * trapz(rfull, thrust)
    Q = rotor.B * trapz(rfull, torque)

    return T, Q


def thrust_torque_azimuthal(rotor: Rotor, sections: Sequence[Section],
                            outputs_grid: Sequence[Sequence[Outputs]]) -> Tuple[float, float]:
    """
    Azimuthally averaged thrust and torque

    Args:
        rotor: Rotor object
        sections: Sections ordered by increasing radius
        outputs_grid: outputs_grid[i][j] is the Outputs of sections[i] at azimuth j

    Returns:
        tuple: (T, Q) averaged over the azimuthal positions
    """
    naz = len(outputs_grid[0]) if len(outputs_grid) else 0
    if naz == 0:
        raise ValueError("outputs_grid needs at least one azimuthal position")

    T = 0.0
    Q = 0.0
    for j in range(naz):
        Tsub, Qsub = thrust_torque(rotor, sections, [row[j] for row in outputs_grid])
        T += Tsub / naz
        Q += Qsub / naz

    return T, Q


# ============================================================================
# NONDIMENSIONALIZATION
# ============================================================================

def nondim(T: float, Q: float, Vhub: float, Omega: float, rho: float,
           rotor: Rotor, rotor_type: str) -> Tuple[float, float, float]:
    """
    Nondimensionalize thrust and torque

    Args:
        T: Thrust (N)
        Q: Torque (N-m)
        Vhub: Freestream/hub speed (m/s)
        Omega: Rotation speed (rad/s)
        rho: Fluid density (kg/m³)
        rotor: Rotor object
        rotor_type: Normalization type
            'windturbine' -> (CP, CT, CQ)
            'propeller'   -> (eff, CT, CQ)
            'helicopter'  -> (FM, CT, CP), CQ = CP, FM = 0 when T < 0

    Returns:
        tuple of three coefficients (see rotor_type)
    """
    P = Q * Omega
    Rp = rotor.Rtip * math.cos(rotor.precone)

    if rotor_type == 'windturbine':

        q = 0.5 * rho * Vhub**2
        A = math.pi * Rp**2

        CP = P / (q * A * Vhub)
        CT = T / (q * A)
        CQ = Q / (q * Rp * A)

        return CP, CT, CQ

    elif rotor_type == 'propeller':

        n = Omega / (2 * math.pi)
        Dp = 2 * Rp

        if T < 0:
            eff = 0.0  # creating drag not thrust
        else:
            eff = T * Vhub / P
        CT = T / (rho * n**2 * Dp**4)
        CQ = Q / (rho * n**2 * Dp**5)

        return eff, CT, CQ

    elif rotor_type == 'helicopter':

        A = math.pi * Rp**2

        CT = T / (rho * A * (Omega * Rp)**2)
        CP = P / (rho * A * (Omega * Rp)**3)  # CQ = CP
        if CT < 0:
            FM = 0.0  # rotor pushing against the thrust direction
        else:
            FM = CT**1.5 / (math.sqrt(2) * CP)

        return FM, CT, CP

    else:
        raise ValueError(
            f"Unknown rotor type: {rotor_type}. Use 'windturbine', 'propeller' or 'helicopter'"
        )


def available_rotor_types() -> List[str]:
    """Normalization types accepted by nondim"""
    return ['windturbine', 'propeller', 'helicopter']
