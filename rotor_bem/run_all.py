#!/usr/bin/env python3
"""
Batch run for all rotors defined in data/example_rotors.yml

This script:
  1. Loads all rotors from the YAML file
  2. Solves every blade section (and azimuth for wind turbines)
  3. Prints a tabulated summary (thrust, torque, coefficients)
  4. Optionally saves results to CSV

Usage:
    python run_all.py
"""

import os
import sys
import math
import warnings
import yaml
import pandas as pd

# ---------------------------------------------------------------------------- #
# Ensure project root in path
# ---------------------------------------------------------------------------- #
ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, ROOT)

from rotor_bem.core.geometry import Rotor, Section
from rotor_bem.core.airfoils import airfoil_from_config
from rotor_bem.core.thermodynamics import Fluid
from rotor_bem.components.solver import solve, SolveFailureWarning
from rotor_bem.analysis.inflow import simple_op, windturbine_op
from rotor_bem.analysis.performance import thrust_torque, thrust_torque_azimuthal, nondim


# ---------------------------------------------------------------------------- #
# Helpers
# ---------------------------------------------------------------------------- #
def _to_float(val):
    """Convert YAML numeric string (like '1.01e5') safely to float."""
    if isinstance(val, (int, float)):
        return float(val)
    return float(str(val))


def build_sections(blade_data, af):
    radii = [_to_float(x) for x in blade_data["r"]]
    chords = [_to_float(x) for x in blade_data["chord"]]
    twists = [math.radians(_to_float(x)) for x in blade_data["twist_deg"]]

    if not (len(radii) == len(chords) == len(twists)):
        raise ValueError("blade r, chord and twist_deg must have the same length")

    return [Section(r, c, t, af) for r, c, t in zip(radii, chords, twists)]


def run_case(case):
    """Solve one YAML case, return (rotor, T, Q, coefficients, n_failed)"""
    cond = case.get("conditions", {})

    rotor = Rotor.from_dict(case["rotor"])
    af = airfoil_from_config(case.get("airfoil", {"type": "linear"}))
    sections = build_sections(case["blade"], af)

    fluid = Fluid(cond.get("fluid", "Air"))
    state = fluid.thermo_prop("PT", _to_float(cond.get("P", 101325.0)),
                              _to_float(cond.get("T", 288.15)))
    rho, mu, asound = state.D, state.V, state.A

    Omega = _to_float(cond["rpm"]) * 2 * math.pi / 60
    pitch = math.radians(_to_float(cond.get("pitch_deg", 0.0)))

    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always", SolveFailureWarning)

        if cond.get("inflow", "simple") == "windturbine":
            Vref = _to_float(cond["Vhub"])
            naz = int(cond.get("n_azimuth", 4))
            azimuths = [2 * math.pi * j / naz for j in range(naz)]

            outputs_grid = []
            for s in sections:
                row = []
                for azimuth in azimuths:
                    op = windturbine_op(
                        Vref, Omega, pitch, s.r, rotor.precone,
                        math.radians(_to_float(cond.get("yaw_deg", 0.0))),
                        math.radians(_to_float(cond.get("tilt_deg", 0.0))),
                        azimuth,
                        _to_float(cond["hubHt"]),
                        _to_float(cond.get("shearExp", 0.0)),
                        rho, mu, asound,
                    )
                    row.append(solve(rotor, s, op))
                outputs_grid.append(row)

            T, Q = thrust_torque_azimuthal(rotor, sections, outputs_grid)

        else:
            Vref = _to_float(cond["Vinf"])
            ops = [simple_op(Vref, Omega, s.r, rho, pitch, mu, asound, rotor.precone)
                   for s in sections]
            outputs = [solve(rotor, s, op) for s, op in zip(sections, ops)]
            T, Q = thrust_torque(rotor, sections, outputs)

    n_failed = sum(1 for w in caught if issubclass(w.category, SolveFailureWarning))
    coefficients = nondim(T, Q, Vref, Omega, rho, rotor, cond.get("rotor_type", "propeller"))

    return rotor, T, Q, coefficients, n_failed


# ---------------------------------------------------------------------------- #
# Main
# ---------------------------------------------------------------------------- #
def main(data_file=None):
    if data_file is None:
        data_file = os.path.join(ROOT, "rotor_bem", "data", "example_rotors.yml")

    if not os.path.exists(data_file):
        raise FileNotFoundError(f"Data file not found: {data_file}")

    with open(data_file, "r") as f:
        cases = yaml.safe_load(f)

    print("\n" + "=" * 90)
    print(f" RUNNING {len(cases)} ROTORS FROM {data_file}")
    print("=" * 90)

    labels = {
        "windturbine": ("CP", "CT", "CQ"),
        "propeller": ("Eff", "CT", "CQ"),
        "helicopter": ("FM", "CT", "CP"),
    }

    results = []
    for case in cases:
        name = case.get("name", "Unnamed")
        rotor_type = case.get("conditions", {}).get("rotor_type", "propeller")

        try:
            print(f"\n--- Running rotor: {name} ---")
            rotor, T, Q, coefficients, n_failed = run_case(case)
        except (KeyError, ValueError) as e:
            print(f"✗ {name}: Error → {e}")
            continue

        res = {"Name": name, "Type": rotor_type, "T(N)": T, "Q(Nm)": Q}
        res.update(dict(zip(labels[rotor_type], coefficients)))
        res["Failed sections"] = n_failed
        results.append(res)
        print(f"✓ {name}: T={T:.3f} N, Q={Q:.3f} N·m")

    print("\n" + "=" * 90)
    print(" SUMMARY OF ALL ROTORS")
    print("=" * 90)

    if results:
        df = pd.DataFrame(results)
        print(df.to_string(index=False, justify="center", float_format=lambda x: f"{x:.4f}"))

        # Save to CSV
        out_csv = os.path.join(os.path.dirname(data_file), "results_summary.csv")
        df.to_csv(out_csv, index=False)
        print(f"\n✓ Results saved to: {out_csv}")
    else:
        print("No successful runs found.")

    print("=" * 90)
    print("✓ BATCH EVALUATION COMPLETE")
    print("=" * 90)

    return results


if __name__ == "__main__":
    main(sys.argv[1] if len(sys.argv) > 1 else None)
