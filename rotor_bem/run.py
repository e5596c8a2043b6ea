#!/usr/bin/env python3
"""
Run script for a complete propeller blade

Usage:
    $ python run.py

This script:
  1. Builds rotor, sections and sea-level air properties (CoolProp)
  2. Solves every section at one advance ratio
  3. Integrates thrust/torque and prints a performance summary
  4. Plots the spanwise distributions
"""

import sys
import os
import math
import matplotlib.pyplot as plt

# --------------------------------------------------------------------------- #
# Ensure project root is in path
# --------------------------------------------------------------------------- #
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


from rotor_bem.core.geometry import Rotor, Section, OperatingPoint
from rotor_bem.core.airfoils import linear_polar
from rotor_bem.core.thermodynamics import standard_air
from rotor_bem.corrections.models import PrandtlTipOnly, PrandtlGlauert
from rotor_bem.components.solver import solve
from rotor_bem.analysis.performance import thrust_torque, nondim, outputs_to_frame
from rotor_bem.visualization.plotting import plot_spanwise_loads


# --------------------------------------------------------------------------- #
# Define rotor (10 in, two-bladed propeller)
# --------------------------------------------------------------------------- #
rotor = Rotor(
    Rhub=0.0254 * 0.5,
    Rtip=0.0254 * 5.0,
    B=2,
    mach_correction=PrandtlGlauert(),
    tip_correction=PrandtlTipOnly(),
)

# Thin airfoil lift, constant profile drag
af = linear_polar(cl_alpha=2 * math.pi, alpha0=math.radians(-2.0), cd0=0.012)

# Linear chord taper, constant geometric pitch of 4.5 in
n_sections = 18
pitch_length = 0.0254 * 4.5
sections = []
for i in range(1, n_sections + 1):
    r = rotor.Rhub + i * (rotor.Rtip - rotor.Rhub) / (n_sections + 1)
    chord = 0.028 - 0.014 * (r - rotor.Rhub) / (rotor.Rtip - rotor.Rhub)
    theta = math.atan(pitch_length / (2 * math.pi * r))
    sections.append(Section(r, chord, theta, af))

# --------------------------------------------------------------------------- #
# Define operating conditions
# --------------------------------------------------------------------------- #
air = standard_air()
rpm = 5400.0
Omega = rpm * 2 * math.pi / 60
Vinf = 8.0

ops = [OperatingPoint.from_fluid_state(Vinf, Omega * s.r, air) for s in sections]

# ---------------------------------------------------------------------------
# Print header
# ---------------------------------------------------------------------------
print("\n" + "=" * 80)
print("  PROPELLER BLADE ELEMENT MOMENTUM ANALYSIS")
print("=" * 80 + "\n")

print("CONFIGURATION:")
print(f"  Blades:             {rotor.B}")
print(f"  Diameter:           {rotor.diameter * 1000:.1f} mm")
print(f"  Operating point:    V = {Vinf:.2f} m/s, N = {rpm:.0f} rpm")
print(f"  Air:                rho = {air.D:.4f} kg/m³, a = {air.A:.1f} m/s")
print()

# --------------------------------------------------------------------------- #
# Solve every section
# --------------------------------------------------------------------------- #
outputs = [solve(rotor, s, op) for s, op in zip(sections, ops)]

T, Q = thrust_torque(rotor, sections, outputs)
eff, CT, CQ = nondim(T, Q, Vinf, Omega, air.D, rotor, "propeller")
J = Vinf / (Omega / (2 * math.pi) * rotor.diameter)

results = {
    "J": J,
    "Thrust_N": T,
    "Torque_Nm": Q,
    "Power_W": Q * Omega,
    "CT": CT,
    "CQ": CQ,
    "Eff": eff,
}

print("Results dictionary (for programmatic use):")
for k, v in results.items():
    print(f"  {k:<10} = {v:.5f}")

print("\n" + "=" * 80)
print("  SPANWISE DISTRIBUTION")
print("=" * 80 + "\n")

df = outputs_to_frame(outputs, sections)
print(df[['r', 'Np', 'Tp', 'a', 'ap', 'phi', 'alpha', 'F']].to_string(
    index=False, float_format=lambda x: f"{x:.4f}"))

print("\n" + "=" * 80 + "\n")

fig, axes = plot_spanwise_loads(rotor, sections, outputs, rotor_name="10 x 4.5 Propeller")
plt.show()
