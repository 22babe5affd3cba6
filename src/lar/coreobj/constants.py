# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Scipp contributors (https://github.com/scipp)
"""
Physical constants and unit conversion factors.

The standard units are GeV for energy, ns for time and cm for space.
"""

import math

import scipp as sc

# Recombination factor coefficients (NIM), from Nucl.Instrum.Meth.A523:275-286,2004.
# R = A / (1 + (dE/dx) * k / E), with dE/dx in MeV/cm and E in kV/cm;
# k needs to be scaled with the electric field.
RECOMB_A = 0.800
RECOMB_K = 0.0486  # g/(MeV cm^2) kV/cm

# Recombination factor coefficients, modified box model (ArgoNeuT, JINST).
# MOD_BOX_B needs to be scaled with the electric field.
MOD_BOX_A = 0.930
MOD_BOX_B = 0.212  # g/(MeV cm^2) kV/cm

# Energy deposited in GeV to number of ionization electrons: 23.6 eV per ion pair.
GEV_TO_ELECTRONS = 4.237e7

# Speed of light in vacuum, cm/ns.
C_LIGHT = 29.9792458
SPEED_OF_LIGHT = sc.scalar(C_LIGHT, unit='cm/ns')

METER_TO_CENTIMETER = 1.0e2
CENTIMETER_TO_METER = 1.0 / METER_TO_CENTIMETER
METER_TO_KILOMETER = 1.0e-3
KILOMETER_TO_METER = 1.0 / METER_TO_KILOMETER
EV_TO_MEV = 1.0e-6
MEV_TO_EV = 1.0 / EV_TO_MEV

# Obviously bogus values.
BOGUS_D = -999.0
BOGUS_I = -999
BOGUS_F = -999.0


def pi() -> float:
    return math.pi


def degrees_to_radians(angle: float) -> float:
    """Convert an angle from degrees into radians."""
    return angle / 180 * math.pi


def radians_to_degrees(angle: float) -> float:
    """Convert an angle from radians into degrees."""
    return angle / math.pi * 180
