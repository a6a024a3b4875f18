"""
Voltage drop across the conductors of a circuit and selection of the
cross-sectional area needed to keep it within the allowable limit.

The voltage drop is calculated with the approximate formula of the RTIEBT:

    ΔU = b * (ρ1 * L / S * cos φ + λ * L * sin φ) * Ib

with b = 1 for three-phase circuits (drop measured between a line conductor
and neutral) and b = 2 for single-phase circuits (outgoing and return
conductor).
"""
import math
from collections.abc import Sequence

import numpy as np
import numpy.typing as npt

from ...config import SizingConfig, DEFAULT_CONFIG
from ...general import PhaseSystem, UsageCategory
from ...materials import ConductorMaterial
from ...tables import STANDARD_SECTIONS
from .conductor import SectionSearch

__all__ = [
    "voltage_drop",
    "voltage_drop_pct",
    "max_voltage_drop",
    "search_voltage_drop_section",
]


def voltage_drop(
    I_b: float,
    L: float,
    S: float | npt.ArrayLike,
    cos_phi: float,
    conductor: ConductorMaterial,
    phase_system: PhaseSystem,
    reactance: float = 0.08e-3
) -> float | np.ndarray:
    """
    Returns the voltage drop in volts.

    Parameters
    ----------
    I_b: float
        Design current in amperes.
    L: float
        Length of the circuit in meters.
    S: float | array-like
        Cross-sectional area(s) of the conductors in mm². If an array is
        given, an array with the voltage drop for each area is returned.
    cos_phi: float
        Power factor of the load.
    conductor: ConductorMaterial
        Conductor material; sets the resistivity ρ1 in Ohm.mm²/m.
    phase_system: PhaseSystem
        Sets the coefficient b.
    reactance: float, default 0.08e-3
        Reactance per unit length λ of the conductors in Ohm/m.

    Returns
    -------
    float | np.ndarray
    """
    b = phase_system.volt_ref.value
    sin_phi = math.sqrt(1.0 - cos_phi ** 2)
    S = np.asarray(S, dtype=float)
    U_drop = b * (conductor.resistivity * L / S * cos_phi + reactance * L * sin_phi) * I_b
    if U_drop.ndim == 0:
        return float(U_drop)
    return U_drop


def voltage_drop_pct(
    U_drop: float | np.ndarray,
    U_line: float,
    phase_system: PhaseSystem
) -> float | np.ndarray:
    """
    Returns the voltage drop in percent of the line-to-neutral voltage.
    """
    return 100 * U_drop / phase_system.reference_voltage(U_line)


def max_voltage_drop(usage: UsageCategory, config: SizingConfig = DEFAULT_CONFIG) -> float:
    """
    Returns the maximum allowable voltage drop in percent for the given use of
    the circuit.
    """
    if usage == UsageCategory.LIGHTING:
        return config.max_voltage_drop_lighting
    return config.max_voltage_drop_other


def search_voltage_drop_section(
    I_b: float,
    L: float,
    cos_phi: float,
    U_line: float,
    conductor: ConductorMaterial,
    phase_system: PhaseSystem,
    start_section: float,
    max_drop_pct: float,
    reactance: float = 0.08e-3,
    sections: Sequence[float] = STANDARD_SECTIONS
) -> SectionSearch:
    """
    Returns the smallest cross-sectional area in `sections`, not smaller than
    `start_section`, for which the voltage drop does not exceed `max_drop_pct`.

    Returns
    -------
    SectionSearch
        If no section qualifies, the largest section with `found` False.
    """
    candidates = [s for s in sections if s >= start_section]
    if not candidates:
        return SectionSearch(start_section, False)
    U_drop = voltage_drop(I_b, L, candidates, cos_phi, conductor, phase_system, reactance)
    U_drop_pct = voltage_drop_pct(U_drop, U_line, phase_system)
    ok = np.flatnonzero(U_drop_pct <= max_drop_pct)
    if ok.size == 0:
        return SectionSearch(candidates[-1], False)
    return SectionSearch(candidates[int(ok[0])], True)
