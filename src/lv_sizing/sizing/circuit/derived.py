"""
Cross-sectional areas of the neutral conductor and the protective earth (PE)
conductor, derived from the cross-sectional area of the phase conductors.
"""
from ...general import PhaseSystem
from ...tables import next_standard_section

__all__ = [
    "get_neutral_section",
    "get_earth_section",
]


# reduced neutral of three-phase circuits without harmonics, phase -> neutral
_REDUCED_NEUTRAL: dict[float, float] = {25: 16, 35: 16, 50: 25}


def get_neutral_section(
    S_phase: float,
    phase_system: PhaseSystem,
    has_harmonics: bool = False
) -> float:
    """
    Returns the cross-sectional area of the neutral conductor in mm².

    The neutral has the same section as the phase conductors in single-phase
    circuits, in three-phase circuits carrying harmonic currents (which add up
    in the neutral), and in three-phase circuits with phase conductors up to
    16 mm². Otherwise the neutral may be reduced: 25 and 35 mm² to 16 mm²,
    50 mm² to 25 mm², larger sections to half the phase section, rounded up
    to a standard section.
    """
    if phase_system.single_phase or has_harmonics or S_phase <= 16:
        return S_phase
    S_n = _REDUCED_NEUTRAL.get(S_phase, S_phase / 2)
    return next_standard_section(S_n)


def get_earth_section(S_phase: float) -> float:
    """
    Returns the cross-sectional area of the protective earth conductor in mm²,
    of the same material as the phase conductors.
    """
    if S_phase <= 16:
        return S_phase
    if S_phase <= 35:
        return 16
    return next_standard_section(S_phase / 2)
