"""
Selection of the cross-sectional area of the phase conductors based on their
current-carrying capacity.
"""
from dataclasses import dataclass
from collections.abc import Sequence

from ...general import PhaseSystem
from ...materials import ConductorMaterial, Insulation
from ...tables import STANDARD_SECTIONS, tbl_ampacity

__all__ = [
    "LOADED_CONDUCTOR_FACTORS",
    "SectionSearch",
    "get_ampacity",
    "search_ampacity_section",
]


# correction for the number of loaded conductors; the ampacity tables are
# given for three loaded conductors
LOADED_CONDUCTOR_FACTORS: dict[int, float] = {2: 1.15, 3: 1.0}


@dataclass(frozen=True)
class SectionSearch:
    """
    Outcome of a search over the standard cross-sectional areas.

    Attributes
    ----------
    section: float
        The selected cross-sectional area in mm². If no section qualified,
        the last candidate of the search.
    found: bool
        False if none of the candidate sections qualified.
    """
    section: float
    found: bool


def get_ampacity(
    table_id: str,
    S: float,
    conductor: ConductorMaterial,
    insulation: Insulation,
    phase_system: PhaseSystem
) -> float:
    """
    Returns the current-carrying capacity in amperes of conductors with
    cross-sectional area `S` (mm²) at reference installation conditions,
    i.e. the tabulated value adjusted for conductor material, type of
    insulation and number of loaded conductors.

    Raises
    ------
    DataNotFoundError
        If the section is not tabulated in table `table_id`.
    """
    I_z0 = tbl_ampacity.data_value(S, table_id)
    k_n = LOADED_CONDUCTOR_FACTORS[phase_system.num_loaded_conductors]
    return I_z0 * conductor.ampacity_factor * insulation.ampacity_factor * k_n


def search_ampacity_section(
    I_b: float,
    fc: float,
    table_id: str,
    conductor: ConductorMaterial,
    insulation: Insulation,
    phase_system: PhaseSystem,
    sections: Sequence[float] = STANDARD_SECTIONS
) -> SectionSearch:
    """
    Returns the smallest cross-sectional area in `sections` of which the
    corrected current-carrying capacity is at least equal to the design
    current, i.e. `I_z * fc >= I_b`.

    Parameters
    ----------
    I_b:
        Design current in amperes.
    fc:
        Combined correction factor for the installation conditions.
    table_id:
        Id of the ampacity table of the installation method.
    conductor:
        Conductor material properties.
    insulation:
        Insulation material properties.
    phase_system:
        Determines the number of loaded conductors.
    sections:
        Candidate cross-sectional areas in ascending order.

    Returns
    -------
    SectionSearch
        If no section qualifies, the largest section with `found` False.
    """
    for S in sections:
        I_z = get_ampacity(table_id, S, conductor, insulation, phase_system)
        if I_z * fc >= I_b:
            return SectionSearch(S, True)
    return SectionSearch(sections[-1], False)
