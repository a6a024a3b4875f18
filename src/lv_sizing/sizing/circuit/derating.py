"""
Correction of the current-carrying capacity of conductors for installation
conditions that differ from the reference conditions of the ampacity tables.
"""
import logging
from dataclasses import dataclass

from ...config import LookupPolicy, SizingConfig, DEFAULT_CONFIG
from ...materials import InsulationMaterials
from ...tables import tbl_temperature_correction, tbl_group_correction
from ...utils.lookup_table import LookupTable, DataNotFoundError
from ..conditions import SizingCondition, SizingFlag

__all__ = [
    "CorrectionFactors",
    "temperature_correction",
    "group_correction",
    "harmonics_correction",
    "get_correction_factors",
]


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CorrectionFactors:
    k_T: float  # ambient temperature
    k_G: float  # grouping of circuits
    k_H: float  # harmonic content
    flags: tuple[SizingFlag, ...] = ()

    @property
    def fc(self) -> float:
        """Combined correction factor."""
        return self.k_T * self.k_G * self.k_H

    @property
    def exact(self) -> bool:
        """False if one of the factors is an approximation."""
        return not self.flags


def _lookup_factor(
    table: LookupTable,
    row: object,
    key: float,
    policy: LookupPolicy,
    quantity: str
) -> tuple[float, SizingFlag | None]:
    value = table.get(row, key)
    if value is not None:
        return value, None
    if policy == LookupPolicy.CONSERVATIVE:
        # factors decrease along the column header; beyond the last entry the
        # last tabulated factor still applies
        try:
            key_used = table.colheader_value(row, key, above=True)
        except DataNotFoundError:
            key_used = table.colheader_value(row, key, above=False)
        value = table.data_value(row, key_used)
        return value, SizingFlag(
            SizingCondition.TABLE_LOOKUP_MISS,
            f"{quantity} {key} is not tabulated; the factor {value:.2f} "
            f"of {key_used} was used."
        )
    return 1.0, SizingFlag(
        SizingCondition.TABLE_LOOKUP_MISS,
        f"{quantity} {key} is not tabulated; a factor of 1.00 was assumed."
    )


def temperature_correction(
    insulation: InsulationMaterials,
    T_amb: float,
    policy: LookupPolicy = LookupPolicy.EXACT
) -> tuple[float, SizingFlag | None]:
    """
    Returns the correction factor K1 for the ambient temperature `T_amb` (°C)
    of a conductor with the given type of insulation, together with a flag if
    the temperature is not tabulated (None otherwise).
    """
    return _lookup_factor(
        tbl_temperature_correction,
        str(insulation),
        T_amb,
        policy,
        f"Ambient temperature (°C) for {insulation} insulation"
    )


def group_correction(
    num_circuits: int,
    policy: LookupPolicy = LookupPolicy.EXACT
) -> tuple[float, SizingFlag | None]:
    """
    Returns the reduction factor K2 for a group of `num_circuits` circuits,
    together with a flag if the number of circuits is not tabulated (None
    otherwise).
    """
    return _lookup_factor(
        tbl_group_correction,
        1,
        num_circuits,
        policy,
        "Number of grouped circuits"
    )


def harmonics_correction(has_harmonics: bool, harmonic_factor: float = 0.86) -> float:
    """
    Returns the correction factor Kh for harmonic currents in the loaded
    conductors.
    """
    return harmonic_factor if has_harmonics else 1.0


def get_correction_factors(
    insulation: InsulationMaterials,
    T_amb: float,
    num_circuits: int,
    has_harmonics: bool,
    config: SizingConfig = DEFAULT_CONFIG
) -> CorrectionFactors:
    """
    Returns the correction factors K1, K2 and Kh, of which the product is the
    combined correction factor FC to be applied to the tabulated
    current-carrying capacity of the conductors.
    """
    k_T, flag_T = temperature_correction(insulation, T_amb, config.lookup_policy)
    k_G, flag_G = group_correction(num_circuits, config.lookup_policy)
    k_H = harmonics_correction(has_harmonics, config.harmonic_factor)
    flags = tuple(f for f in (flag_T, flag_G) if f is not None)
    cf = CorrectionFactors(k_T, k_G, k_H, flags)
    logger.debug(
        "Correction factors: k_T = %.2f, k_G = %.2f, k_H = %.2f, FC = %.3f",
        k_T, k_G, k_H, cf.fc
    )
    return cf
