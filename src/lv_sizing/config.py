from dataclasses import dataclass, asdict
from enum import StrEnum

__all__ = ["LookupPolicy", "SizingConfig", "DEFAULT_CONFIG"]


class LookupPolicy(StrEnum):
    """
    How a correction factor is looked up when the ambient temperature or the
    number of grouped circuits is not tabulated.

    EXACT:
        Only exact table entries are used; a missing entry yields a factor of
        1.0.
    CONSERVATIVE:
        The next tabulated entry in the unfavourable direction is used, i.e.
        the next higher temperature or the next higher number of circuits.
        Values beyond the tabulated range take the factor of the last
        tabulated entry.

    With both policies, a value that is not tabulated is reported on the
    sizing result as a table lookup miss.
    """
    EXACT = "exact"
    CONSERVATIVE = "conservative"


@dataclass(frozen=True)
class SizingConfig:
    """
    Configuration settings for dimensioning low-voltage circuits.
    """
    # Correction factor for 3rd harmonic content above the RTIEBT threshold.
    harmonic_factor: float = 0.86

    # Maximum allowable relative voltage drop in percent.
    max_voltage_drop_lighting: float = 3.0
    max_voltage_drop_other: float = 5.0

    # Reactance per unit length of the conductors, ohm / m.
    reactance_per_length: float = 0.08e-3

    # Conventional tripping current of the protective device as a multiple of
    # the corrected ampacity: I2 <= 1.45 * Iz'.
    thermal_check_factor: float = 1.45

    lookup_policy: LookupPolicy = LookupPolicy.EXACT

    def __str__(self) -> str:
        d = asdict(self)
        return "\n".join(f"{k}: {v}" for k, v in d.items())


DEFAULT_CONFIG = SizingConfig()
