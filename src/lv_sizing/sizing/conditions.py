"""
Conditions that can arise while dimensioning a circuit.

Apart from an invalid configuration of the circuit, which stops the sizing
routine before anything is calculated, none of these conditions is fatal: the
sizing routine always returns a best-effort result to which the conditions
are attached as flags, so that a non-compliant circuit can still be reviewed
and reported.
"""
from dataclasses import dataclass
from enum import StrEnum

__all__ = [
    "InvalidConfigurationError",
    "SizingCondition",
    "SizingFlag",
]


class InvalidConfigurationError(ValueError):
    """
    Raised when the input parameters of a circuit are physically invalid.

    Attributes
    ----------
    problems: list[str]
        Description of each invalid parameter.
    """
    def __init__(self, problems: list[str]):
        self.problems = list(problems)
        super().__init__("; ".join(self.problems))


class SizingCondition(StrEnum):
    # The design current exceeds the corrected ampacity of the largest section.
    CAPACITY_EXCEEDED = "capacity_exceeded"
    # No breaker rating In satisfies Ib <= In <= Iz'.
    COORDINATION_VIOLATION = "coordination_violation"
    # No section keeps the voltage drop within the allowable limit.
    VOLTAGE_DROP_EXCEEDED = "voltage_drop_exceeded"
    # A correction factor was not tabulated for the given value.
    TABLE_LOOKUP_MISS = "table_lookup_miss"
    # No conduit diameter is tabulated for the final section.
    CONDUIT_UNRESOLVED = "conduit_unresolved"


@dataclass(frozen=True)
class SizingFlag:
    condition: SizingCondition
    message: str

    def __str__(self) -> str:
        return f"[{self.condition}] {self.message}"
