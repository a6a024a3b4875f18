from dataclasses import dataclass
from collections.abc import Sequence

from ...tables import CIRCUIT_BREAKERS

__all__ = [
    "ProtectionSelection",
    "select_protection",
]


@dataclass(frozen=True)
class ProtectionSelection:
    """
    Attributes
    ----------
    I_n: float
        Rated current of the selected circuit breaker in amperes.
    coordinated: bool
        True if `I_b <= I_n <= I_z'`, i.e. the breaker protects the
        conductors against overload.
    """
    I_n: float
    coordinated: bool


def select_protection(
    I_b: float,
    I_z_corr: float,
    ratings: Sequence[float] = CIRCUIT_BREAKERS
) -> ProtectionSelection:
    """
    Selects the rated current of the circuit breaker protecting the circuit
    against overload.

    Returns the smallest rating `I_n` for which `I_b <= I_n <= I_z_corr`. If no
    rating falls within this range, returns the smallest rating greater than
    or equal to `I_b` (or the largest rating if `I_b` exceeds all of them),
    marked as not coordinated.

    Parameters
    ----------
    I_b:
        Design current of the circuit in amperes.
    I_z_corr:
        Corrected current-carrying capacity of the conductors in amperes.
    ratings:
        Standard rated currents in ascending order.

    Returns
    -------
    ProtectionSelection
    """
    I_n = next((r for r in ratings if I_b <= r <= I_z_corr), None)
    if I_n is not None:
        return ProtectionSelection(I_n, True)
    I_n = next((r for r in ratings if r >= I_b), ratings[-1])
    return ProtectionSelection(I_n, False)
