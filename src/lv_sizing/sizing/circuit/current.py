from ...pint_setup import Quantity, to_magnitude
from ...general import PhaseSystem
from ..conditions import InvalidConfigurationError

__all__ = [
    "get_design_current",
]


def get_design_current(
    S_total: float | Quantity,
    U_line: float | Quantity,
    phase_system: PhaseSystem
) -> float:
    """
    Returns the design current Ib in amperes of a circuit.

    Parameters
    ----------
    S_total: float | Quantity
        Apparent power of the load, already multiplied with the simultaneity
        factor, in kVA (if float).
    U_line: float | Quantity
        Line-to-line voltage in case of a three-phase circuit or
        line-to-neutral voltage in case of a single-phase circuit, in volts
        (if float).
    phase_system: PhaseSystem

    Raises
    ------
    InvalidConfigurationError
        If the voltage is not positive.

    Returns
    -------
    float
    """
    S_total = to_magnitude(S_total, 'kVA')
    U_line = to_magnitude(U_line, 'V')
    if not U_line > 0:
        raise InvalidConfigurationError([f"Voltage must be positive, got {U_line} V."])
    I_b = S_total * 1000 / (phase_system.cP() * U_line)
    return I_b
