from ...general import PhaseSystem
from ...tables import tbl_conduit_diameter

__all__ = [
    "get_tube_diameter",
]


def get_tube_diameter(S_phase: float, phase_system: PhaseSystem) -> float:
    """
    Returns the outer diameter in mm of the conduit for the conductors of the
    circuit (phases, neutral and earth) with cross-sectional area `S_phase`.

    If the table has no entry for the number of conductors of the circuit, the
    entry for five conductors is used. If the section itself is not
    tabulated, 0.0 is returned.
    """
    num_conductors = phase_system.num_conductors
    D = tbl_conduit_diameter.get(S_phase, num_conductors)
    if D is None:
        D = tbl_conduit_diameter.get(S_phase, 5)
    if D is None:
        return 0.0
    return D
