"""
Dimensioning of a low-voltage circuit according to the RTIEBT.

The sizing routine runs through the following steps:
1.  Design current Ib from the apparent power of the load.
2.  Combined correction factor FC for ambient temperature, grouping and
    harmonics.
3.  Smallest standard section of which the corrected current-carrying
    capacity covers Ib.
4.  If the voltage drop at this section exceeds the allowable limit, the
    section is raised until the voltage drop is within the limit.
5.  Rated current In of the circuit breaker with Ib <= In <= Iz'.
6.  Neutral and protective earth conductors, and the conduit diameter.

The routine is a pure function of its input. Problems that do not prevent a
result from being calculated are attached to the result as flags (see
`SizingCondition`).
"""
import logging
from dataclasses import dataclass

from ...config import SizingConfig, DEFAULT_CONFIG
from ..conditions import SizingCondition, SizingFlag
from .input import CircuitInput, validate_circuit
from .current import get_design_current
from .derating import get_correction_factors
from .conductor import get_ampacity, search_ampacity_section
from .voltage_drop import (
    voltage_drop,
    voltage_drop_pct,
    max_voltage_drop,
    search_voltage_drop_section
)
from .protection import select_protection
from .derived import get_neutral_section, get_earth_section
from .conduit import get_tube_diameter

__all__ = [
    "DimensioningResult",
    "dimension_circuit",
    "get_cable_label",
]


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DimensioningResult:
    """
    Result of dimensioning a circuit.

    Attributes
    ----------
    I_b: float
        Design current in amperes.
    k_T, k_G, k_H: float
        Correction factors for ambient temperature, grouping and harmonics.
    fc: float
        Combined correction factor `k_T * k_G * k_H`.
    S_phase: float
        Cross-sectional area of the phase conductors in mm².
    S_neutral: float
        Cross-sectional area of the neutral conductor in mm².
    S_earth: float
        Cross-sectional area of the protective earth conductor in mm².
    S_ampacity: float
        Cross-sectional area selected on current-carrying capacity alone,
        before any increase for voltage drop.
    I_z: float
        Current-carrying capacity of the phase conductors in amperes at
        reference installation conditions.
    I_z_corr: float
        Current-carrying capacity corrected for the actual installation
        conditions, `I_z * fc`.
    I2_check: float
        Upper limit for the conventional tripping current of the circuit
        breaker, `1.45 * I_z_corr`.
    I_n: float
        Rated current of the circuit breaker in amperes.
    U_drop: float
        Voltage drop in volts.
    U_drop_pct: float
        Voltage drop in percent of the line-to-neutral voltage.
    U_drop_max_pct: float
        Maximum allowable voltage drop in percent.
    tube_diameter: float
        Outer diameter of the conduit in mm; 0.0 if it could not be
        determined.
    table_id: str
        Id of the RTIEBT ampacity table that was used.
    cable_label: str
        Designation of the cable type.
    flags: tuple[SizingFlag, ...]
        Conditions encountered while dimensioning the circuit.
    """
    I_b: float
    k_T: float
    k_G: float
    k_H: float
    fc: float
    S_phase: float
    S_neutral: float
    S_earth: float
    S_ampacity: float
    I_z: float
    I_z_corr: float
    I2_check: float
    I_n: float
    U_drop: float
    U_drop_pct: float
    U_drop_max_pct: float
    tube_diameter: float
    table_id: str
    cable_label: str
    flags: tuple[SizingFlag, ...] = ()

    def has(self, condition: SizingCondition) -> bool:
        return any(f.condition == condition for f in self.flags)

    @property
    def compliant(self) -> bool:
        """
        True if the circuit satisfies all sizing requirements without any
        approximation.
        """
        return not self.flags

    @property
    def protection_criterion(self) -> str:
        return f"{self.I_b:.2f} ≤ In ≤ {self.I_z_corr:.1f}"


def get_cable_label(circuit: CircuitInput) -> str:
    """
    Returns the designation of the cable type, e.g. "XV-R" for a copper cable
    with XLPE insulation.
    """
    return circuit.insulation_props.designation + circuit.conductor.designation


def dimension_circuit(
    circuit: CircuitInput,
    config: SizingConfig | None = None
) -> DimensioningResult:
    """
    Dimensions the conductors, the overload protection and the conduit of a
    low-voltage circuit.

    Parameters
    ----------
    circuit:
        Electrical and installation parameters of the circuit.
    config: optional
        Settings of the sizing routine. If None, `DEFAULT_CONFIG` is used.

    Raises
    ------
    InvalidConfigurationError
        If the input parameters of the circuit are physically invalid.

    Returns
    -------
    DimensioningResult
    """
    config = config or DEFAULT_CONFIG
    validate_circuit(circuit)
    flags: list[SizingFlag] = []
    phase_system = circuit.phase_system
    conductor = circuit.conductor
    insulation = circuit.insulation_props
    table_id = circuit.table_id

    I_b = get_design_current(circuit.S_total, circuit.voltage, phase_system)

    cf = get_correction_factors(
        circuit.insulation,
        circuit.T_amb,
        circuit.num_circuits,
        circuit.has_harmonics,
        config
    )
    flags.extend(cf.flags)
    fc = cf.fc

    amp_search = search_ampacity_section(
        I_b, fc, table_id, conductor, insulation, phase_system
    )
    S_ampacity = amp_search.section
    logger.debug(
        "%s -> %s: I_b = %.2f A, section on ampacity = %s mm²",
        circuit.origin, circuit.destination, I_b, S_ampacity
    )

    U_drop_max = max_voltage_drop(circuit.usage, config)
    vd_search = search_voltage_drop_section(
        I_b,
        circuit.length,
        circuit.cos_phi,
        circuit.voltage,
        conductor,
        phase_system,
        start_section=S_ampacity,
        max_drop_pct=U_drop_max,
        reactance=config.reactance_per_length
    )
    S_phase = vd_search.section
    if S_phase != S_ampacity:
        logger.debug(
            "%s -> %s: section raised to %s mm² for voltage drop",
            circuit.origin, circuit.destination, S_phase
        )

    I_z = get_ampacity(table_id, S_phase, conductor, insulation, phase_system)
    I_z_corr = I_z * fc
    if not amp_search.found:
        flags.append(SizingFlag(
            SizingCondition.CAPACITY_EXCEEDED,
            f"No standard section carries the design current {I_b:.2f} A at "
            f"FC = {fc:.3f}; the largest section {S_ampacity} mm² was kept."
        ))
    elif I_z_corr < I_b:
        flags.append(SizingFlag(
            SizingCondition.CAPACITY_EXCEEDED,
            f"Design current {I_b:.2f} A exceeds the corrected current-carrying "
            f"capacity {I_z_corr:.1f} A of the {S_phase} mm² conductors."
        ))
    if not vd_search.found:
        flags.append(SizingFlag(
            SizingCondition.VOLTAGE_DROP_EXCEEDED,
            f"No standard section keeps the voltage drop within "
            f"{U_drop_max:.1f} %; the largest section {S_phase} mm² was kept."
        ))

    protection = select_protection(I_b, I_z_corr)
    if not protection.coordinated:
        flags.append(SizingFlag(
            SizingCondition.COORDINATION_VIOLATION,
            f"No standard breaker rating satisfies {I_b:.2f} A ≤ In ≤ "
            f"{I_z_corr:.1f} A; In = {protection.I_n:g} A does not protect "
            f"the conductors against overload."
        ))

    U_drop = voltage_drop(
        I_b,
        circuit.length,
        S_phase,
        circuit.cos_phi,
        conductor,
        phase_system,
        config.reactance_per_length
    )
    U_drop_pct = voltage_drop_pct(U_drop, circuit.voltage, phase_system)

    S_neutral = get_neutral_section(S_phase, phase_system, circuit.has_harmonics)
    S_earth = get_earth_section(S_phase)
    tube_diameter = get_tube_diameter(S_phase, phase_system)
    if not tube_diameter:
        flags.append(SizingFlag(
            SizingCondition.CONDUIT_UNRESOLVED,
            f"No conduit diameter is tabulated for {S_phase} mm² conductors."
        ))

    for flag in flags:
        logger.warning("%s -> %s: %s", circuit.origin, circuit.destination, flag)

    return DimensioningResult(
        I_b=I_b,
        k_T=cf.k_T,
        k_G=cf.k_G,
        k_H=cf.k_H,
        fc=fc,
        S_phase=S_phase,
        S_neutral=S_neutral,
        S_earth=S_earth,
        S_ampacity=S_ampacity,
        I_z=I_z,
        I_z_corr=I_z_corr,
        I2_check=config.thermal_check_factor * I_z_corr,
        I_n=protection.I_n,
        U_drop=U_drop,
        U_drop_pct=U_drop_pct,
        U_drop_max_pct=U_drop_max,
        tube_diameter=tube_diameter,
        table_id=table_id,
        cable_label=get_cable_label(circuit),
        flags=tuple(flags)
    )
