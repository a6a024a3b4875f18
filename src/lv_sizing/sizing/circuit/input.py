import math
from dataclasses import dataclass

from ...pint_setup import Quantity, to_magnitude
from ...general import PhaseSystem, UsageCategory
from ...materials import (
    ConductorMaterials,
    CONDUCTOR_MATERIALS,
    ConductorMaterial,
    InsulationMaterials,
    INSULATION_MATERIALS,
    Insulation
)
from ...tables import InstallationMethods, TABLE_REFERENCES, AMPACITY_TABLE_IDS
from ..conditions import InvalidConfigurationError

__all__ = [
    "CircuitInput",
    "check_circuit",
    "validate_circuit",
]


@dataclass(frozen=True)
class CircuitInput:
    """
    Electrical and installation parameters of a low-voltage circuit.

    Parameters
    ----------
    origin: str
        Label of the distribution board or point the circuit departs from.
    destination: str
        Label of the board or load the circuit supplies.
    apparent_power: float
        Rated apparent power of the load in kVA.
    simultaneity_factor: float, default 1.0
        Simultaneity (diversity) factor Ks, 0 < Ks <= 1.
    cos_phi: float, default 0.9
        Power factor of the load.
    voltage: float, default 400.0
        Line-to-line voltage in volts in case of a three-phase circuit, or
        line-to-neutral voltage in case of a single-phase circuit.
    phase_system: PhaseSystem, default THREE_PHASE
    insulation: InsulationMaterials, default XLPE
    conductor_material: ConductorMaterials, default COPPER
    install_method: InstallationMethods, default B1
        Reference method of installation. Selects the ampacity table.
    usage: UsageCategory, default OTHER
        Use of the circuit. Selects the allowable voltage drop.
    length: float, default 10.0
        Circuit length in meters.
    T_amb: float, default 30.0
        Ambient temperature in degrees Celsius.
    num_circuits: int, default 1
        Number of circuits or multicore cables installed together, this one
        included.
    has_harmonics: bool, default False
        True when the total harmonic distortion of the load current exceeds
        the threshold of the RTIEBT.
    """
    origin: str
    destination: str
    apparent_power: float  # kVA
    simultaneity_factor: float = 1.0
    cos_phi: float = 0.9
    voltage: float = 400.0  # V
    phase_system: PhaseSystem = PhaseSystem.THREE_PHASE
    insulation: InsulationMaterials = InsulationMaterials.XLPE
    conductor_material: ConductorMaterials = ConductorMaterials.COPPER
    install_method: InstallationMethods = InstallationMethods.B1
    usage: UsageCategory = UsageCategory.OTHER
    length: float = 10.0  # m
    T_amb: float = 30.0  # degC
    num_circuits: int = 1
    has_harmonics: bool = False

    def __post_init__(self):
        # accept the plain string values of the enums, e.g. from a form
        problems = []
        for name, enum_cls in (
            ("phase_system", PhaseSystem),
            ("insulation", InsulationMaterials),
            ("conductor_material", ConductorMaterials),
            ("install_method", InstallationMethods),
            ("usage", UsageCategory),
        ):
            value = getattr(self, name)
            try:
                object.__setattr__(self, name, enum_cls(value))
            except ValueError:
                problems.append(f"{value!r} is not a valid {name.replace('_', ' ')}.")
        if problems:
            raise InvalidConfigurationError(problems)

    @classmethod
    def from_quantities(
        cls,
        origin: str,
        destination: str,
        S: Quantity,
        U: Quantity,
        L: Quantity,
        T_amb: Quantity | None = None,
        **kwargs
    ) -> 'CircuitInput':
        """
        Creates a circuit from Pint quantities for the apparent power `S`,
        the voltage `U`, the length `L` and, optionally, the ambient
        temperature `T_amb`. Other parameters are passed on as keyword
        arguments.
        """
        if T_amb is not None:
            kwargs["T_amb"] = T_amb.to('degC').m
        return cls(
            origin=origin,
            destination=destination,
            apparent_power=to_magnitude(S, 'kVA'),
            voltage=to_magnitude(U, 'V'),
            length=to_magnitude(L, 'm'),
            **kwargs
        )

    @property
    def conductor(self) -> ConductorMaterial:
        return CONDUCTOR_MATERIALS[self.conductor_material]

    @property
    def insulation_props(self) -> Insulation:
        return INSULATION_MATERIALS[self.insulation]

    @property
    def table_id(self) -> str | None:
        return TABLE_REFERENCES.get(self.install_method)

    @property
    def S_total(self) -> float:
        """Apparent power corrected with the simultaneity factor, kVA."""
        return self.apparent_power * self.simultaneity_factor


def check_circuit(circuit: CircuitInput) -> list[str]:
    """
    Checks the input parameters of the circuit for physically invalid values.
    Returns a list describing each problem, which is empty if the circuit is
    valid.
    """
    problems = []
    if not circuit.voltage > 0:
        problems.append(f"Voltage must be positive, got {circuit.voltage} V.")
    if not circuit.length > 0:
        problems.append(f"Length must be positive, got {circuit.length} m.")
    if not (0.0 <= circuit.cos_phi <= 1.0):
        problems.append(f"Power factor must be between 0 and 1, got {circuit.cos_phi}.")
    if not circuit.apparent_power > 0:
        problems.append(f"Apparent power must be positive, got {circuit.apparent_power} kVA.")
    if not (0.0 < circuit.simultaneity_factor <= 1.0):
        problems.append(
            f"Simultaneity factor must be greater than 0 and at most 1, "
            f"got {circuit.simultaneity_factor}."
        )
    if circuit.num_circuits < 1:
        problems.append(f"Number of grouped circuits must be at least 1, got {circuit.num_circuits}.")
    if not math.isfinite(circuit.T_amb):
        problems.append(f"Ambient temperature must be a finite number, got {circuit.T_amb}.")
    if circuit.table_id not in AMPACITY_TABLE_IDS:
        problems.append(
            f"Installation method {circuit.install_method!r} has no table of "
            f"current-carrying capacities."
        )
    return problems


def validate_circuit(circuit: CircuitInput) -> None:
    """
    Raises
    ------
    InvalidConfigurationError
        If any input parameter of the circuit is physically invalid.
    """
    problems = check_circuit(circuit)
    if problems:
        raise InvalidConfigurationError(problems)
