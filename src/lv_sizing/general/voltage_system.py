import math
from enum import StrEnum, Enum

__all__ = [
    "VoltReference",
    "PhaseSystem",
    "UsageCategory"
]


class VoltReference(float, Enum):
    """
    Enum-class to indicate against which voltage the voltage drop of a circuit
    is measured. The member values are the coefficient `b` in the equation for
    calculating voltage drop.
    """
    PH3_GROUND_TO_LINE = 1.0
    PH1 = 2.0


class PhaseSystem(StrEnum):
    THREE_PHASE = "three_phase"
    SINGLE_PHASE = "single_phase"

    @property
    def three_phase(self) -> bool:
        return self == PhaseSystem.THREE_PHASE

    @property
    def single_phase(self) -> bool:
        return self == PhaseSystem.SINGLE_PHASE

    @property
    def label(self) -> str:
        if self.three_phase:
            return "Trifásico"
        return "Monofásico"

    @property
    def volt_ref(self) -> VoltReference:
        if self.three_phase:
            return VoltReference.PH3_GROUND_TO_LINE
        return VoltReference.PH1

    @property
    def num_loaded_conductors(self) -> int:
        return 3 if self.three_phase else 2

    @property
    def num_conductors(self) -> int:
        """
        Number of conductors pulled into the conduit: 3 phases, neutral and
        earth for a three-phase circuit, phase, neutral and earth for a
        single-phase circuit.
        """
        return 5 if self.three_phase else 3

    def cP(self) -> float:
        """
        Returns the coefficient in the power equation `S = cP * U * I` with `U`
        the line-to-line voltage of a three-phase system or the line-to-neutral
        voltage of a single-phase system.
        """
        if self == PhaseSystem.THREE_PHASE:
            return math.sqrt(3)
        elif self == PhaseSystem.SINGLE_PHASE:
            return 1.0
        else:
            raise ValueError("Value of `phase system` is not recognized.")

    def reference_voltage(self, U_line: float) -> float:
        """
        Returns the voltage the relative voltage drop is referred to: the
        line-to-neutral voltage `U_line / √3` in a three-phase system, or
        `U_line` itself in a single-phase system.
        """
        if self.three_phase:
            return U_line / math.sqrt(3)
        return U_line


class UsageCategory(StrEnum):
    """
    Use of the circuit. Determines the maximum allowable relative voltage drop.
    """
    LIGHTING = "lighting"
    OTHER = "other"

    @property
    def label(self) -> str:
        if self == UsageCategory.LIGHTING:
            return "Iluminação"
        return "Outros usos"
