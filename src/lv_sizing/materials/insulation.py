from dataclasses import dataclass
from enum import StrEnum

__all__ = [
    "Insulation",
    "InsulationMaterials",
    "INSULATION_MATERIALS"
]


@dataclass(frozen=True)
class Insulation:
    type: str
    ampacity_factor: float   # multiplier on the PVC ampacity tables
    designation: str         # prefix in the cable designation
    label: str


class InsulationMaterials(StrEnum):
    PVC = "PVC"    # thermoplastic
    XLPE = "XLPE"  # thermosetting (XLPE/EPR)


INSULATION_MATERIALS: dict[str, Insulation] = {
    "PVC": Insulation("PVC", 1.0, "H07V", "PVC (70°C)"),
    "XLPE": Insulation("XLPE", 1.28, "XV", "XLPE/EPR (90°C)")
}
