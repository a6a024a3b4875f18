from dataclasses import dataclass
from enum import StrEnum

__all__ = [
    "ConductorMaterial",
    "ConductorMaterials",
    "CONDUCTOR_MATERIALS"
]


@dataclass(frozen=True)
class ConductorMaterial:
    resistivity: float      # Ohm.mm²/m, at operating temperature (rho1)
    ampacity_factor: float  # multiplier on the copper ampacity tables
    designation: str        # suffix in the cable designation
    type: str
    label: str


class ConductorMaterials(StrEnum):
    COPPER = "copper"
    ALUMINIUM = "aluminium"


CONDUCTOR_MATERIALS: dict[str, ConductorMaterial] = {
    "copper": ConductorMaterial(0.0225, 1.0, "-R", "copper", "Cobre (Cu)"),
    "aluminium": ConductorMaterial(0.036, 0.77, "-AL", "aluminium", "Alumínio (Al)")
}
