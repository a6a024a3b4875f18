from enum import StrEnum
from types import MappingProxyType

__all__ = [
    "InstallationMethods",
    "TABLE_REFERENCES"
]


class InstallationMethods(StrEnum):
    A1 = "A1"
    A2 = "A2"
    B1 = "B1"
    B2 = "B2"
    C = "C"
    D = "D"
    E = "E"
    F = "F"

    @property
    def table_id(self) -> str:
        """
        Id of the RTIEBT table with the current-carrying capacities for this
        method of installation.
        """
        return TABLE_REFERENCES[self]

    @property
    def label(self) -> str:
        return _LABELS[self]


# installation method -> table of current-carrying capacities
TABLE_REFERENCES = MappingProxyType({
    InstallationMethods.A1: "52-C3",
    InstallationMethods.A2: "52-C3",
    InstallationMethods.B1: "52-C3",
    InstallationMethods.B2: "52-C3",
    InstallationMethods.C: "52-C3",
    InstallationMethods.D: "52-C4",
    InstallationMethods.E: "52-C10",
    InstallationMethods.F: "52-C11",
})

_LABELS = MappingProxyType({
    InstallationMethods.A1: "A1 - Condutores isolados em tubos em parede isolante",
    InstallationMethods.A2: "A2 - Cabo multicondutor em tubo em parede isolante",
    InstallationMethods.B1: "B1 - Condutores isolados em tubo à vista ou em alvenaria",
    InstallationMethods.B2: "B2 - Cabo multicondutor em tubo à vista ou em alvenaria",
    InstallationMethods.C: "C - Cabos fixados diretamente em paredes",
    InstallationMethods.D: "D - Cabos em condutas enterradas",
    InstallationMethods.E: "E - Cabo multicondutor ao ar livre",
    InstallationMethods.F: "F - Cabos monocondutores ao ar livre",
})
