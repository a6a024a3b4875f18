"""
lv_sizing

Dimensioning of low-voltage circuits in buildings according to the RTIEBT:
conductor sections, overload protection, neutral and earth conductors, and
conduit diameter.
"""
from .pint_setup import UNITS, Quantity, Q_
from .general import PhaseSystem, UsageCategory, VoltReference
from .materials import ConductorMaterials, InsulationMaterials
from .tables import InstallationMethods, TABLES_VERSION
from .config import SizingConfig, LookupPolicy, DEFAULT_CONFIG
from .sizing import InvalidConfigurationError, SizingCondition, SizingFlag
from .sizing.circuit import (
    CircuitInput,
    DimensioningResult,
    dimension_circuit,
    check_circuit
)

from . import general
from . import materials
from . import tables
from . import sizing
from . import report


__all__ = [
    "UNITS",
    "Quantity",
    "Q_",
    "PhaseSystem",
    "UsageCategory",
    "VoltReference",
    "ConductorMaterials",
    "InsulationMaterials",
    "InstallationMethods",
    "TABLES_VERSION",
    "SizingConfig",
    "LookupPolicy",
    "DEFAULT_CONFIG",
    "InvalidConfigurationError",
    "SizingCondition",
    "SizingFlag",
    "CircuitInput",
    "DimensioningResult",
    "dimension_circuit",
    "check_circuit",
    "general",
    "materials",
    "tables",
    "sizing",
    "report"
]


__version__ = "0.1.0"
