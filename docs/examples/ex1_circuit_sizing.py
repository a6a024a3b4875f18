"""
Dimensioning the circuits of a small installation and exporting the circuit
schedule.
"""
import logging

from lv_sizing import (
    CircuitInput,
    PhaseSystem,
    InsulationMaterials,
    InstallationMethods,
    UsageCategory,
    dimension_circuit,
)
from lv_sizing.tables import simultaneity_factor
from lv_sizing.report import calculation_note, export_xlsx

logging.basicConfig(level=logging.INFO)


circuits = [
    # Feeder of a building with 6 dwellings.
    CircuitInput(
        origin="P100",
        destination="Q.G.E.",
        apparent_power=6 * 6.9,
        simultaneity_factor=simultaneity_factor(6),
        voltage=400.0,
        phase_system=PhaseSystem.THREE_PHASE,
        insulation=InsulationMaterials.XLPE,
        install_method=InstallationMethods.D,
        length=35.0,
    ),
    # Lighting circuit of the common areas.
    CircuitInput(
        origin="Q.G.E.",
        destination="Q.S.C.",
        apparent_power=2.3,
        voltage=230.0,
        phase_system=PhaseSystem.SINGLE_PHASE,
        insulation=InsulationMaterials.PVC,
        install_method=InstallationMethods.B1,
        usage=UsageCategory.LIGHTING,
        length=60.0,
        num_circuits=3,
    ),
]

for circuit in circuits:
    result = dimension_circuit(circuit)
    print(calculation_note(circuit, result))
    print()

export_xlsx(circuits, "circuit_schedule.xlsx")
