import tempfile
import unittest
from pathlib import Path

from openpyxl import load_workbook

from lv_sizing import CircuitInput, PhaseSystem, InsulationMaterials, dimension_circuit
from lv_sizing.report import (
    REPORT_COLUMNS,
    report_row,
    build_schedule,
    export_xlsx,
    calculation_note,
)


CIRCUITS = [
    CircuitInput(
        origin="P100",
        destination="Q.G.E.",
        apparent_power=27.6,
        voltage=400.0,
        phase_system=PhaseSystem.THREE_PHASE,
        length=13.0,
    ),
    CircuitInput(
        origin="Q.G.E.",
        destination="Q.P.2",
        apparent_power=6.9,
        voltage=400.0,
        insulation=InsulationMaterials.PVC,
        length=500.0,
    ),
    CircuitInput(
        origin="Q.G.E.",
        destination="Q.P.3",
        apparent_power=41.4,
        voltage=230.0,
        phase_system=PhaseSystem.SINGLE_PHASE,
        length=2000.0,
    ),
]


class TestReportRow(unittest.TestCase):
    def test_columns(self):
        self.assertEqual(len(REPORT_COLUMNS), 16)
        circuit = CIRCUITS[0]
        row = report_row(circuit, dimension_circuit(circuit))
        self.assertEqual(list(row.keys()), list(REPORT_COLUMNS))

    def test_values(self):
        circuit = CIRCUITS[0]
        row = report_row(circuit, dimension_circuit(circuit))
        self.assertEqual(row["Origin"], "P100")
        self.assertEqual(row["Destination"], "Q.G.E.")
        self.assertEqual(row["Reference Voltage (V)"], 400.0)
        self.assertEqual(row["Design Current Ib (A)"], 39.84)
        self.assertEqual(row["Cable Type Label"], "XV-R Trifásico")
        self.assertEqual(row["Phase Section"], 10)
        self.assertEqual(row["Neutral Section"], 10)
        self.assertEqual(row["Base Ampacity"], 50)
        self.assertEqual(row["Correction Factor"], 1.0)
        self.assertEqual(row["Protection Selection Criterion"], "39.84 ≤ In ≤ 49.9")
        self.assertEqual(row["Protection Rating"], 40)

    def test_cable_labels(self):
        circuit = CircuitInput(
            origin="A", destination="B", apparent_power=5.0,
            insulation="PVC", conductor_material="aluminium"
        )
        self.assertEqual(dimension_circuit(circuit).cable_label, "H07V-AL")

    def test_build_schedule_keeps_order(self):
        schedule = build_schedule(CIRCUITS)
        self.assertEqual([row["Destination"] for _, _, row in schedule], ["Q.G.E.", "Q.P.2", "Q.P.3"])


class TestExportXlsx(unittest.TestCase):
    def test_export(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = export_xlsx(CIRCUITS, Path(tmp) / "out" / "schedule.xlsx", title="Test")
            self.assertTrue(path.exists())
            ws = load_workbook(path).active
            self.assertEqual(ws["A1"].value, "Test")
            header = [c.value for c in ws[2]]
            self.assertEqual(header, list(REPORT_COLUMNS))
            self.assertEqual(ws.max_row, 2 + len(CIRCUITS))
            self.assertEqual(ws.cell(row=3, column=1).value, "P100")
            vd_col = REPORT_COLUMNS.index("Voltage Drop (%)") + 1
            # the third circuit cannot meet the voltage drop limit
            self.assertTrue(ws.cell(row=5, column=vd_col).font.bold)
            self.assertFalse(ws.cell(row=3, column=vd_col).font.bold)


class TestCalculationNote(unittest.TestCase):
    def test_note(self):
        circuit = CIRCUITS[1]
        note = calculation_note(circuit, dimension_circuit(circuit))
        self.assertIn("Circuit Q.G.E. -> Q.P.2", note)
        self.assertIn("Ib =", note)
        self.assertIn("52-C3", note)
        self.assertNotIn("Remarks", note)

    def test_note_lists_flags(self):
        circuit = CIRCUITS[2]
        note = calculation_note(circuit, dimension_circuit(circuit))
        self.assertIn("Remarks", note)
        self.assertIn("voltage_drop_exceeded", note)


if __name__ == '__main__':
    unittest.main()
