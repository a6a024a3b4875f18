import math
import unittest
from dataclasses import replace
from unittest import mock

from lv_sizing import (
    Q_,
    CircuitInput,
    PhaseSystem,
    InsulationMaterials,
    ConductorMaterials,
    InstallationMethods,
    UsageCategory,
    SizingConfig,
    LookupPolicy,
    InvalidConfigurationError,
    SizingCondition,
    dimension_circuit,
    check_circuit,
)
from lv_sizing.tables import (
    STANDARD_SECTIONS,
    CIRCUIT_BREAKERS,
    STANDARD_KVA_VALUES,
    tbl_ampacity,
)
from lv_sizing.utils.lookup_table import LookupTable


def three_phase(**kwargs) -> CircuitInput:
    params = dict(
        origin="P100",
        destination="Q.G.E.",
        apparent_power=27.6,
        voltage=400.0,
        phase_system=PhaseSystem.THREE_PHASE,
        length=13.0,
    )
    params.update(kwargs)
    return CircuitInput(**params)


def single_phase(**kwargs) -> CircuitInput:
    params = dict(
        origin="Q.G.E.",
        destination="Q.P.1",
        apparent_power=4.6,
        voltage=230.0,
        phase_system=PhaseSystem.SINGLE_PHASE,
        length=10.0,
    )
    params.update(kwargs)
    return CircuitInput(**params)


class TestScenarios(unittest.TestCase):
    def test_three_phase_design_current(self):
        r = dimension_circuit(three_phase())
        self.assertAlmostEqual(r.I_b, 39.84, places=2)
        # XLPE copper, 52-C3: 6 mm² -> 37.1 A, 10 mm² -> 49.9 A
        self.assertEqual(r.S_phase, 10)
        self.assertEqual(r.I_n, 40)
        self.assertAlmostEqual(r.I_z, 39.0 * 1.28)
        self.assertEqual(r.table_id, "52-C3")
        self.assertTrue(r.compliant)

    def test_single_phase_design_current(self):
        r = dimension_circuit(single_phase())
        self.assertAlmostEqual(r.I_b, 20.0, places=9)
        self.assertEqual(r.S_phase, 2.5)
        self.assertEqual(r.S_neutral, 2.5)
        self.assertEqual(r.I_n, 20)
        self.assertEqual(r.tube_diameter, 20)

    def test_reference_conditions(self):
        r = dimension_circuit(three_phase(T_amb=30, num_circuits=1, has_harmonics=False))
        self.assertEqual(r.fc, 1.0)
        self.assertEqual(r.I_z_corr, r.I_z)
        self.assertAlmostEqual(r.I2_check, 1.45 * r.I_z_corr)

    def test_grouping_forces_larger_section(self):
        ref = dimension_circuit(three_phase())
        r = dimension_circuit(three_phase(num_circuits=5))
        self.assertEqual(r.k_G, 0.60)
        self.assertAlmostEqual(r.fc, 0.60)
        self.assertAlmostEqual(r.I_b, ref.I_b)
        self.assertGreater(r.S_phase, ref.S_phase)
        self.assertEqual(r.S_phase, 16)
        # Iz' = 66.56 * 0.6 = 39.94 A leaves no room for a 40 A breaker
        self.assertEqual(r.I_n, 40)
        self.assertTrue(r.has(SizingCondition.COORDINATION_VIOLATION))

    def test_voltage_drop_escalation(self):
        circuit = three_phase(
            apparent_power=6.9,
            insulation=InsulationMaterials.PVC,
            length=500.0
        )
        r = dimension_circuit(circuit)
        self.assertEqual(r.S_ampacity, 1.5)
        self.assertGreater(r.S_phase, r.S_ampacity)
        self.assertEqual(r.S_phase, 10)
        self.assertLessEqual(r.U_drop_pct, r.U_drop_max_pct)
        self.assertEqual(r.U_drop_max_pct, 5.0)
        self.assertFalse(r.has(SizingCondition.VOLTAGE_DROP_EXCEEDED))
        # ampacity still holds on the escalated section
        self.assertGreaterEqual(r.I_z_corr, r.I_b)

    def test_lighting_limit(self):
        circuit = three_phase(
            apparent_power=6.9,
            insulation=InsulationMaterials.PVC,
            length=500.0,
            usage=UsageCategory.LIGHTING
        )
        r = dimension_circuit(circuit)
        self.assertEqual(r.U_drop_max_pct, 3.0)
        self.assertEqual(r.S_phase, 16)
        self.assertLessEqual(r.U_drop_pct, 3.0)

    def test_reduced_neutral(self):
        # Ib = 115.5 A: 35 mm² -> 106.2 A, 50 mm² -> 126.7 A
        r = dimension_circuit(three_phase(apparent_power=80.0))
        self.assertEqual(r.S_phase, 50)
        self.assertEqual(r.S_neutral, 25)
        self.assertEqual(r.S_earth, 25)
        self.assertEqual(r.I_n, 125)

    def test_harmonics_keep_full_neutral(self):
        r = dimension_circuit(three_phase(apparent_power=80.0, has_harmonics=True))
        self.assertEqual(r.k_H, 0.86)
        self.assertEqual(r.S_phase, 70)
        self.assertEqual(r.S_neutral, 70)


class TestFlags(unittest.TestCase):
    def test_capacity_exceeded(self):
        r = dimension_circuit(three_phase(apparent_power=1000.0))
        self.assertEqual(r.S_phase, STANDARD_SECTIONS[-1])
        self.assertTrue(r.has(SizingCondition.CAPACITY_EXCEEDED))
        messages = [f.message for f in r.flags if f.condition == SizingCondition.CAPACITY_EXCEEDED]
        self.assertEqual(len(messages), 1)
        self.assertTrue(messages[0].startswith("No standard section carries"))
        self.assertTrue(r.has(SizingCondition.COORDINATION_VIOLATION))
        self.assertEqual(r.I_n, CIRCUIT_BREAKERS[-1])
        self.assertFalse(r.compliant)

    def test_voltage_drop_exceeded(self):
        r = dimension_circuit(single_phase(apparent_power=41.4, length=2000.0))
        self.assertEqual(r.S_phase, STANDARD_SECTIONS[-1])
        self.assertTrue(r.has(SizingCondition.VOLTAGE_DROP_EXCEEDED))
        self.assertGreater(r.U_drop_pct, r.U_drop_max_pct)

    def test_table_lookup_miss(self):
        r = dimension_circuit(three_phase(T_amb=32.0))
        self.assertEqual(r.k_T, 1.0)
        self.assertTrue(r.has(SizingCondition.TABLE_LOOKUP_MISS))

    def test_conservative_lookup(self):
        config = SizingConfig(lookup_policy=LookupPolicy.CONSERVATIVE)
        r = dimension_circuit(three_phase(T_amb=32.0), config)
        self.assertEqual(r.k_T, 0.96)
        self.assertTrue(r.has(SizingCondition.TABLE_LOOKUP_MISS))

    def test_conservative_lookup_beyond_table(self):
        config = SizingConfig(lookup_policy=LookupPolicy.CONSERVATIVE)
        r20 = dimension_circuit(three_phase(num_circuits=20), config)
        r25 = dimension_circuit(three_phase(num_circuits=25), config)
        self.assertEqual(r25.k_G, 0.38)
        self.assertEqual(r25.S_phase, r20.S_phase)
        self.assertTrue(r25.has(SizingCondition.TABLE_LOOKUP_MISS))
        r60 = dimension_circuit(three_phase(insulation=InsulationMaterials.PVC, T_amb=60), config)
        r65 = dimension_circuit(three_phase(insulation=InsulationMaterials.PVC, T_amb=65), config)
        self.assertEqual(r65.k_T, 0.50)
        self.assertEqual(r65.S_phase, r60.S_phase)

    def test_conduit_unresolved(self):
        # 803C without the 10 mm² row
        table = LookupTable.create(
            [S for S in STANDARD_SECTIONS if S != 10],
            [3, 5],
            [[32, 40] for S in STANDARD_SECTIONS if S != 10]
        )
        with mock.patch("lv_sizing.sizing.circuit.conduit.tbl_conduit_diameter", table):
            r = dimension_circuit(three_phase())
        self.assertEqual(r.S_phase, 10)
        self.assertEqual(r.tube_diameter, 0.0)
        self.assertTrue(r.has(SizingCondition.CONDUIT_UNRESOLVED))
        self.assertFalse(r.compliant)

    def test_capacity_rechecked_after_escalation(self):
        # ampacity column that drops above 10 mm²
        data = [
            list(row) if S <= 10 else [1.0] * len(row)
            for S, row in zip(tbl_ampacity.row_header, tbl_ampacity.data)
        ]
        table = LookupTable.create(
            list(tbl_ampacity.row_header),
            list(tbl_ampacity.col_header),
            data
        )
        with mock.patch("lv_sizing.sizing.circuit.conductor.tbl_ampacity", table):
            r = dimension_circuit(three_phase(length=300.0))
        self.assertEqual(r.S_ampacity, 10)
        self.assertGreater(r.S_phase, r.S_ampacity)
        self.assertLess(r.I_z_corr, r.I_b)
        self.assertTrue(r.has(SizingCondition.CAPACITY_EXCEEDED))
        self.assertFalse(r.has(SizingCondition.VOLTAGE_DROP_EXCEEDED))

    def test_flags_are_logged(self):
        with self.assertLogs("lv_sizing.sizing.circuit.dimensioning", level="WARNING") as cm:
            dimension_circuit(three_phase(T_amb=32.0))
        self.assertTrue(any("table_lookup_miss" in line for line in cm.output))


class TestInvalidConfiguration(unittest.TestCase):
    def test_invalid_values(self):
        for kwargs in (
            dict(voltage=0.0),
            dict(voltage=-400.0),
            dict(length=0.0),
            dict(cos_phi=1.2),
            dict(cos_phi=-0.1),
            dict(apparent_power=0.0),
            dict(simultaneity_factor=0.0),
            dict(simultaneity_factor=1.5),
            dict(num_circuits=0),
        ):
            circuit = three_phase(**kwargs)
            self.assertTrue(check_circuit(circuit), kwargs)
            with self.assertRaises(InvalidConfigurationError):
                dimension_circuit(circuit)

    def test_problems_listed(self):
        circuit = three_phase(voltage=0.0, length=-1.0)
        self.assertEqual(len(check_circuit(circuit)), 2)
        with self.assertRaises(InvalidConfigurationError) as cm:
            dimension_circuit(circuit)
        self.assertEqual(len(cm.exception.problems), 2)

    def test_unknown_installation_method(self):
        with self.assertRaises(InvalidConfigurationError):
            three_phase(install_method="G")

    def test_string_values_accepted(self):
        circuit = three_phase(
            phase_system="three_phase",
            insulation="PVC",
            conductor_material="aluminium",
            install_method="D",
            usage="lighting"
        )
        self.assertIs(circuit.install_method, InstallationMethods.D)
        self.assertEqual(dimension_circuit(circuit).table_id, "52-C4")

    def test_valid_circuit(self):
        self.assertEqual(check_circuit(three_phase()), [])


class TestProperties(unittest.TestCase):
    def circuits(self):
        for ps, U in ((PhaseSystem.THREE_PHASE, 400.0), (PhaseSystem.SINGLE_PHASE, 230.0)):
            for method in InstallationMethods:
                for mat in ConductorMaterials:
                    for ins in InsulationMaterials:
                        yield three_phase(
                            phase_system=ps,
                            voltage=U,
                            install_method=method,
                            conductor_material=mat,
                            insulation=ins,
                            length=60.0,
                        )

    def test_design_current_formula(self):
        for c in self.circuits():
            r = dimension_circuit(c)
            k = math.sqrt(3) if c.phase_system.three_phase else 1.0
            expected = c.apparent_power * c.simultaneity_factor * 1000 / (k * c.voltage)
            self.assertAlmostEqual(r.I_b, expected)

    def test_result_consistency(self):
        for c in self.circuits():
            r = dimension_circuit(c)
            self.assertIn(r.I_n, CIRCUIT_BREAKERS)
            self.assertLessEqual(r.S_neutral, r.S_phase)
            self.assertLessEqual(r.S_earth, r.S_phase)
            self.assertIn(r.S_phase, STANDARD_SECTIONS)
            self.assertGreaterEqual(r.S_phase, r.S_ampacity)
            if r.has(SizingCondition.COORDINATION_VIOLATION):
                self.assertFalse(r.I_b <= r.I_n <= r.I_z_corr)
            else:
                self.assertTrue(r.I_b <= r.I_n <= r.I_z_corr)

    def test_monotonic_in_power(self):
        for base in (three_phase(length=80.0), single_phase(length=40.0)):
            sections = [
                dimension_circuit(replace(base, apparent_power=S)).S_phase
                for S in STANDARD_KVA_VALUES
            ]
            self.assertEqual(sections, sorted(sections))

    def test_idempotent(self):
        circuit = three_phase(apparent_power=41.4, num_circuits=3, T_amb=35, has_harmonics=True)
        self.assertEqual(dimension_circuit(circuit), dimension_circuit(circuit))
        self.assertEqual(repr(dimension_circuit(circuit)), repr(dimension_circuit(circuit)))

    def test_input_not_mutated(self):
        circuit = three_phase()
        before = repr(circuit)
        dimension_circuit(circuit)
        self.assertEqual(repr(circuit), before)

    def test_from_quantities(self):
        circuit = CircuitInput.from_quantities(
            "P100", "Q.G.E.",
            S=Q_(27.6, 'kVA'),
            U=Q_(0.4, 'kV'),
            L=Q_(13, 'm'),
            T_amb=Q_(30, 'degC')
        )
        self.assertAlmostEqual(circuit.voltage, 400.0)
        self.assertAlmostEqual(dimension_circuit(circuit).I_b, 39.84, places=2)


if __name__ == '__main__':
    unittest.main()
