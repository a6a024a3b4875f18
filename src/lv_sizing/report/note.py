"""
Calculation note that justifies the dimensioning of a circuit step by step.
"""
from ..pint_setup import Q_
from ..sizing.circuit import CircuitInput, DimensioningResult

__all__ = [
    "calculation_note",
]


def calculation_note(circuit: CircuitInput, result: DimensioningResult) -> str:
    """
    Returns a plain-text calculation note for the dimensioned circuit.
    """
    S_total = Q_(circuit.S_total, 'kVA')
    U = Q_(circuit.voltage, 'V')
    I_b = Q_(result.I_b, 'A')
    I_z = Q_(result.I_z, 'A')
    I_z_corr = Q_(result.I_z_corr, 'A')
    L = Q_(circuit.length, 'm')
    T_amb = Q_(circuit.T_amb, 'degC')

    def mm2(S: float) -> str:
        return f"{Q_(S, 'mm ** 2'):~P}"

    lines = [
        f"Circuit {circuit.origin} -> {circuit.destination}",
        f"Cable {result.cable_label}, {circuit.phase_system.label}, "
        f"{circuit.conductor.label}, {circuit.insulation_props.label}",
        f"Method {circuit.install_method.label}",
        "",
        "1. Design current",
        f"   S x Ks = {circuit.apparent_power:g} kVA x {circuit.simultaneity_factor:g} "
        f"= {S_total:~P.2f}",
        f"   Ib = S x Ks / ({circuit.phase_system.cP():.3f} x {U:~P.0f}) = {I_b:~P.2f}",
        "",
        "2. Correction factors",
        f"   K1 = {result.k_T:.2f} ({circuit.insulation_props.label}, {T_amb:~P.0f})",
        f"   K2 = {result.k_G:.2f} ({circuit.num_circuits} circuit(s) grouped)",
        f"   Kh = {result.k_H:.2f}",
        f"   FC = K1 x K2 x Kh = {result.fc:.3f}",
        "",
        "3. Conductors",
        f"   Table {result.table_id}: section on ampacity {mm2(result.S_ampacity)}",
        f"   Iz = {I_z:~P.1f}, Iz' = Iz x FC = {I_z_corr:~P.1f}",
        f"   Phase {mm2(result.S_phase)}, neutral {mm2(result.S_neutral)}, "
        f"earth {mm2(result.S_earth)}",
        "",
        "4. Overload protection",
        f"   {result.protection_criterion} -> In = {Q_(result.I_n, 'A'):~P.0f}",
        f"   I2 <= 1.45 x Iz' = {Q_(result.I2_check, 'A'):~P.2f}",
        "",
        "5. Voltage drop",
        f"   L = {L:~P.0f}, cos φ = {circuit.cos_phi:.2f}, {circuit.usage.label}",
        f"   ΔU = {Q_(result.U_drop, 'V'):~P.2f} = {result.U_drop_pct:.2f} % "
        f"(max. {result.U_drop_max_pct:.1f} %)",
        "",
        "6. Conduit",
    ]
    if result.tube_diameter:
        lines.append(f"   Ø {Q_(result.tube_diameter, 'mm'):~P.0f}")
    else:
        lines.append("   not tabulated")
    if result.flags:
        lines += ["", "Remarks"]
        lines += [f"   - {flag}" for flag in result.flags]
    return "\n".join(lines)
