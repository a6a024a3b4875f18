"""
Tabular circuit schedule: one row per circuit with the columns of the
installation report, and export of the schedule to an Excel workbook.
"""
import logging
from collections.abc import Iterable
from datetime import date
from pathlib import Path
from typing import Any

from openpyxl import Workbook
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side
from openpyxl.utils import get_column_letter

from ..config import SizingConfig
from ..sizing.circuit import CircuitInput, DimensioningResult, dimension_circuit

__all__ = [
    "REPORT_COLUMNS",
    "report_row",
    "build_schedule",
    "export_xlsx",
]


logger = logging.getLogger(__name__)


REPORT_COLUMNS: tuple[str, ...] = (
    "Origin",
    "Destination",
    "Apparent Power (kVA)",
    "Reference Voltage (V)",
    "Design Current Ib (A)",
    "Cable Type Label",
    "Phase Section",
    "Neutral Section",
    "Base Ampacity",
    "Corrected Ampacity",
    "Correction Factor",
    "Length",
    "Voltage Drop (%)",
    "Thermal Check Value",
    "Protection Selection Criterion",
    "Protection Rating",
)


def report_row(circuit: CircuitInput, result: DimensioningResult) -> dict[str, Any]:
    """
    Returns the row of the circuit schedule for a dimensioned circuit as a
    dict keyed by the names in `REPORT_COLUMNS`. Numbers are rounded the way
    they are presented in the schedule.
    """
    values = (
        circuit.origin,
        circuit.destination,
        round(circuit.apparent_power, 2),
        circuit.voltage,
        round(result.I_b, 2),
        f"{result.cable_label} {circuit.phase_system.label}",
        result.S_phase,
        result.S_neutral,
        round(result.I_z),
        round(result.I_z_corr, 1),
        round(result.fc, 2),
        circuit.length,
        round(result.U_drop_pct, 2),
        round(result.I2_check, 2),
        result.protection_criterion,
        result.I_n,
    )
    return dict(zip(REPORT_COLUMNS, values))


def build_schedule(
    circuits: Iterable[CircuitInput],
    config: SizingConfig | None = None
) -> list[tuple[CircuitInput, DimensioningResult, dict[str, Any]]]:
    """
    Dimensions each circuit and returns, in the same order, the circuit, its
    result and its row of the schedule.

    Raises
    ------
    InvalidConfigurationError
        If one of the circuits has invalid input parameters.
    """
    schedule = []
    for circuit in circuits:
        result = dimension_circuit(circuit, config)
        schedule.append((circuit, result, report_row(circuit, result)))
    return schedule


_THIN = Side(style="thin", color="000000")
_BORDER = Border(left=_THIN, right=_THIN, top=_THIN, bottom=_THIN)
_HEADER_FILL = PatternFill("solid", fgColor="F3F4F6")
_ALERT_FONT = Font(color="DC2626", bold=True)


def export_xlsx(
    circuits: Iterable[CircuitInput],
    path: str | Path,
    config: SizingConfig | None = None,
    title: str | None = None
) -> Path:
    """
    Writes the circuit schedule to an Excel workbook. Voltage drops above
    the allowable limit are highlighted in red. Returns the path of the file.
    """
    path = Path(path)
    schedule = build_schedule(circuits, config)

    wb = Workbook()
    ws = wb.active
    ws.title = "Circuits"
    ws.append([title or f"Circuit schedule RTIEBT - {date.today().isoformat()}"])
    ws["A1"].font = Font(bold=True, size=12)
    ws.append(list(REPORT_COLUMNS))
    for j in range(1, len(REPORT_COLUMNS) + 1):
        cell = ws.cell(row=2, column=j)
        cell.font = Font(bold=True, name="Calibri", size=9)
        cell.fill = _HEADER_FILL
        cell.border = _BORDER
        cell.alignment = Alignment(horizontal="center", vertical="center", wrap_text=True)
        ws.column_dimensions[get_column_letter(j)].width = 16

    vd_col = REPORT_COLUMNS.index("Voltage Drop (%)") + 1
    for _, result, row in schedule:
        ws.append([row[c] for c in REPORT_COLUMNS])
        r = ws.max_row
        for j in range(1, len(REPORT_COLUMNS) + 1):
            cell = ws.cell(row=r, column=j)
            cell.border = _BORDER
            cell.alignment = Alignment(horizontal="center")
        if result.U_drop_pct > result.U_drop_max_pct:
            ws.cell(row=r, column=vd_col).font = _ALERT_FONT
    ws.freeze_panes = "A3"

    path.parent.mkdir(parents=True, exist_ok=True)
    wb.save(path)
    logger.info("Circuit schedule with %d circuits written to %s", len(schedule), path)
    return path
