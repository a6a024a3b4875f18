"""
Current-carrying capacities in amperes of copper conductors with PVC
insulation and three loaded conductors at an ambient temperature of 30 °C
(20 °C in the ground), for each reference method of installation.

Other conductor materials, insulation types and numbers of loaded conductors
are derived from these tables by multiplication factors (see
`lv_sizing.materials` and `lv_sizing.sizing.circuit.conductor`).

References
----------
RTIEBT, secção 52, Quadros 52-C3, 52-C4, 52-C10 and 52-C11.
"""
from .standard_values import STANDARD_SECTIONS
from ..utils.lookup_table import LookupTable

__all__ = [
    "tbl_ampacity",
    "AMPACITY_TABLE_IDS",
    "get_table_ampacity",
]


def _create_ampacity_table() -> LookupTable:
    col_header = {
        "52-C3": "methods A1, A2, B1, B2 and C",
        "52-C4": "method D, cables in buried ducts",
        "52-C10": "method E, multicore cable in free air",
        "52-C11": "method F, single-core cables in free air",
    }
    row_header = list(STANDARD_SECTIONS)
    data = [
        # 52-C3  52-C4  52-C10  52-C11
        [  13.0,  22.0,   18.5,   18.5],  # 1.5
        [  17.5,  29.0,   25.0,   25.0],  # 2.5
        [  23.0,  38.0,   34.0,   34.0],  # 4
        [  29.0,  47.0,   43.0,   43.0],  # 6
        [  39.0,  63.0,   60.0,   60.0],  # 10
        [  52.0,  82.0,   80.0,   80.0],  # 16
        [  68.0, 104.0,  101.0,  110.0],  # 25
        [  83.0, 125.0,  126.0,  137.0],  # 35
        [  99.0, 150.0,  153.0,  167.0],  # 50
        [ 125.0, 188.0,  196.0,  216.0],  # 70
        [ 150.0, 226.0,  238.0,  264.0],  # 95
        [ 172.0, 258.0,  276.0,  308.0],  # 120
        [ 196.0, 292.0,  319.0,  356.0],  # 150
        [ 223.0, 330.0,  364.0,  409.0],  # 185
        [ 261.0, 383.0,  430.0,  485.0],  # 240
        [ 298.0, 435.0,  497.0,  561.0],  # 300
    ]
    description = "current-carrying capacities in amperes, copper, PVC, 3 loaded conductors"
    cols_description = "RTIEBT table id"
    rows_description = "cross-sectional area, mm²"
    table = LookupTable.create(
        row_header,
        col_header,
        data,
        description,
        rows_description,
        cols_description
    )
    # the section searches rely on ampacity increasing with section
    table.check_ascending(axis="rows")
    return table


tbl_ampacity = _create_ampacity_table()

AMPACITY_TABLE_IDS: tuple[str, ...] = tuple(tbl_ampacity.col_header)


def get_table_ampacity(table_id: str, S: float) -> float:
    """
    Returns the tabulated current-carrying capacity in amperes of conductors
    with cross-sectional area `S` (mm²) in table `table_id`.

    Raises
    ------
    DataNotFoundError
        If the table or the section is not in the repository.
    """
    return tbl_ampacity.data_value(S, table_id)
