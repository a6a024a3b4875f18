"""
Correction factors for the current-carrying capacity of conductors at
installation conditions that differ from the reference conditions of the
ampacity tables.

References
----------
RTIEBT, secção 52, Quadros 52-D1 (ambient temperature) and 52-E1 (groups of
circuits).
"""
from ..utils.lookup_table import LookupTable

__all__ = [
    "tbl_temperature_correction",
    "tbl_group_correction",
]


def _create_temperature_correction_table() -> LookupTable:
    """
    Correction factors for ambient temperatures other than 30 °C. PVC is not
    rated for ambient temperatures above 60 °C.
    """
    col_header = [10, 15, 20, 25, 30, 35, 40, 45, 50, 55, 60, 65, 70, 75, 80]
    row_header = {
        "PVC": "thermoplastic insulation, 70 °C",
        "XLPE": "thermosetting insulation (XLPE/EPR), 90 °C"
    }
    data = [
        [1.22, 1.17, 1.12, 1.06, 1.00, 0.94, 0.87, 0.79, 0.71, 0.61, 0.50],
        [1.15, 1.12, 1.08, 1.04, 1.00, 0.96, 0.91, 0.87, 0.82, 0.76, 0.71, 0.65, 0.58, 0.50, 0.41]
    ]
    return LookupTable.create(
        row_header,
        col_header,
        data,
        "correction factors for ambient temperature",
        "type of insulation",
        "ambient temperature, °C"
    )


def _create_group_correction_table() -> LookupTable:
    """
    Reduction factors for groups of more than one circuit or multicore cable
    bunched in air, on a surface, embedded or enclosed.
    """
    col_header = [1, 2, 3, 4, 5, 6, 7, 8, 9, 12, 16, 20]  # number of circuits
    row_header = {1: "Bunched in air, on a surface, embedded or enclosed"}
    data = [
        [1.00, 0.80, 0.70, 0.65, 0.60, 0.57, 0.54, 0.52, 0.50, 0.45, 0.41, 0.38]
    ]
    return LookupTable.create(
        row_header,
        col_header,
        data,
        "reduction factors for groups of circuits",
        "method of installation",
        "number of circuits or multicore cables"
    )


tbl_temperature_correction = _create_temperature_correction_table()
tbl_group_correction = _create_group_correction_table()
