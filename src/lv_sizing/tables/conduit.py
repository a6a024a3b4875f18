"""
Minimum outer diameter in mm of the conduit that accommodates a number of
insulated conductors of the same cross-sectional area (RTIEBT Quadro 803C).
"""
from .standard_values import STANDARD_SECTIONS
from ..utils.lookup_table import LookupTable

__all__ = [
    "tbl_conduit_diameter",
]


def _create_conduit_table() -> LookupTable:
    col_header = [3, 5]  # number of conductors
    row_header = list(STANDARD_SECTIONS)
    data = [
        [16, 20],    # 1.5
        [20, 25],    # 2.5
        [25, 32],    # 4
        [25, 32],    # 6
        [32, 40],    # 10
        [40, 50],    # 16
        [50, 63],    # 25
        [50, 63],    # 35
        [63, 75],    # 50
        [75, 90],    # 70
        [90, 110],   # 95
        [90, 110],   # 120
        [110, 125],  # 150
        [110, 125],  # 185
        [125, 140],  # 240
        [140, 160],  # 300
    ]
    return LookupTable.create(
        row_header,
        col_header,
        data,
        "conduit diameters in mm (Quadro 803C)",
        "cross-sectional area, mm²",
        "number of conductors"
    )


tbl_conduit_diameter = _create_conduit_table()
