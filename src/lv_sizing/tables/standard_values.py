from ..utils.lookup_table import LookupTable

__all__ = [
    "STANDARD_SECTIONS",
    "CIRCUIT_BREAKERS",
    "STANDARD_KVA_VALUES",
    "tbl_simultaneity",
    "simultaneity_factor",
    "next_standard_section",
]


# nominal cross-sectional areas of conductors, mm²
STANDARD_SECTIONS: tuple[float, ...] = (
    1.5, 2.5, 4, 6, 10, 16, 25, 35, 50, 70, 95, 120, 150, 185, 240, 300
)

# rated currents of circuit breakers, A
CIRCUIT_BREAKERS: tuple[float, ...] = (
    6, 10, 16, 20, 25, 32, 40, 50, 63, 80, 100, 125, 160, 200, 250, 315, 400,
    500, 630
)

# contracted apparent power of dwellings, kVA
STANDARD_KVA_VALUES: tuple[float, ...] = (
    1.15, 2.3, 3.45, 4.6, 5.75, 6.9, 10.35, 13.8, 17.25, 20.7, 27.6, 34.5, 41.4
)


def _create_simultaneity_table() -> LookupTable:
    """
    Simultaneity factors for the supply of residential buildings as a function
    of the number of dwellings downstream (RTIEBT Quadro 803A). The column
    header holds the lower bound of each range of dwellings.
    """
    col_header = {
        1: "1",
        2: "2 a 4",
        5: "5 a 9",
        10: "10 a 14",
        15: "15 a 19",
        20: "20 a 24",
        25: "25 a 29",
        30: "30 a 34",
        35: "35 a 39",
        40: "40 a 49",
        50: "≥ 50"
    }
    data = [[1.00, 1.00, 0.75, 0.56, 0.48, 0.43, 0.40, 0.38, 0.37, 0.36, 0.34]]
    return LookupTable.create(
        ["Ks"],
        col_header,
        data,
        "simultaneity factors for residential buildings (Quadro 803A)",
        "simultaneity factor",
        "number of dwellings"
    )

tbl_simultaneity = _create_simultaneity_table()


def simultaneity_factor(num_dwellings: int) -> float:
    """
    Returns the simultaneity factor Ks for a feeder supplying the given number
    of dwellings.

    Raises
    ------
    ValueError
        If the number of dwellings is smaller than 1.
    """
    if num_dwellings < 1:
        raise ValueError("The number of dwellings must be at least 1.")
    lower_bound = tbl_simultaneity.colheader_value("Ks", num_dwellings, above=False)
    return tbl_simultaneity.data_value("Ks", lower_bound)


def next_standard_section(S: float) -> float:
    """
    Rounds the given cross-sectional area up to the nearest standard section.
    Areas above the largest standard section are returned unchanged.
    """
    return next((s for s in STANDARD_SECTIONS if s >= S), S)
