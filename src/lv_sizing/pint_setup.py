from __future__ import annotations

import pint
from pint.facets.plain.quantity import PlainQuantity as Quantity

UNITS = pint.UnitRegistry()

Q_ = UNITS.Quantity

for ud in [
    'fraction = [] = frac',
    'percent = 1e-2 frac = % = pct',
]:
    UNITS.define(ud)

pint.set_application_registry(UNITS)

__all__ = ["UNITS", "Q_", "Quantity", "to_magnitude"]


def to_magnitude(value: float | Quantity, units: str) -> float:
    """
    Returns the magnitude of `value` expressed in `units`. Plain numbers are
    assumed to be expressed in `units` already.
    """
    if isinstance(value, Quantity):
        return float(value.to(units).m)
    return float(value)
