# statics_core/units.py
"""Conversion between the SI units used by the solvers and common alternatives."""

from typing import Dict, Tuple

from .errors import UnsupportedUnitConversionError

# (from, to) → multiplier; every pair also works in reverse
_FACTORS: Dict[Tuple[str, str], float] = {
    ("kN", "kgf"): 101.97,
    ("MPa", "psi"): 145.038,
    ("m", "ft"): 3.28084,
}

CONVERSIONS: Dict[Tuple[str, str], float] = dict(_FACTORS)
CONVERSIONS.update({(b, a): 1.0 / f for (a, b), f in _FACTORS.items()})


def convert_units(value: float, from_unit: str, to_unit: str) -> float:
    """
    Convert ``value`` and round to 4 decimals.

    >>> convert_units(1.0, "kN", "kgf")
    101.97

    Raises:
        UnsupportedUnitConversionError: no factor for the pair
    """
    try:
        factor = CONVERSIONS[(from_unit, to_unit)]
    except KeyError:
        raise UnsupportedUnitConversionError(from_unit, to_unit) from None
    return round(value * factor, 4)
