# statics_core/combinations.py
"""
LOAD COMBINATIONS
=================

Factored (ultimate) and unfactored (serviceability) combinations of
characteristic load effects:

    value = Σ factor_i × load_i

G dead, Q live, W wind, S snow, E seismic. A combination that names a
load symbol missing from the input treats that load as zero; input keys
that are not load symbols are ignored. Combination factors, on the other
hand, must use known symbols.

The governing combination is the ULTIMATE one with the largest absolute
value.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Mapping, Optional, Union

logger = logging.getLogger(__name__)


class LoadSymbol(Enum):
    G = "G"  # dead
    Q = "Q"  # live
    W = "W"  # wind
    S = "S"  # snow
    E = "E"  # seismic


LoadKey = Union[LoadSymbol, str]


def _symbol(key: LoadKey) -> LoadSymbol:
    if isinstance(key, LoadSymbol):
        return key
    try:
        return LoadSymbol(str(key).upper())
    except ValueError:
        raise KeyError(f"Unknown load symbol: {key!r}") from None


def _normalize(loads: Mapping[LoadKey, float]) -> Dict[LoadSymbol, float]:
    """Load effects keyed by symbol; keys that name no load symbol are skipped."""
    values: Dict[LoadSymbol, float] = {}
    for key, value in loads.items():
        try:
            sym = _symbol(key)
        except KeyError:
            logger.debug("Ignoring unknown load symbol %r", key)
            continue
        values[sym] = values.get(sym, 0.0) + float(value)
    return values


@dataclass(frozen=True)
class LoadCombination:
    """
    One weighted sum of load effects.

    factors maps a load symbol to its partial factor; letters are
    accepted and converted.
    """
    id: str
    name: str
    factors: Mapping[LoadSymbol, float]
    is_ultimate: bool
    description: str = ""

    def __post_init__(self):
        object.__setattr__(
            self, "factors", {_symbol(k): float(v) for k, v in self.factors.items()}
        )

    @property
    def formula(self) -> str:
        """e.g. ``1.35 × G + 1.5 × Q``"""
        return " + ".join(f"{f:g} × {sym.value}" for sym, f in self.factors.items())


@dataclass(frozen=True)
class CombinationResult:
    """
    Evaluated combination.

    terms maps each symbol of the combination to (load value, factor).
    """
    id: str
    name: str
    value: float
    is_ultimate: bool
    terms: Dict[LoadSymbol, tuple] = field(default_factory=dict)


STANDARD_COMBINATIONS: List[LoadCombination] = [
    # Ultimate limit state
    LoadCombination("ULS-1", "1.35G + 1.5Q", {"G": 1.35, "Q": 1.5}, True,
                    "Dead + live"),
    LoadCombination("ULS-2", "1.35G + 1.5Q + 1.5W", {"G": 1.35, "Q": 1.5, "W": 1.5}, True,
                    "Dead + live + wind"),
    LoadCombination("ULS-3", "1.35G + 1.5W", {"G": 1.35, "W": 1.5}, True,
                    "Dead + wind, no live load"),
    LoadCombination("ULS-4", "1.0G + 1.5Q", {"G": 1.0, "Q": 1.5}, True,
                    "Favourable dead + live"),
    LoadCombination("ULS-5", "1.35G + 1.5S", {"G": 1.35, "S": 1.5}, True,
                    "Dead + snow"),
    LoadCombination("ULS-6", "1.35G + 1.5Q + 1.5S", {"G": 1.35, "Q": 1.5, "S": 1.5}, True,
                    "Dead + live + snow"),
    LoadCombination("ULS-seismic", "G + 0.3Q + E", {"G": 1.0, "Q": 0.3, "E": 1.0}, True,
                    "Dead + partial live + seismic"),
    # Serviceability limit state
    LoadCombination("SLS-1", "G + Q", {"G": 1.0, "Q": 1.0}, False,
                    "Characteristic dead + live"),
    LoadCombination("SLS-2", "G + 0.6Q + W", {"G": 1.0, "Q": 0.6, "W": 1.0}, False,
                    "Dead + partial live + wind"),
    LoadCombination("SLS-3", "G + 0.5S", {"G": 1.0, "S": 0.5}, False,
                    "Dead + partial snow"),
    LoadCombination("SLS-rare", "G + 0.7Q + 0.5W", {"G": 1.0, "Q": 0.7, "W": 0.5}, False,
                    "Rare combination"),
]


def evaluate_combination(combo: LoadCombination, loads: Mapping[LoadKey, float]) -> CombinationResult:
    """Substitute load values into one combination."""
    values = _normalize(loads)
    total = 0.0
    terms = {}
    for sym, factor in combo.factors.items():
        value = values.get(sym, 0.0)
        total += factor * value
        terms[sym] = (value, factor)

    return CombinationResult(
        id=combo.id,
        name=combo.name,
        value=total,
        is_ultimate=combo.is_ultimate,
        terms=terms,
    )


def evaluate_all(
    loads: Mapping[LoadKey, float],
    combinations: Optional[List[LoadCombination]] = None,
) -> List[CombinationResult]:
    """
    Evaluate every combination of the catalog, in catalog order.

    >>> [r.value for r in evaluate_all({"G": 10.0})][:2]
    [13.5, 13.5]
    """
    catalog = STANDARD_COMBINATIONS if combinations is None else combinations
    return [evaluate_combination(c, loads) for c in catalog]


def find_critical_combination(
    loads: Mapping[LoadKey, float],
    combinations: Optional[List[LoadCombination]] = None,
) -> Optional[CombinationResult]:
    """
    Governing ultimate combination: largest |value|, first in catalog
    order on ties. None when the catalog has no ultimate combination.
    """
    ultimate = [r for r in evaluate_all(loads, combinations) if r.is_ultimate]
    if not ultimate:
        return None
    critical = max(ultimate, key=lambda r: abs(r.value))
    logger.debug("Critical combination %s = %.3f", critical.id, critical.value)
    return critical


def ultimate_combinations() -> List[LoadCombination]:
    return [c for c in STANDARD_COMBINATIONS if c.is_ultimate]


def serviceability_combinations() -> List[LoadCombination]:
    return [c for c in STANDARD_COMBINATIONS if not c.is_ultimate]


def get_combination(combo_id: str) -> LoadCombination:
    """Catalog entry by id. Raises KeyError for an unknown id."""
    for c in STANDARD_COMBINATIONS:
        if c.id == combo_id:
            return c
    raise KeyError(f"Unknown combination: {combo_id!r}")


@dataclass(frozen=True)
class Utilization:
    ratio: float
    is_safe: bool

    @property
    def percentage(self) -> str:
        return f"{self.ratio * 100:.1f}%"


def utilization_ratio(load: float, resistance: float) -> Utilization:
    """|load| / resistance; safe when the ratio does not exceed 1."""
    if resistance <= 0:
        raise ValueError(f"Resistance must be positive, got {resistance}")
    ratio = abs(load) / resistance
    return Utilization(ratio=ratio, is_safe=ratio <= 1.0)


# Basic wind pressure (kN/m²) by building height (m)
WIND_PRESSURE_TABLE = [
    (8.0, 0.50),
    (10.0, 0.60),
    (20.0, 0.80),
    (30.0, 0.95),
    (50.0, 1.15),
]


def wind_pressure(height: float, cf: float = 1.0) -> float:
    """
    Design wind pressure cf × q (kN/m²).

    q is interpolated linearly in the height table, held at the first
    value below 8 m and at the last value above 50 m.
    """
    heights = [h for h, _ in WIND_PRESSURE_TABLE]
    q = WIND_PRESSURE_TABLE[0][1]
    if height > heights[-1]:
        q = WIND_PRESSURE_TABLE[-1][1]
    else:
        for (h1, q1), (h2, q2) in zip(WIND_PRESSURE_TABLE[:-1], WIND_PRESSURE_TABLE[1:]):
            if h1 <= height <= h2:
                q = q1 + (q2 - q1) * (height - h1) / (h2 - h1)
                break
    return cf * q


def snow_load(altitude: float, ce: float = 1.0) -> float:
    """Ground snow load ce × max(0.75, 0.75 + 0.0015·altitude) (kN/m²)."""
    return ce * max(0.75, 0.75 + altitude * 0.0015)


CONCRETE_UNIT_WEIGHT = 24.0  # kN/m³
STEEL_UNIT_WEIGHT = 78.5     # kN/m³


def dead_load(concrete_volume: float, steel_volume: float, other: float = 0.0) -> float:
    """Self weight (kN) from concrete and steel volumes (m³) plus other weight."""
    return concrete_volume * CONCRETE_UNIT_WEIGHT + steel_volume * STEEL_UNIT_WEIGHT + other
