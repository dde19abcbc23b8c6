# statics_core/catalog.py
"""
CATALOG: MATERIAL GRADES AND DERIVED PROPERTIES
===============================================

Standard grades looked up by key ("C30", "S420", "Pine", "Al6061-T6")
or by grade name ("C30/37", "Al 6061-T6") instead of repeating
E, fyk, fck... in every calculation.

UNITS:
------
- Stresses and moduli: MPa
- Unit weight gamma: kN/m³
- Thermal coefficient alpha: 1/°C

DERIVED PROPERTIES:
-------------------
- Concrete modulus (TS 500):  Ec = 3250·√fck + 14000
- Shear modulus:              G  = E / (2·(1 + ν))
- Design strengths:           fcd = fck / 1.5,  fyd = fyk / 1.15
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Union


class MaterialKind(Enum):
    CONCRETE = "concrete"
    STEEL = "steel"
    TIMBER = "timber"
    ALUMINUM = "aluminum"


GAMMA_CONCRETE = 1.5  # partial factor on fck
GAMMA_STEEL = 1.15    # partial factor on fyk


def concrete_modulus(fck: float) -> float:
    """Ec = 3250·√fck + 14000 (MPa)."""
    return 3250.0 * math.sqrt(fck) + 14000.0


def shear_modulus(E: float, nu: float) -> float:
    """G = E / (2·(1 + ν))."""
    return E / (2.0 * (1.0 + nu))


@dataclass(frozen=True)
class ConcreteMaterial:
    grade: str
    fck: float
    fcd: float
    tensile_strength: float
    E: float
    G: float
    nu: float
    alpha: float
    gamma: float
    kind: MaterialKind = MaterialKind.CONCRETE


@dataclass(frozen=True)
class SteelMaterial:
    grade: str
    fyk: float
    fyd: float
    fuk: float
    E: float
    G: float
    nu: float
    alpha: float
    gamma: float
    kind: MaterialKind = MaterialKind.STEEL


@dataclass(frozen=True)
class TimberMaterial:
    grade: str
    fck: float
    ft: float
    E: float
    G: float
    nu: float
    alpha: float
    gamma: float
    kind: MaterialKind = MaterialKind.TIMBER


@dataclass(frozen=True)
class AluminumMaterial:
    grade: str
    fy: float
    E: float
    G: float
    nu: float
    alpha: float
    gamma: float
    kind: MaterialKind = MaterialKind.ALUMINUM


Material = Union[ConcreteMaterial, SteelMaterial, TimberMaterial, AluminumMaterial]


def _concrete(grade: str, fck: float, fctm: float) -> ConcreteMaterial:
    E = concrete_modulus(fck)
    return ConcreteMaterial(
        grade=grade, fck=fck, fcd=fck / GAMMA_CONCRETE, tensile_strength=fctm,
        E=E, G=shear_modulus(E, 0.15), nu=0.15, alpha=1e-5, gamma=24.0,
    )


def _steel(grade: str, fyk: float, fuk: float, E: float) -> SteelMaterial:
    return SteelMaterial(
        grade=grade, fyk=fyk, fyd=fyk / GAMMA_STEEL, fuk=fuk,
        E=E, G=shear_modulus(E, 0.3), nu=0.3, alpha=1.2e-5, gamma=78.5,
    )


def _timber(grade: str, fck: float, ft: float, E: float, alpha: float, gamma: float) -> TimberMaterial:
    return TimberMaterial(
        grade=grade, fck=fck, ft=ft,
        E=E, G=shear_modulus(E, 0.35), nu=0.35, alpha=alpha, gamma=gamma,
    )


def _aluminum(grade: str, fy: float, E: float, gamma: float) -> AluminumMaterial:
    return AluminumMaterial(
        grade=grade, fy=fy,
        E=E, G=shear_modulus(E, 0.33), nu=0.33, alpha=2.3e-5, gamma=gamma,
    )


CONCRETE_MATERIALS: Dict[str, ConcreteMaterial] = {
    "C16": _concrete("C16/20", 16.0, 1.5),
    "C18": _concrete("C18/22.5", 18.0, 1.6),
    "C20": _concrete("C20/25", 20.0, 1.8),
    "C25": _concrete("C25/30", 25.0, 2.0),
    "C30": _concrete("C30/37", 30.0, 2.2),
    "C35": _concrete("C35/45", 35.0, 2.5),
    "C40": _concrete("C40/50", 40.0, 2.7),
    "C45": _concrete("C45/55", 45.0, 2.9),
    "C50": _concrete("C50/60", 50.0, 3.1),
}

# Reinforcing bars (E = 200 GPa) and structural steel (E = 210 GPa)
STEEL_MATERIALS: Dict[str, SteelMaterial] = {
    "S220": _steel("S220", 220.0, 340.0, 200000.0),
    "S420": _steel("S420", 420.0, 500.0, 200000.0),
    "S500": _steel("S500", 500.0, 600.0, 200000.0),
    "St37": _steel("St37", 235.0, 360.0, 210000.0),
    "St44": _steel("St44", 275.0, 430.0, 210000.0),
    "St52": _steel("St52", 355.0, 510.0, 210000.0),
}

TIMBER_MATERIALS: Dict[str, TimberMaterial] = {
    "Pine": _timber("Pine", 20.0, 12.0, 11000.0, 5e-6, 5.0),
    "Oak": _timber("Oak", 35.0, 25.0, 14000.0, 4e-6, 7.0),
    "Beech": _timber("Beech", 45.0, 30.0, 16000.0, 5e-6, 7.5),
    "Spruce": _timber("Spruce", 25.0, 15.0, 12000.0, 5e-6, 4.5),
}

ALUMINUM_MATERIALS: Dict[str, AluminumMaterial] = {
    "Al6061-T6": _aluminum("Al 6061-T6", 240.0, 69000.0, 27.0),
    "Al7075-T6": _aluminum("Al 7075-T6", 503.0, 71000.0, 28.0),
}

_BY_KIND = {
    MaterialKind.CONCRETE: CONCRETE_MATERIALS,
    MaterialKind.STEEL: STEEL_MATERIALS,
    MaterialKind.TIMBER: TIMBER_MATERIALS,
    MaterialKind.ALUMINUM: ALUMINUM_MATERIALS,
}


def all_materials() -> List[Material]:
    """Every grade, concrete first, then steel, timber and aluminum."""
    result: List[Material] = []
    for table in _BY_KIND.values():
        result.extend(table.values())
    return result


def materials_by_kind(kind: Union[MaterialKind, str]) -> List[Material]:
    return list(_BY_KIND[MaterialKind(kind)].values())


def get_material(key: str) -> Material:
    """
    Look up a material by catalog key or grade name.

    >>> get_material("C30").grade
    'C30/37'
    >>> get_material("C30/37").fck
    30.0

    Raises:
        KeyError: unknown key or grade
    """
    for table in _BY_KIND.values():
        if key in table:
            return table[key]
    for material in all_materials():
        if material.grade == key:
            return material
    raise KeyError(f"Unknown material: {key!r}")


def concrete_grades() -> List[str]:
    return list(CONCRETE_MATERIALS)


def steel_grades() -> List[str]:
    return list(STEEL_MATERIALS)


def strain(stress: float, E: float) -> float:
    """ε = σ / E."""
    return stress / E


def unit_weight(density: float) -> float:
    """Unit weight (kN/m³) from density (kg/m³): γ = ρ·g / 1000."""
    return density * 9.81 / 1000.0


def thermal_expansion(length: float, alpha: float, delta_t: float) -> float:
    """Free elongation ΔL = L·α·ΔT in mm, for L in m."""
    return length * 1000.0 * alpha * delta_t
