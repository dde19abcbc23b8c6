# statics_core/checks/stress.py
"""Allowable-stress checks against the design strengths of catalog materials."""

from dataclasses import dataclass

from ..catalog import (
    AluminumMaterial,
    ConcreteMaterial,
    Material,
    SteelMaterial,
    TimberMaterial,
)

GAMMA_M_ALUMINUM = 1.1
GAMMA_M_TIMBER = 1.3


@dataclass(frozen=True)
class StressCheck:
    """Stress (MPa), its limit, stress/limit and whether stress <= limit."""
    stress: float
    limit: float
    ratio: float
    is_safe: bool


def _check(stress: float, limit: float) -> StressCheck:
    return StressCheck(stress=stress, limit=limit, ratio=stress / limit, is_safe=stress <= limit)


def compressive_limit(material: Material) -> float:
    """
    Design compressive strength:
        concrete fcd, steel fyd, aluminum fy / 1.1, timber fck / 1.3
    """
    if isinstance(material, ConcreteMaterial):
        return material.fcd
    if isinstance(material, SteelMaterial):
        return material.fyd
    if isinstance(material, AluminumMaterial):
        return material.fy / GAMMA_M_ALUMINUM
    if isinstance(material, TimberMaterial):
        return material.fck / GAMMA_M_TIMBER
    raise TypeError(f"Unknown material type: {type(material).__name__}")


def bending_limit(material: Material) -> float:
    """
    Design bending strength:
        steel fyd, aluminum fy / 1.1, concrete fcd, timber ft / 1.3
    """
    if isinstance(material, SteelMaterial):
        return material.fyd
    if isinstance(material, AluminumMaterial):
        return material.fy / GAMMA_M_ALUMINUM
    if isinstance(material, ConcreteMaterial):
        return material.fcd
    if isinstance(material, TimberMaterial):
        return material.ft / GAMMA_M_TIMBER
    raise TypeError(f"Unknown material type: {type(material).__name__}")


def check_compressive_stress(stress: float, material: Material) -> StressCheck:
    """
    Compare a compressive stress (MPa, positive) with the material limit.

    >>> from statics_core.catalog import get_material
    >>> check_compressive_stress(10.0, get_material("C30")).ratio
    0.5
    """
    return _check(stress, compressive_limit(material))


def check_bending_stress(moment: float, section_modulus: float, material: Material) -> StressCheck:
    """
    Bending stress σ = M / W against the material limit.

    Args:
        moment: Bending moment (kNm)
        section_modulus: Elastic section modulus W (mm³)
        material: Catalog material

    Returns:
        StressCheck with stress = M·10⁶ / W (MPa)
    """
    if section_modulus <= 0:
        raise ValueError(f"Section modulus must be positive, got {section_modulus}")
    stress = moment * 1e6 / section_modulus
    return _check(stress, bending_limit(material))
