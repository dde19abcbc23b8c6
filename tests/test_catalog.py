# File: tests/test_catalog.py
"""
Test the catalog.py module to verify material grades and derived properties.
"""

import pytest

from statics_core.catalog import (
    ConcreteMaterial,
    MaterialKind,
    all_materials,
    concrete_grades,
    concrete_modulus,
    get_material,
    materials_by_kind,
    shear_modulus,
    steel_grades,
    strain,
    thermal_expansion,
    unit_weight,
)


def test_concrete_modulus_formula():
    """Ec = 3250·√fck + 14000: C16 → 27000 MPa, C25 → 30250 MPa."""
    assert concrete_modulus(16.0) == pytest.approx(27000.0)
    assert concrete_modulus(25.0) == pytest.approx(30250.0)


def test_shear_modulus_formula():
    assert shear_modulus(200000.0, 0.3) == pytest.approx(76923.0769, rel=1e-8)


def test_concrete_grade_properties():
    c25 = get_material("C25")

    assert isinstance(c25, ConcreteMaterial)
    assert c25.kind is MaterialKind.CONCRETE
    assert c25.grade == "C25/30"
    assert c25.E == pytest.approx(30250.0)
    assert c25.G == pytest.approx(30250.0 / 2.3)
    assert c25.fcd == pytest.approx(25.0 / 1.5)
    assert c25.gamma == 24.0


def test_steel_grade_properties():
    s420 = get_material("S420")
    st37 = get_material("St37")

    assert s420.fyd == pytest.approx(420.0 / 1.15)
    assert s420.E == 200000.0
    assert st37.fyk == 235.0
    assert st37.E == 210000.0


def test_lookup_by_grade_name():
    assert get_material("C30/37") is get_material("C30")
    assert get_material("Al 6061-T6") is get_material("Al6061-T6")


def test_unknown_material():
    with pytest.raises(KeyError):
        get_material("C99")


def test_catalog_listings():
    assert len(all_materials()) == 21
    assert concrete_grades() == ["C16", "C18", "C20", "C25", "C30", "C35", "C40", "C45", "C50"]
    assert steel_grades() == ["S220", "S420", "S500", "St37", "St44", "St52"]
    assert len(materials_by_kind("timber")) == 4
    assert len(materials_by_kind(MaterialKind.ALUMINUM)) == 2


def test_material_is_frozen():
    with pytest.raises(Exception):  # dataclasses.FrozenInstanceError
        get_material("C30").fck = 50.0


def test_helpers():
    assert strain(200.0, 200000.0) == pytest.approx(0.001)
    assert unit_weight(2400.0) == pytest.approx(23.544)
    assert thermal_expansion(10.0, 1.2e-5, 30.0) == pytest.approx(3.6)
