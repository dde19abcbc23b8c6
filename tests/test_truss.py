# File: tests/test_truss.py
"""
TRIANGLE TEST: Validation of the Planar Truss Solver
====================================================

A 6 m wide, 4 m high triangle:
- A (0, 0) pinned, B (6, 0) roller, apex C (3, 4)
- 10 kN downward at C

Method of joints gives:
- Reactions: 5 kN up at A and at B
- AC = BC = -6.25 kN (compression), AB = +3.75 kN (tension)

The stiffness solution must agree because the truss is determinate.
"""

import numpy as np
import pytest

from statics_core.errors import (
    MatrixSolutionError,
    StaticallyIndeterminateError,
    StaticallyUnstableError,
)
from statics_core.presets import TRUSS_PRESETS, get_truss_preset
from statics_core.truss import (
    AxialState,
    TrussLoad,
    TrussMember,
    TrussNode,
    check_truss_determinacy,
    count_truss_unknowns,
    find_zero_force_members,
    max_member_force,
    max_member_stress,
    solve_truss,
)


def make_triangle(load=-10.0, stiffness=None):
    nodes = [
        TrussNode("A", 0.0, 0.0, fixed=True),
        TrussNode("B", 6.0, 0.0, roller=True),
        TrussNode("C", 3.0, 4.0),
    ]
    members = [
        TrussMember("AC", "A", "C", stiffness),
        TrussMember("BC", "B", "C", stiffness),
        TrussMember("AB", "A", "B", stiffness),
    ]
    loads = [TrussLoad("C", fx=0.0, fy=load)]
    return nodes, members, loads


def test_triangle_member_forces():
    result = solve_truss(*make_triangle())

    assert result.force_of("AC").force == pytest.approx(-6.25)
    assert result.force_of("BC").force == pytest.approx(-6.25)
    assert result.force_of("AB").force == pytest.approx(3.75)

    assert result.force_of("AC").state is AxialState.COMPRESSION
    assert result.force_of("BC").state is AxialState.COMPRESSION
    assert result.force_of("AB").state is AxialState.TENSION

    assert result.force_of("AC").length == pytest.approx(5.0)
    assert result.force_of("AB").length == pytest.approx(6.0)


def test_triangle_reactions():
    result = solve_truss(*make_triangle())

    rx_a, ry_a = result.reactions["A"]
    rx_b, ry_b = result.reactions["B"]

    assert ry_a == pytest.approx(5.0)
    assert ry_b == pytest.approx(5.0)
    assert rx_a == pytest.approx(0.0, abs=1e-9)
    assert rx_b == 0.0  # roller: horizontal DOF is free
    assert "C" not in result.reactions


def test_reactions_balance_loads():
    nodes, members, loads = TRUSS_PRESETS["warren"]
    result = solve_truss(nodes, members, loads)

    total_rx = sum(r[0] for r in result.reactions.values())
    total_ry = sum(r[1] for r in result.reactions.values())

    assert total_rx == pytest.approx(-sum(l.fx for l in loads), abs=1e-9)
    assert total_ry == pytest.approx(-sum(l.fy for l in loads))
    # symmetric loading on a symmetric span
    assert result.reactions["A"][1] == pytest.approx(15.0)
    assert result.reactions["B"][1] == pytest.approx(15.0)


def test_forces_independent_of_stiffness():
    """Determinate truss: forces from statics alone; displacements scale with 1/k."""
    soft = solve_truss(*make_triangle(stiffness=1000.0))
    stiff = solve_truss(*make_triangle(stiffness=2000.0))

    for a, b in zip(soft.member_forces, stiff.member_forces):
        assert a.force == pytest.approx(b.force)

    ux_soft, uy_soft = soft.displacements["C"]
    ux_stiff, uy_stiff = stiff.displacements["C"]
    assert uy_stiff == pytest.approx(uy_soft / 2.0)
    assert uy_soft < 0.0
    assert soft.displacements["A"] == (0.0, 0.0)


def test_default_stiffness_matches_explicit_default():
    implicit = solve_truss(*make_triangle())
    explicit = solve_truss(*make_triangle(stiffness=1000.0))

    np.testing.assert_allclose(implicit.displacements["C"], explicit.displacements["C"])


def test_no_loads_gives_zero_forces():
    nodes, members, _ = make_triangle()
    result = solve_truss(nodes, members)

    assert all(mf.force == 0.0 for mf in result.member_forces)


def test_horizontal_load():
    """10 kN to the right at the apex: the pin takes all of it horizontally."""
    nodes, members, _ = make_triangle()
    result = solve_truss(nodes, members, [TrussLoad("C", fx=10.0)])

    assert result.reactions["A"][0] == pytest.approx(-10.0)
    # moments about A: R_B·6 - 10·4 = 0
    assert result.reactions["B"][1] == pytest.approx(40.0 / 6.0)
    assert result.reactions["A"][1] == pytest.approx(-40.0 / 6.0)


def test_unstable_truss():
    nodes, members, loads = make_triangle()
    with pytest.raises(StaticallyUnstableError) as excinfo:
        solve_truss(nodes, members[:2], loads)

    assert excinfo.value.unknowns == 5
    assert excinfo.value.equations == 6


def test_indeterminate_truss():
    nodes, members, loads = make_triangle()
    nodes[1] = TrussNode("B", 6.0, 0.0, fixed=True)

    assert count_truss_unknowns(nodes, members) == 7
    with pytest.raises(StaticallyIndeterminateError) as excinfo:
        solve_truss(nodes, members, loads)
    assert "Unknowns: 7, Equations: 6" in str(excinfo.value)


def test_collinear_truss_is_singular():
    """Three nodes on a line: the counts work out but the middle node has no vertical stiffness."""
    nodes = [
        TrussNode("A", 0.0, 0.0, fixed=True),
        TrussNode("B", 2.0, 0.0),
        TrussNode("C", 4.0, 0.0, roller=True),
    ]
    members = [
        TrussMember("AB", "A", "B"),
        TrussMember("BC", "B", "C"),
        TrussMember("AC", "A", "C"),
    ]
    with pytest.raises(MatrixSolutionError):
        solve_truss(nodes, members, [TrussLoad("B", fy=-1.0)])


def test_zero_length_member():
    nodes = [
        TrussNode("A", 0.0, 0.0, fixed=True),
        TrussNode("B", 6.0, 0.0, roller=True),
        TrussNode("C", 0.0, 0.0),
    ]
    members = [
        TrussMember("AC", "A", "C"),
        TrussMember("BC", "B", "C"),
        TrussMember("AB", "A", "B"),
    ]
    with pytest.raises(ValueError):
        solve_truss(nodes, members)


def test_unknown_node_references():
    nodes, members, loads = make_triangle()
    members[2] = TrussMember("AZ", "A", "Z")
    with pytest.raises(ValueError):
        solve_truss(nodes, members, loads)

    nodes, members, _ = make_triangle()
    with pytest.raises(ValueError):
        solve_truss(nodes, members, [TrussLoad("Z", fy=-1.0)])


def test_node_cannot_be_fixed_and_roller():
    with pytest.raises(ValueError):
        TrussNode("A", 0.0, 0.0, fixed=True, roller=True)


def test_max_member_force():
    result = solve_truss(*make_triangle())
    worst = max_member_force(result)

    assert worst.member_id in ("AC", "BC")
    assert abs(worst.force) == pytest.approx(6.25)


def test_zero_force_members_two_member_joint():
    nodes, members, _ = make_triangle()
    assert find_zero_force_members(nodes, members) == ["AC", "BC"]

    nodes, members, loads = make_triangle()
    assert find_zero_force_members(nodes, members, loads) == []


def test_zero_force_members_collinear_pair():
    """
    Bottom chord A-D-B with a vertical D-C: at the unloaded joint D the chord
    halves are collinear, so DC carries nothing.
    """
    nodes = [
        TrussNode("A", 0.0, 0.0, fixed=True),
        TrussNode("B", 4.0, 0.0, roller=True),
        TrussNode("D", 2.0, 0.0),
        TrussNode("C", 2.0, 2.0),
    ]
    members = [
        TrussMember("AD", "A", "D"),
        TrussMember("DB", "D", "B"),
        TrussMember("AC", "A", "C"),
        TrussMember("BC", "B", "C"),
        TrussMember("DC", "D", "C"),
    ]
    loads = [TrussLoad("C", fy=-10.0)]

    assert find_zero_force_members(nodes, members, loads) == ["DC"]

    result = solve_truss(nodes, members, loads)
    assert result.force_of("DC").force == pytest.approx(0.0, abs=1e-9)


def test_truss_presets_solve():
    for key, (nodes, members, loads) in TRUSS_PRESETS.items():
        result = solve_truss(nodes, members, loads)
        assert len(result.member_forces) == len(members), key


def test_warren_preset_reactions():
    """Three 10 kN panel loads, symmetric about midspan: 15 kN at each support."""
    nodes, members, loads = get_truss_preset("warren")
    check_truss_determinacy(nodes, members)

    result = solve_truss(nodes, members, loads)
    assert result.reactions["A"][1] == pytest.approx(15.0)
    assert result.reactions["B"][1] == pytest.approx(15.0)
    assert result.reactions["A"][0] == pytest.approx(0.0, abs=1e-9)

    with pytest.raises(KeyError):
        get_truss_preset("pratt")


def steel_triangle(areas=(500.0, 500.0, 500.0)):
    """The triangle with E = 200 000 MPa members, so k = EA/L."""
    nodes, _, loads = make_triangle()
    a_ac, a_bc, a_ab = areas
    members = [
        TrussMember("AC", "A", "C", E=200000.0, A=a_ac),
        TrussMember("BC", "B", "C", E=200000.0, A=a_bc),
        TrussMember("AB", "A", "B", E=200000.0, A=a_ab),
    ]
    return nodes, members, loads


def test_member_stress_strain_deformation():
    """
    AB: 3.75 kN on 500 mm² → 7.5 MPa, ε = 3.75e-5, over 6000 mm → 0.225 mm.
    AC: -6.25 kN → -12.5 MPa, over 5000 mm → -0.3125 mm.
    """
    result = solve_truss(*steel_triangle())

    ab = result.force_of("AB")
    assert ab.stress == pytest.approx(7.5)
    assert ab.strain == pytest.approx(3.75e-5)
    assert ab.deformation == pytest.approx(0.225)

    ac = result.force_of("AC")
    assert ac.stress == pytest.approx(-12.5)
    assert ac.deformation == pytest.approx(-0.3125)


def test_stiffness_from_E_and_A_matches_deformation():
    """With k = EA/L the solved stretch of AB (A pinned, B on a roller) equals ε·L."""
    result = solve_truss(*steel_triangle())

    ux_b, _ = result.displacements["B"]
    assert ux_b * 1000.0 == pytest.approx(result.force_of("AB").deformation)


def test_default_section_gives_stress():
    """Members without E or A use 200 000 MPa and 500 mm² for stress."""
    result = solve_truss(*make_triangle())
    assert result.force_of("AB").stress == pytest.approx(7.5)


def test_max_member_stress():
    """The small AB bar governs stress although AC and BC carry more force."""
    result = solve_truss(*steel_triangle(areas=(1000.0, 500.0, 100.0)))
    worst = max_member_stress(result)

    assert worst.member_id == "AB"
    assert worst.stress == pytest.approx(37.5)
    assert max_member_force(result).member_id in ("AC", "BC")


def test_member_properties_must_be_positive():
    with pytest.raises(ValueError):
        TrussMember("AB", "A", "B", E=0.0)
    with pytest.raises(ValueError):
        TrussMember("AB", "A", "B", A=-500.0)
    with pytest.raises(ValueError):
        TrussMember("AB", "A", "B", stiffness=0.0)


def test_solve_truss_is_idempotent():
    nodes, members, loads = make_triangle()
    assert solve_truss(nodes, members, loads) == solve_truss(nodes, members, loads)


def test_wide_stiffness_range_still_solves():
    """Stiffnesses six orders apart are well inside the pivot tolerance."""
    nodes, _, loads = make_triangle()
    members = [
        TrussMember("AC", "A", "C", 1e6),
        TrussMember("BC", "B", "C", 1.0),
        TrussMember("AB", "A", "B", 1.0),
    ]
    result = solve_truss(nodes, members, loads)

    assert result.force_of("AC").force == pytest.approx(-6.25)
    assert result.force_of("BC").force == pytest.approx(-6.25)
    assert result.force_of("AB").force == pytest.approx(3.75)


def test_extreme_stiffness_range_is_rejected():
    """1e12 next to 1e-3 is below the relative pivot tolerance: reported as ill-conditioned."""
    nodes, _, loads = make_triangle()
    members = [
        TrussMember("AC", "A", "C", 1e12),
        TrussMember("BC", "B", "C", 1e-3),
        TrussMember("AB", "A", "B", 1e-3),
    ]
    with pytest.raises(MatrixSolutionError, match="ill-conditioned"):
        solve_truss(nodes, members, loads)
