# statics_core/truss/solver.py
"""
TRUSS SOLVER: Direct Stiffness Method for Planar Pin-Jointed Trusses
===================================================================

Every member is a two-force bar with axial stiffness k = EA/L. Each node
has two translations (ux, uy), so a truss of n nodes has 2n equations.

PROCEDURE:
----------
1. Determinacy: unknowns = members + 2·(fixed nodes) + 1·(roller nodes)
   must equal 2·nodes
2. Assemble the 2n × 2n stiffness matrix from the member blocks
3. Build F from the nodal loads (zero when none are given)
4. Eliminate the restrained DOFs and solve K_ff·u_f = F_f by LU
5. Member forces N = k·[(ubx - uax)·c + (uby - uay)·s], then
   stress N·1000/A, strain σ/E and deformation ε·L per member
6. Reactions R = K·u - F at the restrained DOFs

A singular reduced matrix means a mechanism (collinear bars meeting at
an unbraced joint, a missing diagonal...) and raises MatrixSolutionError.
"""

import logging
from typing import Dict, Hashable, List, Optional, Sequence

import numpy as np

from ..config import CONFIG
from ..errors import StaticallyIndeterminateError, StaticallyUnstableError
from ..kernel import DOFManager, add_nodal_load, assemble_global_K, solve_linear
from .elements import axial_force, element_geometry, truss_global_stiffness
from .model import AxialState, MemberForce, TrussLoad, TrussMember, TrussNode, TrussResult

logger = logging.getLogger(__name__)

DOF_PER_NODE = 2


def count_truss_unknowns(nodes: Sequence[TrussNode], members: Sequence[TrussMember]) -> int:
    return len(members) + sum(n.n_reactions for n in nodes)


def check_truss_determinacy(nodes: Sequence[TrussNode], members: Sequence[TrussMember]) -> None:
    """
    m + r = 2j test.

    Raises:
        StaticallyIndeterminateError: m + r > 2j
        StaticallyUnstableError: m + r < 2j
    """
    unknowns = count_truss_unknowns(nodes, members)
    equations = DOF_PER_NODE * len(nodes)
    logger.debug("Truss determinacy: %d unknowns, %d equations", unknowns, equations)

    if unknowns > equations:
        raise StaticallyIndeterminateError(unknowns, equations)
    if unknowns < equations:
        raise StaticallyUnstableError(unknowns, equations)


def _section(m: TrussMember):
    """(E in MPa, A in mm²) of a member, CONFIG defaults for what it leaves out."""
    E = CONFIG.member_elastic_modulus if m.E is None else float(m.E)
    A = CONFIG.member_area if m.A is None else float(m.A)
    return E, A


def _member_stiffness(m: TrussMember, length: float) -> float:
    """Axial stiffness in kN/m."""
    if m.stiffness is not None:
        return float(m.stiffness)
    if m.E is None and m.A is None:
        return CONFIG.truss_stiffness
    E, A = _section(m)
    # E·A in N, /1000 → kN, /L in m → kN/m
    return E * A / 1000.0 / length


def solve_truss(
    nodes: Sequence[TrussNode],
    members: Sequence[TrussMember],
    loads: Optional[Sequence[TrussLoad]] = None,
) -> TrussResult:
    """
    Member forces, nodal displacements and support reactions of a
    statically determinate planar truss.

    Parameters:
    -----------
    nodes : Sequence[TrussNode]
        Joints; ``fixed`` / ``roller`` flags mark the supports
    members : Sequence[TrussMember]
        Bars between joints
    loads : Sequence[TrussLoad], optional
        External nodal forces; several loads on one node add up

    Returns:
    --------
    TrussResult

    Raises:
        StaticallyIndeterminateError, StaticallyUnstableError: m + r != 2j
        MatrixSolutionError: singular reduced stiffness (mechanism)
        ValueError: duplicate or unknown node ids, zero-length members
    """
    loads = tuple(loads or ())

    check_truss_determinacy(nodes, members)

    dof = DOFManager(dof_per_node=DOF_PER_NODE, node_ids=[n.id for n in nodes])
    node_map: Dict[Hashable, TrussNode] = {n.id: n for n in nodes}

    contributions = []
    geometry = []
    for m in members:
        L, c, s = element_geometry(node_map, m)
        k = _member_stiffness(m, L)
        dof_map = dof.element_dof_map([m.node_a, m.node_b])
        contributions.append((dof_map, truss_global_stiffness(k, c, s)))
        geometry.append((dof_map, L, c, s, k))

    K = assemble_global_K(dof.ndof(), contributions)

    F = np.zeros(dof.ndof(), dtype=float)
    for load in loads:
        add_nodal_load(F, dof.node_dofs(load.node_id), [load.fx, load.fy])

    fixed_dofs = []
    for n in nodes:
        if n.fixed:
            fixed_dofs.extend(dof.node_dofs(n.id))
        elif n.roller:
            fixed_dofs.append(dof.idx(n.id, 1))

    d, R, _ = solve_linear(K, F, fixed_dofs)

    member_forces = []
    for m, (dof_map, L, c, s, k) in zip(members, geometry):
        N = axial_force(k, c, s, d[dof_map])
        if abs(N) < CONFIG.zero_tol:
            N = 0.0
        state = AxialState.TENSION if N > 0 else AxialState.COMPRESSION
        E, A = _section(m)
        stress = N * 1000.0 / A
        strain = stress / E
        member_forces.append(MemberForce(
            member_id=m.id,
            force=N,
            state=state,
            length=L,
            stress=stress,
            strain=strain,
            deformation=strain * L * 1000.0,
        ))
        logger.debug("Member %s: N=%.4f (%s)", m.id, N, state.value)

    displacements = {}
    reactions = {}
    for n in nodes:
        ix, iy = dof.node_dofs(n.id)
        displacements[n.id] = (float(d[ix]), float(d[iy]))
        if n.fixed or n.roller:
            reactions[n.id] = (float(R[ix]), float(R[iy]))

    return TrussResult(
        member_forces=tuple(member_forces),
        displacements=displacements,
        reactions=reactions,
    )


def _unit_away(node: TrussNode, other: TrussNode):
    dx = other.x - node.x
    dy = other.y - node.y
    L = float(np.hypot(dx, dy))
    if L <= 0.0:
        raise ValueError(f"Zero-length member at node {node.id!r}")
    return dx / L, dy / L


def _collinear(u, v, tol: float = 0.01) -> bool:
    return abs(u[0] * v[1] - u[1] * v[0]) < tol


def find_zero_force_members(
    nodes: Sequence[TrussNode],
    members: Sequence[TrussMember],
    loads: Optional[Sequence[TrussLoad]] = None,
) -> List[Hashable]:
    """
    Zero-force members found by inspection, without solving.

    At an unloaded, unsupported joint:
    - two non-collinear members: both carry zero force
    - three members, two of them collinear: the third carries zero force

    Returns member ids in input order.
    """
    node_map = {n.id: n for n in nodes}
    loaded = set()
    for load in loads or ():
        if abs(load.fx) > CONFIG.zero_tol or abs(load.fy) > CONFIG.zero_tol:
            loaded.add(load.node_id)

    zero = set()
    for node in nodes:
        if node.fixed or node.roller or node.id in loaded:
            continue

        connected = [m for m in members if node.id in (m.node_a, m.node_b)]
        directions = []
        for m in connected:
            other_id = m.node_b if m.node_a == node.id else m.node_a
            if other_id not in node_map:
                raise ValueError(f"Member {m.id!r} references unknown node {other_id!r}")
            directions.append(_unit_away(node, node_map[other_id]))

        if len(connected) == 2:
            if not _collinear(directions[0], directions[1]):
                zero.update(m.id for m in connected)

        elif len(connected) == 3:
            for i, j, third in ((0, 1, 2), (0, 2, 1), (1, 2, 0)):
                if _collinear(directions[i], directions[j]):
                    zero.add(connected[third].id)
                    break

    return [m.id for m in members if m.id in zero]


def max_member_force(result: TrussResult) -> Optional[MemberForce]:
    """Member with the largest |force|; None for a truss without members."""
    if not result.member_forces:
        return None
    return max(result.member_forces, key=lambda mf: abs(mf.force))


def max_member_stress(result: TrussResult) -> Optional[MemberForce]:
    """Member with the largest |stress|; None for a truss without members."""
    if not result.member_forces:
        return None
    return max(result.member_forces, key=lambda mf: abs(mf.stress))
