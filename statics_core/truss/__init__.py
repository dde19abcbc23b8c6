# statics_core/truss - Planar pin-jointed truss analysis
"""
TRUSS
=====

Direct stiffness analysis of statically determinate planar trusses.

    model.py    - TrussNode, TrussMember, TrussLoad, result records
    elements.py - bar geometry, 4x4 stiffness, axial force
    solver.py   - solve_truss, stress results and inspection helpers
"""

from .model import (
    AxialState,
    MemberForce,
    TrussLoad,
    TrussMember,
    TrussNode,
    TrussResult,
)
from .elements import axial_force, element_geometry, truss_global_stiffness
from .solver import (
    check_truss_determinacy,
    count_truss_unknowns,
    find_zero_force_members,
    max_member_force,
    max_member_stress,
    solve_truss,
)

__all__ = [
    'AxialState',
    'MemberForce',
    'TrussLoad',
    'TrussMember',
    'TrussNode',
    'TrussResult',
    'axial_force',
    'element_geometry',
    'truss_global_stiffness',
    'check_truss_determinacy',
    'count_truss_unknowns',
    'find_zero_force_members',
    'max_member_force',
    'max_member_stress',
    'solve_truss',
]
