# statics_core/kernel - Shared numerics for the matrix solvers
"""
KERNEL
======

Plumbing shared by every matrix-based computation in the package:
- DOFManager: (node, local_dof) → global equation index
- assemble_global_K: scatter-add of element matrices
- lu_factor / lu_solve / solve_dense: LU with partial pivoting
- solve_linear: partitioned solve with restrained DOFs eliminated
"""

from .dof import DOFManager
from .assemble import assemble_global_K, add_nodal_load
from .solve import lu_factor, lu_solve, solve_dense, solve_linear

__all__ = [
    'DOFManager',
    'assemble_global_K',
    'add_nodal_load',
    'lu_factor',
    'lu_solve',
    'solve_dense',
    'solve_linear',
]
