# statics_core/kernel/assemble.py
"""
ASSEMBLY: Global Matrix Scatter-Add
===================================

Element contributions are (dof_map, ke) pairs. The assembler does not
care what kind of element produced them: it adds every entry of ke into
K at the rows/columns named by dof_map.

    K = zeros(ndof × ndof)
    for each element:
        for each (a, b) in ke:
            K[dof_map[a], dof_map[b]] += ke[a, b]
"""

import numpy as np
from typing import List, Tuple


def assemble_global_K(
    ndof: int,
    contributions: List[Tuple[List[int], np.ndarray]]
) -> np.ndarray:
    """
    Assemble the global stiffness matrix from element contributions.

    Parameters:
    -----------
    ndof : int
        Total number of DOFs in the system
    contributions : List[Tuple[List[int], np.ndarray]]
        One (dof_map, ke) tuple per element; ke is square with
        len(dof_map) rows

    Returns:
    --------
    np.ndarray
        Symmetric global stiffness matrix, shape (ndof, ndof)
    """
    K = np.zeros((ndof, ndof), dtype=float)

    for dof_map, ke in contributions:
        n_element_dofs = len(dof_map)
        if ke.shape != (n_element_dofs, n_element_dofs):
            raise ValueError(
                f"Element ke shape {ke.shape} doesn't match dof_map length {n_element_dofs}"
            )

        for a in range(n_element_dofs):
            ia = dof_map[a]
            for b in range(n_element_dofs):
                K[ia, dof_map[b]] += ke[a, b]

    return K


def add_nodal_load(
    F: np.ndarray,
    dof_map: List[int],
    load_vector
) -> None:
    """
    Add a nodal load to the global load vector (in-place).

    >>> F = np.zeros(6)
    >>> add_nodal_load(F, [2, 3], [0.0, -10.0])   # Fy = -10 on the second node
    """
    for ia, val in zip(dof_map, load_vector):
        F[ia] += val
