# File: tests/test_kernel.py
"""
Tests for the shared numerics: DOF indexing, assembly and the LU solver.
"""

import numpy as np
import pytest

from statics_core.errors import MatrixSolutionError
from statics_core.kernel import (
    DOFManager,
    add_nodal_load,
    assemble_global_K,
    lu_factor,
    lu_solve,
    solve_dense,
    solve_linear,
)


def test_dof_indexing():
    dof = DOFManager(dof_per_node=2, node_ids=["A", "B", "C"])

    assert dof.n_nodes == 3
    assert dof.ndof() == 6
    assert dof.idx("B", 1) == 3
    assert dof.node_dofs("C") == [4, 5]
    assert dof.element_dof_map(["A", "C"]) == [0, 1, 4, 5]


def test_dof_rejects_duplicate_and_unknown_ids():
    with pytest.raises(ValueError):
        DOFManager(2, ["A", "A"])

    dof = DOFManager(2, ["A"])
    with pytest.raises(ValueError):
        dof.idx("B", 0)


def test_assemble_scatter_adds():
    ke = np.array([[1.0, -1.0], [-1.0, 1.0]])
    K = assemble_global_K(3, [([0, 1], ke), ([1, 2], 2.0 * ke)])

    expected = np.array([
        [1.0, -1.0, 0.0],
        [-1.0, 3.0, -2.0],
        [0.0, -2.0, 2.0],
    ])
    np.testing.assert_allclose(K, expected)


def test_assemble_shape_mismatch():
    with pytest.raises(ValueError):
        assemble_global_K(3, [([0, 1, 2], np.eye(2))])


def test_add_nodal_load():
    F = np.zeros(4)
    add_nodal_load(F, [2, 3], [1.5, -10.0])
    add_nodal_load(F, [2, 3], [0.5, 0.0])
    np.testing.assert_allclose(F, [0.0, 0.0, 2.0, -10.0])


def test_lu_hand_solution():
    A = np.array([
        [2.0, 1.0, 1.0],
        [4.0, -6.0, 0.0],
        [-2.0, 7.0, 2.0],
    ])
    b = np.array([5.0, -2.0, 9.0])

    np.testing.assert_allclose(solve_dense(A, b), [1.0, 1.0, 2.0])


def test_lu_needs_pivoting():
    """Zero on the leading diagonal: only solvable with row exchanges."""
    A = np.array([[0.0, 1.0], [1.0, 0.0]])
    np.testing.assert_allclose(solve_dense(A, [2.0, 3.0]), [3.0, 2.0])


def test_lu_factors_reproduce_matrix():
    rng = np.random.default_rng(0)
    A = rng.normal(size=(6, 6)) + 6.0 * np.eye(6)

    LU, piv = lu_factor(A)
    L = np.tril(LU, -1) + np.eye(6)
    U = np.triu(LU)
    np.testing.assert_allclose(L @ U, A[piv], atol=1e-12)

    b = rng.normal(size=6)
    np.testing.assert_allclose(lu_solve(LU, piv, b), np.linalg.solve(A, b))


def test_lu_singular():
    with pytest.raises(MatrixSolutionError):
        solve_dense(np.array([[1.0, 2.0], [2.0, 4.0]]), [1.0, 2.0])

    with pytest.raises(MatrixSolutionError):
        solve_dense(np.zeros((2, 2)), [0.0, 0.0])


def test_lu_rejects_non_square():
    with pytest.raises(ValueError):
        lu_factor(np.ones((2, 3)))


def test_solve_linear_spring_chain():
    """Two springs k = 100 in series, fixed at the left, 10 at the free end."""
    K = np.array([
        [100.0, -100.0, 0.0],
        [-100.0, 200.0, -100.0],
        [0.0, -100.0, 100.0],
    ])
    F = np.array([0.0, 0.0, 10.0])

    d, R, free = solve_linear(K, F, fixed_dofs=[0])

    np.testing.assert_allclose(d, [0.0, 0.1, 0.2])
    assert R[0] == pytest.approx(-10.0)
    np.testing.assert_allclose(R[free], 0.0)
    assert list(free) == [1, 2]


def test_solve_linear_mechanism():
    K = np.array([[1.0, -1.0], [-1.0, 1.0]])
    with pytest.raises(MatrixSolutionError):
        solve_linear(K, np.array([0.0, 1.0]), fixed_dofs=[])
