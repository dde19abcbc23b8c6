# statics_core/kernel/solve.py
"""Dense LU factorization with partial pivoting, and the partitioned K·d = F solve."""

import logging
from typing import Optional, Tuple

import numpy as np

from ..config import CONFIG
from ..errors import MatrixSolutionError

logger = logging.getLogger(__name__)


def lu_factor(A: np.ndarray, pivot_tol: Optional[float] = None) -> Tuple[np.ndarray, np.ndarray]:
    """
    Factor P·A = L·U with row pivoting on the largest remaining entry.

    L (unit diagonal, stored below the diagonal) and U share one array.

    The singularity test is global: a pivot at or below pivot_tol·max|A|
    is rejected. Roundoff from the largest entries is of that order, so a
    stable system whose stiffnesses differ by ~1/pivot_tol or more (say
    1e12 next to 1e-3) is reported as singular too. Loosen pivot_tol to
    solve such systems; their answers carry that much less precision.

    Args:
        A: Square matrix
        pivot_tol: Smallest acceptable pivot relative to max|A|
            (defaults to CONFIG.pivot_tol)

    Returns:
        LU: Combined factors, shape (n, n)
        piv: Row permutation; row i of P·A is row piv[i] of A

    Raises:
        MatrixSolutionError: If a pivot falls below the tolerance
    """
    LU = np.array(A, dtype=float, copy=True)
    if LU.ndim != 2 or LU.shape[0] != LU.shape[1]:
        raise ValueError(f"Expected a square matrix, got shape {LU.shape}")

    n = LU.shape[0]
    piv = np.arange(n)
    if n == 0:
        return LU, piv

    tol = CONFIG.pivot_tol if pivot_tol is None else pivot_tol
    scale = float(np.max(np.abs(LU)))
    threshold = tol * scale

    for k in range(n):
        p = k + int(np.argmax(np.abs(LU[k:, k])))
        pivot = LU[p, k]
        if scale == 0.0 or abs(pivot) <= threshold:
            raise MatrixSolutionError(
                f"Matrix solution failed: singular or ill-conditioned matrix "
                f"(pivot {pivot:.2e} in column {k}, scale {scale:.2e}). "
                "Structure may be unstable; check supports and member stiffnesses."
            )

        if p != k:
            LU[[k, p], :] = LU[[p, k], :]
            piv[[k, p]] = piv[[p, k]]

        LU[k + 1:, k] /= LU[k, k]
        LU[k + 1:, k + 1:] -= np.outer(LU[k + 1:, k], LU[k, k + 1:])

    return LU, piv


def lu_solve(LU: np.ndarray, piv: np.ndarray, b: np.ndarray) -> np.ndarray:
    """Forward/back substitution against factors from lu_factor."""
    n = LU.shape[0]
    y = np.asarray(b, dtype=float)[piv].copy()

    for i in range(n):
        y[i] -= LU[i, :i] @ y[:i]

    x = np.zeros(n, dtype=float)
    for i in range(n - 1, -1, -1):
        x[i] = (y[i] - LU[i, i + 1:] @ x[i + 1:]) / LU[i, i]

    return x


def solve_dense(A: np.ndarray, b: np.ndarray, pivot_tol: Optional[float] = None) -> np.ndarray:
    """Solve A·x = b. Raises MatrixSolutionError for a singular A."""
    LU, piv = lu_factor(A, pivot_tol)
    return lu_solve(LU, piv, b)


def solve_linear(
    K: np.ndarray,
    F: np.ndarray,
    fixed_dofs: list,
    pivot_tol: Optional[float] = None,
) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Solve K·d = F with restrained DOFs eliminated by partitioning.

    Args:
        K: Global stiffness matrix (ndof x ndof)
        F: Global load vector (ndof,)
        fixed_dofs: Restrained DOF indices (displacement = 0)
        pivot_tol: Relative pivot tolerance for the LU factorization

    Returns:
        d: Displacement vector (ndof,)
        R: Reaction vector R = K·d - F (ndof,), non-zero only at fixed DOFs
        free: Array of free DOF indices

    Raises:
        MatrixSolutionError: If the reduced stiffness matrix is singular
    """
    ndof = K.shape[0]

    fixed = set(int(i) for i in fixed_dofs)
    free = np.array([i for i in range(ndof) if i not in fixed], dtype=int)

    Kff = K[np.ix_(free, free)]
    Ff = F[free]

    logger.debug("Solving reduced system: %d free of %d DOFs", len(free), ndof)
    df = solve_dense(Kff, Ff, pivot_tol)

    d = np.zeros(ndof, dtype=float)
    d[free] = df

    R = K @ d - F
    R[free] = 0.0

    return d, R, free
