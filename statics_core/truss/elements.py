# Truss bar geometry, stiffness and axial force

from typing import Dict, Hashable, Tuple

import numpy as np

from .model import TrussMember, TrussNode


def element_geometry(nodes: Dict[Hashable, TrussNode], m: TrussMember) -> Tuple[float, float, float]:
    """Length and direction cosines (L, c, s) of a member, from node_a to node_b."""
    try:
        na = nodes[m.node_a]
        nb = nodes[m.node_b]
    except KeyError as exc:
        raise ValueError(f"Member {m.id!r} references unknown node {exc.args[0]!r}") from None
    dx = nb.x - na.x
    dy = nb.y - na.y
    L = float(np.hypot(dx, dy))
    if L <= 0.0:
        raise ValueError(f"Member {m.id!r} has zero length.")
    return L, dx / L, dy / L


def truss_global_stiffness(k: float, c: float, s: float) -> np.ndarray:
    """
    4x4 bar stiffness in global coordinates.
    DOF order: [uax, uay, ubx, uby]

        k · |  B  -B |      B = | c²  cs |
            | -B   B |          | cs  s² |
    """
    B = np.array([
        [c * c, c * s],
        [c * s, s * s],
    ], dtype=float)
    return k * np.block([
        [ B, -B],
        [-B,  B],
    ])


def axial_force(k: float, c: float, s: float, d_element: np.ndarray) -> float:
    """
    Axial force from the element's global displacements [uax, uay, ubx, uby].

    N = k · [(ubx - uax)·c + (uby - uay)·s], positive in tension.
    """
    uax, uay, ubx, uby = d_element
    return float(k * ((ubx - uax) * c + (uby - uay) * s))
