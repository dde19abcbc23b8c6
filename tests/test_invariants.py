import numpy as np

from statics_core.kernel import DOFManager, assemble_global_K
from statics_core.presets import TRUSS_PRESETS
from statics_core.truss import element_geometry, solve_truss, truss_global_stiffness


def _assembled_K(nodes, members):
    dof = DOFManager(2, [n.id for n in nodes])
    node_map = {n.id: n for n in nodes}
    contributions = []
    for m in members:
        _, c, s = element_geometry(node_map, m)
        contributions.append((dof.element_dof_map([m.node_a, m.node_b]), truss_global_stiffness(1000.0, c, s)))
    return assemble_global_K(dof.ndof(), contributions), dof


def test_stiffness_matrix_symmetry():
    """
    WHAT IS THIS TEST?
    ==================
    Reciprocity: pushing at A and measuring at B equals pushing at B and
    measuring at A, so K[i,j] = K[j,i].
    """
    nodes, members, _ = TRUSS_PRESETS["warren"]
    K, _ = _assembled_K(nodes, members)

    np.testing.assert_allclose(K, K.T, rtol=1e-10, atol=1e-12,
                               err_msg="Stiffness matrix is not symmetric!")


def test_rigid_body_translation_is_stress_free():
    """
    WHAT IS THIS TEST?
    ==================
    Moving the whole unsupported truss by the same (ux, uy) stretches no
    bar, so K·u must vanish. Before supports are applied K is singular.
    """
    nodes, members, _ = TRUSS_PRESETS["warren"]
    K, dof = _assembled_K(nodes, members)

    u = np.tile([0.3, -0.7], dof.n_nodes)
    np.testing.assert_allclose(K @ u, 0.0, atol=1e-9)


def test_equilibrium_of_every_joint():
    """
    WHAT IS THIS TEST?
    ==================
    At every joint, member forces + external loads + reactions sum to zero
    in both directions.
    """
    nodes, members, loads = TRUSS_PRESETS["warren"]
    result = solve_truss(nodes, members, loads)
    node_map = {n.id: n for n in nodes}

    for node in nodes:
        fx, fy = result.reactions.get(node.id, (0.0, 0.0))
        for load in loads:
            if load.node_id == node.id:
                fx += load.fx
                fy += load.fy
        for m in members:
            if node.id not in (m.node_a, m.node_b):
                continue
            _, c, s = element_geometry(node_map, m)
            sign = 1.0 if m.node_a == node.id else -1.0  # tension pulls the joint toward the other end
            N = result.force_of(m.id).force
            fx += sign * N * c
            fy += sign * N * s
        assert abs(fx) < 1e-8, node.id
        assert abs(fy) < 1e-8, node.id
