# statics_core/kernel/dof.py
"""
DOF MANAGER: Node-to-Equation Indexing
======================================

Maps (node, local_dof) pairs to rows of the global stiffness system.
Truss node ids are arbitrary hashable labels ("A", "N3", 7), so the
manager keeps an ordered index of them and hands out contiguous blocks
of ``dof_per_node`` rows per node, in insertion order:

    PLANAR TRUSS:  2 DOF/node (ux, uy)

USAGE:
------
    dof = DOFManager(dof_per_node=2, node_ids=["A", "B", "C"])
    dof.idx("B", 1)            # → 3  (uy of node B)
    dof.element_dof_map(["A", "C"])   # → [0, 1, 4, 5]
"""

from dataclasses import dataclass, field
from typing import Dict, Hashable, Iterable, List


@dataclass
class DOFManager:
    """
    Degree-of-freedom bookkeeping for a model with labelled nodes.

    Attributes:
    -----------
    dof_per_node : int
        Number of DOFs per node (2 for a planar truss: ux, uy)
    node_ids : Iterable[Hashable]
        Node labels in the order their DOF blocks are laid out
    """
    dof_per_node: int
    node_ids: Iterable[Hashable] = ()
    _order: Dict[Hashable, int] = field(init=False, repr=False)

    def __post_init__(self):
        self._order = {}
        for node_id in self.node_ids:
            if node_id in self._order:
                raise ValueError(f"Duplicate node id: {node_id!r}")
            self._order[node_id] = len(self._order)
        self.node_ids = tuple(self._order)

    @property
    def n_nodes(self) -> int:
        return len(self._order)

    def ndof(self) -> int:
        """Total number of DOFs (size of K)."""
        return self.dof_per_node * self.n_nodes

    def position(self, node_id: Hashable) -> int:
        """Zero-based block index of a node."""
        try:
            return self._order[node_id]
        except KeyError:
            raise ValueError(f"Unknown node id: {node_id!r}") from None

    def idx(self, node_id: Hashable, local_dof: int) -> int:
        """
        Global DOF index for a node's local DOF.

        >>> DOFManager(2, ["A", "B"]).idx("B", 0)
        2
        """
        return self.dof_per_node * self.position(node_id) + local_dof

    def node_dofs(self, node_id: Hashable) -> List[int]:
        base = self.dof_per_node * self.position(node_id)
        return list(range(base, base + self.dof_per_node))

    def element_dof_map(self, node_ids: List[Hashable]) -> List[int]:
        """
        Flattened DOF indices for an element connecting ``node_ids``.

        These are the rows/columns used to scatter the element matrix
        into the global matrix.
        """
        result = []
        for node_id in node_ids:
            result.extend(self.node_dofs(node_id))
        return result
