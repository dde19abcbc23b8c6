# Truss model: nodes, members, nodal loads and result records

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Hashable, Optional, Tuple


@dataclass(frozen=True)
class TrussNode:
    """
    Pin joint of a planar truss.

    fixed  : both translations restrained (pin support, 2 reactions)
    roller : vertical translation restrained (1 reaction)
    """
    id: Hashable
    x: float
    y: float
    fixed: bool = False
    roller: bool = False

    def __post_init__(self):
        if self.fixed and self.roller:
            raise ValueError(f"Node {self.id!r} cannot be both fixed and a roller")

    @property
    def n_reactions(self) -> int:
        return 2 if self.fixed else int(self.roller)


@dataclass(frozen=True)
class TrussMember:
    """
    Two-force bar between ``node_a`` and ``node_b``.

    stiffness : axial stiffness EA/L (kN/m), used as given
    E         : elastic modulus (MPa)
    A         : cross-section area (mm²)

    Without ``stiffness``, a member that gives E or A gets k = EA/L, the
    missing one taken from CONFIG; a member that gives neither uses
    CONFIG.truss_stiffness. Stress and strain always use E and A (or
    their CONFIG defaults).
    """
    id: Hashable
    node_a: Hashable
    node_b: Hashable
    stiffness: Optional[float] = None
    E: Optional[float] = None
    A: Optional[float] = None

    def __post_init__(self):
        for name in ("stiffness", "E", "A"):
            value = getattr(self, name)
            if value is not None and value <= 0:
                raise ValueError(f"Member {self.id!r}: {name} must be positive, got {value}")


@dataclass(frozen=True)
class TrussLoad:
    """External nodal force (kN), fx positive right, fy positive up."""
    node_id: Hashable
    fx: float = 0.0
    fy: float = 0.0


class AxialState(Enum):
    TENSION = "TENSION"
    COMPRESSION = "COMPRESSION"


@dataclass(frozen=True)
class MemberForce:
    """
    Axial result of one member.

    force       : kN, positive in tension
    length      : m
    stress      : N·1000/A (MPa)
    strain      : stress/E
    deformation : strain·length (mm), positive when the bar lengthens
    """
    member_id: Hashable
    force: float
    state: AxialState
    length: float
    stress: float = 0.0
    strain: float = 0.0
    deformation: float = 0.0


@dataclass(frozen=True)
class TrussResult:
    """
    Solved truss.

    member_forces : one entry per member, in input order
    displacements : node id → (ux, uy)
    reactions     : restrained node id → (rx, ry)
    """
    member_forces: Tuple[MemberForce, ...]
    displacements: Dict[Hashable, Tuple[float, float]] = field(default_factory=dict)
    reactions: Dict[Hashable, Tuple[float, float]] = field(default_factory=dict)

    def force_of(self, member_id: Hashable) -> MemberForce:
        for mf in self.member_forces:
            if mf.member_id == member_id:
                return mf
        raise KeyError(member_id)
