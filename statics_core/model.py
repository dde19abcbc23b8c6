# Beam model: supports, configuration and result records

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from .loads import Load, load_positions


class SupportKind(Enum):
    """
    Support types and the reaction components each one provides.

    PINNED: horizontal + vertical
    ROLLER: vertical only
    FIXED:  horizontal + vertical + moment
    """
    PINNED = "PINNED"
    ROLLER = "ROLLER"
    FIXED = "FIXED"

    @property
    def restrains_horizontal(self) -> bool:
        return self is not SupportKind.ROLLER

    @property
    def restrains_rotation(self) -> bool:
        return self is SupportKind.FIXED

    @property
    def n_components(self) -> int:
        return 1 + int(self.restrains_horizontal) + int(self.restrains_rotation)


@dataclass(frozen=True)
class Support:
    kind: SupportKind
    position: float


@dataclass(frozen=True)
class BeamConfig:
    """
    A straight beam of ``length`` carrying transverse loads.

    Never mutated: ``with_load`` / ``with_support`` return new configs.
    Lists passed for supports and loads are frozen to tuples.
    """
    length: float
    supports: Tuple[Support, ...] = ()
    loads: Tuple[Load, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "supports", tuple(self.supports))
        object.__setattr__(self, "loads", tuple(self.loads))

    def with_load(self, load: Load) -> "BeamConfig":
        return BeamConfig(self.length, self.supports, self.loads + (load,))

    def with_support(self, support: Support) -> "BeamConfig":
        return BeamConfig(self.length, self.supports + (support,), self.loads)

    def validate(self) -> None:
        """
        Check geometric invariants.

        Raises:
            ValueError: non-positive length, a position outside [0, length],
                or two supports at the same position
        """
        if self.length <= 0:
            raise ValueError(f"Beam length must be positive, got {self.length}")

        def _inside(x: float, what: str) -> None:
            if x < 0 or x > self.length:
                raise ValueError(f"{what} position {x} outside beam [0, {self.length}]")

        seen = set()
        for s in self.supports:
            _inside(s.position, "Support")
            if s.position in seen:
                raise ValueError(f"Two supports share position {s.position}")
            seen.add(s.position)

        for load in self.loads:
            for x in load_positions(load):
                _inside(x, "Load")


@dataclass(frozen=True)
class ReactionResult:
    """
    Reaction at one support. Vertical is positive upward, moment positive
    counter-clockwise. Components a support cannot provide stay at 0.0.
    """
    support_index: int
    horizontal: float = 0.0
    vertical: float = 0.0
    moment: float = 0.0


@dataclass(frozen=True)
class Extremum:
    value: float
    position: float


@dataclass(frozen=True)
class DiagramPoint:
    x: float
    value: float


@dataclass(frozen=True)
class AnalysisResults:
    """Reactions and internal force diagrams for one beam solve."""
    reactions: Tuple[ReactionResult, ...]
    shear_diagram: Tuple[DiagramPoint, ...]
    moment_diagram: Tuple[DiagramPoint, ...]
    max_shear: Extremum
    min_shear: Extremum
    max_moment: Extremum
    min_moment: Extremum
