# loads.py - Beam load variants and their equivalent point-force reduction

from dataclasses import dataclass
from typing import Union


def _check_span(kind: str, start: float, end: float) -> None:
    if not start < end:
        raise ValueError(f"{kind} load needs start < end, got start={start}, end={end}")


@dataclass(frozen=True)
class PointLoad:
    """Concentrated force (kN) at ``position``; positive acts downward."""
    position: float
    magnitude: float


@dataclass(frozen=True)
class UniformLoad:
    """Uniformly distributed load (kN/m) over [start, end]; positive acts downward."""
    start: float
    end: float
    magnitude: float

    def __post_init__(self):
        _check_span("Uniform", self.start, self.end)


@dataclass(frozen=True)
class MomentLoad:
    """Applied couple (kNm) at ``position``; positive is counter-clockwise."""
    position: float
    magnitude: float


@dataclass(frozen=True)
class TriangularLoad:
    """
    Linearly varying load over [start, end]: zero at ``start``, rising to
    ``peak_magnitude`` (kN/m) at ``end``. Positive acts downward.
    """
    start: float
    end: float
    peak_magnitude: float

    def __post_init__(self):
        _check_span("Triangular", self.start, self.end)


Load = Union[PointLoad, UniformLoad, MomentLoad, TriangularLoad]


@dataclass(frozen=True)
class EquivalentLoad:
    """
    A load reduced to a single resultant.

    force : float
        Resultant force, positive downward (kN)
    position : float
        Line of action of the resultant (m)
    couple : float
        Applied couple, positive counter-clockwise (kNm)
    """
    force: float
    position: float
    couple: float = 0.0

    def moment_about(self, x_ref: float) -> float:
        """
        Moment of this load about ``x_ref``, counter-clockwise positive.

        A downward force to the right of the reference turns clockwise,
        hence the minus sign.
        """
        return -self.force * (self.position - x_ref) + self.couple


def equivalent_load(load: Load) -> EquivalentLoad:
    """
    Reduce a load to its resultant force and line of action.

    - Point: the force itself
    - Uniform: w × (end - start) at the midpoint
    - Triangular: ½ × peak × (end - start) at 2/3 of the span from the
      zero end (closer to the peak)
    - Moment: no force, only the couple

    Raises:
        TypeError: for anything that is not one of the four load variants
    """
    if isinstance(load, PointLoad):
        return EquivalentLoad(force=load.magnitude, position=load.position)

    if isinstance(load, UniformLoad):
        span = load.end - load.start
        return EquivalentLoad(
            force=load.magnitude * span,
            position=(load.start + load.end) / 2.0,
        )

    if isinstance(load, TriangularLoad):
        span = load.end - load.start
        return EquivalentLoad(
            force=load.peak_magnitude * span / 2.0,
            position=load.start + span * 2.0 / 3.0,
        )

    if isinstance(load, MomentLoad):
        return EquivalentLoad(force=0.0, position=load.position, couple=load.magnitude)

    raise TypeError(f"Unknown load type: {type(load).__name__}")


def load_positions(load: Load) -> tuple:
    """Positions along the beam where a load starts, ends or acts."""
    if isinstance(load, (PointLoad, MomentLoad)):
        return (load.position,)
    if isinstance(load, (UniformLoad, TriangularLoad)):
        return (load.start, load.end)
    raise TypeError(f"Unknown load type: {type(load).__name__}")


def describe_load(load: Load) -> str:
    """One-line human readable description, e.g. ``P = 10.0 kN @ x = 2.00 m``."""
    if isinstance(load, PointLoad):
        return f"P = {load.magnitude:.1f} kN @ x = {load.position:.2f} m"
    if isinstance(load, UniformLoad):
        return f"w = {load.magnitude:.1f} kN/m [{load.start:.1f} m - {load.end:.1f} m]"
    if isinstance(load, MomentLoad):
        return f"M = {load.magnitude:.1f} kNm @ x = {load.position:.2f} m"
    if isinstance(load, TriangularLoad):
        return f"Tri: w_max = {load.peak_magnitude:.1f} kN/m [{load.start:.1f} m - {load.end:.1f} m]"
    raise TypeError(f"Unknown load type: {type(load).__name__}")
