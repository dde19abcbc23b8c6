# statics_core/diagrams.py
"""
SHEAR AND MOMENT DIAGRAMS
=========================

Walks a solved beam from left to right and builds its internal force
diagrams exactly, without a fixed sampling grid.

KEY CONCEPTS:
-------------
- V (Shear): resultant of the transverse forces left of the cut,
  positive when it acts upward
- M (Moment): sagging positive; M is the running integral of V

Between two consecutive events the load intensity is linear,
q(t) = qa + qb·t (positive downward), so with V0, M0 at the left end:

    V(t) = V0 - qa·t - qb·t²/2
    M(t) = M0 + V0·t - qa·t²/2 - qb·t³/6

Concentrated forces step V. Applied couples (and fixed-end reaction
moments) step M: a counter-clockwise couple steps M down.

SAMPLING:
---------
One sample per event boundary, two when the value jumps there (same x,
before and after). Where V crosses zero inside a loaded segment the exact
crossing is added as an anchor, so the reported moment extrema are the
true ones and not an artifact of where samples happened to fall.
"""

import logging
import math
from typing import Dict, List, Sequence, Tuple

from .config import CONFIG
from .loads import MomentLoad, PointLoad, TriangularLoad, UniformLoad
from .model import (
    AnalysisResults,
    BeamConfig,
    DiagramPoint,
    Extremum,
    ReactionResult,
)

logger = logging.getLogger(__name__)


def _collect_events(
    config: BeamConfig,
    reactions: Sequence[ReactionResult],
) -> Tuple[Dict[float, List[float]], List[Tuple[float, float, float, float]]]:
    """
    Split reactions and loads into concentrated events and distributed spans.

    Returns:
        concentrated: {x: [upward force, counter-clockwise couple]}
        distributed: [(start, end, q_start, q_end)] intensities positive downward
    """
    concentrated: Dict[float, List[float]] = {}
    distributed = []

    def _at(x: float) -> List[float]:
        return concentrated.setdefault(x, [0.0, 0.0])

    for r in reactions:
        x = config.supports[r.support_index].position
        event = _at(x)
        event[0] += r.vertical
        event[1] += r.moment

    for load in config.loads:
        if isinstance(load, PointLoad):
            _at(load.position)[0] -= load.magnitude
        elif isinstance(load, MomentLoad):
            _at(load.position)[1] += load.magnitude
        elif isinstance(load, UniformLoad):
            distributed.append((load.start, load.end, load.magnitude, load.magnitude))
        elif isinstance(load, TriangularLoad):
            distributed.append((load.start, load.end, 0.0, load.peak_magnitude))
        else:
            raise TypeError(f"Unknown load type: {type(load).__name__}")

    return concentrated, distributed


def _segment_intensity(
    distributed: List[Tuple[float, float, float, float]],
    x0: float,
    x1: float,
) -> Tuple[float, float]:
    """Intensity q(x0) and slope dq/dx of the loads covering [x0, x1]."""
    qa = 0.0
    qb = 0.0
    for start, end, q_start, q_end in distributed:
        if start <= x0 and end >= x1:
            slope = (q_end - q_start) / (end - start)
            qa += q_start + slope * (x0 - start)
            qb += slope
    return qa, qb


def _zero_shear_offsets(V0: float, qa: float, qb: float, h: float) -> List[float]:
    """Offsets t in (0, h) where V0 - qa·t - qb·t²/2 = 0."""
    eps = CONFIG.zero_tol
    roots = []
    if abs(qb) <= eps:
        if abs(qa) > eps:
            roots.append(V0 / qa)
    else:
        disc = qa * qa + 2.0 * qb * V0
        if disc >= 0.0:
            sq = math.sqrt(disc)
            roots.extend([(-qa + sq) / qb, (-qa - sq) / qb])

    tol = eps * max(1.0, h)
    return sorted({t for t in roots if tol < t < h - tol})


def _clean(value: float) -> float:
    return 0.0 if abs(value) < CONFIG.zero_tol else value


def _extrema(points: Sequence[DiagramPoint]) -> Tuple[Extremum, Extremum]:
    hi = max(points, key=lambda p: p.value)
    lo = min(points, key=lambda p: p.value)
    return Extremum(hi.value, hi.x), Extremum(lo.value, lo.x)


def generate_diagrams(
    config: BeamConfig,
    reactions: Sequence[ReactionResult],
    samples_per_segment: int = 0,
) -> AnalysisResults:
    """
    Shear and moment diagrams of a solved beam, with their extrema.

    Parameters:
    -----------
    config : BeamConfig
        The beam that was solved
    reactions : Sequence[ReactionResult]
        Output of solve_reactions for the same config
    samples_per_segment : int
        Extra evenly spaced samples inside every segment between events.
        Not needed for exact extrema; useful for drawing curves.

    Returns:
    --------
    AnalysisResults
    """
    if samples_per_segment < 0:
        raise ValueError(f"samples_per_segment must be >= 0, got {samples_per_segment}")

    concentrated, distributed = _collect_events(config, reactions)

    breakpoints = {0.0, float(config.length)}
    breakpoints.update(concentrated)
    for start, end, _, _ in distributed:
        breakpoints.update((start, end))
    xs = sorted(breakpoints)

    shear: List[DiagramPoint] = []
    moment: List[DiagramPoint] = []
    V = 0.0
    M = 0.0

    for k, x0 in enumerate(xs):
        shear.append(DiagramPoint(x0, _clean(V)))
        moment.append(DiagramPoint(x0, _clean(M)))

        force, couple = concentrated.get(x0, (0.0, 0.0))
        if force != 0.0:
            V += force
            shear.append(DiagramPoint(x0, _clean(V)))
        if couple != 0.0:
            M -= couple
            moment.append(DiagramPoint(x0, _clean(M)))

        if k == len(xs) - 1:
            break

        x1 = xs[k + 1]
        h = x1 - x0
        qa, qb = _segment_intensity(distributed, x0, x1)

        offsets = set(_zero_shear_offsets(V, qa, qb, h))
        offsets.update(h * i / (samples_per_segment + 1) for i in range(1, samples_per_segment + 1))

        for t in sorted(offsets):
            shear.append(DiagramPoint(x0 + t, _clean(V - qa * t - qb * t * t / 2.0)))
            moment.append(DiagramPoint(
                x0 + t,
                _clean(M + V * t - qa * t * t / 2.0 - qb * t ** 3 / 6.0),
            ))

        M = M + V * h - qa * h * h / 2.0 - qb * h ** 3 / 6.0
        V = V - qa * h - qb * h * h / 2.0

    logger.debug("Diagram closure at x=%.3f: V=%.3e, M=%.3e", config.length, V, M)

    max_shear, min_shear = _extrema(shear)
    max_moment, min_moment = _extrema(moment)

    return AnalysisResults(
        reactions=tuple(reactions),
        shear_diagram=tuple(shear),
        moment_diagram=tuple(moment),
        max_shear=max_shear,
        min_shear=min_shear,
        max_moment=max_moment,
        min_moment=min_moment,
    )


def value_at(diagram: Sequence[DiagramPoint], x: float) -> float:
    """
    Diagram value at ``x`` by linear interpolation between samples.

    At a jump (two samples sharing x) the value after the jump is returned.
    Exact at sample positions; between samples of a curved span it is only
    as good as the sampling density.
    """
    if not diagram:
        raise ValueError("Empty diagram")
    if x < diagram[0].x or x > diagram[-1].x:
        raise ValueError(f"x={x} outside diagram range [{diagram[0].x}, {diagram[-1].x}]")

    for left, right in zip(diagram[:-1], diagram[1:]):
        if left.x <= x < right.x:
            return left.value + (right.value - left.value) * (x - left.x) / (right.x - left.x)
    return diagram[-1].value
