# statics_core/beam.py
"""
BEAM EQUILIBRIUM: Support Reactions of a Statically Determinate Beam
====================================================================

A straight beam under transverse loads has two independent equilibrium
equations:

    ΣFy = 0     (vertical forces)
    ΣM  = 0     (moments about any point)

The horizontal equation ΣFx = 0 holds trivially because no axial loads
are modeled, so every horizontal reaction is zero.

SIGN CONVENTIONS:
-----------------
- x runs along the beam, y points up
- Applied forces are positive DOWNWARD (gravity)
- Reactions are positive UPWARD
- Moments and couples are positive COUNTER-CLOCKWISE

DETERMINACY:
------------
    Support   components        transverse (vertical + moment)
    PINNED    H, V      (2)     1
    ROLLER    V         (1)     1
    FIXED     H, V, M   (3)     2

The beam is determinate when the transverse unknowns equal the two
equations and at most one support restrains horizontally. The
indeterminate error reports the total component count so the caller sees
every restraint it declared; the unstable error reports the transverse
count, which is the one that falls short (a lone pin: 1 < 2).
"""

import logging
from typing import List

import numpy as np

from .config import CONFIG
from .diagrams import generate_diagrams
from .errors import (
    InsufficientSupportsError,
    StaticallyIndeterminateError,
    StaticallyUnstableError,
)
from .kernel.solve import solve_dense
from .loads import equivalent_load
from .model import AnalysisResults, BeamConfig, ReactionResult, SupportKind

logger = logging.getLogger(__name__)


def count_unknowns(config: BeamConfig) -> int:
    """Total reaction components declared by the supports."""
    return sum(s.kind.n_components for s in config.supports)


def check_determinacy(config: BeamConfig) -> None:
    """
    Classify the support arrangement.

    Raises:
        InsufficientSupportsError: no supports
        StaticallyIndeterminateError: too many transverse unknowns, or
            more than one support restraining horizontally
        StaticallyUnstableError: too few transverse unknowns
    """
    if not config.supports:
        raise InsufficientSupportsError()

    equations = CONFIG.beam_equations
    unknowns = count_unknowns(config)
    transverse = sum(1 + int(s.kind.restrains_rotation) for s in config.supports)
    horizontal = sum(int(s.kind.restrains_horizontal) for s in config.supports)

    logger.debug(
        "Beam determinacy: %d components (%d transverse, %d horizontal), %d equations",
        unknowns, transverse, horizontal, equations,
    )

    if transverse > equations or horizontal > 1:
        raise StaticallyIndeterminateError(unknowns, equations)
    if transverse < equations:
        raise StaticallyUnstableError(transverse, equations)


def _two_vertical_supports(config: BeamConfig, total_force: float) -> List[ReactionResult]:
    """
    Pin + roller or roller + roller: moments about the first support give
    the second reaction directly, vertical equilibrium gives the first.
    """
    a, b = config.supports
    applied_moment = sum(equivalent_load(l).moment_about(a.position) for l in config.loads)

    # R_b·(x_b - x_a) + ΣM_loads = 0
    R_b = -applied_moment / (b.position - a.position)
    R_a = total_force - R_b

    return [
        ReactionResult(support_index=0, vertical=R_a),
        ReactionResult(support_index=1, vertical=R_b),
    ]


def _assembled_system(config: BeamConfig, total_force: float) -> List[ReactionResult]:
    """
    General determinate case: one row per equation, one column per
    transverse unknown, solved by LU.

        row 0 (ΣFy):                 Σ V_i                 = Σ F
        row 1 (ΣM about x_ref):      Σ V_i·(x_i - x_ref)
                                     + Σ M_i               = -Σ M_loads
    """
    x_ref = config.supports[0].position

    columns = []  # (support_index, component)
    for i, s in enumerate(config.supports):
        columns.append((i, "V"))
        if s.kind.restrains_rotation:
            columns.append((i, "M"))

    A = np.zeros((CONFIG.beam_equations, len(columns)), dtype=float)
    for j, (i, component) in enumerate(columns):
        if component == "V":
            A[0, j] = 1.0
            A[1, j] = config.supports[i].position - x_ref
        else:
            A[1, j] = 1.0

    applied_moment = sum(equivalent_load(l).moment_about(x_ref) for l in config.loads)
    b = np.array([total_force, -applied_moment], dtype=float)

    x = solve_dense(A, b)

    values = {i: {"V": 0.0, "M": 0.0} for i in range(len(config.supports))}
    for (i, component), value in zip(columns, x):
        values[i][component] = float(value)

    return [
        ReactionResult(support_index=i, vertical=v["V"], moment=v["M"])
        for i, v in values.items()
    ]


def equilibrium_residuals(
    config: BeamConfig,
    reactions: List[ReactionResult],
    x_ref: float = 0.0,
) -> tuple:
    """
    Residual (ΣFy, ΣM about x_ref) of loads plus reactions.

    Both are zero for a correct solve, whatever x_ref is.
    """
    sum_fy = 0.0
    sum_m = 0.0
    for r in reactions:
        x = config.supports[r.support_index].position
        sum_fy += r.vertical
        sum_m += r.vertical * (x - x_ref) + r.moment

    for load in config.loads:
        eq = equivalent_load(load)
        sum_fy -= eq.force
        sum_m += eq.moment_about(x_ref)

    return sum_fy, sum_m


def solve_reactions(config: BeamConfig) -> List[ReactionResult]:
    """
    Support reactions of a statically determinate beam.

    Returns one ReactionResult per support, in the order the supports were
    given.

    Raises:
        InsufficientSupportsError, StaticallyUnstableError,
        StaticallyIndeterminateError: see check_determinacy
        MatrixSolutionError: the equilibrium system is singular
        ValueError: geometry outside the beam or duplicate support positions
    """
    check_determinacy(config)
    config.validate()

    total_force = sum(equivalent_load(l).force for l in config.loads)

    vertical_only = all(s.kind is not SupportKind.FIXED for s in config.supports)
    if vertical_only and len(config.supports) == 2:
        reactions = _two_vertical_supports(config, total_force)
    else:
        reactions = _assembled_system(config, total_force)

    sum_fy, sum_m = equilibrium_residuals(config, reactions, config.supports[0].position)
    logger.debug("Equilibrium residuals: ΣFy=%.3e, ΣM=%.3e", sum_fy, sum_m)
    scale = max(1.0, abs(total_force) * config.length)
    if abs(sum_fy) > CONFIG.equilibrium_tol * scale or abs(sum_m) > CONFIG.equilibrium_tol * scale:
        logger.warning(
            "Equilibrium residual above tolerance: ΣFy=%.3e, ΣM=%.3e", sum_fy, sum_m
        )

    return reactions


def analyze_beam(config: BeamConfig, samples_per_segment: int = 0) -> AnalysisResults:
    """Reactions followed by shear and moment diagrams."""
    reactions = solve_reactions(config)
    return generate_diagrams(config, reactions, samples_per_segment=samples_per_segment)
