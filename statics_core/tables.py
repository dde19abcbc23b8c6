# statics_core/tables.py
"""
TABLES: Tabular Views of Analysis Results
=========================================

The solvers return frozen dataclasses. Reporting, CSV export and
notebook display want rows and columns, so every result type gets a
``*_frame`` function returning a ``pd.DataFrame``:

    reactions_frame(config, reactions)     one row per support
    diagram_frame(results)                 one row per diagram sample
    member_forces_frame(truss_result)      one row per member
    combinations_frame(combination_results) one row per combination

Row order always follows the order of the input.
"""

from typing import Sequence

import pandas as pd

from .combinations import CombinationResult
from .model import AnalysisResults, BeamConfig, ReactionResult
from .truss.model import TrussResult

REACTION_COLUMNS = ["support", "kind", "position", "horizontal", "vertical", "moment"]
DIAGRAM_COLUMNS = ["x", "shear", "moment"]
MEMBER_COLUMNS = ["member", "force", "state", "length", "stress", "strain", "deformation"]
COMBINATION_COLUMNS = ["id", "name", "value", "is_ultimate"]


def reactions_frame(config: BeamConfig, reactions: Sequence[ReactionResult]) -> pd.DataFrame:
    rows = []
    for r in reactions:
        support = config.supports[r.support_index]
        rows.append({
            "support": r.support_index,
            "kind": support.kind.value,
            "position": support.position,
            "horizontal": r.horizontal,
            "vertical": r.vertical,
            "moment": r.moment,
        })
    return pd.DataFrame(rows, columns=REACTION_COLUMNS)


def diagram_frame(results: AnalysisResults) -> pd.DataFrame:
    """
    Shear and moment side by side.

    The two diagrams have different jump samples (shear jumps at forces,
    moment at couples), so they are merged on x: each x keeps as many rows
    as the longer of the two diagrams has at that x, and the shorter one
    repeats its last value there.
    """
    rows = []
    shear = list(results.shear_diagram)
    moment = list(results.moment_diagram)
    i = j = 0
    while i < len(shear) or j < len(moment):
        x = min(
            shear[i].x if i < len(shear) else float("inf"),
            moment[j].x if j < len(moment) else float("inf"),
        )
        s_at = [p.value for p in shear[i:] if p.x == x]
        m_at = [p.value for p in moment[j:] if p.x == x]
        i += len(s_at)
        j += len(m_at)
        # a diagram without a sample at x repeats the previous row's value
        s_at = s_at or [rows[-1]["shear"] if rows else 0.0]
        m_at = m_at or [rows[-1]["moment"] if rows else 0.0]
        for k in range(max(len(s_at), len(m_at))):
            rows.append({
                "x": x,
                "shear": s_at[min(k, len(s_at) - 1)],
                "moment": m_at[min(k, len(m_at) - 1)],
            })
    return pd.DataFrame(rows, columns=DIAGRAM_COLUMNS)


def member_forces_frame(result: TrussResult) -> pd.DataFrame:
    rows = [
        {
            "member": mf.member_id,
            "force": mf.force,
            "state": mf.state.value,
            "length": mf.length,
            "stress": mf.stress,
            "strain": mf.strain,
            "deformation": mf.deformation,
        }
        for mf in result.member_forces
    ]
    return pd.DataFrame(rows, columns=MEMBER_COLUMNS)


def combinations_frame(results: Sequence[CombinationResult]) -> pd.DataFrame:
    rows = [
        {
            "id": r.id,
            "name": r.name,
            "value": r.value,
            "is_ultimate": r.is_ultimate,
        }
        for r in results
    ]
    return pd.DataFrame(rows, columns=COMBINATION_COLUMNS)
