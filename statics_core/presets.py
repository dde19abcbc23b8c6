# statics_core/presets.py
"""Ready-made beam and truss configurations for demos and quick checks."""

from typing import Dict, List, Tuple

from .loads import PointLoad, UniformLoad
from .model import BeamConfig, Support, SupportKind
from .truss.model import TrussLoad, TrussMember, TrussNode

BEAM_PRESETS: Dict[str, BeamConfig] = {
    "simply-supported-point": BeamConfig(
        length=6.0,
        supports=[Support(SupportKind.PINNED, 0.0), Support(SupportKind.ROLLER, 6.0)],
        loads=[PointLoad(position=3.0, magnitude=10.0)],
    ),
    "simply-supported-udl": BeamConfig(
        length=8.0,
        supports=[Support(SupportKind.PINNED, 0.0), Support(SupportKind.ROLLER, 8.0)],
        loads=[UniformLoad(start=0.0, end=8.0, magnitude=5.0)],
    ),
    "cantilever": BeamConfig(
        length=4.0,
        supports=[Support(SupportKind.FIXED, 0.0)],
        loads=[PointLoad(position=4.0, magnitude=15.0)],
    ),
    "overhang": BeamConfig(
        length=8.0,
        supports=[Support(SupportKind.PINNED, 0.0), Support(SupportKind.ROLLER, 6.0)],
        loads=[
            UniformLoad(start=0.0, end=6.0, magnitude=4.0),
            PointLoad(position=8.0, magnitude=6.0),
        ],
    ),
}

BEAM_LABELS: Dict[str, str] = {
    "simply-supported-point": "Simply supported, point load",
    "simply-supported-udl": "Simply supported, uniform load",
    "cantilever": "Cantilever, tip load",
    "overhang": "Simply supported with overhang",
}

TrussPreset = Tuple[List[TrussNode], List[TrussMember], List[TrussLoad]]

TRUSS_PRESETS: Dict[str, TrussPreset] = {
    "triangular": (
        [
            TrussNode("A", 0.0, 0.0, fixed=True),
            TrussNode("B", 6.0, 0.0, roller=True),
            TrussNode("C", 3.0, 4.0),
        ],
        [
            TrussMember("AC", "A", "C"),
            TrussMember("BC", "B", "C"),
            TrussMember("AB", "A", "B"),
        ],
        [TrussLoad("C", fx=0.0, fy=-10.0)],
    ),
    "warren": (
        [
            TrussNode("A", 0.0, 0.0, fixed=True),
            TrussNode("B", 8.0, 0.0, roller=True),
            TrussNode("C", 2.0, 3.46),
            TrussNode("D", 4.0, 0.0),
            TrussNode("E", 6.0, 3.46),
        ],
        [
            TrussMember("AD", "A", "D"),
            TrussMember("DB", "D", "B"),
            TrussMember("AC", "A", "C"),
            TrussMember("CD", "C", "D"),
            TrussMember("CE", "C", "E"),
            TrussMember("DE", "D", "E"),
            TrussMember("EB", "E", "B"),
        ],
        [
            TrussLoad("C", fy=-10.0),
            TrussLoad("E", fy=-10.0),
            TrussLoad("D", fy=-10.0),
        ],
    ),
}

TRUSS_LABELS: Dict[str, str] = {
    "triangular": "Simple triangular truss",
    "warren": "Warren truss (8 m)",
}


def get_beam_preset(key: str) -> BeamConfig:
    """Raises KeyError for an unknown preset."""
    return BEAM_PRESETS[key]


def get_truss_preset(key: str) -> TrussPreset:
    """(nodes, members, loads); raises KeyError for an unknown preset."""
    return TRUSS_PRESETS[key]
