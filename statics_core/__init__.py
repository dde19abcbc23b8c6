# statics_core - Structural Statics Computation Core
"""
STATICS-CORE: Reactions, Diagrams and Truss Forces
==================================================

This package provides:
- Support reactions of statically determinate beams
- Exact shear and moment diagrams with their extrema
- Direct stiffness analysis of planar pin-jointed trusses
- Standard load combinations, material grades, section properties

ARCHITECTURE:
-------------
    kernel/         Matrix plumbing (DOF indexing, assembly, LU solve)
    config.py       Numeric tolerances and defaults
    errors.py       Typed analysis errors
    loads.py        Beam load variants and their resultants
    model.py        Supports, BeamConfig, result records
    beam.py         Equilibrium solve for reactions
    diagrams.py     Shear and moment diagrams
    truss/          Planar truss model and solver
    combinations.py Load combination catalog
    catalog.py      Material grades
    sections.py     Cross-section properties
    checks/         Stress checks
    units.py        Unit conversion
    presets.py      Example beams and trusses
    tables.py       pandas views of results
"""

from .config import CONFIG, AnalysisConfig
from .errors import (
    AnalysisError,
    InsufficientSupportsError,
    MatrixSolutionError,
    StaticallyIndeterminateError,
    StaticallyUnstableError,
    UnsupportedUnitConversionError,
)
from .loads import MomentLoad, PointLoad, TriangularLoad, UniformLoad
from .model import (
    AnalysisResults,
    BeamConfig,
    DiagramPoint,
    Extremum,
    ReactionResult,
    Support,
    SupportKind,
)
from .beam import analyze_beam, solve_reactions
from .diagrams import generate_diagrams
from .truss import (
    AxialState,
    MemberForce,
    TrussLoad,
    TrussMember,
    TrussNode,
    TrussResult,
    find_zero_force_members,
    max_member_force,
    max_member_stress,
    solve_truss,
)
from .combinations import (
    STANDARD_COMBINATIONS,
    LoadCombination,
    LoadSymbol,
    evaluate_all,
    find_critical_combination,
)
from .catalog import get_material
from .checks import check_bending_stress, check_compressive_stress
from .sections import section_properties
from .units import convert_units

__version__ = "0.1.0"
