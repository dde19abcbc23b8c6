# statics_core/config.py
"""
Analysis configuration and defaults.
"""

from dataclasses import dataclass


@dataclass
class AnalysisConfig:
    """Global numeric configuration shared by the solvers."""

    # Equilibrium residual accepted after a solve (kN, kNm)
    equilibrium_tol: float = 1e-6

    # Smallest acceptable LU pivot, relative to the largest matrix entry.
    # Also rejects stable systems whose stiffnesses span ~1e12 or more.
    pivot_tol: float = 1e-12

    # Threshold below which a force is reported as zero
    zero_tol: float = 1e-9

    # Axial stiffness EA/L used for truss members without their own value
    truss_stiffness: float = 1000.0

    # Member properties for stress and strain when a member gives none
    member_elastic_modulus: float = 200000.0  # MPa
    member_area: float = 500.0                # mm²

    # Number of equilibrium equations for a planar beam under transverse load
    beam_equations: int = 2


# Global config instance
CONFIG = AnalysisConfig()
