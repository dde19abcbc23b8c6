# statics_core/checks - Design stress checks
"""Compressive and bending stress checks for catalog materials."""

from .stress import (
    StressCheck,
    bending_limit,
    check_bending_stress,
    check_compressive_stress,
    compressive_limit,
)

__all__ = [
    'StressCheck',
    'bending_limit',
    'check_bending_stress',
    'check_compressive_stress',
    'compressive_limit',
]
