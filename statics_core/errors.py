# statics_core/errors.py
"""Typed errors raised by the solvers to their immediate caller."""


class AnalysisError(RuntimeError):
    """Base class for every failure of a statics computation."""
    pass


class InsufficientSupportsError(AnalysisError):
    """Raised when a beam has no supports at all."""

    def __init__(self, message: str = "Beam has no supports; at least one is required."):
        super().__init__(message)


class _DeterminacyError(AnalysisError):
    kind = ""

    def __init__(self, unknowns: int, equations: int):
        self.unknowns = unknowns
        self.equations = equations
        super().__init__(
            f"Statically {self.kind} structure. Unknowns: {unknowns}, Equations: {equations}"
        )


class StaticallyUnstableError(_DeterminacyError):
    """Fewer reaction unknowns than equilibrium equations (a mechanism)."""
    kind = "unstable"


class StaticallyIndeterminateError(_DeterminacyError):
    """More reaction unknowns than equilibrium equations."""
    kind = "indeterminate"


class MatrixSolutionError(AnalysisError):
    """Raised when the linear system is singular (geometric instability)."""

    def __init__(self, message: str = "Matrix solution failed: structure may be unstable"):
        super().__init__(message)


class UnsupportedUnitConversionError(AnalysisError):
    """Raised for a unit pair with no known conversion factor."""

    def __init__(self, from_unit: str, to_unit: str):
        self.from_unit = from_unit
        self.to_unit = to_unit
        super().__init__(f"Unsupported conversion: {from_unit} to {to_unit}")
