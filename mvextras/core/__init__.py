"""
Core infrastructure for mvextras.

Shared abstractions used by every statistics submodule.

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    config: AnalysisConfig options
    session: Session state (hidden attributes, run ids)
    timing: Timer
"""

from mvextras.core.config import DEFAULT_CONFIG, AnalysisConfig
from mvextras.core.exceptions import (
    ConvergenceError,
    DimensionError,
    MVExtrasError,
    NumericalError,
    RegressionAbortedError,
    SweepCancelled,
    ValidationError,
)
from mvextras.core.result import Result
from mvextras.core.session import Session
from mvextras.core.timing import Timer, timed

__all__ = [
    # Result
    "Result",
    # Configuration and state
    "AnalysisConfig",
    "DEFAULT_CONFIG",
    "Session",
    "Timer",
    "timed",
    # Exceptions
    "MVExtrasError",
    "ValidationError",
    "DimensionError",
    "NumericalError",
    "ConvergenceError",
    "RegressionAbortedError",
    "SweepCancelled",
]
