"""
Generic result container for all mvextras computations.

Every solver wraps its domain payload in a Result so that timing, warnings
and metadata travel the same way regardless of which statistic produced
them.

Design decisions:
    - Generic over parameter payload P
    - info dict for flexible metadata (converged, iterations, measure type)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True)
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for statistical computations.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain-specific payload (ANOVA table, fit, association records)
        info: Structured metadata (method, convergence, diagnostics)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the routine that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=fit_params,
        ...     info={'method': 'coordinate_descent', 'converged': True,
        ...           'iterations': 3},
        ...     timing={'total_seconds': 0.01},
        ...     backend_name='cpu_coordinate_descent'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
