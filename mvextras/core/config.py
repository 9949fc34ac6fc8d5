"""
Analysis configuration.

A single frozen dataclass collects the knobs consulted by the association
dispatcher and the regression solver. Solvers also accept the same values
as keyword-only arguments; the config object exists so a session can carry
one consistent set of choices across many requests.
"""

from dataclasses import dataclass, replace
from typing import Literal

from mvextras.core.validation import (
    check_choice,
    check_positive_finite,
    check_positive_int,
)

NPCRMode = Literal['blank', 'eta']

NPCR_MODES: tuple[str, ...] = ('blank', 'eta')

DEFAULT_MAX_ITER = 50
DEFAULT_TOL = 1e-6
DEFAULT_CI_Z = 1.96


@dataclass(frozen=True)
class AnalysisConfig:
    """
    Configuration for association sweeps and regression fits.

    Attributes:
        npcr_mode: How to treat a numeric predictor with a categorical
            response. 'blank' leaves the measure unset (None); 'eta' reuses
            the eta computation with predictor and response swapped. Neither
            is a principled statistic for this pairing.
        max_iter: Maximum major iterations of coordinate descent.
        tol: Convergence threshold on the largest coefficient change.
        empty_string_missing: Whether an empty string in a categorical
            column counts as missing (True) or as its own category.
        ci_z: Normal quantile used for the Pearson confidence interval.
    """
    npcr_mode: NPCRMode = 'blank'
    max_iter: int = DEFAULT_MAX_ITER
    tol: float = DEFAULT_TOL
    empty_string_missing: bool = True
    ci_z: float = DEFAULT_CI_Z

    def __post_init__(self):
        check_choice(self.npcr_mode, NPCR_MODES, 'npcr_mode')
        check_positive_int(self.max_iter, 'max_iter')
        check_positive_finite(self.tol, 'tol')
        check_positive_finite(self.ci_z, 'ci_z')

    def with_options(self, **changes) -> 'AnalysisConfig':
        """Return a copy with the given fields replaced (re-validated)."""
        return replace(self, **changes)


DEFAULT_CONFIG = AnalysisConfig()
