"""
Regression backends.

Available backends:
    coordinate_descent: CPU cyclic coordinate descent on centered data
"""

from mvextras.regression.backends.cpu import DEGENERATE_COLUMN_NORM, coordinate_descent

__all__ = [
    "coordinate_descent",
    "DEGENERATE_COLUMN_NORM",
]
