"""
Input validation utilities for mvextras.

These validators follow the "fail fast, fail loud" principle at the public
boundary. They raise immediately with clear error messages rather than
silently correcting inputs. Inside the statistics, undefined quantities
become NaN instead; validation is only for programmer-facing mistakes.

Design principles:
    - Each function validates ONE thing
    - Parameter names included in all error messages
    - Error messages carry the actual offending value
"""

from collections.abc import Iterable, Sized
from typing import Any

import numpy as np

from mvextras.core.exceptions import ValidationError, DimensionError


def check_consistent_length(*arrays: Sized, names: tuple[str, ...] | None = None) -> None:
    """
    Verify all sequences have the same length.

    Args:
        *arrays: Sequences to check
        names: Optional parameter names for error messages

    Raises:
        DimensionError: If lengths differ
    """
    if len(arrays) < 2:
        return

    lengths = [len(a) for a in arrays]
    if len(set(lengths)) > 1:
        if names is None:
            names = tuple(f"array_{i}" for i in range(len(arrays)))
        details = ", ".join(f"{n}={length}" for n, length in zip(names, lengths))
        raise DimensionError(f"Inconsistent lengths: {details}")


def check_known_attributes(
    requested: Iterable[str],
    available: Iterable[str],
    name: str,
) -> None:
    """
    Verify that every requested attribute exists in the table.

    Args:
        requested: Attribute names asked for by the caller
        available: Attribute names present in the table
        name: Parameter name for error messages

    Raises:
        ValidationError: If any requested attribute is unknown
    """
    known = set(available)
    unknown = [r for r in requested if r not in known]
    if unknown:
        raise ValidationError(
            f"{name}: unknown attribute(s) {unknown}. "
            f"Available: {sorted(known)}"
        )


def check_positive_int(value: Any, name: str) -> None:
    """
    Verify value is a strictly positive integer (bool excluded).

    Raises:
        ValidationError: If value is not a positive int
    """
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise ValidationError(
            f"{name}: expected a positive integer, got {type(value).__name__} {value!r}"
        )
    if value < 1:
        raise ValidationError(f"{name}: must be >= 1, got {value}")


def check_positive_finite(value: Any, name: str) -> None:
    """
    Verify value is a finite number greater than zero.

    Raises:
        ValidationError: If value is not a positive finite number
    """
    try:
        fvalue = float(value)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"{name}: expected a number, got {value!r}") from e
    if not np.isfinite(fvalue) or fvalue <= 0:
        raise ValidationError(f"{name}: must be finite and > 0, got {value!r}")


def check_choice(value: Any, choices: tuple[str, ...], name: str) -> None:
    """
    Verify value is one of a fixed set of string options.

    Raises:
        ValidationError: If value is not among choices
    """
    if value not in choices:
        raise ValidationError(
            f"{name}: invalid value {value!r}. Must be one of {choices}."
        )
