################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of linkit
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""
Scalar policy shared by every linkit type

Conventions:
    * One floating-point width ("real") is active per process, float64 by
      default
    * Components of vectors, matrices and quaternions are stored in numpy
      arrays of the active dtype at the time they are created
    * The active epsilon decides when a value is "effectively zero" for
      equality, division and singularity checks
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from dataclasses import replace

import numpy as np


_LOG: logging.Logger = logging.getLogger(__name__)


# Near-zero threshold for double precision
DOUBLE_EPSILON: float = 1e-6
# Near-zero threshold for single precision, looser to absorb float32 round-off
SINGLE_EPSILON: float = 1e-4

# Default scalar dtype name
DEFAULT_DTYPE: str = "float64"

# Supported scalar dtype names
SUPPORTED_DTYPES: frozenset[str] = frozenset({"float32", "float64"})

PI: float = math.pi


class PrecisionError(Exception):
    """Raised when a precision setting fails validation."""


class DegenerateValueError(ValueError):
    """Raised by checked operations when a value is effectively zero."""


@dataclass(frozen=True)
class Precision:
    """
    Scalar width and tolerance used across the library

    Fields:
        dtype: numpy dtype name of the scalar type, float32 or float64
        epsilon: Threshold below which a magnitude is treated as zero
    """

    dtype: str = DEFAULT_DTYPE
    epsilon: float = DOUBLE_EPSILON

    @classmethod
    def defaults(cls) -> Precision:
        """Return the double precision setting."""
        return cls()

    @classmethod
    def single(cls) -> Precision:
        """Return the single precision setting."""
        return cls(dtype="float32", epsilon=SINGLE_EPSILON)

    def replace(self, **changes: object) -> Precision:
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)  # type: ignore[arg-type]

    def validate(self) -> None:
        """Check the dtype name and epsilon."""
        if self.dtype not in SUPPORTED_DTYPES:
            raise PrecisionError(
                f"dtype must be one of {sorted(SUPPORTED_DTYPES)}, got {self.dtype!r}"
            )
        if not math.isfinite(self.epsilon) or self.epsilon <= 0.0:
            raise PrecisionError("epsilon must be finite and positive")

    @property
    def numpy_dtype(self) -> np.dtype:
        """Return the numpy dtype object."""
        return np.dtype(self.dtype)


_active: Precision = Precision.defaults()


def get_precision() -> Precision:
    """Return the active precision."""
    return _active


def set_precision(precision: Precision) -> Precision:
    """
    Install a new active precision and return the previous one

    Values created before the change keep their storage dtype.
    """

    global _active

    precision.validate()
    previous: Precision = _active
    _active = precision
    if precision != previous:
        _LOG.info(
            "Scalar precision set to %s (epsilon=%s)",
            precision.dtype,
            precision.epsilon,
        )
    return previous


@contextmanager
def precision_scope(precision: Precision) -> Iterator[Precision]:
    """Activate a precision for the duration of a with-block."""
    previous: Precision = set_precision(precision)
    try:
        yield precision
    finally:
        set_precision(previous)


def epsilon() -> float:
    """Return the active epsilon."""
    return _active.epsilon


def real(value: float) -> float:
    """Round a value to the active scalar width."""
    return float(_active.numpy_dtype.type(value))


def real_array(values: object, shape: tuple[int, ...], name: str) -> np.ndarray:
    """Return a copy of values as an array of the active dtype and given shape."""
    array: np.ndarray = np.array(values, dtype=_active.numpy_dtype)
    if array.shape != shape:
        raise ValueError(f"{name} must have shape {shape}, got {array.shape}")
    return array


def is_near_zero(value: float, eps: float | None = None) -> bool:
    """Return True when |value| is below the active (or given) epsilon."""
    threshold: float = _active.epsilon if eps is None else eps
    return abs(value) < threshold


def clamp_unit(value: float) -> float:
    """Clamp a value to [-1, 1] before an inverse trig call."""
    return float(np.clip(value, -1.0, 1.0))


def real_sqrt(num: float) -> float:
    """Square root."""
    return math.sqrt(num)


def real_pow(base: float, exp: float) -> float:
    """Power."""
    return math.pow(base, exp)


def real_sin(angle: float) -> float:
    """Sine of an angle in radians."""
    return math.sin(angle)


def real_cos(angle: float) -> float:
    """Cosine of an angle in radians."""
    return math.cos(angle)


def real_acos(cosine: float) -> float:
    """Arc cosine, with the argument clamped to [-1, 1]."""
    return math.acos(clamp_unit(cosine))


def real_asin(sine: float) -> float:
    """Arc sine, with the argument clamped to [-1, 1]."""
    return math.asin(clamp_unit(sine))
