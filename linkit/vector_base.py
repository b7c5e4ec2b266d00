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
Arithmetic shared by the fixed-size vector types

Conventions:
    * Components live in the ``data`` array, dtype fixed at creation
    * ``v * w`` between two vectors of the same type is the dot product
    * Scalar-left operators behave exactly like their scalar-right forms,
      including ``s - v == v - s`` and ``s / v == v / s``
    * Division by a near-zero scalar leaves the components unchanged
    * ``==`` compares components exactly, ``almost_equal`` within epsilon
"""

from __future__ import annotations

import logging
import numbers
from collections.abc import Iterator
from typing import Any
from typing import TypeVar

import numpy as np

from .precision import DegenerateValueError
from .precision import epsilon
from .precision import is_near_zero
from .precision import real_array


_LOG: logging.Logger = logging.getLogger(__name__)

VectorT = TypeVar("VectorT", bound="VectorBase")


class VectorBase:
    """Base class for Vector3 and Vector4."""

    __slots__ = ("data",)

    # Numpy scalars on the left defer to the reflected operators below
    __array_ufunc__ = None

    SIZE: int = 0

    data: np.ndarray

    @classmethod
    def from_array(cls: type[VectorT], values: Any) -> VectorT:
        """Create a vector from any sequence or array of SIZE components."""
        return cls._wrap(real_array(values, (cls.SIZE,), cls.__name__))

    @classmethod
    def _wrap(cls: type[VectorT], data: np.ndarray) -> VectorT:
        vec: VectorT = cls.__new__(cls)
        vec.data = data
        return vec

    def _like(self: VectorT, data: np.ndarray) -> VectorT:
        # Results keep the receiver's dtype
        return self._wrap(data.astype(self.data.dtype, copy=False))

    def copy(self: VectorT) -> VectorT:
        """Return an independent copy."""
        return self._wrap(self.data.copy())

    def to_numpy(self) -> np.ndarray:
        """Return a copy of the components."""
        return self.data.copy()

    def is_finite(self) -> bool:
        """Return True when every component is finite."""
        return bool(np.all(np.isfinite(self.data)))

    def __iter__(self) -> Iterator[float]:
        for value in self.data:
            yield float(value)

    def __len__(self) -> int:
        return self.SIZE

    def __getitem__(self, index: int) -> float:
        return float(self.data[index])

    #
    # Magnitude
    #

    def magnitude_squared(self) -> float:
        return float(np.dot(self.data, self.data))

    def magnitude(self) -> float:
        return float(np.sqrt(np.dot(self.data, self.data)))

    def normalize(self) -> None:
        """
        Scale to unit length in place

        A zero vector, or one shorter than epsilon, is left unchanged.
        """

        mag: float = self.magnitude()
        if mag > 0.0:
            self /= mag

    def normalized(self: VectorT) -> VectorT:
        """Return a normalized copy."""
        result: VectorT = self.copy()
        result.normalize()
        return result

    def checked_normalized(self: VectorT) -> VectorT:
        """Return a normalized copy, raising for a degenerate vector."""
        mag: float = self.magnitude()
        if is_near_zero(mag):
            raise DegenerateValueError(
                f"{type(self).__name__} magnitude {mag} is below epsilon"
            )
        return self._like(self.data / mag)

    def invert(self) -> None:
        """Negate every component in place."""
        self.data *= -1

    def __neg__(self: VectorT) -> VectorT:
        return self._like(-self.data)

    #
    # Addition and subtraction
    #

    def __add__(self: VectorT, other: object) -> VectorT:
        if isinstance(other, type(self)):
            return self._like(self.data + other.data)
        if isinstance(other, numbers.Real):
            return self._like(self.data + other)
        return NotImplemented

    def __radd__(self: VectorT, other: object) -> VectorT:
        if isinstance(other, numbers.Real):
            return self._like(self.data + other)
        return NotImplemented

    def __iadd__(self: VectorT, other: object) -> VectorT:
        if isinstance(other, type(self)):
            self.data += other.data
            return self
        if isinstance(other, numbers.Real):
            self.data += other
            return self
        return NotImplemented

    def __sub__(self: VectorT, other: object) -> VectorT:
        if isinstance(other, type(self)):
            return self._like(self.data - other.data)
        if isinstance(other, numbers.Real):
            return self._like(self.data - other)
        return NotImplemented

    def __rsub__(self: VectorT, other: object) -> VectorT:
        # Same result as v - s
        if isinstance(other, numbers.Real):
            return self._like(self.data - other)
        return NotImplemented

    def __isub__(self: VectorT, other: object) -> VectorT:
        if isinstance(other, type(self)):
            self.data -= other.data
            return self
        if isinstance(other, numbers.Real):
            self.data -= other
            return self
        return NotImplemented

    #
    # Products
    #

    def __mul__(self, other: object) -> Any:
        if isinstance(other, type(self)):
            return self.dot(other)
        if isinstance(other, numbers.Real):
            return self._like(self.data * other)
        return NotImplemented

    def __rmul__(self, other: object) -> Any:
        if isinstance(other, numbers.Real):
            return self._like(self.data * other)
        return NotImplemented

    def __imul__(self: VectorT, other: object) -> VectorT:
        if isinstance(other, numbers.Real):
            self.data *= other
            return self
        return NotImplemented

    def dot(self: VectorT, other: VectorT) -> float:
        """Return the dot product."""
        return float(np.dot(self.data, other.data))

    #
    # Division
    #

    def __truediv__(self: VectorT, other: object) -> VectorT:
        if isinstance(other, numbers.Real):
            result: VectorT = self.copy()
            result /= other
            return result
        return NotImplemented

    def __rtruediv__(self: VectorT, other: object) -> VectorT:
        # Same result as v / s
        return self.__truediv__(other)

    def __itruediv__(self: VectorT, other: object) -> VectorT:
        if not isinstance(other, numbers.Real):
            return NotImplemented
        if is_near_zero(float(other)):
            _LOG.debug("Ignoring division of %r by near-zero %s", self, other)
            return self
        self.data /= other
        return self

    #
    # Named forms of the operators
    #

    def add(self: VectorT, other: VectorT | float) -> VectorT:
        """Return self + other."""
        return self + other

    def subtract(self: VectorT, other: VectorT | float) -> VectorT:
        """Return self - other."""
        return self - other

    def scaled_by(self: VectorT, scalar: float) -> VectorT:
        """Return a copy multiplied by a scalar."""
        return self._like(self.data * scalar)

    def scale(self, scalar: float) -> None:
        """Multiply by a scalar in place."""
        self.data *= scalar

    def add_scaled_vector(self: VectorT, other: VectorT, scale: float) -> None:
        """Add other * scale in place."""
        self.data += other.data * scale

    #
    # Comparison
    #

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return bool(np.array_equal(self.data, other.data))

    def almost_equal(self: VectorT, other: VectorT, eps: float | None = None) -> bool:
        """Return True when every component differs by at most epsilon."""
        threshold: float = epsilon() if eps is None else eps
        return bool(np.all(np.abs(self.data - other.data) <= threshold))

    #
    # Rendering
    #

    def to_string(self) -> str:
        return "(" + ", ".join(f"{value:.6f}" for value in self) + ")"

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(repr(value) for value in self)})"
