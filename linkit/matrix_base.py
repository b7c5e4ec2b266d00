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
Operations shared by the fixed-size square matrix types

Conventions:
    * Storage is the row-major ``m`` array, identity by default
    * Matrices act on column vectors from the left: ``M * v``
    * Scalar operators apply component-wise, ``s - M`` is ``s - m[i][j]``
    * Division by a near-zero scalar returns identity (``/``) or leaves the
      matrix unchanged (``/=``)
    * Inverting a singular matrix is a no-op, see ``checked_inverse`` for the
      raising variant
    * ``==`` compares components within epsilon
"""

from __future__ import annotations

import abc
import logging
import numbers
from typing import Any
from typing import TypeVar

import numpy as np

from .precision import epsilon
from .precision import get_precision
from .precision import is_near_zero
from .precision import real_array
from .vector_base import VectorBase


_LOG: logging.Logger = logging.getLogger(__name__)

MatrixT = TypeVar("MatrixT", bound="MatrixBase")


class SingularMatrixError(ValueError):
    """Raised by checked_inverse() when the determinant is below epsilon."""


class MatrixBase(abc.ABC):
    """Base class for Matrix3 and Matrix4."""

    __slots__ = ("m",)

    # Keep numpy scalars on the left from broadcasting over the matrix
    __array_ufunc__ = None

    SIZE: int = 0
    VECTOR_TYPE: type[VectorBase] = VectorBase

    m: np.ndarray

    def __init__(self, values: Any = None) -> None:
        """Create an identity matrix, or copy SIZE x SIZE values."""
        if values is None:
            self.m = np.eye(self.SIZE, dtype=get_precision().numpy_dtype)
        else:
            self.m = real_array(values, (self.SIZE, self.SIZE), type(self).__name__)

    @classmethod
    def identity(cls: type[MatrixT]) -> MatrixT:
        """Return the identity matrix."""
        return cls()

    @classmethod
    def _wrap(cls: type[MatrixT], m: np.ndarray) -> MatrixT:
        mat: MatrixT = cls.__new__(cls)
        mat.m = m
        return mat

    def _like(self: MatrixT, m: np.ndarray) -> MatrixT:
        # Results keep the receiver's dtype
        return self._wrap(m.astype(self.m.dtype, copy=False))

    @classmethod
    def scale(cls: type[MatrixT], scale_vec: VectorBase) -> MatrixT:
        """Return a scale matrix with the vector's x, y, z on the diagonal."""
        result: MatrixT = cls()
        for i in range(3):
            result.m[i, i] = scale_vec.data[i]
        return result

    def copy(self: MatrixT) -> MatrixT:
        """Return an independent copy."""
        return self._wrap(self.m.copy())

    def to_numpy(self) -> np.ndarray:
        """Return a copy of the components."""
        return self.m.copy()

    def is_finite(self) -> bool:
        """Return True when every component is finite."""
        return bool(np.all(np.isfinite(self.m)))

    def __getitem__(self, index: tuple[int, int]) -> float:
        return float(self.m[index])

    def __setitem__(self, index: tuple[int, int], value: float) -> None:
        self.m[index] = value

    #
    # Products
    #

    def __mul__(self, other: object) -> Any:
        if isinstance(other, type(self)):
            return self._like(self.m @ other.m)
        if isinstance(other, self.VECTOR_TYPE):
            return other._like(self.m @ other.data)
        if isinstance(other, numbers.Real):
            return self._like(self.m * other)
        return NotImplemented

    def __rmul__(self: MatrixT, other: object) -> MatrixT:
        if isinstance(other, numbers.Real):
            return self._like(self.m * other)
        return NotImplemented

    def __imul__(self: MatrixT, other: object) -> MatrixT:
        if isinstance(other, type(self)):
            self.m = self._like(self.m @ other.m).m
            return self
        if isinstance(other, numbers.Real):
            self.m *= other
            return self
        return NotImplemented

    #
    # Scalar operations
    #

    def __add__(self: MatrixT, other: object) -> MatrixT:
        if isinstance(other, numbers.Real):
            return self._like(self.m + other)
        return NotImplemented

    def __radd__(self: MatrixT, other: object) -> MatrixT:
        return self.__add__(other)

    def __iadd__(self: MatrixT, other: object) -> MatrixT:
        if isinstance(other, numbers.Real):
            self.m += other
            return self
        return NotImplemented

    def __sub__(self: MatrixT, other: object) -> MatrixT:
        if isinstance(other, numbers.Real):
            return self._like(self.m - other)
        return NotImplemented

    def __rsub__(self: MatrixT, other: object) -> MatrixT:
        if isinstance(other, numbers.Real):
            return self._like(other - self.m)
        return NotImplemented

    def __isub__(self: MatrixT, other: object) -> MatrixT:
        if isinstance(other, numbers.Real):
            self.m -= other
            return self
        return NotImplemented

    def __truediv__(self: MatrixT, other: object) -> MatrixT:
        if not isinstance(other, numbers.Real):
            return NotImplemented
        if is_near_zero(float(other)):
            _LOG.debug(
                "Division of %s by near-zero %s, returning identity",
                type(self).__name__,
                other,
            )
            return type(self)()
        return self._like(self.m / other)

    def __itruediv__(self: MatrixT, other: object) -> MatrixT:
        if not isinstance(other, numbers.Real):
            return NotImplemented
        if is_near_zero(float(other)):
            _LOG.debug(
                "Ignoring division of %s by near-zero %s",
                type(self).__name__,
                other,
            )
            return self
        self.m /= other
        return self

    def scaled_by(self: MatrixT, scalar: float) -> MatrixT:
        """Return a copy with every component multiplied by a scalar."""
        return self._like(self.m * scalar)

    #
    # Comparison
    #

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return bool(np.all(np.abs(self.m - other.m) <= epsilon()))

    #
    # Determinant and inversion
    #

    @abc.abstractmethod
    def determinant(self) -> float:
        raise NotImplementedError

    @abc.abstractmethod
    def _adjugate(self) -> np.ndarray:
        """Return the transposed cofactor matrix."""
        raise NotImplementedError

    def is_invertible(self) -> bool:
        """Return True when |det| is at least epsilon."""
        return not is_near_zero(self.determinant())

    def invert(self) -> None:
        """
        Invert in place using the adjugate method

        A singular matrix (|det| below epsilon) is left unchanged.
        """

        det: float = self.determinant()
        if is_near_zero(det):
            _LOG.debug(
                "Skipping inversion of singular %s, det=%s",
                type(self).__name__,
                det,
            )
            return
        self.m = self._like(self._adjugate() * (1.0 / det)).m

    def inverse(self: MatrixT) -> MatrixT:
        """Return the inverted copy, or an unchanged copy when singular."""
        result: MatrixT = self.copy()
        result.invert()
        return result

    def checked_inverse(self: MatrixT) -> MatrixT:
        """Return the inverted copy, raising SingularMatrixError when singular."""
        det: float = self.determinant()
        if is_near_zero(det):
            raise SingularMatrixError(
                f"{type(self).__name__} determinant {det} is below epsilon"
            )
        return self._like(self._adjugate() * (1.0 / det))

    #
    # Transpose
    #

    def transpose(self) -> None:
        """Swap the off-diagonal pairs in place."""
        for i in range(self.SIZE):
            for j in range(i + 1, self.SIZE):
                self.m[i, j], self.m[j, i] = self.m[j, i], self.m[i, j]

    def transposed(self: MatrixT) -> MatrixT:
        """Return the transposed copy."""
        result: MatrixT = self.copy()
        result.transpose()
        return result

    #
    # Basis change
    #

    def changed_base(self: MatrixT, new_base: MatrixT) -> MatrixT:
        """
        Return B^-1 * M * B

        Expresses this matrix in the basis B, for example world to local.
        """

        return new_base.inverse() * self * new_base

    def inverted_changed_base(self: MatrixT, new_base: MatrixT) -> MatrixT:
        """
        Return B * M * B^-1

        The inverse direction of changed_base(), for example local to world.
        """

        return new_base * self * new_base.inverse()

    #
    # Rendering
    #

    def to_string(self) -> str:
        rows: list[str] = [
            "  [" + ", ".join(f"{float(value):.6f}" for value in row) + "]"
            for row in self.m
        ]
        return "[\n" + "\n".join(rows) + "\n]"

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.m.tolist()!r})"
