################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of linkit
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""3x3 matrix for linear maps of Vector3."""

from __future__ import annotations

import numpy as np

from .matrix_base import MatrixBase
from .matrix_base import SingularMatrixError
from .precision import real_cos
from .precision import real_sin
from .vector3 import Vector3


__all__ = ["Matrix3", "SingularMatrixError"]


class Matrix3(MatrixBase):
    """Row-major 3x3 matrix, identity by default."""

    __slots__ = ()

    SIZE: int = 3
    VECTOR_TYPE: type[Vector3] = Vector3

    @classmethod
    def rotate(cls, angle: float, axis: Vector3) -> Matrix3:
        """
        Return the rotation by angle (radians) about axis

        Rodrigues' formula with the axis normalized first.
        """

        result: Matrix3 = cls()
        x: float
        y: float
        z: float
        x, y, z = axis.normalized()
        c: float = real_cos(angle)
        s: float = real_sin(angle)
        t: float = 1.0 - c

        result.m[:, :] = [
            [c + x * x * t, x * y * t - z * s, x * z * t + y * s],
            [y * x * t + z * s, c + y * y * t, y * z * t - x * s],
            [z * x * t - y * s, z * y * t + x * s, c + z * z * t],
        ]
        return result

    @classmethod
    def matrix_from_rows(cls, row1: Vector3, row2: Vector3, row3: Vector3) -> Matrix3:
        """Return the matrix with the given rows."""
        return cls([list(row1), list(row2), list(row3)])

    @classmethod
    def matrix_from_columns(
        cls, col1: Vector3, col2: Vector3, col3: Vector3
    ) -> Matrix3:
        """Return the matrix with the given columns."""
        result: Matrix3 = cls.matrix_from_rows(col1, col2, col3)
        result.transpose()
        return result

    def determinant(self) -> float:
        """Cofactor expansion along the first row."""
        (a, b, c), (d, e, f), (g, h, i) = self.m
        return float(a * (e * i - f * h) - b * (d * i - f * g) + c * (d * h - e * g))

    def _adjugate(self) -> np.ndarray:
        (a, b, c), (d, e, f), (g, h, i) = self.m
        return np.array(
            [
                [e * i - f * h, c * h - b * i, b * f - c * e],
                [f * g - d * i, a * i - c * g, c * d - a * f],
                [d * h - e * g, b * g - a * h, a * e - b * d],
            ],
            dtype=self.m.dtype,
        )
