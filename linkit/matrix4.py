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
4x4 matrix for affine transforms of homogeneous Vector4

Conventions:
    * Row-major storage, column vectors multiplied from the right
    * Translation lives in the last column of the top three rows
    * Determinant and inverse are closed form, built from the six 2x2 minors
      of the top two rows and the six complementary minors of the bottom two
"""

from __future__ import annotations

import numpy as np

from .matrix3 import Matrix3
from .matrix_base import MatrixBase
from .vector3 import Vector3
from .vector4 import Vector4


class Matrix4(MatrixBase):
    """Row-major 4x4 matrix, identity by default."""

    __slots__ = ()

    SIZE: int = 4
    VECTOR_TYPE: type[Vector4] = Vector4

    @classmethod
    def translate(cls, translation: Vector3) -> Matrix4:
        """Return the translation by a vector."""
        result: Matrix4 = cls()
        result.m[0:3, 3] = translation.data
        return result

    @classmethod
    def rotate(cls, angle: float, axis: Vector3) -> Matrix4:
        """Return the rotation by angle (radians) about axis."""
        result: Matrix4 = cls()
        result.m[0:3, 0:3] = Matrix3.rotate(angle, axis).m
        return result

    @classmethod
    def matrix_from_rows(
        cls, row1: Vector4, row2: Vector4, row3: Vector4, row4: Vector4
    ) -> Matrix4:
        """Return the matrix with the given rows."""
        return cls([list(row1), list(row2), list(row3), list(row4)])

    @classmethod
    def matrix_from_columns(
        cls, col1: Vector4, col2: Vector4, col3: Vector4, col4: Vector4
    ) -> Matrix4:
        """Return the matrix with the given columns."""
        result: Matrix4 = cls.matrix_from_rows(col1, col2, col3, col4)
        result.transpose()
        return result

    def _minors(self) -> tuple[list[float], list[float]]:
        a00, a01, a02, a03 = self.m[0]
        a10, a11, a12, a13 = self.m[1]
        a20, a21, a22, a23 = self.m[2]
        a30, a31, a32, a33 = self.m[3]

        # 2x2 minors of rows 0 and 1, columns (0,1) (0,2) (0,3) (1,2) (1,3) (2,3)
        s: list[float] = [
            a00 * a11 - a10 * a01,
            a00 * a12 - a10 * a02,
            a00 * a13 - a10 * a03,
            a01 * a12 - a11 * a02,
            a01 * a13 - a11 * a03,
            a02 * a13 - a12 * a03,
        ]

        # 2x2 minors of rows 2 and 3, columns (0,1) (0,2) (0,3) (1,2) (1,3) (2,3)
        c: list[float] = [
            a20 * a31 - a30 * a21,
            a20 * a32 - a30 * a22,
            a20 * a33 - a30 * a23,
            a21 * a32 - a31 * a22,
            a21 * a33 - a31 * a23,
            a22 * a33 - a32 * a23,
        ]
        return s, c

    def determinant(self) -> float:
        """Laplace expansion along the top two rows."""
        s: list[float]
        c: list[float]
        s, c = self._minors()
        return float(
            s[0] * c[5]
            - s[1] * c[4]
            + s[2] * c[3]
            + s[3] * c[2]
            - s[4] * c[1]
            + s[5] * c[0]
        )

    def _adjugate(self) -> np.ndarray:
        s: list[float]
        c: list[float]
        s, c = self._minors()
        a00, a01, a02, a03 = self.m[0]
        a10, a11, a12, a13 = self.m[1]
        a20, a21, a22, a23 = self.m[2]
        a30, a31, a32, a33 = self.m[3]

        return np.array(
            [
                [
                    a11 * c[5] - a12 * c[4] + a13 * c[3],
                    -a01 * c[5] + a02 * c[4] - a03 * c[3],
                    a31 * s[5] - a32 * s[4] + a33 * s[3],
                    -a21 * s[5] + a22 * s[4] - a23 * s[3],
                ],
                [
                    -a10 * c[5] + a12 * c[2] - a13 * c[1],
                    a00 * c[5] - a02 * c[2] + a03 * c[1],
                    -a30 * s[5] + a32 * s[2] - a33 * s[1],
                    a20 * s[5] - a22 * s[2] + a23 * s[1],
                ],
                [
                    a10 * c[4] - a11 * c[2] + a13 * c[0],
                    -a00 * c[4] + a01 * c[2] - a03 * c[0],
                    a30 * s[4] - a31 * s[2] + a33 * s[0],
                    -a20 * s[4] + a21 * s[2] - a23 * s[0],
                ],
                [
                    -a10 * c[3] + a11 * c[1] - a12 * c[0],
                    a00 * c[3] - a01 * c[1] + a02 * c[0],
                    -a30 * s[3] + a31 * s[1] - a32 * s[0],
                    a20 * s[3] - a21 * s[1] + a22 * s[0],
                ],
            ],
            dtype=self.m.dtype,
        )
