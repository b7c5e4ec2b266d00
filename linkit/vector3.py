################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of linkit
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Three-component vector."""

from __future__ import annotations

import numpy as np

from .precision import real_array
from .vector_base import VectorBase


class Vector3(VectorBase):
    """Vector (x, y, z), zero by default."""

    __slots__ = ()

    SIZE: int = 3

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0) -> None:
        self.data = real_array([x, y, z], (3,), "Vector3")

    @property
    def x(self) -> float:
        return float(self.data[0])

    @x.setter
    def x(self, value: float) -> None:
        self.data[0] = value

    @property
    def y(self) -> float:
        return float(self.data[1])

    @y.setter
    def y(self, value: float) -> None:
        self.data[1] = value

    @property
    def z(self) -> float:
        return float(self.data[2])

    @z.setter
    def z(self, value: float) -> None:
        self.data[2] = value

    def cross(self, other: Vector3) -> Vector3:
        """Return the cross product self x other."""
        a: np.ndarray = self.data
        b: np.ndarray = other.data
        return self._like(
            np.array(
                [
                    a[1] * b[2] - a[2] * b[1],
                    a[2] * b[0] - a[0] * b[2],
                    a[0] * b[1] - a[1] * b[0],
                ]
            )
        )

    def __mod__(self, other: object) -> Vector3:
        if isinstance(other, Vector3):
            return self.cross(other)
        return NotImplemented

    def __imod__(self, other: object) -> Vector3:
        if isinstance(other, Vector3):
            self.data = self.cross(other).data
            return self
        return NotImplemented
