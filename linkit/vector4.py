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
Four-component vector

Used both as a homogeneous lift of Vector3 (w=1 for points, w=0 for
directions) and as the vector type acted on by Matrix4.
"""

from __future__ import annotations

from .precision import real_array
from .vector_base import VectorBase


class Vector4(VectorBase):
    """Vector (x, y, z, w), zero by default."""

    __slots__ = ()

    SIZE: int = 4

    def __init__(
        self, x: float = 0.0, y: float = 0.0, z: float = 0.0, w: float = 0.0
    ) -> None:
        self.data = real_array([x, y, z, w], (4,), "Vector4")

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

    @property
    def w(self) -> float:
        return float(self.data[3])

    @w.setter
    def w(self, value: float) -> None:
        self.data[3] = value
