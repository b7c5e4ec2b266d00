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
Quaternion rotations using the wxyz convention

Conventions:
    * Components are stored in wxyz order, identity by default
    * Products use the Hamilton convention, ``q1 * q2`` applies q2 first when
      rotating vectors
    * Unit norm is assumed, never enforced, by axis(), angle_radians(),
      rotate() and to_matrix3(); call normalize() first when in doubt
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

import numpy as np

from .matrix3 import Matrix3
from .precision import epsilon
from .precision import real_acos
from .precision import real_array
from .precision import real_cos
from .precision import real_sin
from .precision import real_sqrt
from .vector3 import Vector3


_LOG: logging.Logger = logging.getLogger(__name__)


class Quaternion:
    """Quaternion w + xi + yj + zk."""

    __slots__ = ("wxyz",)

    __array_ufunc__ = None

    wxyz: np.ndarray

    def __init__(
        self,
        w: float = 1.0,
        x: float | Vector3 = 0.0,
        y: float | None = None,
        z: float | None = None,
    ) -> None:
        """
        Create a quaternion from components, or from an angle and an axis

        ``Quaternion(angle, axis)`` with a Vector3 axis is the same as
        ``Quaternion.from_angle_axis(angle, axis)``.

        Passing y or z together with an axis raises TypeError.
        """

        if isinstance(x, Vector3):
            if y is not None or z is not None:
                raise TypeError("Quaternion(angle, axis) takes no y or z components")
            self.wxyz = Quaternion.from_angle_axis(w, x).wxyz
        else:
            self.wxyz = real_array(
                [w, x, 0.0 if y is None else y, 0.0 if z is None else z],
                (4,),
                "wxyz",
            )

    @staticmethod
    def identity() -> Quaternion:
        """Return the identity rotation."""
        return Quaternion()

    @staticmethod
    def from_wxyz(w: float, x: float, y: float, z: float) -> Quaternion:
        """Create a quaternion from components."""
        return Quaternion(w, x, y, z)

    @staticmethod
    def from_angle_axis(angle: float, axis: Vector3) -> Quaternion:
        """Create the rotation by angle (radians) about a normalized copy of axis."""
        unit: Vector3 = axis.normalized()
        half_angle: float = 0.5 * angle
        sin_half: float = real_sin(half_angle)
        return Quaternion(
            real_cos(half_angle),
            unit.x * sin_half,
            unit.y * sin_half,
            unit.z * sin_half,
        )

    def _like(self, wxyz: np.ndarray) -> Quaternion:
        quat: Quaternion = Quaternion.__new__(Quaternion)
        quat.wxyz = wxyz.astype(self.wxyz.dtype, copy=False)
        return quat

    @property
    def w(self) -> float:
        return float(self.wxyz[0])

    @w.setter
    def w(self, value: float) -> None:
        self.wxyz[0] = value

    @property
    def x(self) -> float:
        return float(self.wxyz[1])

    @x.setter
    def x(self, value: float) -> None:
        self.wxyz[1] = value

    @property
    def y(self) -> float:
        return float(self.wxyz[2])

    @y.setter
    def y(self, value: float) -> None:
        self.wxyz[2] = value

    @property
    def z(self) -> float:
        return float(self.wxyz[3])

    @z.setter
    def z(self, value: float) -> None:
        self.wxyz[3] = value

    def __iter__(self) -> Iterator[float]:
        for value in self.wxyz:
            yield float(value)

    def copy(self) -> Quaternion:
        """Return an independent copy."""
        return self._like(self.wxyz.copy())

    def to_numpy(self) -> np.ndarray:
        """Return a copy of the wxyz components."""
        return self.wxyz.copy()

    #
    # Composition
    #

    def __mul__(self, other: object) -> Quaternion:
        """Hamilton product."""
        if not isinstance(other, Quaternion):
            return NotImplemented
        w1, x1, y1, z1 = self.wxyz
        w2, x2, y2, z2 = other.wxyz
        return self._like(
            np.array(
                [
                    w1 * w2 - x1 * x2 - y1 * y2 - z1 * z2,
                    w1 * x2 + x1 * w2 + y1 * z2 - z1 * y2,
                    w1 * y2 - x1 * z2 + y1 * w2 + z1 * x2,
                    w1 * z2 + x1 * y2 - y1 * x2 + z1 * w2,
                ]
            )
        )

    def __imul__(self, other: object) -> Quaternion:
        if not isinstance(other, Quaternion):
            return NotImplemented
        self.wxyz = (self * other).wxyz
        return self

    def conjugate(self) -> Quaternion:
        """Return the quaternion with a negated vector part."""
        return self._like(self.wxyz * np.array([1.0, -1.0, -1.0, -1.0]))

    #
    # Norm
    #

    def magnitude_squared(self) -> float:
        return float(np.dot(self.wxyz, self.wxyz))

    def magnitude(self) -> float:
        return real_sqrt(self.magnitude_squared())

    def normalize(self) -> None:
        """
        Scale to unit norm in place

        A zero quaternion is reset to the identity.
        """

        mag_sq: float = self.magnitude_squared()
        if mag_sq > 0.0:
            self.wxyz /= real_sqrt(mag_sq)
        else:
            _LOG.debug("Resetting zero quaternion to identity")
            self.wxyz = np.array([1.0, 0.0, 0.0, 0.0], dtype=self.wxyz.dtype)

    def normalized(self) -> Quaternion:
        """Return a normalized copy."""
        result: Quaternion = self.copy()
        result.normalize()
        return result

    def add_scaled_vector(self, vec: Vector3, scale: float) -> None:
        """
        Integrate an angular velocity over a time step in place

        Adds 0.5 * (Quaternion(0, vec * scale) * self). The result is not
        normalized.
        """

        spin: Quaternion = Quaternion(
            0.0, vec.x * scale, vec.y * scale, vec.z * scale
        )
        spin *= self
        self.wxyz += spin.wxyz * 0.5

    #
    # Rotation
    #

    def rotate(self, v: Vector3) -> Vector3:
        """
        Rotate a vector, assuming unit norm

        Uses t = 2 * cross(q.xyz, v) and v' = v + w * t + cross(q.xyz, t),
        equivalent to the vector part of q * (0, v) * conjugate(q).
        """

        qw, qx, qy, qz = self.wxyz
        vx, vy, vz = v.data

        tx = 2.0 * (qy * vz - qz * vy)
        ty = 2.0 * (qz * vx - qx * vz)
        tz = 2.0 * (qx * vy - qy * vx)

        return v._like(
            np.array(
                [
                    vx + qw * tx + (qy * tz - qz * ty),
                    vy + qw * ty + (qz * tx - qx * tz),
                    vz + qw * tz + (qx * ty - qy * tx),
                ]
            )
        )

    def angle_radians(self) -> float:
        """Return the rotation angle 2 * acos(w), assuming unit norm."""
        return 2.0 * real_acos(self.w)

    def axis(self) -> Vector3:
        """
        Return the rotation axis, assuming unit norm

        For a rotation angle of zero the axis is undefined and (0, 0, 1) is
        returned.
        """

        w: float = self.w
        sin_theta_sq: float = 1.0 - w * w
        if sin_theta_sq <= 0.0:
            return Vector3(0.0, 0.0, 1.0)
        inv_sin_theta: float = 1.0 / real_sqrt(sin_theta_sq)
        return Vector3(
            self.x * inv_sin_theta, self.y * inv_sin_theta, self.z * inv_sin_theta
        )

    def to_matrix3(self) -> Matrix3:
        """Return the rotation matrix, assuming unit norm."""
        w, x, y, z = self
        xx: float = x * x
        xy: float = x * y
        xz: float = x * z
        xw: float = x * w
        yy: float = y * y
        yz: float = y * z
        yw: float = y * w
        zz: float = z * z
        zw: float = z * w

        return Matrix3._wrap(
            np.array(
                [
                    [1.0 - 2.0 * (yy + zz), 2.0 * (xy - zw), 2.0 * (xz + yw)],
                    [2.0 * (xy + zw), 1.0 - 2.0 * (xx + zz), 2.0 * (yz - xw)],
                    [2.0 * (xz - yw), 2.0 * (yz + xw), 1.0 - 2.0 * (xx + yy)],
                ],
                dtype=self.wxyz.dtype,
            )
        )

    #
    # Comparison
    #

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Quaternion):
            return NotImplemented
        return bool(np.all(np.abs(self.wxyz - other.wxyz) <= epsilon()))

    def same_rotation(self, other: Quaternion) -> bool:
        """Return True when other equals self or -self within epsilon."""
        if self == other:
            return True
        return bool(np.all(np.abs(self.wxyz + other.wxyz) <= epsilon()))

    #
    # Rendering
    #

    def to_string(self) -> str:
        w, x, y, z = self
        return f"({w:.6f} + {x:.6f}i + {y:.6f}j + {z:.6f}k)"

    def angle_axis_string(self) -> str:
        return f"Angle: {self.angle_radians():.6f}, Axis: {self.axis().to_string()}"

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        w, x, y, z = self
        return f"Quaternion({w!r}, {x!r}, {y!r}, {z!r})"
