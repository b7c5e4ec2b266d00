################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of linkit
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Homogeneous coordinate adapters between Vector3 and Vector4."""

from __future__ import annotations

from .vector3 import Vector3
from .vector4 import Vector4


def to_vector4(vec: Vector3, w: float = 1.0) -> Vector4:
    """Lift a Vector3, w=1 for points and w=0 for directions."""
    return Vector4(vec.x, vec.y, vec.z, w)


def to_vector3(vec: Vector4) -> Vector3:
    """Drop the w component of a Vector4."""
    return Vector3(vec.x, vec.y, vec.z)
