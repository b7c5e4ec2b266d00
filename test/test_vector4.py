################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of linkit
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Tests for Vector4."""

from __future__ import annotations

import numpy as np
import pytest

from linkit.vector4 import Vector4


def test_default_is_zero() -> None:
    """Checks every component, including w, defaults to zero."""
    vec: Vector4 = Vector4()
    assert list(vec) == [0.0, 0.0, 0.0, 0.0]
    assert len(vec) == 4


def test_w_component() -> None:
    """Checks the w property and setter."""
    vec: Vector4 = Vector4(1.0, 2.0, 3.0, 1.0)
    assert vec.w == 1.0
    vec.w = 0.0
    assert vec == Vector4(1.0, 2.0, 3.0, 0.0)


def test_arithmetic_covers_w() -> None:
    """Checks component-wise operators include the w component."""
    a: Vector4 = Vector4(1.0, 2.0, 3.0, 4.0)
    b: Vector4 = Vector4(1.0, 1.0, 1.0, 1.0)
    assert a + b == Vector4(2.0, 3.0, 4.0, 5.0)
    assert a - b == Vector4(0.0, 1.0, 2.0, 3.0)
    assert a * 2.0 == Vector4(2.0, 4.0, 6.0, 8.0)
    assert a * b == 10.0
    assert a / 0.0 == a


def test_magnitude_and_normalize() -> None:
    """Checks magnitude over four components."""
    vec: Vector4 = Vector4(1.0, 1.0, 1.0, 1.0)
    assert vec.magnitude() == 2.0
    vec.normalize()
    assert vec.almost_equal(Vector4(0.5, 0.5, 0.5, 0.5))
    assert np.isclose(vec.magnitude(), 1.0)


def test_no_cross_product() -> None:
    """Vector4 has no cross product operator."""
    with pytest.raises(TypeError):
        Vector4() % Vector4()  # type: ignore[operator]


def test_rendering() -> None:
    """Checks the debug string forms."""
    vec: Vector4 = Vector4(1.0, 2.0, 3.0, 1.0)
    assert str(vec) == "(1.000000, 2.000000, 3.000000, 1.000000)"
    assert repr(vec) == "Vector4(1.0, 2.0, 3.0, 1.0)"
