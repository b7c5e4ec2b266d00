################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of linkit
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Tests for the scalar precision policy."""

from __future__ import annotations

import logging
import math

import numpy as np
import pytest

from linkit.matrix3 import Matrix3
from linkit.precision import DOUBLE_EPSILON
from linkit.precision import SINGLE_EPSILON
from linkit.precision import Precision
from linkit.precision import PrecisionError
from linkit.precision import clamp_unit
from linkit.precision import epsilon
from linkit.precision import get_precision
from linkit.precision import is_near_zero
from linkit.precision import precision_scope
from linkit.precision import real
from linkit.precision import real_acos
from linkit.precision import real_asin
from linkit.precision import set_precision
from linkit.quaternion import Quaternion
from linkit.vector3 import Vector3


def test_defaults_are_double_precision() -> None:
    """Checks the default setting is float64 with the double epsilon."""
    precision: Precision = Precision.defaults()
    assert precision.dtype == "float64"
    assert precision.epsilon == DOUBLE_EPSILON
    assert get_precision() == precision


def test_single_precision_has_looser_epsilon() -> None:
    """Checks single precision uses float32 and a looser epsilon."""
    precision: Precision = Precision.single()
    precision.validate()
    assert precision.numpy_dtype == np.dtype(np.float32)
    assert precision.epsilon == SINGLE_EPSILON
    assert precision.epsilon > DOUBLE_EPSILON


def test_invalid_dtype_rejected() -> None:
    """Unsupported dtypes should raise an error."""
    with pytest.raises(PrecisionError):
        Precision(dtype="float16").validate()


@pytest.mark.parametrize("eps", [0.0, -1e-6, math.inf, math.nan])
def test_invalid_epsilon_rejected(eps: float) -> None:
    """Non-positive or non-finite epsilons should raise an error."""
    with pytest.raises(PrecisionError):
        Precision.defaults().replace(epsilon=eps).validate()


def test_set_precision_keeps_active_value_on_error() -> None:
    """A rejected setting leaves the active precision untouched."""
    before: Precision = get_precision()
    with pytest.raises(PrecisionError):
        set_precision(Precision(dtype="int32"))
    assert get_precision() == before


def test_precision_scope_restores_previous() -> None:
    """Checks values created inside a scope use the scoped dtype."""
    with precision_scope(Precision.single()):
        assert epsilon() == SINGLE_EPSILON
        vec: Vector3 = Vector3(1.0, 2.0, 3.0)
        mat: Matrix3 = Matrix3()
        quat: Quaternion = Quaternion()
        assert vec.data.dtype == np.float32
        assert mat.m.dtype == np.float32
        assert quat.wxyz.dtype == np.float32
    assert get_precision() == Precision.defaults()
    assert Vector3().data.dtype == np.float64


def test_results_keep_receiver_dtype() -> None:
    """Checks arithmetic on single precision values stays single precision."""
    with precision_scope(Precision.single()):
        vec: Vector3 = Vector3(1.0, 2.0, 3.0)
        mat: Matrix3 = Matrix3.rotate(0.5, Vector3(0.0, 0.0, 1.0))
    assert (vec * 2.0).data.dtype == np.float32
    assert (mat * vec).data.dtype == np.float32
    assert mat.inverse().m.dtype == np.float32


def test_real_rounds_to_active_width() -> None:
    """Checks real() rounds to the active dtype."""
    assert real(0.1) == 0.1
    with precision_scope(Precision.single()):
        assert real(0.1) == float(np.float32(0.1))
        assert real(0.1) != 0.1


def test_is_near_zero() -> None:
    """Checks the degeneracy predicate against the active epsilon."""
    assert is_near_zero(0.0)
    assert is_near_zero(-1e-7)
    assert not is_near_zero(1e-5)
    assert not is_near_zero(DOUBLE_EPSILON)
    assert is_near_zero(1e-3, eps=1e-2)


def test_inverse_trig_is_clamped() -> None:
    """Checks inverse trig helpers tolerate round-off outside [-1, 1]."""
    assert clamp_unit(1.0 + 1e-12) == 1.0
    assert clamp_unit(-3.0) == -1.0
    assert real_acos(1.0 + 1e-12) == 0.0
    assert np.isclose(real_acos(-1.0 - 1e-12), math.pi)
    assert np.isclose(real_asin(-1.5), -0.5 * math.pi)


def test_set_precision_logs_change(caplog: pytest.LogCaptureFixture) -> None:
    """Checks switching precision is logged."""
    with caplog.at_level(logging.INFO, logger="linkit.precision"):
        with precision_scope(Precision.single()):
            pass
    assert "float32" in caplog.text
