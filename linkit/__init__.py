################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of linkit
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

from linkit.matrix3 import Matrix3
from linkit.matrix4 import Matrix4
from linkit.matrix_base import SingularMatrixError
from linkit.precision import PI
from linkit.precision import DegenerateValueError
from linkit.precision import Precision
from linkit.precision import PrecisionError
from linkit.precision import get_precision
from linkit.precision import precision_scope
from linkit.precision import set_precision
from linkit.quaternion import Quaternion
from linkit.utils import to_vector3
from linkit.utils import to_vector4
from linkit.vector3 import Vector3
from linkit.vector4 import Vector4


__all__ = [
    "DegenerateValueError",
    "Matrix3",
    "Matrix4",
    "PI",
    "Precision",
    "PrecisionError",
    "Quaternion",
    "SingularMatrixError",
    "Vector3",
    "Vector4",
    "get_precision",
    "precision_scope",
    "set_precision",
    "to_vector3",
    "to_vector4",
]
