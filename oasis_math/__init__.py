################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Vector, matrix and quaternion types for 2D and 3D transform math."""

from __future__ import annotations

from oasis_math.math_errors import DimensionMismatchError
from oasis_math.math_errors import DivisionByZeroError
from oasis_math.math_errors import IncompatibleShapeError
from oasis_math.math_errors import IndexOutOfBoundsError
from oasis_math.math_errors import InvalidArgumentError
from oasis_math.math_errors import MathError
from oasis_math.math_errors import MissingTypeMetadataError
from oasis_math.math_errors import NonFiniteValueError
from oasis_math.math_errors import NotInvertibleError
from oasis_math.math_errors import ShapeMismatchError
from oasis_math.math_errors import SizeMismatchError
from oasis_math.math_errors import ZeroQuaternionError
from oasis_math.matrices import Matrix
from oasis_math.matrices import Matrix2
from oasis_math.matrices import Matrix3
from oasis_math.matrices import Matrix4
from oasis_math.matrices import MatrixColumn
from oasis_math.matrices import SquareMatrix
from oasis_math.matrices import make_matrix_types
from oasis_math.matrices import make_square_matrix_type
from oasis_math.quaternion import AxisAngle
from oasis_math.quaternion import EulerAngles
from oasis_math.quaternion import Quaternion
from oasis_math.vectors import Vector
from oasis_math.vectors import Vector2
from oasis_math.vectors import Vector3
from oasis_math.vectors import Vector4


__all__ = [
    "AxisAngle",
    "DimensionMismatchError",
    "DivisionByZeroError",
    "EulerAngles",
    "IncompatibleShapeError",
    "IndexOutOfBoundsError",
    "InvalidArgumentError",
    "MathError",
    "Matrix",
    "Matrix2",
    "Matrix3",
    "Matrix4",
    "MatrixColumn",
    "MissingTypeMetadataError",
    "NonFiniteValueError",
    "NotInvertibleError",
    "Quaternion",
    "ShapeMismatchError",
    "SizeMismatchError",
    "SquareMatrix",
    "Vector",
    "Vector2",
    "Vector3",
    "Vector4",
    "ZeroQuaternionError",
    "make_matrix_types",
    "make_square_matrix_type",
]
