################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Column-major matrix types."""

from __future__ import annotations

from oasis_math.matrices.matrix import Matrix
from oasis_math.matrices.matrix import MatrixColumn
from oasis_math.matrices.matrix import make_matrix_types
from oasis_math.matrices.matrix2 import Matrix2
from oasis_math.matrices.matrix3 import Matrix3
from oasis_math.matrices.matrix4 import Matrix4
from oasis_math.matrices.square_matrix import SquareMatrix
from oasis_math.matrices.square_matrix import make_square_matrix_type


__all__ = [
    "Matrix",
    "Matrix2",
    "Matrix3",
    "Matrix4",
    "MatrixColumn",
    "SquareMatrix",
    "make_matrix_types",
    "make_square_matrix_type",
]
