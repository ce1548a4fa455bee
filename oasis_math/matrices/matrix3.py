################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""
3x3 matrix

Used both as a 3D linear transform and as a 2D affine transform in
homogeneous coordinates, where column 2 holds the translation.
"""

from __future__ import annotations

import math

from oasis_math.math_errors import NotInvertibleError
from oasis_math.math_params import SINGULAR_DETERMINANT_EPS
from oasis_math.matrices.matrix import Matrix
from oasis_math.matrices.square_matrix import SquareMatrix
from oasis_math.matrices.square_matrix import homogeneous_reciprocal
from oasis_math.vectors.vector2 import Vector2
from oasis_math.vectors.vector3 import Vector3


class Matrix3(SquareMatrix):
    """3x3 column-major matrix."""

    ROWS: int = 3
    COLUMNS: int = 3

    def multiply_matrices(self, a: Matrix, b: Matrix) -> Matrix3:
        """Store ``a * b``, unrolled when both operands are Matrix3."""
        if type(a) is not Matrix3 or type(b) is not Matrix3:
            return super().multiply_matrices(a, b)

        a11, a21, a31, a12, a22, a32, a13, a23, a33 = a._elements.tolist()
        b11, b21, b31, b12, b22, b32, b13, b23, b33 = b._elements.tolist()

        self._elements[:] = [
            a11 * b11 + a12 * b21 + a13 * b31,
            a21 * b11 + a22 * b21 + a23 * b31,
            a31 * b11 + a32 * b21 + a33 * b31,
            a11 * b12 + a12 * b22 + a13 * b32,
            a21 * b12 + a22 * b22 + a23 * b32,
            a31 * b12 + a32 * b22 + a33 * b32,
            a11 * b13 + a12 * b23 + a13 * b33,
            a21 * b13 + a22 * b23 + a23 * b33,
            a31 * b13 + a32 * b23 + a33 * b33,
        ]
        return self

    def determinant(self) -> float:
        """Return the determinant by cofactor expansion along row 0."""
        n11, n21, n31, n12, n22, n32, n13, n23, n33 = self._elements.tolist()
        return (
            n11 * (n22 * n33 - n23 * n32)
            - n12 * (n21 * n33 - n23 * n31)
            + n13 * (n21 * n32 - n22 * n31)
        )

    def invert(self) -> Matrix3:
        """Invert in place from the closed-form adjugate.

        Raises:
            NotInvertibleError: If |determinant| is below 1e-10
        """
        n11, n21, n31, n12, n22, n32, n13, n23, n33 = self._elements.tolist()

        # First column of the adjugate
        t11: float = n22 * n33 - n23 * n32
        t21: float = n23 * n31 - n21 * n33
        t31: float = n21 * n32 - n22 * n31

        det: float = n11 * t11 + n12 * t21 + n13 * t31
        if abs(det) < SINGULAR_DETERMINANT_EPS:
            raise NotInvertibleError(
                f"Matrix3 is not invertible (determinant is {det})"
            )

        det_inv: float = 1.0 / det
        self._elements[:] = [
            t11 * det_inv,
            t21 * det_inv,
            t31 * det_inv,
            (n13 * n32 - n12 * n33) * det_inv,
            (n11 * n33 - n13 * n31) * det_inv,
            (n12 * n31 - n11 * n32) * det_inv,
            (n12 * n23 - n13 * n22) * det_inv,
            (n13 * n21 - n11 * n23) * det_inv,
            (n11 * n22 - n12 * n21) * det_inv,
        ]
        return self

    def transform_vector(self, v: Vector3) -> Vector3:
        """Return ``M * v`` for a 3-vector."""
        te: list[float] = self._elements.tolist()
        x: float = v.x
        y: float = v.y
        z: float = v.z
        return Vector3(
            te[0] * x + te[3] * y + te[6] * z,
            te[1] * x + te[4] * y + te[7] * z,
            te[2] * x + te[5] * y + te[8] * z,
        )

    def transform_point(self, v: Vector2) -> Vector2:
        """Transform a 2D point, dividing by the homogeneous w."""
        te: list[float] = self._elements.tolist()
        x: float = v.x
        y: float = v.y
        w: float = homogeneous_reciprocal(te[2] * x + te[5] * y + te[8])
        return Vector2(
            (te[0] * x + te[3] * y + te[6]) * w,
            (te[1] * x + te[4] * y + te[7]) * w,
        )

    def transform_direction(self, v: Vector2) -> Vector2:
        """Transform a 2D direction, ignoring translation."""
        te: list[float] = self._elements.tolist()
        x: float = v.x
        y: float = v.y
        return Vector2(te[0] * x + te[3] * y, te[1] * x + te[4] * y)

    def make_translation(self, x: float, y: float) -> Matrix3:
        """Overwrite with a 2D translation."""
        self.make_identity()
        self.set(2, 0, x)
        self.set(2, 1, y)
        return self

    def make_rotation_z(self, theta: float) -> Matrix3:
        """Overwrite with a rotation about Z by ``theta`` radians."""
        c: float = math.cos(theta)
        s: float = math.sin(theta)
        self.make_identity()
        self.set(0, 0, c)
        self.set(0, 1, -s)
        self.set(1, 0, s)
        self.set(1, 1, c)
        return self

    def make_scale(self, x: float, y: float) -> Matrix3:
        """Overwrite with a 2D scale."""
        self.make_identity()
        self.set(0, 0, x)
        self.set(1, 1, y)
        return self


Matrix3.TRANSPOSE_TYPE = Matrix3
