################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""2x2 matrix for 2D linear transforms."""

from __future__ import annotations

import math

from oasis_math.math_errors import NotInvertibleError
from oasis_math.math_params import SINGULAR_DETERMINANT_EPS
from oasis_math.matrices.matrix import Matrix
from oasis_math.matrices.square_matrix import SquareMatrix
from oasis_math.vectors.vector2 import Vector2


class Matrix2(SquareMatrix):
    """2x2 column-major matrix."""

    ROWS: int = 2
    COLUMNS: int = 2

    def multiply_matrices(self, a: Matrix, b: Matrix) -> Matrix2:
        """Store ``a * b``, unrolled when both operands are Matrix2."""
        if type(a) is not Matrix2 or type(b) is not Matrix2:
            return super().multiply_matrices(a, b)

        ae: list[float] = a._elements.tolist()
        be: list[float] = b._elements.tolist()
        a11, a21, a12, a22 = ae
        b11, b21, b12, b22 = be

        self._elements[:] = [
            a11 * b11 + a12 * b21,
            a21 * b11 + a22 * b21,
            a11 * b12 + a12 * b22,
            a21 * b12 + a22 * b22,
        ]
        return self

    def determinant(self) -> float:
        """Return ``ad - bc``."""
        n11, n21, n12, n22 = self._elements.tolist()
        return n11 * n22 - n12 * n21

    def invert(self) -> Matrix2:
        """Invert in place.

        Raises:
            NotInvertibleError: If |determinant| is below 1e-10
        """
        n11, n21, n12, n22 = self._elements.tolist()
        det: float = n11 * n22 - n12 * n21
        if abs(det) < SINGULAR_DETERMINANT_EPS:
            raise NotInvertibleError(
                f"Matrix2 is not invertible (determinant is {det})"
            )

        det_inv: float = 1.0 / det
        self._elements[:] = [
            n22 * det_inv,
            -n21 * det_inv,
            -n12 * det_inv,
            n11 * det_inv,
        ]
        return self

    def transform_vector(self, v: Vector2) -> Vector2:
        """Return ``M * v``."""
        te: list[float] = self._elements.tolist()
        x: float = v.x
        y: float = v.y
        return Vector2(te[0] * x + te[2] * y, te[1] * x + te[3] * y)

    def make_rotation(self, theta: float) -> Matrix2:
        """Overwrite with a rotation by ``theta`` radians."""
        c: float = math.cos(theta)
        s: float = math.sin(theta)
        self.make_identity()
        self.set(0, 0, c)
        self.set(0, 1, -s)
        self.set(1, 0, s)
        self.set(1, 1, c)
        return self

    def make_scale(self, x: float, y: float) -> Matrix2:
        """Overwrite with a scale along the axes."""
        self.make_identity()
        self.set(0, 0, x)
        self.set(1, 1, y)
        return self


Matrix2.TRANSPOSE_TYPE = Matrix2
