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
4x4 matrix

Used for 3D affine and projective transforms in homogeneous coordinates.
Column 3 holds the translation.
"""

from __future__ import annotations

import math

from oasis_math.math_errors import NotInvertibleError
from oasis_math.math_params import SINGULAR_DETERMINANT_EPS
from oasis_math.matrices.matrix import Matrix
from oasis_math.matrices.square_matrix import SquareMatrix
from oasis_math.matrices.square_matrix import homogeneous_reciprocal
from oasis_math.vectors.vector3 import Vector3
from oasis_math.vectors.vector4 import Vector4


def _pair_determinants(
    e: list[float],
) -> tuple[tuple[float, ...], tuple[float, ...], float]:
    """Return the upper and lower 2x2 sub-determinants and the determinant.

    ``e`` is a column-major buffer. The upper pairs come from rows 0 and 1,
    the lower pairs from rows 2 and 3.
    """
    a00, a10, a20, a30 = e[0], e[1], e[2], e[3]
    a01, a11, a21, a31 = e[4], e[5], e[6], e[7]
    a02, a12, a22, a32 = e[8], e[9], e[10], e[11]
    a03, a13, a23, a33 = e[12], e[13], e[14], e[15]

    s0: float = a00 * a11 - a10 * a01
    s1: float = a00 * a12 - a10 * a02
    s2: float = a00 * a13 - a10 * a03
    s3: float = a01 * a12 - a11 * a02
    s4: float = a01 * a13 - a11 * a03
    s5: float = a02 * a13 - a12 * a03

    c5: float = a22 * a33 - a32 * a23
    c4: float = a21 * a33 - a31 * a23
    c3: float = a21 * a32 - a31 * a22
    c2: float = a20 * a33 - a30 * a23
    c1: float = a20 * a32 - a30 * a22
    c0: float = a20 * a31 - a30 * a21

    det: float = s0 * c5 - s1 * c4 + s2 * c3 + s3 * c2 - s4 * c1 + s5 * c0
    return (s0, s1, s2, s3, s4, s5), (c0, c1, c2, c3, c4, c5), det


class Matrix4(SquareMatrix):
    """4x4 column-major matrix."""

    ROWS: int = 4
    COLUMNS: int = 4

    def multiply_matrices(self, a: Matrix, b: Matrix) -> Matrix4:
        """Store ``a * b``, unrolled when both operands are Matrix4."""
        if type(a) is not Matrix4 or type(b) is not Matrix4:
            return super().multiply_matrices(a, b)

        (
            a11, a21, a31, a41,
            a12, a22, a32, a42,
            a13, a23, a33, a43,
            a14, a24, a34, a44,
        ) = a._elements.tolist()  # fmt: skip
        (
            b11, b21, b31, b41,
            b12, b22, b32, b42,
            b13, b23, b33, b43,
            b14, b24, b34, b44,
        ) = b._elements.tolist()  # fmt: skip

        self._elements[:] = [
            a11 * b11 + a12 * b21 + a13 * b31 + a14 * b41,
            a21 * b11 + a22 * b21 + a23 * b31 + a24 * b41,
            a31 * b11 + a32 * b21 + a33 * b31 + a34 * b41,
            a41 * b11 + a42 * b21 + a43 * b31 + a44 * b41,
            a11 * b12 + a12 * b22 + a13 * b32 + a14 * b42,
            a21 * b12 + a22 * b22 + a23 * b32 + a24 * b42,
            a31 * b12 + a32 * b22 + a33 * b32 + a34 * b42,
            a41 * b12 + a42 * b22 + a43 * b32 + a44 * b42,
            a11 * b13 + a12 * b23 + a13 * b33 + a14 * b43,
            a21 * b13 + a22 * b23 + a23 * b33 + a24 * b43,
            a31 * b13 + a32 * b23 + a33 * b33 + a34 * b43,
            a41 * b13 + a42 * b23 + a43 * b33 + a44 * b43,
            a11 * b14 + a12 * b24 + a13 * b34 + a14 * b44,
            a21 * b14 + a22 * b24 + a23 * b34 + a24 * b44,
            a31 * b14 + a32 * b24 + a33 * b34 + a34 * b44,
            a41 * b14 + a42 * b24 + a43 * b34 + a44 * b44,
        ]
        return self

    def determinant(self) -> float:
        """Return the determinant from paired 2x2 sub-determinants."""
        _, _, det = _pair_determinants(self._elements.tolist())
        return det

    def invert(self) -> Matrix4:
        """Invert in place from the closed-form adjugate.

        Raises:
            NotInvertibleError: If |determinant| is below 1e-10
        """
        e: list[float] = self._elements.tolist()
        s, c, det = _pair_determinants(e)
        if abs(det) < SINGULAR_DETERMINANT_EPS:
            raise NotInvertibleError(
                f"Matrix4 is not invertible (determinant is {det})"
            )

        s0, s1, s2, s3, s4, s5 = s
        c0, c1, c2, c3, c4, c5 = c
        a00, a10, a20, a30 = e[0], e[1], e[2], e[3]
        a01, a11, a21, a31 = e[4], e[5], e[6], e[7]
        a02, a12, a22, a32 = e[8], e[9], e[10], e[11]
        a03, a13, a23, a33 = e[12], e[13], e[14], e[15]

        det_inv: float = 1.0 / det
        self._elements[:] = [
            # Column 0
            (a11 * c5 - a12 * c4 + a13 * c3) * det_inv,
            (-a10 * c5 + a12 * c2 - a13 * c1) * det_inv,
            (a10 * c4 - a11 * c2 + a13 * c0) * det_inv,
            (-a10 * c3 + a11 * c1 - a12 * c0) * det_inv,
            # Column 1
            (-a01 * c5 + a02 * c4 - a03 * c3) * det_inv,
            (a00 * c5 - a02 * c2 + a03 * c1) * det_inv,
            (-a00 * c4 + a01 * c2 - a03 * c0) * det_inv,
            (a00 * c3 - a01 * c1 + a02 * c0) * det_inv,
            # Column 2
            (a31 * s5 - a32 * s4 + a33 * s3) * det_inv,
            (-a30 * s5 + a32 * s2 - a33 * s1) * det_inv,
            (a30 * s4 - a31 * s2 + a33 * s0) * det_inv,
            (-a30 * s3 + a31 * s1 - a32 * s0) * det_inv,
            # Column 3
            (-a21 * s5 + a22 * s4 - a23 * s3) * det_inv,
            (a20 * s5 - a22 * s2 + a23 * s1) * det_inv,
            (-a20 * s4 + a21 * s2 - a23 * s0) * det_inv,
            (a20 * s3 - a21 * s1 + a22 * s0) * det_inv,
        ]
        return self

    def transform_vector(self, v: Vector4) -> Vector4:
        """Return ``M * v`` for a 4-vector."""
        te: list[float] = self._elements.tolist()
        x: float = v.x
        y: float = v.y
        z: float = v.z
        w: float = v.w
        return Vector4(
            te[0] * x + te[4] * y + te[8] * z + te[12] * w,
            te[1] * x + te[5] * y + te[9] * z + te[13] * w,
            te[2] * x + te[6] * y + te[10] * z + te[14] * w,
            te[3] * x + te[7] * y + te[11] * z + te[15] * w,
        )

    def transform_point(self, v: Vector3) -> Vector3:
        """Transform a 3D point, dividing by the homogeneous w."""
        te: list[float] = self._elements.tolist()
        x: float = v.x
        y: float = v.y
        z: float = v.z
        w: float = homogeneous_reciprocal(
            te[3] * x + te[7] * y + te[11] * z + te[15]
        )
        return Vector3(
            (te[0] * x + te[4] * y + te[8] * z + te[12]) * w,
            (te[1] * x + te[5] * y + te[9] * z + te[13]) * w,
            (te[2] * x + te[6] * y + te[10] * z + te[14]) * w,
        )

    def transform_direction(self, v: Vector3) -> Vector3:
        """Transform a 3D direction, ignoring translation."""
        te: list[float] = self._elements.tolist()
        x: float = v.x
        y: float = v.y
        z: float = v.z
        return Vector3(
            te[0] * x + te[4] * y + te[8] * z,
            te[1] * x + te[5] * y + te[9] * z,
            te[2] * x + te[6] * y + te[10] * z,
        )

    def make_translation(self, x: float, y: float, z: float) -> Matrix4:
        """Overwrite with a 3D translation."""
        self.make_identity()
        self.set(3, 0, x)
        self.set(3, 1, y)
        self.set(3, 2, z)
        return self

    def make_rotation_x(self, theta: float) -> Matrix4:
        """Overwrite with a rotation about X by ``theta`` radians."""
        c: float = math.cos(theta)
        s: float = math.sin(theta)
        self.make_identity()
        self.set(1, 1, c)
        self.set(1, 2, -s)
        self.set(2, 1, s)
        self.set(2, 2, c)
        return self

    def make_rotation_y(self, theta: float) -> Matrix4:
        """Overwrite with a rotation about Y by ``theta`` radians."""
        c: float = math.cos(theta)
        s: float = math.sin(theta)
        self.make_identity()
        self.set(0, 0, c)
        self.set(0, 2, s)
        self.set(2, 0, -s)
        self.set(2, 2, c)
        return self

    def make_rotation_z(self, theta: float) -> Matrix4:
        """Overwrite with a rotation about Z by ``theta`` radians."""
        c: float = math.cos(theta)
        s: float = math.sin(theta)
        self.make_identity()
        self.set(0, 0, c)
        self.set(0, 1, -s)
        self.set(1, 0, s)
        self.set(1, 1, c)
        return self

    def make_scale(self, x: float, y: float, z: float) -> Matrix4:
        """Overwrite with a 3D scale."""
        self.make_identity()
        self.set(0, 0, x)
        self.set(1, 1, y)
        self.set(2, 2, z)
        return self


Matrix4.TRANSPOSE_TYPE = Matrix4
