################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Tests for Matrix2."""

from __future__ import annotations

import math

import numpy as np
import pytest

from oasis_math.math_errors import NotInvertibleError
from oasis_math.matrices.matrix2 import Matrix2
from oasis_math.matrices.square_matrix import make_square_matrix_type
from oasis_math.vectors.vector2 import Vector2


def test_rotation_convention() -> None:
    """Checks rotating (1, 0) by pi/2 yields (0, -1)."""
    rotated: Vector2 = Matrix2().make_rotation(math.pi / 2).transform_vector(
        Vector2(1.0, 0.0)
    )
    assert rotated.equals_epsilon(Vector2(0.0, -1.0))


def test_scale() -> None:
    """Checks the scale builder resets and writes the diagonal."""
    m: Matrix2 = Matrix2(9.0, 9.0, 9.0, 9.0).make_scale(2.0, 3.0)
    assert m.transform_vector(Vector2(1.0, 1.0)).components == (2.0, 3.0)


def test_determinant_and_inverse() -> None:
    """Checks the closed-form determinant and inverse."""
    m: Matrix2 = Matrix2(4.0, 2.0, 7.0, 6.0)
    assert m.determinant() == 10.0
    assert np.allclose(m.inverse().elements, [0.6, -0.2, -0.7, 0.4])
    assert (m @ m.inverse()).equals_epsilon(Matrix2())


def test_singular() -> None:
    """Checks a singular 2x2 matrix raises."""
    with pytest.raises(NotInvertibleError):
        Matrix2(1.0, 2.0, 2.0, 4.0).invert()


def test_fast_path_matches_generic() -> None:
    """Checks the unrolled product matches the generic product."""
    generic: type = make_square_matrix_type(2)
    a_values: list[float] = [1.0, -2.0, 3.5, 4.0]
    b_values: list[float] = [0.5, 2.0, -1.0, 3.0]

    fast: Matrix2 = Matrix2(*a_values) @ Matrix2(*b_values)
    slow = generic(*a_values) @ generic(*b_values)
    assert np.allclose(fast.elements, slow.elements)

    mixed: Matrix2 = Matrix2().multiply_matrices(generic(*a_values), Matrix2(*b_values))
    assert np.allclose(mixed.elements, slow.elements)
