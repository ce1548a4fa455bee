################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Tests for the rectangular matrix base type."""

from __future__ import annotations

import numpy as np
import pytest
from numpy.typing import NDArray

from oasis_math.math_errors import DimensionMismatchError
from oasis_math.math_errors import IncompatibleShapeError
from oasis_math.math_errors import IndexOutOfBoundsError
from oasis_math.math_errors import MissingTypeMetadataError
from oasis_math.math_errors import ShapeMismatchError
from oasis_math.math_errors import SizeMismatchError
from oasis_math.matrices.matrix import Matrix
from oasis_math.matrices.matrix import make_matrix_types
from oasis_math.matrices.matrix3 import Matrix3
from oasis_math.matrices.square_matrix import make_square_matrix_type


Matrix2x3, Matrix3x2 = make_matrix_types(2, 3)


def _as_rows(m: Matrix) -> NDArray[np.float64]:
    """Return a row-major numpy view of a column-major matrix."""
    return m.elements.reshape((m.COLUMNS, m.ROWS)).T


def test_default_is_identity() -> None:
    """Checks empty construction gives a (partial) identity."""
    assert np.array_equal(Matrix3().elements, np.eye(3).ravel())
    assert np.array_equal(Matrix2x3().elements, [1.0, 0.0, 0.0, 1.0, 0.0, 0.0])
    assert np.array_equal(Matrix3.zero().elements, np.zeros(9))
    assert Matrix3.identity() == Matrix3()


def test_wrong_element_count() -> None:
    """Checks constructors reject the wrong number of elements."""
    with pytest.raises(SizeMismatchError, match="expected 6 elements"):
        Matrix2x3(1.0, 2.0, 3.0)


def test_shape_must_be_declared() -> None:
    """Checks the bare base class cannot be instantiated."""
    with pytest.raises(TypeError):
        Matrix()


def test_column_major_layout() -> None:
    """Checks get/set address (column, row) in column-major order."""
    m: Matrix = Matrix2x3(1.0, 2.0, 3.0, 4.0, 5.0, 6.0)
    assert m.rows == 2
    assert m.columns == 3
    assert m.size == 6
    assert m.get(0, 1) == 2.0
    assert m.get(2, 0) == 5.0
    m.set(1, 1, 40.0)
    assert m.elements[3] == 40.0
    assert np.array_equal(_as_rows(m), [[1.0, 3.0, 5.0], [2.0, 40.0, 6.0]])


def test_index_out_of_bounds() -> None:
    """Checks bad indices report which axis failed."""
    m: Matrix = Matrix2x3()
    with pytest.raises(IndexOutOfBoundsError) as info:
        m.get(3, 0)
    assert info.value.axis == "column"
    assert info.value.index == 3
    with pytest.raises(IndexOutOfBoundsError) as info:
        m.set(0, 2, 1.0)
    assert info.value.axis == "row"


def test_column_accessor() -> None:
    """Checks m[column][row] indexing semantics."""
    m: Matrix3 = Matrix3(1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0, 9.0)
    assert m[1][0] == 4.0
    assert m[2][2] == 9.0
    assert list(m[0]) == [1.0, 2.0, 3.0]
    assert len(m[0]) == 3

    m[1][2] = 60.0
    assert m.get(1, 2) == 60.0

    assert m[3] is None
    assert m[0][3] is None
    with pytest.raises(TypeError):
        m[0][3] = 1.0


def test_column_accessor_rejects_non_integer_indices() -> None:
    """Checks slices and strings are rejected with a clear TypeError."""
    m: Matrix3 = Matrix3()
    with pytest.raises(TypeError, match="row index must be an integer"):
        m[0][0:2]
    with pytest.raises(TypeError, match="row index must be an integer"):
        m[0]["a"] = 1.0  # type: ignore[index]
    with pytest.raises(TypeError, match="column index must be an integer"):
        m[1.0]  # type: ignore[index]
    assert m[np.int64(1)][np.int64(1)] == 1.0


def test_transpose_twice() -> None:
    """Checks transposing twice restores the matrix."""
    m: Matrix = Matrix2x3(1.0, 2.0, 3.0, 4.0, 5.0, 6.0)
    t: Matrix = m.transposed()
    assert type(t) is Matrix3x2
    assert np.array_equal(_as_rows(t), _as_rows(m).T)
    assert t.transposed() == m
    assert type(t.transposed()) is Matrix2x3


def test_transpose_metadata_errors() -> None:
    """Checks transposed() validates TRANSPOSE_TYPE."""
    bare: type[Matrix] = type("Bare2x2", (Matrix,), {"ROWS": 2, "COLUMNS": 2})
    with pytest.raises(MissingTypeMetadataError):
        bare().transposed()

    wrong: type[Matrix] = type("Wrong2x3", (Matrix,), {"ROWS": 2, "COLUMNS": 3})
    wrong.TRANSPOSE_TYPE = wrong
    with pytest.raises(ShapeMismatchError):
        wrong().transposed()


def test_make_matrix_types_square() -> None:
    """Checks square shapes produce one self-transposing class."""
    first, second = make_matrix_types(4, 4)
    assert first is second
    assert first.TRANSPOSE_TYPE is first
    assert Matrix2x3.TRANSPOSE_TYPE is Matrix3x2
    assert Matrix3x2.TRANSPOSE_TYPE is Matrix2x3


def test_rectangular_product() -> None:
    """Checks generic multiplication against numpy."""
    a: Matrix = Matrix2x3(1.0, 2.0, 3.0, 4.0, 5.0, 6.0)
    b: Matrix = Matrix3x2(7.0, 8.0, 9.0, 10.0, 11.0, 12.0)

    product: Matrix = a @ b
    assert product.ROWS == 2
    assert product.COLUMNS == 2
    assert np.allclose(_as_rows(product), _as_rows(a) @ _as_rows(b))

    outer: Matrix = b @ a
    assert outer.ROWS == 3
    assert outer.COLUMNS == 3
    assert np.allclose(_as_rows(outer), _as_rows(b) @ _as_rows(a))


def test_incompatible_product() -> None:
    """Checks shape validation in multiply_matrices."""
    a: Matrix = Matrix2x3()
    with pytest.raises(IncompatibleShapeError, match="incompatible dimensions"):
        Matrix2x3().multiply_matrices(a, a)
    with pytest.raises(IncompatibleShapeError, match="Result size mismatch"):
        Matrix3().multiply_matrices(a, Matrix3x2())


def test_multiply_with_aliasing() -> None:
    """Checks multiply() is correct when the receiver is an operand."""
    square: type = make_square_matrix_type(3)
    values: list[float] = [2.0, 1.0, 0.0, -1.0, 3.0, 4.0, 0.5, 0.0, 1.0]
    m: Matrix = square(*values)
    expected: NDArray[np.float64] = _as_rows(m) @ _as_rows(m)
    m.multiply(m)
    assert np.allclose(_as_rows(m), expected)


def test_identity_is_neutral() -> None:
    """Checks multiplying by identity on either side returns the operand."""
    a: Matrix = Matrix2x3(1.0, 2.0, 3.0, 4.0, 5.0, 6.0)
    left: type = make_square_matrix_type(2)
    right: type = make_square_matrix_type(3)
    assert left() @ a == a
    assert a @ right() == a


def test_add_subtract() -> None:
    """Checks element-wise arithmetic and its shape check."""
    a: Matrix = Matrix2x3(1.0, 2.0, 3.0, 4.0, 5.0, 6.0)
    b: Matrix = Matrix2x3(6.0, 5.0, 4.0, 3.0, 2.0, 1.0)
    assert np.array_equal((a + b).elements, np.full(6, 7.0))
    assert np.array_equal((a - a).elements, np.zeros(6))
    assert a.elements[0] == 1.0

    with pytest.raises(DimensionMismatchError):
        a.add(Matrix3x2())
    with pytest.raises(DimensionMismatchError):
        a.copy(Matrix3x2())


def test_equality() -> None:
    """Checks exact and tolerance comparison."""
    a: Matrix = Matrix2x3(1.0, 2.0, 3.0, 4.0, 5.0, 6.0)
    b: Matrix = a.clone()
    assert a == b
    assert b is not a
    b.set(0, 0, 1.0 + 1e-7)
    assert a != b
    assert a.equals_epsilon(b)
    assert not a.equals(Matrix3x2(1.0, 2.0, 3.0, 4.0, 5.0, 6.0))
    assert not a.equals_epsilon(Matrix3x2(1.0, 2.0, 3.0, 4.0, 5.0, 6.0))


def test_float32_export() -> None:
    """Checks float32 export keeps column-major order."""
    m: Matrix3 = Matrix3(1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0, 9.0)
    exported: NDArray[np.float32] = m.to_float32_array()
    assert exported.dtype == np.float32
    assert exported.shape == (9,)
    assert np.array_equal(exported, np.arange(1.0, 10.0))
