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
Square matrix base type with generic determinant and inverse

The generic algorithms work for any dimension by cofactor (Laplace)
expansion along the first row, which is O(n!). Matrix2, Matrix3 and Matrix4
override them with closed forms; the generic path is the correctness
fallback for other sizes.
"""

from __future__ import annotations

from typing import TypeVar

import numpy as np
from numpy.typing import NDArray

from oasis_math.math_errors import InvalidArgumentError
from oasis_math.math_errors import NotInvertibleError
from oasis_math.math_errors import ShapeMismatchError
from oasis_math.math_params import SINGULAR_DETERMINANT_EPS
from oasis_math.matrices.matrix import Matrix


_SquareT = TypeVar("_SquareT", bound="SquareMatrix")


def minor_elements(
    elements: NDArray[np.float64], size: int, exclude_row: int, exclude_column: int
) -> NDArray[np.float64]:
    """Return the column-major (size-1) x (size-1) minor buffer."""
    by_column: NDArray[np.float64] = elements.reshape((size, size))
    without_column: NDArray[np.float64] = np.delete(by_column, exclude_column, axis=0)
    return np.delete(without_column, exclude_row, axis=1).ravel()


def determinant_recursive(elements: NDArray[np.float64], size: int) -> float:
    """Compute a determinant by cofactor expansion along row 0."""
    if size == 0:
        return 1.0
    if size == 1:
        return float(elements[0])
    if size == 2:
        return float(elements[0] * elements[3] - elements[1] * elements[2])

    det: float = 0.0
    for column in range(size):
        sign: float = 1.0 if column % 2 == 0 else -1.0
        cofactor: float = sign * determinant_recursive(
            minor_elements(elements, size, 0, column), size - 1
        )
        det += float(elements[column * size]) * cofactor
    return det


def cofactor_elements(elements: NDArray[np.float64], size: int) -> NDArray[np.float64]:
    """Return the column-major cofactor matrix buffer."""
    cofactors: NDArray[np.float64] = np.zeros(size * size, dtype=np.float64)
    for row in range(size):
        for column in range(size):
            sign: float = 1.0 if (row + column) % 2 == 0 else -1.0
            cofactors[column * size + row] = sign * determinant_recursive(
                minor_elements(elements, size, row, column), size - 1
            )
    return cofactors


def adjugate_elements(elements: NDArray[np.float64], size: int) -> NDArray[np.float64]:
    """Return the column-major adjugate (transposed cofactor) buffer."""
    cofactors: NDArray[np.float64] = cofactor_elements(elements, size)
    return cofactors.reshape((size, size)).T.ravel()


def homogeneous_reciprocal(denominator: float) -> float:
    """Return 1/denominator, giving inf or nan for a zero denominator."""
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(1.0) / np.float64(denominator))


class SquareMatrix(Matrix):
    """Matrix with ROWS == COLUMNS."""

    @property
    def dimension(self) -> int:
        """Number of rows, which equals the number of columns."""
        if self.ROWS != self.COLUMNS:
            raise ShapeMismatchError(
                f"Matrix is not square ({self.ROWS}x{self.COLUMNS})"
            )
        return self.ROWS

    def transpose(self: _SquareT) -> _SquareT:
        """Transpose in place."""
        size: int = self.dimension
        by_column: NDArray[np.float64] = self._elements.reshape((size, size))
        self._elements[:] = by_column.T.ravel()
        return self

    def determinant(self) -> float:
        """Return the determinant."""
        return determinant_recursive(self._elements, self.dimension)

    def invert(self: _SquareT) -> _SquareT:
        """Invert in place using the adjugate.

        Raises:
            NotInvertibleError: If |determinant| is below 1e-10
        """
        size: int = self.dimension
        det: float = self.determinant()
        if abs(det) < SINGULAR_DETERMINANT_EPS:
            raise NotInvertibleError(
                f"Matrix is not invertible (determinant is {det})"
            )
        self._elements[:] = adjugate_elements(self._elements, size) * (1.0 / det)
        return self

    def inverse(self: _SquareT) -> _SquareT:
        """Return the inverse as a new matrix."""
        return self.clone().invert()


def make_square_matrix_type(dimension: int) -> type[SquareMatrix]:
    """Create a square matrix class of an arbitrary dimension."""
    if dimension < 0:
        raise InvalidArgumentError("dimension must be non-negative")

    matrix_type: type[SquareMatrix] = type(
        f"SquareMatrix{dimension}",
        (SquareMatrix,),
        {"ROWS": dimension, "COLUMNS": dimension, "__module__": __name__},
    )
    matrix_type.TRANSPOSE_TYPE = matrix_type
    return matrix_type
