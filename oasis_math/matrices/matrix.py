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
Rectangular matrix base type

Matrices are stored as a flat float64 buffer in column-major order. Element
(column c, row r) of a matrix with ``ROWS`` rows is stored at
``elements[c * ROWS + r]``, matching the layout GPU upload APIs expect.

Concrete types declare their shape as class attributes:

    * ``ROWS`` and ``COLUMNS``
    * ``TRANSPOSE_TYPE``: the class holding the transpose (the class itself
      for square matrices, the row/column-swapped sibling otherwise)
"""

from __future__ import annotations

from typing import Iterable
from typing import Iterator
from typing import TypeVar

import numpy as np
from numpy.typing import NDArray

from oasis_math.element_rounding import ElementRounding
from oasis_math.element_rounding import elements_close
from oasis_math.math_errors import DimensionMismatchError
from oasis_math.math_errors import IncompatibleShapeError
from oasis_math.math_errors import IndexOutOfBoundsError
from oasis_math.math_errors import InvalidArgumentError
from oasis_math.math_errors import MissingTypeMetadataError
from oasis_math.math_errors import ShapeMismatchError
from oasis_math.math_errors import SizeMismatchError
from oasis_math.math_params import DEFAULT_EPSILON
from oasis_math.math_params import require_non_negative_epsilon


_MatrixT = TypeVar("_MatrixT", bound="Matrix")


def require_integer_index(index: object, axis: str) -> None:
    """Raise TypeError unless ``index`` is a single integer."""
    if isinstance(index, bool) or not isinstance(index, (int, np.integer)):
        raise TypeError(
            f"Matrix {axis} index must be an integer, not {type(index).__name__}"
        )


class MatrixColumn:
    """
    Row accessor for one column, returned by ``matrix[column]``

    Reading an out-of-range row returns None. Writing one raises TypeError.
    The accessor holds no state of its own and writes through to the matrix.
    """

    __slots__ = ("_matrix", "_column")

    def __init__(self, matrix: Matrix, column: int) -> None:
        self._matrix: Matrix = matrix
        self._column: int = column

    def _offset(self, row: int) -> int | None:
        require_integer_index(row, "row")
        rows: int = self._matrix.ROWS
        if row < 0 or row >= rows:
            return None
        return self._column * rows + row

    def __getitem__(self, row: int) -> float | None:
        offset: int | None = self._offset(row)
        if offset is None:
            return None
        return float(self._matrix._elements[offset])

    def __setitem__(self, row: int, value: float) -> None:
        offset: int | None = self._offset(row)
        if offset is None:
            raise TypeError(
                f"Row index {row} out of range for column {self._column} "
                f"of {type(self._matrix).__name__}"
            )
        self._matrix._elements[offset] = value

    def __len__(self) -> int:
        return self._matrix.ROWS

    def __iter__(self) -> Iterator[float]:
        start: int = self._column * self._matrix.ROWS
        stop: int = start + self._matrix.ROWS
        return iter(self._matrix._elements[start:stop].tolist())


class Matrix(ElementRounding):
    """Generic ROWS x COLUMNS matrix; subclasses fix the shape."""

    ROWS: int
    COLUMNS: int
    TRANSPOSE_TYPE: type[Matrix] | None = None

    _KIND: str = "matrix"

    def __init__(self, *elements: float) -> None:
        if not hasattr(type(self), "ROWS") or not hasattr(type(self), "COLUMNS"):
            raise TypeError(
                f"{type(self).__name__} must declare ROWS and COLUMNS "
                "to be instantiated"
            )

        expected: int = self.ROWS * self.COLUMNS
        if not elements:
            self._elements: NDArray[np.float64] = np.zeros(expected, dtype=np.float64)
            self.make_identity()
            return

        if len(elements) != expected:
            raise SizeMismatchError(
                f"Matrix elements size mismatch: expected {expected} elements "
                f"({self.ROWS}x{self.COLUMNS}) for {type(self).__name__}, "
                f"got {len(elements)}"
            )
        self._elements = np.array(elements, dtype=np.float64)

    @classmethod
    def from_elements(cls: type[_MatrixT], elements: Iterable[float]) -> _MatrixT:
        """Create a matrix from column-major elements."""
        return cls(*elements)

    @classmethod
    def zero(cls: type[_MatrixT]) -> _MatrixT:
        """Create a matrix with every element set to zero."""
        matrix: _MatrixT = cls()
        matrix._elements.fill(0.0)
        return matrix

    @classmethod
    def identity(cls: type[_MatrixT]) -> _MatrixT:
        """Create an identity (or partial identity) matrix."""
        return cls()

    @property
    def rows(self) -> int:
        return self.ROWS

    @property
    def columns(self) -> int:
        return self.COLUMNS

    @property
    def size(self) -> int:
        """Number of elements."""
        return self.ROWS * self.COLUMNS

    @property
    def elements(self) -> NDArray[np.float64]:
        """Copy of the column-major element buffer."""
        return self._elements.copy()

    def to_float32_array(self) -> NDArray[np.float32]:
        """Return the column-major elements as a float32 array for upload."""
        return np.ascontiguousarray(self._elements, dtype=np.float32)

    def _check_indices(self, column: int, row: int) -> None:
        if column < 0 or column >= self.COLUMNS:
            raise IndexOutOfBoundsError(
                f"Column index {column} out of bounds for {type(self).__name__} "
                f"(0-{self.COLUMNS - 1})",
                axis="column",
                index=column,
            )
        if row < 0 or row >= self.ROWS:
            raise IndexOutOfBoundsError(
                f"Row index {row} out of bounds for {type(self).__name__} "
                f"(0-{self.ROWS - 1})",
                axis="row",
                index=row,
            )

    def get(self, column: int, row: int) -> float:
        """Return the element at (column, row)."""
        self._check_indices(column, row)
        return float(self._elements[column * self.ROWS + row])

    def set(self: _MatrixT, column: int, row: int, value: float) -> _MatrixT:
        """Set the element at (column, row)."""
        self._check_indices(column, row)
        self._elements[column * self.ROWS + row] = value
        return self

    def __getitem__(self, column: int) -> MatrixColumn | None:
        require_integer_index(column, "column")
        if column < 0 or column >= self.COLUMNS:
            return None
        return MatrixColumn(self, column)

    def _require_same_shape(self, other: Matrix) -> None:
        if self.ROWS != other.ROWS or self.COLUMNS != other.COLUMNS:
            raise DimensionMismatchError(
                "Matrices must have the same size: "
                f"{type(self).__name__} ({self.ROWS}x{self.COLUMNS}) and "
                f"{type(other).__name__} ({other.ROWS}x{other.COLUMNS})"
            )

    def clone(self: _MatrixT) -> _MatrixT:
        """Return a deep copy of the same concrete type."""
        matrix: _MatrixT = type(self).zero()
        matrix._elements[:] = self._elements
        return matrix

    def copy(self: _MatrixT, other: Matrix) -> _MatrixT:
        """Overwrite the elements with those of ``other``."""
        self._require_same_shape(other)
        self._elements[:] = other._elements
        return self

    def add(self: _MatrixT, other: Matrix) -> _MatrixT:
        """Add ``other`` element-wise in place."""
        self._require_same_shape(other)
        self._elements += other._elements
        return self

    def subtract(self: _MatrixT, other: Matrix) -> _MatrixT:
        """Subtract ``other`` element-wise in place."""
        self._require_same_shape(other)
        self._elements -= other._elements
        return self

    def multiply(self: _MatrixT, other: Matrix) -> _MatrixT:
        """Replace this matrix with ``self * other``."""
        return self.multiply_matrices(self, other)

    def _check_product_shape(self, a: Matrix, b: Matrix) -> None:
        if a.COLUMNS != b.ROWS:
            raise IncompatibleShapeError(
                "Matrix multiplication has incompatible dimensions: "
                f"{a.ROWS}x{a.COLUMNS} * {b.ROWS}x{b.COLUMNS}"
            )
        if self.ROWS != a.ROWS or self.COLUMNS != b.COLUMNS:
            raise IncompatibleShapeError(
                f"Result size mismatch: expected {a.ROWS}x{b.COLUMNS}, "
                f"got {self.ROWS}x{self.COLUMNS}"
            )

    def multiply_matrices(self: _MatrixT, a: Matrix, b: Matrix) -> _MatrixT:
        """Store the product ``a * b`` in this matrix.

        Args:
            a: Left operand with shape (R, K)
            b: Right operand with shape (K, C)

        Returns:
            This matrix, which must have shape (R, C)

        Raises:
            IncompatibleShapeError: If the inner dimensions differ or this
                matrix is not R x C
        """
        self._check_product_shape(a, b)

        a_rows: int = a.ROWS
        inner: int = a.COLUMNS
        b_rows: int = b.ROWS
        ae: list[float] = a._elements.tolist()
        be: list[float] = b._elements.tolist()
        out: list[float] = [0.0] * (self.ROWS * self.COLUMNS)
        for c in range(self.COLUMNS):
            b_base: int = c * b_rows
            for r in range(self.ROWS):
                total: float = 0.0
                for k in range(inner):
                    total += ae[k * a_rows + r] * be[b_base + k]
                out[c * a_rows + r] = total

        # Written after the loop so that ``a`` or ``b`` may alias ``self``
        self._elements[:] = out
        return self

    def make_identity(self: _MatrixT) -> _MatrixT:
        """Zero the matrix and set ones along the leading diagonal."""
        self._elements.fill(0.0)
        for i in range(min(self.ROWS, self.COLUMNS)):
            self._elements[i * self.ROWS + i] = 1.0
        return self

    def transposed(self) -> Matrix:
        """Return the transpose as an instance of ``TRANSPOSE_TYPE``.

        Raises:
            MissingTypeMetadataError: If the class declares no TRANSPOSE_TYPE
            ShapeMismatchError: If TRANSPOSE_TYPE does not have the swapped
                shape
        """
        transpose_type: type[Matrix] | None = type(self).TRANSPOSE_TYPE
        if transpose_type is None:
            raise MissingTypeMetadataError(
                f"{type(self).__name__} must declare a TRANSPOSE_TYPE "
                "for transposed() to work"
            )

        result: Matrix = transpose_type.zero()
        if result.ROWS != self.COLUMNS or result.COLUMNS != self.ROWS:
            raise ShapeMismatchError(
                f"Transpose dimension mismatch: expected {self.COLUMNS}x{self.ROWS}, "
                f"got {result.ROWS}x{result.COLUMNS}"
            )

        # Rows of the (COLUMNS, ROWS) view are the columns of this matrix
        by_column: NDArray[np.float64] = self._elements.reshape(
            (self.COLUMNS, self.ROWS)
        )
        result._elements[:] = by_column.T.ravel()
        return result

    def equals(self, other: Matrix) -> bool:
        """Exact comparison; matrices of different shape are never equal."""
        if self.ROWS != other.ROWS or self.COLUMNS != other.COLUMNS:
            return False
        return bool(np.array_equal(self._elements, other._elements))

    def equals_epsilon(self, other: Matrix, epsilon: float = DEFAULT_EPSILON) -> bool:
        """Compare elements within ``epsilon``.

        Raises:
            InvalidArgumentError: If ``epsilon`` is negative
        """
        require_non_negative_epsilon(epsilon)
        if self.ROWS != other.ROWS or self.COLUMNS != other.COLUMNS:
            return False
        return elements_close(self._elements, other._elements, epsilon)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.equals(other)

    __hash__ = None  # type: ignore[assignment]

    def __add__(self: _MatrixT, other: Matrix) -> _MatrixT:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.clone().add(other)

    def __sub__(self: _MatrixT, other: Matrix) -> _MatrixT:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.clone().subtract(other)

    def __matmul__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return product_type(self, other).zero().multiply_matrices(self, other)

    def __repr__(self) -> str:
        values: str = ", ".join(repr(value) for value in self._elements.tolist())
        return f"{type(self).__name__}({values})"


def make_matrix_types(rows: int, columns: int) -> tuple[type[Matrix], type[Matrix]]:
    """Create a matrix class for an arbitrary shape and its transpose class.

    Square shapes return the same class twice, bound as its own transpose.

    Args:
        rows: Number of rows of the first class
        columns: Number of columns of the first class

    Returns:
        Tuple of (rows x columns class, columns x rows class)
    """
    if rows < 0 or columns < 0:
        raise InvalidArgumentError("rows and columns must be non-negative")

    matrix_type: type[Matrix] = type(
        f"Matrix{rows}x{columns}",
        (Matrix,),
        {"ROWS": rows, "COLUMNS": columns, "__module__": __name__},
    )
    if rows == columns:
        matrix_type.TRANSPOSE_TYPE = matrix_type
        return matrix_type, matrix_type

    transpose_type: type[Matrix] = type(
        f"Matrix{columns}x{rows}",
        (Matrix,),
        {"ROWS": columns, "COLUMNS": rows, "__module__": __name__},
    )
    matrix_type.TRANSPOSE_TYPE = transpose_type
    transpose_type.TRANSPOSE_TYPE = matrix_type
    return matrix_type, transpose_type


def product_type(a: Matrix, b: Matrix) -> type[Matrix]:
    """Return the class that holds ``a @ b``.

    Prefers the type of ``a``, then the type of ``b``, and generates a new
    class only when neither has the product's shape.
    """
    for candidate in (type(a), type(b)):
        if candidate.ROWS == a.ROWS and candidate.COLUMNS == b.COLUMNS:
            return candidate

    result_type, _ = make_matrix_types(a.ROWS, b.COLUMNS)
    return result_type
