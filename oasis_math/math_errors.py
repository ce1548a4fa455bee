################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Exceptions raised by the vector, matrix and quaternion types."""

from __future__ import annotations


class MathError(Exception):
    """Base class for all oasis_math failures."""


class DimensionMismatchError(MathError, ValueError):
    """Raised when a binary operation is given operands of different size."""


class IndexOutOfBoundsError(MathError, IndexError):
    """Raised when an element index is outside a type's fixed bounds.

    Attributes:
        axis: Name of the offending axis ("index", "column" or "row")
        index: The rejected index value
    """

    def __init__(self, message: str, axis: str, index: int) -> None:
        super().__init__(message)
        self.axis: str = axis
        self.index: int = index


class SizeMismatchError(MathError, ValueError):
    """Raised when a constructor gets the wrong number of elements."""


class IncompatibleShapeError(MathError, ValueError):
    """Raised when matrix operands or the result container disagree in shape."""


class ShapeMismatchError(MathError, ValueError):
    """Raised when a matrix does not have the shape an operation requires."""


class NotInvertibleError(MathError, ArithmeticError):
    """Raised when a matrix determinant is below the singularity threshold."""


class DivisionByZeroError(MathError, ZeroDivisionError):
    """Raised on scalar division by exactly zero."""


class NonFiniteValueError(MathError, ValueError):
    """Raised when a rounding operation meets a NaN or infinite component."""


class ZeroQuaternionError(MathError, ZeroDivisionError):
    """Raised when inverting a quaternion of zero length."""


class InvalidArgumentError(MathError, ValueError):
    """Raised for out-of-domain arguments such as a negative epsilon."""


class MissingTypeMetadataError(MathError, TypeError):
    """Raised when a matrix type lacks its TRANSPOSE_TYPE declaration."""
