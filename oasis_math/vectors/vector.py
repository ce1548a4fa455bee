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
N-dimensional vector base type

Conventions:
    * Components are stored in a flat float64 numpy buffer
    * Instance methods such as ``add()`` mutate the vector and return it for
      chaining
    * Operators and the past-tense methods such as ``normalized()`` leave
      their operands untouched and return a new instance of the left
      operand's concrete type
    * Binary operations compare sizes, not types, so a base ``Vector`` of
      length 3 interoperates with a ``Vector3``
"""

from __future__ import annotations

import math
import numbers
from typing import Iterator
from typing import TypeVar

import numpy as np
from numpy.typing import NDArray

from oasis_math.element_rounding import ElementRounding
from oasis_math.element_rounding import elements_close
from oasis_math.math_errors import DimensionMismatchError
from oasis_math.math_errors import DivisionByZeroError
from oasis_math.math_errors import IndexOutOfBoundsError
from oasis_math.math_params import DEFAULT_EPSILON
from oasis_math.math_params import require_non_negative_epsilon


_VectorT = TypeVar("_VectorT", bound="Vector")


def component_property(index: int, name: str) -> property:
    """Return a read/write property aliasing one component slot."""

    def getter(self: Vector) -> float:
        return float(self._elements[index])

    def setter(self: Vector, value: float) -> None:
        self._elements[index] = value

    return property(getter, setter, doc=f"Component {index} ({name})")


class Vector(ElementRounding):
    """Variable-length vector of floats."""

    _KIND: str = "vector"

    def __init__(self, *components: float) -> None:
        self._elements: NDArray[np.float64] = np.array(components, dtype=np.float64)

    def _new(self: _VectorT, values: NDArray[np.float64]) -> _VectorT:
        """Build a vector of this concrete type from a buffer."""
        return type(self)(*values.tolist())

    @property
    def size(self) -> int:
        """Number of components."""
        return int(self._elements.shape[0])

    @property
    def components(self) -> tuple[float, ...]:
        """Components as a tuple of Python floats."""
        return tuple(self._elements.tolist())

    @property
    def elements(self) -> NDArray[np.float64]:
        """Copy of the component buffer."""
        return self._elements.copy()

    def to_float32_array(self) -> NDArray[np.float32]:
        """Return the components as a contiguous float32 array for upload."""
        return np.ascontiguousarray(self._elements, dtype=np.float32)

    def _check_index(self, index: int) -> None:
        if index < 0 or index >= self.size:
            raise IndexOutOfBoundsError(
                f"Index {index} out of bounds for {type(self).__name__} "
                f"of size {self.size}",
                axis="index",
                index=index,
            )

    def get(self, index: int) -> float:
        """Return the component at ``index``."""
        self._check_index(index)
        return float(self._elements[index])

    def set(self: _VectorT, index: int, value: float) -> _VectorT:
        """Set the component at ``index``."""
        self._check_index(index)
        self._elements[index] = value
        return self

    def _require_same_size(self, other: Vector) -> None:
        if self.size != other.size:
            raise DimensionMismatchError(
                "Vectors must have the same size: "
                f"{type(self).__name__} (size {self.size}) and "
                f"{type(other).__name__} (size {other.size})"
            )

    def add(self: _VectorT, other: Vector) -> _VectorT:
        """Add ``other`` component-wise in place."""
        self._require_same_size(other)
        self._elements += other._elements
        return self

    def subtract(self: _VectorT, other: Vector) -> _VectorT:
        """Subtract ``other`` component-wise in place."""
        self._require_same_size(other)
        self._elements -= other._elements
        return self

    def multiply_scalar(self: _VectorT, scalar: float) -> _VectorT:
        """Scale every component in place."""
        self._elements *= scalar
        return self

    def divide_scalar(self: _VectorT, scalar: float) -> _VectorT:
        """Divide every component in place.

        Raises:
            DivisionByZeroError: If ``scalar`` is exactly zero
        """
        if scalar == 0:
            raise DivisionByZeroError("Cannot divide vector by zero")
        self._elements /= scalar
        return self

    def dot(self, other: Vector) -> float:
        """Return the dot product with ``other``."""
        self._require_same_size(other)
        return float(np.dot(self._elements, other._elements))

    def length_squared(self) -> float:
        """Return the squared Euclidean norm."""
        return float(np.dot(self._elements, self._elements))

    def length(self) -> float:
        """Return the Euclidean norm."""
        return math.sqrt(self.length_squared())

    def distance_squared_to(self, other: Vector) -> float:
        """Return the squared distance to ``other``."""
        self._require_same_size(other)
        delta: NDArray[np.float64] = self._elements - other._elements
        return float(np.dot(delta, delta))

    def distance_to(self, other: Vector) -> float:
        """Return the distance to ``other``."""
        return math.sqrt(self.distance_squared_to(other))

    def normalize(self: _VectorT) -> _VectorT:
        """Scale to unit length in place; a zero vector is left unchanged."""
        norm: float = self.length()
        if norm == 0.0:
            return self
        return self.divide_scalar(norm)

    def normalized(self: _VectorT) -> _VectorT:
        """Return a unit-length copy, or a zero copy of a zero vector."""
        return self.clone().normalize()

    def lerp(self: _VectorT, target: Vector, t: float) -> _VectorT:
        """Interpolate toward ``target`` in place; ``t`` may extrapolate."""
        self._require_same_size(target)
        self._elements[:] = (1.0 - t) * self._elements + t * target._elements
        return self

    def lerped(self: _VectorT, target: Vector, t: float) -> _VectorT:
        """Return the interpolation toward ``target`` as a new vector."""
        return self.clone().lerp(target, t)

    def clone(self: _VectorT) -> _VectorT:
        """Return a deep copy of the same concrete type."""
        return self._new(self._elements)

    def copy(self: _VectorT, other: Vector) -> _VectorT:
        """Overwrite the components with those of ``other``."""
        self._require_same_size(other)
        self._elements[:] = other._elements
        return self

    def equals(self, other: Vector) -> bool:
        """Exact comparison; vectors of different size are never equal."""
        if self.size != other.size:
            return False
        return bool(np.array_equal(self._elements, other._elements))

    def equals_epsilon(self, other: Vector, epsilon: float = DEFAULT_EPSILON) -> bool:
        """Compare components within ``epsilon``.

        Raises:
            InvalidArgumentError: If ``epsilon`` is negative
        """
        require_non_negative_epsilon(epsilon)
        if self.size != other.size:
            return False
        return elements_close(self._elements, other._elements, epsilon)

    def __len__(self) -> int:
        return self.size

    def __iter__(self) -> Iterator[float]:
        return iter(self._elements.tolist())

    def __getitem__(self, index: int) -> float:
        return self.get(index)

    def __setitem__(self, index: int, value: float) -> None:
        self.set(index, value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.equals(other)

    __hash__ = None  # type: ignore[assignment]

    def __add__(self: _VectorT, other: Vector) -> _VectorT:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.clone().add(other)

    def __sub__(self: _VectorT, other: Vector) -> _VectorT:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.clone().subtract(other)

    def __mul__(self: _VectorT, scalar: float) -> _VectorT:
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return self.clone().multiply_scalar(scalar)

    __rmul__ = __mul__

    def __truediv__(self: _VectorT, scalar: float) -> _VectorT:
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return self.clone().divide_scalar(scalar)

    def __neg__(self: _VectorT) -> _VectorT:
        return self._new(-self._elements)

    def __repr__(self) -> str:
        values: str = ", ".join(repr(value) for value in self.components)
        return f"{type(self).__name__}({values})"
