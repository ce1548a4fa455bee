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
Elementwise helpers shared by vectors and matrices

Both types keep their numbers in a flat float64 numpy buffer named
``_elements``. The rounding family here is the only place in the package
with a finiteness precondition: arithmetic elsewhere lets NaN and infinity
propagate per IEEE-754.
"""

from __future__ import annotations

import abc
from typing import Callable
from typing import TypeVar

import numpy as np
from numpy.typing import NDArray

from oasis_math.math_errors import InvalidArgumentError
from oasis_math.math_errors import NonFiniteValueError


_RoundingT = TypeVar("_RoundingT", bound="ElementRounding")


def assert_finite_elements(
    elements: NDArray[np.float64], owner: str, method_name: str
) -> None:
    """Raise NonFiniteValueError when any element is NaN or infinite."""
    finite: NDArray[np.bool_] = np.isfinite(elements)
    if not np.all(finite):
        bad: str = ", ".join(str(float(value)) for value in elements[~finite])
        raise NonFiniteValueError(
            f"{method_name}(): {owner} contains non-finite values ({bad})"
        )


def elements_close(
    a: NDArray[np.float64], b: NDArray[np.float64], epsilon: float
) -> bool:
    """Compare buffers of equal length within an absolute tolerance.

    Equal infinities compare equal because they are checked for exact
    equality first. NaN never compares equal, not even to itself.
    """
    exact: NDArray[np.bool_] = a == b
    with np.errstate(invalid="ignore"):
        close: NDArray[np.bool_] = np.abs(a - b) <= epsilon
    return bool(np.all(exact | close))


def round_half_up(elements: NDArray[np.float64]) -> NDArray[np.float64]:
    """Round to the nearest integer with halves going toward +infinity."""
    # Compare the fractional part; adding 0.5 first rounds in float64
    floor: NDArray[np.float64] = np.floor(elements)
    return np.where(elements - floor >= 0.5, floor + 1.0, floor)


def round_away_from_zero(elements: NDArray[np.float64]) -> NDArray[np.float64]:
    """Round to the next integer away from zero."""
    return np.where(elements >= 0.0, np.ceil(elements), np.floor(elements))


class ElementRounding(abc.ABC):
    """
    Rounding and clamping operations for types backed by ``_elements``

    Each operation has a mutating form returning ``self`` and a pure form
    returning a new instance of the concrete type. The builtins
    ``math.trunc``, ``math.floor``, ``math.ceil`` and ``round`` map onto the
    pure forms.
    """

    _elements: NDArray[np.float64]

    # Noun used in error messages
    _KIND: str = "value"

    @abc.abstractmethod
    def clone(self: _RoundingT) -> _RoundingT:
        """Return a deep copy of the same concrete type."""

    def is_finite(self) -> bool:
        """Return True when no element is NaN or infinite."""
        return bool(np.all(np.isfinite(self._elements)))

    def is_integer(self) -> bool:
        """Return True when every element is a finite integral value."""
        return self.is_finite() and bool(
            np.all(self._elements == np.trunc(self._elements))
        )

    def is_unsigned_integer(self) -> bool:
        """Return True when every element is a non-negative integral value."""
        return self.is_integer() and bool(np.all(self._elements >= 0.0))

    def _apply_rounding(
        self: _RoundingT,
        method_name: str,
        func: Callable[[NDArray[np.float64]], NDArray[np.float64]],
    ) -> _RoundingT:
        assert_finite_elements(self._elements, self._KIND, method_name)
        self._elements[:] = func(self._elements)
        return self

    def truncate(self: _RoundingT) -> _RoundingT:
        """Round every element toward zero."""
        return self._apply_rounding("truncate", np.trunc)

    def floor(self: _RoundingT) -> _RoundingT:
        """Round every element toward -infinity."""
        return self._apply_rounding("floor", np.floor)

    def ceil(self: _RoundingT) -> _RoundingT:
        """Round every element toward +infinity."""
        return self._apply_rounding("ceil", np.ceil)

    def round(self: _RoundingT) -> _RoundingT:
        """Round every element to the nearest integer, halves up."""
        return self._apply_rounding("round", round_half_up)

    def expand(self: _RoundingT) -> _RoundingT:
        """Round every element away from zero."""
        return self._apply_rounding("expand", round_away_from_zero)

    def clamp_non_negative(self: _RoundingT) -> _RoundingT:
        """Replace negative elements with zero."""
        return self._apply_rounding(
            "clamp_non_negative", lambda values: np.maximum(values, 0.0)
        )

    def to_int(self: _RoundingT) -> _RoundingT:
        """Convert to integral values by truncation."""
        return self._apply_rounding("to_int", np.trunc)

    def to_uint(self: _RoundingT) -> _RoundingT:
        """Clamp negative elements to zero, then truncate."""
        return self._apply_rounding(
            "to_uint", lambda values: np.trunc(np.maximum(values, 0.0))
        )

    def truncated(self: _RoundingT) -> _RoundingT:
        return self.clone().truncate()

    def floored(self: _RoundingT) -> _RoundingT:
        return self.clone().floor()

    def ceiled(self: _RoundingT) -> _RoundingT:
        return self.clone().ceil()

    def rounded(self: _RoundingT) -> _RoundingT:
        return self.clone().round()

    def expanded(self: _RoundingT) -> _RoundingT:
        return self.clone().expand()

    def clamped_non_negative(self: _RoundingT) -> _RoundingT:
        return self.clone().clamp_non_negative()

    def as_int(self: _RoundingT) -> _RoundingT:
        return self.clone().to_int()

    def as_uint(self: _RoundingT) -> _RoundingT:
        return self.clone().to_uint()

    def __trunc__(self: _RoundingT) -> _RoundingT:
        return self.truncated()

    def __floor__(self: _RoundingT) -> _RoundingT:
        return self.floored()

    def __ceil__(self: _RoundingT) -> _RoundingT:
        return self.ceiled()

    def __round__(self: _RoundingT, ndigits: int | None = None) -> _RoundingT:
        if ndigits is not None:
            raise InvalidArgumentError("round() supports whole numbers only")
        return self.rounded()
