################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Tests for the elementwise rounding family."""

from __future__ import annotations

import math

import numpy as np
import pytest

from oasis_math.element_rounding import ElementRounding
from oasis_math.element_rounding import assert_finite_elements
from oasis_math.element_rounding import elements_close
from oasis_math.element_rounding import round_away_from_zero
from oasis_math.element_rounding import round_half_up
from oasis_math.math_errors import InvalidArgumentError
from oasis_math.math_errors import NonFiniteValueError
from oasis_math.matrices.matrix2 import Matrix2
from oasis_math.vectors.vector import Vector
from oasis_math.vectors.vector2 import Vector2
from oasis_math.vectors.vector3 import Vector3


def test_round_rejects_nan() -> None:
    """Checks rounding a vector containing NaN raises."""
    v: Vector3 = Vector3(1.0, float("nan"), 3.0)
    with pytest.raises(NonFiniteValueError, match="nan"):
        v.round()


def test_rounding_rejects_infinity() -> None:
    """Checks every rounding operation rejects infinity."""
    v: Vector2 = Vector2(float("inf"), 1.0)
    for name in ("truncate", "floor", "ceil", "expand", "to_int", "to_uint"):
        with pytest.raises(NonFiniteValueError):
            getattr(v, name)()
    with pytest.raises(ValueError):
        v.clamp_non_negative()


def test_clamp_non_negative() -> None:
    """Checks negative components are clamped to zero."""
    v: Vector3 = Vector3(-1.0, 2.0, -3.0).clamp_non_negative()
    assert v.components == (0.0, 2.0, 0.0)


def test_round_half_up() -> None:
    """Checks halves round toward positive infinity."""
    assert Vector2(2.5, -2.5).round().components == (3.0, -2.0)
    assert Vector2(0.49, -0.51).round().components == (0.0, -1.0)


def test_round_half_up_near_half_and_large_values() -> None:
    """Checks values just below a half and beyond 2**52 round exactly."""
    v: Vector = Vector(0.49999999999999994, 4503599627370497.0, -0.5, 2.5)
    assert v.rounded().components == (0.0, 4503599627370497.0, 0.0, 3.0)

    values: np.ndarray = np.array([0.49999999999999994, -0.49999999999999994])
    assert np.array_equal(round_half_up(values), [0.0, 0.0])


def test_rounding_base_is_abstract() -> None:
    """Checks the rounding base cannot be used without a clone()."""
    with pytest.raises(TypeError):
        ElementRounding()  # type: ignore[abstract]


def test_truncate_floor_ceil_expand() -> None:
    """Checks the directed rounding modes."""
    v: Vector2 = Vector2(1.2, -1.2)
    assert v.truncated().components == (1.0, -1.0)
    assert v.floored().components == (1.0, -2.0)
    assert v.ceiled().components == (2.0, -1.0)
    assert v.expanded().components == (2.0, -2.0)


def test_integer_conversions() -> None:
    """Checks to_int truncates and to_uint clamps first."""
    v: Vector2 = Vector2(-1.7, 2.7)
    assert v.as_int().components == (-1.0, 2.0)
    assert v.as_uint().components == (0.0, 2.0)


def test_pure_forms_return_new_instances() -> None:
    """Checks pure rounding forms return new instances."""
    v: Vector2 = Vector2(1.5, -1.5)
    rounded: Vector2 = v.rounded()
    assert isinstance(rounded, Vector2)
    assert rounded is not v
    assert v.components == (1.5, -1.5)


def test_builtin_rounding() -> None:
    """Checks math.trunc/floor/ceil and round() dispatch to pure forms."""
    v: Vector2 = Vector2(1.5, -1.5)
    assert math.trunc(v).components == (1.0, -1.0)
    assert math.floor(v).components == (1.0, -2.0)
    assert math.ceil(v).components == (2.0, -1.0)
    assert round(v).components == (2.0, -1.0)
    with pytest.raises(InvalidArgumentError):
        round(v, 2)


def test_matrix_rounding() -> None:
    """Checks matrices share the rounding family."""
    m: Matrix2 = Matrix2(0.4, 1.6, -0.4, 2.5).rounded()
    assert isinstance(m, Matrix2)
    assert np.array_equal(m.elements, [0.0, 2.0, 0.0, 3.0])


def test_integer_predicates() -> None:
    """Checks the finiteness and integrality predicates."""
    assert Vector2(1.0, 2.0).is_integer()
    assert not Vector2(1.5, 2.0).is_integer()
    assert not Vector2(-1.0, 2.0).is_unsigned_integer()
    assert Vector2(0.0, 2.0).is_unsigned_integer()
    assert not Vector2(float("nan"), 0.0).is_finite()
    assert not Vector2(float("inf"), 0.0).is_integer()


def test_helpers() -> None:
    """Checks the module-level helpers."""
    values: np.ndarray = np.array([-1.5, -0.5, 0.5, 1.5])
    assert np.array_equal(round_half_up(values), [-1.0, 0.0, 1.0, 2.0])
    assert np.array_equal(round_away_from_zero(values), [-2.0, -1.0, 1.0, 2.0])

    inf: float = float("inf")
    assert elements_close(np.array([inf, 1.0]), np.array([inf, 1.0 + 1e-7]), 1e-6)
    assert not elements_close(np.array([float("nan")]), np.array([float("nan")]), 1.0)
    assert not elements_close(np.array([1.0]), np.array([1.1]), 0.0)

    with pytest.raises(NonFiniteValueError, match="round\\(\\): vector"):
        assert_finite_elements(np.array([1.0, inf]), "vector", "round")
