################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Tests for math error types and tolerance parameters."""

from __future__ import annotations

import pytest

from oasis_math.math_errors import DimensionMismatchError
from oasis_math.math_errors import DivisionByZeroError
from oasis_math.math_errors import IndexOutOfBoundsError
from oasis_math.math_errors import InvalidArgumentError
from oasis_math.math_errors import MathError
from oasis_math.math_errors import MissingTypeMetadataError
from oasis_math.math_errors import NotInvertibleError
from oasis_math.math_errors import ZeroQuaternionError
from oasis_math.math_params import DEFAULT_EPSILON
from oasis_math.math_params import QUATERNION_EPSILON
from oasis_math.math_params import SINGULAR_DETERMINANT_EPS
from oasis_math.math_params import require_non_negative_epsilon


def test_errors_share_base() -> None:
    """Checks every error derives from MathError and its builtin."""
    assert issubclass(DimensionMismatchError, MathError)
    assert issubclass(DimensionMismatchError, ValueError)
    assert issubclass(IndexOutOfBoundsError, IndexError)
    assert issubclass(NotInvertibleError, ArithmeticError)
    assert issubclass(DivisionByZeroError, ZeroDivisionError)
    assert issubclass(ZeroQuaternionError, ZeroDivisionError)
    assert issubclass(MissingTypeMetadataError, TypeError)


def test_index_error_carries_axis() -> None:
    """Checks IndexOutOfBoundsError keeps the axis and index."""
    err: IndexOutOfBoundsError = IndexOutOfBoundsError("bad row", axis="row", index=7)
    assert err.axis == "row"
    assert err.index == 7
    assert str(err) == "bad row"


def test_default_tolerances() -> None:
    """Checks the documented tolerance defaults."""
    assert DEFAULT_EPSILON == 1e-5
    assert QUATERNION_EPSILON == 1e-6
    assert SINGULAR_DETERMINANT_EPS == 1e-10


def test_require_non_negative_epsilon() -> None:
    """Checks epsilon validation accepts zero and rejects negatives."""
    require_non_negative_epsilon(0.0)
    require_non_negative_epsilon(1e-3)
    with pytest.raises(InvalidArgumentError):
        require_non_negative_epsilon(-1e-9)
