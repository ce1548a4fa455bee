################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Numeric tolerances shared by the vector, matrix and quaternion types."""

from __future__ import annotations

from oasis_math.math_errors import InvalidArgumentError


# Default tolerance for vector and matrix equals_epsilon()
DEFAULT_EPSILON: float = 1e-5

# Default tolerance for quaternion equals_epsilon()
QUATERNION_EPSILON: float = 1e-6

# Determinant magnitude below which a matrix is treated as singular
SINGULAR_DETERMINANT_EPS: float = 1e-10

# |dot| above which slerp falls back to normalized lerp
SLERP_LERP_THRESHOLD: float = 0.9995

# sin(angle / 2) below which to_axis_angle() reports the default X axis
AXIS_ANGLE_SIN_EPS: float = 1e-6

# Distance of |dot| from 1 below which angle_to() reports exactly zero
ANGLE_TO_EPS: float = 1e-6

# |dot| above which two unit vectors count as parallel or antiparallel
PARALLEL_DOT_THRESHOLD: float = 0.999999

# Squared length below which a candidate rotation axis is rejected
PERPENDICULAR_AXIS_EPS: float = 1e-6


def require_non_negative_epsilon(epsilon: float) -> None:
    """Raise InvalidArgumentError when a comparison tolerance is negative."""
    if epsilon < 0.0:
        raise InvalidArgumentError(f"epsilon must be non-negative, got {epsilon}")
