################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Vector types."""

from __future__ import annotations

from oasis_math.vectors.vector import Vector
from oasis_math.vectors.vector2 import Vector2
from oasis_math.vectors.vector3 import Vector3
from oasis_math.vectors.vector4 import Vector4


__all__ = [
    "Vector",
    "Vector2",
    "Vector3",
    "Vector4",
]
