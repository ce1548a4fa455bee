################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Two-component vector."""

from __future__ import annotations

from oasis_math.vectors.vector import Vector
from oasis_math.vectors.vector import component_property


class Vector2(Vector):
    """Vector with x/y, r/g and s/t aliases over two slots."""

    def __init__(self, x: float = 0.0, y: float = 0.0) -> None:
        super().__init__(x, y)

    x = component_property(0, "x")
    y = component_property(1, "y")

    r = component_property(0, "r")
    g = component_property(1, "g")

    s = component_property(0, "s")
    t = component_property(1, "t")

    @staticmethod
    def cross(a: Vector2, b: Vector2) -> float:
        """Return the z component of the 3D cross product of two 2D vectors."""
        return a.x * b.y - a.y * b.x
