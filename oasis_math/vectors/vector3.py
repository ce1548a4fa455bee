################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Three-component vector."""

from __future__ import annotations

from oasis_math.vectors.vector import Vector
from oasis_math.vectors.vector import component_property


class Vector3(Vector):
    """Vector with x/y/z, r/g/b and s/t/p aliases over three slots."""

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0) -> None:
        super().__init__(x, y, z)

    x = component_property(0, "x")
    y = component_property(1, "y")
    z = component_property(2, "z")

    r = component_property(0, "r")
    g = component_property(1, "g")
    b = component_property(2, "b")

    s = component_property(0, "s")
    t = component_property(1, "t")
    p = component_property(2, "p")

    def cross(self, other: Vector3) -> Vector3:
        """Replace this vector with self x other."""
        ax: float = self.x
        ay: float = self.y
        az: float = self.z
        bx: float = other.x
        by: float = other.y
        bz: float = other.z
        self._elements[0] = ay * bz - az * by
        self._elements[1] = az * bx - ax * bz
        self._elements[2] = ax * by - ay * bx
        return self

    def crossed(self, other: Vector3) -> Vector3:
        """Return self x other as a new vector."""
        return self.clone().cross(other)
