################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Four-component vector."""

from __future__ import annotations

from oasis_math.vectors.vector import Vector
from oasis_math.vectors.vector import component_property


class Vector4(Vector):
    """Vector with x/y/z/w, r/g/b/a and s/t/p/q aliases over four slots."""

    def __init__(
        self, x: float = 0.0, y: float = 0.0, z: float = 0.0, w: float = 0.0
    ) -> None:
        super().__init__(x, y, z, w)

    x = component_property(0, "x")
    y = component_property(1, "y")
    z = component_property(2, "z")
    w = component_property(3, "w")

    r = component_property(0, "r")
    g = component_property(1, "g")
    b = component_property(2, "b")
    a = component_property(3, "a")

    s = component_property(0, "s")
    t = component_property(1, "t")
    p = component_property(2, "p")
    q = component_property(3, "q")
