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
Quaternion rotations using the xyzw convention

Components are stored as ``(x, y, z, w)`` with ``w`` the scalar part. Unit
length is a convention rather than an invariant: only inverting an exactly
zero quaternion is an error.

Conventions:
    * ``q1 * q2`` is the Hamilton product and applies ``q2`` first when
      rotating vectors
    * Euler angles are roll (x), pitch (y) and yaw (z) composed in ZYX order
    * Rotation matrices are column-major Matrix3/Matrix4 instances
"""

from __future__ import annotations

import logging
import math
import numbers
from dataclasses import dataclass
from typing import Iterator
from typing import Sequence

import numpy as np
from numpy.typing import NDArray

from oasis_math.element_rounding import elements_close
from oasis_math.math_errors import ZeroQuaternionError
from oasis_math.math_params import ANGLE_TO_EPS
from oasis_math.math_params import AXIS_ANGLE_SIN_EPS
from oasis_math.math_params import PARALLEL_DOT_THRESHOLD
from oasis_math.math_params import PERPENDICULAR_AXIS_EPS
from oasis_math.math_params import QUATERNION_EPSILON
from oasis_math.math_params import SLERP_LERP_THRESHOLD
from oasis_math.math_params import require_non_negative_epsilon
from oasis_math.matrices.matrix import Matrix
from oasis_math.matrices.matrix3 import Matrix3
from oasis_math.matrices.matrix4 import Matrix4
from oasis_math.vectors.vector import component_property
from oasis_math.vectors.vector3 import Vector3


_LOG: logging.Logger = logging.getLogger(__name__)


# Default components (x, y, z, w) for slots missing from an input array
_IDENTITY_COMPONENTS: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 1.0)


@dataclass(frozen=True)
class AxisAngle:
    """Rotation as a unit axis and an angle in radians."""

    axis: Vector3
    angle: float


@dataclass(frozen=True)
class EulerAngles:
    """Roll (x), pitch (y) and yaw (z) in radians."""

    x: float
    y: float
    z: float


def _hamilton(
    a: Sequence[float], b: Sequence[float]
) -> tuple[float, float, float, float]:
    """Return the Hamilton product ``a * b`` of two xyzw tuples."""
    ax, ay, az, aw = a
    bx, by, bz, bw = b
    return (
        aw * bx + ax * bw + ay * bz - az * by,
        aw * by - ax * bz + ay * bw + az * bx,
        aw * bz + ax * by - ay * bx + az * bw,
        aw * bw - ax * bx - ay * by - az * bz,
    )


class Quaternion:
    """Mutable quaternion; mutating methods return ``self`` for chaining."""

    def __init__(
        self, x: float = 0.0, y: float = 0.0, z: float = 0.0, w: float = 1.0
    ) -> None:
        self._elements: NDArray[np.float64] = np.array([x, y, z, w], dtype=np.float64)

    x = component_property(0, "x")
    y = component_property(1, "y")
    z = component_property(2, "z")
    w = component_property(3, "w")

    @staticmethod
    def identity_quaternion() -> Quaternion:
        """Return a new identity quaternion."""
        return Quaternion()

    @staticmethod
    def zero_quaternion() -> Quaternion:
        """Return a new quaternion with every component zero."""
        return Quaternion(0.0, 0.0, 0.0, 0.0)

    @staticmethod
    def from_array(values: Sequence[float], offset: int = 0) -> Quaternion:
        """Create a quaternion from ``values[offset:offset + 4]``."""
        return Quaternion().set_from_array(values, offset)

    @staticmethod
    def from_axis_angle(axis: Vector3, angle: float) -> Quaternion:
        """Create a rotation of ``angle`` radians about ``axis``."""
        return Quaternion().set_from_axis_angle(axis, angle)

    @staticmethod
    def from_euler_angles(x: float, y: float, z: float) -> Quaternion:
        """Create a rotation from roll, pitch and yaw in radians."""
        return Quaternion().set_from_euler_angles(x, y, z)

    @staticmethod
    def from_rotation_matrix3(m: Matrix3) -> Quaternion:
        """Create a rotation from a 3x3 rotation matrix."""
        return Quaternion().set_from_rotation_matrix3(m)

    @staticmethod
    def from_rotation_matrix4(m: Matrix4) -> Quaternion:
        """Create a rotation from the upper-left 3x3 block of a 4x4 matrix."""
        return Quaternion().set_from_rotation_matrix4(m)

    @staticmethod
    def look_at(
        eye: Vector3, target: Vector3, up: Vector3 | None = None
    ) -> Quaternion:
        """Create the orientation looking from ``eye`` toward ``target``."""
        return Quaternion().set_from_look_at(eye, target, up)

    @staticmethod
    def from_rotation_between_vectors(a: Vector3, b: Vector3) -> Quaternion:
        """Create the shortest rotation taking direction ``a`` to ``b``."""
        return Quaternion().set_from_rotation_between_vectors(a, b)

    @staticmethod
    def nlerp(a: Quaternion, b: Quaternion, t: float) -> Quaternion:
        """Return the normalized linear interpolation from ``a`` to ``b``."""
        return a.clone().lerp(b, t)

    @staticmethod
    def squad(
        q0: Quaternion, q1: Quaternion, q2: Quaternion, q3: Quaternion, t: float
    ) -> Quaternion:
        """Spherical quadrangle interpolation from ``q0`` to ``q3``.

        Args:
            q0: Start rotation
            q1: Control rotation near the start
            q2: Control rotation near the end
            q3: End rotation
            t: Interpolation parameter in [0, 1]

        Returns:
            A new quaternion
        """
        outer: Quaternion = q0.slerped(q3, t)
        inner: Quaternion = q1.slerped(q2, t)
        return outer.slerp(inner, 2.0 * t * (1.0 - t))

    @property
    def components(self) -> tuple[float, float, float, float]:
        """Components as an ``(x, y, z, w)`` tuple."""
        x, y, z, w = self._elements.tolist()
        return (x, y, z, w)

    def set(self, x: float, y: float, z: float, w: float) -> Quaternion:
        """Overwrite all four components."""
        self._elements[:] = [x, y, z, w]
        return self

    def identity(self) -> Quaternion:
        """Reset to the identity rotation."""
        return self.set(*_IDENTITY_COMPONENTS)

    def zero(self) -> Quaternion:
        """Set every component to zero."""
        self._elements.fill(0.0)
        return self

    def set_from_array(self, values: Sequence[float], offset: int = 0) -> Quaternion:
        """Read up to four components starting at ``offset``.

        Slots past the end of ``values`` take their identity value.
        """
        components: list[float] = list(_IDENTITY_COMPONENTS)
        for i in range(4):
            if offset + i < len(values):
                components[i] = float(values[offset + i])
        self._elements[:] = components
        return self

    def to_array(self) -> list[float]:
        """Return the components as an ``[x, y, z, w]`` list."""
        return self._elements.tolist()

    def to_float32_array(self) -> NDArray[np.float32]:
        """Return the components as a contiguous float32 array for upload."""
        return np.ascontiguousarray(self._elements, dtype=np.float32)

    def clone(self) -> Quaternion:
        """Return a deep copy."""
        return Quaternion(*self._elements.tolist())

    def copy(self, other: Quaternion) -> Quaternion:
        """Overwrite the components with those of ``other``."""
        self._elements[:] = other._elements
        return self

    def add(self, other: Quaternion) -> Quaternion:
        """Add ``other`` component-wise in place."""
        self._elements += other._elements
        return self

    def subtract(self, other: Quaternion) -> Quaternion:
        """Subtract ``other`` component-wise in place."""
        self._elements -= other._elements
        return self

    def multiply_scalar(self, scalar: float) -> Quaternion:
        """Scale every component in place."""
        self._elements *= scalar
        return self

    def multiply(self, other: Quaternion) -> Quaternion:
        """Replace this quaternion with ``self * other``."""
        return self.set(*_hamilton(self.components, other.components))

    def premultiply(self, other: Quaternion) -> Quaternion:
        """Replace this quaternion with ``other * self``."""
        return self.set(*_hamilton(other.components, self.components))

    def conjugate(self) -> Quaternion:
        """Negate the vector part in place."""
        self._elements[:3] *= -1.0
        return self

    def conjugated(self) -> Quaternion:
        """Return the conjugate as a new quaternion."""
        return self.clone().conjugate()

    def invert(self) -> Quaternion:
        """Invert in place as ``conjugate / |q|^2``.

        Raises:
            ZeroQuaternionError: If every component is zero
        """
        norm_sq: float = self.length_squared()
        if norm_sq == 0.0:
            raise ZeroQuaternionError("Cannot invert a zero quaternion")
        self.conjugate()
        self._elements /= norm_sq
        return self

    def inverse(self) -> Quaternion:
        """Return the inverse as a new quaternion."""
        return self.clone().invert()

    def dot(self, other: Quaternion) -> float:
        """Return the four-component dot product."""
        return float(np.dot(self._elements, other._elements))

    def length_squared(self) -> float:
        """Return the squared norm."""
        return float(np.dot(self._elements, self._elements))

    def length(self) -> float:
        """Return the norm."""
        return math.sqrt(self.length_squared())

    def normalize(self) -> Quaternion:
        """Scale to unit length in place; a zero quaternion is left unchanged."""
        norm: float = self.length()
        if norm == 0.0:
            return self
        self._elements /= norm
        return self

    def normalized(self) -> Quaternion:
        """Return a unit-length copy, or a zero copy of a zero quaternion."""
        return self.clone().normalize()

    def set_from_axis_angle(self, axis: Vector3, angle: float) -> Quaternion:
        """Rotate ``angle`` radians about ``axis``, which is normalized first."""
        unit: Vector3 = axis.normalized()
        half: float = 0.5 * angle
        s: float = math.sin(half)
        return self.set(unit.x * s, unit.y * s, unit.z * s, math.cos(half))

    def to_axis_angle(self) -> AxisAngle:
        """Return the rotation as an axis and an angle in [0, pi].

        The axis is (1, 0, 0) for a zero quaternion and for rotations too
        small to define a direction.
        """
        default_axis: Vector3 = Vector3(1.0, 0.0, 0.0)
        if self.length_squared() == 0.0:
            return AxisAngle(default_axis, 0.0)

        unit: Quaternion = self.normalized()

        # q and -q are the same rotation; pick the one with w >= 0
        if unit.w < 0.0:
            unit.multiply_scalar(-1.0)

        w: float = min(1.0, max(-1.0, unit.w))
        angle: float = 2.0 * math.acos(w)
        sin_half: float = math.sin(0.5 * angle)
        if sin_half <= AXIS_ANGLE_SIN_EPS:
            return AxisAngle(default_axis, angle)

        axis: Vector3 = Vector3(unit.x / sin_half, unit.y / sin_half, unit.z / sin_half)
        return AxisAngle(axis.normalize(), angle)

    def set_from_euler_angles(self, x: float, y: float, z: float) -> Quaternion:
        """Set from roll (x), pitch (y) and yaw (z) composed as Rz * Ry * Rx."""
        cx: float = math.cos(0.5 * x)
        sx: float = math.sin(0.5 * x)
        cy: float = math.cos(0.5 * y)
        sy: float = math.sin(0.5 * y)
        cz: float = math.cos(0.5 * z)
        sz: float = math.sin(0.5 * z)
        return self.set(
            sx * cy * cz - cx * sy * sz,
            cx * sy * cz + sx * cy * sz,
            cx * cy * sz - sx * sy * cz,
            cx * cy * cz + sx * sy * sz,
        )

    def to_euler_angles(self) -> EulerAngles:
        """Return roll, pitch and yaw; pitch saturates at +/-pi/2."""
        x, y, z, w = self.components

        roll: float = math.atan2(2.0 * (w * x + y * z), 1.0 - 2.0 * (x * x + y * y))

        sin_pitch: float = 2.0 * (w * y - z * x)
        pitch: float
        if abs(sin_pitch) >= 1.0:
            _LOG.debug("Gimbal lock: clamping pitch (sin(pitch)=%s)", sin_pitch)
            pitch = math.copysign(0.5 * math.pi, sin_pitch)
        else:
            pitch = math.asin(sin_pitch)

        yaw: float = math.atan2(2.0 * (w * z + x * y), 1.0 - 2.0 * (y * y + z * z))
        return EulerAngles(roll, pitch, yaw)

    def _rotation_columns(self) -> list[float] | None:
        """Return the column-major 3x3 rotation, or None for a zero norm."""
        x, y, z, w = self.components
        norm_sq: float = x * x + y * y + z * z + w * w
        if norm_sq == 0.0:
            _LOG.debug("Zero quaternion converted to an identity rotation matrix")
            return None

        s: float = 2.0 / norm_sq
        xs: float = x * s
        ys: float = y * s
        zs: float = z * s
        xx: float = x * xs
        xy: float = x * ys
        xz: float = x * zs
        yy: float = y * ys
        yz: float = y * zs
        zz: float = z * zs
        wx: float = w * xs
        wy: float = w * ys
        wz: float = w * zs

        return [
            1.0 - (yy + zz),
            xy + wz,
            xz - wy,
            xy - wz,
            1.0 - (xx + zz),
            yz + wx,
            xz + wy,
            yz - wx,
            1.0 - (xx + yy),
        ]

    def to_rotation_matrix3(self) -> Matrix3:
        """Return the 3x3 rotation matrix, scaled for non-unit quaternions."""
        columns: list[float] | None = self._rotation_columns()
        if columns is None:
            return Matrix3()
        return Matrix3(*columns)

    def to_rotation_matrix4(self) -> Matrix4:
        """Return the 4x4 rotation matrix with no translation."""
        matrix: Matrix4 = Matrix4()
        columns: list[float] | None = self._rotation_columns()
        if columns is None:
            return matrix
        for column in range(3):
            for row in range(3):
                matrix.set(column, row, columns[column * 3 + row])
        return matrix

    def _set_from_rotation(self, m: Sequence[Sequence[float]]) -> Quaternion:
        """Set from a 3x3 rotation given as ``m[row][column]``."""
        m00, m01, m02 = m[0]
        m10, m11, m12 = m[1]
        m20, m21, m22 = m[2]

        trace: float = m00 + m11 + m22
        s: float
        if trace > 0.0:
            s = math.sqrt(trace + 1.0) * 2.0
            self.set((m21 - m12) / s, (m02 - m20) / s, (m10 - m01) / s, 0.25 * s)
        elif m00 > m11 and m00 > m22:
            s = math.sqrt(1.0 + m00 - m11 - m22) * 2.0
            self.set(0.25 * s, (m01 + m10) / s, (m02 + m20) / s, (m21 - m12) / s)
        elif m11 > m22:
            s = math.sqrt(1.0 + m11 - m00 - m22) * 2.0
            self.set((m01 + m10) / s, 0.25 * s, (m12 + m21) / s, (m02 - m20) / s)
        else:
            s = math.sqrt(1.0 + m22 - m00 - m11) * 2.0
            self.set((m02 + m20) / s, (m12 + m21) / s, 0.25 * s, (m10 - m01) / s)

        return self.normalize()

    def _set_from_matrix_block(self, m: Matrix) -> Quaternion:
        rows: list[list[float]] = [
            [m.get(column, row) for column in range(3)] for row in range(3)
        ]
        return self._set_from_rotation(rows)

    def set_from_rotation_matrix3(self, m: Matrix3) -> Quaternion:
        """Set from a 3x3 rotation matrix."""
        return self._set_from_matrix_block(m)

    def set_from_rotation_matrix4(self, m: Matrix4) -> Quaternion:
        """Set from the rotation block of a 4x4 matrix."""
        return self._set_from_matrix_block(m)

    def set_from_look_at(
        self, eye: Vector3, target: Vector3, up: Vector3 | None = None
    ) -> Quaternion:
        """Set the orientation whose -Z axis points from ``eye`` to ``target``.

        Args:
            eye: Viewer position
            target: Point to look at
            up: Approximate up direction, +Y by default

        Returns:
            This quaternion
        """
        up_hint: Vector3 = up if up is not None else Vector3(0.0, 1.0, 0.0)

        forward: Vector3 = (target - eye).normalize()
        right: Vector3 = forward.crossed(up_hint).normalize()
        true_up: Vector3 = right.crossed(forward).normalize()

        rows: list[list[float]] = [
            [right.x, right.y, right.z],
            [true_up.x, true_up.y, true_up.z],
            [-forward.x, -forward.y, -forward.z],
        ]
        return self._set_from_rotation(rows)

    def set_from_rotation_between_vectors(self, a: Vector3, b: Vector3) -> Quaternion:
        """Set the shortest rotation taking direction ``a`` onto ``b``.

        Parallel inputs give the identity. Antiparallel inputs give a half
        turn about an axis perpendicular to ``a``.
        """
        v0: Vector3 = a.normalized()
        v1: Vector3 = b.normalized()
        d: float = v0.dot(v1)

        if d > PARALLEL_DOT_THRESHOLD:
            return self.identity()

        if d < -PARALLEL_DOT_THRESHOLD:
            _LOG.debug("Antiparallel vectors: rotating pi about a perpendicular axis")
            axis: Vector3 = Vector3(1.0, 0.0, 0.0).cross(v0)
            if axis.length_squared() < PERPENDICULAR_AXIS_EPS:
                axis = Vector3(0.0, 1.0, 0.0).cross(v0)
            return self.set_from_axis_angle(axis.normalize(), math.pi)

        return self.set_from_axis_angle(v0.crossed(v1).normalize(), math.acos(d))

    def rotate_vector(self, v: Vector3) -> Vector3:
        """Return ``v`` rotated by the sandwich product ``q * v * conj(q)``."""
        q: tuple[float, float, float, float] = self.components
        q_conj: tuple[float, float, float, float] = (-q[0], -q[1], -q[2], q[3])
        rotated: tuple[float, float, float, float] = _hamilton(
            _hamilton(q, (v.x, v.y, v.z, 0.0)), q_conj
        )
        return Vector3(rotated[0], rotated[1], rotated[2])

    def lerp(self, other: Quaternion, t: float) -> Quaternion:
        """Normalized linear interpolation toward ``other`` in place."""
        self._elements[:] = (1.0 - t) * self._elements + t * other._elements
        return self.normalize()

    def slerp(self, other: Quaternion, t: float) -> Quaternion:
        """Spherical linear interpolation toward ``other`` in place.

        Takes the shortest path by negating ``other`` when the dot product
        is negative. Nearly parallel inputs fall back to ``lerp``.
        """
        target: Quaternion = other.clone()
        d: float = self.dot(target)
        if d < 0.0:
            target.multiply_scalar(-1.0)
            d = -d

        if d > SLERP_LERP_THRESHOLD:
            return self.lerp(target, t)

        theta: float = math.acos(d)
        sin_theta: float = math.sin(theta)
        w1: float = math.sin((1.0 - t) * theta) / sin_theta
        w2: float = math.sin(t * theta) / sin_theta

        self._elements[:] = w1 * self._elements + w2 * target._elements
        return self.normalize()

    def slerped(self, other: Quaternion, t: float) -> Quaternion:
        """Return the spherical interpolation toward ``other``."""
        return self.clone().slerp(other, t)

    def angle_to(self, other: Quaternion) -> float:
        """Return the rotation angle in radians between two unit quaternions."""
        d: float = min(1.0, abs(self.dot(other)))
        if d >= 1.0 - ANGLE_TO_EPS:
            return 0.0
        return 2.0 * math.acos(d)

    def rotate_towards(self, target: Quaternion, max_radians: float) -> Quaternion:
        """Step toward ``target`` by at most ``max_radians`` in place."""
        angle: float = self.angle_to(target)
        if angle == 0.0:
            return self
        return self.slerp(target, min(1.0, max_radians / angle))

    def equals(self, other: Quaternion) -> bool:
        """Exact component comparison."""
        return bool(np.array_equal(self._elements, other._elements))

    def equals_epsilon(
        self, other: Quaternion, epsilon: float = QUATERNION_EPSILON
    ) -> bool:
        """Compare components within ``epsilon``.

        ``q`` and ``-q`` are the same rotation but do not compare equal here.

        Raises:
            InvalidArgumentError: If ``epsilon`` is negative
        """
        require_non_negative_epsilon(epsilon)
        return elements_close(self._elements, other._elements, epsilon)

    def __iter__(self) -> Iterator[float]:
        return iter(self._elements.tolist())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Quaternion):
            return NotImplemented
        return self.equals(other)

    __hash__ = None  # type: ignore[assignment]

    def __mul__(self, other: Quaternion | float) -> Quaternion:
        if isinstance(other, Quaternion):
            return self.clone().multiply(other)
        if isinstance(other, numbers.Real):
            return self.clone().multiply_scalar(float(other))
        return NotImplemented

    def __rmul__(self, other: float) -> Quaternion:
        if not isinstance(other, numbers.Real):
            return NotImplemented
        return self.clone().multiply_scalar(float(other))

    def __add__(self, other: Quaternion) -> Quaternion:
        if not isinstance(other, Quaternion):
            return NotImplemented
        return self.clone().add(other)

    def __sub__(self, other: Quaternion) -> Quaternion:
        if not isinstance(other, Quaternion):
            return NotImplemented
        return self.clone().subtract(other)

    def __neg__(self) -> Quaternion:
        return Quaternion(*(-self._elements).tolist())

    def __repr__(self) -> str:
        x, y, z, w = self.components
        return f"Quaternion({x!r}, {y!r}, {z!r}, {w!r})"
