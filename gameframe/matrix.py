"""A 4x4 transformation matrix stored in column-major order."""

from __future__ import annotations

import contextlib
import math
from numbers import Real
from typing import Iterable, Iterator

from gameframe.helpers import FEQUAL_EPSILON, fequal
from gameframe.vector import Vec2, Vec3, Vec4

_IDENTITY = (
    1.0, 0.0, 0.0, 0.0,
    0.0, 1.0, 0.0, 0.0,
    0.0, 0.0, 1.0, 0.0,
    0.0, 0.0, 0.0, 1.0,
)


def _element(index: int) -> property:
    def getter(self: Mat4) -> float:
        return self._m[index]

    def setter(self: Mat4, value: float) -> None:
        self._m[index] = float(value)

    return property(getter, setter)


def _xyz(value: Iterable[float]) -> tuple[float, float, float]:
    x, y, z = value
    return float(x), float(y), float(z)


class Mat4:
    """A 4x4 matrix.

    Element ``mCR`` is column ``C``, row ``R``; translation lives in
    ``m41``, ``m42`` and ``m43``.  Values are stored column by column, in the
    same order the constructor takes them.  With no arguments the matrix is
    the identity.
    """

    __slots__ = ("_m",)

    def __init__(self, *values: float) -> None:
        if not values:
            self._m = list(_IDENTITY)
        elif len(values) == 16:
            self._m = [float(v) for v in values]
        else:
            raise TypeError(f"Mat4 takes 0 or 16 values, got {len(values)}")

    m11 = _element(0)
    m12 = _element(1)
    m13 = _element(2)
    m14 = _element(3)
    m21 = _element(4)
    m22 = _element(5)
    m23 = _element(6)
    m24 = _element(7)
    m31 = _element(8)
    m32 = _element(9)
    m33 = _element(10)
    m34 = _element(11)
    m41 = _element(12)
    m42 = _element(13)
    m43 = _element(14)
    m44 = _element(15)

    @classmethod
    def identity(cls) -> Mat4:
        """Return a new identity matrix."""
        return cls(*_IDENTITY)

    def __iter__(self) -> Iterator[float]:
        return iter(self._m)

    def __repr__(self) -> str:
        return f"Mat4({', '.join(repr(v) for v in self._m)})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mat4):
            return NotImplemented
        return all(fequal(a, b) for a, b in zip(self._m, other._m))

    __hash__ = None  # type: ignore[assignment]

    # Operators.

    def _apply(self, x: float, y: float, z: float, w: float) -> tuple[float, ...]:
        m = self._m
        return tuple(m[r] * x + m[4 + r] * y + m[8 + r] * z + m[12 + r] * w for r in range(4))

    def __mul__(self, other):
        if isinstance(other, Mat4):
            a, b = self._m, other._m
            return Mat4(
                *(
                    sum(a[k * 4 + r] * b[c * 4 + k] for k in range(4))
                    for c in range(4)
                    for r in range(4)
                )
            )
        if isinstance(other, Real):
            return Mat4(*(v * other for v in self._m))
        if isinstance(other, Vec4):
            return Vec4(*self._apply(other.x, other.y, other.z, other.w))
        if isinstance(other, Vec3):
            x, y, z, w = self._apply(other.x, other.y, other.z, 1.0)
            return Vec3(x / w, y / w, z / w) if w else Vec3(x, y, z)
        if isinstance(other, Vec2):
            x, y, _, w = self._apply(other.x, other.y, 0.0, 1.0)
            return Vec2(x / w, y / w) if w else Vec2(x, y)
        return NotImplemented

    # Functions that change the existing values.

    def scale(self, scale) -> None:
        """Scale the matrix by a uniform factor or per-axis factors."""
        if isinstance(scale, Real):
            factors = (float(scale),) * 3
        else:
            factors = _xyz(scale)
        m = self._m
        for c in range(4):
            for r, factor in enumerate(factors):
                m[c * 4 + r] *= factor

    def rotate(self, angle: float, x: float, y: float, z: float) -> None:
        """Rotate by ``angle`` degrees about the axis ``(x, y, z)``.

        A zero-length axis leaves the matrix unchanged.
        """
        mag = math.sqrt(x * x + y * y + z * z)
        if mag <= 0.0:
            return
        rad = math.radians(angle)
        s, c = math.sin(rad), math.cos(rad)
        x, y, z = x / mag, y / mag, z / mag
        xx, yy, zz = x * x, y * y, z * z
        xy, yz, zx = x * y, y * z, z * x
        xs, ys, zs = x * s, y * s, z * s
        t = 1.0 - c
        rot = Mat4(
            t * xx + c, t * xy - zs, t * zx + ys, 0.0,
            t * xy + zs, t * yy + c, t * yz - xs, 0.0,
            t * zx - ys, t * yz + xs, t * zz + c, 0.0,
            0.0, 0.0, 0.0, 1.0,
        )
        self._m = (rot * self)._m

    def translate_pre_rot_scale(self, translate) -> None:
        """Translate before the existing rotation and scale are applied."""
        tx, ty, tz = _xyz(translate)
        m = self._m
        for r in range(4):
            m[12 + r] += m[r] * tx + m[4 + r] * ty + m[8 + r] * tz

    def translate(self, pos) -> None:
        """Add ``pos`` to the translation."""
        x, y, z = _xyz(pos)
        self._m[12] += x
        self._m[13] += y
        self._m[14] += z

    # Functions that overwrite the values.

    def set_identity(self) -> None:
        """Reset to the identity matrix."""
        self._m = list(_IDENTITY)

    def set_axes_view(self, right, up, at, pos) -> None:
        """Set the axes as rows, as used by a view matrix."""
        rx, ry, rz = _xyz(right)
        ux, uy, uz = _xyz(up)
        ax, ay, az = _xyz(at)
        px, py, pz = _xyz(pos)
        self._m = [
            rx, ux, ax, 0.0,
            ry, uy, ay, 0.0,
            rz, uz, az, 0.0,
            px, py, pz, 1.0,
        ]

    def set_axes_world(self, right, up, at, pos) -> None:
        """Set the axes as columns, as used by a world matrix."""
        rx, ry, rz = _xyz(right)
        ux, uy, uz = _xyz(up)
        ax, ay, az = _xyz(at)
        px, py, pz = _xyz(pos)
        self._m = [
            rx, ry, rz, 0.0,
            ux, uy, uz, 0.0,
            ax, ay, az, 0.0,
            px, py, pz, 1.0,
        ]

    def set_translation(self, pos) -> None:
        """Replace the translation, keeping everything else."""
        self._m[12:15] = _xyz(pos)

    def create_scale(self, scale) -> None:
        """Become a pure scale matrix, uniform or per axis."""
        if isinstance(scale, Real):
            sx = sy = sz = float(scale)
        else:
            sx, sy, sz = _xyz(scale)
        self._m = [
            sx, 0.0, 0.0, 0.0,
            0.0, sy, 0.0, 0.0,
            0.0, 0.0, sz, 0.0,
            0.0, 0.0, 0.0, 1.0,
        ]

    def _rotate_euler(self, euler_degrees) -> None:
        x, y, z = _xyz(euler_degrees)
        self.rotate(z, 0, 0, 1)  # roll
        self.rotate(x, 1, 0, 0)  # pitch
        self.rotate(y, 0, 1, 0)  # yaw

    def create_rotation(self, euler_degrees) -> None:
        """Become a rotation: roll about z, then pitch about x, then yaw about y."""
        self.set_identity()
        self._rotate_euler(euler_degrees)

    def create_translation(self, pos) -> None:
        """Become a pure translation matrix."""
        self.set_identity()
        self.set_translation(pos)

    def create_srt(self, scale, rot, pos) -> None:
        """Become scale, then rotation (Euler degrees), then translation."""
        self.create_scale(scale)
        self._rotate_euler(rot)
        self.translate(pos)

    # Values read from the matrix.

    def translation(self) -> Vec3:
        return Vec3(self.m41, self.m42, self.m43)

    def euler_angles(self) -> Vec3:
        """Return the Euler angles in degrees that ``create_rotation`` would take."""
        m32 = self.m32
        if m32 > 1.0 - FEQUAL_EPSILON:
            x, y, z = math.pi / 2, math.atan2(self.m21, self.m11), 0.0
        elif m32 < -1.0 + FEQUAL_EPSILON:
            x, y, z = -math.pi / 2, -math.atan2(self.m21, self.m11), 0.0
        else:
            x = math.asin(m32)
            y = math.atan2(-self.m31, self.m33)
            z = math.atan2(-self.m12, self.m22)
        return Vec3(math.degrees(x), math.degrees(y), math.degrees(z))

    def scale_factors(self) -> Vec3:
        """Return the lengths of the three axis columns."""
        return Vec3(
            Vec3(self.m11, self.m12, self.m13).length(),
            Vec3(self.m21, self.m22, self.m23).length(),
            Vec3(self.m31, self.m32, self.m33).length(),
        )

    def up(self) -> Vec3:
        return Vec3(self.m21, self.m22, self.m23)

    def right(self) -> Vec3:
        return Vec3(self.m11, self.m12, self.m13)

    def at(self) -> Vec3:
        return Vec3(self.m31, self.m32, self.m33)

    def transpose(self) -> None:
        """Transpose in place."""
        m = self._m
        self._m = [m[r * 4 + c] for c in range(4) for r in range(4)]

    def invert(self, tolerance: float = 0.0001) -> None:
        """Invert in place.

        Raises ValueError, leaving the matrix unchanged, if the absolute
        determinant is no larger than ``tolerance``.
        """
        (m11, m12, m13, m14, m21, m22, m23, m24,
         m31, m32, m33, m34, m41, m42, m43, m44) = self._m

        s0 = m11 * m22 - m12 * m21
        s1 = m11 * m23 - m13 * m21
        s2 = m11 * m24 - m14 * m21
        s3 = m12 * m23 - m13 * m22
        s4 = m12 * m24 - m14 * m22
        s5 = m13 * m24 - m14 * m23

        c5 = m33 * m44 - m34 * m43
        c4 = m32 * m44 - m34 * m42
        c3 = m32 * m43 - m33 * m42
        c2 = m31 * m44 - m34 * m41
        c1 = m31 * m43 - m33 * m41
        c0 = m31 * m42 - m32 * m41

        det = s0 * c5 - s1 * c4 + s2 * c3 + s3 * c2 - s4 * c1 + s5 * c0
        if abs(det) <= tolerance:
            raise ValueError("matrix is singular and cannot be inverted")

        inv_det = 1.0 / det
        adjugate = (
            m22 * c5 - m23 * c4 + m24 * c3, -m12 * c5 + m13 * c4 - m14 * c3,
            m42 * s5 - m43 * s4 + m44 * s3, -m32 * s5 + m33 * s4 - m34 * s3,

            -m21 * c5 + m23 * c2 - m24 * c1, m11 * c5 - m13 * c2 + m14 * c1,
            -m41 * s5 + m43 * s2 - m44 * s1, m31 * s5 - m33 * s2 + m34 * s1,

            m21 * c4 - m22 * c2 + m24 * c0, -m11 * c4 + m12 * c2 - m14 * c0,
            m41 * s4 - m42 * s2 + m44 * s0, -m31 * s4 + m32 * s2 - m34 * s0,

            -m21 * c3 + m22 * c1 - m23 * c0, m11 * c3 - m12 * c1 + m13 * c0,
            -m41 * s3 + m42 * s1 - m43 * s0, m31 * s3 - m32 * s1 + m33 * s0,
        )
        self._m = [v * inv_det for v in adjugate]

    def inverted(self, tolerance: float = 0.0001) -> Mat4:
        """Return the inverse; a singular matrix is returned as an unchanged copy."""
        result = Mat4(*self._m)
        with contextlib.suppress(ValueError):
            result.invert(tolerance)
        return result