"""Floating point 2, 3 and 4 component vectors."""

from __future__ import annotations

import math
from numbers import Real
from typing import Callable, Iterator, TypeVar

from gameframe.helpers import fequal

_V = TypeVar("_V", bound="_Vector")


class _Vector:
    """Shared behaviour of the fixed-size float vectors."""

    __slots__ = ()
    _fields: tuple[str, ...] = ()

    def __init__(self, *components) -> None:
        size = len(self._fields)
        if len(components) == 1 and isinstance(components[0], Real):
            values = [float(components[0])] * size
        else:
            values = []
            for component in components:
                if isinstance(component, _Vector):
                    values.extend(component)
                elif isinstance(component, Real):
                    values.append(float(component))
                else:
                    raise TypeError(f"cannot build {type(self).__name__} from {component!r}")
            if len(values) > size:
                raise TypeError(
                    f"{type(self).__name__} takes at most {size} components, got {len(values)}"
                )
            values.extend([0.0] * (size - len(values)))
        for name, value in zip(self._fields, values):
            setattr(self, name, value)

    def _make(self: _V, values) -> _V:
        return type(self)(*values)

    def __iter__(self) -> Iterator[float]:
        return (getattr(self, name) for name in self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def _check_index(self, index: int) -> str:
        if not 0 <= index < len(self._fields):
            raise IndexError(f"{type(self).__name__} index out of range: {index}")
        return self._fields[index]

    def __getitem__(self, index: int) -> float:
        return getattr(self, self._check_index(index))

    def __setitem__(self, index: int, value: float) -> None:
        setattr(self, self._check_index(index), value)

    def __repr__(self) -> str:
        inner = ", ".join(f"{name}={getattr(self, name)!r}" for name in self._fields)
        return f"{type(self).__name__}({inner})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return all(fequal(a, b) for a, b in zip(self, other))

    __hash__ = None  # type: ignore[assignment]

    def _operands(self, other):
        if isinstance(other, type(self)):
            return list(other)
        if isinstance(other, Real):
            return [other] * len(self._fields)
        return None

    def _binary(self, other, op: Callable[[float, float], float]):
        operands = self._operands(other)
        if operands is None:
            return NotImplemented
        return self._make(op(a, b) for a, b in zip(self, operands))

    def _reflected(self, other, op: Callable[[float, float], float]):
        if not isinstance(other, Real):
            return NotImplemented
        return self._make(op(other, a) for a in self)

    def _inplace(self, other, op: Callable[[float, float], float]):
        operands = self._operands(other)
        if operands is None:
            return NotImplemented
        for name, b in zip(self._fields, operands):
            setattr(self, name, op(getattr(self, name), b))
        return self

    def __neg__(self: _V) -> _V:
        return self._make(-a for a in self)

    def __add__(self, other):
        return self._binary(other, lambda a, b: a + b)

    def __sub__(self, other):
        return self._binary(other, lambda a, b: a - b)

    def __mul__(self, other):
        return self._binary(other, lambda a, b: a * b)

    def __truediv__(self, other):
        return self._binary(other, lambda a, b: a / b)

    def __radd__(self, other):
        return self._reflected(other, lambda s, a: s + a)

    def __rsub__(self, other):
        return self._reflected(other, lambda s, a: s - a)

    def __rmul__(self, other):
        return self._reflected(other, lambda s, a: s * a)

    def __rtruediv__(self, other):
        return self._reflected(other, lambda s, a: s / a)

    def __iadd__(self, other):
        return self._inplace(other, lambda a, b: a + b)

    def __isub__(self, other):
        return self._inplace(other, lambda a, b: a - b)

    def __imul__(self, other):
        return self._inplace(other, lambda a, b: a * b)

    def __itruediv__(self, other):
        return self._inplace(other, lambda a, b: a / b)

    def length_squared(self) -> float:
        """Squared Euclidean length."""
        return sum(a * a for a in self)

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.length_squared())

    def distance_from(self, other) -> float:
        """Euclidean distance to another vector of the same kind."""
        return math.dist(tuple(self), tuple(other))

    def normalized(self: _V) -> _V:
        """Return a unit-length copy; a zero-length vector is returned unchanged."""
        length = self.length()
        if fequal(length, 0):
            return self._make(self)
        inverse = 1.0 / length
        return self._make(a * inverse for a in self)

    def normalize(self: _V) -> _V:
        """Scale this vector to unit length in place and return it."""
        length = self.length()
        if not fequal(length, 0):
            for name in self._fields:
                setattr(self, name, getattr(self, name) / length)
        return self

    def dot(self, other) -> float:
        """Dot product."""
        return sum(a * b for a, b in zip(self, other))


class Vec2(_Vector):
    """A two component float vector."""

    __slots__ = ("x", "y")
    _fields = ("x", "y")

    @classmethod
    def right(cls) -> Vec2:
        return cls(1.0, 0.0)

    @classmethod
    def up(cls) -> Vec2:
        return cls(0.0, 1.0)

    @classmethod
    def zero(cls) -> Vec2:
        return cls(0.0, 0.0)

    @classmethod
    def one(cls) -> Vec2:
        return cls(1.0, 1.0)

    def length_squared(self) -> float:
        return super().length_squared()

    def length(self) -> float:
        return super().length()

    def distance_from(self, other: Vec2) -> float:
        return super().distance_from(other)

    def normalized(self) -> Vec2:
        return super().normalized()

    def normalize(self) -> Vec2:
        return super().normalize()

    def cross(self, other: Vec2) -> float:
        """The z component of the 3D cross product of the two vectors."""
        return self.x * other.y - self.y * other.x

    def absolute(self) -> Vec2:
        """Make every component non-negative in place and return self."""
        self.x = abs(self.x)
        self.y = abs(self.y)
        return self

    def __abs__(self) -> Vec2:
        return Vec2(abs(self.x), abs(self.y))

    def dot(self, other: Vec2) -> float:
        return super().dot(other)

    def with_x(self, x: float) -> Vec2:
        return Vec2(x, self.y)

    def with_y(self, y: float) -> Vec2:
        return Vec2(self.x, y)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Vec2):
            return NotImplemented
        return self.y < other.y if self.x == other.x else self.x < other.x

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Vec2):
            return NotImplemented
        return self.y > other.y if self.x == other.x else self.x > other.x


class Vec3(_Vector):
    """A three component float vector."""

    __slots__ = ("x", "y", "z")
    _fields = ("x", "y", "z")

    @classmethod
    def right(cls) -> Vec3:
        return cls(1.0, 0.0, 0.0)

    @classmethod
    def up(cls) -> Vec3:
        return cls(0.0, 1.0, 0.0)

    @classmethod
    def forward(cls) -> Vec3:
        return cls(0.0, 0.0, 1.0)

    @classmethod
    def zero(cls) -> Vec3:
        return cls(0.0, 0.0, 0.0)

    def xy(self) -> Vec2:
        return Vec2(self.x, self.y)

    def xz(self) -> Vec2:
        return Vec2(self.x, self.z)

    def length_squared(self) -> float:
        return super().length_squared()

    def length(self) -> float:
        return super().length()

    def distance_from(self, other: Vec3) -> float:
        return super().distance_from(other)

    def normalized(self) -> Vec3:
        return super().normalized()

    def normalize(self) -> Vec3:
        return super().normalize()

    def cross(self, other: Vec3) -> Vec3:
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def dot(self, other: Vec3) -> float:
        return super().dot(other)

    def multiply_components(self, other: Vec3) -> Vec3:
        return Vec3(self.x * other.x, self.y * other.y, self.z * other.z)

    def divide_components(self, other: Vec3) -> Vec3:
        return Vec3(self.x / other.x, self.y / other.y, self.z / other.z)

    def saturate(self) -> Vec3:
        """Clamp every component to ``[0, 1]`` in place and return self."""
        self.x, self.y, self.z = (min(max(a, 0.0), 1.0) for a in (self.x, self.y, self.z))
        return self

    def with_x(self, x: float) -> Vec3:
        return Vec3(x, self.y, self.z)

    def with_y(self, y: float) -> Vec3:
        return Vec3(self.x, y, self.z)

    def with_z(self, z: float) -> Vec3:
        return Vec3(self.x, self.y, z)


class Vec4(_Vector):
    """A four component float vector."""

    __slots__ = ("x", "y", "z", "w")
    _fields = ("x", "y", "z", "w")

    def xyz(self) -> Vec3:
        return Vec3(self.x, self.y, self.z)

    def length_squared(self) -> float:
        return super().length_squared()

    def length(self) -> float:
        return super().length()

    def distance_from(self, other: Vec4) -> float:
        return super().distance_from(other)

    def normalized(self) -> Vec4:
        return super().normalized()

    def normalize(self) -> Vec4:
        return super().normalize()

    def dot(self, other: Vec4) -> float:
        return super().dot(other)

    def multiply_components(self, other: Vec4) -> Vec4:
        return Vec4(self.x * other.x, self.y * other.y, self.z * other.z, self.w * other.w)

    def divide_components(self, other: Vec4) -> Vec4:
        return Vec4(self.x / other.x, self.y / other.y, self.z / other.z, self.w / other.w)

    def with_x(self, x: float) -> Vec4:
        return Vec4(x, self.y, self.z, self.w)

    def with_y(self, y: float) -> Vec4:
        return Vec4(self.x, y, self.z, self.w)

    def with_z(self, z: float) -> Vec4:
        return Vec4(self.x, self.y, z, self.w)

    def with_w(self, w: float) -> Vec4:
        return Vec4(self.x, self.y, self.z, w)