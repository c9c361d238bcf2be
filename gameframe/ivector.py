"""Integer 2, 3 and 4 component vectors and an integer rectangle."""

from __future__ import annotations

import math
import operator
from dataclasses import dataclass
from numbers import Integral, Real
from typing import Callable, ClassVar, Iterator

from gameframe.vector import Vec2, Vec3, Vec4


def _trunc_div(a: int, b: int) -> int:
    """Integer division that rounds toward zero."""
    quotient = abs(a) // abs(b)
    return -quotient if (a < 0) != (b < 0) else quotient


_Op = Callable[[float, float], float]

# Each operator maps to (integer operation, float operation).
_OPERATIONS: dict[str, tuple[_Op, _Op]] = {
    "+": (operator.add, operator.add),
    "-": (operator.sub, operator.sub),
    "*": (operator.mul, operator.mul),
    "/": (_trunc_div, operator.truediv),
}

_ALL_KINDS = frozenset({"ivec", "vec", "int", "float"})


class _IntVector:
    """Shared behaviour of the fixed-size integer vectors.

    Operand kinds are ``"ivec"`` (same integer vector type), ``"vec"`` (the
    matching float vector), ``"int"`` and ``"float"`` scalars.  Integer
    operands give integer vectors, float operands give float vectors.
    """

    __slots__ = ()
    _fields: ClassVar[tuple[str, ...]] = ()
    _float_type: ClassVar[type] = Vec2
    _broadcast: ClassVar[bool] = True
    _forward_kinds: ClassVar[dict[str, frozenset[str]]] = {}
    _reflected_kinds: ClassVar[frozenset[str]] = frozenset()
    _inplace_kinds: ClassVar[dict[str, frozenset[str]]] = {}

    def __init__(self, *components) -> None:
        size = len(self._fields)
        name = type(self).__name__
        if len(components) == 1 and isinstance(components[0], Integral):
            if not self._broadcast:
                raise TypeError(f"{name} cannot be built from a single integer")
            values = [int(components[0])] * size
        else:
            values = []
            for component in components:
                if isinstance(component, _IntVector):
                    values.extend(component)
                elif isinstance(component, Integral):
                    values.append(int(component))
                else:
                    raise TypeError(f"cannot build {name} from {component!r}")
            if len(values) > size:
                raise TypeError(f"{name} takes at most {size} components, got {len(values)}")
            values.extend([0] * (size - len(values)))
        for field, value in zip(self._fields, values):
            setattr(self, field, value)

    def __iter__(self) -> Iterator[int]:
        return (getattr(self, field) for field in self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def _check_index(self, index: int) -> str:
        if not 0 <= index < len(self._fields):
            raise IndexError(f"{type(self).__name__} index out of range: {index}")
        return self._fields[index]

    def __getitem__(self, index: int) -> int:
        return getattr(self, self._check_index(index))

    def __setitem__(self, index: int, value: int) -> None:
        field = self._check_index(index)
        if not isinstance(value, Integral):
            raise TypeError(f"{type(self).__name__} components must be integers")
        setattr(self, field, int(value))

    def __repr__(self) -> str:
        inner = ", ".join(f"{field}={getattr(self, field)!r}" for field in self._fields)
        return f"{type(self).__name__}({inner})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return tuple(self) == tuple(other)

    __hash__ = None  # type: ignore[assignment]

    def _kind(self, other) -> str | None:
        if isinstance(other, type(self)):
            return "ivec"
        if isinstance(other, self._float_type):
            return "vec"
        if isinstance(other, Integral):
            return "int"
        if isinstance(other, Real):
            return "float"
        return None

    def _forward(self, other, symbol: str):
        kind = self._kind(other)
        if kind not in self._forward_kinds.get(symbol, frozenset()):
            return NotImplemented
        int_op, float_op = _OPERATIONS[symbol]
        if kind == "ivec":
            return type(self)(*(int_op(a, b) for a, b in zip(self, other)))
        if kind == "int":
            return type(self)(*(int_op(a, other) for a in self))
        if kind == "vec":
            return self._float_type(*(float_op(a, b) for a, b in zip(self, other)))
        return self._float_type(*(float_op(a, other) for a in self))

    def _reflected(self, other, symbol: str):
        kind = self._kind(other)
        if kind not in self._reflected_kinds or kind not in ("int", "float"):
            return NotImplemented
        int_op, float_op = _OPERATIONS[symbol]
        if kind == "int":
            return type(self)(*(int_op(other, a) for a in self))
        return self._float_type(*(float_op(other, a) for a in self))

    def _inplace(self, other, symbol: str):
        kind = self._kind(other)
        if kind not in self._inplace_kinds.get(symbol, frozenset()):
            return NotImplemented
        int_op, _ = _OPERATIONS[symbol]
        operands = list(other) if kind == "ivec" else [other] * len(self._fields)
        for field, b in zip(self._fields, operands):
            setattr(self, field, int_op(getattr(self, field), b))
        return self

    def __neg__(self):
        return type(self)(*(-a for a in self))

    def __add__(self, other):
        return self._forward(other, "+")

    def __sub__(self, other):
        return self._forward(other, "-")

    def __mul__(self, other):
        return self._forward(other, "*")

    def __truediv__(self, other):
        return self._forward(other, "/")

    def __radd__(self, other):
        return self._reflected(other, "+")

    def __rsub__(self, other):
        return self._reflected(other, "-")

    def __rmul__(self, other):
        return self._reflected(other, "*")

    def __rtruediv__(self, other):
        return self._reflected(other, "/")

    def __iadd__(self, other):
        return self._inplace(other, "+")

    def __isub__(self, other):
        return self._inplace(other, "-")

    def __imul__(self, other):
        return self._inplace(other, "*")

    def __itruediv__(self, other):
        return self._inplace(other, "/")

    def length_squared(self):
        """Squared Euclidean length."""
        return sum(a * a for a in self)

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.length_squared())

    def distance_from(self, other) -> float:
        """Euclidean distance to another vector of the same kind."""
        return math.dist(tuple(self), tuple(other))


class IVec2(_IntVector):
    """A two component integer vector."""

    __slots__ = ("x", "y")
    _fields = ("x", "y")
    _float_type = Vec2
    _broadcast = False
    _forward_kinds = dict.fromkeys("+-*/", _ALL_KINDS)
    _reflected_kinds = frozenset({"int"})
    _inplace_kinds = dict.fromkeys("+-*/", frozenset({"int", "ivec"}))

    @classmethod
    def from_vec2(cls, vec: Vec2) -> IVec2:
        """Build from a float vector, truncating each component toward zero."""
        return cls(int(vec.x), int(vec.y))

    def length_squared(self) -> float:
        return float(super().length_squared())

    def length(self) -> float:
        return super().length()

    def distance_from(self, other: IVec2) -> float:
        return super().distance_from(other)

    def clamp_x(self, minimum: int, maximum: int) -> None:
        """Limit x to ``[minimum, maximum]`` in place."""
        self.x = minimum if self.x < minimum else maximum if self.x > maximum else self.x

    def clamp_y(self, minimum: int, maximum: int) -> None:
        """Limit y to ``[minimum, maximum]`` in place."""
        self.y = minimum if self.y < minimum else maximum if self.y > maximum else self.y

    def clamp_xy(self, minimum: int, maximum: int) -> None:
        """Limit both components to ``[minimum, maximum]`` in place."""
        self.clamp_x(minimum, maximum)
        self.clamp_y(minimum, maximum)

    def with_x(self, x: int) -> IVec2:
        return IVec2(x, self.y)

    def with_y(self, y: int) -> IVec2:
        return IVec2(self.x, y)


class IVec3(_IntVector):
    """A three component integer vector."""

    __slots__ = ("x", "y", "z")
    _fields = ("x", "y", "z")
    _float_type = Vec3
    _forward_kinds = dict.fromkeys("+-*/", _ALL_KINDS)
    _reflected_kinds = frozenset({"int", "float"})
    _inplace_kinds = dict.fromkeys("+-", frozenset({"ivec"}))

    def length_squared(self) -> int:
        return super().length_squared()

    def length(self) -> float:
        return super().length()

    def distance_from(self, other: IVec3) -> float:
        return super().distance_from(other)

    def multiply_components(self, other):
        """Component-wise product; float for a Vec3, integer for an IVec3."""
        if isinstance(other, IVec3):
            return IVec3(self.x * other.x, self.y * other.y, self.z * other.z)
        if isinstance(other, Vec3):
            return Vec3(self.x * other.x, self.y * other.y, self.z * other.z)
        raise TypeError(f"cannot multiply IVec3 components by {other!r}")

    def with_x(self, x: int) -> IVec3:
        return IVec3(x, self.y, self.z)

    def with_y(self, y: int) -> IVec3:
        return IVec3(self.x, y, self.z)

    def with_z(self, z: int) -> IVec3:
        return IVec3(self.x, self.y, z)


class IVec4(_IntVector):
    """A four component integer vector."""

    __slots__ = ("x", "y", "z", "w")
    _fields = ("x", "y", "z", "w")
    _float_type = Vec4
    _forward_kinds = dict.fromkeys("+-", frozenset({"ivec"}))
    _reflected_kinds = frozenset({"int"})
    _inplace_kinds: ClassVar[dict[str, frozenset[str]]] = {}

    def length_squared(self) -> float:
        return float(super().length_squared())

    def length(self) -> float:
        return super().length()

    def distance_from(self, other: IVec4) -> float:
        return super().distance_from(other)

    def with_x(self, x: int) -> IVec4:
        return IVec4(x, self.y, self.z, self.w)

    def with_y(self, y: int) -> IVec4:
        return IVec4(self.x, y, self.z, self.w)

    def with_z(self, z: int) -> IVec4:
        return IVec4(self.x, self.y, z, self.w)

    def with_w(self, w: int) -> IVec4:
        return IVec4(self.x, self.y, self.z, w)


@dataclass
class Rect:
    """An integer rectangle given by its corner and size."""

    x: int = 0
    y: int = 0
    w: int = 0
    h: int = 0