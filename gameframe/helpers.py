"""Small numeric helpers shared by the math types."""

from __future__ import annotations

import math
from typing import TypeVar

FEQUAL_EPSILON = 0.00001

_T = TypeVar("_T")


def fequal(a: float, b: float, epsilon: float = FEQUAL_EPSILON) -> bool:
    """Return True if ``a`` and ``b`` differ by no more than ``epsilon``."""
    return abs(a - b) <= epsilon


def fnotequal(a: float, b: float, epsilon: float = FEQUAL_EPSILON) -> bool:
    """Return True if ``a`` and ``b`` differ by more than ``epsilon``."""
    return abs(a - b) > epsilon


def degrees_to_rads(number: float) -> float:
    """Convert an angle in degrees to radians."""
    return number * math.pi / 180.0


def rads_to_degrees(number: float) -> float:
    """Convert an angle in radians to degrees."""
    return number * 180.0 / math.pi


def clamp(value: _T, minimum: _T, maximum: _T) -> _T:
    """Return ``value`` limited to the range ``[minimum, maximum]``.

    The lower bound is applied first, then the upper one.
    """
    if value < minimum:  # type: ignore[operator]
        value = minimum
    if value > maximum:  # type: ignore[operator]
        value = maximum
    return value


def increase_if_bigger(value: _T, new_value: _T) -> _T:
    """Return ``new_value`` if it is larger than ``value``, else ``value``."""
    return new_value if new_value > value else value  # type: ignore[operator]


def decrease_if_lower(value: _T, new_value: _T, treat_zero_as_infinite: bool = False) -> _T:
    """Return ``new_value`` if it is smaller than ``value``, else ``value``.

    With ``treat_zero_as_infinite`` a current value of zero always yields
    ``new_value``.
    """
    if treat_zero_as_infinite and value == 0:
        value = new_value
    return new_value if new_value < value else value  # type: ignore[operator]


def is_power_of_two(x: int) -> bool:
    """Return True if ``x`` is a positive power of two."""
    return x > 0 and (x & (x - 1)) == 0