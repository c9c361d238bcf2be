"""An RGBA colour with float channels in the range 0 to 1."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from gameframe.helpers import fequal


@dataclass(eq=False)
class Color4f:
    """A colour with red, green, blue and alpha channels; white by default."""

    r: float = 1.0
    g: float = 1.0
    b: float = 1.0
    a: float = 1.0

    @classmethod
    def from_bytes(cls, r: int, g: int, b: int, a: int) -> Color4f:
        """Build a colour from 8-bit channel values."""
        channels = (r, g, b, a)
        for value in channels:
            if not isinstance(value, int) or not 0 <= value <= 255:
                raise ValueError(f"channel values must be integers 0 to 255, got {value!r}")
        return cls(*(value / 255.0 for value in channels))

    def __iter__(self) -> Iterator[float]:
        return iter((self.r, self.g, self.b, self.a))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color4f):
            return NotImplemented
        return all(fequal(mine, theirs) for mine, theirs in zip(self, other))

    __hash__ = None  # type: ignore[assignment]

    # Primary.
    @classmethod
    def red(cls) -> Color4f:
        return cls(1.0, 0.0, 0.0, 1.0)

    @classmethod
    def green(cls) -> Color4f:
        return cls(0.0, 1.0, 0.0, 1.0)

    @classmethod
    def yellow(cls) -> Color4f:
        return cls(1.0, 1.0, 0.0, 1.0)

    @classmethod
    def blue(cls) -> Color4f:
        return cls(0.0, 0.0, 1.0, 1.0)

    @classmethod
    def white(cls) -> Color4f:
        return cls(1.0, 1.0, 1.0, 1.0)

    @classmethod
    def black(cls) -> Color4f:
        return cls(0.0, 0.0, 0.0, 1.0)

    @classmethod
    def grey(cls) -> Color4f:
        return cls(0.5, 0.5, 0.5, 1.0)

    # Red shades.
    @classmethod
    def maroon(cls) -> Color4f:
        return cls(0.3, 0.0, 0.0, 1.0)

    @classmethod
    def orange(cls) -> Color4f:
        return cls(1.0, 0.6471, 0.0, 1.0)

    @classmethod
    def fire_red(cls) -> Color4f:
        return cls(0.8, 0.12, 0.16, 1.0)

    # Green shades.
    @classmethod
    def forest(cls) -> Color4f:
        return cls(0.0, 0.3, 0.0, 1.0)

    @classmethod
    def apple_green(cls) -> Color4f:
        return cls(0.5, 0.7, 0.0, 1.0)

    @classmethod
    def lime_green(cls) -> Color4f:
        return cls(0.74, 1.0, 0.0, 1.0)

    # Blue shades.
    @classmethod
    def dark_blue(cls) -> Color4f:
        return cls(0.0, 0.0, 0.3, 1.0)

    @classmethod
    def cyan(cls) -> Color4f:
        return cls(0.0, 1.0, 1.0, 1.0)

    @classmethod
    def cornflower_blue(cls) -> Color4f:
        return cls(0.39, 0.05, 0.92, 1.0)