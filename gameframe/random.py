"""Seedable PCG32 random numbers and a shared default generator."""

from __future__ import annotations

import secrets
import struct
from typing import Iterator

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF
_MULTIPLIER = 6364136223846793005

DEFAULT_INCREMENT = 1442695040888963407
DEFAULT_STATE = 0xCAFEF00DD15EA5E5
UINT32_MAX = _MASK32


def _to_float32(value: float) -> float:
    return struct.unpack("<f", struct.pack("<f", value))[0]


class Pcg32:
    """The PCG XSH-RR generator with 64 bits of state and 32-bit output."""

    def __init__(self, state: int = DEFAULT_STATE, stream: int | None = None) -> None:
        self._reseed(state, stream)

    def _reseed(self, seed: int, stream: int | None) -> None:
        if stream is None:
            self._increment = DEFAULT_INCREMENT
        else:
            self._increment = ((stream << 1) | 1) & _MASK64
        self._state = self._step((seed + self._increment) & _MASK64)

    def seed(self, seed: int) -> None:
        """Restart from ``seed`` on the default stream."""
        self._reseed(seed, None)

    def _step(self, state: int) -> int:
        return (state * _MULTIPLIER + self._increment) & _MASK64

    def next_uint32(self) -> int:
        """Return the next 32-bit output."""
        old = self._state
        self._state = self._step(old)
        xorshifted = (((old >> 18) ^ old) >> 27) & _MASK32
        rot = old >> 59
        return ((xorshifted >> rot) | (xorshifted << ((-rot) & 31))) & _MASK32

    def __iter__(self) -> Iterator[int]:
        return self

    def __next__(self) -> int:
        return self.next_uint32()

    def bounded(self, bound: int) -> int:
        """Return an unbiased value in ``[0, bound)``; ``bound`` is 1 to 2**32."""
        if not 1 <= bound <= 1 << 32:
            raise ValueError(f"bound must be between 1 and 2**32, got {bound}")
        threshold = ((1 << 32) - bound) % bound
        while True:
            r = self.next_uint32()
            if r >= threshold:
                return r % bound


class Generator:
    """Integer and float random values with inclusive bounds."""

    def __init__(self, seed: int | None = None) -> None:
        if seed is None:
            self._engine = Pcg32(secrets.randbits(64), secrets.randbits(63))
        else:
            self._engine = Pcg32(seed & _MASK32)

    def set_seed(self, seed: int) -> None:
        """Restart the sequence from a 32-bit seed."""
        self._engine.seed(seed & _MASK32)

    def randint(self, low: int, high: int | None = None) -> int:
        """Return an integer in ``[low, high]``; with one argument, ``[0, low]``."""
        if high is None:
            low, high = 0, low
        if high < low:
            raise ValueError(f"empty range: {low} > {high}")
        return low + self._engine.bounded(high - low + 1)

    def uniform(self, low: float, high: float | None = None) -> float:
        """Return a single-precision float in ``[low, high]``; with one argument, ``[0, low]``."""
        if high is None:
            low, high = 0.0, low
        rand01 = self._engine.next_uint32() / UINT32_MAX
        return _to_float32(low + rand01 * (high - low))


_default = Generator()


def set_seed(seed: int) -> None:
    """Reseed the shared generator."""
    _default.set_seed(seed)


def randint(low: int, high: int | None = None) -> int:
    """Integer in ``[low, high]`` from the shared generator."""
    return _default.randint(low, high)


def uniform(low: float, high: float | None = None) -> float:
    """Float in ``[low, high]`` from the shared generator."""
    return _default.uniform(low, high)