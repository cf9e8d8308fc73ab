"""Axial hex coordinates.

A cell is ``(q, r)``. Components are signed 32-bit integers and arithmetic
wraps at that width, so every operation here is total.
"""

from __future__ import annotations

from typing import NamedTuple

from ubongo_solver.engine.cube import Cube

_MASK = 0xFFFFFFFF
I32_MIN = -(2**31)
I32_MAX = 2**31 - 1


def wrap_i32(value: int) -> int:
    """Wrap an integer into the signed 32-bit range."""
    return ((value - I32_MIN) & _MASK) + I32_MIN


class Axial(NamedTuple):
    q: int
    r: int

    @classmethod
    def splat(cls, value: int) -> Axial:
        return cls(value, value)

    @classmethod
    def from_cube(cls, cube: Cube) -> Axial:
        return cls(wrap_i32(cube.x), wrap_i32(cube.z))

    def to_cube(self) -> Cube:
        return Cube(self.q, -self.q - self.r, self.r)

    def __add__(self, other: tuple[int, int]) -> Axial:  # type: ignore[override]
        return Axial(wrap_i32(self.q + other[0]), wrap_i32(self.r + other[1]))

    def __sub__(self, other: tuple[int, int]) -> Axial:
        return Axial(wrap_i32(self.q - other[0]), wrap_i32(self.r - other[1]))

    def flip(self) -> Axial:
        """Reflect across the q axis: ``(q, r) -> (q + r, -r)``."""
        return Axial(wrap_i32(self.q + self.r), wrap_i32(-self.r))

    def rotate(self, pivot: Axial) -> Axial:
        """Rotate 60 degrees about *pivot*."""
        return Axial.from_cube(self.to_cube().rotate(pivot.to_cube()))

    def rotate_many(self, pivot: Axial, steps: int) -> Axial:
        return Axial.from_cube(self.to_cube().rotate_many(pivot.to_cube(), steps))

    def min(self, other: Axial) -> Axial:
        return Axial(min(self.q, other.q), min(self.r, other.r))

    def max(self, other: Axial) -> Axial:
        return Axial(max(self.q, other.q), max(self.r, other.r))

    def key(self) -> int:
        """Pack into an unsigned 64-bit integer.

        ``r`` lands in the high word and ``q`` in the low word, each as its
        two's-complement bit pattern. Sorting by this key orders cells by
        unsigned ``r`` then unsigned ``q``. Both components must fit in a
        signed 32-bit integer; outside that range the packing is undefined.
        """
        return ((self.r & _MASK) << 32) | (self.q & _MASK)

    @classmethod
    def from_key(cls, key: int) -> Axial:
        return cls(wrap_i32(key & _MASK), wrap_i32((key >> 32) & _MASK))


AXIAL_ZERO = Axial(0, 0)
AXIAL_MIN = Axial.splat(I32_MIN)
AXIAL_MAX = Axial.splat(I32_MAX)


class AxialAabb(NamedTuple):
    """Axis-aligned bounding box in axial space."""

    min: Axial
    max: Axial

    def size(self) -> Axial:
        return self.max - self.min
