"""Cube hex coordinates, used to express rotation as a component permutation."""

from __future__ import annotations

from typing import NamedTuple


class Cube(NamedTuple):
    """Redundant hex coordinate with ``x + y + z == 0``."""

    x: int
    y: int
    z: int

    def __add__(self, other: tuple[int, int, int]) -> Cube:  # type: ignore[override]
        return Cube(self.x + other[0], self.y + other[1], self.z + other[2])

    def __sub__(self, other: tuple[int, int, int]) -> Cube:
        return Cube(self.x - other[0], self.y - other[1], self.z - other[2])

    def rotate(self, pivot: Cube) -> Cube:
        """Rotate 60 degrees about *pivot*: ``(x, y, z) -> (-y, -z, -x)``."""
        d = self - pivot
        return pivot + Cube(-d.y, -d.z, -d.x)

    def rotate_many(self, pivot: Cube, steps: int) -> Cube:
        d = self - pivot
        for _ in range(steps):
            d = Cube(-d.y, -d.z, -d.x)
        return d + pivot
