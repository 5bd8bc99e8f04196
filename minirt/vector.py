"""Three-component vectors and rays."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Union

Scalar = Union[int, float]


@dataclass(frozen=True)
class Vec:
    """An immutable 3D vector; also used for points and RGB colours."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def _components(self, other: object) -> tuple[float, float, float] | None:
        if isinstance(other, Vec):
            return other.x, other.y, other.z
        if isinstance(other, (int, float)) and not isinstance(other, bool):
            return other, other, other
        return None

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Vec | Scalar) -> Vec:
        parts = self._components(other)
        if parts is None:
            return NotImplemented
        ox, oy, oz = parts
        return Vec(self.x + ox, self.y + oy, self.z + oz)

    __radd__ = __add__

    def __sub__(self, other: Vec | Scalar) -> Vec:
        parts = self._components(other)
        if parts is None:
            return NotImplemented
        ox, oy, oz = parts
        return Vec(self.x - ox, self.y - oy, self.z - oz)

    def __mul__(self, other: Vec | Scalar) -> Vec:
        parts = self._components(other)
        if parts is None:
            return NotImplemented
        ox, oy, oz = parts
        return Vec(self.x * ox, self.y * oy, self.z * oz)

    __rmul__ = __mul__

    def __truediv__(self, other: Vec | Scalar) -> Vec:
        parts = self._components(other)
        if parts is None:
            return NotImplemented
        ox, oy, oz = parts
        return Vec(self.x / ox, self.y / oy, self.z / oz)

    def __neg__(self) -> Vec:
        return Vec(-self.x, -self.y, -self.z)

    def dot(self, other: Vec) -> float:
        """Scalar product with another vector."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def unit(self) -> Vec:
        """The vector scaled to length one."""
        return self / self.length()


Point = Vec
Colour = Vec


@dataclass(frozen=True)
class Ray:
    """A half-line starting at ``origin`` and running along ``direction``."""

    origin: Vec
    direction: Vec

    def at(self, t: float) -> Vec:
        """The point reached after travelling ``t`` times the direction."""
        return self.origin + self.direction * t