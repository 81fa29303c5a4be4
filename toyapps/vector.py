"""Two-dimensional vectors and small averaging helpers."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple, TypeVar

TAU = 2.0 * math.pi
FRAC_TAU_3 = 2.0 * (math.pi / 3.0)

T = TypeVar("T")


def smallest_angle_between(source: float, target: float) -> float:
    """Return the smaller signed angle from ``source`` to ``target``, in ``[-pi, pi)``."""
    d = target - source
    return (d + math.pi) % TAU - math.pi


@dataclass(frozen=True, slots=True)
class Vector2D:
    """An immutable 2D vector of floats."""

    x: float = 0.0
    y: float = 0.0

    @classmethod
    def from_polar(cls, angle: float, radius: float) -> Vector2D:
        return cls(radius * math.cos(angle), radius * math.sin(angle))

    def magnitude_squared(self) -> float:
        return self.x * self.x + self.y * self.y

    def magnitude(self) -> float:
        return math.sqrt(self.magnitude_squared())

    def clamp_magnitude(self, max_value: float) -> Vector2D:
        """Scale the vector down so that its length does not exceed ``max_value``."""
        mag = self.magnitude()
        if mag > max_value:
            return self / mag * max_value
        return self

    def angle(self) -> float:
        """Angle counter-clockwise from the positive x axis."""
        return math.atan2(self.y, self.x)

    def __neg__(self) -> Vector2D:
        return Vector2D(-self.x, -self.y)

    def __add__(self, other: Vector2D) -> Vector2D:
        if not isinstance(other, Vector2D):
            return NotImplemented
        return Vector2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2D) -> Vector2D:
        if not isinstance(other, Vector2D):
            return NotImplemented
        return Vector2D(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vector2D:
        if isinstance(scalar, Vector2D):
            return NotImplemented
        return Vector2D(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vector2D:
        if isinstance(scalar, Vector2D):
            return NotImplemented
        return Vector2D(self.x / scalar, self.y / scalar)


def _is_normal(value: float) -> bool:
    return math.isfinite(value) and abs(value) >= sys.float_info.min


def mean(values: Iterable[T]) -> Optional[T]:
    """Running mean of numbers or vectors; ``None`` when there are no values."""
    avg = None
    count = 0.0
    for value in values:
        count += 1.0
        avg = value if avg is None else avg + (value - avg) / count
    if avg is None or not _is_normal(count):
        return None
    return avg


def weighted_mean(pairs: Iterable[Tuple[T, float]]) -> Optional[T]:
    """Weighted mean of ``(value, weight)`` pairs; ``None`` unless the total weight is normal."""
    total = 0.0
    acc = None
    for value, weight in pairs:
        term = value * weight
        acc = term if acc is None else acc + term
        total += weight
    if acc is None or not _is_normal(total):
        return None
    return acc / total