"""Vector2D — immutable 2D vector and the arithmetic steering code needs.

Kept as plain functions over a frozen dataclass so that boids, ants and
sensors can share one representation without any of them owning it.
"""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Vector2D:
    """A point or direction in world space.

    Attributes:
        x: Horizontal component.
        y: Vertical component (grows downward, canvas convention).
    """

    x: float = 0.0
    y: float = 0.0


ZERO = Vector2D(0.0, 0.0)


def distance(a: Vector2D, b: Vector2D) -> float:
    """Euclidean distance between two points."""
    dx = a.x - b.x
    dy = a.y - b.y
    return math.sqrt(dx * dx + dy * dy)


def magnitude(v: Vector2D) -> float:
    """Length of a vector."""
    return math.sqrt(v.x * v.x + v.y * v.y)


def normalize(v: Vector2D) -> Vector2D:
    """Scale ``v`` to unit length; the zero vector stays zero."""
    m = magnitude(v)
    if m == 0:
        return ZERO
    return Vector2D(v.x / m, v.y / m)


def set_magnitude(v: Vector2D, mag: float) -> Vector2D:
    """Return ``v`` rescaled to length ``mag``."""
    n = normalize(v)
    return Vector2D(n.x * mag, n.y * mag)


def limit(v: Vector2D, max_mag: float) -> Vector2D:
    """Cap the length of ``v`` at ``max_mag``."""
    if magnitude(v) > max_mag:
        return set_magnitude(v, max_mag)
    return v


def add(a: Vector2D, b: Vector2D) -> Vector2D:
    return Vector2D(a.x + b.x, a.y + b.y)


def subtract(a: Vector2D, b: Vector2D) -> Vector2D:
    return Vector2D(a.x - b.x, a.y - b.y)


def divide(v: Vector2D, n: float) -> Vector2D:
    """Divide by a scalar; dividing by zero yields the zero vector."""
    if n == 0:
        return ZERO
    return Vector2D(v.x / n, v.y / n)


def multiply(v: Vector2D, n: float) -> Vector2D:
    return Vector2D(v.x * n, v.y * n)


def heading(v: Vector2D) -> float:
    """Angle of ``v`` in radians (0 = east, pi/2 = south)."""
    return math.atan2(v.y, v.x)


def from_angle(angle: float) -> Vector2D:
    """Unit vector pointing along ``angle`` radians."""
    return Vector2D(math.cos(angle), math.sin(angle))
