"""Boid steering behaviours (Reynolds' flocking rules).

1. Separation: steer away from crowding neighbours.
2. Alignment: steer toward the neighbours' average heading.
3. Cohesion: steer toward the neighbours' centre of mass.

Every rule follows the classic steering transform
``limit(set_magnitude(desired, max_speed) - velocity, max_force)``.
Neighbour lists normally come from ``spatial_hash.get_neighbours`` and
may include the boid itself; distance-0 entries are skipped.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from emergence.geometry.vector import (
    ZERO,
    Vector2D,
    add,
    distance,
    divide,
    limit,
    multiply,
    normalize,
    set_magnitude,
    subtract,
)


@dataclass(eq=False)
class Boid:
    """A single flocking agent.

    Compared by identity: two boids at the same spot are still two boids.

    Attributes:
        pos: Position in world units.
        vel: Velocity per tick.
        acc: Accumulated steering force for the current tick.
        max_speed: Speed cap used when shaping desired velocities.
        max_force: Cap on any single steering force.
    """

    pos: Vector2D = field(default_factory=Vector2D)
    vel: Vector2D = field(default_factory=Vector2D)
    acc: Vector2D = field(default_factory=Vector2D)
    max_speed: float = 4.0
    max_force: float = 0.15


@dataclass
class FlockingParams:
    """Rule weights and radii for ``flock``.

    Attributes:
        separation: Weight of the separation force.
        alignment: Weight of the alignment force.
        cohesion: Weight of the cohesion force.
        perception: Radius for alignment and cohesion.
        desired_separation: Radius inside which neighbours repel.
    """

    separation: float = 1.5
    alignment: float = 1.0
    cohesion: float = 1.0
    perception: float = 100.0
    desired_separation: float = 25.0


def _steer_toward(boid: Boid, desired: Vector2D) -> Vector2D:
    desired = set_magnitude(desired, boid.max_speed)
    return limit(subtract(desired, boid.vel), boid.max_force)


def separate(boid: Boid, neighbours: Iterable[Boid], desired_separation: float) -> Vector2D:
    """Repulsion from neighbours closer than ``desired_separation``.

    Each away-vector is weighted by inverse distance, so closer
    neighbours push harder.

    Args:
        boid: The boid being steered.
        neighbours: Candidate neighbours.
        desired_separation: Minimum comfortable distance.

    Returns:
        Separation steering force, or zero if nobody is too close.
    """
    steer = ZERO
    count = 0
    for other in neighbours:
        d = distance(boid.pos, other.pos)
        if 0 < d < desired_separation:
            away = divide(normalize(subtract(boid.pos, other.pos)), d)
            steer = add(steer, away)
            count += 1

    if count == 0:
        return steer
    return _steer_toward(boid, divide(steer, count))


def align(boid: Boid, neighbours: Iterable[Boid], perception: float) -> Vector2D:
    """Steer toward the average velocity of neighbours within ``perception``."""
    total = ZERO
    count = 0
    for other in neighbours:
        d = distance(boid.pos, other.pos)
        if 0 < d < perception:
            total = add(total, other.vel)
            count += 1

    if count == 0:
        return ZERO
    return _steer_toward(boid, divide(total, count))


def cohere(boid: Boid, neighbours: Iterable[Boid], perception: float) -> Vector2D:
    """Seek the centre of mass of neighbours within ``perception``."""
    total = ZERO
    count = 0
    for other in neighbours:
        d = distance(boid.pos, other.pos)
        if 0 < d < perception:
            total = add(total, other.pos)
            count += 1

    if count == 0:
        return ZERO
    return seek(boid, divide(total, count))


def seek(boid: Boid, target: Vector2D) -> Vector2D:
    """Steering force toward ``target`` at full speed."""
    return _steer_toward(boid, subtract(target, boid.pos))


def flee(boid: Boid, target: Vector2D) -> Vector2D:
    """Steering force directly away from ``target``."""
    return multiply(seek(boid, target), -1.0)


def flock(boid: Boid, neighbours: Iterable[Boid], params: FlockingParams) -> Vector2D:
    """Weighted sum of separation, alignment and cohesion.

    Args:
        boid: The boid being steered.
        neighbours: Candidate neighbours; iterated once per rule.
        params: Rule weights and radii.

    Returns:
        Combined steering force.
    """
    neighbours = list(neighbours)
    sep = separate(boid, neighbours, params.desired_separation)
    ali = align(boid, neighbours, params.perception)
    coh = cohere(boid, neighbours, params.perception)

    force = add(multiply(sep, params.separation), multiply(ali, params.alignment))
    return add(force, multiply(coh, params.cohesion))
