"""Ant sensing — three-sensor pheromone navigation.

An ant probes the field at three points in front of it (ahead, left,
right) and turns toward the strongest reading.  Helpers for homing,
food attraction and wander blending round out the steering inputs a
host loop needs; none of them move the ant.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from emergence.geometry.vector import (
    ZERO,
    Vector2D,
    from_angle,
    heading,
    multiply,
    normalize,
    subtract,
)
from emergence.pheromones.field import world_to_grid

if TYPE_CHECKING:
    from emergence.pheromones.field import PheromoneLayer


@dataclass
class SensingParams:
    """Sensor geometry for pheromone-following agents.

    Attributes:
        sensor_angle: Offset of the left/right sensors from the heading,
            in radians.
        sensor_distance: Distance from the ant to each sensor, in world
            units.
        exploration_bias: Weight given to random wander when blending
            with the pheromone direction (0-1).
    """

    sensor_angle: float = math.pi / 4
    sensor_distance: float = 15.0
    exploration_bias: float = 0.2


@dataclass(frozen=True)
class SensorPositions:
    """World positions of the three sensors."""

    ahead: Vector2D
    left: Vector2D
    right: Vector2D


@dataclass(frozen=True)
class SensingResult:
    """Outcome of one sensing pass.

    Attributes:
        direction: Unit vector the ant should move along.
        pheromone_level: Strongest of the three sensor readings.
    """

    direction: Vector2D
    pheromone_level: float


def sensor_positions(
    pos: Vector2D,
    vel: Vector2D,
    sensor_distance: float,
    sensor_angle: float,
) -> SensorPositions:
    """Place the three sensors relative to an ant.

    Args:
        pos: Ant position.
        vel: Ant velocity; only its heading matters.
        sensor_distance: Distance to each sensor.
        sensor_angle: Left sensor sits at ``heading - angle``, right at
            ``heading + angle``.

    Returns:
        The ahead/left/right sensor positions.
    """
    h = heading(vel)

    def _probe(angle: float) -> Vector2D:
        return Vector2D(
            pos.x + math.cos(angle) * sensor_distance,
            pos.y + math.sin(angle) * sensor_distance,
        )

    return SensorPositions(
        ahead=_probe(h),
        left=_probe(h - sensor_angle),
        right=_probe(h + sensor_angle),
    )


def choose_sensor_direction(
    centre_sense: float,
    left_sense: float,
    right_sense: float,
    current_heading: float,
    sensor_angle: float,
) -> Vector2D:
    """Turn toward the sensor with the strictly highest reading.

    Ties, or a centre reading at least as strong as both sides, keep the
    ant on its current heading.

    Returns:
        Unit vector along the chosen heading.
    """
    if left_sense > centre_sense and left_sense > right_sense:
        chosen = current_heading - sensor_angle
    elif right_sense > centre_sense and right_sense > left_sense:
        chosen = current_heading + sensor_angle
    else:
        chosen = current_heading
    return normalize(from_angle(chosen))


def direction_to_target(pos: Vector2D, target: Vector2D) -> Vector2D:
    """Unit vector from ``pos`` toward ``target`` (zero if they coincide)."""
    return normalize(subtract(target, pos))


def food_attraction(
    pos: Vector2D,
    food_pos: Vector2D,
    distance: float,
    max_distance: float,
    food_amount: float,
) -> Vector2D:
    """Pull toward a food source, fading linearly with distance.

    Args:
        pos: Ant position.
        food_pos: Food source position.
        distance: Precomputed distance between the two.
        max_distance: Range beyond which there is no pull.
        food_amount: Remaining food, normalised to 0-1.

    Returns:
        Attraction vector (not normalised); zero when out of range or
        already on top of the food.
    """
    if distance >= max_distance or distance == 0:
        return ZERO
    strength = ((max_distance - distance) / max_distance) * food_amount
    return multiply(direction_to_target(pos, food_pos), strength)


def blend_directions(
    pheromone_dir: Vector2D,
    wander_dir: Vector2D,
    exploration_bias: float,
) -> Vector2D:
    """Mix the pheromone direction with random wander.

    ``exploration_bias`` is clamped to ``[0, 1]``; 0 follows pheromone
    only, 1 wanders only.
    """
    t = max(0.0, min(1.0, exploration_bias))
    return normalize(
        Vector2D(
            pheromone_dir.x * (1 - t) + wander_dir.x * t,
            pheromone_dir.y * (1 - t) + wander_dir.y * t,
        ),
    )


def is_within_range(pos: Vector2D, target: Vector2D, range_: float) -> bool:
    """Return True if ``pos`` is strictly closer than ``range_`` to ``target``."""
    dx = pos.x - target.x
    dy = pos.y - target.y
    return dx * dx + dy * dy < range_ * range_


def sense(
    layer: PheromoneLayer,
    pos: Vector2D,
    vel: Vector2D,
    cell_size: float,
    params: SensingParams,
) -> SensingResult:
    """Sample a pheromone layer at the three sensors and pick a direction.

    Sensors that fall outside the grid read 0.

    Args:
        layer: Pheromone channel to follow.
        pos: Ant position in world units.
        vel: Ant velocity.
        cell_size: World units per grid cell.
        params: Sensor geometry.

    Returns:
        Chosen direction and the strongest sensor reading.
    """
    probes = sensor_positions(pos, vel, params.sensor_distance, params.sensor_angle)
    readings = []
    for probe in (probes.ahead, probes.left, probes.right):
        gx, gy = world_to_grid(probe.x, probe.y, cell_size)
        readings.append(layer.read(gx, gy))
    centre, left, right = readings

    direction = choose_sensor_direction(
        centre,
        left,
        right,
        heading(vel),
        params.sensor_angle,
    )
    return SensingResult(direction=direction, pheromone_level=max(readings))
