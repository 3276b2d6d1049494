"""Spatial hash grid for neighbour lookup among boids.

Space is cut into square cells of ``cell_size``.  When the interaction
radius is no larger than ``cell_size``, every neighbour of an entity sits
in its own cell or one of the 8 around it, so a query touches 9 buckets
instead of scanning the whole population.

The grid is rebuilt from scratch every tick; positions change every
tick anyway and rebuilding is O(n).
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable
from typing import Protocol, TypeVar

from emergence.geometry.vector import Vector2D

logger = logging.getLogger(__name__)


class Positioned(Protocol):
    """Anything with a world position."""

    pos: Vector2D


E = TypeVar("E", bound=Positioned)

CellKey = tuple[int, int]
SpatialGrid = dict[CellKey, list[E]]


def cell_key(pos: Vector2D, cell_size: float) -> CellKey:
    """Return the integer cell coordinates containing ``pos``.

    Floor division, so negative positions map to negative cells and
    ``(1, -2)`` never collides with ``(-1, 2)``.
    """
    return math.floor(pos.x / cell_size), math.floor(pos.y / cell_size)


def build_spatial_hash(entities: Iterable[E], cell_size: float) -> SpatialGrid[E]:
    """Bucket entities by the cell their position falls in.

    Entities are stored by reference; buckets keep insertion order.

    Args:
        entities: Current population snapshot.
        cell_size: Cell side length, normally the perception radius.

    Returns:
        Mapping from cell key to the entities in that cell.

    Raises:
        ValueError: If ``cell_size`` is not positive.
    """
    if cell_size <= 0:
        msg = f"cell_size must be positive, got {cell_size}"
        raise ValueError(msg)

    grid: SpatialGrid[E] = {}
    for entity in entities:
        grid.setdefault(cell_key(entity.pos, cell_size), []).append(entity)

    logger.debug("spatial hash built: %d cells", len(grid))
    return grid


def get_neighbours(entity: E, grid: SpatialGrid[E], cell_size: float) -> list[E]:
    """Collect candidates from the 3x3 block of cells around ``entity``.

    The result includes ``entity`` itself when it is in the grid, and may
    include entities farther than ``cell_size`` away; callers still apply
    an exact distance test.

    Args:
        entity: The entity to find neighbours for.
        grid: Grid built by ``build_spatial_hash``.
        cell_size: Same cell size the grid was built with.

    Returns:
        Potential neighbours, bucket by bucket.
    """
    cx, cy = cell_key(entity.pos, cell_size)
    neighbours: list[E] = []
    for dx in (-1, 0, 1):
        for dy in (-1, 0, 1):
            bucket = grid.get((cx + dx, cy + dy))
            if bucket:
                neighbours.extend(bucket)
    return neighbours


def cell_count(grid: SpatialGrid[E]) -> int:
    """Number of non-empty cells."""
    return len(grid)


def all_entities(grid: SpatialGrid[E]) -> list[E]:
    """Flatten the grid back into one list, in bucket order."""
    return [entity for bucket in grid.values() for entity in bucket]
