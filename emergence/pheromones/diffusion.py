"""Diffusion and evaporation logic for pheromone fields.

Every function here reads an old field and returns a new one.  The
stencil must never see half-updated neighbours, so nothing is modified
in place; callers swap the returned array in for the next tick.
"""

from __future__ import annotations

import logging

import numpy as np
from numpy.typing import ArrayLike, NDArray

from emergence.pheromones.field import PheromoneField

logger = logging.getLogger(__name__)


def diffuse_and_evaporate(
    grid: ArrayLike,
    cols: int,
    rows: int,
    diffusion_rate: float,
    evaporation_rate: float,
) -> NDArray[np.float64]:
    """Diffuse pheromone to the 8 neighbours, then apply decay.

    Discrete approximation of the heat equation.  Each interior cell keeps
    ``1 - diffusion_rate`` of its value and receives ``diffusion_rate / 8``
    of each neighbour's.  Boundary cells (first/last row and column) only
    evaporate: edges are absorbing, with no wrap or reflection, so mass
    slowly leaks out through the perimeter.

    Rates are not clamped; callers pass values in ``[0, 1]``.

    Args:
        grid: Current field, flat row-major, ``cols * rows`` cells.
        cols: Number of columns.
        rows: Number of rows.
        diffusion_rate: Fraction of a cell that spreads per tick.
        evaporation_rate: Decay multiplier (1 = no decay).

    Returns:
        A new flat field of the same size.
    """
    src = np.asarray(grid, dtype=np.float64).reshape(rows, cols)

    # Boundary pass; interior cells are overwritten below
    nxt = src * evaporation_rate

    neighbour_sum = (
        src[:-2, :-2]  # top-left
        + src[:-2, 1:-1]  # up
        + src[:-2, 2:]  # top-right
        + src[1:-1, :-2]  # left
        + src[1:-1, 2:]  # right
        + src[2:, :-2]  # bottom-left
        + src[2:, 1:-1]  # down
        + src[2:, 2:]  # bottom-right
    )
    centre = src[1:-1, 1:-1]
    diffused = centre * (1.0 - diffusion_rate) + (neighbour_sum / 8.0) * diffusion_rate
    nxt[1:-1, 1:-1] = diffused * evaporation_rate

    return nxt.reshape(-1)


def evaporate_only(grid: ArrayLike, evaporation_rate: float) -> NDArray[np.float64]:
    """Apply uniform decay with no diffusion.

    Args:
        grid: Current field (any shape).
        evaporation_rate: Decay multiplier (1 = no decay).

    Returns:
        A new field, ``grid * evaporation_rate``.
    """
    return np.asarray(grid, dtype=np.float64) * evaporation_rate


def update_field(field: PheromoneField) -> None:
    """Run one tick of diffusion + evaporation on every layer.

    Layers with a non-positive diffusion rate only evaporate, so a trail
    laid by a moving agent fades in place instead of blurring out.

    Args:
        field: The complete pheromone field to update.
    """
    for layer in field.layers.values():
        layer.step()
        logger.debug("%s total after step: %.4f", layer.ptype.name, layer.total())
