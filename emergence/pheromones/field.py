"""PheromoneField — scalar concentration grids for stigmergic agents.

A field is a flat, row-major NumPy array of length ``cols * rows`` with
cell ``(x, y)`` stored at index ``x + y * cols``.  The free functions here
cover creation, deposit, read and aggregation; diffusion/evaporation live
in ``diffusion.py``.

``PheromoneLayer`` and ``PheromoneField`` bundle a grid with its
dimensions and rates for callers that prefer an object per channel.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum, auto

import numpy as np
from numpy.typing import NDArray


def create_field(cols: int, rows: int) -> NDArray[np.float64]:
    """Return a zero-filled field of ``cols * rows`` cells."""
    return np.zeros(cols * rows, dtype=np.float64)


def deposit(
    grid: NDArray[np.float64],
    cols: int,
    rows: int,
    x: int,
    y: int,
    amount: float,
    max_level: float,
) -> bool:
    """Add pheromone at ``(x, y)``, saturating at ``max_level``.

    This is the only in-place write in the package: a single cell, with
    no neighbour reads.

    Args:
        grid: Field to modify.
        cols: Grid columns.
        rows: Grid rows.
        x: Column index.
        y: Row index.
        amount: Quantity to add.
        max_level: Upper clamp for the cell value.

    Returns:
        True if the cell was in bounds and updated, False otherwise (the
        field is left untouched).
    """
    if not (0 <= x < cols and 0 <= y < rows):
        return False
    idx = x + y * cols
    grid[idx] = min(grid[idx] + amount, max_level)
    return True


def read_at(grid: NDArray[np.float64], cols: int, rows: int, x: int, y: int) -> float:
    """Return the concentration at ``(x, y)``, or 0.0 when out of bounds."""
    if not (0 <= x < cols and 0 <= y < rows):
        return 0.0
    return float(grid[x + y * cols])


def total(grid: NDArray[np.float64]) -> float:
    """Sum of all cells, used for mass-conservation checks."""
    return float(np.sum(grid))


def world_to_grid(world_x: float, world_y: float, cell_size: float) -> tuple[int, int]:
    """Convert a world position to grid coordinates.

    No bounds checking; ``read_at`` and ``deposit`` do their own.

    Args:
        world_x: World x position.
        world_y: World y position.
        cell_size: Side length of a grid cell in world units.

    Returns:
        ``(gx, gy)`` as floored integers.
    """
    return math.floor(world_x / cell_size), math.floor(world_y / cell_size)


class PheromoneType(Enum):
    """Distinct pheromone channels, each with its own layer."""

    TO_FOOD = auto()
    TO_HOME = auto()


@dataclass
class PheromoneParams:
    """Tunable rates for one pheromone channel.

    Attributes:
        diffusion_rate: Fraction of a cell that mixes with its 8
            neighbours per tick (0-1).
        evaporation_rate: Decay multiplier per tick (1 = no decay).
        max_level: Saturation level for deposits.
        strength: Default amount an agent deposits per event.
    """

    diffusion_rate: float = 0.15
    evaporation_rate: float = 0.995
    max_level: float = 255.0
    strength: float = 10.0


@dataclass
class PheromoneLayer:
    """A single pheromone channel with its own grid and rates.

    Attributes:
        ptype: Which pheromone this layer represents.
        cols: Grid columns.
        rows: Grid rows.
        params: Diffusion/evaporation/deposit tunables.
        grid: Flat row-major concentration values (>= 0).  Replaced,
            not mutated, by ``step``.
    """

    ptype: PheromoneType
    cols: int
    rows: int
    params: PheromoneParams = field(default_factory=PheromoneParams)
    grid: NDArray[np.float64] = field(default=None, repr=False)  # type: ignore[assignment]

    def __post_init__(self) -> None:
        """Allocate a zeroed grid if none was given and check its shape.

        A given grid is converted to float64 and may be flat or shaped
        ``(rows, cols)``; it is stored flat.

        Raises:
            ValueError: If the dimensions are not positive or the grid
                does not hold ``cols * rows`` cells in a supported shape.
        """
        if self.cols < 1 or self.rows < 1:
            msg = f"layer dimensions must be positive, got {self.cols}x{self.rows}"
            raise ValueError(msg)
        if self.grid is None:
            self.grid = create_field(self.cols, self.rows)
            return

        grid = np.asarray(self.grid, dtype=np.float64)
        if grid.ndim == 2 and grid.shape == (self.rows, self.cols):
            grid = grid.reshape(-1)
        elif grid.ndim != 1:
            msg = f"grid must be flat or shaped ({self.rows}, {self.cols}), got {grid.shape}"
            raise ValueError(msg)
        self.grid = grid
        if self.grid.size != self.cols * self.rows:
            msg = (
                f"grid has {self.grid.size} cells, "
                f"expected {self.cols}x{self.rows}={self.cols * self.rows}"
            )
            raise ValueError(msg)

    def deposit(self, x: int, y: int, amount: float | None = None) -> bool:
        """Deposit at ``(x, y)``; ``amount`` defaults to ``params.strength``."""
        if amount is None:
            amount = self.params.strength
        return deposit(self.grid, self.cols, self.rows, x, y, amount, self.params.max_level)

    def read(self, x: int, y: int) -> float:
        """Read the concentration at ``(x, y)`` (0.0 outside the grid)."""
        return read_at(self.grid, self.cols, self.rows, x, y)

    def total(self) -> float:
        """Total pheromone mass held by this layer."""
        return total(self.grid)

    def step(self) -> None:
        """Advance one tick and swap in the freshly computed buffer.

        Uses evaporation alone when diffusion is disabled for the layer.
        """
        from emergence.pheromones.diffusion import diffuse_and_evaporate, evaporate_only

        if self.params.diffusion_rate <= 0:
            nxt = evaporate_only(self.grid, self.params.evaporation_rate)
        else:
            nxt = diffuse_and_evaporate(
                self.grid,
                self.cols,
                self.rows,
                self.params.diffusion_rate,
                self.params.evaporation_rate,
            )
        self.grid = nxt


@dataclass
class PheromoneField:
    """All pheromone layers for one world.

    Attributes:
        cols: Grid columns shared by every layer.
        rows: Grid rows shared by every layer.
        params: Per-type rates; types missing here get defaults.
        layers: Mapping from PheromoneType to its layer.
    """

    cols: int
    rows: int
    params: dict[PheromoneType, PheromoneParams] = field(default_factory=dict)
    layers: dict[PheromoneType, PheromoneLayer] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Create one zeroed layer per pheromone type."""
        self.layers = {}
        for ptype in PheromoneType:
            self.layers[ptype] = PheromoneLayer(
                ptype=ptype,
                cols=self.cols,
                rows=self.rows,
                params=self.params.get(ptype, PheromoneParams()),
            )

    def layer(self, ptype: PheromoneType) -> PheromoneLayer:
        """Return the layer for ``ptype``."""
        return self.layers[ptype]

    def deposit(
        self,
        ptype: PheromoneType,
        x: int,
        y: int,
        amount: float | None = None,
    ) -> bool:
        """Deposit on one channel at grid coordinates ``(x, y)``."""
        return self.layers[ptype].deposit(x, y, amount)

    def read(self, ptype: PheromoneType, x: int, y: int) -> float:
        """Read one channel at grid coordinates ``(x, y)``."""
        return self.layers[ptype].read(x, y)

    def deposit_at_world(
        self,
        ptype: PheromoneType,
        world_x: float,
        world_y: float,
        cell_size: float,
        amount: float | None = None,
    ) -> bool:
        """Deposit at a world position, mapped to its grid cell."""
        gx, gy = world_to_grid(world_x, world_y, cell_size)
        return self.deposit(ptype, gx, gy, amount)

    def read_at_world(
        self,
        ptype: PheromoneType,
        world_x: float,
        world_y: float,
        cell_size: float,
    ) -> float:
        """Read at a world position, mapped to its grid cell."""
        gx, gy = world_to_grid(world_x, world_y, cell_size)
        return self.read(ptype, gx, gy)
