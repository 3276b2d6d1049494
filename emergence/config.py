"""Config — load kernel defaults from YAML files.

Rates, radii and sensor geometry live in YAML and are parsed into the
typed parameter dataclasses the kernels take.  Nothing in the kernels
reads a global default; hosts load a ``KernelConfig`` once and pass its
parts into each call.
"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, TypeVar

import yaml

from emergence.flocking.steering import FlockingParams
from emergence.pheromones.field import PheromoneParams, PheromoneType
from emergence.pheromones.sensing import SensingParams

logger = logging.getLogger(__name__)

P = TypeVar("P")


def _params_from_mapping(cls: type[P], data: dict[str, Any] | None, section: str) -> P:
    """Build a parameter dataclass, ignoring (and logging) unknown keys."""
    data = data or {}
    known = {f.name for f in dataclasses.fields(cls)}  # type: ignore[arg-type]
    for key in data.keys() - known:
        logger.warning("ignoring unknown key %r in config section %r", key, section)
    return cls(**{k: v for k, v in data.items() if k in known})


@dataclass
class KernelConfig:
    """Top-level configuration for the simulation kernels.

    Attributes:
        cell_size: World units per pheromone grid cell.
        pheromones: Per-channel diffusion/evaporation/deposit rates.
        flocking: Boid rule weights and radii.
        sensing: Ant sensor geometry.
    """

    cell_size: float = 10.0
    pheromones: dict[PheromoneType, PheromoneParams] = field(
        default_factory=lambda: {ptype: PheromoneParams() for ptype in PheromoneType},
    )
    flocking: FlockingParams = field(default_factory=FlockingParams)
    sensing: SensingParams = field(default_factory=SensingParams)

    @classmethod
    def from_yaml(cls, path: str | Path) -> KernelConfig:
        """Load configuration from a YAML file.

        Missing sections and keys fall back to the dataclass defaults.

        Args:
            path: Path to the YAML config file.

        Returns:
            A populated KernelConfig instance.

        Raises:
            FileNotFoundError: If the config file does not exist.
        """
        path = Path(path)
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        logger.debug("loaded config from %s", path)

        name_map: dict[str, PheromoneType] = {pt.name.lower(): pt for pt in PheromoneType}
        pheromones = {ptype: PheromoneParams() for ptype in PheromoneType}
        for name, rates in (data.get("pheromones") or {}).items():
            ptype = name_map.get(name)
            if ptype is None:
                logger.warning("ignoring unknown pheromone type %r", name)
                continue
            pheromones[ptype] = _params_from_mapping(
                PheromoneParams,
                rates,
                f"pheromones.{name}",
            )

        return cls(
            cell_size=data.get("cell_size", cls.cell_size),
            pheromones=pheromones,
            flocking=_params_from_mapping(FlockingParams, data.get("flocking"), "flocking"),
            sensing=_params_from_mapping(SensingParams, data.get("sensing"), "sensing"),
        )

    def to_dict(self) -> dict[str, Any]:
        """Plain-data view, suitable for ``yaml.safe_dump``."""
        return {
            "cell_size": self.cell_size,
            "pheromones": {
                ptype.name.lower(): dataclasses.asdict(params)
                for ptype, params in self.pheromones.items()
            },
            "flocking": dataclasses.asdict(self.flocking),
            "sensing": dataclasses.asdict(self.sensing),
        }
