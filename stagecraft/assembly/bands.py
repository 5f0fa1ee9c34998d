"""
StageCraft Capacity Bands
==========================
Decides how many stages a freight rocket gets and how the payload weight
is shared out between them.

The Rule:
    Bands are contiguous payload intervals:

        band 1: (0,      cap_1]
        band 2: (cap_1,  cap_2]
        ...
        band N: (cap_N-1, cap_N]

    Band 1 is always built. Band k (k >= 2) is built only when the payload
    is strictly heavier than cap_k-1. A payload of exactly cap_1 therefore
    gets a single stage.

    Analogy: Pouring water into a row of buckets. The first bucket is
    always on the table; the next bucket only comes out once the water
    overflows the previous one.

Fill Amounts:
    Each built band carries the slice of the payload that falls into its
    interval. Slices never overlap and leave no gaps, so they always sum
    to the payload weight. The top band (when N >= 2) takes everything
    above cap_N-1 even if that exceeds its own width.

Usage:
    >>> table = BandTable.from_config(FreightConfig())
    >>> [band.name for band in table.allocated(1500.0)]
    ['first_stage', 'second_stage']
    >>> table.fill_amounts(1500.0)
    array([1000.,  500.])
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np

from stagecraft.config import BandConfig, FreightConfig
from stagecraft.model.parts import LiquidRocketEngine, Stage

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CapacityBand:
    """
    One resolved band: its interval plus the stage it produces.

    Parameters
    ----------
    name : str
        Name of the stage built for this band.
    lower : float
        Exclusive lower payload bound (0 for the first band).
    upper : float
        Inclusive upper payload bound (the band's capacity).
    unit_count : int
        Engines in the band's stage.
    unit_thrust : float or None
        Fixed thrust per engine, or None to size the stage from the payload.
    """
    name: str
    lower: float
    upper: float
    unit_count: int
    unit_thrust: Optional[float] = None

    @property
    def width(self) -> float:
        return self.upper - self.lower

    def build_stage(self, weight: float) -> Stage:
        """
        Build a fresh stage of liquid engines for this band.

        With no fixed unit thrust, the stage's combined thrust equals the
        payload weight, split evenly across its engines.
        """
        if self.unit_thrust is not None:
            thrust = self.unit_thrust
        else:
            thrust = weight / self.unit_count

        units = [LiquidRocketEngine(thrust) for _ in range(self.unit_count)]
        return Stage(name=self.name, units=units)


class BandTable:
    """
    Ordered, contiguous capacity bands of a freight rocket.

    Parameters
    ----------
    bands : list[BandConfig]
        Band definitions with strictly increasing capacities.
    """

    def __init__(self, bands: list[BandConfig]):
        if not bands:
            raise ValueError("BandTable needs at least one band")

        resolved: list[CapacityBand] = []
        lower = 0.0
        for band in bands:
            band.validate()
            if band.capacity <= lower:
                raise ValueError(
                    f"Band '{band.name}' capacity {band.capacity} must exceed "
                    f"the previous capacity {lower}"
                )
            resolved.append(
                CapacityBand(
                    name=band.name,
                    lower=lower,
                    upper=float(band.capacity),
                    unit_count=band.unit_count,
                    unit_thrust=band.unit_thrust,
                )
            )
            lower = float(band.capacity)

        self.bands: tuple[CapacityBand, ...] = tuple(resolved)

    @classmethod
    def from_config(cls, config: FreightConfig) -> BandTable:
        return cls(config.bands)

    def __len__(self) -> int:
        return len(self.bands)

    @property
    def capacities(self) -> np.ndarray:
        return np.array([band.upper for band in self.bands], dtype=float)

    @property
    def lowers(self) -> np.ndarray:
        return np.array([band.lower for band in self.bands], dtype=float)

    @property
    def widths(self) -> np.ndarray:
        return np.array([band.width for band in self.bands], dtype=float)

    @property
    def ceiling(self) -> float:
        """Capacity of the top band."""
        return self.bands[-1].upper

    def count_allocated(self, weight: float) -> int:
        """
        Number of stages a payload of `weight` needs.

        Band 1 always counts; every further band counts when the payload
        is strictly heavier than the band below it can carry.
        """
        return 1 + int(np.count_nonzero(self.capacities[:-1] < float(weight)))

    def allocated(self, weight: float) -> list[CapacityBand]:
        return list(self.bands[: self.count_allocated(weight)])

    def fill_amounts(self, weight: float) -> np.ndarray:
        """
        Slice of the payload weight carried by each allocated band.

        Parameters
        ----------
        weight : float
            Payload weight (>= 0).

        Returns
        -------
        np.ndarray
            One entry per allocated band. Entries sum to `weight`, except
            for a single-band table, whose only entry is capped at its
            capacity.
        """
        weight = float(weight)
        n = self.count_allocated(weight)
        fill = np.minimum(weight, self.capacities[:n]) - self.lowers[:n]

        if n == len(self) and n >= 2:
            # Top band takes everything above the band below it
            fill[-1] = weight - self.lowers[-1]

        return fill

    def overflows(self, weight: float) -> bool:
        """True when the top allocated band carries more than its width."""
        fill = self.fill_amounts(weight)
        return bool(fill[-1] > self.bands[len(fill) - 1].width)

    def build_stages(self, weight: float) -> list[Stage]:
        """Build one fresh stage per allocated band, bottom band first."""
        stages = [band.build_stage(weight) for band in self.allocated(weight)]
        logger.debug(
            f"Allocated {len(stages)}/{len(self)} bands for "
            f"payload weight {float(weight):g}"
        )
        return stages

    def __repr__(self) -> str:
        bands = ", ".join(
            f"{b.name}({b.lower:g}, {b.upper:g}]" for b in self.bands
        )
        return f"BandTable([{bands}])"
