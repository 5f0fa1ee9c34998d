"""
StageCraft Fuel Calibration
=============================
Final assembly step for freight rockets: sets each stage's fuel level in
proportion to the share of the payload that stage carries.

The Formula:
    For every allocated band k with interval (lower_k, upper_k]:

        fuel_k = fill_k / (upper_k - lower_k) * 100

    where fill_k is the band's slice of the payload (see bands.py). So
    with bands (0, 1000] and (1000, 2000]:

        weight 800   → [80]
        weight 1000  → [100]          (exactly at capacity: one stage)
        weight 1500  → [100, 50]
        weight 2500  → [100, 150]     (top band over capacity)

    Every engine in a stage receives the same level.

Overflow:
    A payload heavier than the top band's capacity drives the top stage's
    level above 100. That value is kept as-is unless clamping is switched
    on, because the caller may want to see how far over the rating the
    payload is. A warning is logged either way.

Usage:
    >>> calibrator = FuelCalibrator(BandTable.from_config(config.freight))
    >>> calibrator.calibrate(rocket)
    # rocket's engines now carry their fuel levels
"""

from __future__ import annotations

import logging

import numpy as np

from stagecraft.assembly.bands import BandTable
from stagecraft.errors import AssemblyError
from stagecraft.model.parts import Rocket

logger = logging.getLogger(__name__)

FULL_TANK = 100.0


def allocate_fractions(
    weight: float,
    table: BandTable,
    clamp_overflow: bool = False,
) -> list[float]:
    """
    Compute the fuel level (0-100 %) of each allocated band.

    Parameters
    ----------
    weight : float
        Payload weight (>= 0).
    table : BandTable
        Capacity bands of the rocket.
    clamp_overflow : bool
        Cap levels at 100 instead of reporting overflow.

    Returns
    -------
    list[float]
        One level per allocated band, bottom band first.
    """
    fill = table.fill_amounts(weight)
    fractions = fill / table.widths[: len(fill)] * FULL_TANK

    if clamp_overflow:
        fractions = np.minimum(fractions, FULL_TANK)

    return [float(f) for f in fractions]


class FuelCalibrator:
    """
    Applies proportional fuel levels to a staged freight rocket.

    Parameters
    ----------
    table : BandTable
        Capacity bands the rocket's stages were built from.
    clamp_overflow : bool
        Cap the top stage at 100 for over-capacity payloads.
    """

    def __init__(self, table: BandTable, clamp_overflow: bool = False):
        self.table = table
        self.clamp_overflow = clamp_overflow

    def calibrate(self, rocket: Rocket) -> dict:
        """
        Refuel every stage of `rocket` to its proportional level.

        Parameters
        ----------
        rocket : Rocket
            A rocket whose payload and stages are already attached.

        Returns
        -------
        dict
            Calibration results:
            - n_stages_calibrated: number of stages refuelled
            - fuel_levels: level applied to each stage
            - overflow: whether the top stage carries more than its band's
              width (level above 100 before clamping)

        Raises
        ------
        AssemblyError
            If the rocket's stages do not match the bands its payload needs.
        """
        if rocket.payload is None:
            raise AssemblyError("Cannot calibrate a rocket without a payload")

        weight = rocket.payload.weight
        levels = allocate_fractions(
            weight, self.table, clamp_overflow=self.clamp_overflow
        )

        if len(levels) != len(rocket.stages):
            raise AssemblyError(
                f"Payload weight {float(weight):g} needs {len(levels)} stages, "
                f"but the rocket has {len(rocket.stages)}"
            )

        overflow = self.table.overflows(weight)
        if overflow:
            logger.warning(
                f"Payload weight {float(weight):g} exceeds the top band capacity "
                f"{self.table.ceiling:g}; "
                + ("clamping fuel level to 100" if self.clamp_overflow
                   else f"top stage fuel level is {levels[-1]:.1f}")
            )

        for stage, level in zip(rocket.stages, levels):
            stage.refuel(level)
            logger.debug(f"  Stage '{stage.name}': fuel level {level:.1f}")

        return {
            "n_stages_calibrated": len(levels),
            "fuel_levels": levels,
            "overflow": overflow,
        }
