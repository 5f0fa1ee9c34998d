"""
StageCraft Assembly Plans
==========================
Concrete rocket variants, each expressed as an AssemblyPlan.

Two Variants:

1. SOUNDING — "One and Done"
   A single stage with one solid motor whose thrust is the payload weight
   (times `thrust_scale`). Solid motors cannot be refuelled, so the plan
   has no calibration step.

2. FREIGHT — "Stack of Buckets"
   One stage per capacity band the payload reaches (see bands.py), built
   from liquid engines and fuelled in proportion to each band's share of
   the payload (see calibration.py).

Usage:
    >>> plan = freight_plan(config.freight)
    >>> rocket = assemble(StagedBuilder(plan), Satellite(id=1, weight=800))
"""

from __future__ import annotations

from stagecraft.assembly.bands import BandTable
from stagecraft.assembly.builder import AssemblyPlan
from stagecraft.assembly.calibration import FuelCalibrator
from stagecraft.config import FreightConfig, SoundingConfig
from stagecraft.errors import InvalidPayloadError
from stagecraft.model.parts import Payload, SolidRocketEngine, Stage


def sounding_plan(config: SoundingConfig) -> AssemblyPlan:
    """Single solid-motor stage sized from the payload."""
    config.validate()

    def make_stages(payload: Payload) -> list[Stage]:
        motor = SolidRocketEngine(payload.weight * config.thrust_scale)
        return [Stage(name="motor", units=[motor])]

    return AssemblyPlan(name="sounding", make_stages=make_stages)


def freight_plan(config: FreightConfig) -> AssemblyPlan:
    """
    Banded liquid-engine rocket with proportional fuel calibration.

    Parameters
    ----------
    config : FreightConfig
        Capacity bands and overflow handling.

    Returns
    -------
    AssemblyPlan
        Plan for the "freight" variant.
    """
    config.validate()
    table = BandTable.from_config(config)
    calibrator = FuelCalibrator(table, clamp_overflow=config.clamp_overflow)

    def check_payload(payload: Payload) -> None:
        if payload.weight > table.ceiling:
            raise InvalidPayloadError(
                f"Payload weight {float(payload.weight):g} exceeds the freight "
                f"ceiling {table.ceiling:g}"
            )

    def make_stages(payload: Payload) -> list[Stage]:
        return table.build_stages(payload.weight)

    return AssemblyPlan(
        name="freight",
        make_stages=make_stages,
        calibrate=calibrator.calibrate,
        check_payload=check_payload if config.enforce_ceiling else None,
    )
