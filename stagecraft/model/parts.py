"""
StageCraft Rocket Parts
========================
Payloads, propulsion units, stages, and the rocket that holds them.

Parts are created fresh by a builder for every assembly run and belong to
exactly one rocket. A Stage is never shared between two rockets.

Usage:
    >>> stage = Stage("first_stage", [LiquidRocketEngine(250.0) for _ in range(4)])
    >>> stage.refuel(80.0)
    >>> stage.fuel_levels
    [80.0, 80.0, 80.0, 80.0]
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Union


# =============================================================================
# Payloads
# =============================================================================

@dataclass(frozen=True)
class Payload:
    """Cargo carried by a rocket. Its weight drives every staging decision."""
    weight: float


@dataclass(frozen=True)
class Satellite(Payload):
    """A satellite headed for orbit on a freight rocket."""
    id: Union[int, str] = 0


@dataclass(frozen=True)
class Probe(Payload):
    """A science probe for a sounding rocket."""
    weight: float = 0.0


# =============================================================================
# Propulsion Units
# =============================================================================

@dataclass
class PropulsionUnit:
    """A single engine. `thrust` is fixed when the unit is built."""
    thrust: float


@dataclass
class SolidRocketEngine(PropulsionUnit):
    """Solid motor: once lit it burns out, so there is nothing to refuel."""


@dataclass
class LiquidRocketEngine(PropulsionUnit):
    """
    Liquid-fuelled engine with an adjustable fuel level.

    Parameters
    ----------
    thrust : float
        Engine thrust.
    fuel_level : float
        Fill level as a percentage of the tank. Starts empty.
    """
    fuel_level: float = 0.0

    def refuel(self, level: float) -> None:
        self.fuel_level = float(level)


# =============================================================================
# Stage
# =============================================================================

@dataclass
class Stage:
    """
    A named group of propulsion units fired together.

    Parameters
    ----------
    name : str
        Stage name, taken from the capacity band that produced it.
    units : list[PropulsionUnit]
        Engines in firing order.
    """
    name: str
    units: list[PropulsionUnit] = field(default_factory=list)

    @property
    def total_thrust(self) -> float:
        return sum(unit.thrust for unit in self.units)

    @property
    def fuel_levels(self) -> list[float]:
        """Fuel level of each liquid unit (empty for solid stages)."""
        return [
            unit.fuel_level
            for unit in self.units
            if isinstance(unit, LiquidRocketEngine)
        ]

    @property
    def refuelable(self) -> bool:
        return bool(self.units) and all(
            isinstance(unit, LiquidRocketEngine) for unit in self.units
        )

    def refuel(self, level: float = 100.0) -> None:
        """
        Set every unit in the stage to the same fuel level.

        Raises
        ------
        TypeError
            If the stage holds any unit that cannot be refuelled.
        """
        if not self.refuelable:
            raise TypeError(
                f"Stage '{self.name}' has units that cannot be refuelled"
            )
        for unit in self.units:
            unit.refuel(level)


# =============================================================================
# Rocket
# =============================================================================

@dataclass
class Rocket:
    """
    The assembled product.

    `stages` stays empty until a payload is attached, because the number
    and size of stages depend on the payload's weight.
    """
    variant: str = "rocket"
    payload: Optional[Payload] = None
    stages: list[Stage] = field(default_factory=list)

    @property
    def n_stages(self) -> int:
        return len(self.stages)
