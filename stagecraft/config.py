"""
StageCraft Configuration System
=================================
Centralized configuration for all StageCraft components using Python
dataclasses. Every capacity band, calibration switch, and demo setting
lives here.

Think of this as the "launch manifest" for an assembly run. Change a
band capacity here and every freight rocket built from this config
follows it. Configuration is always passed explicitly; nothing is read
from the environment and there is no process-wide instance.

Usage:
    # Load from YAML file:
    >>> config = StageCraftConfig.from_yaml("configs/default.yaml")

    # Create programmatically:
    >>> config = StageCraftConfig(
    ...     freight=FreightConfig(clamp_overflow=True),
    ... )

    # Save to YAML:
    >>> config.to_yaml("configs/my_manifest.yaml")

    # Access nested values:
    >>> config.freight.bands[0].capacity   # 1000.0
    >>> config.sounding.thrust_scale       # 1.0
"""

from __future__ import annotations

import math
import logging
from dataclasses import dataclass, field, asdict
from typing import Optional
from pathlib import Path

import yaml

logger = logging.getLogger(__name__)


# =============================================================================
# Capacity Band Configuration
# =============================================================================

@dataclass
class BandConfig:
    """
    One capacity band of a banded (freight) rocket.

    A band covers the payload interval (previous capacity, capacity] and
    owns exactly one stage. The first band starts at zero.

    Parameters
    ----------
    name : str
        Stage name given to the band's stage (e.g. "first_stage").

    capacity : float
        Upper payload bound of the band, in the same unit as
        Payload.weight. Bands must be listed with strictly increasing
        capacities.

    unit_count : int
        Number of propulsion units (engines) in the band's stage.

    unit_thrust : float or None
        Thrust of every unit in the stage. None means "sized from the
        payload": the stage's total thrust equals the payload weight,
        split evenly across its units.
    """
    name: str
    capacity: float
    unit_count: int = 1
    unit_thrust: Optional[float] = None

    def validate(self) -> None:
        """
        Check that the band definition is usable.

        Raises
        ------
        ValueError
            If any field is out of range.
        """
        if not self.name or not self.name.strip():
            raise ValueError("Band name must be a non-empty string")
        if not math.isfinite(self.capacity) or self.capacity <= 0:
            raise ValueError(
                f"Band '{self.name}' capacity must be a positive finite "
                f"number, got {self.capacity}"
            )
        if self.unit_count < 1:
            raise ValueError(
                f"Band '{self.name}' unit_count must be >= 1, "
                f"got {self.unit_count}"
            )
        if self.unit_thrust is not None and (
            not math.isfinite(self.unit_thrust) or self.unit_thrust < 0
        ):
            raise ValueError(
                f"Band '{self.name}' unit_thrust must be None or a "
                f"non-negative number, got {self.unit_thrust}"
            )


def _default_bands() -> list[BandConfig]:
    return [
        BandConfig(name="first_stage", capacity=1000.0, unit_count=4),
        BandConfig(name="second_stage", capacity=2000.0, unit_count=1),
    ]


# =============================================================================
# Freight Configuration
# =============================================================================

@dataclass
class FreightConfig:
    """
    Settings for the banded freight rocket.

    Analogy: A freight rocket is a stack of fuel tanks. The payload fills
    the first tank's capacity, then spills into the second, and so on.
    Each tank that receives any of the load gets its own stage, fuelled
    in proportion to the share it carries.

    Parameters
    ----------
    bands : list[BandConfig]
        Ordered capacity bands. Band 1 is always built; band k is built
        only when the payload is strictly heavier than band k-1's capacity.

    clamp_overflow : bool
        When True, the top band's fuel level is capped at 100 for payloads
        heavier than its capacity. Default False keeps the raw proportional
        value, which can exceed 100.

    enforce_ceiling : bool
        When True, payloads heavier than the top band's capacity are
        rejected with InvalidPayloadError before any stage is built.
    """
    bands: list[BandConfig] = field(default_factory=_default_bands)
    clamp_overflow: bool = False
    enforce_ceiling: bool = False

    def __post_init__(self) -> None:
        # YAML loading hands us plain dicts
        self.bands = [
            b if isinstance(b, BandConfig) else BandConfig(**b)
            for b in self.bands
        ]

    def validate(self) -> None:
        """Validate band ordering and each band definition."""
        if not self.bands:
            raise ValueError("Freight config needs at least one capacity band")

        for band in self.bands:
            band.validate()

        for lower, upper in zip(self.bands, self.bands[1:]):
            if upper.capacity <= lower.capacity:
                raise ValueError(
                    f"Band capacities must be strictly increasing, but "
                    f"'{upper.name}' ({upper.capacity}) does not exceed "
                    f"'{lower.name}' ({lower.capacity}). Overlapping bands "
                    f"would assign the same payload weight to two stages."
                )

        names = [band.name for band in self.bands]
        if len(set(names)) != len(names):
            raise ValueError(f"Band names must be unique, got {names}")

    @property
    def ceiling(self) -> float:
        """Largest payload the top band is rated for."""
        return self.bands[-1].capacity


# =============================================================================
# Sounding Configuration
# =============================================================================

@dataclass
class SoundingConfig:
    """
    Settings for the single-stage sounding rocket.

    Parameters
    ----------
    thrust_scale : float
        The solid motor's thrust is payload weight × thrust_scale.
    """
    thrust_scale: float = 1.0

    def validate(self) -> None:
        """Validate sounding parameters."""
        if not math.isfinite(self.thrust_scale) or self.thrust_scale < 0:
            raise ValueError(
                f"thrust_scale must be a non-negative number, "
                f"got {self.thrust_scale}"
            )


# =============================================================================
# Demo Configuration
# =============================================================================

@dataclass
class DemoConfig:
    """
    What the demo script assembles when run without arguments.

    Parameters
    ----------
    variants : list[str]
        Catalog names of the rockets to assemble.

    weights : list[float]
        Payload weights to assemble each variant with.
    """
    variants: list[str] = field(default_factory=lambda: ["sounding", "freight"])
    weights: list[float] = field(default_factory=lambda: [800.0, 1500.0])

    def validate(self) -> None:
        """Validate demo parameters."""
        if not self.variants:
            raise ValueError("Demo config needs at least one variant")
        for weight in self.weights:
            if weight < 0:
                raise ValueError(f"Demo weights must be >= 0, got {weight}")


# =============================================================================
# Master Configuration
# =============================================================================

@dataclass
class StageCraftConfig:
    """
    Master configuration combining all sub-configurations.

    This is the single source of truth for an assembly run. Pass this
    object to the catalog and it will extract the settings each rocket
    variant needs.

    Usage:
        # From YAML file:
        >>> config = StageCraftConfig.from_yaml("configs/default.yaml")

        # Programmatic:
        >>> config = StageCraftConfig()
        >>> config.validate()

        # Save:
        >>> config.to_yaml("configs/my_manifest.yaml")
    """
    freight: FreightConfig = field(default_factory=FreightConfig)
    sounding: SoundingConfig = field(default_factory=SoundingConfig)
    demo: DemoConfig = field(default_factory=DemoConfig)

    def validate(self) -> None:
        """
        Validate all sub-configurations.

        Raises
        ------
        ValueError
            If any parameter is invalid.
        """
        self.freight.validate()
        self.sounding.validate()
        self.demo.validate()

        logger.info(
            f"Config validated: {len(self.freight.bands)} freight bands, "
            f"ceiling={self.freight.ceiling:g}, "
            f"clamp_overflow={self.freight.clamp_overflow}"
        )

    @classmethod
    def from_yaml(cls, path: str | Path) -> StageCraftConfig:
        """
        Load configuration from a YAML file.

        Parameters
        ----------
        path : str or Path
            Path to the YAML configuration file.

        Returns
        -------
        StageCraftConfig
            Loaded and validated configuration.

        Raises
        ------
        FileNotFoundError
            If the YAML file does not exist.
        yaml.YAMLError
            If the YAML file is malformed.
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(
                f"Config file not found: {path}. "
                f"Create one from configs/default.yaml as a template."
            )

        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f)

        if raw is None:
            raise ValueError(f"Config file is empty: {path}")

        config = cls(
            freight=FreightConfig(**raw.get("freight", {})),
            sounding=SoundingConfig(**raw.get("sounding", {})),
            demo=DemoConfig(**raw.get("demo", {})),
        )

        config.validate()
        return config

    def to_yaml(self, path: str | Path) -> None:
        """
        Save configuration to a YAML file.

        Creates parent directories if they don't exist.

        Parameters
        ----------
        path : str or Path
            Output YAML file path.
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w", encoding="utf-8") as f:
            yaml.dump(
                self.to_dict(),
                f,
                default_flow_style=False,
                sort_keys=False,
                allow_unicode=True,
            )

        logger.info(f"Config saved to {path}")

    def to_dict(self) -> dict:
        """Convert to nested dictionary."""
        return asdict(self)

    @classmethod
    def for_smoke_test(cls) -> StageCraftConfig:
        """
        Create a small configuration with round numbers for quick checks.

        Three bands of 100 each make every fuel level easy to verify by
        hand.

        Returns
        -------
        StageCraftConfig
            Smoke-test configuration.
        """
        return cls(
            freight=FreightConfig(
                bands=[
                    BandConfig(name="booster", capacity=100.0, unit_count=3),
                    BandConfig(name="core", capacity=200.0, unit_count=2),
                    BandConfig(name="upper", capacity=300.0, unit_count=1,
                               unit_thrust=50.0),
                ],
                clamp_overflow=False,
                enforce_ceiling=False,
            ),
            sounding=SoundingConfig(thrust_scale=2.0),
            demo=DemoConfig(variants=["freight"], weights=[50.0, 250.0]),
        )

    def __repr__(self) -> str:
        """Pretty-print the configuration."""
        bands = ", ".join(
            f"{b.name}<={b.capacity:g}x{b.unit_count}" for b in self.freight.bands
        )
        lines = [
            "StageCraftConfig(",
            f"  Freight:  [{bands}] "
            f"(clamp={self.freight.clamp_overflow}, "
            f"ceiling={self.freight.enforce_ceiling})",
            f"  Sounding: thrust_scale={self.sounding.thrust_scale}",
            f"  Demo:     variants={self.demo.variants}, "
            f"weights={self.demo.weights}",
            ")",
        ]
        return "\n".join(lines)
