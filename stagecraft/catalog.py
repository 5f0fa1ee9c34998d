"""
StageCraft Variant Catalog
===========================
Maps variant names to functions that turn a StageCraftConfig into an
AssemblyPlan, and hands out fresh builders for them.

Callers never subclass anything to add a variant; they register a plan
function under a new name:

    >>> @register_variant("heavy")
    ... def _heavy(config):
    ...     return freight_plan(heavy_freight_config)

Usage:
    >>> builder = build_strategy("freight", StageCraftConfig())
    >>> rocket = assemble(builder, Satellite(id=1, weight=1500))
"""

from __future__ import annotations

import logging
from typing import Callable

from stagecraft.assembly.builder import AssemblyPlan, StagedBuilder
from stagecraft.assembly.plans import freight_plan, sounding_plan
from stagecraft.config import StageCraftConfig

logger = logging.getLogger(__name__)

PlanFactory = Callable[[StageCraftConfig], AssemblyPlan]

_REGISTRY: dict[str, PlanFactory] = {}


def register_variant(name: str) -> Callable[[PlanFactory], PlanFactory]:
    """Register a plan factory under `name`. Names must be unique."""

    def decorator(factory: PlanFactory) -> PlanFactory:
        if name in _REGISTRY:
            raise ValueError(f"Variant '{name}' is already registered")
        _REGISTRY[name] = factory
        return factory

    return decorator


def available_variants() -> list[str]:
    return sorted(_REGISTRY)


def build_strategy(name: str, config: StageCraftConfig) -> StagedBuilder:
    """
    Create a fresh single-use builder for a registered variant.

    Parameters
    ----------
    name : str
        Variant name, e.g. "sounding" or "freight".
    config : StageCraftConfig
        Configuration the plan is built from.

    Returns
    -------
    StagedBuilder
        A builder in phase NEW.

    Raises
    ------
    KeyError
        If no variant is registered under `name`.
    """
    try:
        factory = _REGISTRY[name]
    except KeyError:
        raise KeyError(
            f"Unknown rocket variant: '{name}'. "
            f"Choose from: {', '.join(available_variants())}"
        ) from None

    logger.debug(f"Building strategy for variant '{name}'")
    return StagedBuilder(factory(config))


@register_variant("sounding")
def _sounding(config: StageCraftConfig) -> AssemblyPlan:
    return sounding_plan(config.sounding)


@register_variant("freight")
def _freight(config: StageCraftConfig) -> AssemblyPlan:
    return freight_plan(config.freight)
