"""
StageCraft Director
====================
Drives a builder through the fixed assembly sequence and hands back the
finished rocket.

Assembly Sequence:
    0. Validate the payload (weight must be a finite number >= 0)
    1. strategy.initialize()        — allocate an empty rocket
    2. strategy.attach_payload(p)   — fix the cargo
    3. strategy.attach_stages()     — build stages sized from the cargo
    4. strategy.calibrate()         — proportional fuel levels (if any)
    5. strategy.get_product()       — the finished rocket

The Director itself holds no state, so one instance can run any number
of assemblies. All state lives in the builder, which is single-use.

Any error aborts the run immediately; no partial rocket is returned.

Usage:
    >>> rocket = assemble(build_strategy("freight", config), Satellite(id=1, weight=1500))
    >>> rocket.n_stages
    2
"""

from __future__ import annotations

import logging
import math
from numbers import Real

from stagecraft.assembly.builder import AssemblyStrategy
from stagecraft.errors import InvalidPayloadError
from stagecraft.model.parts import Payload, Rocket

logger = logging.getLogger(__name__)


def validate_payload(payload: Payload) -> None:
    """
    Reject payloads whose weight cannot drive an assembly.

    Any `numbers.Real` weight is accepted (int, float, Fraction, numpy
    scalars). Decimal is not a `numbers.Real` and is rejected.

    Raises
    ------
    InvalidPayloadError
        If the weight is missing, not a real number, not finite, or negative.
    """
    weight = getattr(payload, "weight", None)
    if isinstance(weight, bool) or not isinstance(weight, Real):
        raise InvalidPayloadError(
            f"Payload weight must be a number, got {weight!r}"
        )
    if not math.isfinite(weight):
        raise InvalidPayloadError(f"Payload weight must be finite, got {weight}")
    if weight < 0:
        raise InvalidPayloadError(
            f"Payload weight must be >= 0, got {weight}"
        )


class Director:
    """Runs the assembly sequence over any AssemblyStrategy."""

    def prepare(self, strategy: AssemblyStrategy, payload: Payload) -> Rocket:
        """
        Assemble a rocket.

        Parameters
        ----------
        strategy : AssemblyStrategy
            A fresh builder.
        payload : Payload
            Cargo to build the rocket around.

        Returns
        -------
        Rocket
            The fully assembled rocket.

        Raises
        ------
        InvalidPayloadError
            Before any step runs, if the payload weight is invalid.
        AssemblyError
            If the builder rejects a step (e.g. it was already used).
        """
        validate_payload(payload)

        logger.debug(
            f"Assembling with {strategy!r}, "
            f"payload weight {float(payload.weight):g}"
        )

        strategy.initialize()
        strategy.attach_payload(payload)
        strategy.attach_stages()
        strategy.calibrate()
        rocket = strategy.get_product()

        logger.info(
            f"Assembled '{rocket.variant}' rocket: payload {float(payload.weight):g}, "
            f"{rocket.n_stages} stage(s)"
        )
        return rocket


def assemble(strategy: AssemblyStrategy, payload: Payload) -> Rocket:
    """Assemble a rocket with a throwaway Director."""
    return Director().prepare(strategy, payload)
