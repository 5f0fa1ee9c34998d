"""
StageCraft Staged Builder
==========================
The stateful half of the assembly protocol. A builder owns one rocket
while it is being put together and only accepts the build steps in their
fixed order:

    NEW ──initialize()──▶ INITIALIZED ──attach_payload()──▶ PAYLOAD_ATTACHED
        ──attach_stages()──▶ STAGED ──calibrate()──▶ CALIBRATED

Anything else raises AssemblyError. A builder is single-use: once it has
been initialized it can never start over, so every assembly run needs a
fresh builder. Sharing one builder between concurrent runs is a caller
error and is not guarded against.

What varies between rocket variants is not the builder class but the
AssemblyPlan it is given: a bundle of plain functions for checking the
payload, building the stages, and calibrating.
Plans with no calibration function simply skip that step.

Usage:
    >>> builder = StagedBuilder(freight_plan(config.freight))
    >>> builder.initialize()
    >>> builder.attach_payload(Satellite(id=1, weight=1500))
    >>> builder.attach_stages()
    >>> builder.calibrate()
    >>> rocket = builder.get_product()
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional, Protocol

from stagecraft.errors import AssemblyError, UninitializedProductError
from stagecraft.model.parts import Payload, Rocket, Stage

logger = logging.getLogger(__name__)


class AssemblyStrategy(Protocol):
    """The capability set the Director drives."""

    def initialize(self) -> None:
        ...

    def attach_payload(self, payload: Payload) -> None:
        ...

    def attach_stages(self) -> None:
        ...

    def calibrate(self) -> None:
        ...

    def get_product(self) -> Rocket:
        ...


@dataclass(frozen=True)
class AssemblyPlan:
    """
    Variant-specific behaviour of each build step, as function fields.

    Parameters
    ----------
    name : str
        Variant name, stamped on every rocket built from this plan.
    make_stages : Callable[[Payload], list[Stage]]
        Builds fresh stages for the attached payload.
    calibrate : Callable[[Rocket], Any] or None
        Adjusts the staged rocket in place. None means the variant has
        nothing to calibrate.
    check_payload : Callable[[Payload], None] or None
        Extra payload validation run when the payload is attached.
    """
    name: str
    make_stages: Callable[[Payload], list[Stage]]
    calibrate: Optional[Callable[[Rocket], Any]] = None
    check_payload: Optional[Callable[[Payload], None]] = None


class BuildPhase(Enum):
    NEW = "new"
    INITIALIZED = "initialized"
    PAYLOAD_ATTACHED = "payload_attached"
    STAGED = "staged"
    CALIBRATED = "calibrated"


class StagedBuilder:
    """
    Single-use builder that enforces the assembly order.

    Parameters
    ----------
    plan : AssemblyPlan
        Variant behaviour for each step.
    """

    def __init__(self, plan: AssemblyPlan):
        self.plan = plan
        self.phase = BuildPhase.NEW
        self._product: Optional[Rocket] = None

    def _require(self, step: str, expected: BuildPhase) -> None:
        if self.phase is not expected:
            raise AssemblyError(
                f"Cannot {step} on '{self.plan.name}' builder in phase "
                f"'{self.phase.value}'; it must be in phase '{expected.value}'"
            )

    def initialize(self) -> None:
        if self.phase is not BuildPhase.NEW:
            raise AssemblyError(
                f"'{self.plan.name}' builder was already used (phase "
                f"'{self.phase.value}'); use a fresh builder for every rocket"
            )

        self._product = Rocket(variant=self.plan.name)
        self.phase = BuildPhase.INITIALIZED

    def attach_payload(self, payload: Payload) -> None:
        self._require("attach payload", BuildPhase.INITIALIZED)

        if self.plan.check_payload is not None:
            self.plan.check_payload(payload)

        self._product.payload = payload
        self.phase = BuildPhase.PAYLOAD_ATTACHED

    def attach_stages(self) -> None:
        self._require("attach stages", BuildPhase.PAYLOAD_ATTACHED)

        self._product.stages = list(self.plan.make_stages(self._product.payload))
        self.phase = BuildPhase.STAGED

    def calibrate(self) -> None:
        self._require("calibrate", BuildPhase.STAGED)

        if self.plan.calibrate is not None:
            results = self.plan.calibrate(self._product)
            logger.debug(f"Calibrated '{self.plan.name}' rocket: {results}")
        self.phase = BuildPhase.CALIBRATED

    def get_product(self) -> Rocket:
        if self._product is None:
            raise UninitializedProductError(
                f"'{self.plan.name}' builder has no rocket yet; "
                f"call initialize() first"
            )
        return self._product

    def __repr__(self) -> str:
        return f"StagedBuilder(plan={self.plan.name!r}, phase={self.phase.value!r})"
