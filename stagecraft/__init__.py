"""
StageCraft
==========
Staged Rocket Assembly with Payload-Driven Stage Branching and
Proportional Fuel Calibration.

This package provides:
    1. A fixed four-step assembly protocol (initialize → attach payload →
       attach stages → calibrate) driven by a stateless Director
    2. Single-use builders that reject out-of-order steps
    3. Capacity-band stage allocation and proportional fuel levels for
       freight rockets
    4. A catalog that turns a configuration into ready builders

Quick Start:
    >>> from stagecraft.config import StageCraftConfig
    >>> from stagecraft.catalog import build_strategy
    >>> from stagecraft.assembly.director import assemble
    >>> from stagecraft.model.parts import Satellite
    >>> config = StageCraftConfig()
    >>> rocket = assemble(build_strategy("freight", config), Satellite(id=1, weight=1500))

Subpackages:
    - stagecraft.model    — Payloads, engines, stages, rockets
    - stagecraft.assembly — Builder, director, bands, calibration, plans
"""

__version__ = "0.1.0"
__author__ = "Aditya"
