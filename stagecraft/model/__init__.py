"""
stagecraft.model — Rocket Parts
================================
Plain value objects that the assembly protocol builds and wires together.

Part Overview:

    ┌─ Rocket ─────────────────────────────────────────────┐
    │  payload: Payload (Satellite, Probe)                 │
    │                                                      │
    │  stages:                                             │
    │  ┌─ Stage "first_stage" ───────────────────────────┐ │
    │  │  LiquidRocketEngine × 4   (fuel_level 0..100)   │ │
    │  └─────────────────────────────────────────────────┘ │
    │  ┌─ Stage "second_stage" (heavy payloads only) ────┐ │
    │  │  LiquidRocketEngine × 1                         │ │
    │  └─────────────────────────────────────────────────┘ │
    └──────────────────────────────────────────────────────┘

Components:
    - parts.py — Payload, engines, Stage and Rocket

The payload is frozen once created. The only field that changes after a
part is built is a liquid engine's fuel level, set during calibration.
"""

from stagecraft.model.parts import (
    Payload,
    Satellite,
    Probe,
    PropulsionUnit,
    SolidRocketEngine,
    LiquidRocketEngine,
    Stage,
    Rocket,
)
