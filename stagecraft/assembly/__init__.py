"""
stagecraft.assembly — Staged Assembly Protocol
================================================
This subpackage builds rockets through a fixed, ordered protocol:

    Director ──drives──▶ StagedBuilder ──delegates to──▶ AssemblyPlan

Assembly Process:
    1. initialize      → empty rocket
    2. attach_payload  → cargo fixed (optionally checked against a ceiling)
    3. attach_stages   → one stage per capacity band the payload reaches
    4. calibrate       → proportional fuel level per stage (freight only)
    → Output: fully assembled Rocket

Components:
    - builder.py      — AssemblyPlan, StagedBuilder (order enforcement)
    - director.py     — Director, assemble(), payload validation
    - bands.py        — Capacity bands and stage allocation
    - calibration.py  — Proportional fuel calibration
    - plans.py        — Sounding and freight variants
"""

from stagecraft.assembly.builder import AssemblyPlan, StagedBuilder, BuildPhase
from stagecraft.assembly.director import Director, assemble
from stagecraft.assembly.bands import BandTable, CapacityBand
from stagecraft.assembly.calibration import FuelCalibrator, allocate_fractions
from stagecraft.assembly.plans import freight_plan, sounding_plan
