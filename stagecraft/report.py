"""
StageCraft Rocket Report
=========================
Turns an assembled rocket into a plain structural summary, for logging
and for comparing two assemblies.

Usage:
    >>> summarize(rocket)["n_stages"]
    2
    >>> print(format_summary(rocket))
"""

from __future__ import annotations

from stagecraft.model.parts import Rocket


def summarize(rocket: Rocket) -> dict:
    """
    Structural summary of a rocket.

    Returns
    -------
    dict
        - variant: variant name
        - payload_weight: weight of the attached payload (None if absent)
        - n_stages: number of stages
        - stages: per stage, its name, unit count, total thrust and the
          fuel level of each liquid unit
    """
    payload = rocket.payload
    return {
        "variant": rocket.variant,
        "payload_weight": payload.weight if payload is not None else None,
        "n_stages": rocket.n_stages,
        "stages": [
            {
                "name": stage.name,
                "n_units": len(stage.units),
                "total_thrust": stage.total_thrust,
                "fuel_levels": stage.fuel_levels,
            }
            for stage in rocket.stages
        ],
    }


def format_summary(rocket: Rocket) -> str:
    """Multi-line, human-readable version of summarize()."""
    summary = summarize(rocket)
    weight = summary["payload_weight"]
    lines = [
        f"{summary['variant']} rocket "
        f"(payload {'none' if weight is None else f'{float(weight):g}'}, "
        f"{summary['n_stages']} stage(s))"
    ]
    for stage in summary["stages"]:
        levels = stage["fuel_levels"]
        fuel = f", fuel {levels[0]:.1f}%" if levels else ""
        lines.append(
            f"  {stage['name']}: {stage['n_units']} unit(s), "
            f"thrust {stage['total_thrust']:g}{fuel}"
        )
    return "\n".join(lines)
