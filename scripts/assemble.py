#!/usr/bin/env python3
"""
StageCraft — Assembly Demo Script
===================================
Assembles each configured rocket variant for each payload weight and logs
a summary of the result. Optionally writes all summaries to JSON.

Usage:
    python scripts/assemble.py
    python scripts/assemble.py --config configs/default.yaml --weights 800 1500 2500
    python scripts/assemble.py --smoke-test --output outputs/rockets.json
"""

import argparse
import json
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from stagecraft.config import StageCraftConfig
from stagecraft.catalog import available_variants, build_strategy
from stagecraft.assembly.director import Director
from stagecraft.model.parts import Probe, Satellite
from stagecraft.report import format_summary, summarize

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    datefmt="%H:%M:%S",
)
logger = logging.getLogger(__name__)


def main():
    parser = argparse.ArgumentParser(description="StageCraft Assembly Demo")
    parser.add_argument("--config", type=str, default=None,
                        help="YAML config (defaults to built-in settings)")
    parser.add_argument("--smoke-test", action="store_true")
    parser.add_argument("--variant", action="append", default=None,
                        choices=available_variants(),
                        help="Variant to assemble (repeatable)")
    parser.add_argument("--weights", type=float, nargs="+", default=None)
    parser.add_argument("--clamp-overflow", action="store_true",
                        help="Cap freight fuel levels at 100%%")
    parser.add_argument("--output", type=str, default=None,
                        help="Write rocket summaries to this JSON file")
    args = parser.parse_args()

    if args.smoke_test:
        config = StageCraftConfig.for_smoke_test()
    elif args.config:
        config = StageCraftConfig.from_yaml(args.config)
    else:
        config = StageCraftConfig()

    if args.clamp_overflow:
        config.freight.clamp_overflow = True
    config.validate()

    variants = args.variant or config.demo.variants
    weights = args.weights or config.demo.weights

    logger.info(f"\n{config}")

    director = Director()
    summaries = []
    for variant in variants:
        logger.info("=" * 60)
        logger.info(f"Variant: {variant}")
        logger.info("=" * 60)

        for i, weight in enumerate(weights):
            if variant == "sounding":
                payload = Probe(weight=weight)
            else:
                payload = Satellite(id=i + 1, weight=weight)

            rocket = director.prepare(build_strategy(variant, config), payload)
            logger.info(f"\n{format_summary(rocket)}")
            summaries.append(summarize(rocket))

    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(summaries, f, indent=2)
        logger.info(f"Summaries saved to {output_path}")

    logger.info(f"\nAssembled {len(summaries)} rocket(s).")


if __name__ == "__main__":
    main()
