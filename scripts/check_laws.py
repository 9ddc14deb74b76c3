#!/usr/bin/env python3
"""
Check Algebraic Laws on Random Inputs

This script:
    1. Builds a dense relation universe of the requested size
    2. Checks the relation-algebra laws on random relations
    3. Checks two's-complement arithmetic against Python integers
    4. Prints a summary and exits non-zero if any law is violated
"""

import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import argparse
import json
import logging

from logic_algebra.analysis import LawChecker


def parse_args():
    parser = argparse.ArgumentParser(description="Check relation and bit-vector algebra laws")
    parser.add_argument("--size", type=int, default=5, help="Universe size for relations")
    parser.add_argument("--width", type=int, default=8, help="Bit width for arithmetic")
    parser.add_argument("--trials", type=int, default=50)
    parser.add_argument("--density", type=float, default=0.3,
                        help="Probability that a pair belongs to a random relation")
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument("--device", type=str, default=None)
    parser.add_argument("--json", action="store_true", help="Print results as JSON")
    parser.add_argument("--verbose", action="store_true")
    return parser.parse_args()


def main():
    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    checker = LawChecker(
        size=args.size,
        width=args.width,
        trials=args.trials,
        density=args.density,
        seed=args.seed,
        device=args.device,
    )
    results = checker.check_all()

    if args.json:
        print(json.dumps([
            {"law": r.law_name, "trials": r.trials, "failures": r.failures}
            for r in results
        ], indent=2))
    else:
        print(checker.summary(results))

    return 0 if all(r.holds for r in results) else 1


if __name__ == "__main__":
    sys.exit(main())
