"""Command-line entry point: draw integers from the generator.

    python -m seedonce 1 6 -n 10
    python -m seedonce 1 6 -n 600000 --seed 42 --stats
"""

from __future__ import annotations

import argparse
import logging
import sys

from seedonce import config, generator
from seedonce.diagnostics import chi_square, critical_value, histogram
from seedonce.errors import InvalidRange
from seedonce.generator import Generator


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="seedonce", description="Draw uniformly distributed integers"
    )
    parser.add_argument("min", type=int, help="Lowest value (inclusive)")
    parser.add_argument("max", type=int, help="Highest value (inclusive)")
    parser.add_argument(
        "-n",
        "--count",
        type=int,
        help=(
            "Number of values to draw "
            f"(default: 1, or {config.DEFAULT_STATS_DRAWS} with --stats)"
        ),
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Draw from a generator seeded with this value instead of the global one",
    )
    parser.add_argument(
        "--stats",
        action="store_true",
        help="Print a chi-square summary instead of the values",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    count = args.count
    if count is None:
        count = config.DEFAULT_STATS_DRAWS if args.stats else 1
    if count < 0:
        parser.error("--count must be non-negative")
    if args.seed is not None and args.seed < 0:
        parser.error("--seed must be non-negative")

    rng = Generator.from_seed(args.seed) if args.seed is not None else None
    draw = rng.get if rng is not None else generator.get

    try:
        values = [draw(args.min, args.max) for _ in range(count)]
    except InvalidRange as e:
        print(f"seedonce: error: {e}", file=sys.stderr)
        return 2

    if not args.stats:
        for value in values:
            print(value)
        return 0

    if args.max == args.min or not values:
        print("Not enough categories or samples for a chi-square test")
        return 0

    counts = histogram(values, args.min, args.max)
    statistic = chi_square(counts)
    limit = critical_value(len(counts) - 1)
    for offset, count in enumerate(counts):
        print(f"{args.min + offset}: {count}")
    print(f"chi-square={statistic:.3f} critical(0.999)={limit:.3f}")
    print("uniform" if statistic < limit else "NOT uniform")
    return 0


if __name__ == "__main__":
    sys.exit(main())
