"""Command line interface for the barbell weights calculator."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .calculator import WeightCalculator, WeightCalculatorConfig
from .plates import PlateParseError, parse_plate_tokens
from .table import WeightTable, steps_filename
from .visualization import plot_weight_ladder

DEFAULT_MIN_STEPS = (1.0, 2.0, 4.0)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="List the barbell weights you can load from a set of plates.",
    )
    parser.add_argument(
        "plates",
        nargs="*",
        help=(
            "Plate sizes, one per pair of plates (one for each side). Repeat a size "
            "to indicate four or six plates of that size."
        ),
    )
    parser.add_argument(
        "--bar",
        type=float,
        default=45.0,
        help="Weight of the empty bar.",
    )
    parser.add_argument(
        "--min-step",
        type=float,
        action="append",
        dest="min_steps",
        help=(
            "Smallest allowed difference between consecutive weights. May be given "
            "several times; defaults to 1, 2 and 4."
        ),
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=Path("."),
        help="Directory where the steps_<min-step>.txt files are written.",
    )
    parser.add_argument(
        "--csv",
        action="store_true",
        help="Also write a steps_<min-step>.csv file for each step.",
    )
    parser.add_argument(
        "--plot",
        action="store_true",
        help="Write a weight_ladder.png plot of every step.",
    )
    parser.add_argument(
        "--print",
        dest="echo",
        action="store_true",
        help="Print each list to stdout as well.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log every removal made while spacing out the weights.",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s  %(levelname)-8s  %(message)s",
        datefmt="%H:%M:%S",
    )

    try:
        plates = parse_plate_tokens(args.plates)
    except PlateParseError as exc:
        print(f"Invalid plate: {exc}", file=sys.stderr)
        return 2

    output_dir: Path = args.output_dir
    tables: list[WeightTable] = []
    for min_step in args.min_steps or DEFAULT_MIN_STEPS:
        try:
            calculator = WeightCalculator(WeightCalculatorConfig(bar=args.bar, min_step=min_step))
        except ValueError as exc:
            print(f"Invalid configuration: {exc}", file=sys.stderr)
            return 2
        table = calculator.calculate(plates)
        tables.append(table)

        table.write_text(output_dir / steps_filename(min_step))
        if args.csv:
            table.to_csv(output_dir / steps_filename(min_step, ".csv"))
        if args.echo:
            print(f"# {table.summary()}")
            print(table.to_text())

    if args.plot:
        plot_weight_ladder(tables, output_dir / "weight_ladder.png")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
