# connects command-line readings to the service and prints the result in a fixed format.

from __future__ import annotations
import argparse
import logging
import sys
from dataclasses import replace
from typing import List, Optional
from .config import options_from_env
from .errors import TemperatureStatsError
from .service import compute_statistics


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="bodytemp",
        description="Average, min and max of body temperature readings, reported in Fahrenheit.",
    )
    p.add_argument("readings", nargs="*", type=float, metavar="READING")
    p.add_argument("--unit", metavar="UNIT", help="unit the readings were taken in (F, C, fahrenheit or celsius)")
    # flags only switch options on, env defaults cover the rest
    p.add_argument("--force-convert", action="store_true", help="override a unit that contradicts the data")
    p.add_argument("--convert-mixed", action="store_true", help="convert only the Celsius-range readings")
    p.add_argument("-v", "--verbose", action="store_true")
    return p


def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        options = options_from_env()
        overrides = {}
        if args.unit:
            overrides["input_unit"] = args.unit
        if args.force_convert:
            overrides["force_convert_if_mismatch"] = True
        if args.convert_mixed:
            overrides["convert_mixed_values"] = True
        stats = compute_statistics(args.readings, replace(options, **overrides))
    except TemperatureStatsError as exc:
        print(f"error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    unit = stats.unit.value
    print(f"Average: {stats.average:.2f} {unit}")
    print(f"Min: {stats.min:.2f} {unit}")
    print(f"Max: {stats.max:.2f} {unit}")


if __name__ == "__main__":
    main()
