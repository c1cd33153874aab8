"""
GPP demo harness

Prints GPP for a dry-bulb temperature and relative humidity at one or more
elevations. With no arguments it runs the stock demo: 42°F / 10% RH at
0, 50, 500, 1000 and 1500 m.

    python cli.py
    python cli.py --temp 77 --rh 70 --elevation 0 --elevation 1600 --use-elevation-pressure
"""
import argparse
import logging
import sys

from dotenv import load_dotenv

load_dotenv()

from config import config
from gpp import compute_gpp_details
from models import GppRequest
from validator import PsychrometricError

DEMO_TEMP_F = 42
DEMO_RH = 10
DEMO_ELEVATIONS = [0, 50, 500, 1000, 1500]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Grains-per-pound moisture calculator")
    parser.add_argument("--temp", type=float, help=f"Dry-bulb temperature (°F, 0-120; default {DEMO_TEMP_F})")
    parser.add_argument("--rh", type=float, help=f"Relative humidity (%%, 0-100; default {DEMO_RH})")
    parser.add_argument(
        "--elevation",
        type=float,
        action="append",
        help="Elevation in meters; repeat for several (default: demo elevations)",
    )
    parser.add_argument(
        "--use-elevation-pressure",
        action="store_true",
        default=None,
        help="Use the elevation-adjusted pressure in the humidity ratio",
    )
    parser.add_argument("--details", action="store_true", help="Print intermediates as JSON")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=config.get_log_level(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )

    if args.elevation:
        elevations = args.elevation
    elif args.temp is None and args.rh is None:
        elevations = DEMO_ELEVATIONS
    else:
        elevations = [config.DEFAULT_ELEVATION]
    temp = DEMO_TEMP_F if args.temp is None else args.temp
    rh = DEMO_RH if args.rh is None else args.rh

    for elevation in elevations:
        request = GppRequest(dry_bulb_temp=temp, rel_humidity=rh, elevation=elevation)
        try:
            result = compute_gpp_details(
                **request.model_dump(),
                use_elevation_pressure=args.use_elevation_pressure,
            )
        except PsychrometricError as e:
            print(f"error: {e}", file=sys.stderr)
            return 2
        if args.details:
            print(result.model_dump_json())
        else:
            print(result.gpp)
    return 0


if __name__ == "__main__":
    sys.exit(main())
