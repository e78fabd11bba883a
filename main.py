"""Comfort Route Planner - Main Entry Point"""
import argparse
import logging
import sys

from config import Config
from services.planner import ComfortRoutePlanner
from utils.geo import to_point


def parse_point(value):
    """Parse a 'lng,lat' command line argument."""
    try:
        return to_point(value.split(','))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected 'lng,lat', got {value!r}")


def cluster_count(value):
    """Parse --clusters, keeping it within what one directions request can route through."""
    try:
        count = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got {value!r}")
    if not 1 <= count <= Config.MAX_CLUSTERS:
        raise argparse.ArgumentTypeError(f"must be between 1 and {Config.MAX_CLUSTERS}, got {count}")
    return count


def build_parser():
    parser = argparse.ArgumentParser(
        description="Plan a fastest and a comfort walking route.",
        epilog="Put -- before the points when a longitude is negative, e.g. main.py -- -73.99,40.73 -73.97,40.75",
    )
    parser.add_argument("start", type=parse_point, help="start point as 'lng,lat'")
    parser.add_argument("end", type=parse_point, help="destination as 'lng,lat'")
    parser.add_argument("--clusters", type=cluster_count, default=Config.NUM_CLUSTERS, help="number of venue clusters")
    parser.add_argument("--seed", type=int, default=Config.RANDOM_SEED, help="random seed for clustering")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=Config.LOG_LEVEL, format="%(levelname)s │ %(name)s │ %(message)s")

    print("\n" + "=" * 50)
    print("        COMFORT ROUTE PLANNER")
    print("=" * 50)
    print(f"   From {args.start} to {args.end}, {args.clusters} clusters")
    print("=" * 50 + "\n")

    planner = ComfortRoutePlanner(Config, verbose=True)
    try:
        plan = planner.plan(args.start, args.end, num_clusters=args.clusters, random_state=args.seed)
    except Exception as e:
        print(f"   ERROR: {e}")
        return 1

    planner.print_summary(plan)
    return 0


if __name__ == "__main__":
    sys.exit(main())
