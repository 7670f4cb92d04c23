"""Command-line interface for planning a subway route."""

from __future__ import annotations

import argparse
import json
import sys
import traceback
from pathlib import Path
from typing import Any, Dict, List, Optional

from .config import AppConfig, get_config
from .container import Container
from .domain.errors import NoRouteFoundError, SubwayRouterError
from .domain.models import RouteResult
from .logging_setup import configure_logging
from .services import RoutePlannerService

EXIT_OK = 0
EXIT_NO_ROUTE = 1
EXIT_ERROR = 2


def _route_to_dict(route: RouteResult) -> Dict[str, Any]:
    return {
        "path": list(route.path),
        "stations": [station.name for station in route.stations],
        "legs": [
            {
                "from": leg.origin.code,
                "to": leg.destination.code,
                "distance_km": leg.distance_km,
            }
            for leg in route.legs
        ],
        "total_distance_km": route.total_distance_km,
    }


def _build_parser() -> argparse.ArgumentParser:
    examples = (
        "Examples:\n"
        "  subway-router 0150 0222\n"
        "  subway-router 'Seoul Station' Gangnam --map route.html\n"
        "  subway-router Seoul Gangnam --data data/stations.json --json\n"
    )
    p = argparse.ArgumentParser(
        prog="subway-router",
        description="Shortest route between two subway stations",
        epilog=examples,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    p.add_argument("departure", help="Departure station id or name")
    p.add_argument("arrival", help="Arrival station id or name")
    p.add_argument("--data", type=Path, default=None, help="Station dataset (JSON)")
    p.add_argument("--map", type=Path, default=None, help="Write an HTML route map")
    p.add_argument("--no-fuzzy", action="store_true", help="Disable fuzzy name matching")
    p.add_argument("--json", action="store_true", help="Print the route as JSON")
    p.add_argument(
        "--log-level",
        choices=["debug", "info", "warning", "error"],
        default=None,
        help="Log verbosity (default from SUBWAY_LOG_LEVEL)",
    )
    p.add_argument("--verbose", action="store_true", help="Show full tracebacks")
    return p


def _effective_config(args: argparse.Namespace) -> AppConfig:
    config = get_config()
    if args.no_fuzzy:
        resolver = config.resolver.model_copy(update={"fuzzy_matching": False})
        config = config.model_copy(update={"resolver": resolver})
    return config


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the ``subway-router`` command-line tool."""
    args = _build_parser().parse_args(argv)

    try:
        config = _effective_config(args)
        configure_logging(config.observability, level=args.log_level)

        container = Container.create_default(config, dataset_path=args.data)
        planner: RoutePlannerService = container.resolve(RoutePlannerService)
        route = planner.plan(args.departure, args.arrival, map_output_path=args.map)

    except NoRouteFoundError as exc:
        sys.stderr.write(f"{exc}\n")
        return EXIT_NO_ROUTE
    except SubwayRouterError as exc:
        if args.verbose:
            traceback.print_exc()
        else:
            sys.stderr.write(f"error: {exc}\n")
        return EXIT_ERROR

    if args.json:
        print(json.dumps(_route_to_dict(route)))
    else:
        print(planner.format_result(route, map_path=args.map))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
