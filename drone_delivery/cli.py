#!/usr/bin/env python3
"""
Location checker for the drone delivery domain.

Builds a Location from the command line and prints it, or reports which
coordinate is out of range.

Usage:
    drone-location 47.64 -122.13 120
    drone-location 47.64 -122.13 120 --json

Environment:
    LOG_LEVEL, LOG_JSON and ENVIRONMENT control log output (see core.config)
"""
import argparse
import json
import sys
from typing import List, Optional

from pydantic import ValidationError

from drone_delivery.core.config import settings
from drone_delivery.core.logging import get_logger, setup_logging
from drone_delivery.domain import DomainError, Location

EXIT_OK = 0
EXIT_INVALID = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="drone-location",
        description="Validate a drone delivery location.",
    )
    parser.add_argument("latitude", type=float, help="degrees, -90 to 90")
    parser.add_argument("longitude", type=float, help="degrees, -180 to 180")
    parser.add_argument("altitude", type=float, help="meters")
    parser.add_argument("--json", action="store_true", help="print the location as JSON")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    try:
        settings.validate_required_settings()
    except ValueError as e:
        print(f"[ERROR] Configuration: {e}", file=sys.stderr)
        return EXIT_INVALID

    setup_logging(level=settings.log_level, json_format=settings.json_logs)
    logger = get_logger(__name__, {"environment": settings.environment})

    try:
        location = Location(
            latitude=args.latitude,
            longitude=args.longitude,
            altitude=args.altitude,
        )
    except DomainError as e:
        logger.warning(
            f"Location rejected: {e}",
            extra={
                "error_type": type(e).__name__,
                "field": getattr(e, "field", None),
                "value": getattr(e, "value", None),
            },
        )
        print(f"[ERROR] {e}", file=sys.stderr)
        return EXIT_INVALID
    except ValidationError as e:
        logger.warning(
            "Location rejected: not a finite number",
            extra={"error_type": type(e).__name__},
        )
        print(f"[ERROR] {e}", file=sys.stderr)
        return EXIT_INVALID

    logger.info("Location accepted", extra={"operation": "validate_location", **location.as_dict()})

    if args.json:
        print(json.dumps(location.as_dict()))
    else:
        print(location)

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
