"""Command-line entry point for the parking tracker.

Usage
-----
::

    parkingtracker [--log-level DEBUG] [--sort plate] [--no-pause]
    python -m parkingtracker

Options fall back to ``PARKING_*`` environment variables (see
:class:`~parkingtracker.config.ParkingConfig`).
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from typing import Any

from parkingtracker import __version__
from parkingtracker._constants import LIST_ORDERS
from parkingtracker.config import ParkingConfig
from parkingtracker.exceptions import ParkingConfigError
from parkingtracker.session import TerminalSession

_logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="parkingtracker",
        description="Track residents' cars and their covered parking subscriptions.",
    )
    parser.add_argument("--log-level", default=None, help="Logging level (default: WARNING)")
    parser.add_argument(
        "--sort",
        choices=sorted(LIST_ORDERS),
        default=None,
        help="Listing order for cars (default: insertion)",
    )
    parser.add_argument(
        "--no-pause",
        action="store_true",
        help="Do not wait for Enter after each action",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _config_from_args(args: argparse.Namespace) -> ParkingConfig:
    overrides: dict[str, Any] = {}
    if args.log_level is not None:
        overrides["log_level"] = args.log_level
    if args.sort is not None:
        overrides["list_order"] = args.sort
    if args.no_pause:
        overrides["pause_after_action"] = False
    return ParkingConfig.from_env(**overrides)


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = _config_from_args(args)
    except ParkingConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=config.log_level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    _logger.debug("Starting session config=%s", config)

    session = TerminalSession(config=config)
    try:
        session.run()
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return 130
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
