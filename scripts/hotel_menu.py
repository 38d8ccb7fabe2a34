"""Entry point for the interactive hotel menu."""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from hotel_rooms.config.settings import Settings
from hotel_rooms.console.menu import run_menu
from hotel_rooms.core.logging import configure_logging
from hotel_rooms.rooms import Hotel


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Track hotel rooms and their discounted nightly costs.")
    parser.add_argument(
        "--log-level",
        default=None,
        help="Override the log level from settings (e.g. INFO, DEBUG)",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    settings = Settings()
    if args.log_level:
        settings.log_level = args.log_level

    configure_logging(settings.log_level, settings.log_dir)
    logging.getLogger(__name__).debug(
        "Starting menu (max base cost %s, label warning length %d)",
        settings.max_base_cost,
        settings.label_warning_length,
    )

    hotel = Hotel(label_warning_length=settings.label_warning_length)
    return run_menu(hotel, settings)


if __name__ == "__main__":
    sys.exit(main())
