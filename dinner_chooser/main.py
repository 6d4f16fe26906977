"""Entry point for the dinner-chooser Textual app."""

from __future__ import annotations

import argparse
import logging
import random
from typing import Sequence

from dinner_chooser.config import DB_PATH, DEBUG_LOG_FORMAT, DEBUG_LOG_PATH
from dinner_chooser.dinner_app import DinnerChooserApp
from dinner_chooser.persistence import SqliteKeyValueStore
from dinner_chooser.session import DinnerSession


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="dinner-chooser", description="Pick tonight's dinner by cooking mood.")
    parser.add_argument("--db", default=DB_PATH, help=f"SQLite file holding the dish list (default: {DB_PATH})")
    parser.add_argument("--seed", type=int, default=None, help="Seed the random source for reproducible picks")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help=f"Level for the debug log at {DEBUG_LOG_PATH}",
    )
    return parser


def configure_logging(level: str, log_path: str = DEBUG_LOG_PATH) -> None:
    """Send logs to a file; the terminal belongs to the TUI."""
    logging.basicConfig(filename=log_path, level=getattr(logging, level), format=DEBUG_LOG_FORMAT, encoding="utf-8")


def main(argv: Sequence[str] | None = None) -> None:
    """Run the Textual application."""
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    rng = random.Random(args.seed) if args.seed is not None else random.Random()
    session = DinnerSession(SqliteKeyValueStore(args.db), rng=rng)
    logging.getLogger(__name__).info("start db=%s seed=%s", args.db, args.seed)
    DinnerChooserApp(session).run()


if __name__ == "__main__":
    main()
