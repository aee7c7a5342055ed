"""
Drop and recreate the learning tables.

DANGEROUS: deletes every user's learning items, sessions and logged
attempts. The lexicon (MongoDB) is not touched.

Usage:
    python -m scripts.maintenance.reset_learning_db
    python -m scripts.maintenance.reset_learning_db --yes
"""

from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

from vocab_trainer.srs import database

logger = logging.getLogger(__name__)


def confirm_reset() -> bool:
    print(f"Database: {'test' if database.is_test_mode() else 'live'} learning database")
    print("This deletes all learning items, study sessions and session attempts.")
    response = input("Type 'yes' to reset: ")
    return response.strip().lower() == "yes"


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Drop and recreate the learning tables")
    parser.add_argument("--yes", action="store_true", help="Skip the confirmation prompt")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(message)s")

    if not args.yes and not confirm_reset():
        logger.info("[DB] Reset cancelled, no changes made")
        return 1

    database.reset_db()
    logger.info("[DB] Learning tables recreated")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
