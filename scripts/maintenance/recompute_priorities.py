"""
Recompute stored priority scores for a user's learning items.

Stored scores drift as due dates pass; session selection always recomputes,
but list views sort by the stored value.

Usage:
    python -m scripts.maintenance.recompute_priorities --user-id alice
    python -m scripts.maintenance.recompute_priorities --dry-run
"""

from __future__ import annotations

import argparse
import logging
from dataclasses import replace
from datetime import datetime, timezone
from typing import Optional

from vocab_trainer.srs import database
from vocab_trainer.srs.errors import StaleItemError
from vocab_trainer.srs.priority import priority_for_item

logger = logging.getLogger(__name__)


def recompute_priorities(
    user_id: str,
    dry_run: bool = False,
    now: Optional[datetime] = None
) -> tuple[int, int]:
    """
    Recompute and save priority scores.

    Items modified concurrently are skipped; they were re-scored by the
    attempt that modified them.

    Returns:
        (updated, skipped) counts
    """
    now = now or datetime.now(timezone.utc)
    updated = 0
    skipped = 0

    for item in database.load_item_pool(user_id):
        score = priority_for_item(item, now=now)
        if score == item.priority_score:
            continue
        if dry_run:
            logger.info("[PRIORITY] %s: %d -> %d", item.id, item.priority_score, score)
            updated += 1
            continue
        try:
            database.save_learning_item(user_id, replace(item, priority_score=score))
            updated += 1
        except StaleItemError as exc:
            logger.warning("[PRIORITY] Skipped: %s", exc)
            skipped += 1

    return updated, skipped


def main():
    parser = argparse.ArgumentParser(description="Recompute stored priority scores")
    parser.add_argument("--user-id", default=None, help="User to process (default: DEFAULT_USER_ID)")
    parser.add_argument("--dry-run", action="store_true", help="Report changes without saving")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(message)s")
    user_id = args.user_id or database.get_default_user_id()

    database.init_db()
    updated, skipped = recompute_priorities(user_id, dry_run=args.dry_run)
    print(f"Updated {updated} items, skipped {skipped} (user: {user_id})")


if __name__ == "__main__":
    main()
