#!/usr/bin/env python3
"""
Prune search history now instead of waiting for the scheduler.
Keeps the newest N rows per user (default HISTORY_RETENTION_PER_USER).

Run from backend dir:
  python scripts/prune_search_history.py --keep 50
"""
import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from location_finder.config import settings
from location_finder.db.session import SessionLocal
from location_finder.services.history_service import prune_history
from location_finder.services.location_store import LocationStore


def main():
    parser = argparse.ArgumentParser(description="Delete old search history rows.")
    parser.add_argument(
        "--keep",
        type=int,
        default=settings.history_retention_per_user,
        help="rows to keep per user (default: %(default)s)",
    )
    args = parser.parse_args()
    if args.keep < 0:
        parser.error("--keep must be >= 0")

    db = SessionLocal()
    try:
        deleted = prune_history(LocationStore(db), args.keep)
        print(f"Done. Deleted {deleted} search history rows (kept newest {args.keep} per user).")
    finally:
        db.close()


if __name__ == "__main__":
    main()
