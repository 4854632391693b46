#!/usr/bin/env python3
"""
Delete all favorites and search history. Cached geocodes (location_details/coordinates) are kept.

Run from backend dir:
  python scripts/clear_user_data.py --yes
"""
import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from sqlalchemy import text

from location_finder.db.session import engine
from location_finder.db.tables import USER_TABLE_NAMES


def main():
    parser = argparse.ArgumentParser(description="Clear favorites and search history.")
    parser.add_argument("--yes", action="store_true", help="skip the confirmation prompt")
    args = parser.parse_args()
    if not args.yes:
        answer = input(f"Delete every row in {', '.join(USER_TABLE_NAMES)}? [y/N] ")
        if answer.strip().lower() not in ("y", "yes"):
            print("Aborted.")
            return
    with engine.begin() as conn:
        for table in USER_TABLE_NAMES:
            result = conn.execute(text(f"DELETE FROM {table}"))
            print(f"  {table}: {result.rowcount} rows deleted")
    print("Done.")


if __name__ == "__main__":
    main()
