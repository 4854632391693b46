#!/usr/bin/env python3
"""
Drop public schema and run all migrations from scratch.
Use when the DB is in a mixed state (e.g. some location tables missing, some leftover) and you want a clean slate.
Afterwards checks that every table in db.tables.ALL_TABLE_NAMES exists.

Run from backend dir:
  python scripts/drop_schema_and_migrate.py
"""
import subprocess
import sys
from pathlib import Path

backend_dir = Path(__file__).resolve().parent.parent
if str(backend_dir) not in sys.path:
    sys.path.insert(0, str(backend_dir))

from sqlalchemy import inspect, text

from location_finder.db.session import engine
from location_finder.db.tables import ALL_TABLE_NAMES


def main():
    if engine.dialect.name != "postgresql":
        print(f"Refusing to drop schema on {engine.dialect.name}; this script is for PostgreSQL.")
        sys.exit(1)
    print("Dropping public schema (all tables)...")
    with engine.connect() as conn:
        conn.execute(text("DROP SCHEMA IF EXISTS public CASCADE"))
        conn.execute(text("CREATE SCHEMA public"))
        conn.execute(text("GRANT ALL ON SCHEMA public TO public"))
        conn.commit()
    print("Schema recreated. Running migrations...")
    result = subprocess.run(
        [sys.executable, "-m", "alembic", "upgrade", "head"],
        cwd=backend_dir,
    )
    if result.returncode != 0:
        sys.exit(result.returncode)
    existing = set(inspect(engine).get_table_names())
    missing = sorted(set(ALL_TABLE_NAMES) - existing)
    if missing:
        print(f"Migrations finished but tables are missing: {', '.join(missing)}")
        sys.exit(1)
    print(f"Done. Created {', '.join(ALL_TABLE_NAMES)}.")


if __name__ == "__main__":
    main()
