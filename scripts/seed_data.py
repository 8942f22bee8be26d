#!/usr/bin/env python3
"""
Database Seed Script

Creates the tables and populates empty tables with sample data for
development and testing.

USAGE:
    # From the project root with the virtualenv activated
    python scripts/seed_data.py

    # Recreate everything from scratch
    python scripts/seed_data.py --reset

    # Only create tables
    python scripts/seed_data.py --no-seed
"""

import argparse
import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from library_api.database import SessionLocal, drop_tables  # noqa: E402
from library_api.seed import DEMO_PASSWORD, DEMO_USERNAME, init_db  # noqa: E402


def main() -> None:
    parser = argparse.ArgumentParser(description="Initialize the Library API database.")
    parser.add_argument("--reset", action="store_true", help="drop all tables first")
    parser.add_argument("--no-seed", action="store_true", help="create tables without sample data")
    args = parser.parse_args()

    if args.reset:
        print("Dropping all tables...")
        drop_tables()

    print("Creating tables...")
    init_db(SessionLocal, seed=not args.no_seed)

    if args.no_seed:
        print("Done (no sample data).")
    else:
        print("Done. Sample books are in place.")
        print(f"Demo login: {DEMO_USERNAME} / {DEMO_PASSWORD}")


if __name__ == "__main__":
    main()
